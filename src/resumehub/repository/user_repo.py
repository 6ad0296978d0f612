# src/resumehub/repository/user_repo.py
from typing import Any, Dict, List, Optional
from ..db import MongoStore, parse_object_id, to_output
from ..models.user_models import UserRole

def to_user_output(doc: dict) -> Optional[dict]:
    return to_output(doc, exclude=("password",))

def find_user_by_email(store: MongoStore, email: str) -> Optional[dict]:
    # Exact, case-sensitive match; mirrors the unique index on email.
    # Anything but a plain string (e.g. an operator document) matches nobody
    if not isinstance(email, str): return None
    return store.users_collection().find_one({"email": email})

def find_user_by_id(store: MongoStore, user_id: Any) -> Optional[dict]:
    oid = parse_object_id(user_id)
    if oid is None: return None
    return store.users_collection().find_one({"_id": oid})

def find_admin(store: MongoStore) -> Optional[dict]:
    return store.users_collection().find_one({"role": UserRole.ADMIN.value}, {"password": 0})

def find_non_admin_users(store: MongoStore) -> List[dict]:
    return list(store.users_collection().find({"role": {"$ne": UserRole.ADMIN.value}}, {"password": 0}))

def find_owner_index(store: MongoStore) -> Dict[str, dict]:
    """Maps the string form of every user id to its name and email."""
    cursor = store.users_collection().find({}, {"name": 1, "email": 1})
    return {str(doc["_id"]): doc for doc in cursor}

def insert_user(store: MongoStore, doc: dict) -> Any:
    return store.users_collection().insert_one(doc).inserted_id

def delete_user(store: MongoStore, user_id: Any) -> int:
    oid = parse_object_id(user_id)
    if oid is None: return 0
    res = store.users_collection().delete_one({"_id": oid})
    return int(res.deleted_count)
