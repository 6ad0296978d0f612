# src/resumehub/repository/resume_repo.py
from datetime import datetime
from typing import Any, List, Optional
from pymongo import DESCENDING
from ..db import MongoStore, parse_object_id, to_output
from ..models.resume_models import ACTIVE_FILTER, ARCHIVED_FILTER, ARCHIVE_FIELDS

def to_resume_output(doc: dict) -> Optional[dict]:
    return to_output(doc)

def insert_resume(store: MongoStore, doc: dict) -> Any:
    """
    Inserts a new resume document and returns its generated id.
    """
    return store.resumes_collection().insert_one(doc).inserted_id

def find_active_by_user(store: MongoStore, user_id: str) -> List[dict]:
    """
    Resumes owned by ``user_id`` that are not archived, newest upload first.
    """
    q = {"userId": user_id, **ACTIVE_FILTER}
    return list(store.resumes_collection().find(q).sort("uploadedAt", DESCENDING))

def find_archived_by_user(store: MongoStore, user_id: str) -> List[dict]:
    """
    Archived resumes owned by ``user_id``, most recently archived first.
    """
    q = {"userId": user_id, **ARCHIVED_FILTER}
    return list(store.resumes_collection().find(q).sort("archivedAt", DESCENDING))

def find_all_active(store: MongoStore) -> List[dict]:
    return list(store.resumes_collection().find(dict(ACTIVE_FILTER)).sort("uploadedAt", DESCENDING))

def mark_archived(store: MongoStore, resume_id: Any, archived_at: datetime) -> int:
    """
    Sets the archive markers. Returns the number of matched documents.
    """
    oid = parse_object_id(resume_id)
    if oid is None: return 0
    res = store.resumes_collection().update_one(
        {"_id": oid}, {"$set": {"archived": True, "archivedAt": archived_at}}
    )
    return int(res.matched_count)

def clear_archived(store: MongoStore, resume_id: Any) -> int:
    """
    Removes the archive markers entirely. Returns the number of matched documents.
    """
    oid = parse_object_id(resume_id)
    if oid is None: return 0
    res = store.resumes_collection().update_one(
        {"_id": oid}, {"$unset": {field: "" for field in ARCHIVE_FIELDS}}
    )
    return int(res.matched_count)

def delete_resume(store: MongoStore, resume_id: Any) -> int:
    oid = parse_object_id(resume_id)
    if oid is None: return 0
    res = store.resumes_collection().delete_one({"_id": oid})
    return int(res.deleted_count)

def delete_resumes_by_user(store: MongoStore, user_id: str) -> int:
    res = store.resumes_collection().delete_many({"userId": user_id})
    return int(res.deleted_count)
