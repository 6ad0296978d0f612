# src/resumehub/db.py
import logging
from datetime import datetime
from typing import Any, Optional

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING, MongoClient

logger = logging.getLogger(__name__)


class MongoStore:
    """Single long-lived handle on the ResumeHub database.

    Built once at process start and handed to every repository call. Used as a
    context manager it closes the underlying client on exit.
    """

    def __init__(self, client: MongoClient, db_name: str):
        self.client = client
        self.db = client[db_name]

    @classmethod
    def connect(cls, uri: str, db_name: str) -> "MongoStore":
        client = MongoClient(uri)
        store = cls(client, db_name)
        logger.info("Connected to MongoDB database '%s'", db_name)
        store.ensure_indexes()
        return store

    # --- Collection Helpers ---
    def users_collection(self):
        return self.db["users"]

    def resumes_collection(self):
        return self.db["resumes"]

    def ensure_indexes(self) -> None:
        self.users_collection().create_index([("email", ASCENDING)], unique=True)
        self.resumes_collection().create_index([("userId", ASCENDING)])
        logger.info("Indexes ensured on 'users.email' (unique) and 'resumes.userId'")

    def close(self) -> None:
        self.client.close()
        logger.info("MongoDB connection closed")

    def __enter__(self) -> "MongoStore":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


# --- Identifiers ---
def parse_object_id(value: Any) -> Optional[ObjectId]:
    """Returns an ObjectId for ``value``, or None when it cannot be one."""
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(str(value))
    except (InvalidId, TypeError):
        return None


def utcnow() -> datetime:
    return datetime.utcnow()


# --- Output Formatting ---
def _format_value(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, ObjectId):
        return str(value)
    return value


def to_output(doc: Optional[dict], exclude: tuple = ()) -> Optional[dict]:
    """Maps ``_id`` to a string ``id`` and renders values as JSON-safe types."""
    if not doc:
        return None
    out = {k: _format_value(v) for k, v in doc.items() if k != "_id" and k not in exclude}
    if "_id" in doc:
        out["id"] = str(doc["_id"])
    return out
