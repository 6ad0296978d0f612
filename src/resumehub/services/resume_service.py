# src/resumehub/services/resume_service.py
import logging
from typing import Any, List

from ..db import MongoStore, utcnow
from ..errors import NotFoundError, store_operation
from ..repository import resume_repo, user_repo

logger = logging.getLogger(__name__)

UNKNOWN_USER_NAME = "Unknown User"
UNKNOWN_USER_EMAIL = "Unknown Email"


@store_operation("saving resume")
def upload_resume(store: MongoStore, user_id: str, file_name: str, description: str, file_content: Any) -> dict:
    # The owner reference is stored as given and never checked
    doc = {
        "userId": user_id,
        "fileName": file_name,
        "description": description,
        "fileContent": file_content,
        "uploadedAt": utcnow(),
    }
    doc["_id"] = resume_repo.insert_resume(store, doc)
    return resume_repo.to_resume_output(doc)


@store_operation("archiving resume")
def archive_resume(store: MongoStore, resume_id: str) -> None:
    """Moves a resume to the recycle bin. Re-archiving resets ``archivedAt``."""
    if resume_repo.mark_archived(store, resume_id, utcnow()) == 0:
        raise NotFoundError("Resume not found")


@store_operation("restoring resume")
def restore_resume(store: MongoStore, resume_id: str) -> None:
    """Drops both archive markers; a never-archived resume is left as is."""
    if resume_repo.clear_archived(store, resume_id) == 0:
        raise NotFoundError("Resume not found")


@store_operation("deleting resume")
def delete_resume_permanently(store: MongoStore, resume_id: str) -> None:
    if resume_repo.delete_resume(store, resume_id) == 0:
        raise NotFoundError("Resume not found")


@store_operation("fetching resumes")
def list_active_resumes(store: MongoStore, user_id: str) -> List[dict]:
    return [resume_repo.to_resume_output(d) for d in resume_repo.find_active_by_user(store, user_id)]


@store_operation("fetching archived resumes")
def list_archived_resumes(store: MongoStore, user_id: str) -> List[dict]:
    return [resume_repo.to_resume_output(d) for d in resume_repo.find_archived_by_user(store, user_id)]


@store_operation("fetching all resumes")
def list_active_resumes_with_owners(store: MongoStore) -> List[dict]:
    """
    Every non-archived resume joined with its owner's name and email.

    Owners that no longer exist are reported with sentinel values instead of
    failing the whole listing.
    """
    resumes = resume_repo.find_all_active(store)
    owners = user_repo.find_owner_index(store)
    unknown = {"name": UNKNOWN_USER_NAME, "email": UNKNOWN_USER_EMAIL}

    joined = []
    for doc in resumes:
        owner = owners.get(str(doc.get("userId")), unknown)
        out = resume_repo.to_resume_output(doc)
        out["userName"] = owner.get("name")
        out["userEmail"] = owner.get("email")
        joined.append(out)
    return joined
