# src/resumehub/services/user_service.py
import logging
from typing import List, Optional

from pymongo.errors import DuplicateKeyError

from ..config import Config
from ..db import MongoStore, utcnow
from ..errors import BadRequestError, ConflictError, ForbiddenError, NotFoundError, UnauthorizedError, store_operation
from ..models.user_models import UserRole
from ..repository import resume_repo, user_repo
from .password_service import PasswordHasher

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


def _new_user_doc(name: str, email: str, hashed_password: str, role: UserRole) -> dict:
    return {
        "name": name,
        "email": email,
        "password": hashed_password,
        "role": role.value,
        "createdAt": utcnow(),
    }


@store_operation("registering user")
def register_user(store: MongoStore, hasher: PasswordHasher, name: str, email: str, password: str) -> dict:
    if not isinstance(email, str):
        raise BadRequestError("Email must be a string")
    if user_repo.find_user_by_email(store, email):
        raise ConflictError("User with this email already exists")

    doc = _new_user_doc(name, email, hasher.hash(password), UserRole.USER)
    try:
        doc["_id"] = user_repo.insert_user(store, doc)
    except DuplicateKeyError:
        # Lost a race with a concurrent registration
        raise ConflictError("User with this email already exists")
    return user_repo.to_user_output(doc)


@store_operation("logging in")
def authenticate(store: MongoStore, hasher: PasswordHasher, email: str, password: str) -> dict:
    user = user_repo.find_user_by_email(store, email)
    if not user or not hasher.verify(password, user.get("password")):
        raise UnauthorizedError(INVALID_CREDENTIALS)
    return user_repo.to_user_output(user)


@store_operation("fetching users")
def list_users(store: MongoStore) -> List[dict]:
    return [user_repo.to_user_output(d) for d in user_repo.find_non_admin_users(store)]


@store_operation("deleting user")
def delete_user_cascade(store: MongoStore, user_id: str) -> int:
    """
    Deletes a non-admin user together with every resume it owns.

    Returns the number of resumes removed. The two deletes are separate store
    calls; a failure between them leaves ownerless resumes behind, which the
    admin listing reports as "Unknown User".
    """
    user = user_repo.find_user_by_id(store, user_id)
    if not user:
        raise NotFoundError("User not found")
    if user.get("role") == UserRole.ADMIN.value:
        raise ForbiddenError("Cannot delete admin users")

    deleted_resumes = resume_repo.delete_resumes_by_user(store, str(user["_id"]))
    logger.info("Deleted %d resumes for user %s", deleted_resumes, user_id)

    if user_repo.delete_user(store, user["_id"]) == 0:
        raise NotFoundError("User not found")
    return deleted_resumes


@store_operation("checking admin status")
def admin_status(store: MongoStore) -> dict:
    exists = user_repo.find_admin(store) is not None
    return {
        "adminExists": exists,
        "message": "Admin user exists" if exists else "No admin user found",
    }


@store_operation("creating admin user")
def create_admin(
    store: MongoStore,
    hasher: PasswordHasher,
    email: Optional[str] = None,
    password: Optional[str] = None,
    name: Optional[str] = None,
) -> dict:
    """Creates the admin account unless one already exists; blanks fall back to defaults."""
    if user_repo.find_admin(store):
        raise ConflictError("Admin user already exists")

    email = email or Config.DEFAULT_ADMIN_EMAIL
    doc = _new_user_doc(
        name or Config.DEFAULT_ADMIN_NAME,
        email,
        hasher.hash(password or Config.DEFAULT_ADMIN_PASSWORD),
        UserRole.ADMIN,
    )
    try:
        admin_id = user_repo.insert_user(store, doc)
    except DuplicateKeyError:
        raise ConflictError("User with this email already exists")
    logger.info("Admin user created with ID: %s", admin_id)
    return {"message": "Admin user created successfully", "id": str(admin_id), "email": email}


def ensure_admin_bootstrap(store: MongoStore, hasher: PasswordHasher) -> Optional[str]:
    """
    Creates the default admin on first run. Returns the new admin id, or None
    when an admin already existed or the check failed. Never raises.
    """
    try:
        if user_repo.find_admin(store):
            logger.info("Admin user already exists")
            return None
        doc = _new_user_doc(
            Config.DEFAULT_ADMIN_NAME,
            Config.DEFAULT_ADMIN_EMAIL,
            hasher.hash(Config.DEFAULT_ADMIN_PASSWORD),
            UserRole.ADMIN,
        )
        admin_id = user_repo.insert_user(store, doc)
        logger.info("Admin user created successfully with ID: %s", admin_id)
        return str(admin_id)
    except Exception:
        logger.exception("Admin initialization error")
        return None
