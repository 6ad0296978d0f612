# src/resumehub/models/user_models.py

from enum import Enum

class UserRole(Enum):
    USER = "user"
    ADMIN = "admin"
