# src/resumehub/models/resume_models.py

ACTIVE_FILTER = {"archived": {"$ne": True}}
ARCHIVED_FILTER = {"archived": True}

# Both markers are removed together on restore
ARCHIVE_FIELDS = ("archived", "archivedAt")
