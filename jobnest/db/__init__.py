"""Database package."""

from jobnest.db.base import Base, get_db, init_db
from jobnest.db.tables import (
    APPLICATION_STATUSES,
    JOB_TYPES,
    MESSAGE_STATUSES,
    USER_ROLES,
    Application,
    Job,
    Message,
    SavedJob,
    User,
)

__all__ = [
    "Base",
    "get_db",
    "init_db",
    "User",
    "Job",
    "Application",
    "SavedJob",
    "Message",
    "USER_ROLES",
    "JOB_TYPES",
    "APPLICATION_STATUSES",
    "MESSAGE_STATUSES",
]
