from typing import Any, Dict, Type

from pydantic import BaseModel

from schemas.applications import ApplicationIn, ApplicationOut, ApplicationReview
from schemas.details import ApplicationWithDetails, JobWithDetails, UserWithStats
from schemas.jobs import JobIn, JobOut
from schemas.notifications import NotificationIn, NotificationOut, NotificationUpdate
from schemas.resumes import ResumeIn, ResumeOut
from schemas.saved_jobs import SavedJobIn, SavedJobOut
from schemas.users import UserIn, UserOut
from schemas.validation import FieldError, InvalidEnumValue, ValidationError, validate

# table name -> insertable shape
INSERT_SHAPES: Dict[str, Type[BaseModel]] = {
    "users": UserIn,
    "jobs": JobIn,
    "applications": ApplicationIn,
    "resumes": ResumeIn,
    "saved_jobs": SavedJobIn,
    "notifications": NotificationIn,
}

# table name -> persisted shape
RECORD_SHAPES: Dict[str, Type[BaseModel]] = {
    "users": UserOut,
    "jobs": JobOut,
    "applications": ApplicationOut,
    "resumes": ResumeOut,
    "saved_jobs": SavedJobOut,
    "notifications": NotificationOut,
}


def validate_insert(entity: str, data: Any) -> BaseModel:
    """Validate a candidate row for ``entity`` before the write path persists it."""
    try:
        shape = INSERT_SHAPES[entity]
    except KeyError:
        raise KeyError(f"unknown entity {entity!r}, expected one of {sorted(INSERT_SHAPES)}") from None
    return validate(shape, data)


__all__ = [
    "ApplicationIn", "ApplicationOut", "ApplicationReview", "ApplicationWithDetails",
    "FieldError", "INSERT_SHAPES", "InvalidEnumValue", "JobIn", "JobOut", "JobWithDetails",
    "NotificationIn", "NotificationOut", "NotificationUpdate", "RECORD_SHAPES",
    "ResumeIn", "ResumeOut", "SavedJobIn", "SavedJobOut", "UserIn", "UserOut",
    "UserWithStats", "ValidationError", "validate", "validate_insert",
]
