# closed-set values shared by the ORM columns and the pydantic shapes
import enum


class UserRole(str, enum.Enum):
    student = "student"
    faculty = "faculty"
    admin = "admin"


class JobType(str, enum.Enum):
    full_time = "full-time"
    internship = "internship"
    part_time = "part-time"


class ApplicationStatus(str, enum.Enum):
    pending = "pending"
    accepted = "accepted"
    rejected = "rejected"


class NotificationType(str, enum.Enum):
    job_alert = "job_alert"
    application_update = "application_update"
    general = "general"


def enum_values(enum_cls):
    """Persist the literal values ("full-time"), not the member names."""
    return [member.value for member in enum_cls]
