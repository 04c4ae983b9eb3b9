# details.py (schemas) - composite shapes returned to the UI
from typing import List, Optional

from schemas.applications import ApplicationOut
from schemas.jobs import JobOut
from schemas.resumes import ResumeOut
from schemas.users import UserOut


class JobWithDetails(JobOut):
    applications: Optional[List[ApplicationOut]] = None
    saved_by_user: Optional[bool] = None
    applied_by_user: Optional[bool] = None


class ApplicationWithDetails(ApplicationOut):
    job: Optional[JobOut] = None
    student: Optional[UserOut] = None
    resume: Optional[ResumeOut] = None


class UserWithStats(UserOut):
    application_count: Optional[int] = None
    saved_jobs_count: Optional[int] = None
    resume_count: Optional[int] = None
