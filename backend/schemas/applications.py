# applications.py (schemas)
from datetime import datetime
from typing import Optional

from pydantic import ConfigDict

from enums import ApplicationStatus
from schemas.base import PortalModel


class ApplicationIn(PortalModel):   # insertable: status is always assigned server side
    student_id: int
    job_id: int
    resume_id: Optional[int] = None
    cover_letter: Optional[str] = None
    motivation: Optional[str] = None
    rejection_reason: Optional[str] = None


class ApplicationReview(PortalModel):   # the review decision, the only post-create change
    status: ApplicationStatus
    rejection_reason: Optional[str] = None


class ApplicationOut(ApplicationIn):
    id: int
    status: ApplicationStatus = ApplicationStatus.pending
    applied_at: datetime
    model_config = ConfigDict(from_attributes=True)
