# saved_jobs.py (schemas)
from datetime import datetime

from pydantic import ConfigDict

from schemas.base import PortalModel


class SavedJobIn(PortalModel):
    student_id: int
    job_id: int


class SavedJobOut(SavedJobIn):
    id: int
    saved_at: datetime
    model_config = ConfigDict(from_attributes=True)
