# jobs.py (schemas)
from datetime import datetime
from typing import List, Optional

from pydantic import ConfigDict

from enums import JobType
from schemas.base import PortalModel


class JobIn(PortalModel):   # insertable: no id / created_at / posted_by
    title: str
    company: str
    location: str
    type: JobType
    experience: Optional[str] = None
    salary: Optional[str] = None
    description: str
    requirements: Optional[List[str]] = None
    skills: Optional[List[str]] = None
    eligibility: Optional[str] = None
    deadline: datetime
    is_active: Optional[bool] = True


class JobOut(JobIn):
    id: int
    posted_by: Optional[int] = None
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)
