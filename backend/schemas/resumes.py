# resumes.py (schemas)
from datetime import datetime
from typing import Optional

from pydantic import ConfigDict

from schemas.base import PortalModel


class ResumeIn(PortalModel):
    student_id: int
    file_name: str
    file_path: str
    # several defaults per student pass here; the writer has to clear the old one
    is_default: Optional[bool] = False


class ResumeOut(ResumeIn):
    id: int
    uploaded_at: datetime
    model_config = ConfigDict(from_attributes=True)
