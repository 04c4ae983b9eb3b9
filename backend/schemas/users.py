# users.py (schemas)
from datetime import datetime
from typing import List, Optional

from pydantic import ConfigDict, Field

from enums import UserRole
from schemas.base import PortalModel


class UserIn(PortalModel):   # insertable: no id / created_at
    email: str   # any text; uniqueness is a database constraint
    password: str = Field(repr=False)
    first_name: str
    last_name: str
    phone: Optional[str] = None
    role: UserRole
    department: Optional[str] = None
    roll_number: Optional[str] = None
    cgpa: Optional[str] = None
    skills: Optional[List[str]] = None


class UserOut(UserIn):
    id: int
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)
