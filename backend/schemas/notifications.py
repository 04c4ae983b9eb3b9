# notifications.py (schemas)
from datetime import datetime
from typing import Optional

from pydantic import ConfigDict

from enums import NotificationType
from schemas.base import PortalModel


class NotificationIn(PortalModel):
    user_id: int
    title: str
    message: str
    type: NotificationType
    is_read: Optional[bool] = False


class NotificationUpdate(PortalModel):   # read receipt
    is_read: bool


class NotificationOut(NotificationIn):
    id: int
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)
