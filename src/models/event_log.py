"""
EventLogRecord model
"""
from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field
from src.utils.constants import EventKind
from src.utils.helpers import utc_now


class EventLogRecord(BaseModel):
    """Chat lifecycle event; write-once"""
    event: EventKind
    session_id: str
    office_id: str
    salesperson_id: Optional[str] = None
    timestamp: datetime = Field(default_factory=utc_now)
    details: str = ""

    model_config = {"frozen": True}
