"""
ChatSession and ChatMessage models
"""
from typing import Optional, List, Dict, Any
from datetime import datetime
from pydantic import BaseModel, Field
from src.utils.constants import SessionStatus, STATUS_TRANSITIONS
from src.utils.exceptions import InvalidStatusTransitionError
from src.utils.helpers import utc_now, generate_message_id


class ChatMessage(BaseModel):
    """A single chat message. No operation appends these yet."""
    id: str = Field(default_factory=generate_message_id)
    sender: str
    content: str
    timestamp: datetime = Field(default_factory=utc_now)


class ChatSession(BaseModel):
    """One customer-to-salesperson chat"""
    id: str
    office_id: str
    customer_name: Optional[str] = None
    salesperson_id: Optional[str] = None
    status: SessionStatus = SessionStatus.PENDING
    created_at: datetime = Field(default_factory=utc_now)
    ended_at: Optional[datetime] = None
    messages: List[ChatMessage] = Field(default_factory=list)

    def can_transition_to(self, status: SessionStatus) -> bool:
        """
        Check whether a status change is allowed

        Args:
            status: target status

        Returns:
            True if the transition table allows it
        """
        return status in STATUS_TRANSITIONS[self.status]

    def transition_to(self, status: SessionStatus) -> None:
        """
        Change status along an allowed transition

        Args:
            status: target status

        Raises:
            InvalidStatusTransitionError: transition not allowed
        """
        if not self.can_transition_to(status):
            raise InvalidStatusTransitionError(self.status.value, status.value)
        self.status = status

    def end(self, ended_at: Optional[datetime] = None) -> None:
        """
        Mark the session ended and stamp the end time.

        Ending an already ended session only re-stamps ended_at.
        """
        if self.status != SessionStatus.ENDED:
            self.transition_to(SessionStatus.ENDED)
        self.ended_at = ended_at or utc_now()

    def to_public_dict(self) -> Dict[str, Any]:
        """Session view returned by the status and admin endpoints"""
        return {
            "session_id": self.id,
            "status": self.status.value,
            "office_id": self.office_id,
            "salesperson_id": self.salesperson_id,
            "customer_name": self.customer_name,
            "created_at": self.created_at.isoformat(),
            "ended_at": self.ended_at.isoformat() if self.ended_at else None,
            "message_count": len(self.messages),
        }
