"""Domain models"""

from src.models.office import Office, Salesperson
from src.models.chat_session import ChatSession, ChatMessage
from src.models.event_log import EventLogRecord
from src.models.site import Employee, NewsItem

__all__ = [
    "Office",
    "Salesperson",
    "ChatSession",
    "ChatMessage",
    "EventLogRecord",
    "Employee",
    "NewsItem",
]
