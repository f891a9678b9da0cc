"""
Live chat service: matching, termination and directory listing
"""
from typing import Optional, Dict, Any, List
from collections import Counter
from src.models.chat_session import ChatSession
from src.models.event_log import EventLogRecord
from src.models.office import Office
from src.services.session_manager import ChatState
from src.services.event_logger import EventLogger
from src.utils.constants import (
    SessionStatus,
    EventKind,
    MESSAGE_CONNECTED,
    MESSAGE_WAITING,
    MESSAGE_ENDED,
)
from src.utils.exceptions import (
    FeatureDisabledError,
    OfficeNotFoundError,
    SessionNotFoundError,
    AdminModeDisabledError,
)
from src.utils.helpers import utc_now
from src.utils.logger import get_logger

logger = get_logger(__name__)


class ChatService:
    """
    Chat operations over a shared ChatState.

    Every operation checks the feature flag before touching the lock. Event
    records are emitted after the lock is released.
    """

    def __init__(
        self,
        state: ChatState,
        event_logger: EventLogger,
        enabled: bool = True,
        admin_mode: bool = False
    ):
        self.state = state
        self.event_logger = event_logger
        self.enabled = enabled
        self.admin_mode = admin_mode

    def _ensure_enabled(self) -> None:
        if not self.enabled:
            raise FeatureDisabledError("chat")

    def list_offices(self) -> List[Office]:
        """
        All offices in seed order

        Raises:
            FeatureDisabledError: chat is turned off
        """
        self._ensure_enabled()
        with self.state.locked() as state:
            return state.directory.list_offices()

    def start_chat(self, office_id: str, customer_name: Optional[str] = None) -> Dict[str, Any]:
        """
        Match a customer with the first available salesperson at an office

        Args:
            office_id: requested office
            customer_name: optional customer display name

        Returns:
            {"session_id", "status", "message", "salesperson"}; salesperson is
            None when nobody was available and the session is waiting

        Raises:
            FeatureDisabledError: chat is turned off
            OfficeNotFoundError: unknown office; nothing is stored or logged
        """
        self._ensure_enabled()

        with self.state.locked() as state:
            office = state.directory.get_office(office_id)
            if office is None:
                raise OfficeNotFoundError(office_id)

            salesperson = state.directory.find_available_salesperson(office_id)

            session = ChatSession(
                id=state.sessions.new_session_id(),
                office_id=office.id,
                customer_name=customer_name,
                salesperson_id=salesperson.id if salesperson else None,
            )
            if salesperson is not None:
                session.transition_to(SessionStatus.CONNECTED)
                message = MESSAGE_CONNECTED.format(
                    name=salesperson.name, title=salesperson.title, office=office.name
                )
            else:
                session.transition_to(SessionStatus.WAITING)
                message = MESSAGE_WAITING.format(office=office.name)

            state.sessions.insert(session)
            session_id = session.id
            status = session.status

        logger.info(f"Chat started: {session_id} office={office.id} status={status.value}")
        self.event_logger.emit(EventLogRecord(
            event=EventKind.CHAT_STARTED,
            session_id=session_id,
            office_id=office.id,
            salesperson_id=salesperson.id if salesperson else None,
            details=message,
        ))

        return {
            "session_id": session_id,
            "status": status.value,
            "message": message,
            "salesperson": salesperson,
        }

    def end_chat(self, session_id: str) -> str:
        """
        End a chat session

        Ending an already ended session succeeds again, re-stamps the end time
        and emits another event.

        Args:
            session_id: session identifier

        Returns:
            acknowledgment message

        Raises:
            FeatureDisabledError: chat is turned off
            SessionNotFoundError: unknown session; nothing is mutated
        """
        self._ensure_enabled()

        with self.state.locked() as state:
            session = state.sessions.get(session_id)
            if session is None:
                raise SessionNotFoundError(session_id)
            session.end(utc_now())
            office_id = session.office_id
            salesperson_id = session.salesperson_id

        logger.info(f"Chat ended: {session_id}")
        self.event_logger.emit(EventLogRecord(
            event=EventKind.CHAT_ENDED,
            session_id=session_id,
            office_id=office_id,
            salesperson_id=salesperson_id,
            details=MESSAGE_ENDED,
        ))
        return MESSAGE_ENDED

    def get_session(self, session_id: str) -> ChatSession:
        """
        Copy of one session

        Raises:
            FeatureDisabledError: chat is turned off
            SessionNotFoundError: unknown session
        """
        self._ensure_enabled()
        with self.state.locked() as state:
            session = state.sessions.get(session_id)
            if session is None:
                raise SessionNotFoundError(session_id)
            return session.model_copy(deep=True)

    def list_sessions(self) -> Dict[str, Any]:
        """
        All sessions with per-status counts. Admin mode only.

        Raises:
            AdminModeDisabledError: admin mode is off
        """
        if not self.admin_mode:
            raise AdminModeDisabledError()
        with self.state.locked() as state:
            sessions = state.sessions.snapshot()

        counts = Counter(session.status.value for session in sessions)
        return {
            "total": len(sessions),
            "by_status": {status.value: counts.get(status.value, 0) for status in SessionStatus},
            "sessions": [session.to_public_dict() for session in sessions],
        }
