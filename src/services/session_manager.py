"""
In-memory chat state: session table and directory behind one lock
"""
import threading
from contextlib import contextmanager
from typing import Optional, Dict, List, Callable, Iterator
from src.models.chat_session import ChatSession
from src.services.directory_store import DirectoryStore
from src.utils.helpers import generate_session_id
from src.utils.exceptions import ValidationError
from src.utils.logger import get_logger

logger = get_logger(__name__)


class SessionTable:
    """
    session_id -> ChatSession map.

    The table owns its records. Not thread safe on its own; ChatState guards
    it. Sessions are never removed, so the table grows without bound.
    """

    def __init__(self, id_factory: Optional[Callable[[], str]] = None):
        self._sessions: Dict[str, ChatSession] = {}
        self._id_factory = id_factory or generate_session_id

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._sessions

    def new_session_id(self) -> str:
        """Generate an id not present in the table"""
        session_id = self._id_factory()
        while session_id in self._sessions:
            logger.warning(f"Session id collision, regenerating: {session_id}")
            session_id = self._id_factory()
        return session_id

    def insert(self, session: ChatSession) -> None:
        """
        Store a new session

        Args:
            session: session to store

        Raises:
            ValidationError: the id is already taken
        """
        if session.id in self._sessions:
            raise ValidationError(f"duplicate session id: {session.id}", "session_id")
        self._sessions[session.id] = session

    def get(self, session_id: str) -> Optional[ChatSession]:
        """Stored session (not a copy) or None"""
        return self._sessions.get(session_id)

    def snapshot(self) -> List[ChatSession]:
        """Copies of all sessions in creation order"""
        return [session.model_copy(deep=True) for session in self._sessions.values()]


class ChatState:
    """
    Mutable chat state shared by request handlers.

    One exclusive lock guards the session table and directory reads as a
    single unit. Created by the application factory and passed to ChatService.
    """

    def __init__(self, directory: DirectoryStore, sessions: Optional[SessionTable] = None):
        self.directory = directory
        self.sessions = sessions if sessions is not None else SessionTable()
        self._lock = threading.Lock()

    @contextmanager
    def locked(self) -> Iterator["ChatState"]:
        """Hold the state lock for the duration of the block"""
        with self._lock:
            yield self

    def session_count(self) -> int:
        with self._lock:
            return len(self.sessions)

