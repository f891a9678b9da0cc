"""
ChatSession model and session table unit tests
"""
import pytest
from datetime import datetime, timezone
from src.models.chat_session import ChatSession
from src.services.session_manager import SessionTable
from src.utils.constants import SessionStatus, STATUS_TRANSITIONS
from src.utils.exceptions import InvalidStatusTransitionError, ValidationError


def make_session(session_id: str = "sess_0123456789") -> ChatSession:
    return ChatSession(id=session_id, office_id="scranton")


def test_new_session_defaults():
    """A new session is pending with no messages"""
    session = make_session()
    assert session.status == SessionStatus.PENDING
    assert session.messages == []
    assert session.ended_at is None
    assert session.created_at.tzinfo is not None


@pytest.mark.parametrize("target", [SessionStatus.CONNECTED, SessionStatus.WAITING, SessionStatus.FAILED])
def test_pending_transitions(target):
    """Pending may move to connected, waiting or failed"""
    session = make_session()
    session.transition_to(target)
    assert session.status == target


def test_pending_cannot_end():
    """Pending cannot jump to ended"""
    with pytest.raises(InvalidStatusTransitionError):
        make_session().transition_to(SessionStatus.ENDED)


def test_terminal_statuses_have_no_transitions():
    """Nothing leaves ended or failed"""
    assert STATUS_TRANSITIONS[SessionStatus.ENDED] == frozenset()
    assert STATUS_TRANSITIONS[SessionStatus.FAILED] == frozenset()


def test_every_status_has_transition_entry():
    """The transition table covers every status"""
    assert set(STATUS_TRANSITIONS) == set(SessionStatus)


def test_end_connected_session():
    """Ending stamps ended_at"""
    session = make_session()
    session.transition_to(SessionStatus.CONNECTED)
    session.end()
    assert session.status == SessionStatus.ENDED
    assert session.ended_at is not None


def test_end_twice_restamps():
    """Ending twice keeps ended status and moves ended_at"""
    session = make_session()
    session.transition_to(SessionStatus.WAITING)
    first = datetime(2024, 1, 1, tzinfo=timezone.utc)
    second = datetime(2024, 1, 2, tzinfo=timezone.utc)
    session.end(first)
    session.end(second)
    assert session.status == SessionStatus.ENDED
    assert session.ended_at == second


def test_ended_cannot_reconnect():
    """No transition out of ended"""
    session = make_session()
    session.transition_to(SessionStatus.CONNECTED)
    session.end()
    with pytest.raises(InvalidStatusTransitionError):
        session.transition_to(SessionStatus.CONNECTED)


def test_public_dict():
    """Public view of a session"""
    session = ChatSession(id="sess_0123456789", office_id="scranton", customer_name="Jan")
    data = session.to_public_dict()
    assert data["session_id"] == "sess_0123456789"
    assert data["status"] == "pending"
    assert data["customer_name"] == "Jan"
    assert data["ended_at"] is None
    assert data["message_count"] == 0


def test_table_insert_and_get():
    """Insert and look up a session"""
    table = SessionTable()
    session = make_session(table.new_session_id())
    table.insert(session)
    assert len(table) == 1
    assert table.get(session.id) is session


def test_table_rejects_duplicate_id():
    """Duplicate ids are refused"""
    table = SessionTable()
    table.insert(make_session())
    with pytest.raises(ValidationError):
        table.insert(make_session())
    assert len(table) == 1


def test_table_get_unknown():
    """Unknown ids return None"""
    table = SessionTable()
    assert table.get("sess_doesnotexist") is None
    assert table.get("not-a-session") is None


def test_table_get_with_custom_id_format():
    """Sessions stored under a custom id format can be looked up"""
    table = SessionTable(id_factory=lambda: "chat-1")
    session = make_session(table.new_session_id())
    table.insert(session)
    assert "chat-1" in table
    assert table.get("chat-1") is session


def test_table_regenerates_colliding_id():
    """A colliding generated id is replaced"""
    ids = iter(["sess_aaaaaaaaaa", "sess_aaaaaaaaaa", "sess_bbbbbbbbbb"])
    table = SessionTable(id_factory=lambda: next(ids))
    table.insert(make_session(table.new_session_id()))
    assert table.new_session_id() == "sess_bbbbbbbbbb"


def test_snapshot_returns_copies():
    """Snapshot copies do not alias stored sessions"""
    table = SessionTable()
    table.insert(make_session())
    copy = table.snapshot()[0]
    copy.customer_name = "Changed"
    assert table.get("sess_0123456789").customer_name is None
