"""
Constants module
"""
from enum import Enum
from typing import Dict, FrozenSet


# ============================================================================
# Session status
# ============================================================================

class SessionStatus(str, Enum):
    """Chat session status"""
    PENDING = "pending"
    CONNECTED = "connected"
    WAITING = "waiting"
    ENDED = "ended"
    FAILED = "failed"


# Allowed status transitions. ENDED and FAILED are terminal.
STATUS_TRANSITIONS: Dict[SessionStatus, FrozenSet[SessionStatus]] = {
    SessionStatus.PENDING: frozenset({
        SessionStatus.CONNECTED,
        SessionStatus.WAITING,
        SessionStatus.FAILED,
    }),
    SessionStatus.CONNECTED: frozenset({SessionStatus.ENDED}),
    SessionStatus.WAITING: frozenset({SessionStatus.ENDED}),
    SessionStatus.ENDED: frozenset(),
    SessionStatus.FAILED: frozenset(),
}


# ============================================================================
# Event log
# ============================================================================

class EventKind(str, Enum):
    """Event log record kinds"""
    CHAT_STARTED = "chat_started"
    CHAT_ENDED = "chat_ended"


EVENT_SINK_STDOUT = "stdout"
EVENT_SINK_LOGGER = "logger"


# ============================================================================
# Error codes
# ============================================================================

ERROR_FEATURE_DISABLED = "FEATURE_DISABLED"
ERROR_OFFICE_NOT_FOUND = "OFFICE_NOT_FOUND"
ERROR_SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
ERROR_ADMIN_MODE_DISABLED = "ADMIN_MODE_DISABLED"
ERROR_INVALID_TRANSITION = "INVALID_STATUS_TRANSITION"
ERROR_VALIDATION = "VALIDATION_ERROR"
ERROR_TEMPLATE_RENDER = "TEMPLATE_RENDER_ERROR"
ERROR_INTERNAL = "INTERNAL_SERVER_ERROR"


# ============================================================================
# Chat messages shown to customers
# ============================================================================

MESSAGE_CONNECTED = "Connected with {name} ({title}) at {office}."
MESSAGE_WAITING = "All salespeople at {office} are currently busy. Please wait for the next available representative."
MESSAGE_ENDED = "Chat session ended"
