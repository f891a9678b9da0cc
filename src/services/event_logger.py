"""
Chat event logging module

Records are delivered to a pluggable sink. Delivery is best effort: a sink
failure is logged and swallowed, never raised to the caller.
"""
import sys
import threading
from abc import ABC, abstractmethod
from typing import List, Optional, TextIO
from src.models.event_log import EventLogRecord
from src.utils.constants import EVENT_SINK_STDOUT, EVENT_SINK_LOGGER
from src.utils.logger import get_logger

logger = get_logger(__name__)


class EventSink(ABC):
    """Destination for event log records"""

    @abstractmethod
    def write(self, record: EventLogRecord) -> None:
        """Deliver one record"""


class StreamEventSink(EventSink):
    """Writes one JSON line per record to a text stream (stdout by default)"""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    def write(self, record: EventLogRecord) -> None:
        stream = self._stream or sys.stdout
        stream.write(record.model_dump_json() + "\n")
        stream.flush()


class LoggingEventSink(EventSink):
    """Routes records through the logging module"""

    def __init__(self, logger_name: str = "src.events"):
        self._logger = get_logger(logger_name)

    def write(self, record: EventLogRecord) -> None:
        self._logger.info(record.model_dump_json())


class InMemoryEventSink(EventSink):
    """Keeps records in a list"""

    def __init__(self):
        self.records: List[EventLogRecord] = []
        self._lock = threading.Lock()

    def write(self, record: EventLogRecord) -> None:
        with self._lock:
            self.records.append(record)


class EventLogger:
    """Fire-and-forget front end for an EventSink"""

    def __init__(self, sink: EventSink):
        self.sink = sink

    def emit(self, record: EventLogRecord) -> None:
        """
        Send a record to the sink

        Args:
            record: event record
        """
        try:
            self.sink.write(record)
        except Exception as e:
            logger.error(f"Event log emission failed ({record.event.value}, {record.session_id}): {str(e)}")


def create_event_sink(kind: str) -> EventSink:
    """
    Build a sink from its configured name

    Args:
        kind: "stdout" or "logger"

    Returns:
        EventSink instance

    Raises:
        ValueError: unknown sink name
    """
    if kind == EVENT_SINK_STDOUT:
        return StreamEventSink()
    if kind == EVENT_SINK_LOGGER:
        return LoggingEventSink()
    raise ValueError(f"Unknown event log sink: {kind}")
