"""
Pytest configuration and fixtures
"""
import pytest
from fastapi.testclient import TestClient
from config.settings import Settings
from src.api.main import create_app
from src.services.directory_store import DirectoryStore
from src.services.session_manager import ChatState
from src.services.event_logger import EventLogger, InMemoryEventSink
from src.services.chat_service import ChatService


@pytest.fixture
def event_sink():
    """In-memory event sink fixture"""
    return InMemoryEventSink()


@pytest.fixture
def directory():
    """Seeded directory store fixture"""
    return DirectoryStore.from_seed()


@pytest.fixture
def chat_state(directory):
    """Empty chat state fixture"""
    return ChatState(directory)


@pytest.fixture
def chat_service(chat_state, event_sink):
    """Chat service fixture with chat enabled"""
    return ChatService(chat_state, EventLogger(event_sink), enabled=True, admin_mode=True)


@pytest.fixture
def make_client(event_sink):
    """Factory building a test client for the given settings overrides"""
    def _make_client(**overrides) -> TestClient:
        app = create_app(Settings(**overrides), event_sink=event_sink)
        return TestClient(app)
    return _make_client


@pytest.fixture
def client(make_client):
    """Test client fixture (chat enabled, admin mode off)"""
    return make_client(chat_enabled=True, admin_mode=False)


@pytest.fixture
def disabled_client(make_client):
    """Test client fixture with the chat feature turned off"""
    return make_client(chat_enabled=False)


@pytest.fixture
def admin_client(make_client):
    """Test client fixture with admin mode on"""
    return make_client(chat_enabled=True, admin_mode=True)
