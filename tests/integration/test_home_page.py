"""
Homepage integration tests
"""
import pytest
from fastapi.testclient import TestClient
from config.settings import Settings
from src.api.main import create_app, load_templates
from src.services.event_logger import InMemoryEventSink
from src.utils.exceptions import TemplateRenderError


def test_home_page(client):
    """Homepage renders company, employees and news"""
    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    html = response.text
    assert "Dunder Mifflin Paper Company" in html
    assert "Infinity 2.0" in html
    assert "Michael Scott" in html
    assert "Pam Beesly" in html
    assert "Q4 Sales Records Broken Again!" in html
    assert 'value="scranton"' in html


def test_home_page_without_chat(disabled_client):
    """The chat widget is hidden when the feature is off"""
    response = disabled_client.get("/")

    assert response.status_code == 200
    assert "chat-form" not in response.text


def test_static_files(client):
    """Static assets are served"""
    response = client.get("/static/css/style.css")
    assert response.status_code == 200


def test_missing_template_directory_is_fatal(tmp_path):
    """Startup fails without a template set"""
    with pytest.raises(TemplateRenderError):
        load_templates(str(tmp_path / "missing"))


def test_broken_template_is_fatal(tmp_path):
    """Startup fails when index.html does not parse"""
    (tmp_path / "index.html").write_text("{% for employee in %}", encoding="utf-8")
    with pytest.raises(TemplateRenderError):
        create_app(Settings(template_dir=str(tmp_path)), event_sink=InMemoryEventSink())


def test_render_error_returns_500(tmp_path):
    """A render-time failure is a server error"""
    (tmp_path / "index.html").write_text("{{ company.missing.deeper }}", encoding="utf-8")
    app = create_app(Settings(template_dir=str(tmp_path)), event_sink=InMemoryEventSink())
    client = TestClient(app)

    response = client.get("/")

    assert response.status_code == 500
    assert response.json()["error"]["code"] == "TEMPLATE_RENDER_ERROR"
