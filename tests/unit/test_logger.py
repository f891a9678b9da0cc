"""
Logging setup unit tests
"""
import logging
from config.settings import Settings
from src.api.main import create_app
from src.utils import logger as logger_module
from src.utils.logger import setup_logging, PROJECT_ROOT


def test_log_level_overrides_yaml_level():
    """log_level wins over the level written in logging.yaml"""
    try:
        setup_logging("config/logging.yaml", "DEBUG")
        assert logging.getLogger("src.services.chat_service").getEffectiveLevel() == logging.DEBUG
        assert logging.getLogger().level == logging.DEBUG
    finally:
        setup_logging("config/logging.yaml", "INFO")

    assert logging.getLogger("src.services.chat_service").getEffectiveLevel() == logging.INFO


def test_create_app_applies_log_level(event_sink):
    """Settings.log_level reaches the application loggers"""
    try:
        create_app(Settings(log_level="WARNING"), event_sink=event_sink)
        assert logging.getLogger("src.services.chat_service").getEffectiveLevel() == logging.WARNING
    finally:
        setup_logging("config/logging.yaml", "INFO")


def test_relative_config_path_uses_project_root(tmp_path, monkeypatch):
    """The YAML file is found even when started from another directory"""
    loaded = []
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(logger_module.logging.config, "dictConfig", loaded.append)

    setup_logging("config/logging.yaml", "INFO")

    assert (PROJECT_ROOT / "config" / "logging.yaml").exists()
    assert len(loaded) == 1
    assert "console" in loaded[0]["handlers"]
