"""
FastAPI application main module
"""
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError
from pathlib import Path
from config.settings import Settings, settings as default_settings
from src.utils.logger import setup_logging, get_logger
from src.api.middleware import LoggingMiddleware
from src.api.error_handler import (
    validation_exception_handler,
    feature_disabled_handler,
    office_not_found_handler,
    session_not_found_handler,
    invalid_transition_handler,
    admin_mode_disabled_handler,
    template_render_error_handler,
    data_validation_error_handler,
    general_exception_handler
)
from src.services.directory_store import DirectoryStore
from src.services.session_manager import ChatState
from src.services.event_logger import EventLogger, EventSink, create_event_sink
from src.services.chat_service import ChatService
from src.utils.exceptions import (
    FeatureDisabledError,
    OfficeNotFoundError,
    SessionNotFoundError,
    InvalidStatusTransitionError,
    AdminModeDisabledError,
    TemplateRenderError,
    ValidationError
)

logger = get_logger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent.parent
APP_VERSION = "2.0.0"


def _resolve_dir(path: str) -> Path:
    """Relative paths are resolved against the project root"""
    directory = Path(path)
    return directory if directory.is_absolute() else PROJECT_ROOT / directory


def load_templates(template_dir: str) -> Jinja2Templates:
    """
    Load the template set and parse the homepage template up front

    Args:
        template_dir: template directory

    Returns:
        Jinja2Templates instance

    Raises:
        TemplateRenderError: the directory or index.html is missing or unparsable
    """
    directory = _resolve_dir(template_dir)
    if not directory.is_dir():
        raise TemplateRenderError("index.html", f"template directory not found: {directory}")

    templates = Jinja2Templates(directory=str(directory))
    try:
        templates.get_template("index.html")
    except TemplateError as e:
        raise TemplateRenderError("index.html", str(e)) from e

    logger.info(f"Templates loaded: {directory}")
    return templates


def create_app(
    app_settings: Optional[Settings] = None,
    event_sink: Optional[EventSink] = None,
    directory: Optional[DirectoryStore] = None
) -> FastAPI:
    """
    Build the application

    Args:
        app_settings: settings (default: global settings)
        event_sink: event log sink (default: from settings.event_log_sink)
        directory: directory store (default: built from seed data)

    Returns:
        FastAPI application

    Raises:
        TemplateRenderError: broken template set; the server must not start
    """
    app_settings = app_settings or default_settings
    setup_logging(app_settings.log_config_path, app_settings.log_level)

    templates = load_templates(app_settings.template_dir)

    state = ChatState(directory or DirectoryStore.from_seed())
    chat_service = ChatService(
        state,
        EventLogger(event_sink or create_event_sink(app_settings.event_log_sink)),
        enabled=app_settings.chat_enabled,
        admin_mode=app_settings.admin_mode
    )

    app = FastAPI(
        title="Dunder Mifflin Infinity API",
        description="Company website with live chat salesperson matching",
        version=APP_VERSION
    )
    app.state.settings = app_settings
    app.state.templates = templates
    app.state.chat_service = chat_service

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Request logging
    app.add_middleware(LoggingMiddleware)

    # Error handlers
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(FeatureDisabledError, feature_disabled_handler)
    app.add_exception_handler(OfficeNotFoundError, office_not_found_handler)
    app.add_exception_handler(SessionNotFoundError, session_not_found_handler)
    app.add_exception_handler(InvalidStatusTransitionError, invalid_transition_handler)
    app.add_exception_handler(AdminModeDisabledError, admin_mode_disabled_handler)
    app.add_exception_handler(TemplateRenderError, template_render_error_handler)
    app.add_exception_handler(ValidationError, data_validation_error_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    @app.on_event("startup")
    async def startup_event():
        """Runs when the application starts"""
        logger.info(
            f"Application started - chat_enabled={app_settings.chat_enabled}, "
            f"admin_mode={app_settings.admin_mode}"
        )

    @app.on_event("shutdown")
    async def shutdown_event():
        """Runs when the application stops"""
        logger.info(f"Application stopped - {chat_service.state.session_count()} sessions in memory")

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "chat_enabled": chat_service.enabled,
            "admin_mode": chat_service.admin_mode,
            "sessions": chat_service.state.session_count()
        }

    # Static files
    static_dir = _resolve_dir(app_settings.static_dir)
    if static_dir.exists():
        app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")
        logger.info(f"Static directory mounted: {static_dir}")

    # Routers
    from src.api.routers import home, chat, admin
    app.include_router(home.router)
    app.include_router(chat.router)
    app.include_router(admin.router)

    return app


app = create_app()
