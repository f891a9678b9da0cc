"""
FastAPI dependencies
"""
from fastapi import Request
from fastapi.templating import Jinja2Templates
from src.services.chat_service import ChatService
from src.utils.exceptions import FeatureDisabledError


def get_chat_service(request: Request) -> ChatService:
    """Chat service owned by the running app"""
    return request.app.state.chat_service


def get_templates(request: Request) -> Jinja2Templates:
    """Template set loaded at startup"""
    return request.app.state.templates


def require_chat_enabled(request: Request) -> None:
    """
    Reject chat requests when the feature flag is off.

    Runs before request body validation. Bodies that are not valid JSON fail
    earlier; the validation error handler answers 503 for those.
    """
    if not request.app.state.chat_service.enabled:
        raise FeatureDisabledError("chat")
