"""
API error handlers
"""
from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from src.utils.exceptions import (
    FeatureDisabledError,
    OfficeNotFoundError,
    SessionNotFoundError,
    InvalidStatusTransitionError,
    AdminModeDisabledError,
    TemplateRenderError,
    ValidationError,
)
from src.utils.constants import (
    ERROR_FEATURE_DISABLED,
    ERROR_OFFICE_NOT_FOUND,
    ERROR_SESSION_NOT_FOUND,
    ERROR_INVALID_TRANSITION,
    ERROR_ADMIN_MODE_DISABLED,
    ERROR_TEMPLATE_RENDER,
    ERROR_VALIDATION,
    ERROR_INTERNAL,
)
from src.utils.response import error_response
from src.utils.logger import get_logger

logger = get_logger(__name__)

CHAT_PATH_PREFIXES = ("/api/offices", "/api/chat/")


def _chat_disabled_for(request: Request) -> bool:
    """True when the request targets a chat endpoint and chat is turned off"""
    service = getattr(request.app.state, "chat_service", None)
    if service is None or service.enabled:
        return False
    return request.url.path.startswith(CHAT_PATH_PREFIXES)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Request validation error handler.

    FastAPI decodes the JSON body before dependencies run, so a malformed body
    on a disabled chat endpoint lands here instead of in the feature gate.
    """
    if _chat_disabled_for(request):
        return await feature_disabled_handler(request, FeatureDisabledError("chat"))

    errors = exc.errors()
    error_details = {
        "field": errors[0].get("loc")[-1] if errors else None,
        "message": errors[0].get("msg") if errors else "validation error"
    }

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=error_response(
            code=ERROR_VALIDATION,
            message="Request validation failed",
            details=error_details
        )
    )


async def feature_disabled_handler(request: Request, exc: FeatureDisabledError):
    """Feature disabled handler"""
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content=error_response(
            code=ERROR_FEATURE_DISABLED,
            message="Live chat is currently unavailable",
            details={"feature": exc.feature}
        )
    )


async def office_not_found_handler(request: Request, exc: OfficeNotFoundError):
    """Unknown office handler"""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_response(
            code=ERROR_OFFICE_NOT_FOUND,
            message=str(exc),
            details={"office_id": exc.office_id}
        )
    )


async def session_not_found_handler(request: Request, exc: SessionNotFoundError):
    """Session not found handler"""
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=error_response(
            code=ERROR_SESSION_NOT_FOUND,
            message=str(exc)
        )
    )


async def invalid_transition_handler(request: Request, exc: InvalidStatusTransitionError):
    """Invalid status transition handler"""
    logger.warning(str(exc))
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content=error_response(
            code=ERROR_INVALID_TRANSITION,
            message=str(exc),
            details={"from": exc.from_status, "to": exc.to_status}
        )
    )


async def admin_mode_disabled_handler(request: Request, exc: AdminModeDisabledError):
    """Admin mode disabled handler"""
    return JSONResponse(
        status_code=status.HTTP_403_FORBIDDEN,
        content=error_response(
            code=ERROR_ADMIN_MODE_DISABLED,
            message=str(exc)
        )
    )


async def template_render_error_handler(request: Request, exc: TemplateRenderError):
    """Template render error handler"""
    logger.error(str(exc))
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_response(
            code=ERROR_TEMPLATE_RENDER,
            message="The page could not be rendered."
        )
    )


async def data_validation_error_handler(request: Request, exc: ValidationError):
    """Data validation error handler"""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_response(
            code=ERROR_VALIDATION,
            message=str(exc),
            details={"field": exc.field} if exc.field else None
        )
    )


async def general_exception_handler(request: Request, exc: Exception):
    """Catch-all handler"""
    logger.error(f"Unexpected error: {str(exc)}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_response(
            code=ERROR_INTERNAL,
            message="An internal server error occurred."
        )
    )
