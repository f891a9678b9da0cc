"""
API middleware
"""
import time
import logging
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from src.utils.logger import get_logger
from src.utils.helpers import mask_personal_info

logger = get_logger(__name__)

STATIC_PREFIX = "/static/"


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    Request logging middleware.

    Static asset requests are logged at DEBUG. JSON request bodies are logged
    at DEBUG with customer names masked.
    """

    async def dispatch(self, request: Request, call_next):
        """Log the request and response"""
        start_time = time.time()

        client_ip = request.client.host if request.client else "unknown"
        method = request.method
        path = request.url.path
        log_level = "debug" if path.startswith(STATIC_PREFIX) else "info"
        log = getattr(logger, log_level)

        log(f"Request received: {method} {path} - IP: {client_ip}")

        if method in ("POST", "PUT", "PATCH") and logger.isEnabledFor(logging.DEBUG):
            content_type = request.headers.get("content-type", "")
            if content_type.startswith("application/json"):
                try:
                    body = await request.body()
                    logger.debug(f"Request body: {mask_personal_info(body.decode('utf-8'))}")
                except Exception as e:
                    logger.warning(f"Failed to log request body: {str(e)}")

        try:
            response = await call_next(request)
        except Exception as e:
            process_time = time.time() - start_time
            logger.error(
                f"Request failed: {method} {path} - "
                f"error: {str(e)} - "
                f"elapsed: {process_time:.3f}s"
            )
            raise

        process_time = time.time() - start_time
        log(
            f"Response sent: {method} {path} - "
            f"status: {response.status_code} - "
            f"elapsed: {process_time:.3f}s"
        )
        response.headers["X-Process-Time"] = str(process_time)
        return response
