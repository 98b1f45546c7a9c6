"""
JSON error envelope and FastAPI exception handlers.

Every error leaves the API as {"success": false, "error": <message>}. 500
responses also carry "details" with the underlying error text when the
application is not running in production.
"""
# Standard library imports
import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

# External package imports
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Local application imports
from ..core.config import Settings
from ..core.exceptions import AppError, InternalError
from ..core.messages import Messages

logger = logging.getLogger(__name__)


def error_payload(
    message: str,
    details: Optional[str] = None,
    include_details: bool = False,
) -> Dict[str, Any]:
    """
    Build the JSON body of an error response

    Args:
        message: User-facing error message
        details: Underlying error text, if any
        include_details: Whether details may be shown to the client

    Returns:
        Error envelope dictionary
    """
    payload: Dict[str, Any] = {"success": False, "error": message}
    if include_details and details:
        payload["details"] = details
    return payload


@contextmanager
def unexpected_errors_as(message: str, operation: str) -> Iterator[None]:
    """
    Turn any non-AppError raised inside the block into an InternalError

    Args:
        message: User-facing message for the 500 response
        operation: Short label used in the log line
    """
    try:
        yield
    except AppError:
        raise
    except Exception as exception:
        logger.error(f"{operation} error: {exception}", exc_info=True)
        raise InternalError(message, details=str(exception)) from exception


def register_exception_handlers(app: FastAPI, settings: Settings, messages: Messages) -> None:
    """Install the handlers that shape every error response"""
    include_details = settings.expose_error_details

    @app.exception_handler(AppError)
    async def handle_app_error(request: Request, exc: AppError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message} ({exc.details})")
        return JSONResponse(
            status_code=exc.status_code,
            content=error_payload(exc.message, exc.details, include_details),
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        # Unknown paths and unsupported methods both count as unknown routes
        if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
            logger.info(f"Route not found: {request.method} {request.url.path}")
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content=error_payload(messages.route_not_found),
            )
        return JSONResponse(
            status_code=exc.status_code,
            content=error_payload(str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning(f"Malformed request body for {request.method} {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_payload(messages.invalid_request),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.error(f"Server error on {request.method} {request.url.path}: {exc}", exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_payload(messages.internal_error, str(exc), include_details),
        )
