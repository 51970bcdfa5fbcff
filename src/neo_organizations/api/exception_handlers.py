"""
Exception handlers mapping the error taxonomy to HTTP responses.

Every error body is an envelope ``{"data": null, "error": <message>,
"status": "error"}``. Sources and details are logged, never returned.
"""
import logging
from typing import Any, Dict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..core.exceptions import ApiError, DEFAULT_MESSAGES, ErrorCode
from ..models.base import APIResponse

logger = logging.getLogger(__name__)


def error_body(message: str) -> Dict[str, Any]:
    """Serialize an error envelope."""
    return APIResponse.error_response(message).model_dump(mode="json")


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()) if item != "body")
        parts.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "; ".join(parts) or DEFAULT_MESSAGES[ErrorCode.VALIDATION_ERROR]


class ExceptionHandlerRegistry:
    """Registers the service's exception handlers on an application."""

    def __init__(self, debug: bool = False):
        """
        Args:
            debug: Expose unexpected exception text in 500 responses
        """
        self.debug = debug

    def register_handlers(self, app: FastAPI) -> None:
        """Register exception handlers for the application."""

        @app.exception_handler(ApiError)
        async def api_error_handler(request: Request, exc: ApiError):
            """Handle errors from the taxonomy."""
            status_code = exc.status_code
            if status_code >= 500:
                logger.error(
                    f"{request.method} {request.url.path} failed: {exc.code.value}",
                    extra={"error": exc.to_dict()},
                    exc_info=exc
                )
            else:
                logger.info(
                    f"{request.method} {request.url.path} rejected: {exc.code.value} ({exc.message})"
                )
            return JSONResponse(status_code=status_code, content=error_body(exc.message))

        @app.exception_handler(RequestValidationError)
        async def validation_error_handler(request: Request, exc: RequestValidationError):
            """Handle malformed request input."""
            message = _format_validation_errors(exc)
            logger.info(f"{request.method} {request.url.path} rejected: {message}")
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content=error_body(message)
            )

        @app.exception_handler(StarletteHTTPException)
        async def http_exception_handler(request: Request, exc: StarletteHTTPException):
            """Handle routing errors such as unknown paths."""
            return JSONResponse(
                status_code=exc.status_code,
                content=error_body(str(exc.detail)),
                headers=getattr(exc, "headers", None)
            )

        @app.exception_handler(Exception)
        async def general_exception_handler(request: Request, exc: Exception):
            """Handle unexpected exceptions."""
            logger.error(f"Unhandled exception: {exc}", exc_info=True)

            if self.debug:
                message = str(exc)
            else:
                message = DEFAULT_MESSAGES[ErrorCode.INTERNAL_ERROR]

            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=error_body(message)
            )


def register_exception_handlers(app: FastAPI, debug: bool = False) -> None:
    """Create an ``ExceptionHandlerRegistry`` and register its handlers."""
    ExceptionHandlerRegistry(debug=debug).register_handlers(app)
