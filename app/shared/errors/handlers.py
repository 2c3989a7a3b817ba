"""
Centralized error handlers for FastAPI.

Maps content domain errors to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses use the ErrorResponse schema.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.domain.content.errors import (
    ContentDecodingError,
    ContentDomainError,
    ContentNotFoundError,
    InvalidContentError,
    LanguageNotSupportedError,
    StoreNotFoundError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_500 = 500


def _error_response(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str | None] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def register_error_handlers(app: FastAPI) -> None:
    """Register all content error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(ContentNotFoundError)
    async def handle_content_not_found(
        _request: Request, exc: ContentNotFoundError
    ) -> JSONResponse:
        """Handle missing page, box or asset errors."""
        logger.warning("Content not found: %s", exc.code)
        return _error_response(HTTP_404, "Content not found", exc.message)

    @app.exception_handler(StoreNotFoundError)
    async def handle_store_not_found(
        _request: Request, exc: StoreNotFoundError
    ) -> JSONResponse:
        """Handle unknown merchant store errors."""
        logger.warning("Store not found: %s", exc.store_code)
        return _error_response(HTTP_404, "Store not found", exc.message)

    @app.exception_handler(LanguageNotSupportedError)
    async def handle_language_not_supported(
        _request: Request, exc: LanguageNotSupportedError
    ) -> JSONResponse:
        """Handle languages not enabled for the store."""
        logger.warning(
            "Unsupported language %s for store %s", exc.language, exc.store_code
        )
        return _error_response(HTTP_400, "Language not supported", exc.message)

    @app.exception_handler(InvalidContentError)
    async def handle_invalid_content(
        _request: Request, exc: InvalidContentError
    ) -> JSONResponse:
        """Handle content validation failures."""
        logger.warning("Invalid content: %s", exc.reason)
        return _error_response(HTTP_400, "Invalid content", exc.reason)

    @app.exception_handler(ContentDecodingError)
    async def handle_decoding(
        _request: Request, exc: ContentDecodingError
    ) -> JSONResponse:
        """Handle content path decoding failures."""
        logger.error("Content path decoding failed: %s", exc.reason)
        return _error_response(HTTP_500, "Internal server error")

    @app.exception_handler(ContentDomainError)
    async def handle_content_domain(
        _request: Request, exc: ContentDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled content domain errors."""
        logger.error("Unhandled content domain error: %s", exc.message)
        return _error_response(HTTP_500, "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
