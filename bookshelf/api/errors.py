"""Map catalog errors to HTTP responses."""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from bookshelf.config import get_settings
from bookshelf.core.books.errors import BookError, BookNotFoundError, InvalidInputError

logger = structlog.get_logger(__name__)

STATUS_CODES: dict[type[BookError], int] = {
    InvalidInputError: 400,
    BookNotFoundError: 404,
}


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the catalog error handlers to ``app``."""

    @app.exception_handler(BookError)
    async def book_error_handler(request: Request, exc: BookError) -> JSONResponse:
        status_code = STATUS_CODES.get(type(exc), 500)
        logger.debug(
            "Request rejected",
            method=request.method,
            path=request.url.path,
            status=status_code,
            error=exc.message,
        )
        return JSONResponse(status_code=status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = exc.errors()
        message = errors[0]["msg"] if errors else "invalid request"
        logger.debug("Malformed request", method=request.method, path=request.url.path, error=message)
        return JSONResponse(status_code=400, content={"error": message})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        logger.debug(
            "HTTP error",
            method=request.method,
            path=request.url.path,
            status=exc.status_code,
            error=exc.detail,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unhandled error", method=request.method, path=request.url.path, exc_info=exc)
        message = str(exc) if get_settings().debug else "Internal server error"
        return JSONResponse(status_code=500, content={"error": message})
