from typing import Any

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse

from pidgeot.core.logging import get_logger

log = get_logger(__name__)


class AppError(Exception):
    """Base application error with consistent schema."""

    def __init__(
        self,
        message: str,
        code: str = "ERROR",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class BadRequestError(AppError):
    def __init__(self, message: str = "Bad request", details: dict[str, Any] | None = None):
        super().__init__(message, code="BAD_REQUEST", status_code=status.HTTP_400_BAD_REQUEST, details=details)


class ConfigError(AppError):
    """Paginator was built without what it needs to run (no I/O has happened)."""

    def __init__(self, message: str = "Invalid pagination config", details: dict[str, Any] | None = None):
        super().__init__(message, code="CONFIG_ERROR", details=details)


class StoreError(AppError):
    """A count or fetch against the document store failed.

    The original exception is kept on ``cause`` and chained as ``__cause__``.
    """

    def __init__(self, message: str, cause: BaseException | None = None):
        self.cause = cause
        details = {"cause": type(cause).__name__} if cause is not None else None
        super().__init__(
            message,
            code="STORE_ERROR",
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            details=details,
        )


def _error_body(request: Request, message: str, code: str, details: dict[str, Any]) -> dict[str, Any]:
    body: dict[str, Any] = {"error": {"message": message, "code": code, "details": details}}
    request_id = getattr(request.state, "request_id", None)
    if request_id:
        body["request_id"] = request_id
    return body


def error_response(request: Request, exc: AppError) -> ORJSONResponse:
    return ORJSONResponse(
        status_code=exc.status_code,
        content=_error_body(request, exc.message, exc.code, exc.details),
    )


async def app_exception_handler(request: Request, exc: AppError) -> ORJSONResponse:
    if exc.status_code >= 500:
        log.warning("app_error", code=exc.code, message=exc.message, path=request.url.path)
    return error_response(request, exc)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> ORJSONResponse:
    body = _error_body(
        request,
        "Validation error",
        "VALIDATION_ERROR",
        {"errors": jsonable_encoder(exc.errors())},
    )
    return ORJSONResponse(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content=body)


async def generic_exception_handler(request: Request, exc: Exception) -> ORJSONResponse:
    log.exception("unhandled_exception", exc_info=exc, path=request.url.path)
    body = _error_body(request, "Internal server error", "INTERNAL_ERROR", {})
    return ORJSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=body)
