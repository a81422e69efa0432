import logging
from collections.abc import Awaitable, Callable

from fastapi import Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from ability_service.api.schemas import ErrorDetail
from ability_service.core.errors import InvalidParameterError

logger = logging.getLogger(__name__)

Handler = Callable[[Request, Exception], Awaitable[JSONResponse]]


class DataSizeExceededError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


def _error_response(
    request: Request, status_code: int, code: str, message: str
) -> JSONResponse:
    detail = ErrorDetail(
        code=code,
        message=message,
        request_id=getattr(request.state, "request_id", None),
    )
    return JSONResponse(status_code=status_code, content=detail.model_dump())


def unprocessable_handler(code: str) -> Handler:
    """Handler answering 422 with the exception's message under code."""

    async def handler(request: Request, exc: Exception) -> JSONResponse:
        message = getattr(exc, "message", None) or str(exc)
        return _error_response(request, 422, code, message)

    return handler


async def unhandled_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    logger.exception("Unhandled exception")
    return _error_response(
        request, 500, "INTERNAL_ERROR", "Internal server error"
    )


# Exception type -> handler, in registration order
EXCEPTION_HANDLERS: dict[type[Exception], Handler] = {
    DataSizeExceededError: unprocessable_handler("DATA_SIZE_EXCEEDED"),
    InvalidParameterError: unprocessable_handler("INVALID_PARAMETER"),
    ValidationError: unprocessable_handler("VALIDATION_ERROR"),
    Exception: unhandled_exception_handler,
}
