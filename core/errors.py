"""Application error taxonomy and its HTTP mapping."""
import logging
from contextlib import contextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class AppError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Internal server error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid request"


class AuthError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Authentication failed"


class MissingToken(AuthError):
    message = "no token provided"


class InvalidToken(AuthError):
    message = "invalid token"


class InvalidCredentials(AuthError):
    # login failures are reported as 400 by this API
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid credentials"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class ConflictError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Already exists"


class StorageError(AppError):
    message = "Storage failure"


@contextmanager
def storage_failure(message: str):
    """Re-raise any storage failure inside the block with a generic per-operation message."""
    try:
        yield
    except StorageError as exc:
        logger.error("%s: %s", message, exc, exc_info=True)
        raise StorageError(message) from exc


# body fields whose type errors get their own message
FIELD_MESSAGES = {
    "known": "Known status must be a boolean",
}


async def _app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    headers = None
    if exc.status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.message},
        headers=headers,
    )


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = ValidationError.message
    for error in exc.errors():
        field = error["loc"][-1] if error["loc"] else None
        if field in FIELD_MESSAGES:
            message = FIELD_MESSAGES[field]
            break
    logger.debug("%s %s rejected: %s", request.method, request.url.path, exc.errors())
    return await _app_error_handler(request, ValidationError(message))


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, _app_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
