"""Application error taxonomy and the handlers that render errors into the response envelope."""

import logging
from enum import Enum
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

SUCCESS_CODE = 0
SUCCESS_MESSAGE = "Request succeeded"
VALIDATION_ERROR_STATUS = 422


class AppErrorType(Enum):
    """Enumerated application errors: (envelope code, HTTP status, user-facing message)."""

    UNAUTHORIZED = (40100, status.HTTP_401_UNAUTHORIZED, "Not authenticated")
    INVALID_CREDENTIALS = (40101, status.HTTP_401_UNAUTHORIZED, "Invalid username or password.")
    FORBIDDEN = (40300, status.HTTP_403_FORBIDDEN, "Insufficient role for this operation")
    USER_DISABLED = (40301, status.HTTP_403_FORBIDDEN, "User account is disabled")
    NOT_MODIFY_SUPER_ADMIN = (
        40001,
        status.HTTP_400_BAD_REQUEST,
        "The super administrator cannot be modified",
    )
    NOT_MODIFY_CURRENT_USER = (
        40002,
        status.HTTP_400_BAD_REQUEST,
        "The current user cannot delete itself",
    )
    PASSWORD_MISMATCH = (40003, status.HTTP_400_BAD_REQUEST, "Old password is incorrect")
    USER_NOT_FOUND = (40401, status.HTTP_404_NOT_FOUND, "User not found")
    USER_EXISTS = (40901, status.HTTP_409_CONFLICT, "Username already exists")
    SERVICE_UNAVAILABLE = (
        50300,
        status.HTTP_503_SERVICE_UNAVAILABLE,
        "User directory is unavailable",
    )

    def __init__(self, code: int, http_status: int, message: str) -> None:
        self.code = code
        self.http_status = http_status
        self.message = message


class AppError(Exception):
    """Base for errors recovered at the HTTP boundary into an error envelope."""

    default_type: AppErrorType = AppErrorType.SERVICE_UNAVAILABLE

    def __init__(
        self,
        error_type: AppErrorType | None = None,
        message: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.error_type = error_type or self.default_type
        self.message = message or self.error_type.message
        self.headers = headers
        super().__init__(self.message)

    @property
    def code(self) -> int:
        return self.error_type.code

    @property
    def http_status(self) -> int:
        return self.error_type.http_status


class AuthenticationError(AppError):
    """Missing, invalid or expired token, or rejected login."""

    default_type = AppErrorType.UNAUTHORIZED

    def __init__(self, error_type: AppErrorType | None = None, message: str | None = None) -> None:
        super().__init__(error_type, message, headers={"WWW-Authenticate": "Bearer"})


class AuthorizationError(AppError):
    """Valid identity whose role does not satisfy the route requirement."""

    default_type = AppErrorType.FORBIDDEN


class BusinessRuleError(AppError):
    """Super-admin immutability, self-delete and similar rule violations."""

    default_type = AppErrorType.NOT_MODIFY_SUPER_ADMIN


class NotFoundError(AppError):
    default_type = AppErrorType.USER_NOT_FOUND


def error_body(code: int, message: str, data: Any = None) -> dict[str, Any]:
    return {"data": data, "code": code, "message": message}


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.http_status,
        content=error_body(exc.code, exc.message),
        headers=exc.headers,
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else "HTTP error"
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.status_code, message),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=VALIDATION_ERROR_STATUS,
        content=error_body(
            VALIDATION_ERROR_STATUS,
            "Request validation failed",
            jsonable_encoder(exc.errors()),
        ),
    )


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error(
        "Database error on %s %s", request.method, request.url.path, exc_info=exc
    )
    error_type = AppErrorType.SERVICE_UNAVAILABLE
    return JSONResponse(
        status_code=error_type.http_status,
        content=error_body(error_type.code, error_type.message),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the envelope-rendering handlers on the application."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
