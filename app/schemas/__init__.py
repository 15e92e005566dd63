"""Pydantic request/response schemas."""

from app.schemas.auth import CurrentUser, LoginRequest, TokenResponse, UpdatePasswordRequest
from app.schemas.common import Envelope, ok
from app.schemas.health import HealthResponse
from app.schemas.users import UserCreate, UserOut, UserPage

__all__ = [
    "CurrentUser",
    "Envelope",
    "HealthResponse",
    "LoginRequest",
    "TokenResponse",
    "UpdatePasswordRequest",
    "UserCreate",
    "UserOut",
    "UserPage",
    "ok",
]
