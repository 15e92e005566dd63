"""Request/response schemas for auth endpoints and the token-derived identity."""

from pydantic import BaseModel, Field

from app.core.security import (
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    USERNAME_MAX_LEN,
    USERNAME_MIN_LEN,
)
from app.models.user import Role


class LoginRequest(BaseModel):
    """Credentials for login."""

    username: str = Field(
        ..., min_length=USERNAME_MIN_LEN, max_length=USERNAME_MAX_LEN, description="Username"
    )
    password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LEN, description="Password")


class TokenResponse(BaseModel):
    """JWT access token returned after successful login."""

    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")


class CurrentUser(BaseModel):
    """Identity reconstructed from token claims (no database lookup)."""

    id: int
    username: str
    role: Role


class UpdatePasswordRequest(BaseModel):
    """Self-service password change for the authenticated user."""

    old_password: str = Field(
        ..., min_length=1, max_length=PASSWORD_MAX_LEN, description="Current password"
    )
    new_password: str = Field(
        ..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN, description="New password"
    )
