"""Pydantic schemas for user management: creation input, public profile and pages."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from app.core.security import (
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    USERNAME_MAX_LEN,
    USERNAME_MIN_LEN,
)
from app.models.user import Role


class UserCreate(BaseModel):
    """Body for POST /users (admin only)."""

    username: str = Field(
        ..., min_length=USERNAME_MIN_LEN, max_length=USERNAME_MAX_LEN, description="Unique username"
    )
    password: str = Field(
        ..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN, description="Initial password"
    )
    role: Role = Field(default=Role.USER, description="ADMIN or USER")

    @field_validator("username")
    @classmethod
    def strip_username(cls, v: str) -> str:
        s = v.strip()
        if not s:
            raise ValueError("username must be non-empty")
        return s


class UserOut(BaseModel):
    """Public user profile. Never carries the password hash or the deleted flag."""

    model_config = {"from_attributes": True}

    id: int
    username: str
    role: Role
    enabled: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None


class UserPage(BaseModel):
    """One page of GET /users results."""

    items: list[UserOut]
    total: int = Field(..., ge=0, description="Matching users across all pages")
    page: int = Field(..., ge=1)
    page_size: int = Field(..., ge=1)
