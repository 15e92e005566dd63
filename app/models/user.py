"""ORM model for application users (auth and RBAC)."""

from enum import Enum

from sqlalchemy import Boolean, Column, DateTime, Integer, String, func
from sqlalchemy import Enum as SAEnum

from app.models.base import Base

# Reserved id of the super administrator; its role, enabled and deleted state never change.
SUPER_ADMIN_ID = 1

# Largest value the integer id column holds on every supported backend.
MAX_USER_ID = 2**31 - 1


class Role(str, Enum):
    """Flat role model: no role implies another."""

    ADMIN = "ADMIN"
    USER = "USER"


class User(Base):
    """
    User account for JWT authentication and role-based access control.

    Records are never physically removed; `deleted` hides them from every lookup.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(
        SAEnum(Role, native_enum=False, length=32),
        nullable=False,
        default=Role.USER,
    )
    enabled = Column(Boolean, nullable=False, default=True)
    deleted = Column(Boolean, nullable=False, default=False)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
