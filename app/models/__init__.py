"""SQLAlchemy ORM models."""

from app.models.base import Base
from app.models.user import MAX_USER_ID, SUPER_ADMIN_ID, Role, User

__all__ = ["Base", "MAX_USER_ID", "Role", "SUPER_ADMIN_ID", "User"]
