"""User directory: persistence of user records over a SQLAlchemy session."""

import logging

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Query, Session

from app.core.errors import AppErrorType, BusinessRuleError, NotFoundError
from app.core.security import hash_password
from app.models.user import MAX_USER_ID, Role, User
from app.schemas.users import UserCreate

logger = logging.getLogger(__name__)

LIKE_ESCAPE = "\\"


def _like_pattern(search: str) -> str:
    """Substring pattern with LIKE wildcards in the user's input escaped."""
    escaped = (
        search.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


def _as_user_id(term: str) -> int | None:
    """The search term as an id, or None when it is not a storable id."""
    if not (term.isascii() and term.isdigit()):
        return None
    value = int(term)
    return value if value <= MAX_USER_ID else None


class UserDirectory:
    """
    CRUD access to user records. Soft-deleted records are invisible to every lookup.

    Each mutation commits its own transaction. Database errors propagate unchanged.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def _active(self) -> Query:
        return self.session.query(User).filter(User.deleted.is_(False))

    def find_by_username(self, username: str) -> User | None:
        return self._active().filter(User.username == username).first()

    def find_by_id(self, user_id: int) -> User | None:
        return self._active().filter(User.id == user_id).first()

    def get(self, user_id: int) -> User:
        """Return the user or raise NotFoundError."""
        user = self.find_by_id(user_id)
        if user is None:
            raise NotFoundError(AppErrorType.USER_NOT_FOUND)
        return user

    def create(self, data: UserCreate) -> User:
        """Create a user with a hashed password. Usernames stay reserved after soft delete."""
        existing = self.session.query(User).filter(User.username == data.username).first()
        if existing is not None:
            raise BusinessRuleError(AppErrorType.USER_EXISTS)
        user = User(
            username=data.username,
            password_hash=hash_password(data.password),
            role=data.role,
            enabled=True,
            deleted=False,
        )
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            raise BusinessRuleError(AppErrorType.USER_EXISTS) from e
        self.session.refresh(user)
        logger.info("Created user id=%s username=%s role=%s", user.id, user.username, user.role.value)
        return user

    def list_paged(
        self, search: str | None, page: int, page_size: int
    ) -> tuple[list[User], int]:
        """
        Return (items, total) for one page ordered by id.

        search matches usernames by case-insensitive substring; an ASCII-digit search
        within the id range also matches the user with that exact id.
        """
        query = self._active()
        term = (search or "").strip()
        if term:
            condition = User.username.ilike(_like_pattern(term), escape=LIKE_ESCAPE)
            user_id = _as_user_id(term)
            if user_id is not None:
                condition = or_(condition, User.id == user_id)
            query = query.filter(condition)
        total = query.count()
        items = (
            query.order_by(User.id)
            .offset((page - 1) * page_size)
            .limit(page_size)
            .all()
        )
        return items, total

    def update_role(self, user_id: int) -> User:
        """Toggle the user's role between ADMIN and USER."""
        user = self.get(user_id)
        user.role = Role.USER if Role(user.role) is Role.ADMIN else Role.ADMIN
        self.session.commit()
        self.session.refresh(user)
        logger.info("Changed role of user id=%s to %s", user.id, user.role.value)
        return user

    def update_enabled(self, user_id: int) -> User:
        """Toggle the user's enabled flag; two calls restore the original state."""
        user = self.get(user_id)
        user.enabled = not user.enabled
        self.session.commit()
        self.session.refresh(user)
        logger.info("Set enabled=%s for user id=%s", user.enabled, user.id)
        return user

    def soft_delete(self, user_id: int) -> None:
        user = self.get(user_id)
        user.deleted = True
        self.session.commit()
        logger.info("Soft-deleted user id=%s", user_id)

    def update_password(self, user_id: int, new_hash: str) -> None:
        user = self.get(user_id)
        user.password_hash = new_hash
        self.session.commit()
        logger.info("Updated password for user id=%s", user_id)
