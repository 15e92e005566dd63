"""JWT login and auth dependencies (get_current_user, RoleGuard)."""

import logging
from typing import Annotated

import jwt
from fastapi import APIRouter, Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import ValidationError
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.errors import AppErrorType, AuthenticationError, AuthorizationError
from app.core.security import TokenIssuer, get_token_issuer
from app.models.user import Role
from app.schemas.auth import CurrentUser, LoginRequest, TokenResponse
from app.schemas.common import Envelope, ok
from app.services.access_guard import authorize
from app.services.credentials import verify_credentials
from app.services.user_directory import UserDirectory

logger = logging.getLogger(__name__)
router = APIRouter()
security = HTTPBearer(auto_error=False)


def get_user_directory(db: Annotated[Session, Depends(get_db)]) -> UserDirectory:
    """Dependency: user directory bound to the request's DB session."""
    return UserDirectory(db)


@router.post("", response_model=Envelope[TokenResponse])
def login(
    body: LoginRequest,
    directory: Annotated[UserDirectory, Depends(get_user_directory)],
    issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
) -> Envelope[TokenResponse]:
    """
    Authenticate with username and password; returns a JWT access token.
    Include the token in the Authorization header as: Bearer <access_token>
    """
    user = verify_credentials(directory, body.username, body.password)
    if user is None:
        raise AuthenticationError(AppErrorType.INVALID_CREDENTIALS)
    if not user.enabled:
        logger.info("Login refused for disabled user id=%s", user.id)
        raise AuthorizationError(AppErrorType.USER_DISABLED)
    return ok(TokenResponse(**issuer.issue(user)))


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
) -> CurrentUser:
    """
    Dependency: require a valid Bearer JWT and return the identity in its claims.
    Stateless: the database is not consulted. Raises 401 if missing or invalid.
    """
    if credentials is None:
        raise AuthenticationError(AppErrorType.UNAUTHORIZED)
    try:
        payload = issuer.decode(credentials.credentials)
    except jwt.PyJWTError:
        raise AuthenticationError(message="Invalid or expired token")
    try:
        return CurrentUser(
            id=int(payload["sub"]),
            username=payload["username"],
            role=payload["role"],
        )
    except (KeyError, TypeError, ValueError, ValidationError):
        raise AuthenticationError(message="Invalid token payload")


class RoleGuard:
    """
    Dependency declaring a route's role requirement.

    RoleGuard(None) accepts any authenticated caller; RoleGuard(Role.ADMIN) only admins.
    Returns the caller so handlers can use its identity.
    """

    def __init__(self, required_role: Role | None) -> None:
        self.required_role = required_role

    def __call__(
        self, current_user: Annotated[CurrentUser, Depends(get_current_user)]
    ) -> CurrentUser:
        if not authorize(self.required_role, current_user.role):
            logger.warning(
                "Denied user id=%s role=%s (requires %s)",
                current_user.id,
                current_user.role.value,
                self.required_role.value if self.required_role else None,
            )
            raise AuthorizationError(AppErrorType.FORBIDDEN)
        return current_user


require_authenticated = RoleGuard(None)
require_admin = RoleGuard(Role.ADMIN)
