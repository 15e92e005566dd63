"""User management endpoints. Role requirements are declared per route via RoleGuard dependencies."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query

from app.api.v1.auth import get_user_directory, require_admin, require_authenticated
from app.core.config import get_settings
from app.core.errors import AppErrorType, BusinessRuleError
from app.core.security import hash_password, password_matches
from app.models import MAX_USER_ID
from app.schemas.auth import CurrentUser, UpdatePasswordRequest
from app.schemas.common import Envelope, ok
from app.schemas.users import UserCreate, UserOut, UserPage
from app.services.safeguards import ensure_not_self, ensure_not_super_admin
from app.services.user_directory import UserDirectory

router = APIRouter()

UserId = Annotated[int, Path(ge=1, le=MAX_USER_ID, description="User id")]
Directory = Annotated[UserDirectory, Depends(get_user_directory)]


@router.get("/current", response_model=Envelope[UserOut])
def get_current_profile(
    current_user: Annotated[CurrentUser, Depends(require_authenticated)],
    directory: Directory,
) -> Envelope[UserOut]:
    """Return the public profile of the authenticated caller."""
    user = directory.get(current_user.id)
    return ok(UserOut.model_validate(user))


@router.patch("/update_password", response_model=Envelope[None])
def update_password(
    body: UpdatePasswordRequest,
    current_user: Annotated[CurrentUser, Depends(require_authenticated)],
    directory: Directory,
) -> Envelope[None]:
    """Change the caller's own password after checking the current one."""
    user = directory.get(current_user.id)
    if not password_matches(body.old_password, user.password_hash):
        raise BusinessRuleError(AppErrorType.PASSWORD_MISMATCH)
    directory.update_password(user.id, hash_password(body.new_password))
    return ok()


@router.post("", response_model=Envelope[UserOut])
def create_user(
    body: UserCreate,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    directory: Directory,
) -> Envelope[UserOut]:
    """Create a user account (admin only)."""
    user = directory.create(body)
    return ok(UserOut.model_validate(user))


@router.get("", response_model=Envelope[UserPage])
def list_users(
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    directory: Directory,
    page: Annotated[int, Query(ge=1, le=MAX_USER_ID)] = 1,
    page_size: Annotated[int | None, Query(ge=1)] = None,
    search: Annotated[
        str | None, Query(max_length=255, description="Fuzzy match on username or id")
    ] = None,
) -> Envelope[UserPage]:
    """
    List users, excluding soft-deleted ones, ordered by id (admin only).

    page_size defaults to DEFAULT_PAGE_SIZE and is capped at MAX_PAGE_SIZE.
    """
    settings = get_settings()
    size = min(page_size or settings.DEFAULT_PAGE_SIZE, settings.MAX_PAGE_SIZE)
    items, total = directory.list_paged(search, page, size)
    return ok(
        UserPage(
            items=[UserOut.model_validate(u) for u in items],
            total=total,
            page=page,
            page_size=size,
        )
    )


@router.get("/{user_id}", response_model=Envelope[UserOut])
def get_user(
    user_id: UserId,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    directory: Directory,
) -> Envelope[UserOut]:
    """Return a single user (admin only)."""
    return ok(UserOut.model_validate(directory.get(user_id)))


@router.patch("/role/{user_id}", response_model=Envelope[UserOut])
def update_user_role(
    user_id: UserId,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    directory: Directory,
) -> Envelope[UserOut]:
    """Toggle a user's role between ADMIN and USER (admin only; never the super administrator)."""
    ensure_not_super_admin(user_id)
    return ok(UserOut.model_validate(directory.update_role(user_id)))


@router.patch("/enable/{user_id}", response_model=Envelope[UserOut])
def update_user_enabled(
    user_id: UserId,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    directory: Directory,
) -> Envelope[UserOut]:
    """Enable or disable a user (admin only; never the super administrator)."""
    ensure_not_super_admin(user_id)
    return ok(UserOut.model_validate(directory.update_enabled(user_id)))


@router.delete("/{user_id}", response_model=Envelope[None])
def delete_user(
    user_id: UserId,
    admin: Annotated[CurrentUser, Depends(require_admin)],
    directory: Directory,
) -> Envelope[None]:
    """Soft-delete a user (admin only; not the super administrator, not the caller)."""
    ensure_not_super_admin(user_id)
    ensure_not_self(user_id, admin.id)
    directory.soft_delete(user_id)
    return ok()
