"""Business rules checked before user mutations reach the directory."""

import logging

from app.core.errors import AppErrorType, BusinessRuleError
from app.models.user import SUPER_ADMIN_ID

logger = logging.getLogger(__name__)


def ensure_not_super_admin(target_id: int) -> None:
    """Role, enabled and deleted state of the super administrator are immutable."""
    if target_id == SUPER_ADMIN_ID:
        logger.warning("Rejected mutation of super administrator id=%s", target_id)
        raise BusinessRuleError(AppErrorType.NOT_MODIFY_SUPER_ADMIN)


def ensure_not_self(target_id: int, caller_id: int) -> None:
    if target_id == caller_id:
        logger.warning("Rejected self-delete by user id=%s", caller_id)
        raise BusinessRuleError(AppErrorType.NOT_MODIFY_CURRENT_USER)
