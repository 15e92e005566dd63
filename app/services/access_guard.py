"""Role-based authorization decision for a single request."""

from app.models.user import Role


def authorize(required_role: Role | None, caller_role: Role) -> bool:
    """
    Allow when the route declares no role, otherwise only on an exact role match.

    Authentication already happened upstream; there is no role hierarchy, so ADMIN
    does not satisfy a USER requirement.
    """
    if required_role is None:
        return True
    return caller_role == required_role
