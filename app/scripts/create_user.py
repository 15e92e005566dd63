"""
Create a user (e.g. the first admin, who becomes the super administrator with id 1).
Run from project root:
  python -m app.scripts.create_user USERNAME PASSWORD [ADMIN|USER] [--init-db]
Example:
  python -m app.scripts.create_user admin your-secure-password ADMIN --init-db
"""
import argparse
import logging
import sys

from pydantic import ValidationError

from app.core.config import get_settings
from app.core.database import SessionLocal, init_db
from app.core.errors import AppError
from app.core.logging_config import configure_logging
from app.models.user import SUPER_ADMIN_ID, Role
from app.schemas.users import UserCreate
from app.services.user_directory import UserDirectory

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Roster user (no registration UI).")
    parser.add_argument("username", help="Username (1-255 chars)")
    parser.add_argument("password", help="Password (8-128 chars)")
    parser.add_argument(
        "role",
        nargs="?",
        default=Role.USER.value,
        choices=[r.value for r in Role],
    )
    parser.add_argument(
        "--init-db",
        action="store_true",
        help="Create missing tables before inserting (local databases without migrations)",
    )
    args = parser.parse_args(argv)
    configure_logging(get_settings())

    try:
        data = UserCreate(username=args.username, password=args.password, role=Role(args.role))
    except ValidationError as e:
        print(f"Invalid user: {e.errors()[0]['msg']}", file=sys.stderr)
        return 1

    if args.init_db:
        init_db()

    db = SessionLocal()
    try:
        user = UserDirectory(db).create(data)
    except AppError as e:
        print(f"User '{data.username}' not created: {e.message}", file=sys.stderr)
        return 1
    finally:
        db.close()

    suffix = " (super administrator)" if user.id == SUPER_ADMIN_ID else ""
    print(f"Created user '{user.username}' with id {user.id} and role '{args.role}'{suffix}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
