"""
Create a user (e.g. the first admin). Run from project root:
  python -m stock_api.scripts.create_user USERNAME EMAIL PASSWORD [role]
Example:
  python -m stock_api.scripts.create_user admin admin@example.com your-secure-password admin
"""
import argparse
import logging
import sys

from pydantic import ValidationError

from stock_api.core.config import get_settings
from stock_api.core.database import SessionLocal
from stock_api.core.errors import ConflictError
from stock_api.core.logging import configure_logging
from stock_api.models.user import Role
from stock_api.schemas.user import UserCreate
from stock_api.services.users import create_user

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Stock API user.")
    parser.add_argument("username", help="Username (3-255 chars)")
    parser.add_argument("email", help="Email address")
    parser.add_argument("password", help="Password (8-128 chars)")
    parser.add_argument(
        "role",
        nargs="?",
        default=Role.USER.value,
        choices=[r.value for r in Role],
    )
    args = parser.parse_args(argv)
    configure_logging(get_settings().LOG_LEVEL)

    try:
        data = UserCreate(
            username=args.username,
            email=args.email,
            password=args.password,
            role=args.role,
        )
    except ValidationError as e:
        for err in e.errors():
            field = ".".join(str(p) for p in err["loc"])
            print(f"Invalid {field}: {err['msg']}", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        user = create_user(db, data)
    except ConflictError as e:
        print(f"{e.message}: '{data.username}' / '{data.email}'.", file=sys.stderr)
        return 1
    finally:
        db.close()
    print(f"Created user '{user.username}' with role '{user.role.value}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
