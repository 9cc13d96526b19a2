"""
Create a user (e.g. the first admin). Run from project root:
  python -m storerate.scripts.create_user NAME EMAIL PASSWORD ADDRESS [role]
Example:
  python -m storerate.scripts.create_user "System Administrator Account" admin@example.org 'Secret#123' "1 Main St" admin
"""
import argparse
import logging
import sys

from pydantic import EmailStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from storerate.core.database import SessionLocal
from storerate.core.errors import ConflictError
from storerate.core.logging_config import configure_logging
from storerate.core.validation import (
    ROLE_NORMAL,
    ROLES,
    check_address,
    check_name,
    check_password,
)
from storerate.services import user_service

configure_logging(logging.INFO)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a StoreRate user of any role.")
    parser.add_argument("name", help="Full name (20-60 chars)")
    parser.add_argument("email", help="Login email")
    parser.add_argument("password", help="8-16 chars, one uppercase, one special char")
    parser.add_argument("address", help="Address (max 400 chars)")
    parser.add_argument("role", nargs="?", default=ROLE_NORMAL, choices=ROLES)
    args = parser.parse_args(argv)

    try:
        email = TypeAdapter(EmailStr).validate_python(args.email.strip()).lower()
        name = check_name(args.name)
        address = check_address(args.address)
        password = check_password(args.password)
    except PydanticValidationError:
        print("Invalid email address.", file=sys.stderr)
        return 1
    except ValueError as e:
        print(str(e), file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        user = user_service.create_user(
            db,
            name=name,
            email=email,
            address=address,
            password=password,
            role=args.role,
        )
    except ConflictError as e:
        print(e.message, file=sys.stderr)
        return 1
    finally:
        db.close()
    print(f"Created user '{user.email}' with role '{user.role}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
