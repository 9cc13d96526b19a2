"""
Field rules shared by every request schema and the create_user CLI.

Each check_* function returns the cleaned value or raises ValueError with a
user-facing message, so it can be used directly inside a pydantic
field_validator.
"""

import re

NAME_MIN_LEN = 20
NAME_MAX_LEN = 60
STORE_NAME_MIN_LEN = 1
STORE_NAME_MAX_LEN = 60
ADDRESS_MAX_LEN = 400
PASSWORD_MIN_LEN = 8
PASSWORD_MAX_LEN = 16
RATING_MIN = 1
RATING_MAX = 5

ROLE_ADMIN = "admin"
ROLE_NORMAL = "normal"
ROLE_STORE_OWNER = "store_owner"
ROLES = (ROLE_ADMIN, ROLE_NORMAL, ROLE_STORE_OWNER)

_UPPERCASE_RE = re.compile(r"[A-Z]")
_SPECIAL_RE = re.compile(r"[^A-Za-z0-9]")


def check_name(value: str) -> str:
    value = value.strip()
    if not (NAME_MIN_LEN <= len(value) <= NAME_MAX_LEN):
        raise ValueError(
            f"Name must be between {NAME_MIN_LEN} and {NAME_MAX_LEN} characters."
        )
    return value


def check_store_name(value: str) -> str:
    value = value.strip()
    if not (STORE_NAME_MIN_LEN <= len(value) <= STORE_NAME_MAX_LEN):
        raise ValueError(
            f"Store name must be between {STORE_NAME_MIN_LEN} and {STORE_NAME_MAX_LEN} characters."
        )
    return value


def check_address(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("Address is required.")
    if len(value) > ADDRESS_MAX_LEN:
        raise ValueError(f"Address must be at most {ADDRESS_MAX_LEN} characters.")
    return value


def check_password(value: str) -> str:
    """8-16 chars with at least one uppercase letter and one special character."""
    if not (PASSWORD_MIN_LEN <= len(value) <= PASSWORD_MAX_LEN):
        raise ValueError(
            f"Password must be between {PASSWORD_MIN_LEN} and {PASSWORD_MAX_LEN} characters."
        )
    if not _UPPERCASE_RE.search(value):
        raise ValueError("Password must contain at least one uppercase letter.")
    if not _SPECIAL_RE.search(value):
        raise ValueError("Password must contain at least one special character.")
    return value


def check_role(value: str) -> str:
    if value not in ROLES:
        raise ValueError(f"Role must be one of: {', '.join(ROLES)}.")
    return value


def check_rating_value(value: int) -> int:
    if not (RATING_MIN <= value <= RATING_MAX):
        raise ValueError(f"Rating must be between {RATING_MIN} and {RATING_MAX}.")
    return value
