"""Registration and credential checks; token issuing lives in core.security."""

import logging

from sqlalchemy.orm import Session

from storerate.core.errors import AuthenticationError
from storerate.core.security import verify_password
from storerate.core.validation import ROLE_NORMAL
from storerate.models import User
from storerate.schemas.auth import RegisterRequest
from storerate.services import user_service

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password."


def register(db: Session, body: RegisterRequest) -> User:
    """Self-registration always yields a 'normal' user."""
    user = user_service.create_user(
        db,
        name=body.name,
        email=body.email,
        address=body.address,
        password=body.password,
        role=ROLE_NORMAL,
    )
    logger.info("Registered user id=%s", user.id)
    return user


def authenticate(db: Session, email: str, password: str) -> User:
    """Return the user for valid credentials; same error for unknown email and bad password."""
    user = user_service.get_user_by_email(db, email)
    if user is None or not verify_password(password, user.password_hash):
        logger.warning("Failed login attempt for email=%s", email.strip().lower())
        raise AuthenticationError(INVALID_CREDENTIALS)
    return user
