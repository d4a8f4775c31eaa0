"""
Auth Service — registration and login flows.

Both flows take the raw JSON payload and an already-open ``UserStore`` and
either return the response body or raise one of the ``AuthServiceError``
kinds. Nothing from bcrypt, PyJWT or SQLAlchemy escapes unmapped.
"""

import logging
from functools import lru_cache
from typing import Any, Dict

from . import security
from .exceptions import (
    AuthenticationError,
    ConflictError,
    DuplicateUserError,
    HashingError,
    InternalError,
    StoreError,
)
from .models import validate_login, validate_registration
from .repository import UserStore

logger = logging.getLogger(__name__)

REGISTERED = "User registered successfully"
LOGGED_IN = "Login successful"


@lru_cache(maxsize=1)
def _dummy_hash() -> str:
    # checked against when the email is unknown, so both failure paths pay for one bcrypt check
    return security.hash_password("not-a-real-password")


def register_user(payload: Any, store: UserStore) -> Dict[str, str]:
    user = validate_registration(payload)

    try:
        if store.exists(user.email, user.userName):
            logger.info("Registration rejected, user already exists: %s", user.email)
            raise ConflictError()

        password_hash = security.hash_password(user.password)
        created = store.create(user.userName, user.email, password_hash)
    except DuplicateUserError:
        # lost a race against another registration between the check and the insert
        logger.info("Registration rejected by unique constraint: %s", user.email)
        raise ConflictError()
    except (HashingError, StoreError):
        logger.exception("Registration failed for %s", user.email)
        raise InternalError()

    logger.info("Registered user %s (%s)", user.userName, created.id)
    return {"message": REGISTERED}


def authenticate_user(payload: Any, store: UserStore) -> Dict[str, str]:
    credentials = validate_login(payload)

    try:
        user = store.find_by_email(credentials.email)
        if user is None:
            security.verify_password(credentials.password, _dummy_hash())
            valid = False
        else:
            valid = security.verify_password(credentials.password, user.password_hash)
    except (HashingError, StoreError):
        logger.exception("Login failed for %s", credentials.email)
        raise InternalError()

    if not valid:
        logger.warning("Invalid login attempt for %s", credentials.email)
        raise AuthenticationError()

    try:
        token = security.create_token(user.id)
    except Exception:
        logger.exception("Could not sign token for user %s", user.id)
        raise InternalError()

    logger.info("Login: %s (%s)", user.user_name, user.id)
    return {"data": token, "message": LOGGED_IN}
