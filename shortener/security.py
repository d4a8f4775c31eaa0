"""
Auth Service — password hashing and token issuance.

bcrypt for passwords (random salt per call, cost from ``SALT``),
HS256 JWTs signed with ``SECRET_KEY`` for login tokens.
"""

import time
from typing import Optional

import bcrypt
import jwt

from . import config
from .exceptions import HashingError

# bcrypt only looks at the first 72 bytes and newer releases refuse longer input
MAX_PASSWORD_BYTES = 72


def hash_password(password: str, rounds: Optional[int] = None) -> str:
    """bcrypt hash with a fresh salt; equal inputs never share a digest."""
    try:
        salt = bcrypt.gensalt(rounds=config.SALT if rounds is None else rounds)
        return bcrypt.hashpw(password.encode(), salt).decode()
    except (ValueError, TypeError) as exc:
        raise HashingError(str(exc)) from exc


def verify_password(password: str, hashed: str) -> bool:
    """
    True when ``password`` matches ``hashed``.

    A digest bcrypt cannot parse raises ``HashingError`` instead of
    returning False, so callers can tell a broken record from a wrong
    password. Passwords over ``MAX_PASSWORD_BYTES`` can never have been
    stored, so they are checked (truncated) and then always rejected.
    """
    encoded = password.encode()
    try:
        matched = bcrypt.checkpw(encoded[:MAX_PASSWORD_BYTES], hashed.encode())
    except (ValueError, TypeError) as exc:
        raise HashingError(str(exc)) from exc
    return matched and len(encoded) <= MAX_PASSWORD_BYTES


def create_token(user_id: str) -> str:
    now = int(time.time())
    payload = {
        "user_id": user_id,
        "iat": now,
        "exp": now + config.TOKEN_EXPIRY_SECONDS,
    }
    return jwt.encode(payload, config.SECRET_KEY, algorithm="HS256")
