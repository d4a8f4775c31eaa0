"""
Auth Service — configuration.

Values come from the process environment. A ``.env`` file at the repo root
is loaded first; variables already set in the environment take precedence.
"""

import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv(os.path.join(os.path.dirname(__file__), "..", ".env"))


def require_env(name: str) -> str:
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"{name} environment variable is not set. Add it to your .env file.")
    return value


def int_env(name: str, default: int, minimum: Optional[int] = None, maximum: Optional[int] = None) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}")
    if minimum is not None and value < minimum:
        raise RuntimeError(f"{name} must be >= {minimum}, got {value}")
    if maximum is not None and value > maximum:
        raise RuntimeError(f"{name} must be <= {maximum}, got {value}")
    return value


# ── Settings ──────────────────────────────────────────────────────────────────
SECRET_KEY = require_env("SECRET_KEY")

DATABASE_URL = os.getenv(
    "DB", f"sqlite:///{os.path.join(os.path.dirname(__file__), 'shortener.db')}"
)

# bcrypt cost factor; bcrypt itself only accepts 4..31
SALT = int_env("SALT", 10, minimum=4, maximum=31)

TOKEN_EXPIRY_SECONDS = int_env("TOKEN_EXPIRY_SECONDS", 7 * 60 * 60, minimum=1)

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int_env("PORT", 5000, minimum=1, maximum=65535)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
