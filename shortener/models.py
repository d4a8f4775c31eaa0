"""Auth Service — request/response models and payload validation."""

import re
from typing import Annotated, Any, Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ValidationError
from .security import MAX_PASSWORD_BYTES

PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 26

# Names shown to the client in validation messages
LABELS = {"userName": "Username", "email": "email", "password": "Password"}


def check_email(value: str) -> str:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        raise ValueError(f'"{LABELS["email"]}" must be a valid email')
    return value


def check_password_complexity(value: str) -> str:
    label = LABELS["password"]
    if value == "":
        raise ValueError(f'"{label}" is not allowed to be empty')
    if len(value) < PASSWORD_MIN_LENGTH:
        raise ValueError(f'"{label}" should be at least {PASSWORD_MIN_LENGTH} characters long')
    if len(value) > PASSWORD_MAX_LENGTH:
        raise ValueError(f'"{label}" should not be longer than {PASSWORD_MAX_LENGTH} characters')
    if len(value.encode()) > MAX_PASSWORD_BYTES:
        raise ValueError(f'"{label}" should not be longer than {MAX_PASSWORD_BYTES} bytes')
    if not re.search(r"[a-z]", value):
        raise ValueError(f'"{label}" should contain at least 1 lower-cased letter')
    if not re.search(r"[A-Z]", value):
        raise ValueError(f'"{label}" should contain at least 1 upper-cased letter')
    if not re.search(r"[0-9]", value):
        raise ValueError(f'"{label}" should contain at least 1 number')
    if not re.search(r"[^A-Za-z0-9]", value):
        raise ValueError(f'"{label}" should contain at least 1 symbol')
    return value


UserName = Annotated[str, Field(min_length=3, max_length=255)]
Email = Annotated[str, Field(min_length=3, max_length=255), AfterValidator(check_email)]
Password = Annotated[str, AfterValidator(check_password_complexity)]


class RegisterRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    userName: UserName
    email: Email
    password: Password


class LoginRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    userName: Optional[UserName] = None
    email: Email
    # complexity is only enforced at registration
    password: Annotated[str, Field(min_length=1)]


class RegisterResponse(BaseModel):
    message: str


class LoginResponse(BaseModel):
    data: str
    message: str


class MessageResponse(BaseModel):
    message: str


# ── Validation ────────────────────────────────────────────────────────────────

def _describe(error: dict) -> str:
    """Turn a pydantic error into a single client-facing sentence."""
    loc = error.get("loc") or ()
    field = str(loc[0]) if loc else "value"
    label = LABELS.get(field, field)
    ctx = error.get("ctx") or {}
    kind = error["type"]

    if kind in ("model_type", "model_attributes_type", "dict_type"):
        return '"value" must be of type object'
    if kind == "missing":
        return f'"{label}" is required'
    if kind == "extra_forbidden":
        return f'"{field}" is not allowed'
    if kind == "string_type":
        return f'"{label}" must be a string'
    if kind == "string_too_short":
        if error.get("input") == "":
            return f'"{label}" is not allowed to be empty'
        return f'"{label}" length must be at least {ctx["min_length"]} characters long'
    if kind == "string_too_long":
        return f'"{label}" length must be less than or equal to {ctx["max_length"]} characters long'
    if kind == "value_error" and "error" in ctx:
        return str(ctx["error"])
    return f'"{label}" is invalid'


def _validate(model, payload: Any):
    try:
        return model.model_validate(payload)
    except PydanticValidationError as exc:
        # only the first violation is reported
        raise ValidationError(_describe(exc.errors()[0]))


def validate_registration(payload: Any) -> RegisterRequest:
    return _validate(RegisterRequest, payload)


def validate_login(payload: Any) -> LoginRequest:
    return _validate(LoginRequest, payload)
