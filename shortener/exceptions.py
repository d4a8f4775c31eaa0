"""Auth Service — error taxonomy.

Every failure that reaches the HTTP layer is one of the four
``AuthServiceError`` kinds below. ``HashingError`` and ``StoreError`` are
raised by collaborators and never leave the flows unmapped.
"""

INVALID_CREDENTIALS = "Invalid email or password"
INTERNAL_ERROR = "Internal server error"
ALREADY_REGISTERED = "User already registered"


class AuthServiceError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AuthServiceError):
    status_code = 400


class ConflictError(AuthServiceError):
    status_code = 409

    def __init__(self, message: str = ALREADY_REGISTERED):
        super().__init__(message)


class AuthenticationError(AuthServiceError):
    status_code = 401

    def __init__(self):
        super().__init__(INVALID_CREDENTIALS)


class InternalError(AuthServiceError):
    status_code = 500

    def __init__(self):
        super().__init__(INTERNAL_ERROR)


class HashingError(Exception):
    """bcrypt could not hash or check a password (e.g. malformed digest)."""


class StoreError(Exception):
    """The user store failed for a reason other than a uniqueness violation."""


class DuplicateUserError(StoreError):
    """A write hit the unique constraint on email or user name."""
