"""Login error taxonomy."""

from enum import Enum


class LoginErrorKind(Enum):
    """Reason a login attempt failed."""
    INVALID_PASSWORD = "invalid_password"
    GATEWAY = "gateway"


class LoginError(Exception):
    """Base class for all login failures.

    Every failure carries a ``kind`` so display surfaces can tell a local
    validation problem apart from a remote authentication problem, and a
    human-readable ``message``.
    """

    kind: LoginErrorKind = LoginErrorKind.GATEWAY

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidPasswordError(LoginError):
    """Password rejected by local validation, never sent to the gateway."""

    kind = LoginErrorKind.INVALID_PASSWORD

    def __init__(self, min_length: int):
        super().__init__(f"Password must be at least {min_length} characters")
        self.min_length = min_length


class GatewayError(LoginError):
    """Remote authentication failed (network, server or credential error)."""

    kind = LoginErrorKind.GATEWAY

    def __init__(
        self,
        reason: str = "",
        status_code: int | None = None,
        message: str = "Authentication failed",
    ):
        super().__init__(message)
        self.reason = reason
        self.status_code = status_code

    def __str__(self) -> str:
        if self.reason:
            return f"{self.message}: {self.reason}"
        return self.message
