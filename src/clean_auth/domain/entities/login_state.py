"""Login state machine states."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from clean_auth.domain.entities.user import User
from clean_auth.domain.errors import LoginErrorKind


class LoginStatus(Enum):
    """Login progress status."""
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class LoginState:
    """Immutable snapshot of the login screen state.

    Exactly one status holds at a time. A ``SUCCESS`` state always carries
    a user, a ``FAILED`` state always carries an error kind and message,
    and ``IDLE``/``LOADING`` carry neither.
    """

    status: LoginStatus = LoginStatus.IDLE
    user: User | None = None
    error_kind: LoginErrorKind | None = None
    message: str | None = None

    def __post_init__(self) -> None:
        """Validate payload against status."""
        if self.status == LoginStatus.SUCCESS:
            if self.user is None:
                raise ValueError("Success state requires a user")
            if self.error_kind is not None or self.message is not None:
                raise ValueError("Success state cannot carry an error")
        elif self.status == LoginStatus.FAILED:
            if self.error_kind is None or not self.message:
                raise ValueError("Failed state requires an error kind and message")
            if self.user is not None:
                raise ValueError("Failed state cannot carry a user")
        elif self.user is not None or self.error_kind is not None or self.message is not None:
            raise ValueError(f"{self.status.value} state cannot carry a payload")

    @classmethod
    def idle(cls) -> "LoginState":
        """Create the initial state."""
        return cls(status=LoginStatus.IDLE)

    @classmethod
    def loading(cls) -> "LoginState":
        """Create a loading state."""
        return cls(status=LoginStatus.LOADING)

    @classmethod
    def success(cls, user: User) -> "LoginState":
        """Create a logged-in state."""
        return cls(status=LoginStatus.SUCCESS, user=user)

    @classmethod
    def failed(cls, error_kind: LoginErrorKind, message: str) -> "LoginState":
        """Create a failure state."""
        return cls(status=LoginStatus.FAILED, error_kind=error_kind, message=message)

    @property
    def is_loading(self) -> bool:
        """Check if a login attempt is in flight."""
        return self.status == LoginStatus.LOADING

    @property
    def is_logged_in(self) -> bool:
        """Check if login succeeded."""
        return self.status == LoginStatus.SUCCESS

    @property
    def error_message(self) -> str | None:
        """Get the failure message, if any."""
        return self.message if self.status == LoginStatus.FAILED else None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary format."""
        return {
            "status": self.status.value,
            "user": self.user.to_dict() if self.user else None,
            "error_kind": self.error_kind.value if self.error_kind else None,
            "message": self.message,
        }

    def __str__(self) -> str:
        if self.status == LoginStatus.SUCCESS:
            return f"LoginState(success, {self.user.email})"
        if self.status == LoginStatus.FAILED:
            return f"LoginState(failed, {self.error_kind.value}: {self.message})"
        return f"LoginState({self.status.value})"
