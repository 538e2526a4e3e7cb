"""User entity produced by a successful authentication."""

import uuid
from dataclasses import dataclass, field


@dataclass(frozen=True)
class User:
    """Authenticated user.

    Created by an auth repository on successful login and held by the
    login orchestrator for the rest of the process lifetime.
    """

    email: str
    token: str = field(repr=False)
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @property
    def display_name(self) -> str:
        """Get a friendly name from the local part of the email.

        ``"jane.doe@example.com"`` becomes ``"Jane.Doe"``; an email without a
        usable local part falls back to ``"User"``.
        """
        local_part = self.email.split("@", 1)[0]
        if not local_part:
            return "User"
        return local_part.title()

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary format."""
        return {
            "id": self.id,
            "email": self.email,
            "token": self.token,
        }

    def __str__(self) -> str:
        return f"User({self.email}, id={self.id})"
