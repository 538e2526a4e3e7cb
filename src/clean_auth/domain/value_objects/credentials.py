"""Credentials value object."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Credentials:
    """Immutable email/password pair for a single login attempt.

    Created per attempt and never persisted. The password is kept out of
    ``repr`` so credentials can be logged safely.
    """

    email: str
    password: str = field(repr=False)

    @property
    def masked_password(self) -> str:
        """Get the password as a row of asterisks."""
        return "*" * len(self.password)

    def __str__(self) -> str:
        return f"Credentials({self.email}, {self.masked_password})"
