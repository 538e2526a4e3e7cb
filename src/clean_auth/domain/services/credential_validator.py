"""Credential validation rules."""

from abc import ABC, abstractmethod

from clean_auth.domain.errors import InvalidPasswordError

MIN_PASSWORD_LENGTH = 6


class CredentialValidator(ABC):
    """Local check run before any remote authentication."""

    @abstractmethod
    def validate(self, password: str) -> None:
        """Validate a password.

        Raises:
            InvalidPasswordError: If the password is not acceptable
        """
        pass


class PasswordLengthValidator(CredentialValidator):
    """Rejects passwords shorter than ``min_length``; nothing else is checked."""

    def __init__(self, min_length: int = MIN_PASSWORD_LENGTH):
        if min_length < 0:
            raise ValueError("Minimum password length must be non-negative")
        self.min_length = min_length

    def validate(self, password: str) -> None:
        if len(password) < self.min_length:
            raise InvalidPasswordError(self.min_length)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(min_length={self.min_length})"


def validate_password(password: str) -> None:
    """Validate a password against the default length rule."""
    PasswordLengthValidator().validate(password)
