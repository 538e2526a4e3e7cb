"""Domain services for the login flow."""

from clean_auth.domain.services.credential_validator import (
    MIN_PASSWORD_LENGTH,
    CredentialValidator,
    PasswordLengthValidator,
    validate_password,
)
from clean_auth.domain.services.login_orchestrator import LoginOrchestrator

__all__ = [
    "MIN_PASSWORD_LENGTH",
    "CredentialValidator",
    "PasswordLengthValidator",
    "validate_password",
    "LoginOrchestrator",
]
