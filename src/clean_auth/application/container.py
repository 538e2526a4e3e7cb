"""Dependency container wiring the login flow together."""

from clean_auth.domain.repositories.auth_repository import AuthRepository
from clean_auth.domain.services.credential_validator import (
    CredentialValidator,
    PasswordLengthValidator,
)
from clean_auth.domain.services.login_orchestrator import LoginOrchestrator
from clean_auth.infrastructure.auth.factory import AuthRepositoryFactory
from clean_auth.shared.config.settings import Settings


class DependencyContainer:
    """Builds the validator, repository and orchestrator from settings.

    Everything is passed in through constructors; the container itself is
    created by the entry points and handed to whatever needs it. Explicit
    ``validator``/``repository`` arguments override the settings-driven
    defaults, which is how tests swap in doubles.
    """

    def __init__(
        self,
        settings: Settings,
        validator: CredentialValidator | None = None,
        repository: AuthRepository | None = None,
    ):
        self.settings = settings
        self.validator = validator or PasswordLengthValidator(settings.auth.min_password_length)
        self.repository = repository or AuthRepositoryFactory.create(settings.auth)

    def make_login_orchestrator(self) -> LoginOrchestrator:
        """Create a fresh orchestrator in the idle state."""
        return LoginOrchestrator(validator=self.validator, repository=self.repository)

    async def close(self) -> None:
        """Release repository resources."""
        await self.repository.close()
