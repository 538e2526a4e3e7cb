"""Auth repository factory."""

from collections.abc import Callable
from enum import Enum

from clean_auth.domain.repositories.auth_repository import AuthRepository
from clean_auth.infrastructure.auth.http_repository import HttpAuthRepository
from clean_auth.infrastructure.auth.mock_repository import MockAuthRepository
from clean_auth.shared.config.settings import AuthSettings


class AuthBackendType(Enum):
    """Supported auth backends."""
    MOCK = "mock"
    HTTP = "http"


def _create_mock(settings: AuthSettings) -> AuthRepository:
    return MockAuthRepository(
        token=settings.mock_token,
        simulated_latency_ms=settings.simulated_latency_ms,
    )


def _create_http(settings: AuthSettings) -> AuthRepository:
    return HttpAuthRepository(
        base_url=settings.base_url,
        login_path=settings.login_path,
        api_key=settings.api_key.get_secret_value() if settings.api_key else None,
        timeout=settings.timeout,
    )


class AuthRepositoryFactory:
    """Factory for creating auth repositories from settings.

    Each backend type maps to a builder taking ``AuthSettings``; new
    backends can be added at runtime with ``register_backend``.
    """

    _builders: dict[AuthBackendType, Callable[[AuthSettings], AuthRepository]] = {
        AuthBackendType.MOCK: _create_mock,
        AuthBackendType.HTTP: _create_http,
    }

    @classmethod
    def create(cls, settings: AuthSettings) -> AuthRepository:
        """Create an auth repository from settings.

        Args:
            settings: Auth settings

        Returns:
            Configured AuthRepository instance

        Raises:
            ValueError: If the backend is not supported
        """
        try:
            backend = AuthBackendType(settings.backend.lower())
        except ValueError:
            backend = None

        builder = cls._builders.get(backend)
        if not builder:
            raise ValueError(
                f"Unsupported auth backend: {settings.backend}. "
                f"Supported backends: {cls.get_supported_backends()}"
            )
        return builder(settings)

    @classmethod
    def register_backend(
        cls,
        backend: AuthBackendType,
        builder: Callable[[AuthSettings], AuthRepository]
    ) -> None:
        """Register a builder for a backend type.

        Args:
            backend: Backend type enum value
            builder: Callable taking AuthSettings and returning an AuthRepository
        """
        cls._builders[backend] = builder

    @classmethod
    def get_supported_backends(cls) -> list[str]:
        """Get list of supported backend names."""
        return [b.value for b in cls._builders.keys()]
