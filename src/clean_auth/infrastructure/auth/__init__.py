"""Auth repository implementations."""

from clean_auth.infrastructure.auth.factory import AuthBackendType, AuthRepositoryFactory
from clean_auth.infrastructure.auth.http_repository import HttpAuthRepository
from clean_auth.infrastructure.auth.mock_repository import MockAuthRepository

__all__ = [
    "AuthBackendType",
    "AuthRepositoryFactory",
    "HttpAuthRepository",
    "MockAuthRepository",
]
