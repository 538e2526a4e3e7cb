"""Repository contracts."""

from clean_auth.domain.repositories.auth_repository import AuthRepository

__all__ = ["AuthRepository"]
