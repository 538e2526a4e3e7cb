"""Auth repository interface."""

from abc import ABC, abstractmethod

from clean_auth.domain.entities.user import User


class AuthRepository(ABC):
    """Repository interface for remote authentication.

    Implementations check credentials against an identity provider and
    build a ``User`` on success. Callers depend only on this contract, so
    the mock backend and a real HTTP client are interchangeable.
    """

    @abstractmethod
    async def login(self, email: str, password: str) -> User:
        """Authenticate credentials remotely.

        Args:
            email: Account email, passed through unchanged
            password: Account password

        Returns:
            Authenticated User

        Raises:
            GatewayError: If the remote check fails for any reason
        """
        pass

    async def close(self) -> None:
        """Release any held resources."""
        pass
