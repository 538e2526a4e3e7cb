"""Mock auth repository that always succeeds."""

import asyncio
import logging

from clean_auth.domain.entities.user import User
from clean_auth.domain.repositories.auth_repository import AuthRepository

logger = logging.getLogger("clean_auth.auth")

MOCK_TOKEN = "mock_jwt_token"


class MockAuthRepository(AuthRepository):
    """Stand-in for a remote identity provider.

    Accepts any credentials and returns a user with a fresh id, the email
    unchanged and a placeholder token. An optional latency simulates the
    round trip of a real call.
    """

    def __init__(self, token: str = MOCK_TOKEN, simulated_latency_ms: int = 0):
        self.token = token
        self.simulated_latency_ms = simulated_latency_ms

    async def login(self, email: str, password: str) -> User:
        if self.simulated_latency_ms > 0:
            await asyncio.sleep(self.simulated_latency_ms / 1000)

        user = User(email=email, token=self.token)
        logger.debug("[Mock] Authenticated %s as %s", email, user.id)
        return user
