"""HTTP auth repository backed by a remote identity API."""

import logging
from typing import Any

import httpx

from clean_auth.domain.entities.user import User
from clean_auth.domain.errors import GatewayError
from clean_auth.domain.repositories.auth_repository import AuthRepository

logger = logging.getLogger("clean_auth.auth")


class HttpAuthRepository(AuthRepository):
    """Auth repository that posts credentials to a remote login endpoint.

    Expects ``POST {base_url}{login_path}`` with a JSON body of
    ``{"email", "password"}`` to answer 2xx with ``{"id", "token"}`` and
    optionally ``"email"``. Every transport, status or payload problem is
    raised as ``GatewayError``.
    """

    def __init__(
        self,
        base_url: str,
        login_path: str = "/auth/login",
        api_key: str | None = None,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.login_path = login_path
        self.api_key = api_key
        self.timeout = timeout
        self._client = client
        self._owns_client = client is None

    def _get_headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=httpx.Timeout(self.timeout))
        return self._client

    async def login(self, email: str, password: str) -> User:
        client = self._get_client()
        url = f"{self.base_url}{self.login_path}"
        logger.info("[HTTP] Login request for %s -> %s", email, url)

        try:
            response = await client.post(
                url,
                json={"email": email, "password": password},
                headers=self._get_headers(),
            )
        except httpx.TimeoutException as e:
            raise GatewayError(reason=f"request timed out: {e}") from e
        except httpx.HTTPError as e:
            raise GatewayError(reason=f"connection failed: {e}") from e

        if response.status_code in (401, 403):
            raise GatewayError(reason="invalid credentials", status_code=response.status_code)
        if response.status_code >= 400:
            raise GatewayError(
                reason=f"server responded {response.status_code}",
                status_code=response.status_code,
            )

        return self._parse_user(response, email)

    def _parse_user(self, response: httpx.Response, email: str) -> User:
        try:
            data: Any = response.json()
        except ValueError as e:
            raise GatewayError(reason="response is not valid JSON", status_code=response.status_code) from e

        if not isinstance(data, dict) or not data.get("id") or not data.get("token"):
            raise GatewayError(reason="response is missing id or token", status_code=response.status_code)

        server_email = data.get("email")
        if server_email is not None and not isinstance(server_email, str):
            raise GatewayError(reason="malformed email", status_code=response.status_code)

        return User(
            id=str(data["id"]),
            email=server_email or email,
            token=str(data["token"]),
        )

    async def close(self) -> None:
        """Close the HTTP client if this repository created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
