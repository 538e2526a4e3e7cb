"""Login Orchestrator - Drives the login state machine."""

import asyncio
import logging
from collections.abc import Callable

from clean_auth.domain.entities.login_state import LoginState
from clean_auth.domain.entities.user import User
from clean_auth.domain.errors import GatewayError, LoginError, LoginErrorKind
from clean_auth.domain.repositories.auth_repository import AuthRepository
from clean_auth.domain.services.credential_validator import CredentialValidator
from clean_auth.domain.value_objects.credentials import Credentials

logger = logging.getLogger("clean_auth.login")

StateListener = Callable[[LoginState], None]


class LoginOrchestrator:
    """Coordinates credential validation and remote authentication.

    The orchestrator owns a single ``LoginState`` and moves it through
    idle -> loading -> success/failed on each ``submit``:
    1. Validator - rejects bad passwords locally, without a remote call
    2. Repository - authenticates accepted credentials remotely

    Every transition is pushed to subscribed listeners. A ``submit`` that
    arrives while a previous attempt is still loading is rejected and
    leaves the state untouched.
    """

    def __init__(self, validator: CredentialValidator, repository: AuthRepository):
        self.validator = validator
        self.repository = repository
        self._state = LoginState.idle()
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> LoginState:
        """Get current login state."""
        return self._state

    @property
    def user(self) -> User | None:
        """Get the logged-in user, if any."""
        return self._state.user

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener called after every state change.

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def submit(self, email: str, password: str) -> LoginState:
        """Run a login attempt.

        Never raises: every failure ends in a ``FAILED`` state. If the
        attempt is cancelled the state still moves to ``FAILED`` before the
        cancellation propagates.

        Args:
            email: Account email
            password: Account password

        Returns:
            The state reached by this attempt, or the current ``LOADING``
            state if another attempt is already in flight
        """
        if self._state.is_loading:
            logger.warning("Login already in progress, ignoring submit for %s", email)
            return self._state

        credentials = Credentials(email=email, password=password)
        self._transition(LoginState.loading())
        logger.info("Login attempt started for %s", credentials.email)

        try:
            self.validator.validate(credentials.password)
            user = await self.repository.login(credentials.email, credentials.password)
        except asyncio.CancelledError:
            logger.warning("Login attempt for %s was cancelled", email)
            self._transition(LoginState.failed(LoginErrorKind.GATEWAY, "Login cancelled"))
            raise
        except LoginError as e:
            logger.info("Login failed (%s): %s", e.kind.value, e)
            self._transition(LoginState.failed(e.kind, e.message or GatewayError().message))
        except Exception:
            logger.exception("Unexpected error during login for %s", email)
            self._transition(LoginState.failed(LoginErrorKind.GATEWAY, GatewayError().message))
        else:
            logger.info("Logged in user: %s", user.email)
            self._transition(LoginState.success(user))

        return self._state

    def reset(self) -> LoginState:
        """Return to the idle state, e.g. on logout.

        Has no effect while an attempt is loading.
        """
        if self._state.is_loading:
            logger.warning("Cannot reset while login is in progress")
        elif self._state != LoginState.idle():
            self._transition(LoginState.idle())
        return self._state

    def _transition(self, new_state: LoginState) -> None:
        self._state = new_state
        for listener in list(self._listeners):
            try:
                listener(new_state)
            except Exception:
                logger.exception("State listener %r failed", listener)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(state={self._state.status.value})"
