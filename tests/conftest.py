"""Shared fixtures."""

from unittest.mock import AsyncMock

import pytest

from clean_auth.domain.entities.user import User
from clean_auth.domain.repositories.auth_repository import AuthRepository
from clean_auth.domain.services.credential_validator import PasswordLengthValidator
from clean_auth.domain.services.login_orchestrator import LoginOrchestrator
from clean_auth.infrastructure.auth.mock_repository import MockAuthRepository
from clean_auth.shared.config.settings import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate tests from the caller's environment and the settings cache."""
    for var in ("AUTH_BACKEND", "AUTH_MIN_PASSWORD_LENGTH", "AUTH_SIMULATED_LATENCY_MS", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("LOG_CONSOLE_COLORED", "false")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def validator():
    return PasswordLengthValidator()


@pytest.fixture
def mock_repository():
    return MockAuthRepository()


@pytest.fixture
def spy_repository():
    """Repository double recording calls and returning a fixed user."""
    repository = AsyncMock(spec=AuthRepository)
    repository.login.side_effect = lambda email, password: User(email=email, token="t")
    return repository


@pytest.fixture
def orchestrator(validator, mock_repository):
    return LoginOrchestrator(validator=validator, repository=mock_repository)


@pytest.fixture
def recorded_states(orchestrator):
    """States pushed to a listener, in order."""
    states = []
    orchestrator.subscribe(states.append)
    return states
