"""
Clean-Auth - Layered login flow

A small login system split into clean-architecture layers:
- Domain: user, login state machine, credential validation
- Infrastructure: mock and HTTP authentication backends
- Application: explicit dependency wiring
- Presentation: rich CLI and FastAPI display surfaces
"""

__version__ = "1.0.0"
__license__ = "MIT"

from clean_auth.domain.entities.login_state import LoginState, LoginStatus
from clean_auth.domain.entities.user import User
from clean_auth.domain.errors import GatewayError, InvalidPasswordError, LoginError, LoginErrorKind
from clean_auth.domain.repositories.auth_repository import AuthRepository
from clean_auth.domain.services.credential_validator import PasswordLengthValidator, validate_password
from clean_auth.domain.services.login_orchestrator import LoginOrchestrator

__all__ = [
    "AuthRepository",
    "GatewayError",
    "InvalidPasswordError",
    "LoginError",
    "LoginErrorKind",
    "LoginOrchestrator",
    "LoginState",
    "LoginStatus",
    "PasswordLengthValidator",
    "User",
    "validate_password",
]
