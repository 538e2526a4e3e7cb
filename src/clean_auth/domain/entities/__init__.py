"""Domain entities."""

from clean_auth.domain.entities.login_state import LoginState, LoginStatus
from clean_auth.domain.entities.user import User

__all__ = ["LoginState", "LoginStatus", "User"]
