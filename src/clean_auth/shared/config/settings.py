"""Application settings using Pydantic."""

from functools import lru_cache
from typing import Any

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class AuthSettings(BaseSettings):
    """Authentication backend settings."""
    model_config = SettingsConfigDict(env_prefix="AUTH_")

    backend: str = "mock"
    base_url: str = "http://localhost:8000"
    login_path: str = "/auth/login"
    api_key: SecretStr | None = None
    timeout: float = 10.0
    min_password_length: int = Field(default=6, ge=0)
    simulated_latency_ms: int = Field(default=0, ge=0)
    mock_token: str = "mock_jwt_token"


class LoggingSettings(BaseSettings):
    """Logging settings."""
    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    console_colored: bool = True


class WebSettings(BaseSettings):
    """Web interface settings."""
    model_config = SettingsConfigDict(env_prefix="WEB_")

    host: str = "0.0.0.0"
    port: int = 8080


class Settings(BaseSettings):
    """Main application settings."""
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore"
    )

    # Application info
    app_name: str = "Clean-Auth"
    app_version: str = "1.0.0"
    debug: bool = False

    # Sub-settings
    auth: AuthSettings = Field(default_factory=AuthSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    web: WebSettings = Field(default_factory=WebSettings)

    def get_auth_config(self) -> dict[str, Any]:
        """Get auth configuration as dictionary, with secrets masked."""
        return {
            "backend": self.auth.backend,
            "base_url": self.auth.base_url,
            "login_path": self.auth.login_path,
            "api_key": "********" if self.auth.api_key else None,
            "timeout": self.auth.timeout,
            "min_password_length": self.auth.min_password_length,
            "simulated_latency_ms": self.auth.simulated_latency_ms,
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
