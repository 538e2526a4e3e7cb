"""Web API for Clean-Auth."""

import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from clean_auth.application.container import DependencyContainer
from clean_auth.domain.entities.login_state import LoginState
from clean_auth.shared.config.settings import get_settings
from clean_auth.shared.logging import setup_logging

logger = logging.getLogger("clean_auth.api")


# Request and response models
class LoginRequest(BaseModel):
    email: str
    password: str


class LoginStateResponse(BaseModel):
    status: str
    user: dict[str, str] | None = None
    error_kind: str | None = None
    message: str | None = None

    @classmethod
    def from_state(cls, state: LoginState) -> "LoginStateResponse":
        return cls(**state.to_dict())


def create_app(container: DependencyContainer) -> FastAPI:
    """Create the API application around one login orchestrator.

    Args:
        container: Wired dependencies; the app owns a fresh orchestrator

    Returns:
        Configured FastAPI app
    """
    orchestrator = container.make_login_orchestrator()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("[Web] Clean-Auth API started (backend=%s)", container.settings.auth.backend)
        yield
        await container.close()
        logger.info("[Web] Clean-Auth API stopped")

    app = FastAPI(
        title="Clean-Auth API",
        description="Layered login flow",
        version=container.settings.app_version,
        lifespan=lifespan,
    )
    app.state.orchestrator = orchestrator

    @app.get("/health")
    async def health() -> dict[str, Any]:
        return {"status": "ok", "backend": container.settings.auth.backend}

    @app.get("/api/state", response_model=LoginStateResponse)
    async def get_state():
        """Return the current login state."""
        return LoginStateResponse.from_state(orchestrator.state)

    @app.post("/api/login", response_model=LoginStateResponse)
    async def login(request: LoginRequest):
        """Run a login attempt and return the resulting state."""
        if orchestrator.state.is_loading:
            raise HTTPException(status_code=409, detail="Login already in progress")
        state = await orchestrator.submit(request.email, request.password)
        return LoginStateResponse.from_state(state)

    @app.post("/api/logout", response_model=LoginStateResponse)
    async def logout():
        """Reset the login state to idle."""
        if orchestrator.state.is_loading:
            raise HTTPException(status_code=409, detail="Login already in progress")
        return LoginStateResponse.from_state(orchestrator.reset())

    return app


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    setup_logging(settings.logging)
    print(f"Clean-Auth API: http://localhost:{settings.web.port}")
    uvicorn.run(create_app(DependencyContainer(settings)), host=settings.web.host, port=settings.web.port)
