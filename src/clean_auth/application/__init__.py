"""Application Layer - composition of the login flow."""

from clean_auth.application.container import DependencyContainer

__all__ = ["DependencyContainer"]
