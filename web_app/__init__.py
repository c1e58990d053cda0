"""Web application for the ito link service."""

from .app_factory import create_app

__all__ = ["create_app"]
