"""Middleware for the ito web app."""

from .logging import LoggingMiddleware

__all__ = ["LoggingMiddleware"]
