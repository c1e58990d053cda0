"""Core link logic for the ito URL shortener."""

from .resolver import RedirectResolver
from .manager import LinkManager

__all__ = ["RedirectResolver", "LinkManager"]
