"""HTTP boundary for smolurl."""

from .app_factory import create_app

__all__ = ["create_app"]
