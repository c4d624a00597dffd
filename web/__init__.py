"""Flask JSON API running the search over the example games."""

from .app import create_app

__all__ = ["create_app"]
