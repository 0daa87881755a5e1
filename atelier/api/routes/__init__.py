"""API routes."""

from atelier.api.routes import auth, open_calls

__all__ = ["auth", "open_calls"]
