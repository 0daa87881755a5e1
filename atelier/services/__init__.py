"""Service layer modules."""

from atelier.services import (
    auth_service,
    curated_calls,
    open_call_service,
    ownership_service,
    recommendation,
)

__all__ = [
    "auth_service",
    "curated_calls",
    "open_call_service",
    "ownership_service",
    "recommendation",
]
