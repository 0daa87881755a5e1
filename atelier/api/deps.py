"""API dependencies.

``DBSession`` resolves to the same ``get_session`` dependency the auth
dependencies use, so within one request the principal and the route share a
single ``AsyncSession`` (FastAPI caches dependencies per request).
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from atelier.core.auth import BearerToken, CurrentUser, OptionalUser
from atelier.core.database import get_session

# Database dependency
DBSession = Annotated[AsyncSession, Depends(get_session)]

__all__ = ["BearerToken", "CurrentUser", "DBSession", "OptionalUser"]
