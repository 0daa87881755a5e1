"""Request authentication.

Every authenticated endpoint resolves its principal through these
dependencies, which read the ``Authorization: Bearer <token>`` header and
delegate to ``auth_service.resolve_session_user``.

Queries depend on ``get_optional_user`` and return an empty result for
anonymous callers; mutations depend on ``get_current_user``, which raises
``NotAuthenticatedError``. Neither distinguishes a missing token from an
unknown or expired one.
"""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from atelier.core.database import get_session
from atelier.core.exceptions import NotAuthenticatedError
from atelier.models.user import User
from atelier.services import auth_service

# auto_error=False so anonymous requests reach the endpoint
bearer_scheme = HTTPBearer(auto_error=False)


def get_bearer_token(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> str | None:
    """Raw bearer token from the request, if any."""
    return credentials.credentials if credentials else None


async def get_optional_user(
    token: Annotated[str | None, Depends(get_bearer_token)],
    db: Annotated[AsyncSession, Depends(get_session)],
) -> User | None:
    """Authenticated user, or None for anonymous/invalid sessions."""
    return await auth_service.resolve_session_user(db, token)


async def get_current_user(
    user: Annotated[User | None, Depends(get_optional_user)],
) -> User:
    """Authenticated user; raises for anonymous/invalid sessions."""
    if user is None:
        raise NotAuthenticatedError()
    return user


# Type aliases for FastAPI dependencies
BearerToken = Annotated[str | None, Depends(get_bearer_token)]
OptionalUser = Annotated[User | None, Depends(get_optional_user)]
CurrentUser = Annotated[User, Depends(get_current_user)]
