"""Authentication service: signup, login, sessions and password changes.

All operations take the database session explicitly and flush but do not
commit; the request-scoped ``get_db_session`` context manager commits.
"""

import re
from dataclasses import dataclass
from datetime import datetime, timedelta

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from atelier.core.config import get_settings
from atelier.core.database import utcnow
from atelier.core.exceptions import (
    AuthenticationError,
    ConflictError,
    NotAuthenticatedError,
    ValidationError,
)
from atelier.core.logging import get_logger
from atelier.core.security import (
    generate_session_token,
    hash_password,
    hash_token,
    verify_password,
)
from atelier.models.session import Session
from atelier.models.user import User
from atelier.schemas.auth import ArtistProfile

logger = get_logger(__name__)
settings = get_settings()

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

# One message for unknown email and wrong password
INVALID_CREDENTIALS = "Invalid email or password"


@dataclass
class AuthResult:
    """Outcome of signup/login. ``session_token`` is the only copy of the raw token."""

    session_token: str
    expires_at: datetime
    user: User


def _normalize_email(email: str) -> str:
    return email.lower()


async def _find_user_by_email(db: AsyncSession, email: str) -> User | None:
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def _find_session(db: AsyncSession, token: str) -> Session | None:
    result = await db.execute(select(Session).where(Session.token_hash == hash_token(token)))
    return result.scalar_one_or_none()


async def _resolve_active_session(
    db: AsyncSession, token: str | None, now: datetime | None = None
) -> tuple[Session, User] | None:
    if not token:
        return None

    session = await _find_session(db, token)
    if session is None or session.expires_at < (now or utcnow()):
        return None

    user = await db.get(User, session.user_id)
    if user is None:
        logger.warning("Session references missing user", session_id=session.id)
        return None
    return session, user


async def _issue_session(db: AsyncSession, user: User) -> tuple[str, Session]:
    token = generate_session_token()
    now = utcnow()
    session = Session(
        user_id=user.id,
        token_hash=hash_token(token),
        expires_at=now + timedelta(days=settings.SESSION_TTL_DAYS),
        created_at=now,
    )
    db.add(session)
    await db.flush()
    return token, session


async def resolve_session_user(
    db: AsyncSession,
    token: str | None,
    *,
    now: datetime | None = None,
) -> User | None:
    """Resolve a bearer token to its user.

    Missing, unknown and expired tokens are indistinguishable: all return None.

    Args:
        db: Database session
        token: Raw bearer token, or None
        now: Reference time for the expiry check (defaults to current UTC)

    Returns:
        The authenticated user, or None
    """
    resolved = await _resolve_active_session(db, token, now)
    return resolved[1] if resolved else None


async def signup(db: AsyncSession, *, email: str, password: str, name: str) -> AuthResult:
    """Register a new user and open their first session."""
    if not EMAIL_PATTERN.match(email):
        raise ValidationError("Invalid email format")
    if len(password) < settings.PASSWORD_MIN_LENGTH:
        raise ValidationError(
            f"Password must be at least {settings.PASSWORD_MIN_LENGTH} characters"
        )
    if not name.strip():
        raise ValidationError("Name is required")

    email = _normalize_email(email)
    if await _find_user_by_email(db, email):
        raise ConflictError("Email already registered")

    user = User(email=email, password_hash=hash_password(password), name=name.strip())
    db.add(user)
    try:
        await db.flush()
    except IntegrityError as exc:
        # A concurrent signup won the unique index
        await db.rollback()
        raise ConflictError("Email already registered") from exc

    token, session = await _issue_session(db, user)
    logger.info("User signed up", user_id=user.id, email=email)
    return AuthResult(session_token=token, expires_at=session.expires_at, user=user)


async def login(db: AsyncSession, *, email: str, password: str) -> AuthResult:
    """Verify credentials and open a new session."""
    email = _normalize_email(email)
    user = await _find_user_by_email(db, email)
    if user is None or not verify_password(password, user.password_hash):
        logger.info("Login failed", email=email)
        raise AuthenticationError(INVALID_CREDENTIALS)

    user.last_login_at = utcnow()
    token, session = await _issue_session(db, user)
    logger.info("User logged in", user_id=user.id)
    return AuthResult(session_token=token, expires_at=session.expires_at, user=user)


async def logout(db: AsyncSession, token: str | None) -> None:
    """Delete the session for ``token``. Succeeds silently if it is already gone."""
    if not token:
        return

    session = await _find_session(db, token)
    if session is not None:
        await db.delete(session)
        await db.flush()
        logger.info("User logged out", user_id=session.user_id)


async def validate_session(db: AsyncSession, token: str | None) -> User | None:
    """Read-only session check; never raises for a missing or expired session."""
    return await resolve_session_user(db, token)


async def update_profile(
    db: AsyncSession,
    token: str | None,
    *,
    name: str | None = None,
    artist_profile: ArtistProfile | None = None,
) -> User:
    """Patch the caller's name and/or artist profile.

    ``artist_profile`` replaces the stored profile wholesale; it is not merged.
    """
    user = await resolve_session_user(db, token)
    if user is None:
        raise NotAuthenticatedError()

    if name is not None:
        if not name.strip():
            raise ValidationError("Name is required")
        user.name = name.strip()
    if artist_profile is not None:
        user.artist_profile = artist_profile.model_dump()

    await db.flush()
    logger.info("Profile updated", user_id=user.id)
    return user


async def change_password(
    db: AsyncSession,
    token: str | None,
    *,
    current_password: str,
    new_password: str,
) -> int:
    """Replace the caller's password and revoke every other session.

    The session used for the change stays valid. The revocation sweep runs
    after the hash update and is not transactionally coupled to it.

    Returns:
        Number of sessions revoked
    """
    if len(new_password) < settings.PASSWORD_MIN_LENGTH:
        raise ValidationError(
            f"New password must be at least {settings.PASSWORD_MIN_LENGTH} characters"
        )

    resolved = await _resolve_active_session(db, token)
    if resolved is None:
        raise NotAuthenticatedError()
    current_session, user = resolved

    if not verify_password(current_password, user.password_hash):
        raise AuthenticationError("Current password is incorrect")

    user.password_hash = hash_password(new_password)
    await db.flush()

    result = await db.execute(
        delete(Session)
        .where(Session.user_id == user.id)
        .where(Session.id != current_session.id)
    )
    revoked = result.rowcount or 0
    logger.info("Password changed", user_id=user.id, revoked_sessions=revoked)
    return revoked


async def cleanup_expired_sessions(db: AsyncSession, *, now: datetime | None = None) -> int:
    """Delete every session whose expiry is in the past.

    Returns:
        Number of sessions deleted
    """
    result = await db.execute(delete(Session).where(Session.expires_at < (now or utcnow())))
    deleted = result.rowcount or 0
    logger.info("Expired sessions cleaned up", deleted=deleted)
    return deleted
