"""Authentication routes."""

from fastapi import APIRouter, status

from atelier.api.deps import BearerToken, DBSession
from atelier.core.logging import get_logger
from atelier.schemas import (
    AuthResponse,
    CleanupResponse,
    LoginRequest,
    PasswordChange,
    ProfileUpdate,
    SignupRequest,
    SuccessResponse,
    UserResponse,
)
from atelier.services import auth_service
from atelier.services.auth_service import AuthResult

logger = get_logger(__name__)
router = APIRouter(prefix="/auth", tags=["auth"])


def _auth_response(result: AuthResult) -> AuthResponse:
    return AuthResponse(
        session_token=result.session_token,
        expires_at=result.expires_at,
        user=UserResponse.model_validate(result.user),
    )


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def signup(data: SignupRequest, db: DBSession) -> AuthResponse:
    """Create an account and return its first session token."""
    result = await auth_service.signup(
        db, email=data.email, password=data.password, name=data.name
    )
    return _auth_response(result)


@router.post("/login", response_model=AuthResponse)
async def login(data: LoginRequest, db: DBSession) -> AuthResponse:
    """Exchange credentials for a new session token."""
    result = await auth_service.login(db, email=data.email, password=data.password)
    return _auth_response(result)


@router.post("/logout", response_model=SuccessResponse)
async def logout(token: BearerToken, db: DBSession) -> SuccessResponse:
    """End the presented session. Idempotent."""
    await auth_service.logout(db, token)
    return SuccessResponse()


@router.get("/session", response_model=UserResponse | None)
async def validate_session(token: BearerToken, db: DBSession) -> UserResponse | None:
    """Current user for the presented token, or null."""
    user = await auth_service.validate_session(db, token)
    return UserResponse.model_validate(user) if user else None


@router.patch("/profile", response_model=UserResponse)
async def update_profile(data: ProfileUpdate, token: BearerToken, db: DBSession) -> UserResponse:
    """Update name and/or replace the artist profile."""
    user = await auth_service.update_profile(
        db, token, name=data.name, artist_profile=data.artist_profile
    )
    return UserResponse.model_validate(user)


@router.post("/password", response_model=SuccessResponse)
async def change_password(
    data: PasswordChange, token: BearerToken, db: DBSession
) -> SuccessResponse:
    """Change password; signs out every other session."""
    await auth_service.change_password(
        db,
        token,
        current_password=data.current_password,
        new_password=data.new_password,
    )
    return SuccessResponse()


# Unauthenticated maintenance endpoint: it can only remove already-expired rows
@router.post("/sessions/cleanup", response_model=CleanupResponse)
async def cleanup_expired_sessions(db: DBSession) -> CleanupResponse:
    """Delete expired sessions."""
    deleted = await auth_service.cleanup_expired_sessions(db)
    return CleanupResponse(deleted=deleted)
