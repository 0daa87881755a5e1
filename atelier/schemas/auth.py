"""Authentication schemas."""

from datetime import datetime

from pydantic import BaseModel


class ArtistProfile(BaseModel):
    """Artist profile embedded on the user.

    Profile updates replace the stored object wholesale, so every field except
    ``max_entry_fee`` must be supplied.
    """

    mediums: list[str]
    location: str
    career_stage: str  # emerging, mid-career, established
    themes: list[str]
    max_entry_fee: float | None = None
    prefer_no_fee: bool


class SignupRequest(BaseModel):
    """Signup request.

    Field rules (email shape, password length, non-blank name) are enforced
    by the auth service so they surface as domain errors.
    """

    email: str
    password: str
    name: str


class LoginRequest(BaseModel):
    """Login request."""

    email: str
    password: str


class UserResponse(BaseModel):
    """Public user view. Never includes the password hash."""

    id: int
    email: str
    name: str
    artist_profile: ArtistProfile | None = None

    class Config:
        from_attributes = True


class AuthResponse(BaseModel):
    """Signup/login response. The raw token is only ever returned here."""

    session_token: str
    expires_at: datetime
    user: UserResponse


class ProfileUpdate(BaseModel):
    """Profile patch; omitted fields are left untouched."""

    name: str | None = None
    artist_profile: ArtistProfile | None = None


class PasswordChange(BaseModel):
    current_password: str
    new_password: str


class SuccessResponse(BaseModel):
    success: bool = True


class CleanupResponse(BaseModel):
    deleted: int
