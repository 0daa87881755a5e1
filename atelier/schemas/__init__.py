"""Pydantic schemas."""

from atelier.schemas.auth import (
    ArtistProfile,
    AuthResponse,
    CleanupResponse,
    LoginRequest,
    PasswordChange,
    ProfileUpdate,
    SignupRequest,
    SuccessResponse,
    UserResponse,
)
from atelier.schemas.open_call import (
    ArtistPreferences,
    ChecklistItem,
    CustomCallCreate,
    CustomCallResponse,
    CustomCallUpdate,
    OpenCall,
    PreferencesUpdate,
    Recommendation,
    RecommendationTier,
    RecommendedCall,
    SavedCallStateResponse,
    SavedCallStateUpdate,
    ScoreRequest,
)

__all__ = [
    "ArtistProfile",
    "AuthResponse",
    "CleanupResponse",
    "LoginRequest",
    "PasswordChange",
    "ProfileUpdate",
    "SignupRequest",
    "SuccessResponse",
    "UserResponse",
    "ArtistPreferences",
    "ChecklistItem",
    "CustomCallCreate",
    "CustomCallResponse",
    "CustomCallUpdate",
    "OpenCall",
    "PreferencesUpdate",
    "Recommendation",
    "RecommendationTier",
    "RecommendedCall",
    "SavedCallStateResponse",
    "SavedCallStateUpdate",
    "ScoreRequest",
]
