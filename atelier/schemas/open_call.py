"""Open call schemas."""

from enum import Enum

from pydantic import BaseModel, Field


class RecommendationTier(str, Enum):
    """Recommendation bucket derived from the score."""

    HIGHLY_RECOMMENDED = "highly-recommended"
    RECOMMENDED = "recommended"
    CONSIDER = "consider"


class ChecklistItem(BaseModel):
    item: str
    completed: bool = False


class OpenCall(BaseModel):
    """An exhibition, residency, grant, fellowship or commission opportunity."""

    id: str
    title: str
    organization: str
    location: str | None = None
    deadline: str | None = None  # ISO date
    entry_fee: float | None = None  # None means "varies"
    description: str = ""
    mediums: list[str] = Field(default_factory=list)
    theme: str | None = None
    eligibility: str | None = None
    prizes: str | None = None
    url: str | None = None
    source: str = ""
    featured: bool = False
    type: str | None = "exhibition"


class ArtistPreferences(BaseModel):
    """Preferences the recommendation score is computed against."""

    mediums: list[str] = Field(default_factory=list)
    location: str = ""
    career_stage: str = ""
    themes: list[str] = Field(default_factory=list)
    max_entry_fee: float | None = None
    prefer_no_fee: bool = False


class PreferencesUpdate(BaseModel):
    """Partial preferences update, merged into the stored profile."""

    mediums: list[str] | None = None
    location: str | None = None
    career_stage: str | None = None
    themes: list[str] | None = None
    max_entry_fee: float | None = None
    prefer_no_fee: bool | None = None


class Recommendation(BaseModel):
    score: int  # 0..100
    reasons: list[str]
    recommendation: RecommendationTier


class ScoreRequest(BaseModel):
    call: OpenCall
    preferences: ArtistPreferences = Field(default_factory=ArtistPreferences)


class RecommendedCall(OpenCall):
    """Open call enriched with the user's saved state and a recommendation."""

    bookmarked: bool = False
    applied: bool = False
    hidden: bool = False
    application_status: str | None = None
    checklist: list[ChecklistItem] | None = None
    score: int
    reasons: list[str]
    recommendation: RecommendationTier


class SavedCallStateUpdate(BaseModel):
    """Saved state patch; omitted fields are left untouched."""

    bookmarked: bool | None = None
    hidden: bool | None = None
    applied: bool | None = None
    application_status: str | None = None
    checklist: list[ChecklistItem] | None = None


class SavedCallStateResponse(BaseModel):
    id: int
    call_id: str
    bookmarked: bool
    hidden: bool
    applied: bool
    application_status: str | None
    checklist: list[ChecklistItem] | None

    class Config:
        from_attributes = True


class CustomCallCreate(BaseModel):
    title: str
    organization: str
    location: str | None = None
    deadline: str | None = None
    entry_fee: float | None = None
    description: str | None = None
    mediums: list[str] | None = None
    theme: str | None = None
    url: str | None = None
    type: str | None = None


class CustomCallUpdate(BaseModel):
    title: str | None = None
    organization: str | None = None
    location: str | None = None
    deadline: str | None = None
    entry_fee: float | None = None
    description: str | None = None
    mediums: list[str] | None = None
    theme: str | None = None
    url: str | None = None
    type: str | None = None


class CustomCallResponse(BaseModel):
    id: int
    title: str
    organization: str
    location: str | None
    deadline: str | None
    entry_fee: float | None
    description: str | None
    mediums: list[str] | None
    theme: str | None
    url: str | None
    type: str | None

    class Config:
        from_attributes = True
