"""Open call routes."""

from fastapi import APIRouter, status

from atelier.api.deps import CurrentUser, DBSession, OptionalUser
from atelier.core.logging import get_logger
from atelier.schemas import (
    ArtistPreferences,
    CustomCallCreate,
    CustomCallResponse,
    CustomCallUpdate,
    PreferencesUpdate,
    Recommendation,
    RecommendedCall,
    SavedCallStateResponse,
    SavedCallStateUpdate,
    ScoreRequest,
    SuccessResponse,
)
from atelier.services import open_call_service
from atelier.services.recommendation import score_call

logger = get_logger(__name__)
router = APIRouter(prefix="/open-calls", tags=["open-calls"])


@router.get("", response_model=list[RecommendedCall])
async def list_open_calls(
    user: OptionalUser,
    db: DBSession,
    include_hidden: bool = True,
) -> list[RecommendedCall]:
    """Curated and custom calls ranked for the current user."""
    if user is None:
        return []
    return await open_call_service.list_recommended_calls(
        db, user, include_hidden=include_hidden
    )


@router.post("/score", response_model=Recommendation)
async def score_open_call(data: ScoreRequest) -> Recommendation:
    """Score a single call against the given preferences."""
    return score_call(data.call, data.preferences)


# IMPORTANT: Fixed paths must come BEFORE parameterized paths


@router.get("/preferences", response_model=ArtistPreferences | None)
async def get_preferences(user: OptionalUser) -> ArtistPreferences | None:
    """Current user's preferences, or null when anonymous."""
    if user is None:
        return None
    return open_call_service.get_preferences(user)


@router.patch("/preferences", response_model=ArtistPreferences)
async def update_preferences(
    data: PreferencesUpdate, user: CurrentUser, db: DBSession
) -> ArtistPreferences:
    """Merge the provided fields into the stored preferences."""
    return await open_call_service.update_preferences(db, user, data)


@router.get("/states", response_model=list[SavedCallStateResponse])
async def get_saved_states(user: OptionalUser, db: DBSession) -> list[SavedCallStateResponse]:
    """Bookmark/hide/application state for every call the user touched."""
    if user is None:
        return []
    states = await open_call_service.get_saved_states(db, user)
    return [SavedCallStateResponse.model_validate(s) for s in states]


@router.put("/states/{call_id}", response_model=SavedCallStateResponse)
async def save_call_state(
    call_id: str,
    data: SavedCallStateUpdate,
    user: CurrentUser,
    db: DBSession,
) -> SavedCallStateResponse:
    """Create or update the user's state for one call."""
    state = await open_call_service.save_call_state(db, user, call_id, data)
    return SavedCallStateResponse.model_validate(state)


@router.get("/custom", response_model=list[CustomCallResponse])
async def list_custom_calls(user: OptionalUser, db: DBSession) -> list[CustomCallResponse]:
    """Calls the user entered manually, newest first."""
    if user is None:
        return []
    calls = await open_call_service.list_custom_calls(db, user)
    return [CustomCallResponse.model_validate(c) for c in calls]


@router.post("/custom", response_model=CustomCallResponse, status_code=status.HTTP_201_CREATED)
async def create_custom_call(
    data: CustomCallCreate, user: CurrentUser, db: DBSession
) -> CustomCallResponse:
    call = await open_call_service.create_custom_call(db, user, data)
    return CustomCallResponse.model_validate(call)


@router.patch("/custom/{call_id}", response_model=CustomCallResponse)
async def update_custom_call(
    call_id: int,
    data: CustomCallUpdate,
    user: CurrentUser,
    db: DBSession,
) -> CustomCallResponse:
    call = await open_call_service.update_custom_call(db, user, call_id, data)
    return CustomCallResponse.model_validate(call)


@router.delete("/custom/{call_id}", response_model=SuccessResponse)
async def delete_custom_call(call_id: int, user: CurrentUser, db: DBSession) -> SuccessResponse:
    await open_call_service.delete_custom_call(db, user, call_id)
    return SuccessResponse()
