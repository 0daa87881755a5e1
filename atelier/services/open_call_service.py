"""Open call service: saved state, custom calls, preferences and recommendations."""

from datetime import datetime
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from atelier.core.logging import get_logger
from atelier.models.open_call import CustomOpenCall, SavedCallState
from atelier.models.user import User
from atelier.schemas.open_call import (
    ArtistPreferences,
    CustomCallCreate,
    CustomCallUpdate,
    OpenCall,
    PreferencesUpdate,
    RecommendedCall,
    SavedCallStateUpdate,
)
from atelier.services import ownership_service
from atelier.services.curated_calls import list_curated_calls
from atelier.services.recommendation import rank_calls, score_call

logger = get_logger(__name__)

CUSTOM_CALL_SOURCE = "Manual"
CUSTOM_CALL_PREFIX = "custom-"
NULLABLE_STATE_FIELDS = frozenset({"application_status", "checklist"})
REQUIRED_CUSTOM_CALL_FIELDS = frozenset({"title", "organization"})
NULLABLE_PREFERENCE_FIELDS = frozenset({"max_entry_fee"})


# ============================================================================
# Preferences
# ============================================================================


def get_preferences(user: User) -> ArtistPreferences:
    """Preferences stored on the user, with defaults for anything unset."""
    return ArtistPreferences.model_validate(user.artist_profile or {})


async def update_preferences(
    db: AsyncSession,
    user: User,
    update: PreferencesUpdate,
) -> ArtistPreferences:
    """Merge the provided preference fields into the stored profile.

    Unlike a profile update, fields not present in ``update`` keep their
    current values.
    """
    merged = get_preferences(user).model_dump()
    # Only the fee cap can be cleared; a null elsewhere leaves the value as is
    merged.update(
        (key, value)
        for key, value in update.model_dump(exclude_unset=True).items()
        if value is not None or key in NULLABLE_PREFERENCE_FIELDS
    )
    preferences = ArtistPreferences.model_validate(merged)

    user.artist_profile = preferences.model_dump()
    await db.flush()
    logger.info("Preferences updated", user_id=user.id)
    return preferences


# ============================================================================
# Saved call state
# ============================================================================


async def get_saved_states(db: AsyncSession, user: User) -> list[SavedCallState]:
    return await ownership_service.list_owned(db, SavedCallState, user.id)


async def save_call_state(
    db: AsyncSession,
    user: User,
    call_id: str,
    update: SavedCallStateUpdate,
) -> SavedCallState:
    """Create or patch the user's state for ``call_id``."""
    # Flags are non-nullable; an explicit null means "leave as is"
    changes = {
        key: value
        for key, value in update.model_dump(exclude_unset=True).items()
        if value is not None or key in NULLABLE_STATE_FIELDS
    }

    existing = await ownership_service.list_owned(
        db, SavedCallState, user.id, SavedCallState.call_id == call_id
    )
    if existing:
        return await ownership_service.update_owned(
            db, SavedCallState, existing[0].id, user.id, changes
        )

    fields: dict[str, Any] = {
        "bookmarked": False,
        "hidden": False,
        "applied": False,
        **changes,
    }
    return await ownership_service.create_owned(
        db, SavedCallState, user.id, call_id=call_id, **fields
    )


# ============================================================================
# Custom calls
# ============================================================================


async def list_custom_calls(db: AsyncSession, user: User) -> list[CustomOpenCall]:
    return await ownership_service.list_owned(
        db, CustomOpenCall, user.id, order_by=CustomOpenCall.created_at.desc()
    )


async def create_custom_call(
    db: AsyncSession, user: User, data: CustomCallCreate
) -> CustomOpenCall:
    return await ownership_service.create_owned(db, CustomOpenCall, user.id, **data.model_dump())


async def update_custom_call(
    db: AsyncSession, user: User, call_id: int, data: CustomCallUpdate
) -> CustomOpenCall:
    changes = {
        key: value
        for key, value in data.model_dump(exclude_unset=True).items()
        if value is not None or key not in REQUIRED_CUSTOM_CALL_FIELDS
    }
    return await ownership_service.update_owned(db, CustomOpenCall, call_id, user.id, changes)


async def delete_custom_call(db: AsyncSession, user: User, call_id: int) -> None:
    await ownership_service.delete_owned(db, CustomOpenCall, call_id, user.id)


def custom_call_to_open_call(call: CustomOpenCall) -> OpenCall:
    return OpenCall(
        id=f"{CUSTOM_CALL_PREFIX}{call.id}",
        title=call.title,
        organization=call.organization,
        location=call.location,
        deadline=call.deadline,
        entry_fee=call.entry_fee,
        description=call.description or "",
        mediums=call.mediums or [],
        theme=call.theme,
        url=call.url,
        source=CUSTOM_CALL_SOURCE,
        featured=False,
        type=call.type,
    )


# ============================================================================
# Recommendations
# ============================================================================


def enrich_call(
    call: OpenCall,
    preferences: ArtistPreferences,
    state: SavedCallState | None,
    *,
    now: datetime | None = None,
) -> RecommendedCall:
    """Attach saved state and a recommendation to a call."""
    recommendation = score_call(call, preferences, now=now)
    return RecommendedCall(
        **call.model_dump(),
        bookmarked=state.bookmarked if state else False,
        applied=state.applied if state else False,
        hidden=state.hidden if state else False,
        application_status=state.application_status if state else None,
        checklist=state.checklist if state else None,
        **recommendation.model_dump(),
    )


async def list_recommended_calls(
    db: AsyncSession,
    user: User,
    *,
    include_hidden: bool = True,
    now: datetime | None = None,
) -> list[RecommendedCall]:
    """Curated and custom calls, enriched and sorted by descending score."""
    preferences = get_preferences(user)
    states = {state.call_id: state for state in await get_saved_states(db, user)}

    calls = list_curated_calls()
    calls.extend(custom_call_to_open_call(c) for c in await list_custom_calls(db, user))

    enriched = [enrich_call(call, preferences, states.get(call.id), now=now) for call in calls]
    if not include_hidden:
        enriched = [call for call in enriched if not call.hidden]
    return rank_calls(enriched)
