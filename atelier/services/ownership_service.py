"""Owner-scoped access to user-owned rows.

Every user-owned model carries a ``user_id`` column. Rows are only ever read,
changed or deleted through these helpers, which filter on the authenticated
user's id. A row that exists but belongs to another user is reported exactly
like a row that does not exist.
"""

import re
from typing import Any, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from atelier.core.database import Base
from atelier.core.exceptions import NotFoundError
from atelier.core.logging import get_logger

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=Base)

# Columns a caller can never set or reassign
PROTECTED_FIELDS = frozenset({"id", "user_id"})


def _label(model: type[Base]) -> str:
    """Human label for error messages, e.g. CustomOpenCall -> "Custom open call"."""
    words = re.findall(r"[A-Z][a-z]*", model.__name__)
    return " ".join(words).capitalize() if words else model.__name__


def _writable(fields: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in fields.items() if key not in PROTECTED_FIELDS}


async def get_owned(
    db: AsyncSession,
    model: type[ModelT],
    entity_id: int,
    user_id: int,
) -> ModelT:
    """Fetch a row owned by ``user_id``.

    Raises:
        NotFoundError: If the row is missing or owned by someone else
    """
    row = await db.get(model, entity_id)
    if row is None or row.user_id != user_id:
        if row is not None:
            logger.warning(
                "Ownership check failed",
                model=model.__name__,
                entity_id=entity_id,
                user_id=user_id,
            )
        raise NotFoundError(f"{_label(model)} not found")
    return row


async def list_owned(
    db: AsyncSession,
    model: type[ModelT],
    user_id: int,
    *criteria: Any,
    order_by: Any = None,
) -> list[ModelT]:
    """List rows owned by ``user_id``, optionally narrowed by extra criteria."""
    stmt = select(model).where(model.user_id == user_id)
    for criterion in criteria:
        stmt = stmt.where(criterion)
    stmt = stmt.order_by(order_by if order_by is not None else model.id)
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def create_owned(
    db: AsyncSession,
    model: type[ModelT],
    user_id: int,
    /,
    **fields: Any,
) -> ModelT:
    """Create a row stamped with ``user_id``; any caller-supplied owner is ignored."""
    row = model(**_writable(fields), user_id=user_id)
    db.add(row)
    await db.flush()
    logger.info("Owned row created", model=model.__name__, entity_id=row.id, user_id=user_id)
    return row


async def update_owned(
    db: AsyncSession,
    model: type[ModelT],
    entity_id: int,
    user_id: int,
    changes: dict[str, Any],
) -> ModelT:
    """Apply ``changes`` to a row owned by ``user_id``.

    Only the keys present in ``changes`` are written; ``id`` and ``user_id``
    are never reassigned.
    """
    row = await get_owned(db, model, entity_id, user_id)
    for key, value in _writable(changes).items():
        setattr(row, key, value)
    await db.flush()
    return row


async def delete_owned(
    db: AsyncSession,
    model: type[ModelT],
    entity_id: int,
    user_id: int,
) -> None:
    """Delete a row owned by ``user_id``."""
    row = await get_owned(db, model, entity_id, user_id)
    await db.delete(row)
    await db.flush()
    logger.info("Owned row deleted", model=model.__name__, entity_id=entity_id, user_id=user_id)
