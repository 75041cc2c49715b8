"""
Forum Backend — Request Checks Shared by Services
===================================================

What:  The two guard steps every write runs before touching the store:
       required-field validation and referenced-entity existence checks.
How:   Both raise application exceptions (ValidationError / NotFoundError),
       which short-circuit the service call and reach the global handlers.
"""

from typing import Any, Type

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.database import Base
from forum.exceptions import NotFoundError, ValidationError


def is_missing(value: Any) -> bool:
    """None, empty/blank strings and 0 ids all count as absent."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return not value


def require_fields(message: str, **fields: Any) -> None:
    """
    Raise ValidationError naming every absent field.

    Example:
        require_fields("user_id and content are required.", user_id=1, content="")
        → ValidationError(missing=["content"])
    """
    missing = [name for name, value in fields.items() if is_missing(value)]
    if missing:
        raise ValidationError(message=message, missing=missing)


async def ensure_exists(
    db: AsyncSession,
    model: Type[Base],
    entity_id: int,
    resource: str,
    message: str | None = None,
) -> None:
    """
    SELECT id FROM <table> WHERE id = :entity_id; NotFoundError if no row.

    The default message reads "<Resource> with id N does not exist."
    """
    result = await db.execute(select(model.id).where(model.id == entity_id))
    if result.scalar_one_or_none() is None:
        raise NotFoundError(resource=resource, resource_id=entity_id, message=message)
