"""
Forum Backend — Upvote Service
================================

What:  Record a user's upvote on a post, at most once per (user, post).
Who:   Called by POST /posts/{id}/upvote.

Duplicate handling:
    The insert is issued as INSERT ... ON CONFLICT (user_id, post_id) DO NOTHING
    using the backend dialect's insert construct. A duplicate is therefore not
    an error at the storage layer; `insert_upvote()` reports the outcome as a
    boolean taken from the affected-row count:

        rowcount == 1  → True   (row inserted)      → 201 "Upvote added successfully."
        rowcount == 0  → False  (pair already there) → ConflictError "already upvoted"

    Dialects without ON CONFLICT support fall back to a plain insert inside a
    SAVEPOINT, mapping IntegrityError to False.
"""

import logging
from typing import Optional

from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from forum.exceptions import ConflictError, DatabaseError, ForumError
from forum.models import Post, Upvote
from forum.services.checks import ensure_exists, require_fields

logger = logging.getLogger(__name__)

_ON_CONFLICT_INSERTS = {
    "sqlite": sqlite_insert,
    "postgresql": postgresql_insert,
}


async def insert_upvote(db: AsyncSession, user_id: int, post_id: int) -> bool:
    """
    Insert the (user_id, post_id) upvote unless it already exists.

    Returns:
        True if a row was inserted, False if the pair was already present.
    """
    dialect = db.get_bind().dialect.name
    insert_factory = _ON_CONFLICT_INSERTS.get(dialect)

    if insert_factory is None:
        try:
            async with db.begin_nested():
                db.add(Upvote(user_id=user_id, post_id=post_id))
        except IntegrityError:
            return False
        return True

    stmt = (
        insert_factory(Upvote.__table__)
        .values(user_id=user_id, post_id=post_id)
        .on_conflict_do_nothing(index_elements=["user_id", "post_id"])
    )
    result = await db.execute(stmt)
    return result.rowcount > 0


class UpvoteService:
    """Business logic for upvotes."""

    async def upvote(self, db: AsyncSession, post_id: int, user_id: Optional[int]) -> None:
        """
        Upvote a post on behalf of a user.

        Raises:
            ValidationError: user_id missing
            NotFoundError: post does not exist
            ConflictError: the user has already upvoted this post
            DatabaseError: query or insert failed
        """
        require_fields("User ID is required.", user_id=user_id)

        try:
            await ensure_exists(db, Post, post_id, "post", message="Post not found.")
            inserted = await insert_upvote(db, user_id=user_id, post_id=post_id)
            if inserted:
                await db.commit()
        except ForumError:
            raise
        except SQLAlchemyError as e:
            logger.error("Database error upvoting post %s for user %s: %s", post_id, user_id, e)
            raise DatabaseError(
                message="Database error.",
                context={"post_id": post_id, "error_type": type(e).__name__},
            )

        if not inserted:
            raise ConflictError(
                message="User has already upvoted this post.",
                context={"user_id": user_id, "post_id": post_id},
            )
        logger.info("User %s upvoted post %s", user_id, post_id)


upvote_service = UpvoteService()
