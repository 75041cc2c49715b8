"""
Forum Backend — Profile Service
=================================

What:  Aggregate view of a user: subscribed subreddits + upvotes received.
Who:   Called by GET /users/{id}/profile.

Both queries run in sequence and both must succeed before the response is
built. An unknown user simply has no subscriptions and zero upvotes.
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from forum.exceptions import DatabaseError
from forum.models import Post, Upvote
from forum.schemas.user import ProfileResponse
from forum.services.subscription_service import fetch_subscribed_subreddits

logger = logging.getLogger(__name__)


class ProfileService:

    async def get_profile(self, db: AsyncSession, user_id: int) -> ProfileResponse:
        try:
            subreddits = await fetch_subscribed_subreddits(db, user_id)
        except SQLAlchemyError as e:
            logger.error("Database error fetching subscriptions for user %s: %s", user_id, e)
            raise DatabaseError(
                message="Database error while fetching subscriptions.",
                context={"user_id": user_id, "error_type": type(e).__name__},
            )

        # Upvotes on posts authored by the user, not upvotes the user cast
        try:
            total_upvotes = await db.scalar(
                select(func.count(Upvote.id))
                .select_from(Upvote)
                .join(Post, Upvote.post_id == Post.id)
                .where(Post.user_id == user_id)
            )
        except SQLAlchemyError as e:
            logger.error("Database error counting upvotes for user %s: %s", user_id, e)
            raise DatabaseError(
                message="Database error while fetching upvotes.",
                context={"user_id": user_id, "error_type": type(e).__name__},
            )

        return ProfileResponse(
            subscribed_subreddits=subreddits,
            total_upvotes=total_upvotes or 0,
        )


profile_service = ProfileService()
