"""
Forum Backend — Subscription Service
======================================

What:  Subscribe a user to a subreddit; list a user's subscriptions.
Who:   Called by routes/subscriptions.py, routes/users.py and ProfileService.

Subscribe sequence:
    1. user_id and subreddit_id present      → else ValidationError (400)
    2. user exists                           → else NotFoundError (404)
    3. subreddit exists                      → else NotFoundError (404)
    4. INSERT subscription
         UNIQUE(user_id, subreddit_id) hit   → ConflictError (400)
         any other failure                   → DatabaseError (500)

The existence checks and the insert are separate statements. Two concurrent
requests for the same pair can both pass steps 2-3; the unique constraint
rejects the second insert, which surfaces as the same ConflictError.
"""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from forum.exceptions import ConflictError, DatabaseError, ForumError, NotFoundError
from forum.models import Subreddit, Subscription, User
from forum.schemas.subscription import SubredditSummary
from forum.services.checks import ensure_exists, require_fields

logger = logging.getLogger(__name__)


async def fetch_subscribed_subreddits(db: AsyncSession, user_id: int) -> List[SubredditSummary]:
    """
    SELECT subreddits.id, subreddits.name
    FROM subreddits JOIN subscriptions ON subreddits.id = subscriptions.subreddit_id
    WHERE subscriptions.user_id = :user_id

    Propagates SQLAlchemyError; callers decide how to report it.
    """
    result = await db.execute(
        select(Subreddit.id, Subreddit.name)
        .select_from(Subreddit)
        .join(Subscription, Subreddit.id == Subscription.subreddit_id)
        .where(Subscription.user_id == user_id)
        .order_by(Subscription.id)
    )
    return [SubredditSummary(id=row.id, name=row.name) for row in result.all()]


class SubscriptionService:
    """Business logic for user ↔ subreddit subscriptions."""

    async def subscribe(
        self,
        db: AsyncSession,
        user_id: Optional[int],
        subreddit_id: Optional[int],
    ) -> None:
        """
        Create the (user_id, subreddit_id) subscription.

        Raises:
            ValidationError: a field is missing
            NotFoundError: user (checked first) or subreddit does not exist
            ConflictError: the user is already subscribed
            DatabaseError: any other storage failure
        """
        require_fields(
            "user_id and subreddit_id are required.",
            user_id=user_id,
            subreddit_id=subreddit_id,
        )

        try:
            await ensure_exists(db, User, user_id, "user")
            await ensure_exists(db, Subreddit, subreddit_id, "subreddit")

            db.add(Subscription(user_id=user_id, subreddit_id=subreddit_id))
            await db.flush()
            await db.commit()
        except ForumError:
            raise
        except IntegrityError:
            await db.rollback()
            logger.info("User %s already subscribed to subreddit %s", user_id, subreddit_id)
            raise ConflictError(
                message="User is already subscribed to this subreddit.",
                context={"user_id": user_id, "subreddit_id": subreddit_id},
            )
        except SQLAlchemyError as e:
            logger.error(
                "Database error subscribing user %s to subreddit %s: %s",
                user_id, subreddit_id, e,
            )
            raise DatabaseError(
                message="Database error while subscribing.",
                context={"error_type": type(e).__name__},
            )

        logger.info("User %s subscribed to subreddit %s", user_id, subreddit_id)

    async def list_subscriptions(self, db: AsyncSession, user_id: int) -> List[SubredditSummary]:
        """
        Subreddits the user is subscribed to.

        Unlike the timeline and comment listings, an empty result is reported
        as NotFoundError rather than an empty list.
        """
        try:
            subreddits = await fetch_subscribed_subreddits(db, user_id)
        except SQLAlchemyError as e:
            logger.error("Database error listing subscriptions for user %s: %s", user_id, e)
            raise DatabaseError(
                message="Database error.",
                context={"user_id": user_id, "error_type": type(e).__name__},
            )

        if not subreddits:
            raise NotFoundError(
                resource="subscriptions",
                resource_id=user_id,
                message=f"No subscriptions found for user with id {user_id}.",
            )
        return subreddits


subscription_service = SubscriptionService()
