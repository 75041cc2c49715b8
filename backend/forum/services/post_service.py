"""
Forum Backend — Post Service
==============================

What:  Subreddit timeline reads and post creation.
Who:   Called by the routes in routes/subreddits.py.

Flow (POST /subreddits/{id}/posts):
    ┌──────────┐    ┌──────────────┐    ┌──────────────┐    ┌──────────┐
    │ Validate │───▶│  Subreddit   │───▶│ INSERT post  │───▶│  Echo    │
    │  fields  │    │   exists?    │    │ (timestamp)  │    │  row     │
    └──────────┘    └──────────────┘    └──────────────┘    └──────────┘

    Missing field   → ValidationError (400), nothing written
    Unknown forum   → NotFoundError (404), nothing written
    Store failure   → DatabaseError (500), logged

The author id is stored as given; no users lookup is made.
"""

import logging
from typing import List, Optional

from sqlalchemy import desc, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from forum.exceptions import DatabaseError, ForumError
from forum.models import Post, Subreddit
from forum.schemas.post import PostResponse
from forum.services.checks import ensure_exists, require_fields

logger = logging.getLogger(__name__)


class PostService:
    """
    Business logic for posts.

    Stateless: the session is passed in on every call.
    """

    async def list_posts(self, db: AsyncSession, subreddit_id: int) -> List[PostResponse]:
        """
        All posts in a subreddit, newest first.

        No existence check: an unknown subreddit id yields an empty list.
        Equal creation times fall back to id descending.
        """
        try:
            result = await db.execute(
                select(Post)
                .where(Post.subreddit_id == subreddit_id)
                .order_by(desc(Post.creation_time), desc(Post.id))
            )
            posts = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing posts for subreddit %s: %s", subreddit_id, e)
            raise DatabaseError(
                message="Database error.",
                context={"subreddit_id": subreddit_id, "error_type": type(e).__name__},
            )

        return [PostResponse.model_validate(post) for post in posts]

    async def create_post(
        self,
        db: AsyncSession,
        subreddit_id: int,
        title: Optional[str],
        content: Optional[str],
        user_id: Optional[int],
    ) -> PostResponse:
        """
        Insert a post into an existing subreddit and return it.

        Raises:
            ValidationError: title, content or user_id missing
            NotFoundError: subreddit does not exist
            DatabaseError: query or insert failed
        """
        require_fields(
            "Title, content, and user_id are required.",
            title=title,
            content=content,
            user_id=user_id,
        )

        try:
            await ensure_exists(db, Subreddit, subreddit_id, "subreddit")

            post = Post(
                title=title,
                content=content,
                subreddit_id=subreddit_id,
                user_id=user_id,
            )
            db.add(post)
            await db.flush()
            await db.commit()
        except ForumError:
            raise
        except SQLAlchemyError as e:
            logger.error("Database error inserting post into subreddit %s: %s", subreddit_id, e)
            raise DatabaseError(
                message="Database error while inserting post.",
                context={"subreddit_id": subreddit_id, "error_type": type(e).__name__},
            )

        logger.info("Post %s created in subreddit %s by user %s", post.id, subreddit_id, user_id)
        return PostResponse.model_validate(post)


post_service = PostService()
