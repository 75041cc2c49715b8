"""
Forum Backend — Comment Service
=================================

What:  Add a comment to a post; list a post's comments with author usernames.
Who:   Called by the comment routes in routes/posts.py.

Listing query:
    SELECT comments.id, comments.content, comments.creation_time, users.username
    FROM comments JOIN users ON comments.user_id = users.id
    WHERE comments.post_id = :post_id
    ORDER BY comments.creation_time DESC, comments.id DESC
"""

import logging
from typing import List, Optional

from sqlalchemy import desc, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from forum.exceptions import DatabaseError, ForumError
from forum.models import Comment, Post, User
from forum.schemas.comment import CommentListItem, CommentResponse
from forum.services.checks import ensure_exists, require_fields

logger = logging.getLogger(__name__)


class CommentService:
    """Business logic for comments."""

    async def add_comment(
        self,
        db: AsyncSession,
        post_id: int,
        user_id: Optional[int],
        content: Optional[str],
    ) -> CommentResponse:
        """
        Insert a comment on an existing post and return it.

        The author id is stored as given (no users lookup).

        Raises:
            ValidationError: user_id or content missing
            NotFoundError: post does not exist
            DatabaseError: query or insert failed
        """
        require_fields("User ID and content are required.", user_id=user_id, content=content)

        try:
            await ensure_exists(db, Post, post_id, "post", message="Post not found.")

            comment = Comment(post_id=post_id, user_id=user_id, content=content)
            db.add(comment)
            await db.flush()
            await db.commit()
        except ForumError:
            raise
        except SQLAlchemyError as e:
            logger.error("Database error inserting comment on post %s: %s", post_id, e)
            raise DatabaseError(
                message="Database error while inserting comment.",
                context={"post_id": post_id, "error_type": type(e).__name__},
            )

        logger.info("Comment %s added to post %s by user %s", comment.id, post_id, user_id)
        return CommentResponse.model_validate(comment)

    async def list_comments(self, db: AsyncSession, post_id: int) -> List[CommentListItem]:
        """Comments on a post, newest first. Unknown post ids yield an empty list."""
        try:
            result = await db.execute(
                select(Comment.id, Comment.content, Comment.creation_time, User.username)
                .select_from(Comment)
                .join(User, Comment.user_id == User.id)
                .where(Comment.post_id == post_id)
                .order_by(desc(Comment.creation_time), desc(Comment.id))
            )
            rows = result.all()
        except SQLAlchemyError as e:
            logger.error("Database error listing comments for post %s: %s", post_id, e)
            raise DatabaseError(
                message="Database error.",
                context={"post_id": post_id, "error_type": type(e).__name__},
            )

        return [CommentListItem.model_validate(row) for row in rows]


comment_service = CommentService()
