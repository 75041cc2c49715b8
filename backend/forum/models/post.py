"""
Forum Backend — Post SQLAlchemy Model
=======================================

What:  ORM model representing the `posts` table.
Who:   Written by PostService.create_post, read by the subreddit timeline,
       and referenced by upvotes and comments.

Table Design:
    - content is nullable; the API still requires it on creation
    - user_id is not checked against users when a post is created, so the
      column may hold an id with no matching user on stores that do not
      enforce foreign keys (SQLite's default)
    - creation_time is set in Python (UTC, microsecond precision) and always
      loaded timezone-aware (UTCDateTime), with a
      CURRENT_TIMESTAMP server default as fallback for raw inserts

    Index on (subreddit_id, creation_time):
        Serves the timeline query
        WHERE subreddit_id = ? ORDER BY creation_time DESC
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import TypeDecorator

from forum.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UTCDateTime(TypeDecorator):
    """
    Timestamp stored as UTC and always loaded timezone-aware.

    SQLite keeps no offset, so values read back naive are tagged UTC.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value

    def process_result_value(self, value, dialect):
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value


class Post(Base):
    """
    A post submitted to a subreddit.

    Lifecycle:
        Created by POST /subreddits/{id}/posts (or the startup seed).
        Never updated or deleted.
    """

    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(300), nullable=False)
    content: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    subreddit_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("subreddits.id"), nullable=True
    )
    user_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=True
    )
    creation_time: Mapped[datetime] = mapped_column(
        UTCDateTime,
        nullable=False,
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = (
        Index("idx_posts_subreddit_creation_time", "subreddit_id", "creation_time"),
    )

    def __repr__(self) -> str:
        return (
            f"<Post(id={self.id}, subreddit_id={self.subreddit_id}, "
            f"title='{self.title}')>"
        )
