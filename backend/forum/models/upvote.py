"""Upvote SQLAlchemy model (`upvotes` table)."""

from sqlalchemy import ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from forum.database import Base


class Upvote(Base):
    """
    One user's vote on one post (many-to-many join).

    UNIQUE(user_id, post_id) is also the conflict target of the
    INSERT ... ON CONFLICT DO NOTHING issued by UpvoteService.
    """

    __tablename__ = "upvotes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id"), nullable=False)
    post_id: Mapped[int] = mapped_column(Integer, ForeignKey("posts.id"), nullable=False)

    __table_args__ = (
        UniqueConstraint("user_id", "post_id", name="uq_upvotes_user_post"),
    )

    def __repr__(self) -> str:
        return f"<Upvote(user_id={self.user_id}, post_id={self.post_id})>"
