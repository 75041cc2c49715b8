"""Subscription SQLAlchemy model (`subscriptions` table)."""

from sqlalchemy import ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from forum.database import Base


class Subscription(Base):
    """
    A user's membership in a subreddit (many-to-many join).

    UNIQUE(user_id, subreddit_id): a user subscribes to a subreddit at most
    once. A second insert raises IntegrityError, which the subscription
    service reports as a conflict.
    """

    __tablename__ = "subscriptions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id"), nullable=False)
    subreddit_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("subreddits.id"), nullable=False
    )

    __table_args__ = (
        UniqueConstraint("user_id", "subreddit_id", name="uq_subscriptions_user_subreddit"),
    )

    def __repr__(self) -> str:
        return f"<Subscription(user_id={self.user_id}, subreddit_id={self.subreddit_id})>"
