"""User SQLAlchemy model (`users` table)."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from forum.database import Base


class User(Base):
    """
    A forum member.

    No endpoint creates users; rows come from the startup seed. Users are
    referenced by posts, subscriptions, upvotes and comments.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username='{self.username}')>"
