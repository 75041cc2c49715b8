"""Subreddit SQLAlchemy model (`subreddits` table)."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from forum.database import Base


class Subreddit(Base):
    """A named community that posts belong to and users subscribe to."""

    __tablename__ = "subreddits"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<Subreddit(id={self.id}, name='{self.name}')>"
