"""
ORM models for the six forum tables.

Importing this package registers every table with `Base.metadata`, which
`Database.create_schema()` relies on.
"""

from forum.models.user import User
from forum.models.subreddit import Subreddit
from forum.models.post import Post
from forum.models.subscription import Subscription
from forum.models.upvote import Upvote
from forum.models.comment import Comment

__all__ = ["User", "Subreddit", "Post", "Subscription", "Upvote", "Comment"]
