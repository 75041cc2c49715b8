"""Response model for the user profile aggregate."""

from typing import List

from pydantic import BaseModel, Field

from forum.schemas.subscription import SubredditSummary


class ProfileResponse(BaseModel):
    """
    GET /users/{id}/profile.

    An empty subscription list and zero upvotes are ordinary values here.
    """
    subscribed_subreddits: List[SubredditSummary] = Field(
        description="Subreddits the user is subscribed to"
    )
    total_upvotes: int = Field(
        description="Upvotes received across all posts the user authored"
    )
