"""Request/response models for subscriptions."""

from typing import Optional

from pydantic import BaseModel, Field

from forum.schemas.common import MAX_ID, MIN_ID


class SubscriptionCreate(BaseModel):
    """Body of POST /subscriptions. Both fields are required (checked by the service)."""
    user_id: Optional[int] = Field(
        default=None, ge=MIN_ID, le=MAX_ID, description="Subscribing user"
    )
    subreddit_id: Optional[int] = Field(
        default=None, ge=MIN_ID, le=MAX_ID, description="Target subreddit"
    )


class SubredditSummary(BaseModel):
    """id + name of a subreddit a user is subscribed to."""
    id: int
    name: str

    model_config = {"from_attributes": True}
