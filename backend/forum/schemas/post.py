"""
Forum Backend — Post Schemas
==============================

What:  Request body and response models for the subreddit timeline and
       post creation endpoints.

Request fields are all optional at the schema level. Presence is checked by
PostService so a missing field produces the forum's own 400 validation error
instead of FastAPI's 422 schema error.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from forum.schemas.common import MAX_ID, MIN_ID


class PostCreate(BaseModel):
    """Body of POST /subreddits/{id}/posts."""
    title: Optional[str] = Field(default=None, description="Post title (required)")
    content: Optional[str] = Field(default=None, description="Post body (required)")
    user_id: Optional[int] = Field(
        default=None, ge=MIN_ID, le=MAX_ID, description="Author's user id (required)"
    )


class PostResponse(BaseModel):
    """
    A single post, as listed in a timeline or echoed after creation.

    creation_time is serialized as ISO 8601.
    """
    id: int = Field(description="Post identifier")
    title: str = Field(description="Post title")
    content: Optional[str] = Field(default=None, description="Post body")
    subreddit_id: Optional[int] = Field(default=None, description="Owning subreddit")
    user_id: Optional[int] = Field(default=None, description="Author's user id")
    creation_time: datetime = Field(description="When the post was created")

    model_config = {"from_attributes": True}
