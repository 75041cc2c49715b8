"""Request model for upvotes."""

from typing import Optional

from pydantic import BaseModel, Field

from forum.schemas.common import MAX_ID, MIN_ID


class UpvoteCreate(BaseModel):
    """Body of POST /posts/{id}/upvote."""
    user_id: Optional[int] = Field(
        default=None, ge=MIN_ID, le=MAX_ID, description="Voting user (required)"
    )
