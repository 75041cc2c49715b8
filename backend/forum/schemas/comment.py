"""
Forum Backend — Comment Schemas
=================================

What:  Models for adding a comment and for listing a post's comments.

CommentResponse echoes a newly created comment; CommentListItem is the
listing shape, which carries the author's username instead of ids.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from forum.schemas.common import MAX_ID, MIN_ID


class CommentCreate(BaseModel):
    """Body of POST /posts/{id}/comments."""
    user_id: Optional[int] = Field(
        default=None, ge=MIN_ID, le=MAX_ID, description="Commenting user (required)"
    )
    content: Optional[str] = Field(default=None, description="Comment text (required)")


class CommentResponse(BaseModel):
    id: int = Field(description="Comment identifier")
    post_id: int = Field(description="Post the comment belongs to")
    user_id: int = Field(description="Author's user id")
    content: str = Field(description="Comment text")
    creation_time: datetime = Field(description="When the comment was created")

    model_config = {"from_attributes": True}


class CommentListItem(BaseModel):
    id: int = Field(description="Comment identifier")
    content: str = Field(description="Comment text")
    creation_time: datetime = Field(description="When the comment was created")
    username: str = Field(description="Author's username")

    model_config = {"from_attributes": True}
