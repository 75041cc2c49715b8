"""
Forum Backend — Subreddit Post Routes
=======================================

What:  GET  /subreddits/{id}/posts  (timeline, newest first)
       POST /subreddits/{id}/posts  (create a post in the subreddit)
How:   Extracts path/body values and delegates to PostService.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from forum.database import get_db_session
from forum.routes import EntityId
from forum.schemas.common import ErrorResponse
from forum.schemas.post import PostCreate, PostResponse
from forum.services.post_service import post_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/subreddits", tags=["Subreddits"])


@router.get(
    "/{subreddit_id}/posts",
    response_model=List[PostResponse],
    responses={
        500: {"description": "Database error", "model": ErrorResponse},
    },
    summary="List the posts in a subreddit",
    description=(
        "Returns every post in the subreddit, most recent first. "
        "An unknown subreddit id returns an empty list."
    ),
)
async def list_posts(
    subreddit_id: EntityId,
    db: AsyncSession = Depends(get_db_session),
) -> List[PostResponse]:
    return await post_service.list_posts(db=db, subreddit_id=subreddit_id)


@router.post(
    "/{subreddit_id}/posts",
    status_code=201,
    response_model=PostResponse,
    responses={
        201: {"description": "Post created", "model": PostResponse},
        400: {"description": "Missing title, content or user_id", "model": ErrorResponse},
        404: {"description": "Subreddit does not exist", "model": ErrorResponse},
        500: {"description": "Database error", "model": ErrorResponse},
    },
    summary="Create a post in a subreddit",
)
async def create_post(
    subreddit_id: EntityId,
    body: PostCreate,
    db: AsyncSession = Depends(get_db_session),
) -> PostResponse:
    """
    Create a post and echo it back with its generated id and creation_time.

    The author (user_id) is stored as given; it is not looked up.
    """
    return await post_service.create_post(
        db=db,
        subreddit_id=subreddit_id,
        title=body.title,
        content=body.content,
        user_id=body.user_id,
    )
