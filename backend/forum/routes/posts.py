"""
Forum Backend — Post Interaction Routes
=========================================

What:  POST /posts/{id}/upvote    (one upvote per user per post)
       POST /posts/{id}/comments  (add a comment)
       GET  /posts/{id}/comments  (comments with usernames, newest first)
"""

import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from forum.database import get_db_session
from forum.routes import EntityId
from forum.schemas.comment import CommentCreate, CommentListItem, CommentResponse
from forum.schemas.common import ErrorResponse, MessageResponse
from forum.schemas.upvote import UpvoteCreate
from forum.services.comment_service import comment_service
from forum.services.upvote_service import upvote_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/posts", tags=["Posts"])


@router.post(
    "/{post_id}/upvote",
    status_code=201,
    response_model=MessageResponse,
    responses={
        400: {"description": "Missing user_id or already upvoted", "model": ErrorResponse},
        404: {"description": "Post not found", "model": ErrorResponse},
        500: {"description": "Database error", "model": ErrorResponse},
    },
    summary="Upvote a post",
)
async def upvote_post(
    post_id: EntityId,
    body: UpvoteCreate,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    await upvote_service.upvote(db=db, post_id=post_id, user_id=body.user_id)
    return MessageResponse(message="Upvote added successfully.")


@router.post(
    "/{post_id}/comments",
    status_code=201,
    response_model=CommentResponse,
    responses={
        400: {"description": "Missing user_id or content", "model": ErrorResponse},
        404: {"description": "Post not found", "model": ErrorResponse},
        500: {"description": "Database error", "model": ErrorResponse},
    },
    summary="Add a comment to a post",
)
async def add_comment(
    post_id: EntityId,
    body: CommentCreate,
    db: AsyncSession = Depends(get_db_session),
) -> CommentResponse:
    return await comment_service.add_comment(
        db=db,
        post_id=post_id,
        user_id=body.user_id,
        content=body.content,
    )


@router.get(
    "/{post_id}/comments",
    response_model=List[CommentListItem],
    responses={
        500: {"description": "Database error", "model": ErrorResponse},
    },
    summary="List the comments on a post",
    description="Newest first. An unknown post id returns an empty list.",
)
async def list_comments(
    post_id: EntityId,
    db: AsyncSession = Depends(get_db_session),
) -> List[CommentListItem]:
    return await comment_service.list_comments(db=db, post_id=post_id)
