"""
Forum Backend — User Routes
=============================

What:  GET /users/{id}/subscriptions  (subreddits the user follows)
       GET /users/{id}/profile        (subscriptions + upvotes received)

The two endpoints deliberately differ on empty data: the subscriptions list
answers 404 when there is nothing to return, the profile answers 200 with an
empty list and a zero count.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from forum.database import get_db_session
from forum.routes import EntityId
from forum.schemas.common import ErrorResponse
from forum.schemas.subscription import SubredditSummary
from forum.schemas.user import ProfileResponse
from forum.services.profile_service import profile_service
from forum.services.subscription_service import subscription_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["Users"])


@router.get(
    "/{user_id}/subscriptions",
    response_model=List[SubredditSummary],
    responses={
        404: {"description": "User has no subscriptions", "model": ErrorResponse},
        500: {"description": "Database error", "model": ErrorResponse},
    },
    summary="List a user's subscribed subreddits",
)
async def list_subscriptions(
    user_id: EntityId,
    db: AsyncSession = Depends(get_db_session),
) -> List[SubredditSummary]:
    return await subscription_service.list_subscriptions(db=db, user_id=user_id)


@router.get(
    "/{user_id}/profile",
    response_model=ProfileResponse,
    responses={
        500: {"description": "Database error", "model": ErrorResponse},
    },
    summary="Get a user's profile",
    description=(
        "Returns the subreddits the user is subscribed to and the total number "
        "of upvotes received across all posts the user authored."
    ),
)
async def get_profile(
    user_id: EntityId,
    db: AsyncSession = Depends(get_db_session),
) -> ProfileResponse:
    return await profile_service.get_profile(db=db, user_id=user_id)
