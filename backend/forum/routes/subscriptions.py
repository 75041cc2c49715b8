"""POST /subscriptions: subscribe a user to a subreddit."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from forum.database import get_db_session
from forum.schemas.common import ErrorResponse, MessageResponse
from forum.schemas.subscription import SubscriptionCreate
from forum.services.subscription_service import subscription_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Subscriptions"])


@router.post(
    "/subscriptions",
    status_code=201,
    response_model=MessageResponse,
    responses={
        400: {"description": "Missing fields or already subscribed", "model": ErrorResponse},
        404: {"description": "User or subreddit does not exist", "model": ErrorResponse},
        500: {"description": "Database error", "model": ErrorResponse},
    },
    summary="Subscribe a user to a subreddit",
)
async def subscribe(
    body: SubscriptionCreate,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    await subscription_service.subscribe(
        db=db,
        user_id=body.user_id,
        subreddit_id=body.subreddit_id,
    )
    return MessageResponse(message="Subscribed successfully.")
