"""Subscription endpoints: POST /subscriptions, GET /users/{id}/subscriptions."""

import pytest
from sqlalchemy import func, select

from forum.models import Subscription


async def subscription_rows(app, user_id=None, subreddit_id=None) -> int:
    query = select(func.count(Subscription.id))
    if user_id is not None:
        query = query.where(Subscription.user_id == user_id)
    if subreddit_id is not None:
        query = query.where(Subscription.subreddit_id == subreddit_id)
    async with app.state.database.session() as session:
        return await session.scalar(query)


class TestSubscribe:

    @pytest.mark.asyncio
    async def test_subscribe_twice_conflicts_and_keeps_one_row(self, app, test_client):
        payload = {"user_id": 1, "subreddit_id": 2}

        first = await test_client.post("/subscriptions", json=payload)
        second = await test_client.post("/subscriptions", json=payload)

        assert first.status_code == 201
        assert first.json() == {"message": "Subscribed successfully."}
        assert second.status_code == 400
        assert second.json()["error"] == "conflict"
        assert second.json()["message"] == "User is already subscribed to this subreddit."
        assert await subscription_rows(app, user_id=1, subreddit_id=2) == 1

    @pytest.mark.asyncio
    async def test_missing_subreddit_id_creates_nothing(self, app, test_client):
        response = await test_client.post("/subscriptions", json={"user_id": 1})

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "validation_error"
        assert body["details"]["missing"] == ["subreddit_id"]
        assert await subscription_rows(app) == 0

    @pytest.mark.asyncio
    async def test_unknown_user_reported_before_unknown_subreddit(self, test_client):
        response = await test_client.post(
            "/subscriptions", json={"user_id": 999, "subreddit_id": 888}
        )

        assert response.status_code == 404
        assert response.json()["message"] == "User with id 999 does not exist."

    @pytest.mark.asyncio
    async def test_unknown_subreddit(self, app, test_client):
        response = await test_client.post(
            "/subscriptions", json={"user_id": 1, "subreddit_id": 888}
        )

        assert response.status_code == 404
        assert response.json()["message"] == "Subreddit with id 888 does not exist."
        assert await subscription_rows(app) == 0


class TestListSubscriptions:

    @pytest.mark.asyncio
    async def test_no_subscriptions_is_not_found(self, test_client):
        response = await test_client.get("/users/1/subscriptions")

        assert response.status_code == 404
        assert response.json()["message"] == "No subscriptions found for user with id 1."

    @pytest.mark.asyncio
    async def test_lists_subscribed_subreddits(self, test_client):
        await test_client.post("/subscriptions", json={"user_id": 2, "subreddit_id": 1})
        await test_client.post("/subscriptions", json={"user_id": 2, "subreddit_id": 2})

        response = await test_client.get("/users/2/subscriptions")

        assert response.status_code == 200
        assert response.json() == [
            {"id": 1, "name": "javascript"},
            {"id": 2, "name": "webdev"},
        ]
