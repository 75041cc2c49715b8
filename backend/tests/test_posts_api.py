"""
Forum Backend — Subreddit Timeline & Post Creation API Tests
==============================================================

Runs against a fresh app with a seeded in-memory store per test.
"""

from datetime import datetime, timedelta

import pytest
from sqlalchemy import func, select

from forum.models import Post


def creation_times(posts):
    return [datetime.fromisoformat(p["creation_time"].replace("Z", "+00:00")) for p in posts]


async def post_count(app) -> int:
    async with app.state.database.session() as session:
        return await session.scalar(select(func.count(Post.id)))


class TestTimeline:

    @pytest.mark.asyncio
    async def test_seeded_timeline_newest_first(self, test_client):
        response = await test_client.get("/subreddits/1/posts")

        assert response.status_code == 200
        posts = response.json()
        assert [p["id"] for p in posts] == [3, 1]
        assert all(p["subreddit_id"] == 1 for p in posts)
        times = creation_times(posts)
        assert times == sorted(times, reverse=True)

    @pytest.mark.asyncio
    async def test_unknown_subreddit_yields_empty_list(self, test_client):
        response = await test_client.get("/subreddits/9999/posts")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_new_post_appears_first(self, test_client):
        before = (await test_client.get("/subreddits/2/posts")).json()

        created = await test_client.post(
            "/subreddits/2/posts",
            json={"title": "CSS grid", "content": "Grids are neat.", "user_id": 1},
        )
        assert created.status_code == 201

        after = (await test_client.get("/subreddits/2/posts")).json()
        assert len(after) == len(before) + 1
        assert after[0]["id"] == created.json()["id"]
        assert after[0]["title"] == "CSS grid"


class TestCreatePost:

    @pytest.mark.asyncio
    async def test_created_post_echoes_input(self, test_client):
        response = await test_client.post(
            "/subreddits/1/posts",
            json={"title": "Closures", "content": "Explained.", "user_id": 2},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["id"] == 4
        assert body["title"] == "Closures"
        assert body["content"] == "Explained."
        assert body["subreddit_id"] == 1
        assert body["user_id"] == 2
        assert body["creation_time"]

    @pytest.mark.asyncio
    async def test_created_timestamp_matches_listing(self, test_client):
        created = await test_client.post(
            "/subreddits/2/posts",
            json={"title": "Flexbox", "content": "Or grid?", "user_id": 1},
        )

        listed = (await test_client.get("/subreddits/2/posts")).json()[0]

        assert listed["id"] == created.json()["id"]
        assert listed["creation_time"] == created.json()["creation_time"]
        assert creation_times([listed])[0].utcoffset() == timedelta(0)

    @pytest.mark.asyncio
    async def test_unknown_author_is_accepted(self, test_client):
        response = await test_client.post(
            "/subreddits/1/posts",
            json={"title": "Ghost", "content": "No such user.", "user_id": 12345},
        )

        assert response.status_code == 201
        assert response.json()["user_id"] == 12345

    @pytest.mark.asyncio
    async def test_unknown_subreddit_is_not_found_and_writes_nothing(self, app, test_client):
        counts_before = [
            len((await test_client.get(f"/subreddits/{sid}/posts")).json()) for sid in (1, 2)
        ]

        response = await test_client.post(
            "/subreddits/9999/posts",
            json={"title": "Lost", "content": "Nowhere.", "user_id": 1},
        )

        assert response.status_code == 404
        assert response.json()["error"] == "not_found"
        assert response.json()["message"] == "Subreddit with id 9999 does not exist."
        counts_after = [
            len((await test_client.get(f"/subreddits/{sid}/posts")).json()) for sid in (1, 2)
        ]
        assert counts_after == counts_before
        assert await post_count(app) == 3

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            {"content": "No title", "user_id": 1},
            {"title": "No content", "user_id": 1},
            {"title": "No author", "content": "x"},
            {"title": "", "content": "Empty title", "user_id": 1},
            {},
        ],
    )
    async def test_missing_fields_rejected(self, app, test_client, payload):
        response = await test_client.post("/subreddits/1/posts", json=payload)

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"
        assert await post_count(app) == 3

    @pytest.mark.asyncio
    async def test_non_integer_subreddit_id_is_bad_request(self, test_client):
        response = await test_client.post(
            "/subreddits/abc/posts",
            json={"title": "T", "content": "C", "user_id": 1},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method, path, payload",
        [
            ("get", "/subreddits/99999999999999999999/posts", None),
            ("post", "/subreddits/99999999999999999999/posts",
             {"title": "T", "content": "C", "user_id": 1}),
            ("post", "/posts/99999999999999999999/upvote", {"user_id": 1}),
            ("get", "/posts/-99999999999999999999/comments", None),
            ("get", "/users/99999999999999999999/profile", None),
        ],
    )
    async def test_out_of_range_path_id_is_bad_request(self, test_client, method, path, payload):
        kwargs = {"json": payload} if payload is not None else {}
        response = await getattr(test_client, method)(path, **kwargs)

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "path, payload",
        [
            ("/subreddits/1/posts",
             {"title": "T", "content": "C", "user_id": 99999999999999999999}),
            ("/posts/1/upvote", {"user_id": 99999999999999999999}),
            ("/posts/1/comments", {"user_id": 99999999999999999999, "content": "Hi"}),
            ("/subscriptions", {"user_id": 1, "subreddit_id": 99999999999999999999}),
        ],
    )
    async def test_out_of_range_body_id_is_bad_request(self, app, test_client, path, payload):
        response = await test_client.post(path, json=payload)

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"
        assert await post_count(app) == 3

    @pytest.mark.asyncio
    async def test_largest_storable_id_is_an_ordinary_miss(self, test_client):
        largest = 2**63 - 1

        listing = await test_client.get(f"/subreddits/{largest}/posts")
        upvote = await test_client.post(f"/posts/{largest}/upvote", json={"user_id": 1})

        assert listing.status_code == 200
        assert listing.json() == []
        assert upvote.status_code == 404
