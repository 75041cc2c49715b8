"""
Forum Backend — Upvote Service Tests
======================================

The service logic is tested with a mock session; insert_upvote() runs
against a real in-memory SQLite session to check the affected-row outcome.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from forum.exceptions import ConflictError, NotFoundError, ValidationError
from forum.models import Upvote
from forum.services.upvote_service import UpvoteService, insert_upvote


class TestUpvoteService:

    def setup_method(self):
        self.service = UpvoteService()

    @pytest.mark.asyncio
    async def test_user_id_required(self, mock_db_session):
        with pytest.raises(ValidationError):
            await self.service.upvote(mock_db_session, post_id=1, user_id=None)

        mock_db_session.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_post(self, mock_db_session, result_with):
        mock_db_session.execute.return_value = result_with(None)

        with pytest.raises(NotFoundError) as exc_info:
            await self.service.upvote(mock_db_session, post_id=404, user_id=1)

        assert exc_info.value.message == "Post not found."

    @pytest.mark.asyncio
    async def test_noop_insert_reported_as_already_upvoted(self, mock_db_session, result_with):
        mock_db_session.execute.return_value = result_with(1)

        with patch(
            "forum.services.upvote_service.insert_upvote", AsyncMock(return_value=False)
        ):
            with pytest.raises(ConflictError) as exc_info:
                await self.service.upvote(mock_db_session, post_id=1, user_id=1)

        assert exc_info.value.message == "User has already upvoted this post."
        mock_db_session.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_inserted_upvote_commits(self, mock_db_session, result_with):
        mock_db_session.execute.return_value = result_with(1)

        with patch(
            "forum.services.upvote_service.insert_upvote", AsyncMock(return_value=True)
        ) as mock_insert:
            await self.service.upvote(mock_db_session, post_id=3, user_id=2)

        mock_insert.assert_awaited_once_with(mock_db_session, user_id=2, post_id=3)
        mock_db_session.commit.assert_awaited_once()


class TestInsertUpvote:
    """ON CONFLICT DO NOTHING against the real SQLite dialect."""

    @pytest.mark.asyncio
    async def test_second_insert_is_noop(self, db_session):
        assert await insert_upvote(db_session, user_id=1, post_id=2) is True
        assert await insert_upvote(db_session, user_id=1, post_id=2) is False

        count = await db_session.scalar(
            select(func.count(Upvote.id)).where(Upvote.user_id == 1, Upvote.post_id == 2)
        )
        assert count == 1

    @pytest.mark.asyncio
    async def test_distinct_pairs_both_inserted(self, db_session):
        assert await insert_upvote(db_session, user_id=1, post_id=1) is True
        assert await insert_upvote(db_session, user_id=2, post_id=1) is True


class TestInsertUpvoteSavepointFallback:
    """Dialects without ON CONFLICT insert inside a SAVEPOINT."""

    def savepoint_session(self, mock_db_session, exit_error=None):
        mock_db_session.get_bind = MagicMock()
        mock_db_session.get_bind.return_value.dialect.name = "mysql"
        savepoint = MagicMock()
        savepoint.__aenter__ = AsyncMock(return_value=None)
        savepoint.__aexit__ = AsyncMock(return_value=False, side_effect=exit_error)
        mock_db_session.begin_nested = MagicMock(return_value=savepoint)
        return mock_db_session

    @pytest.mark.asyncio
    async def test_new_pair_inserted(self, mock_db_session):
        session = self.savepoint_session(mock_db_session)

        assert await insert_upvote(session, user_id=1, post_id=2) is True

        added = session.add.call_args.args[0]
        assert isinstance(added, Upvote)
        assert (added.user_id, added.post_id) == (1, 2)
        session.begin_nested.assert_called_once()
        session.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_duplicate_pair_reported_as_not_inserted(self, mock_db_session):
        duplicate = IntegrityError("INSERT", {}, Exception("Duplicate entry"))
        session = self.savepoint_session(mock_db_session, exit_error=duplicate)

        assert await insert_upvote(session, user_id=1, post_id=2) is False
