"""
Forum Backend — Schema Initialization and Seed Data
=====================================================

What:  Creates the tables and inserts the fixed starter rows.
When:  Once, from the application lifespan, before any request is served.
       Tests call `initialize_database()` directly on their own store.

Seed rows:
    subreddits: 1 javascript, 2 webdev
    users:      1 sailesh,    2 john
    posts:      1 "Welcome to JavaScript!"  (subreddit 1, user 1)
                2 "Web development tips"    (subreddit 2, user 2)
                3 "JavaScript tips"         (subreddit 1, user 2)

Seeding is skipped when the subreddits table already has rows, so restarting
against a persistent database does not duplicate them.
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.database import Database
from forum.models import Post, Subreddit, User

logger = logging.getLogger(__name__)

SEED_SUBREDDITS = ["javascript", "webdev"]

SEED_USERS = ["sailesh", "john"]

# (title, content, subreddit_id, user_id)
SEED_POSTS = [
    ("Welcome to JavaScript!", "This is a JavaScript subreddit.", 1, 1),
    ("Web development tips", "Learn web development here!", 2, 2),
    ("JavaScript tips", "Share your JS tips here!", 1, 2),
]


async def seed_database(session: AsyncSession) -> bool:
    """
    Insert the seed rows unless subreddits already exist.

    Returns:
        True if rows were inserted, False if seeding was skipped.
    """
    existing = await session.scalar(select(func.count(Subreddit.id)))
    if existing:
        logger.info("Seed skipped: %d subreddits already present", existing)
        return False

    session.add_all(Subreddit(name=name) for name in SEED_SUBREDDITS)
    session.add_all(User(username=username) for username in SEED_USERS)
    await session.flush()

    # One flush per post keeps creation_time strictly increasing with id
    for title, content, subreddit_id, user_id in SEED_POSTS:
        session.add(
            Post(title=title, content=content, subreddit_id=subreddit_id, user_id=user_id)
        )
        await session.flush()

    await session.commit()
    logger.info(
        "Seeded %d subreddits, %d users, %d posts",
        len(SEED_SUBREDDITS), len(SEED_USERS), len(SEED_POSTS),
    )
    return True


async def initialize_database(database: Database, seed: bool = True) -> None:
    """Create the schema, then (optionally) insert the seed rows."""
    await database.create_schema()
    if not seed:
        return
    async with database.session() as session:
        await seed_database(session)
