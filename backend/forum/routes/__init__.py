"""
Forum Backend — API Routes Package
====================================

Route Inventory:
    - subreddits.py:    GET/POST /subreddits/{id}/posts
    - subscriptions.py: POST     /subscriptions
    - users.py:         GET      /users/{id}/subscriptions
                        GET      /users/{id}/profile
    - posts.py:         POST     /posts/{id}/upvote
                        GET/POST /posts/{id}/comments
    - health.py:        GET      /  and  /health

Routes stay thin: extract path/body values, call one service method, return
the result. Errors propagate as exceptions to the handlers in main.py.
"""

from typing import Annotated

from fastapi import Path

from forum.schemas.common import MAX_ID, MIN_ID

# Path id bounded to the storage INTEGER range; out-of-range ids answer 400
EntityId = Annotated[int, Path(ge=MIN_ID, le=MAX_ID)]
