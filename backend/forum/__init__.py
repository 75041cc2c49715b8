"""
Forum Backend — Application Package
=====================================

What: A subreddit-style community forum API (posts, subscriptions, upvotes, comments).
How:  Layered the same way throughout:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← status codes, path/body extraction
    ├─────────────────────────────────────┤
    │        Services (Business Rules)    │  ← validation, existence checks, writes
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic contracts
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← one async store per application
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
