"""Pydantic request/response schemas (the HTTP contract, separate from ORM models)."""
