"""
Forum Backend — Custom Exception Hierarchy
============================================

What:  Application-specific exceptions for each failure class a request can hit.
How:   Each exception carries a user-facing message and an optional context dict.
       Global exception handlers (registered in main.py) catch these and return
       structured JSON error responses with the matching HTTP status code.
Who:   Raised by services; caught by the handlers in main.py.

Exception Hierarchy:
    ForumError (base)
    ├── ValidationError   → 400 Bad Request (missing/invalid input, nothing written)
    ├── NotFoundError     → 404 Not Found (referenced entity absent, nothing written)
    ├── ConflictError     → 400 Bad Request (duplicate subscription or upvote)
    └── DatabaseError     → 500 Internal Server Error (unexpected storage failure)
"""

from typing import Any, Dict, Iterable, Optional


class ForumError(Exception):
    """
    Base exception for all forum application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(ForumError):
    """
    Raised when client input fails validation.

    When:    A required body field is absent or empty.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "user_id and subreddit_id are required.",
            "details": {"missing": ["subreddit_id"]}
        }
    """

    def __init__(
        self,
        message: str = "Validation failed",
        missing: Optional[Iterable[str]] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        self.missing = list(missing or [])
        if self.missing:
            ctx["missing"] = self.missing
        super().__init__(message=message, context=ctx)


class NotFoundError(ForumError):
    """
    Raised when a referenced resource does not exist.

    When:    Posting to an unknown subreddit, subscribing an unknown user,
             upvoting or commenting on an unknown post, or listing the
             subscriptions of a user who has none.
    HTTP:    404 Not Found

    The default message names the resource and its id; callers may pass an
    explicit message where the wording differs.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        if message is None:
            message = f"The requested {resource} was not found"
            if resource_id is not None:
                message = f"{resource.capitalize()} with id {resource_id} does not exist."
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class ConflictError(ForumError):
    """
    Raised when a write collides with an existing row.

    When:    A subscription violates UNIQUE(user_id, subreddit_id), or an
             upvote insert was ignored because the (user_id, post_id) pair exists.
    HTTP:    400 Bad Request (reported separately from DatabaseError so a client
             can tell "you already did this" from "something broke")
    """

    def __init__(
        self,
        message: str = "The resource already exists",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(ForumError):
    """
    Raised when database operations fail unexpectedly.

    HTTP:    500 Internal Server Error

    The message returned to the client is generic. The underlying exception
    type goes into `context` and is logged server-side only.
    """

    def __init__(
        self,
        message: str = "Database error.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
