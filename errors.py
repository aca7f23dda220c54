"""
Error types raised while handling platform events.

Every error here is terminal for the single event it affects; the dispatcher
logs it and moves on to the next event.
"""
from typing import Optional


class BotError(Exception):
    """Base class for event handling errors"""


class TypeMismatchError(BotError, TypeError):
    """Event payload did not narrow to the expected variant"""

    def __init__(self, expected: str, actual: Optional[str]):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected {expected} event, got {actual!r}")


class UnsupportedCategoryError(BotError):
    """Top-level event category the bot does not handle"""

    def __init__(self, category: Optional[str]):
        self.category = category
        super().__init__(f"Unsupported event type: {category!r}")


class UserLookupError(BotError, LookupError):
    """User profile could not be resolved"""

    def __init__(self, user_id: str, reason: str = ""):
        self.user_id = user_id
        self.reason = reason
        message = f"Could not look up user {user_id}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class PostError(BotError):
    """Outbound message was rejected by the platform"""

    def __init__(self, channel_id: str, reason: str = ""):
        self.channel_id = channel_id
        self.reason = reason
        message = f"Could not post message to {channel_id}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
