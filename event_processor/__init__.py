"""Event dispatch and reply construction."""

from .base import EventDispatcher, narrow_mention
from .handlers.mention import ResponseBuilder

__all__ = ["EventDispatcher", "ResponseBuilder", "narrow_mention"]
