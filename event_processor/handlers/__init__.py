"""Handlers for supported event variants."""

from .mention import ResponseBuilder, ReplyTemplate, select_template

__all__ = [
    "ResponseBuilder",
    "ReplyTemplate",
    "select_template",
]
