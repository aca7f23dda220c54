"""Slack transport session."""
from .base import SlackBot

__all__ = ["SlackBot"]
