"""Slack Bot Client Implementation."""
from typing import Optional

from slack_sdk.socket_mode.aiohttp import SocketModeClient
from slack_sdk.web.async_client import AsyncWebClient

from base_client import BaseClient
from config import config
from logger import setup_logger
from .event_handlers import SlackRegistrationMixin
from .utilities import SlackUtilitiesMixin
from .messaging import SlackMessagingMixin


class SlackBot(SlackRegistrationMixin,
               SlackUtilitiesMixin,
               SlackMessagingMixin,
               BaseClient):
    """Slack transport session: socket mode for events, Web API for replies"""

    def __init__(self, bot_token: Optional[str] = None, app_token: Optional[str] = None):
        super().__init__("SlackBot")
        web_logger = setup_logger(
            "mention_bot.slack.web",
            level="DEBUG" if config.debug_mode else None
        )
        socket_logger = setup_logger(
            "mention_bot.slack.socketmode",
            level="DEBUG" if config.socket_debug else None
        )
        self.web_client = AsyncWebClient(
            token=bot_token or config.slack_bot_token,
            logger=web_logger
        )
        self.socket_client = SocketModeClient(
            app_token=app_token or config.slack_app_token,
            web_client=self.web_client,
            logger=socket_logger
        )

        # Register socket mode listeners
        self._register_handlers()
