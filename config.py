"""
Configuration module for the Slack mention bot
Handles all environment variables and default settings
"""
import os
from dotenv import load_dotenv
from dataclasses import dataclass, field

load_dotenv()


@dataclass
class BotConfig:
    """Central configuration for the mention bot"""

    # Slack credentials (SLACK_AUTH_TOKEN is the bot token, xoxb-...)
    slack_bot_token: str = field(default_factory=lambda: os.getenv("SLACK_AUTH_TOKEN") or os.getenv("SLACK_BOT_TOKEN", ""))
    slack_app_token: str = field(default_factory=lambda: os.getenv("SLACK_APP_TOKEN", ""))

    # Replies always go to this channel, not the channel of the mention
    slack_channel_id: str = field(default_factory=lambda: os.getenv("SLACK_CHANNEL_ID", ""))

    # Logging configuration
    log_level: str = field(default_factory=lambda: os.getenv("BOT_LOG_LEVEL", "INFO"))
    slack_log_level: str = field(default_factory=lambda: os.getenv("SLACK_LOG_LEVEL", "INFO"))
    console_logging_enabled: bool = field(default_factory=lambda: os.getenv("CONSOLE_LOGGING_ENABLED", "TRUE").upper() == "TRUE")
    log_directory: str = field(default_factory=lambda: os.getenv("LOG_DIRECTORY", "logs"))
    debug_mode: bool = field(default_factory=lambda: os.getenv("DEBUG_MODE", "false").lower() == "true")
    socket_debug: bool = field(default_factory=lambda: os.getenv("SOCKET_DEBUG", "false").lower() == "true")

    def validate(self) -> bool:
        """Validate required configuration"""
        if not self.slack_bot_token:
            raise ValueError("SLACK_AUTH_TOKEN is required")
        if not self.slack_app_token:
            raise ValueError("SLACK_APP_TOKEN is required")
        if not self.slack_channel_id:
            raise ValueError("SLACK_CHANNEL_ID is required")
        return True


# Global config instance
config = BotConfig()
