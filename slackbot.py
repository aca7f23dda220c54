#!/usr/bin/env python3
"""
Slack Bot Wrapper Script
Simple launcher for running the mention bot directly
Usage: python slackbot.py
"""

import asyncio
from main import MentionBotApp


async def main():
    """Launch the Slack bot"""
    bot = MentionBotApp()
    await bot.run()


if __name__ == "__main__":
    asyncio.run(main())
