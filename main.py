#!/usr/bin/env python3
"""
Slack Mention Bot - Main Entry Point
Connects over socket mode and acknowledges every app mention
"""
import asyncio
import os
import signal
import sys
import time
from typing import Optional

from base_client import BaseClient
from config import config
from event_processor import EventDispatcher, ResponseBuilder
from logger import log_session_start, log_session_end, main_logger


class MentionBotApp:
    """Main application class: wires the transport, dispatcher and reply builder"""

    def __init__(self):
        self.client: Optional[BaseClient] = None
        self.dispatcher: Optional[EventDispatcher] = None
        self.stop_event: Optional[asyncio.Event] = None
        self.running = False
        self.sigint_count = 0  # Track number of SIGINT received
        self.last_sigint_time = 0  # Track time of last SIGINT

    async def initialize(self):
        """Initialize the bot components"""
        main_logger.info("Initializing mention bot...")

        # Validate configuration
        try:
            config.validate()
        except ValueError as e:
            main_logger.error(f"Configuration error: {e}")
            sys.exit(1)

        # The socket mode client needs a running event loop
        from slack_client import SlackBot
        self.client = SlackBot()
        builder = ResponseBuilder(self.client, config.slack_channel_id)
        self.dispatcher = EventDispatcher(self.client, builder)
        self.stop_event = asyncio.Event()

        # Set up signal handlers
        signal.signal(signal.SIGINT, self._signal_handler)
        signal.signal(signal.SIGTERM, self._signal_handler)

        main_logger.info("Initialization complete")

    def _signal_handler(self, signum, frame):
        """Handle shutdown signals - double Ctrl-C for force exit"""
        if signum == signal.SIGINT:
            current_time = time.time()

            # If second Ctrl-C within 2 seconds, force exit
            if self.sigint_count > 0 and (current_time - self.last_sigint_time) < 2.0:
                main_logger.warning("Force exit requested (double Ctrl-C) - terminating immediately!")
                os._exit(1)

            self.sigint_count += 1
            self.last_sigint_time = current_time

            if self.sigint_count == 1:
                main_logger.info(f"Received signal {signum}, attempting graceful shutdown...")
                main_logger.info("Press Ctrl-C again within 2 seconds to force exit")
            else:
                main_logger.warning("Shutdown already in progress... Press Ctrl-C again to force exit")
        else:
            main_logger.info(f"Received signal {signum}, shutting down...")

        self.request_stop()

    def request_stop(self):
        """Set the shared stop signal; safe to call from a signal handler"""
        if self.stop_event is None or self.stop_event.is_set():
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            self.stop_event.set()
        else:
            loop.call_soon_threadsafe(self.stop_event.set)

    async def run(self):
        """Run the bot until a stop is requested"""
        log_session_start()

        try:
            await self.initialize()
            self.running = True

            main_logger.info("Starting slack bot...")
            await self.client.start()
            await self.dispatcher.run(self.stop_event)

        except asyncio.CancelledError:
            main_logger.info("Bot task cancelled")
        except Exception as e:
            main_logger.error(f"Unexpected error: {e}", exc_info=True)
        finally:
            await self.shutdown()

    async def shutdown(self):
        """Shutdown the bot gracefully"""
        if not self.running:
            log_session_end()
            return

        self.running = False
        main_logger.info("Shutting down slack bot...")

        if self.client:
            try:
                await self.client.stop()
            except Exception as e:
                main_logger.warning(f"Error stopping client: {e}")

        log_session_end()


def main():
    """Main entry point"""
    asyncio.run(MentionBotApp().run())


if __name__ == "__main__":
    main()
