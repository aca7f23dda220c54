from __future__ import annotations

import asyncio
from typing import Optional

import aiohttp
from slack_sdk.errors import SlackApiError
from slack_sdk.socket_mode.response import SocketModeResponse

from base_client import OutboundMessage
from errors import PostError


class SlackMessagingMixin:
    async def start(self):
        """Connect to Slack in socket mode

        Returns once the websocket is open; the socket client keeps receiving
        in its own background tasks and feeds ``self.events``.
        """
        self.log_info("Starting Slack bot in socket mode...")
        try:
            await self.socket_client.connect()
        except Exception as e:
            self.log_error(f"Error in Slack bot start: {e}")
            raise
        self.log_info("Connected to Slack")

    async def stop(self):
        """Stop the Slack bot"""
        self.log_info("Stopping Slack bot...")
        try:
            # close() tends to hang on a half-open websocket
            await asyncio.wait_for(self.socket_client.close(), timeout=2.0)
            self.log_debug("Socket mode client closed")
        except asyncio.TimeoutError:
            self.log_warning("Socket mode client close timed out, continuing...")
        except Exception as e:
            self.log_warning(f"Error closing socket mode client: {e}")

    async def ack(self, envelope_id: str):
        """Acknowledge a socket mode request so Slack does not redeliver it"""
        await self.socket_client.send_socket_mode_response(
            SocketModeResponse(envelope_id=envelope_id)
        )
        self.log_debug(f"Acknowledged envelope {envelope_id}")

    async def post_message(self, message: OutboundMessage) -> Optional[str]:
        """Post an attachment message, returning its ts"""
        try:
            result = await self.web_client.chat_postMessage(
                channel=message.channel_id,
                text=message.fallback_text,
                attachments=[message.attachment.to_dict()]
            )
        except SlackApiError as e:
            raise PostError(message.channel_id, e.response.get("error", str(e))) from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise PostError(message.channel_id, str(e) or e.__class__.__name__) from e

        if not result.get("ok", False):
            raise PostError(message.channel_id, result.get("error", "unknown error"))

        ts = result.get("ts")
        self.log_debug(f"Posted reply to {message.channel_id}: ts={ts}")
        return ts
