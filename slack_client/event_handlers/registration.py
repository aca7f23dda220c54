from __future__ import annotations

from slack_sdk.socket_mode.async_client import AsyncBaseSocketModeClient
from slack_sdk.socket_mode.request import SocketModeRequest

from base_client import SocketEvent


class SlackRegistrationMixin:
    def _register_handlers(self):
        """Route every socket mode request onto the event queue."""
        self.socket_client.socket_mode_request_listeners.append(self._enqueue_request)

    async def _enqueue_request(self, client: AsyncBaseSocketModeClient, req: SocketModeRequest):
        event = SocketEvent(
            type=req.type,
            envelope_id=req.envelope_id,
            payload=req.payload or {},
        )
        self.log_debug(f"Socket mode request: type={event.type}, envelope={event.envelope_id}")
        self.events.put_nowait(event)
