"""
Event Dispatcher
Reads socket events one at a time and hands app mentions to the reply builder
"""
import asyncio
from typing import Optional

from base_client import BaseClient, MentionEvent, OutboundMessage, SocketEvent
from errors import PostError, TypeMismatchError, UnsupportedCategoryError, UserLookupError
from logger import LoggerMixin
from .handlers.mention import ResponseBuilder

EVENTS_API = "events_api"
EVENT_CALLBACK = "event_callback"
APP_MENTION = "app_mention"


def narrow_mention(event: SocketEvent) -> MentionEvent:
    """Narrow an event_callback payload to an app mention

    Raises:
        TypeMismatchError: the inner event is some other variant or lacks
            the mentioning user.
    """
    inner = event.inner_event
    inner_type = inner.get("type")
    if inner_type != APP_MENTION:
        raise TypeMismatchError(APP_MENTION, inner_type)

    user_id = inner.get("user")
    if not isinstance(user_id, str) or not user_id:
        raise TypeMismatchError(APP_MENTION, f"{inner_type} without user")

    return MentionEvent(
        user_id=user_id,
        text=inner.get("text") or "",
        channel_id=inner.get("channel"),
        ts=inner.get("ts"),
    )


class EventDispatcher(LoggerMixin):
    """Single sequential consumer of the transport's event queue"""

    def __init__(self, client: BaseClient, builder: ResponseBuilder):
        self.client = client
        self.builder = builder

    async def run(self, stop_event: asyncio.Event):
        """Process events in arrival order until ``stop_event`` is set

        A failure while handling one event is logged and never ends the loop.
        Setting the stop event does not interrupt an in-progress lookup or post.
        """
        self.log_info("Events listener started")
        while not stop_event.is_set():
            event = await self._next_event(stop_event)
            if event is None:
                break

            try:
                await self.dispatch(event)
            except UnsupportedCategoryError as e:
                self.log_warning(str(e))
            except (UserLookupError, PostError) as e:
                self.log_error(f"Failed to reply to mention: {e}")
            except Exception as e:
                self.log_error(f"Error handling {event.type} event: {e}", exc_info=True)

        self.log_info("Shutting down events listener.")

    async def _next_event(self, stop_event: asyncio.Event) -> Optional[SocketEvent]:
        """Block until an event arrives or shutdown is requested"""
        get_task = asyncio.ensure_future(self.client.events.get())
        stop_task = asyncio.ensure_future(stop_event.wait())
        try:
            done, _ = await asyncio.wait(
                {get_task, stop_task}, return_when=asyncio.FIRST_COMPLETED
            )
        finally:
            for task in (get_task, stop_task):
                if not task.done():
                    task.cancel()

        if stop_event.is_set():
            return None
        return get_task.result()

    async def dispatch(self, event: SocketEvent) -> Optional[OutboundMessage]:
        """Handle one event; returns the posted reply, if any

        Raises:
            UnsupportedCategoryError: events_api payload that is not an
                event_callback.
            UserLookupError, PostError: from the reply builder.
        """
        if event.type != EVENTS_API:
            self.log_debug(f"Skipping {event.type} request")
            return None

        # Ack first so Slack does not redeliver while we are still replying
        if event.envelope_id:
            await self.client.ack(event.envelope_id)

        payload_type = event.payload_type
        if payload_type == EVENT_CALLBACK:
            try:
                mention = narrow_mention(event)
            except TypeMismatchError as e:
                self.log_debug(f"Ignoring callback: {e}")
                return None
            self.log_info(f"App mention from {mention.user_id} in {mention.channel_id}")
            return await self.builder.handle(mention)

        raise UnsupportedCategoryError(payload_type)
