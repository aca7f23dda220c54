from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from base_client import (
    Attachment,
    AttachmentField,
    BaseClient,
    MentionEvent,
    OutboundMessage,
    UserProfile,
)
from logger import LoggerMixin


@dataclass(frozen=True)
class ReplyTemplate:
    pretext: str
    text: str  # formatted with real_name
    color: str


GREETING_KEYWORD = "hello"

GREETING_TEMPLATE = ReplyTemplate(
    pretext="Greetings",
    text="Hello, {real_name}",
    color="#4af030",
)

FALLBACK_TEMPLATE = ReplyTemplate(
    pretext="How can I be of service?",
    text="How can I help you {real_name}?",
    color="#3d3d3d",
)


def select_template(text: str) -> ReplyTemplate:
    """Greeting if the message says hello anywhere, fallback otherwise"""
    if GREETING_KEYWORD in (text or "").lower():
        return GREETING_TEMPLATE
    return FALLBACK_TEMPLATE


def format_timestamp(now: Optional[datetime] = None) -> str:
    """Local time as ``YYYY-MM-DD HH:MM:SS.ffffff+HH:MM``"""
    return (now or datetime.now()).astimezone().isoformat(sep=" ")


class ResponseBuilder(LoggerMixin):
    """Builds and posts the acknowledgment for a mention

    Holds no per-event state; every call looks the user up again and builds
    a fresh message.
    """

    def __init__(self, client: BaseClient, channel_id: str):
        self.client = client
        self.channel_id = channel_id

    def build(self, mention: MentionEvent, profile: UserProfile,
              now: Optional[datetime] = None) -> OutboundMessage:
        template = select_template(mention.text)
        attachment = Attachment(
            pretext=template.pretext,
            text=template.text.format(real_name=profile.real_name),
            color=template.color,
            fields=[
                AttachmentField(title="Date", value=format_timestamp(now)),
                AttachmentField(title="Initializer", value=profile.display_name, short=True),
            ],
        )
        return OutboundMessage(channel_id=self.channel_id, attachment=attachment)

    async def handle(self, mention: MentionEvent) -> OutboundMessage:
        """Reply to a mention

        Raises:
            UserLookupError: the mentioning user could not be resolved;
                nothing is posted.
            PostError: Slack rejected the reply.
        """
        profile = await self.client.get_user_info(mention.user_id)
        message = self.build(mention, profile)
        await self.client.post_message(message)
        self.log_info(
            f"Replied to mention from {profile.display_name} in {message.channel_id} "
            f"({message.attachment.pretext!r})"
        )
        return message
