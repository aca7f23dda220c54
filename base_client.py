"""
Base Client Abstract Class
Defines the transport session interface and the platform-neutral data types
"""
import asyncio
from abc import ABC, abstractmethod
from typing import Dict, Any, List, Optional
from dataclasses import dataclass, field
from logger import LoggerMixin


@dataclass
class SocketEvent:
    """Tagged envelope received over the socket connection"""
    type: str  # 'events_api', 'slash_commands', 'interactive', ...
    envelope_id: Optional[str]
    payload: Dict[str, Any] = field(default_factory=dict)

    @property
    def payload_type(self) -> Optional[str]:
        """Category of the payload ('event_callback', 'url_verification', ...)"""
        return self.payload.get("type")

    @property
    def inner_event(self) -> Dict[str, Any]:
        return self.payload.get("event") or {}


@dataclass
class MentionEvent:
    """The bot was mentioned in a message"""
    user_id: str
    text: str
    channel_id: Optional[str] = None
    ts: Optional[str] = None


@dataclass
class UserProfile:
    """Profile fields used when replying"""
    user_id: str
    display_name: str
    real_name: str


@dataclass
class AttachmentField:
    title: str
    value: str
    short: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {"title": self.title, "value": self.value, "short": self.short}


@dataclass
class Attachment:
    """Secondary content block with a colored sidebar"""
    pretext: str
    text: str
    color: str
    fields: List[AttachmentField] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pretext": self.pretext,
            "text": self.text,
            "color": self.color,
            "fields": [f.to_dict() for f in self.fields],
        }


@dataclass
class OutboundMessage:
    """Message to post back to the platform"""
    channel_id: str
    attachment: Attachment

    @property
    def fallback_text(self) -> str:
        """Plain text shown in notifications"""
        return f"{self.attachment.pretext} {self.attachment.text}".strip()


class BaseClient(ABC, LoggerMixin):
    """Abstract base class for transport sessions

    Incoming events are pushed onto ``events`` by the platform I/O loop and
    consumed by a single dispatcher.
    """

    def __init__(self, name: str):
        self.name = name
        self.events: "asyncio.Queue[SocketEvent]" = asyncio.Queue()
        self.log_info(f"{name} client initialized")

    @abstractmethod
    async def start(self):
        """Open the connection and begin queueing events"""
        pass

    @abstractmethod
    async def stop(self):
        """Close the connection"""
        pass

    @abstractmethod
    async def ack(self, envelope_id: str):
        """Acknowledge receipt of an event so it is not redelivered"""
        pass

    @abstractmethod
    async def get_user_info(self, user_id: str) -> UserProfile:
        """Resolve a user id to a profile; raises UserLookupError"""
        pass

    @abstractmethod
    async def post_message(self, message: OutboundMessage) -> Optional[str]:
        """Post a message and return its id; raises PostError"""
        pass
