"""Data models for the conversation transcript.

A message is an immutable record. Once appended to a store it is never
edited; the transcript only grows or is reset as a whole.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from uuid_extensions import uuid7


class Sender(str, Enum):
    """Who authored a message."""

    USER = "user"
    BOT = "bot"


class Message(BaseModel):
    """A single turn entry in the conversation."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(
        default_factory=lambda: str(uuid7()),
        description="Unique, time-ordered identifier generated at creation"
    )
    content: str = Field(description="Message text")
    sender: Sender = Field(description="Either 'user' or 'bot'")
    timestamp: datetime = Field(default_factory=datetime.now)

    @classmethod
    def from_user(cls, content: str) -> "Message":
        """Create a user-authored message."""
        return cls(content=content, sender=Sender.USER)

    @classmethod
    def from_bot(cls, content: str) -> "Message":
        """Create a bot-authored message."""
        return cls(content=content, sender=Sender.BOT)

    @property
    def is_user(self) -> bool:
        return self.sender is Sender.USER
