"""Conversation transcript module for specchat.

Provides the ordered message log shared by every conversation turn.
"""

from .base import MessageStore
from .factory import create_message_store
from .in_memory import InMemoryMessageStore
from .models import Message, Sender

__all__ = [
    "InMemoryMessageStore",
    "Message",
    "MessageStore",
    "Sender",
    "create_message_store",
]
