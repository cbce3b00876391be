"""Abstract base class for message stores.

This module defines the interface for the conversation transcript.
The abstraction hides:
- Storage layout of the message sequence
- How reset is made atomic
- Generation bookkeeping used to recognise pre-clear turns
"""

from abc import ABC, abstractmethod

from .models import Message


class MessageStore(ABC):
    """Ordered, append-only log of conversation messages.

    Insertion order is display order. Messages are never edited or removed
    individually; the whole log can be reset with :meth:`clear`.
    """

    @abstractmethod
    def append(self, message: Message) -> None:
        """Add a message to the end of the conversation."""

    @abstractmethod
    def list(self) -> tuple[Message, ...]:
        """Return the full ordered conversation as a read-only sequence."""

    @abstractmethod
    def clear(self) -> None:
        """Empty the conversation and start a new generation."""

    @property
    @abstractmethod
    def generation(self) -> int:
        """Number of times the store has been cleared."""

    @property
    @abstractmethod
    def backend_type(self) -> str:
        """Get the backend type identifier."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of messages currently in the conversation."""
