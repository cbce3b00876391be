"""In-memory message store.

Session-only storage: the transcript is lost when the process exits.
"""

from .base import MessageStore
from .models import Message


class InMemoryMessageStore(MessageStore):
    """List-backed message store.

    ``clear`` swaps in a fresh list rather than truncating the old one, so a
    snapshot returned by ``list`` before the clear stays intact and nothing
    appended afterwards can bring pre-clear messages back.
    """

    def __init__(self) -> None:
        self._messages: list[Message] = []
        self._generation = 0

    def append(self, message: Message) -> None:
        self._messages.append(message)

    def list(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    def clear(self) -> None:
        self._messages = []
        self._generation += 1

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def backend_type(self) -> str:
        return "memory"

    def __len__(self) -> int:
        return len(self._messages)
