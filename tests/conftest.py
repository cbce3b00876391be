"""Pytest configuration and shared fixtures."""
import asyncio
import os
from dataclasses import dataclass

import pytest

from specchat.conversation import InMemoryMessageStore, Message, MessageStore
from specchat.llm import CompletionClient
from specchat.orchestrator import ConversationOrchestrator
from specchat.prompts import Subject, clear_cache


@dataclass
class Delayed:
    """A scripted outcome that resolves after ``seconds``."""

    seconds: float
    outcome: "str | Exception"


class FakeCompletionClient(CompletionClient):
    """Completion client that plays back scripted outcomes in call order.

    Each outcome is a reply string, an exception to raise, or a Delayed
    wrapper around either. Once the script runs out every call returns
    ``default``. When ``observe`` is set, the transcript seen at the moment
    each call starts is recorded in ``observed``.
    """

    def __init__(self, *outcomes: "str | Exception | Delayed", default: str = "ok"):
        self._outcomes = list(outcomes)
        self._default = default
        self.calls: list[str] = []
        self.observe: MessageStore | None = None
        self.observed: list[tuple[Message, ...]] = []
        self.closed = False

    async def complete(self, prompt: str) -> str:
        self.calls.append(prompt)
        if self.observe is not None:
            self.observed.append(self.observe.list())

        outcome: "str | Exception | Delayed" = (
            self._outcomes.pop(0) if self._outcomes else self._default
        )
        if isinstance(outcome, Delayed):
            await asyncio.sleep(outcome.seconds)
            outcome = outcome.outcome
        if isinstance(outcome, Exception):
            raise outcome
        return outcome.strip()

    async def close(self) -> None:
        self.closed = True


@pytest.fixture(autouse=True)
def fresh_prompt_cache():
    """Keep prompt overrides from leaking between tests."""
    clear_cache()
    yield
    clear_cache()


@pytest.fixture(scope="session")
def api_keys():
    """Return API keys from environment."""
    return {
        "openai": os.getenv("OPENAI_API_KEY"),
    }


@pytest.fixture
def battery():
    """Return the battery subject used across scenarios."""
    return Subject(title="Battery", detail_text="5000mAh")


@pytest.fixture
def display():
    return Subject(
        title="Display",
        detail_text="6.8-inch Dynamic AMOLED 2X display with 120Hz refresh rate",
    )


@pytest.fixture
def store():
    return InMemoryMessageStore()


@pytest.fixture
def make_orchestrator(store):
    """Build an orchestrator around a fake client that watches the store."""
    def _make(*outcomes, config=None, default="ok"):
        client = FakeCompletionClient(*outcomes, default=default)
        client.observe = store
        return ConversationOrchestrator(client, store=store, config=config), client
    return _make
