"""Conversation orchestrator.

Turns trigger events into explanation requests and reconciles the
asynchronous responses into one ordered transcript.
"""

import asyncio
import logging

from ..config import DEFAULT_GREETING, PLACEHOLDER_SUBJECT_TITLE, OrchestratorConfig
from ..conversation import Message, MessageStore, create_message_store
from ..llm import CompletionClient, NetworkFailure, RequestFailure
from ..prompts import ExplanationRequestBuilder, FollowUpAction, Subject
from .models import (
    IDLE,
    ConversationEvent,
    FollowUpSelected,
    OrchestratorState,
    PendingRequest,
    Phase,
    SpecSelected,
    TriggerKind,
    UserSubmit,
)

logger = logging.getLogger(__name__)


class ConversationOrchestrator:
    """Owns the transcript and drives explanation requests.

    Each turn runs in two steps. The synchronous step appends the user
    message and registers a :class:`PendingRequest`; the asynchronous step
    awaits the completion client and appends the bot reply. The await is the
    only suspension point, so new events are accepted while earlier turns
    are still in flight. Overlapping turns never share state: each one
    carries its own pending record, and replies land in completion order.

    Hidden design decisions:
    - Prompt construction per trigger kind
    - Where the subject for a follow-up comes from
    - Conversion of request failures into transcript error messages
    - Handling of replies that arrive after the transcript was cleared
    """

    def __init__(
        self,
        client: CompletionClient,
        store: MessageStore | None = None,
        builder: ExplanationRequestBuilder | None = None,
        config: OrchestratorConfig | None = None,
    ):
        """Initialize the orchestrator.

        Args:
            client: Completion client used for every turn
            store: Message store (None creates an in-memory store)
            builder: Explanation request builder (None uses default templates)
            config: Behavioural settings (None uses defaults)
        """
        self._client = client
        self._store = store if store is not None else create_message_store("memory")
        self._builder = builder if builder is not None else ExplanationRequestBuilder()
        self._config = config if config is not None else OrchestratorConfig()
        self._subject: Subject | None = None
        self._last_user_text: str | None = None
        self._pending: dict[str, PendingRequest] = {}
        self._tasks: set[asyncio.Task] = set()

    # Render boundary

    def get_messages(self) -> tuple[Message, ...]:
        """Return the transcript in display order."""
        return self._store.list()

    def is_awaiting_response(self) -> bool:
        """True while at least one completion call is outstanding."""
        return bool(self._pending)

    @property
    def state(self) -> OrchestratorState:
        if not self._pending:
            return IDLE
        return OrchestratorState(
            phase=Phase.AWAITING_COMPLETION,
            triggers=tuple(p.trigger for p in self._pending.values()),
        )

    @property
    def pending_requests(self) -> tuple[PendingRequest, ...]:
        return tuple(self._pending.values())

    @property
    def subject(self) -> Subject | None:
        """The most recently selected specification, if any."""
        return self._subject

    @property
    def store(self) -> MessageStore:
        return self._store

    @property
    def config(self) -> OrchestratorConfig:
        return self._config

    def clear_conversation(self) -> None:
        """Empty the transcript. The current subject is kept."""
        self._store.clear()
        logger.debug(
            "Conversation cleared (generation %d, %d request(s) in flight)",
            self._store.generation,
            len(self._pending),
        )

    def greet(self, text: str | None = None) -> Message | None:
        """Append a welcome message from the bot if the transcript is empty.

        Args:
            text: Welcome text (None uses the default demo greeting)
        """
        if text is None:
            text = DEFAULT_GREETING
        if len(self._store) > 0 or not text.strip():
            return None
        message = Message.from_bot(text)
        self._store.append(message)
        return message

    # Trigger boundary

    async def on_user_submit(self, text: str) -> Message | None:
        return await self.handle(UserSubmit(text=text))

    async def on_spec_selected(self, subject: Subject) -> Message | None:
        return await self.handle(SpecSelected(subject=subject))

    async def on_follow_up_selected(
        self,
        action: FollowUpAction | str,
        subject: Subject | None = None,
    ) -> Message | None:
        return await self.handle(
            FollowUpSelected(action=FollowUpAction(action), subject=subject)
        )

    async def handle(self, event: ConversationEvent) -> Message | None:
        """Run one full turn for an event.

        Returns:
            The bot message appended for this turn, or None when the event
            was rejected (blank input) or its reply was discarded after a
            clear
        """
        pending = self._begin_turn(event)
        if pending is None:
            return None
        return await self._finish_turn(pending)

    def dispatch(self, event: ConversationEvent) -> "asyncio.Task[Message | None] | None":
        """Start a turn without waiting for its reply.

        The user message is appended before this method returns; the
        completion runs in a background task. Must be called from within a
        running event loop.

        Returns:
            The task resolving to the bot message, or None for blank input
        """
        pending = self._begin_turn(event)
        if pending is None:
            return None
        task = asyncio.create_task(self._finish_turn(pending))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def drain(self) -> None:
        """Wait until every dispatched turn has resolved."""
        while self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)

    # Turn internals

    def _begin_turn(self, event: ConversationEvent) -> PendingRequest | None:
        if isinstance(event, UserSubmit):
            if not event.text.strip():
                logger.debug("Ignoring blank submission")
                return None
            self._last_user_text = event.text
            trigger = TriggerKind.SUBMIT
            content = event.text
        elif isinstance(event, SpecSelected):
            self._subject = event.subject
            trigger = TriggerKind.SELECTION
            content = self._builder.build(event.subject)
        elif isinstance(event, FollowUpSelected):
            subject = event.subject or self._follow_up_subject()
            trigger = TriggerKind.FOLLOWUP
            content = self._builder.build(subject, event.action)
        else:
            raise TypeError(f"Unsupported event: {event!r}")

        self._store.append(Message.from_user(content))
        pending = PendingRequest(
            trigger=trigger,
            prompt=content,
            generation=self._store.generation,
        )
        self._pending[pending.request_id] = pending
        logger.debug("Turn %s started (%s)", pending.request_id, trigger.value)
        return pending

    async def _finish_turn(self, pending: PendingRequest) -> Message | None:
        try:
            try:
                content = await self._request(pending)
            except RequestFailure as e:
                logger.warning(
                    "Turn %s failed with %s: %s",
                    pending.request_id,
                    type(e).__name__,
                    e,
                )
                content = self._config.error_message

            if (
                self._config.discard_stale_responses
                and pending.generation != self._store.generation
            ):
                logger.info(
                    "Discarding reply for turn %s started before the conversation was cleared",
                    pending.request_id,
                )
                return None

            message = Message.from_bot(content)
            self._store.append(message)
            logger.debug("Turn %s finished", pending.request_id)
            return message
        finally:
            self._pending.pop(pending.request_id, None)

    async def _request(self, pending: PendingRequest) -> str:
        attempt = 0
        while True:
            try:
                return await self._client.complete(pending.prompt)
            except NetworkFailure:
                if attempt >= self._config.max_retries:
                    raise
                delay = self._config.retry_backoff * (2 ** attempt)
                attempt += 1
                logger.info(
                    "Network failure on turn %s, retry %d/%d in %.2fs",
                    pending.request_id,
                    attempt,
                    self._config.max_retries,
                    delay,
                )
                await asyncio.sleep(delay)

    def _follow_up_subject(self) -> Subject:
        if self._subject is not None:
            return self._subject
        if self._last_user_text:
            return Subject(title=self._last_user_text)
        return Subject(title=PLACEHOLDER_SUBJECT_TITLE)
