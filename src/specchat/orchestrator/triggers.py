"""Trigger surface.

Adapts catalog UI actions (a spec row clicked, a follow-up button pressed,
text submitted) into orchestrator events. Every method starts a turn and
returns immediately, so the caller is never blocked on the completion
service.
"""

import asyncio
from collections.abc import Sequence
from typing import cast

from ..conversation import Message
from ..prompts import FollowUpAction, Subject
from .models import FollowUpSelected, SpecSelected, UserSubmit
from .orchestrator import ConversationOrchestrator


class TriggerSurface:
    """Event source bound to one orchestrator and one list of specs."""

    def __init__(
        self,
        orchestrator: ConversationOrchestrator,
        specs: Sequence[Subject] = (),
    ) -> None:
        self._orchestrator = orchestrator
        self._specs = tuple(specs)

    @property
    def specs(self) -> tuple[Subject, ...]:
        return self._specs

    @staticmethod
    def follow_up_options() -> list[str]:
        """Labels for the follow-up buttons, in display order."""
        return [action.value for action in FollowUpAction]

    def on_spec_selected(self, subject: Subject) -> "asyncio.Task[Message | None]":
        # Only blank submissions are rejected, so a selection always yields a task
        return cast(
            "asyncio.Task[Message | None]",
            self._orchestrator.dispatch(SpecSelected(subject=subject)),
        )

    def select_spec(self, index: int) -> "asyncio.Task[Message | None]":
        """Select a spec by its zero-based position in the list.

        Raises:
            IndexError: If the index is outside the spec list
        """
        if not 0 <= index < len(self._specs):
            raise IndexError(
                f"Spec index {index} out of range (0-{len(self._specs) - 1})"
            )
        return self.on_spec_selected(self._specs[index])

    def on_follow_up_selected(
        self, action: FollowUpAction | str
    ) -> "asyncio.Task[Message | None]":
        return cast(
            "asyncio.Task[Message | None]",
            self._orchestrator.dispatch(FollowUpSelected(action=FollowUpAction(action))),
        )

    def on_user_submit(self, text: str) -> "asyncio.Task[Message | None] | None":
        """Submit free text. Returns None when the text is blank."""
        return self._orchestrator.dispatch(UserSubmit(text=text))
