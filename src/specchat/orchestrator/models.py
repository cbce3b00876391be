"""Events and state records for the conversation orchestrator."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict
from uuid_extensions import uuid7

from ..prompts import FollowUpAction, Subject


class TriggerKind(str, Enum):
    """What started a conversation turn."""

    SUBMIT = "submit"
    SELECTION = "selection"
    FOLLOWUP = "followup"


class UserSubmit(BaseModel):
    """Free-text question typed by the shopper."""

    model_config = ConfigDict(frozen=True)

    text: str


class SpecSelected(BaseModel):
    """A specification was picked from the catalog."""

    model_config = ConfigDict(frozen=True)

    subject: Subject


class FollowUpSelected(BaseModel):
    """A follow-up option was clicked.

    ``subject`` overrides the orchestrator's current subject for this turn
    only; leave it unset to refine whatever was explained last.
    """

    model_config = ConfigDict(frozen=True)

    action: FollowUpAction
    subject: Subject | None = None


ConversationEvent = UserSubmit | SpecSelected | FollowUpSelected


@dataclass(frozen=True)
class PendingRequest:
    """An outstanding completion call for one turn."""

    trigger: TriggerKind
    prompt: str
    generation: int  # Store generation when the user message was appended
    request_id: str = field(default_factory=lambda: str(uuid7()))
    started_at: datetime = field(default_factory=datetime.now)


class Phase(str, Enum):
    IDLE = "idle"
    AWAITING_COMPLETION = "awaiting_completion"


@dataclass(frozen=True)
class OrchestratorState:
    """Snapshot of the orchestrator for loading indicators."""

    phase: Phase
    triggers: tuple[TriggerKind, ...] = ()

    @property
    def is_idle(self) -> bool:
        return self.phase is Phase.IDLE


IDLE = OrchestratorState(phase=Phase.IDLE)
