"""Conversation orchestration module for specchat.

Connects trigger events to the request builder, the completion client and
the message store.
"""

from .models import (
    ConversationEvent,
    FollowUpSelected,
    OrchestratorState,
    PendingRequest,
    Phase,
    SpecSelected,
    TriggerKind,
    UserSubmit,
)
from .orchestrator import ConversationOrchestrator
from .triggers import TriggerSurface

__all__ = [
    "ConversationEvent",
    "ConversationOrchestrator",
    "FollowUpSelected",
    "OrchestratorState",
    "PendingRequest",
    "Phase",
    "SpecSelected",
    "TriggerKind",
    "TriggerSurface",
    "UserSubmit",
]
