"""
Specchat: a storefront assistant that explains product specifications.

The conversation engine turns shopper actions (a spec selected, a follow-up
clicked, a question typed) into requests to an explanation service and keeps
the replies in one ordered transcript.
"""

__version__ = "0.1.0"

from .conversation import Message, MessageStore, Sender, create_message_store
from .llm import (
    CompletionClient,
    MalformedResponse,
    NetworkFailure,
    RequestFailure,
    ServiceFailure,
    create_completion_client,
)
from .orchestrator import (
    ConversationOrchestrator,
    FollowUpSelected,
    SpecSelected,
    TriggerSurface,
    UserSubmit,
)
from .prompts import ExplanationRequestBuilder, FollowUpAction, Subject

__all__ = [
    "CompletionClient",
    "ConversationOrchestrator",
    "ExplanationRequestBuilder",
    "FollowUpAction",
    "FollowUpSelected",
    "MalformedResponse",
    "Message",
    "MessageStore",
    "NetworkFailure",
    "RequestFailure",
    "Sender",
    "ServiceFailure",
    "SpecSelected",
    "Subject",
    "TriggerSurface",
    "UserSubmit",
    "create_completion_client",
    "create_message_store",
]
