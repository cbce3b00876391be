from .base import CompletionClient
from .errors import (
    MalformedResponse,
    NetworkFailure,
    RequestFailure,
    ServiceFailure,
    SpecchatError,
)
from .factory import create_completion_client
from .providers import HTTPCompletionClient, OpenAICompletionClient

__all__ = [
    "CompletionClient",
    "create_completion_client",
    "HTTPCompletionClient",
    "OpenAICompletionClient",
    "MalformedResponse",
    "NetworkFailure",
    "RequestFailure",
    "ServiceFailure",
    "SpecchatError",
]
