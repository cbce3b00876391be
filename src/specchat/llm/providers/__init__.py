from .http import HTTPCompletionClient
from .openai import OpenAICompletionClient

__all__ = ["HTTPCompletionClient", "OpenAICompletionClient"]
