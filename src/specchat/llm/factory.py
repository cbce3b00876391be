from typing import Any

from .base import CompletionClient
from .providers import HTTPCompletionClient, OpenAICompletionClient


def create_completion_client(provider: str, **config: Any) -> CompletionClient:
    """Create a completion client instance.

    This factory function hides the instantiation logic for different backends.

    Args:
        provider: Backend type ('http', 'openai')
        **config: Backend-specific configuration
            For HTTP:
                - endpoint: str (required)
                - timeout: float (default: 30.0)
                - headers: dict[str, str] | None
            For OpenAI:
                - api_key: str (required)
                - model: str (default: 'gpt-4o-mini')
                - max_tokens: int (default: 150)
                - temperature: float (default: 0.7)
                - base_url: str | None

    Returns:
        Initialized completion client

    Raises:
        ValueError: If provider type is not supported
        TypeError: If required configuration is missing

    Examples:
        >>> client = create_completion_client(
        ...     "http",
        ...     endpoint="http://localhost:3000/api/chat"
        ... )

        >>> client = create_completion_client(
        ...     "openai",
        ...     api_key="sk-...",
        ...     model="gpt-4o-mini"
        ... )
    """
    provider_lower = provider.lower()

    if provider_lower == "http":
        if "endpoint" not in config:
            raise TypeError("HTTP client requires 'endpoint' in config")
        return HTTPCompletionClient(**config)

    if provider_lower == "openai":
        if "api_key" not in config:
            raise TypeError("OpenAI client requires 'api_key' in config")
        return OpenAICompletionClient(**config)

    raise ValueError(
        f"Unsupported provider: {provider}. "
        f"Supported providers: 'http', 'openai'"
    )
