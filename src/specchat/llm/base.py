from abc import ABC, abstractmethod
from typing import Any


class CompletionClient(ABC):
    """Abstract base class for completion clients.

    This module hides the design decision of how the explanation service is
    reached. Implementations must handle:
    - Client setup and authentication
    - Request/response format conversion
    - Mapping transport and service errors onto RequestFailure subclasses

    Every call to :meth:`complete` issues exactly one outbound request.
    There is no caching and no retrying at this layer.

    Supports async context manager protocol for proper resource cleanup:
        async with client:
            text = await client.complete(prompt)
        # Automatically cleaned up
    """

    @abstractmethod
    async def complete(self, prompt: str) -> str:
        """Send a prompt and return the generated text.

        Args:
            prompt: Non-empty prompt string

        Returns:
            Generated text, trimmed of leading/trailing whitespace

        Raises:
            ValueError: If the prompt is blank
            NetworkFailure: On transport errors
            ServiceFailure: On non-success responses from the service
            MalformedResponse: If the response carries no usable text
        """

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""

    async def __aenter__(self) -> "CompletionClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with automatic cleanup.

        Note: Suppresses "Event loop is closed" errors during cleanup.
        This is a known harmless race condition in httpx/anyio cleanup:
        https://github.com/encode/httpx/issues/914
        """
        try:
            await self.close()
        except RuntimeError as e:
            if "Event loop is closed" not in str(e):
                raise


def require_prompt(prompt: str) -> None:
    """Reject blank prompts before anything goes on the wire."""
    if not prompt or not prompt.strip():
        raise ValueError("Prompt must be a non-empty string")
