from typing import Any

import openai
from openai import AsyncOpenAI

from ...config import DEFAULT_MAX_TOKENS, DEFAULT_OPENAI_MODEL, DEFAULT_TEMPERATURE
from ..base import CompletionClient, require_prompt
from ..errors import MalformedResponse, NetworkFailure, ServiceFailure


class OpenAICompletionClient(CompletionClient):
    """Completion client that calls OpenAI Chat Completions directly.

    Sends the prompt as a single user message, the same request the
    storefront's chat endpoint makes on the server side.

    Hidden design decisions:
    - OpenAI API client initialization
    - Message format conversion
    - Mapping of SDK exceptions onto RequestFailure subclasses
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_OPENAI_MODEL,
        max_tokens: int | None = DEFAULT_MAX_TOKENS,
        temperature: float = DEFAULT_TEMPERATURE,
        base_url: str | None = None,
        organization: str | None = None,
        **client_kwargs: Any
    ):
        """Initialize OpenAI client.

        Args:
            api_key: OpenAI API key
            model: Chat model to use
            max_tokens: Maximum tokens to generate (None for no limit)
            temperature: Sampling temperature
            base_url: Optional custom API base URL
            organization: Optional organization ID
            **client_kwargs: Additional kwargs for AsyncOpenAI client
        """
        self._model = model
        self._max_tokens = max_tokens
        self._temperature = temperature
        # SDK retries are disabled; one call per complete()
        client_kwargs.setdefault("max_retries", 0)
        self._client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            organization=organization,
            **client_kwargs
        )

    @property
    def model(self) -> str:
        """Get the model name."""
        return self._model

    async def complete(self, prompt: str) -> str:
        """Generate a completion for a single user prompt."""
        require_prompt(prompt)

        request_params: dict[str, Any] = {
            "model": self._model,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": self._temperature,
        }
        if self._max_tokens is not None:
            request_params["max_tokens"] = self._max_tokens

        try:
            completion = await self._client.chat.completions.create(**request_params)
        except openai.APIConnectionError as e:
            raise NetworkFailure(f"Could not reach OpenAI: {e}") from e
        except openai.APIStatusError as e:
            raise ServiceFailure(
                f"OpenAI returned HTTP {e.status_code}",
                status_code=e.status_code,
            ) from e
        except openai.APIResponseValidationError as e:
            raise MalformedResponse(f"Unexpected OpenAI response: {e}") from e

        if not completion.choices or completion.choices[0].message.content is None:
            raise MalformedResponse("OpenAI response contains no message content")

        return completion.choices[0].message.content.strip()

    async def close(self) -> None:
        """Close the OpenAI client."""
        await self._client.close()
