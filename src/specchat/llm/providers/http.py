import logging
from typing import Any

import httpx

from ...config import DEFAULT_TIMEOUT
from ..base import CompletionClient, require_prompt
from ..errors import MalformedResponse, NetworkFailure, ServiceFailure

logger = logging.getLogger(__name__)


class HTTPCompletionClient(CompletionClient):
    """Completion client for the storefront chat endpoint.

    Wire contract:
        POST <endpoint>  {"message": "<prompt>"}
        200              {"response": "<generated text>"}

    Hidden design decisions:
    - httpx client lifecycle (an injected client is left open on close)
    - JSON request/response shape
    - Mapping of httpx errors and status codes onto RequestFailure subclasses
    """

    def __init__(
        self,
        endpoint: str,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
        client: httpx.AsyncClient | None = None,
        **client_kwargs: Any
    ):
        """Initialize the HTTP client.

        Args:
            endpoint: Full URL of the chat endpoint
            timeout: Request timeout in seconds
            headers: Extra headers sent with every request
            client: Optional pre-configured httpx client (used as-is)
            **client_kwargs: Additional kwargs for httpx.AsyncClient
        """
        self._endpoint = endpoint
        self._headers = headers or {}
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout, **client_kwargs)

    @property
    def endpoint(self) -> str:
        """Get the endpoint URL."""
        return self._endpoint

    async def complete(self, prompt: str) -> str:
        """POST the prompt and return the trimmed ``response`` field."""
        require_prompt(prompt)

        try:
            response = await self._client.post(
                self._endpoint,
                json={"message": prompt},
                headers=self._headers,
            )
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.debug("Request to %s failed: %r", self._endpoint, e)
            raise NetworkFailure(f"Request to {self._endpoint} failed: {e}") from e

        if not response.is_success:
            raise ServiceFailure(
                f"Completion service returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise MalformedResponse("Response body is not valid JSON") from e

        if not isinstance(data, dict) or not isinstance(data.get("response"), str):
            raise MalformedResponse("Response body has no 'response' text field")

        return data["response"].strip()

    async def close(self) -> None:
        """Close the underlying httpx client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()
