"""Unit tests for the completion client module."""
import json
from types import SimpleNamespace
from unittest.mock import AsyncMock

import httpx
import openai
import pytest

from specchat.llm import (
    CompletionClient,
    HTTPCompletionClient,
    MalformedResponse,
    NetworkFailure,
    OpenAICompletionClient,
    RequestFailure,
    ServiceFailure,
    create_completion_client,
)

ENDPOINT = "http://shop.test/api/chat"


def make_http_client(handler) -> tuple[HTTPCompletionClient, httpx.AsyncClient]:
    transport_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return HTTPCompletionClient(ENDPOINT, client=transport_client), transport_client


def make_completion(content):
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))],
        model="gpt-4o-mini",
    )


class TestCompletionClientInterface:
    """Tests for the abstract CompletionClient interface."""

    def test_client_is_abstract(self):
        """Test that CompletionClient cannot be instantiated directly."""
        with pytest.raises(TypeError):
            CompletionClient()  # type: ignore

    def test_failure_hierarchy(self):
        for failure in (NetworkFailure, ServiceFailure, MalformedResponse):
            assert issubclass(failure, RequestFailure)


class TestHTTPCompletionClient:
    """Tests for HTTPCompletionClient using a mock transport."""

    @pytest.mark.asyncio
    async def test_posts_message_and_returns_trimmed_response(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"response": "  - **Battery**: lasts all day.\n"})

        client, _ = make_http_client(handler)
        text = await client.complete("Explain Battery: 5000mAh")

        assert text == "- **Battery**: lasts all day."
        assert len(seen) == 1
        assert seen[0].method == "POST"
        assert str(seen[0].url) == ENDPOINT
        assert json.loads(seen[0].content) == {"message": "Explain Battery: 5000mAh"}

    @pytest.mark.asyncio
    async def test_identical_prompts_make_two_calls(self):
        calls = 0

        def handler(request: httpx.Request) -> httpx.Response:
            nonlocal calls
            calls += 1
            return httpx.Response(200, json={"response": "same"})

        client, _ = make_http_client(handler)
        await client.complete("hello")
        await client.complete("hello")

        assert calls == 2

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [400, 404, 500, 503])
    async def test_non_success_status_is_service_failure(self, status):
        client, _ = make_http_client(
            lambda request: httpx.Response(status, json={"response": "Error generating AI response."})
        )

        with pytest.raises(ServiceFailure) as excinfo:
            await client.complete("hello")

        assert excinfo.value.status_code == status

    @pytest.mark.asyncio
    async def test_transport_error_is_network_failure(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client, _ = make_http_client(handler)

        with pytest.raises(NetworkFailure):
            await client.complete("hello")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("endpoint", ["http://exa mple/api", "http://[::1/api"])
    async def test_invalid_endpoint_is_network_failure(self, endpoint):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"response": "unreachable"})

        transport_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        client = HTTPCompletionClient(endpoint, client=transport_client)

        with pytest.raises(NetworkFailure):
            await client.complete("hello")

    @pytest.mark.asyncio
    async def test_timeout_is_network_failure(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("too slow", request=request)

        client, _ = make_http_client(handler)

        with pytest.raises(NetworkFailure):
            await client.complete("hello")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "response",
        [
            httpx.Response(200, text="<html>not json</html>"),
            httpx.Response(200, json=["a", "list"]),
            httpx.Response(200, json={"reply": "wrong field"}),
            httpx.Response(200, json={"response": None}),
            httpx.Response(200, json={"response": 42}),
        ],
        ids=["not-json", "not-object", "missing-field", "null-field", "non-string"],
    )
    async def test_unusable_body_is_malformed_response(self, response):
        client, _ = make_http_client(lambda request: response)

        with pytest.raises(MalformedResponse):
            await client.complete("hello")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("prompt", ["", "   ", "\n"])
    async def test_blank_prompt_rejected_without_call(self, prompt):
        calls = 0

        def handler(request: httpx.Request) -> httpx.Response:
            nonlocal calls
            calls += 1
            return httpx.Response(200, json={"response": "x"})

        client, _ = make_http_client(handler)

        with pytest.raises(ValueError):
            await client.complete(prompt)
        assert calls == 0

    @pytest.mark.asyncio
    async def test_extra_headers_sent(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"response": "ok"})

        transport_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        client = HTTPCompletionClient(
            ENDPOINT, headers={"X-Demo": "mobileShop"}, client=transport_client
        )
        await client.complete("hello")

        assert seen[0].headers["X-Demo"] == "mobileShop"

    @pytest.mark.asyncio
    async def test_injected_client_left_open(self):
        client, transport_client = make_http_client(
            lambda request: httpx.Response(200, json={"response": "ok"})
        )

        async with client:
            await client.complete("hello")

        assert not transport_client.is_closed
        await transport_client.aclose()

    @pytest.mark.asyncio
    async def test_owned_client_closed(self):
        client = HTTPCompletionClient(ENDPOINT)
        await client.close()

        assert client._client.is_closed


class TestOpenAICompletionClient:
    """Tests for OpenAICompletionClient with a mocked SDK."""

    @pytest.fixture
    def client(self):
        client = OpenAICompletionClient(api_key="fake-key")
        client._client.chat.completions.create = AsyncMock()
        return client

    def test_default_model(self):
        assert OpenAICompletionClient(api_key="fake-key").model == "gpt-4o-mini"

    @pytest.mark.asyncio
    async def test_sends_single_user_message(self, client):
        create = client._client.chat.completions.create
        create.return_value = make_completion("  A crisp, bright screen.  ")

        text = await client.complete("Explain Display: 6.8-inch")

        assert text == "A crisp, bright screen."
        create.assert_awaited_once_with(
            model="gpt-4o-mini",
            messages=[{"role": "user", "content": "Explain Display: 6.8-inch"}],
            temperature=0.7,
            max_tokens=150,
        )

    @pytest.mark.asyncio
    async def test_max_tokens_omitted_when_none(self):
        client = OpenAICompletionClient(api_key="fake-key", max_tokens=None)
        create = AsyncMock(return_value=make_completion("ok"))
        client._client.chat.completions.create = create

        await client.complete("hello")

        assert "max_tokens" not in create.await_args.kwargs

    @pytest.mark.asyncio
    async def test_connection_error_is_network_failure(self, client):
        request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
        client._client.chat.completions.create.side_effect = openai.APIConnectionError(
            request=request
        )

        with pytest.raises(NetworkFailure):
            await client.complete("hello")

    @pytest.mark.asyncio
    async def test_status_error_is_service_failure(self, client):
        request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
        response = httpx.Response(429, request=request)
        client._client.chat.completions.create.side_effect = openai.RateLimitError(
            "rate limited", response=response, body=None
        )

        with pytest.raises(ServiceFailure) as excinfo:
            await client.complete("hello")

        assert excinfo.value.status_code == 429

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "completion",
        [
            SimpleNamespace(choices=[], model="gpt-4o-mini"),
            make_completion(None),
        ],
        ids=["no-choices", "null-content"],
    )
    async def test_missing_content_is_malformed_response(self, client, completion):
        client._client.chat.completions.create.return_value = completion

        with pytest.raises(MalformedResponse):
            await client.complete("hello")

    @pytest.mark.asyncio
    @pytest.mark.integration
    async def test_complete_real_api(self, api_keys):
        """Integration test: complete a prompt with the real API."""
        if not api_keys["openai"]:
            pytest.skip("OPENAI_API_KEY not set")

        async with OpenAICompletionClient(api_key=api_keys["openai"]) as client:
            text = await client.complete("Reply with the single word: ready")

        assert text


class TestCompletionClientFactory:
    """Tests for completion client factory function."""

    def test_create_http_client(self):
        client = create_completion_client("http", endpoint=ENDPOINT)

        assert isinstance(client, HTTPCompletionClient)
        assert client.endpoint == ENDPOINT

    def test_create_openai_client(self):
        client = create_completion_client("OpenAI", api_key="fake-key", model="gpt-4o")

        assert isinstance(client, OpenAICompletionClient)
        assert client.model == "gpt-4o"

    def test_create_client_unknown_type(self):
        with pytest.raises(ValueError, match="Unsupported provider"):
            create_completion_client("carrier-pigeon")

    def test_http_requires_endpoint(self):
        with pytest.raises(TypeError, match="requires 'endpoint'"):
            create_completion_client("http")

    def test_openai_requires_api_key(self):
        with pytest.raises(TypeError, match="requires 'api_key'"):
            create_completion_client("openai")
