"""Tests for the OpenAI-compatible generation adapter."""

import asyncio
from types import SimpleNamespace

import pytest

from adapters.ai_generation import (
    OpenAICompatibleGenerationClient,
    build_generation_client,
    size_for_aspect_ratio,
)
from core.config import AppSettings
from core.domain.errors import MissingCredentialError
from core.domain.models import GeneratedImage, ImageGenerationConfig


class _StubSDK:
    """Minimal stand-in for `AsyncOpenAI` exposing the two used endpoints."""

    def __init__(self, *, content="**Problema:** x", images=("AAAA",)):
        self.chat_requests: list[dict] = []
        self.image_requests: list[dict] = []
        self.closed = False

        async def create(**kwargs):
            self.chat_requests.append(kwargs)
            return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])

        async def generate(**kwargs):
            self.image_requests.append(kwargs)
            return SimpleNamespace(data=[SimpleNamespace(b64_json=b) for b in images])

        self.chat = SimpleNamespace(completions=SimpleNamespace(create=create))
        self.images = SimpleNamespace(generate=generate)

    async def close(self):
        self.closed = True


def test_size_for_aspect_ratio():
    assert size_for_aspect_ratio("1:1") == "1024x1024"
    with pytest.raises(ValueError):
        size_for_aspect_ratio("4:3")


def test_generate_text():
    sdk = _StubSDK(content="  **Problema:** x  ")
    client = OpenAICompatibleGenerationClient(sdk)  # type: ignore[arg-type]

    text = asyncio.run(client.generate_text(model="gemini-2.5-flash", prompt="hello"))

    assert text == "**Problema:** x"
    assert sdk.chat_requests == [
        {"model": "gemini-2.5-flash", "messages": [{"role": "user", "content": "hello"}]}
    ]


def test_generate_text_without_choices_fails():
    sdk = _StubSDK()

    async def empty(**kwargs):
        return SimpleNamespace(choices=[])

    sdk.chat.completions.create = empty
    client = OpenAICompatibleGenerationClient(sdk)  # type: ignore[arg-type]

    with pytest.raises(ValueError):
        asyncio.run(client.generate_text(model="m", prompt="p"))


def test_generate_images_maps_config():
    sdk = _StubSDK(images=("AAAA", None))
    client = OpenAICompatibleGenerationClient(sdk)  # type: ignore[arg-type]

    images = asyncio.run(
        client.generate_images(model="imagen", prompt="logo", config=ImageGenerationConfig())
    )

    assert images == [GeneratedImage(image_bytes="AAAA")]
    (request,) = sdk.image_requests
    assert request["n"] == 1
    assert request["size"] == "1024x1024"
    assert request["response_format"] == "b64_json"


def test_context_manager_closes_sdk():
    sdk = _StubSDK()

    async def scenario():
        async with OpenAICompatibleGenerationClient(sdk) as client:  # type: ignore[arg-type]
            await client.generate_text(model="m", prompt="p")

    asyncio.run(scenario())
    assert sdk.closed


def test_build_requires_api_key():
    with pytest.raises(MissingCredentialError):
        build_generation_client(AppSettings(api_key=None, _env_file=None))


def test_build_with_key():
    client = build_generation_client(AppSettings(api_key="secret", _env_file=None))
    try:
        assert isinstance(client, OpenAICompatibleGenerationClient)
    finally:
        asyncio.run(client.aclose())
