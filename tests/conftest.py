from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Callable

import pytest


_REPO_ROOT = Path(__file__).resolve().parents[1]
_SRC = _REPO_ROOT / "src"
if _SRC.exists():
    sys.path.insert(0, str(_SRC))

from core.domain.models import GeneratedImage, GenerationConfig, ImageGenerationConfig  # noqa: E402


class FakeGenerationClient:
    """In-memory `RemoteGenerationClient` with scripted responses."""

    def __init__(
        self,
        *,
        text: str | Callable[[str], str] = "**Problema:** Pessoas perdem tempo.",
        images: list[GeneratedImage] | Callable[[str], list[GeneratedImage]] | None = None,
        text_error: Exception | None = None,
        image_error: Exception | None = None,
        text_delay: float = 0.0,
        image_delay: float = 0.0,
    ) -> None:
        self._text = text
        self._images = [GeneratedImage(image_bytes="AAAA")] if images is None else images
        self._text_error = text_error
        self._image_error = image_error
        self._text_delay = text_delay
        self._image_delay = image_delay
        self.text_calls: list[tuple[str, str]] = []
        self.image_calls: list[tuple[str, str, ImageGenerationConfig]] = []
        self.text_finished = False
        self.image_finished = False
        self.closed = False

    async def __aenter__(self) -> "FakeGenerationClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        self.closed = True

    async def generate_text(self, *, model: str, prompt: str) -> str:
        self.text_calls.append((model, prompt))
        await asyncio.sleep(self._text_delay)
        self.text_finished = True
        if self._text_error is not None:
            raise self._text_error
        return self._text(prompt) if callable(self._text) else self._text

    async def generate_images(
        self,
        *,
        model: str,
        prompt: str,
        config: ImageGenerationConfig,
    ) -> list[GeneratedImage]:
        self.image_calls.append((model, prompt, config))
        await asyncio.sleep(self._image_delay)
        self.image_finished = True
        if self._image_error is not None:
            raise self._image_error
        return self._images(prompt) if callable(self._images) else self._images


@pytest.fixture
def fake_client_cls() -> type[FakeGenerationClient]:
    return FakeGenerationClient


@pytest.fixture
def generation_config() -> GenerationConfig:
    return GenerationConfig(api_key="test-key", text_model="text-model", image_model="image-model")
