"""Adaptador del proveedor IA (endpoint compatible OpenAI via OpenAI SDK).

Responsabilidad:
- Implementar `RemoteGenerationClient` sobre `AsyncOpenAI`.
- Traducir la configuración de imagen del dominio al contrato del SDK.
- Sin reintentos (`max_retries=0`) ni timeouts propios: se heredan del
  `httpx.AsyncClient` configurado.

Por defecto apunta al endpoint OpenAI-compatible de Gemini, que expone tanto
chat completions como generación de imágenes (Imagen).
"""

from __future__ import annotations

import logging
from typing import Any

from openai import AsyncOpenAI

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.errors import MissingCredentialError
from core.domain.models import GeneratedImage, ImageGenerationConfig

logger = logging.getLogger(__name__)


_ASPECT_RATIO_SIZES: dict[str, str] = {
    "1:1": "1024x1024",
    "16:9": "1792x1024",
    "9:16": "1024x1792",
}


def size_for_aspect_ratio(aspect_ratio: str) -> str:
    """Tamaño OpenAI (`WxH`) para una relación de aspecto del dominio."""

    try:
        return _ASPECT_RATIO_SIZES[aspect_ratio]
    except KeyError:
        raise ValueError(f"Unsupported aspect ratio: {aspect_ratio!r}") from None


def _first_message_text(response: Any) -> str:
    choices = getattr(response, "choices", None) or []
    if not choices:
        raise ValueError("AI provider returned no choices.")
    message = getattr(choices[0], "message", None)
    return (getattr(message, "content", None) or "").strip()


class OpenAICompatibleGenerationClient:
    """`RemoteGenerationClient` sobre el SDK OpenAI.

    Se usa como context manager asíncrono para cerrar el cliente HTTP.
    """

    def __init__(self, client: AsyncOpenAI) -> None:
        self._client = client

    async def __aenter__(self) -> "OpenAICompatibleGenerationClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.close()

    async def generate_text(self, *, model: str, prompt: str) -> str:
        response = await self._client.chat.completions.create(
            model=model,
            messages=[{"role": "user", "content": prompt}],
        )
        text = _first_message_text(response)
        logger.debug("Text generation with %s returned %d chars", model, len(text))
        return text

    async def generate_images(
        self,
        *,
        model: str,
        prompt: str,
        config: ImageGenerationConfig,
    ) -> list[GeneratedImage]:
        response = await self._client.images.generate(
            model=model,
            prompt=prompt,
            n=config.count,
            size=size_for_aspect_ratio(config.aspect_ratio),  # type: ignore[arg-type]
            response_format="b64_json",
        )
        images = [
            GeneratedImage(image_bytes=item.b64_json)
            for item in (response.data or [])
            if getattr(item, "b64_json", None)
        ]
        logger.debug("Image generation with %s returned %d image(s)", model, len(images))
        return images


def build_generation_client(settings: AppSettings | None = None) -> OpenAICompatibleGenerationClient:
    """Construye el cliente real a partir de `AppSettings`.

    Raises:
        MissingCredentialError: si no hay API key (condición fatal de arranque).
    """

    settings = settings or AppSettings()
    api_key = (settings.api_key or "").strip()
    if not api_key:
        raise MissingCredentialError(
            "API key not set (PITCH_FORGE_API_KEY / GEMINI_API_KEY / API_KEY)."
        )

    client = AsyncOpenAI(
        api_key=api_key,
        base_url=settings.base_url,
        max_retries=0,
        http_client=build_async_client(settings),
    )
    return OpenAICompatibleGenerationClient(client)
