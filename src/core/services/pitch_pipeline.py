"""Pitch + logo generation orchestration.

The orchestrator fans out two independent remote calls (pitch script text and
logo image) for the same idea, waits for both of them to settle and either
returns a complete `GenerationResult` or raises a single
`CombinedGenerationError`. Presentation concerns (spinners, messages, HTML)
stay in the CLI/adapters so the flow is reusable from tests or other
entry-points.
"""

from __future__ import annotations

import asyncio
import logging

from core.domain.errors import (
    CombinedGenerationError,
    ImageGenerationError,
    MissingCredentialError,
    TextGenerationError,
)
from core.domain.models import (
    PNG_DATA_URI_PREFIX,
    GenerationConfig,
    GenerationResult,
    ImageGenerationConfig,
)
from core.interfaces.generation_client import RemoteGenerationClient
from core.prompts import build_logo_prompt, build_pitch_prompt

logger = logging.getLogger(__name__)


LOGO_IMAGE_CONFIG = ImageGenerationConfig(count=1, output_format="png", aspect_ratio="1:1")


def normalize_idea(value: str | None) -> str | None:
    """Trim the user input; blank ideas are rejected before reaching `generate`."""

    cleaned = (value or "").strip()
    return cleaned or None


def build_logo_data_uri(image_bytes: str) -> str:
    return f"{PNG_DATA_URI_PREFIX}{image_bytes}"


class PitchGenerator:
    """Generation orchestrator.

    Holds no per-call state: concurrent `generate` calls are independent.
    """

    def __init__(self, *, config: GenerationConfig, client: RemoteGenerationClient) -> None:
        if not (config.api_key or "").strip():
            raise MissingCredentialError("Cannot build PitchGenerator without an API key.")
        self._config = config
        self._client = client

    @property
    def config(self) -> GenerationConfig:
        return self._config

    async def generate_pitch_script(self, idea: str) -> str:
        prompt = build_pitch_prompt(idea, self._config.language)
        try:
            text = await self._client.generate_text(model=self._config.text_model, prompt=prompt)
        except Exception as exc:
            logger.error("Error generating pitch script: %r", exc)
            raise TextGenerationError("Failed to generate pitch script.") from exc

        if not isinstance(text, str) or not text.strip():
            logger.error("Error generating pitch script: empty response from %s", self._config.text_model)
            raise TextGenerationError("Failed to generate pitch script.")
        return text

    async def generate_logo(self, idea: str) -> str:
        prompt = build_logo_prompt(idea, self._config.language)
        try:
            images = await self._client.generate_images(
                model=self._config.image_model,
                prompt=prompt,
                config=LOGO_IMAGE_CONFIG,
            )
        except Exception as exc:
            logger.error("Error generating logo: %r", exc)
            raise ImageGenerationError("Failed to generate logo.") from exc

        if not images or not images[0].image_bytes:
            logger.error("Error generating logo: no image was generated by %s", self._config.image_model)
            raise ImageGenerationError("Failed to generate logo.")
        return build_logo_data_uri(images[0].image_bytes)

    async def generate(self, idea: str) -> GenerationResult:
        """Generate the pitch script and the logo for `idea` concurrently.

        Raises:
            CombinedGenerationError: if either call fails. Partial output is discarded.
        """

        # Both branches settle before the outcome is decided; shielding keeps an
        # abandoned caller from cancelling the in-flight calls.
        outcomes = await asyncio.shield(
            asyncio.gather(
                self.generate_pitch_script(idea),
                self.generate_logo(idea),
                return_exceptions=True,
            )
        )
        pitch_outcome, logo_outcome = outcomes

        for outcome in (pitch_outcome, logo_outcome):
            if isinstance(outcome, BaseException):
                if not isinstance(outcome, Exception):
                    raise outcome
                logger.warning("Error in generation process: %s", outcome)
                raise CombinedGenerationError(
                    "Failed to generate content. One of the API calls may have failed."
                ) from outcome

        return GenerationResult(pitch_text=pitch_outcome, logo_image=logo_outcome)
