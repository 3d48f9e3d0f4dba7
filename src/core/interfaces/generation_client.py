"""Contrato del cliente de generación remoto.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite sustituir el SDK real (OpenAI-compatible) por un doble de test sin
  acoplar el Core a implementaciones concretas.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import GeneratedImage, ImageGenerationConfig


@runtime_checkable
class RemoteGenerationClient(Protocol):
    """Contrato mínimo del proveedor IA.

    Reglas de diseño:
    - Ambas operaciones son asíncronas porque hacen I/O de red.
    - Un fallo se propaga como excepción; no hay reintentos aquí.
    """

    async def generate_text(self, *, model: str, prompt: str) -> str:
        """Genera texto para `prompt` con el modelo indicado."""

        ...

    async def generate_images(
        self,
        *,
        model: str,
        prompt: str,
        config: ImageGenerationConfig,
    ) -> list[GeneratedImage]:
        """Genera cero o más imágenes (bytes base64) para `prompt`."""

        ...
