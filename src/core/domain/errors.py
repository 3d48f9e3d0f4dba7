"""Errores del dominio.

Por qué un módulo propio:
- La CLI y los adaptadores comparten la misma clasificación de fallos sin
  depender del SDK del proveedor IA.
- `CombinedGenerationError` es el único tipo que ve quien llama a `generate`;
  los tipos estrechos quedan para diagnóstico (logs, `__cause__`).
"""

from __future__ import annotations

from enum import Enum


class GenerationErrorKind(str, Enum):
    MISSING_CREDENTIAL = "missing_credential"
    TEXT_GENERATION_FAILED = "text_generation_failed"
    IMAGE_GENERATION_FAILED = "image_generation_failed"
    COMBINED_GENERATION_FAILED = "combined_generation_failed"


class GenerationError(Exception):
    """Base de todos los fallos de generación."""

    kind: GenerationErrorKind = GenerationErrorKind.COMBINED_GENERATION_FAILED


class MissingCredentialError(GenerationError):
    """No hay API key: el orquestador se niega a construirse."""

    kind = GenerationErrorKind.MISSING_CREDENTIAL


class TextGenerationError(GenerationError):
    kind = GenerationErrorKind.TEXT_GENERATION_FAILED


class ImageGenerationError(GenerationError):
    kind = GenerationErrorKind.IMAGE_GENERATION_FAILED


class CombinedGenerationError(GenerationError):
    """Fallo agregado del par texto+imagen.

    No indica cuál de las dos llamadas falló; la causa original queda
    encadenada en `__cause__` solo para logs.
    """

    kind = GenerationErrorKind.COMBINED_GENERATION_FAILED
