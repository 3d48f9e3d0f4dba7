"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Los modelos son inmutables (`frozen`): un resultado se produce una vez y
  nunca se modifica.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.language import Language


PNG_DATA_URI_PREFIX = "data:image/png;base64,"


class GenerationConfig(BaseModel):
    """Configuración explícita que recibe el orquestador al construirse.

    Por qué un valor y no variables globales:
    - Permite testear el orquestador con un cliente sustituto sin tocar el entorno.
    """

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(
        default="",
        description="Credencial del proveedor IA (vacía = configuración inválida).",
    )
    text_model: str = Field(
        default="gemini-2.5-flash",
        min_length=1,
        description="Modelo para el roteiro del pitch.",
    )
    image_model: str = Field(
        default="imagen-4.0-generate-001",
        min_length=1,
        description="Modelo para el logo.",
    )
    language: Language = Field(
        default=Language.PORTUGUESE,
        description="Idioma de los prompts.",
    )


class ImageGenerationConfig(BaseModel):
    """Parámetros fijos de la petición de imagen."""

    model_config = ConfigDict(frozen=True)

    count: int = Field(default=1, ge=1)
    output_format: Literal["png"] = "png"
    aspect_ratio: str = Field(default="1:1", pattern=r"^\d+:\d+$")


class GeneratedImage(BaseModel):
    """Una imagen devuelta por el proveedor (bytes en base64)."""

    model_config = ConfigDict(frozen=True)

    image_bytes: str = Field(
        ...,
        description="Bytes crudos de la imagen codificados en base64.",
    )


class GenerationResult(BaseModel):
    """Resultado completo: roteiro + logo.

    Solo el orquestador lo crea, y solo cuando ambas llamadas tuvieron éxito.
    """

    model_config = ConfigDict(frozen=True)

    pitch_text: str = Field(
        ...,
        min_length=1,
        description="Texto del pitch tal como lo devolvió el modelo.",
    )
    logo_image: str = Field(
        ...,
        pattern=r"^data:image/png;base64,.+",
        description="Data URI del logo PNG.",
    )


class HeadingSection(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["heading"] = "heading"
    title: str
    body: str


class PlainLineSection(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["plain"] = "plain"
    text: str


PitchSection = Annotated[Union[HeadingSection, PlainLineSection], Field(discriminator="kind")]
