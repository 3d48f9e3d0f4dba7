"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP/IA) lean config de forma consistente.
- El orquestador no lee el entorno: recibe un `GenerationConfig` explícito
  construido desde aquí.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.errors import MissingCredentialError
from core.domain.language import Language
from core.domain.models import GenerationConfig


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "pitch-forge"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "pitch-forge"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "pitch-forge"
    return Path.home() / ".config" / "pitch-forge"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str]) -> Path:
    """Escribe/actualiza variables en el .env global del usuario.

    Las claves existentes se conservan; las nuevas pisan a las viejas.
    """

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# pitch-forge user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="PITCH_FORGE_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
        populate_by_name=True,
    )

    api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("PITCH_FORGE_API_KEY", "GEMINI_API_KEY", "API_KEY"),
        description="API key del proveedor IA.",
    )
    base_url: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta/openai/",
        min_length=8,
        description="Base URL compatible OpenAI (Gemini por defecto).",
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

    http_timeout_seconds: float = Field(
        default=60.0,
        gt=0,
        description="Timeout por request al proveedor (segundos).",
    )
    user_agent: str = Field(
        default="pitch-forge/0.1 (+https://local)",
        min_length=1,
        description="User-Agent para las peticiones HTTP.",
    )

    default_language: Language = Field(
        default=Language.PORTUGUESE,
        description="Idioma por defecto para prompts y mensajes (pt/en/es).",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging de la CLI.",
    )

    def has_api_key(self) -> bool:
        return bool((self.api_key or "").strip())

    def generation_config(self, *, language: Language | None = None) -> GenerationConfig:
        """Valor inmutable que consume el orquestador.

        Raises:
            MissingCredentialError: si no hay API key configurada.
        """

        api_key = (self.api_key or "").strip()
        if not api_key:
            raise MissingCredentialError(
                "API key not set (PITCH_FORGE_API_KEY / GEMINI_API_KEY / API_KEY)."
            )
        return GenerationConfig(
            api_key=api_key,
            text_model=self.text_model,
            image_model=self.image_model,
            language=language or self.default_language,
        )
