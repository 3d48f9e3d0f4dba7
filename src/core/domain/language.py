"""Language utilities for pitch-forge.

This module centralizes the language options supported across the
application together with the user-facing strings of each one. Keeping it in
the domain layer allows prompts, CLI and exporters to share a single source of
truth without creating circular imports with adapters.
"""

from __future__ import annotations

from enum import Enum


class Language(str, Enum):
    """Supported natural-language choices for prompts and user-facing output."""

    PORTUGUESE = "pt"
    ENGLISH = "en"
    SPANISH = "es"

    @classmethod
    def default(cls) -> "Language":
        """Return the default language used across the application."""

        return cls.PORTUGUESE

    def label(self) -> str:
        """Human readable label for prompts and logging."""

        return _LABELS[self]

    def text(self, key: str) -> str:
        """Localized UI string for `key` (falls back to Portuguese)."""

        table = _UI_STRINGS.get(self) or _UI_STRINGS[Language.PORTUGUESE]
        return table.get(key) or _UI_STRINGS[Language.PORTUGUESE][key]


_LABELS: dict[Language, str] = {
    Language.PORTUGUESE: "Portuguese",
    Language.ENGLISH: "English",
    Language.SPANISH: "Spanish",
}


_UI_STRINGS: dict[Language, dict[str, str]] = {
    Language.PORTUGUESE: {
        "title": "Gerador de Pitch com IA",
        "subtitle": "Transforme sua ideia de startup em um roteiro de pitch e um logotipo profissional em segundos.",
        "idea_prompt": "Conte-nos sua ideia de negócio",
        "generating": "Gerando...",
        "pitch_title": "Roteiro do seu Pitch",
        "logo_title": "Sugestão de Logo",
        "logo_alt": "Logo gerado por IA",
        "generic_error": "Ocorreu um erro ao gerar o conteúdo. Por favor, tente novamente.",
        "empty_idea": "Descreva sua ideia antes de gerar.",
    },
    Language.ENGLISH: {
        "title": "AI Pitch Generator",
        "subtitle": "Turn your startup idea into a pitch script and a professional logo in seconds.",
        "idea_prompt": "Tell us your business idea",
        "generating": "Generating...",
        "pitch_title": "Your Pitch Script",
        "logo_title": "Logo Suggestion",
        "logo_alt": "AI-generated logo",
        "generic_error": "An error occurred while generating the content. Please try again.",
        "empty_idea": "Describe your idea before generating.",
    },
    Language.SPANISH: {
        "title": "Generador de Pitch con IA",
        "subtitle": "Convierte tu idea de startup en un guion de pitch y un logotipo profesional en segundos.",
        "idea_prompt": "Cuéntanos tu idea de negocio",
        "generating": "Generando...",
        "pitch_title": "Guion de tu Pitch",
        "logo_title": "Sugerencia de Logo",
        "logo_alt": "Logo generado por IA",
        "generic_error": "Ocurrió un error al generar el contenido. Por favor, inténtalo de nuevo.",
        "empty_idea": "Describe tu idea antes de generar.",
    },
}
