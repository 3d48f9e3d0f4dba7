"""Exportación HTML del resultado.

Por qué está en adapters:
- HTML es un detalle de infraestructura (Jinja2).
- El Core solo conoce `GenerationResult` y las secciones parseadas.

El logo va embebido como data URI, así que el HTML es autocontenido.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from core.domain.language import Language
from core.domain.models import GenerationResult
from core.services.pitch_parser import parse_pitch


_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def _get_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(_TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
    )


def render_result_html(
    *,
    result: GenerationResult,
    idea: str,
    language: Language = Language.PORTUGUESE,
) -> str:
    """Renderiza un HTML autocontenido con el roteiro y el logo."""

    generated_at = datetime.now(timezone.utc).isoformat(timespec="seconds")
    template = _get_env().get_template("pitch.html")
    return template.render(
        idea=idea,
        result=result,
        sections=parse_pitch(result.pitch_text),
        generated_at=generated_at,
        lang=language.value,
        t=language.text,
    )


def export_result_html(
    *,
    result: GenerationResult,
    idea: str,
    output_path: Path,
    language: Language = Language.PORTUGUESE,
) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    html = render_result_html(result=result, idea=idea, language=language)
    output_path.write_text(html, encoding="utf-8")
    return output_path
