from rich.console import Console

from cli.ui_components import build_logo_panel, build_pitch_panel, logo_payload_size
from core.domain.language import Language
from core.domain.models import GenerationResult
from core.services.pitch_parser import parse_pitch


def _render(renderable) -> str:
    console = Console(width=100, record=True, color_system=None)
    console.print(renderable)
    return console.export_text()


def test_logo_payload_size():
    assert logo_payload_size("data:image/png;base64,AAAA") == 3
    assert logo_payload_size("data:image/png;base64,AA==") == 1


def test_pitch_panel_shows_headings_and_lines():
    text = _render(build_pitch_panel(parse_pitch("**Problema:** P\nLinha livre"), Language.PORTUGUESE))

    assert "Roteiro do seu Pitch" in text
    assert "Problema" in text
    assert "Linha livre" in text


def test_logo_panel_localized():
    result = GenerationResult(pitch_text="x", logo_image="data:image/png;base64,AAAA")

    assert "Logo Suggestion" in _render(build_logo_panel(result, Language.ENGLISH))


def test_language_text_fallback():
    assert Language.SPANISH.text("pitch_title") == "Guion de tu Pitch"
    assert Language.default() is Language.PORTUGUESE
