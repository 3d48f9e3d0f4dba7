"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar paneles en múltiples comandos (generate, doctor).
"""

from __future__ import annotations

from typing import Sequence

from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from core.domain.language import Language
from core.domain.models import PNG_DATA_URI_PREFIX, GenerationResult, HeadingSection, PitchSection


def print_banner(console: Console, language: Language = Language.PORTUGUESE) -> None:
    """Imprime el banner de bienvenida.

    Por qué aquí:
    - Evita dependencias circulares (main <-> doctor).
    - Se omite en modos no interactivos (`--json`).
    """

    title = Text(language.text("title"), style="bold magenta")
    subtitle = Text(language.text("subtitle"), style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="magenta", padding=(1, 4)))


def build_pitch_panel(sections: Sequence[PitchSection], language: Language = Language.PORTUGUESE) -> Panel:
    """Panel con el roteiro: encabezado + cuerpo, o párrafo simple."""

    blocks: list[Text] = []
    for section in sections:
        if isinstance(section, HeadingSection):
            block = Text()
            block.append(section.title, style="bold bright_blue")
            block.append("\n")
            block.append(section.body)
            blocks.append(block)
        else:
            blocks.append(Text(section.text))

    title = Text(language.text("pitch_title"), style="bold bright_blue")
    return Panel(Group(*_spaced(blocks)), title=title, border_style="bright_blue", padding=(1, 2))


def _spaced(blocks: list[Text]) -> list[Text]:
    out: list[Text] = []
    for i, block in enumerate(blocks):
        if i:
            out.append(Text(""))
        out.append(block)
    return out


def logo_payload_size(logo_image: str) -> int:
    """Tamaño aproximado en bytes del PNG embebido en el data URI."""

    payload = logo_image.removeprefix(PNG_DATA_URI_PREFIX)
    return (len(payload) * 3) // 4 - payload.count("=")


def build_logo_panel(result: GenerationResult, language: Language = Language.PORTUGUESE) -> Panel:
    body = Text()
    body.append(language.text("logo_alt"), style="bold")
    body.append(f"\nPNG · ~{logo_payload_size(result.logo_image):,} bytes", style="dim")
    body.append(f"\n{result.logo_image[:64]}…", style="dim")
    title = Text(language.text("logo_title"), style="bold bright_blue")
    return Panel(body, title=title, border_style="bright_blue", padding=(1, 2))


def build_error_panel(message: str) -> Panel:
    return Panel(Text(message, style="red"), border_style="red")
