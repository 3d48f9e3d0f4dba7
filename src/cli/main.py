"""CLI de pitch-forge (Typer + Rich).

Por qué la CLI es delgada:
- Normaliza la idea, construye el orquestador y presenta el resultado.
- Toda la lógica de generación vive en `core.services.pitch_pipeline`.
- Ante cualquier fallo muestra un único mensaje genérico: nunca un resultado parcial.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from adapters.ai_generation import build_generation_client
from adapters.html_exporter import export_result_html
from adapters.json_exporter import dump_result_json
from cli import doctor
from cli.ui_components import build_error_panel, build_logo_panel, build_pitch_panel, print_banner
from core.config import AppSettings
from core.domain.errors import CombinedGenerationError, MissingCredentialError
from core.domain.language import Language
from core.domain.models import GenerationConfig, GenerationResult
from core.services.pitch_parser import parse_pitch
from core.services.pitch_pipeline import PitchGenerator, normalize_idea

app = typer.Typer(no_args_is_help=True, help="AI pitch script + logo generator.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def _configure_logging(level: str, *, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_err_console, show_path=False)],
        force=True,
    )


async def _generate(*, settings: AppSettings, config: GenerationConfig, idea: str) -> GenerationResult:
    async with build_generation_client(settings) as client:
        generator = PitchGenerator(config=config, client=client)
        return await generator.generate(idea)


@app.command()
def generate(
    idea: Optional[str] = typer.Argument(None, help="Business idea (prompted when omitted)."),
    lang: Optional[Language] = typer.Option(None, "--lang", help="Prompt/output language."),
    html: Optional[Path] = typer.Option(None, "--html", help="Export a self-contained HTML page."),
    json_output: bool = typer.Option(False, "--json", help="Print the result as JSON."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
) -> None:
    """Generate a pitch script and a logo for a business idea."""

    settings = AppSettings()
    _configure_logging(settings.log_level, verbose=verbose)
    language = lang or settings.default_language

    if idea is None:
        idea = typer.prompt(language.text("idea_prompt"))
    idea_text = normalize_idea(idea)
    if idea_text is None:
        _err_console.print(f"[yellow]{language.text('empty_idea')}[/yellow]")
        raise typer.Exit(code=2)

    try:
        config = settings.generation_config(language=language)
    except MissingCredentialError as exc:
        _err_console.print(f"[red]Configuration error:[/red] {exc}")
        raise typer.Exit(code=2) from exc

    try:
        if json_output:
            result = asyncio.run(_generate(settings=settings, config=config, idea=idea_text))
        else:
            with _console.status(language.text("generating")):
                result = asyncio.run(_generate(settings=settings, config=config, idea=idea_text))
    except CombinedGenerationError as exc:
        logger.debug("Generation failed", exc_info=exc)
        _err_console.print(build_error_panel(language.text("generic_error")))
        raise typer.Exit(code=1) from exc

    if json_output:
        typer.echo(dump_result_json(result))
    else:
        print_banner(_console, language)
        _console.print(build_pitch_panel(parse_pitch(result.pitch_text), language))
        _console.print(build_logo_panel(result, language))

    if html is not None:
        out = export_result_html(result=result, idea=idea_text, output_path=html, language=language)
        _err_console.print(f"[green]HTML:[/green] {out}")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
