"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import check_reachable
from core.config import AppSettings, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="pitch-forge Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    if settings.has_api_key():
        table.add_row("AI key", "OK", "Credential configured")
    else:
        table.add_row("AI key", "MISSING", "Set PITCH_FORGE_API_KEY or run `doctor setup-ai`")
    table.add_row("AI base_url", "OK", settings.base_url)
    table.add_row("Text model", "OK", settings.text_model)
    table.add_row("Image model", "OK", settings.image_model)
    table.add_row("Language", "OK", settings.default_language.label())

    # Connectivity (best-effort)
    ok_http, detail_http = asyncio.run(check_reachable(settings.base_url, settings))
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not settings.has_api_key():
        _console.print("\n[yellow]Note:[/yellow] `generate` refuses to start without an API key.")
        raise typer.Exit(code=1)


@app.command(name="setup-ai")
def setup_ai() -> None:
    """Interactive AI setup (stores config in the user config .env)."""

    provider = typer.prompt(
        "AI provider",
        default="gemini",
        show_default=True,
    ).strip().lower()

    presets: dict[str, dict[str, str]] = {
        "gemini": {
            "PITCH_FORGE_BASE_URL": "https://generativelanguage.googleapis.com/v1beta/openai/",
            "PITCH_FORGE_TEXT_MODEL": "gemini-2.5-flash",
            "PITCH_FORGE_IMAGE_MODEL": "imagen-4.0-generate-001",
        },
        "openai": {
            "PITCH_FORGE_BASE_URL": "https://api.openai.com/v1",
            "PITCH_FORGE_TEXT_MODEL": "gpt-4o-mini",
            "PITCH_FORGE_IMAGE_MODEL": "dall-e-3",
        },
    }

    values = presets.get(provider, {}).copy()
    if not values:
        _console.print("[yellow]Unknown provider preset. You can still enter custom values.[/yellow]")

    base_url = typer.prompt("AI base URL", default=values.get("PITCH_FORGE_BASE_URL", ""), show_default=True).strip()
    text_model = typer.prompt(
        "Text model", default=values.get("PITCH_FORGE_TEXT_MODEL", ""), show_default=True
    ).strip()
    image_model = typer.prompt(
        "Image model", default=values.get("PITCH_FORGE_IMAGE_MODEL", ""), show_default=True
    ).strip()
    api_key = typer.prompt("AI API key", hide_input=True, confirmation_prompt=False).strip()

    if not base_url or not text_model or not image_model or not api_key:
        raise typer.BadParameter("base_url, models and api key are required")

    env_path = write_user_env_vars(
        {
            "PITCH_FORGE_BASE_URL": base_url,
            "PITCH_FORGE_TEXT_MODEL": text_model,
            "PITCH_FORGE_IMAGE_MODEL": image_model,
            "PITCH_FORGE_API_KEY": api_key,
        }
    )

    _console.print(f"[green]Saved AI config to:[/green] {env_path}")
