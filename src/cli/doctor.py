"""Doctor command for environment diagnostics."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from adapters.service_settings_loader import (
    ServiceSettingsLoadError,
    find_service_settings,
    load_service_settings,
)
from core.config import AppSettings, get_user_env_file

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_service_settings(path: Path | None) -> tuple[str, str]:
    if path is None:
        return "MISSING", "No ServiceSettings.json found from the current directory"
    try:
        settings = load_service_settings(path)
    except ServiceSettingsLoadError as exc:
        return "FAIL", str(exc)
    return "OK", f"{path} (subscription: {settings.subscription or '-'})"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="cspub Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    user_env = get_user_env_file()
    table.add_row("User config", "OK" if user_env.exists() else "OPTIONAL", str(user_env))
    table.add_row("Language", "OK", settings.default_language.label())
    table.add_row("Log level", "OK", settings.log_level)
    if settings.default_label:
        table.add_row("Default label", "OK", settings.default_label)
    else:
        table.add_row("Default label", "OPTIONAL", "No default -> --label is required")

    # Service settings
    path = settings.service_settings_path or find_service_settings(Path.cwd())
    status, detail = _check_service_settings(path)
    table.add_row("Service settings", status, detail)

    _console.print(table)

    if status != "OK":
        _console.print(
            "\n[yellow]Note:[/yellow] Pass `--settings` to `cspub check` or set CSPUB_SERVICE_SETTINGS_PATH."
        )
