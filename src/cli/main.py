"""CLI principal (Typer).

Por qué la CLI es delgada:
- Toda la validación vive en `core.services.deployment_settings`; aquí solo se
  recogen argumentos, se carga la configuración y se presenta el resultado.
- Los errores de validación se muestran tal cual al usuario y abortan con código 1.
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from adapters.json_exporter import export_deployment_json
from adapters.service_settings_loader import (
    ServiceSettingsLoadError,
    find_service_settings,
    load_service_settings,
)
from cli import doctor
from cli.ui_components import build_deployment_table, build_error_panel, print_banner
from core.config import AppSettings
from core.domain.errors import DeploymentSettingsError
from core.domain.language import Language
from core.domain.messages import MessageTable
from core.domain.models import ServiceSettings
from core.services.deployment_settings import require

logger = logging.getLogger(__name__)

app = typer.Typer(no_args_is_help=True, help="Validate cloud service deployment settings.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


def configure_logging(level: str) -> None:
    """Configura logging una sola vez (RichHandler a stderr)."""

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _resolve_settings_path(explicit: Path | None, settings: AppSettings, package: str) -> Path | None:
    """Orden: --settings, CSPUB_SERVICE_SETTINGS_PATH, búsqueda desde el paquete, cwd."""

    if explicit is not None:
        return explicit
    if settings.service_settings_path is not None:
        return settings.service_settings_path
    if package:
        found = find_service_settings(Path(package).parent)
        if found is not None:
            return found
    return find_service_settings(Path.cwd())


@app.callback()
def main(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Override CSPUB_LOG_LEVEL (DEBUG, INFO, WARNING, ERROR).",
    ),
) -> None:
    overrides = {"log_level": log_level} if log_level else {}
    try:
        settings = AppSettings(**overrides)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-level") from exc
    configure_logging(settings.log_level)


@app.command()
def check(
    package: str = typer.Argument(..., help="Path to the service package (.cspkg)."),
    config: str = typer.Argument(..., help="Path to the service configuration (.cscfg)."),
    label: str | None = typer.Option(None, "--label", "-l", help="Deployment label."),
    name: str | None = typer.Option(None, "--name", "-n", help="Deployment name."),
    settings_path: Path | None = typer.Option(
        None,
        "--settings",
        "-s",
        help="ServiceSettings.json to use (default: search from the package directory).",
    ),
    json_out: Path | None = typer.Option(None, "--json-out", help="Write the validated settings as JSON."),
    spanish: bool = typer.Option(False, "--spanish", help="Show messages in Spanish."),
    no_banner: bool = typer.Option(False, "--no-banner", help="Do not print the banner."),
) -> None:
    """Validate the inputs of a deployment and show the resulting settings."""

    app_settings = AppSettings()
    language = Language.SPANISH if spanish else app_settings.default_language
    messages = MessageTable.for_language(language)

    if not no_banner:
        print_banner(_console)

    service_settings: ServiceSettings | None = None
    path = _resolve_settings_path(settings_path, app_settings, package)
    if path is not None:
        try:
            service_settings = load_service_settings(path)
        except ServiceSettingsLoadError as exc:
            _console.print(build_error_panel(str(exc)))
            raise typer.Exit(code=1) from exc
    else:
        logger.info("No ServiceSettings.json found; continuing without service settings")

    try:
        deployment = require(
            service_settings,
            package,
            config,
            label if label is not None else app_settings.default_label,
            name,
            messages=messages,
        )
    except DeploymentSettingsError as exc:
        logger.debug("Deployment settings rejected: %r", exc.error)
        _console.print(build_error_panel(exc.message))
        raise typer.Exit(code=1) from exc

    _console.print(build_deployment_table(deployment))

    if json_out is not None:
        out = export_deployment_json(deployment=deployment, output_path=json_out)
        _console.print(f"[green]Saved deployment settings to:[/green] {out}")


def run() -> None:
    app()
