"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en `check` y `doctor`.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import DeploymentSettings


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Se puede desactivar con `--no-banner` (modos no interactivos / pipelines).
    """

    title = Text("cspub", style="bold cyan")
    subtitle = Text("Cloud service publishing • deployment settings", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_deployment_table(deployment: DeploymentSettings) -> Table:
    """Tabla con los campos de un despliegue validado."""

    table = Table(title="Deployment Settings")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")

    service = deployment.service_settings
    table.add_row("Subscription", deployment.subscription_id or "-")
    table.add_row("Deployment name", deployment.deployment_name)
    table.add_row("Label", deployment.label)
    table.add_row("Package", deployment.package_path)
    table.add_row("Service Configuration", deployment.config_path)
    table.add_row("Location", service.location or "-")
    table.add_row("Slot", service.slot or "-")
    table.add_row("Storage account", service.storage_service_name or "-")
    table.add_row("Affinity group", service.affinity_group or "-")
    return table


def build_error_panel(message: str) -> Panel:
    """Panel rojo para un fallo de validación o de carga."""

    return Panel(Text(message, style="bold red"), title="Error", border_style="red")
