"""Exportación JSON de un despliegue validado.

Por qué JSON:
- Permite que otra herramienta (o un paso de CI) consuma el despliegue ya
  validado sin repetir las comprobaciones.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import DeploymentSettings


def export_deployment_json(*, deployment: DeploymentSettings, output_path: Path) -> Path:
    """Exporta `DeploymentSettings` a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = deployment.model_dump(mode="json")
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
