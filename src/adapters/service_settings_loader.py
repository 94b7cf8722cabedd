"""Carga de `ServiceSettings` desde JSON.

Soporta el formato típico de `ServiceSettings.json` junto al servicio:
    {"Subscription": "...", "Location": "...", "Slot": "Production", ...}

También acepta las claves en snake_case (`storage_service_name`, etc.).
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from core.domain.models import ServiceSettings

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_FILENAME = "ServiceSettings.json"


class ServiceSettingsLoadError(ValueError):
    """El fichero de settings no existe o no es un JSON válido."""


def load_service_settings(path: Path) -> ServiceSettings:
    if not path.is_file():
        raise ServiceSettingsLoadError(f"Service settings file not found: {path}")

    raw = path.read_text(encoding="utf-8-sig")
    try:
        data = json.loads(raw) if raw.strip() else {}
    except json.JSONDecodeError as exc:
        raise ServiceSettingsLoadError(f"Malformed service settings file {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ServiceSettingsLoadError(f"Service settings file {path} must contain a JSON object")

    try:
        settings = ServiceSettings.model_validate(data)
    except ValidationError as exc:
        raise ServiceSettingsLoadError(f"Invalid service settings in {path}: {exc}") from exc

    logger.debug("Loaded service settings from %s (subscription=%s)", path, settings.subscription)
    return settings


def find_service_settings(directory: Path) -> Path | None:
    """Busca `ServiceSettings.json` en `directory` y sus padres."""

    current = directory.resolve()
    for candidate_dir in (current, *current.parents):
        candidate = candidate_dir / DEFAULT_SETTINGS_FILENAME
        if candidate.is_file():
            return candidate
    return None
