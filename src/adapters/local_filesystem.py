"""`PathProbe` sobre el disco local.

Por qué un adaptador:
- El Core no importa `pathlib` para decidir existencia; solo conoce el contrato.
- Facilita testeo: en tests se puede pasar un probe en memoria.
"""

from __future__ import annotations

from pathlib import Path


class LocalFileSystem:
    """Responde a `is_file` con un `stat` de solo lectura."""

    def is_file(self, path: str) -> bool:
        try:
            return Path(path).is_file()
        except (OSError, ValueError):
            # Rutas con bytes nulos o demasiado largas: no existen.
            return False
