"""Contrato de consulta al sistema de ficheros.

Por qué Protocol:
- El builder solo necesita saber si una ruta es un fichero existente.
- Permite sustituir el disco real por un stub en tests sin herencia rígida.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class PathProbe(Protocol):
    """Contrato mínimo para comprobar rutas.

    Reglas de diseño:
    - Solo lectura: no crea, bloquea ni reintenta nada.
    - Síncrono: la comprobación es un `stat` local.
    """

    def is_file(self, path: str) -> bool:
        """Devuelve True si `path` apunta a un fichero existente."""

        ...
