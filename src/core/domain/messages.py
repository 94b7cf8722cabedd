"""Tabla de mensajes para errores de validación.

Por qué una tabla explícita:
- El builder recibe (o crea) su `MessageTable`; no hay tabla global oculta.
- Permite mensajes en inglés/español reutilizando `Language`.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from core.domain.errors import ErrorKind, InvalidArgument, PathNotFound, SettingsError
from core.domain.language import Language


_TEMPLATES: dict[Language, dict[ErrorKind, str]] = {
    Language.ENGLISH: {
        ErrorKind.MISSING_SETTINGS: "Invalid service setting",
        ErrorKind.INVALID_ARGUMENT: "Invalid or empty argument: {name}",
        ErrorKind.PATH_NOT_FOUND: "Path does not exist for element {element}: {path}",
    },
    Language.SPANISH: {
        ErrorKind.MISSING_SETTINGS: "Configuración de servicio no válida",
        ErrorKind.INVALID_ARGUMENT: "Argumento no válido o vacío: {name}",
        ErrorKind.PATH_NOT_FOUND: "La ruta no existe para el elemento {element}: {path}",
    },
}


@dataclass(frozen=True)
class MessageTable:
    """Mapea cada `ErrorKind` a una plantilla `str.format`."""

    templates: dict[ErrorKind, str] = field(
        default_factory=lambda: dict(_TEMPLATES[Language.ENGLISH])
    )

    @classmethod
    def for_language(cls, language: Language) -> "MessageTable":
        return cls(templates=dict(_TEMPLATES[language]))

    def render(self, error: SettingsError) -> str:
        """Devuelve el mensaje legible para `error`."""

        template = self.templates[error.kind]
        if isinstance(error, InvalidArgument):
            return template.format(name=error.name)
        if isinstance(error, PathNotFound):
            return template.format(element=error.element, path=error.path)
        return template
