"""Language utilities for cspub.

This module centralizes the language options supported for user-facing
messages. Keeping it in the domain layer lets the message table, the config
and the CLI share a single source of truth without circular imports.
"""

from __future__ import annotations

from enum import Enum


class Language(str, Enum):
    """Supported natural-language choices for user-facing output."""

    ENGLISH = "en"
    SPANISH = "es"

    @classmethod
    def default(cls) -> "Language":
        """Return the default language used across the application."""

        return cls.ENGLISH

    def label(self) -> str:
        """Human readable label for the doctor table and logging."""

        return "Spanish" if self is Language.SPANISH else "English"

    @classmethod
    def parse(cls, value: str | None) -> "Language":
        """Parse a language code ('en', 'ES', 'es-MX'...), falling back to the default."""

        code = (value or "").strip().lower().split("-", 1)[0]
        for member in cls:
            if member.value == code:
                return member
        return cls.default()
