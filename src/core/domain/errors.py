"""Structured validation failures for deployment settings.

Failures are plain values: the builder returns them instead of raising, and
only the edges (CLI, `require`) turn them into `DeploymentSettingsError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class ErrorKind(str, Enum):
    """Symbolic key used to look up a message template."""

    MISSING_SETTINGS = "missing_settings"
    INVALID_ARGUMENT = "invalid_argument"
    PATH_NOT_FOUND = "path_not_found"


@dataclass(frozen=True)
class MissingSettings:
    """No `ServiceSettings` record was supplied."""

    kind: ErrorKind = ErrorKind.MISSING_SETTINGS


@dataclass(frozen=True)
class InvalidArgument:
    """A required string argument is None or empty."""

    name: str
    kind: ErrorKind = ErrorKind.INVALID_ARGUMENT


@dataclass(frozen=True)
class PathNotFound:
    """A required path is non-empty but does not point to an existing file."""

    element: str
    path: str
    kind: ErrorKind = ErrorKind.PATH_NOT_FOUND


SettingsError = Union[MissingSettings, InvalidArgument, PathNotFound]


class DeploymentSettingsError(ValueError):
    """Raised at the edges when a `SettingsError` must abort the operation."""

    def __init__(self, error: SettingsError, message: str) -> None:
        super().__init__(message)
        self.error = error
        self.message = message
