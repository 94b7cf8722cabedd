"""Construction of `DeploymentSettings` from raw command inputs.

The builder validates the five inputs in a fixed order and stops at the first
failure, so a caller with several bad inputs always sees the same error.
`construct` returns either the settings or a structured error value;
`require` is the raising variant used at the CLI edge.
"""

from __future__ import annotations

from adapters.local_filesystem import LocalFileSystem
from core.domain.errors import (
    DeploymentSettingsError,
    InvalidArgument,
    MissingSettings,
    PathNotFound,
    SettingsError,
)
from core.domain.messages import MessageTable
from core.domain.models import DeploymentSettings, ServiceSettings
from core.interfaces.filesystem import PathProbe

PACKAGE_ARGUMENT = "package"
PACKAGE_ELEMENT = "Package"
SERVICE_CONFIGURATION = "Service Configuration"
LABEL_ARGUMENT = "Label"
DEPLOYMENT_NAME_ARGUMENT = "Deployment name"


def _check_file(
    value: str | None,
    *,
    argument: str,
    element: str,
    probe: PathProbe,
) -> SettingsError | None:
    if not value:
        return InvalidArgument(argument)
    if not probe.is_file(value):
        return PathNotFound(element, value)
    return None


def construct(
    service_settings: ServiceSettings | None,
    package_path: str | None,
    config_path: str | None,
    label: str | None,
    deployment_name: str | None,
    *,
    probe: PathProbe | None = None,
) -> DeploymentSettings | SettingsError:
    """Validate the inputs and build a `DeploymentSettings`.

    Order (first failure wins):
    1. service settings present
    2. package path non-empty, then existing file
    3. service configuration path non-empty, then existing file
    4. label non-empty
    5. deployment name non-empty

    Strings are used verbatim: whitespace-only values count as non-empty.
    """

    if service_settings is None:
        return MissingSettings()

    probe = probe or LocalFileSystem()

    error = _check_file(
        package_path,
        argument=PACKAGE_ARGUMENT,
        element=PACKAGE_ELEMENT,
        probe=probe,
    )
    if error is not None:
        return error

    error = _check_file(
        config_path,
        argument=SERVICE_CONFIGURATION,
        element=SERVICE_CONFIGURATION,
        probe=probe,
    )
    if error is not None:
        return error

    if not label:
        return InvalidArgument(LABEL_ARGUMENT)
    if not deployment_name:
        return InvalidArgument(DEPLOYMENT_NAME_ARGUMENT)

    return DeploymentSettings(
        subscription_id=service_settings.subscription,
        service_settings=service_settings,
        package_path=package_path,
        config_path=config_path,
        label=label,
        deployment_name=deployment_name,
    )


def require(
    service_settings: ServiceSettings | None,
    package_path: str | None,
    config_path: str | None,
    label: str | None,
    deployment_name: str | None,
    *,
    probe: PathProbe | None = None,
    messages: MessageTable | None = None,
) -> DeploymentSettings:
    """Like `construct`, but raise `DeploymentSettingsError` on failure."""

    result = construct(
        service_settings,
        package_path,
        config_path,
        label,
        deployment_name,
        probe=probe,
    )
    if isinstance(result, DeploymentSettings):
        return result

    messages = messages or MessageTable()
    raise DeploymentSettingsError(result, messages.render(result))
