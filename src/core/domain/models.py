"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- `frozen=True` garantiza que un `DeploymentSettings` no cambia tras construirse.

Nota:
- Estos modelos describen *qué* es un despliegue, no *cómo* se valida la
  existencia de ficheros (eso vive en `core.services.deployment_settings`).
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class ServiceSettings(BaseModel):
    """Configuración de un servicio cloud (llega ya validada desde fuera).

    Por qué existe:
    - El builder la trata como caja negra, pero necesita un tipo concreto para
      copiar la suscripción y conservar el registro completo.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    subscription: str | None = Field(
        default=None,
        alias="Subscription",
        description="Identificador (o nombre) de la suscripción destino.",
    )
    location: str | None = Field(
        default=None,
        alias="Location",
        description="Región del servicio (p.ej. 'West US').",
    )
    slot: str | None = Field(
        default=None,
        alias="Slot",
        description="Slot de despliegue ('Production' o 'Staging').",
    )
    storage_service_name: str | None = Field(
        default=None,
        alias="StorageServiceName",
        description="Cuenta de almacenamiento usada para subir el paquete.",
    )
    affinity_group: str | None = Field(
        default=None,
        alias="AffinityGroup",
        description="Grupo de afinidad (alternativa a `location`).",
    )


class DeploymentSettings(BaseModel):
    """Valor inmutable que describe un único despliegue.

    Invariante:
    - Solo se construye con entradas válidas; no existen instancias parciales.
    - Los valores se copian tal cual (sin trim ni normalización de rutas).
    """

    model_config = ConfigDict(frozen=True)

    subscription_id: str | None = Field(
        default=None,
        description="Suscripción copiada de `ServiceSettings.subscription`.",
    )
    service_settings: ServiceSettings = Field(
        ...,
        description="Registro de configuración del que se construyó el despliegue.",
    )
    package_path: str = Field(
        ...,
        min_length=1,
        description="Ruta al paquete del servicio (.cspkg).",
    )
    config_path: str = Field(
        ...,
        min_length=1,
        description="Ruta a la configuración del servicio (.cscfg).",
    )
    label: str = Field(
        ...,
        min_length=1,
        description="Etiqueta visible del despliegue.",
    )
    deployment_name: str = Field(
        ...,
        min_length=1,
        description="Nombre del despliegue.",
    )
