"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Los value objects congelados (`frozen=True`) se comparan por valor, lo que
  hace trivial verificar que la derivación de rutas es determinista.

Nota:
- Estos modelos describen *qué* es un viaje y *qué* pasó al crearlo, no *cómo*
  se escribe en disco.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class TripRequest(BaseModel):
    """Datos de entrada de un viaje tal como los recoge la CLI.

    Por qué no se valida la no-vacuidad aquí:
    - Un request vacío debe poder representarse para que el derivador lo
      rechace con `InvalidInput` antes de tocar el vault.
    """

    model_config = ConfigDict(frozen=True)

    destination: str = Field(
        ...,
        description="Destino del viaje (p.ej. 'Lisbon'). Se usa sin normalizar.",
    )
    month: str = Field(
        ...,
        description="Mes del viaje (p.ej. 'June'). Se usa sin normalizar.",
    )
    duration_days: int | None = Field(
        default=None,
        gt=0,
        description="Duración en días. Informativo: el scaffolding no lo consume.",
    )


class ArtifactPath(BaseModel):
    """Par (etiqueta, ruta) de un documento inicial del viaje."""

    model_config = ConfigDict(frozen=True)

    label: str = Field(..., min_length=1, description="Etiqueta del artefacto (p.ej. 'Itinerary').")
    path: str = Field(..., min_length=1, description="Ruta relativa al vault, separada por '/'.")


class TripLocation(BaseModel):
    """Ubicación derivada de un `TripRequest`.

    Invariantes:
    - `folder_path` es `<root>/<destination>-<month>`.
    - Cada artefacto es hijo directo de `folder_path`, en orden fijo.
    """

    model_config = ConfigDict(frozen=True)

    folder_path: str = Field(..., min_length=1, description="Carpeta del viaje.")
    artifact_paths: tuple[ArtifactPath, ...] = Field(
        default_factory=tuple,
        description="Documentos a crear dentro de la carpeta, en orden.",
    )


class TemplateSource(BaseModel):
    """Referencia de solo lectura a una plantilla del vault."""

    model_config = ConfigDict(frozen=True)

    label: str = Field(..., min_length=1, description="Artefacto al que alimenta la plantilla.")
    path: str = Field(..., min_length=1, description="Ruta relativa de la plantilla.")


class OutcomeStatus(str, Enum):
    """Resultado terminal de un intento de creación."""

    CREATED = "created"
    ALREADY_EXISTS = "already_exists"
    FAILED = "failed"


class ContentSource(str, Enum):
    """De dónde salió el contenido de un documento creado."""

    TEMPLATE = "template"
    DEFAULT = "default"


class CreationOutcome(BaseModel):
    """Resultado de crear una entrada (carpeta o documento).

    Por qué un modelo y no una excepción:
    - `already_exists` y `failed` son estados finales legítimos que el caller
      siempre debe poder reportar; nunca se descartan en silencio.
    """

    model_config = ConfigDict(frozen=True)

    label: str = Field(..., min_length=1, description="'Folder' o la etiqueta del artefacto.")
    path: str = Field(..., description="Ruta afectada.")
    status: OutcomeStatus = Field(..., description="created / already_exists / failed.")
    reason: str | None = Field(
        default=None,
        description="Motivo del fallo (solo para `failed`).",
    )
    content_source: ContentSource | None = Field(
        default=None,
        description="Origen del contenido (solo para documentos creados).",
    )

    @property
    def is_failure(self) -> bool:
        return self.status is OutcomeStatus.FAILED


class ScaffoldReport(BaseModel):
    """Agregado con todos los resultados de una invocación, en orden.

    El primer resultado siempre es el de la carpeta; le siguen los artefactos
    en el orden de `TripLocation.artifact_paths`.
    """

    location: TripLocation
    outcomes: list[CreationOutcome] = Field(default_factory=list)

    @property
    def folder(self) -> CreationOutcome | None:
        return self.outcomes[0] if self.outcomes else None

    @property
    def artifacts(self) -> list[CreationOutcome]:
        return self.outcomes[1:]

    @property
    def failed(self) -> list[CreationOutcome]:
        return [o for o in self.outcomes if o.is_failure]

    @property
    def ok(self) -> bool:
        return not self.failed
