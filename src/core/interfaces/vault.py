"""Contrato del almacenamiento de notas (vault).

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite que el vault local, uno en memoria (tests) o uno remoto sean
  intercambiables sin acoplar el motor de scaffolding a `pathlib`.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Vault(Protocol):
    """Operaciones mínimas que necesita el motor.

    Reglas de diseño:
    - Todo es asíncrono porque cada llamada es I/O y puede suspender la tarea.
    - Las rutas son relativas a la raíz del vault y usan '/' como separador.
    - Los errores se propagan como excepciones (`OSError`, `ValueError`); es el
      motor quien los convierte en `CreationOutcome`.
    """

    async def exists(self, path: str) -> bool:
        """True si existe cualquier entrada (carpeta o documento) en `path`."""

        ...

    async def is_document(self, path: str) -> bool:
        """True solo si `path` existe y es un documento (no una carpeta)."""

        ...

    async def create_folder(self, path: str) -> None:
        ...

    async def create_document(self, path: str, content: str) -> None:
        """Crea un documento nuevo; falla si `path` ya existe."""

        ...

    async def read_document(self, path: str) -> str:
        ...
