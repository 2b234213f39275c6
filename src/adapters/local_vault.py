"""Vault sobre un directorio local.

Por qué un adaptador:
- El motor solo conoce el contrato `core.interfaces.vault.Vault`.
- Aquí viven los detalles de `pathlib`, codificación y protección de la raíz.

Reglas:
- Las rutas son relativas y usan '/'; se rechazan rutas absolutas y cualquier
  intento de salir de la raíz (`..`).
- `create_document` usa creación exclusiva (modo "x"): si otro proceso gana la
  carrera entre el `exists` y el `create`, el resultado es un error, nunca una
  sobrescritura.
- Las llamadas bloqueantes se ejecutan con `asyncio.to_thread`.
"""

from __future__ import annotations

import asyncio
import posixpath
from pathlib import Path


def normalize_vault_path(path: str) -> str:
    """Normaliza una ruta relativa del vault como 'Trips/Lisbon-June'."""

    raw = (path or "").strip()
    if not raw:
        raise ValueError("empty path")
    if "\x00" in raw:
        raise ValueError("invalid path")
    if raw.startswith("/") or raw.startswith("\\"):
        raise ValueError(f"absolute paths are not allowed: '{raw}'")

    segments = raw.split("/")
    if ".." in segments:
        raise ValueError(f"path traversal not allowed: '{raw}'")

    norm = posixpath.normpath(raw)
    if norm in (".", ""):
        raise ValueError("invalid path")
    return norm


class LocalVault:
    """Implementación de `Vault` respaldada por el sistema de ficheros."""

    def __init__(self, root: Path) -> None:
        self._root = Path(root)

    def resolve(self, path: str) -> Path:
        return self._root / normalize_vault_path(path)

    async def exists(self, path: str) -> bool:
        target = self.resolve(path)
        # lexists: un symlink roto también ocupa el nombre.
        return await asyncio.to_thread(lambda: target.is_symlink() or target.exists())

    async def is_document(self, path: str) -> bool:
        target = self.resolve(path)
        return await asyncio.to_thread(target.is_file)

    async def create_folder(self, path: str) -> None:
        target = self.resolve(path)
        await asyncio.to_thread(target.mkdir, parents=True, exist_ok=False)

    async def create_document(self, path: str, content: str) -> None:
        target = self.resolve(path)

        def _write() -> None:
            with target.open("x", encoding="utf-8", newline="") as fh:
                fh.write(content)

        await asyncio.to_thread(_write)

    async def read_document(self, path: str) -> str:
        target = self.resolve(path)

        def _read() -> str:
            with target.open("r", encoding="utf-8", newline="") as fh:
                return fh.read()

        return await asyncio.to_thread(_read)
