"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- El Core recibe un `AppSettings` explícito por invocación; nunca lo modifica.
- La persistencia entre sesiones vive en el `.env` global del usuario y solo
  la escribe la CLI (`trip-planner config set`).
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ROOT_FOLDER = "Trips"
DEFAULT_TEMPLATES_FOLDER = "Templates/TripPlanner"

ENV_PREFIX = "TRIP_PLANNER_"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "trip-planner"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "trip-planner"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "trip-planner"
    return Path.home() / ".config" / "trip-planner"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def read_user_env_vars() -> dict[str, str]:
    env_path = get_user_env_file()
    if not env_path.exists():
        return {}
    return _parse_env_lines(env_path.read_text(encoding="utf-8"))


def write_user_env_vars(values: dict[str, str]) -> Path:
    """Escribe/actualiza variables en el .env global del usuario.

    Carga lo existente, mezcla los valores nuevos y reescribe el archivo con
    claves ordenadas para que el diff entre sesiones sea estable.
    """

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing = read_user_env_vars()
    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# Trip Planner user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars / .env) sin ensuciar el Core.
    - Un único contrato de configuración para CLI, servicio y doctor.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
        case_sensitive=False,
        # El .env global de usuario se añade en `load_settings`, cuando la ruta
        # ya refleja el entorno actual (XDG_CONFIG_HOME, APPDATA).
        env_file=".env",
        env_file_encoding="utf-8",
    )

    root_folder: str = Field(
        default=DEFAULT_ROOT_FOLDER,
        description="Carpeta del vault bajo la que se crean los viajes.",
    )
    templates_folder: str = Field(
        default=DEFAULT_TEMPLATES_FOLDER,
        description="Carpeta del vault con las plantillas de itinerario y equipaje.",
    )
    vault_path: Path = Field(
        default=Path("."),
        description="Directorio raíz del vault en disco.",
    )

    @field_validator("root_folder", mode="after")
    @classmethod
    def root_folder_not_blank(cls, value: str) -> str:
        # Un valor vacío en el .env no debe dejar los viajes en la raíz del vault.
        return value.strip() or DEFAULT_ROOT_FOLDER


def load_settings(**overrides: object) -> AppSettings:
    """Construye `AppSettings` leyendo el .env del proyecto y el del usuario.

    Prioridad: argumentos explícitos, variables de entorno, config global del
    usuario (persistida entre sesiones) y por último el `.env` del proyecto.
    """

    return AppSettings(_env_file=(".env", get_user_env_file()), **overrides)
