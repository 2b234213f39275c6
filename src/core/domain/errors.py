"""Errores del dominio."""

from __future__ import annotations


class InvalidInput(ValueError):
    """Un campo obligatorio del viaje está vacío.

    Se lanza antes de cualquier operación sobre el vault: si aparece, el
    scaffolding no ha empezado.
    """

    def __init__(self, fields: list[str]) -> None:
        self.fields = list(fields)
        super().__init__(f"Required trip field(s) empty: {', '.join(self.fields)}")
