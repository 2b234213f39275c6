"""Servicios del Core.

Por qué:
- Orquestan el dominio contra los contratos (`core.interfaces`) sin imprimir
  nada; la CLI se engancha mediante hooks.
"""
