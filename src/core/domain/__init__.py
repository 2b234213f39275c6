"""Modelos y errores del dominio.

Por qué:
- Aquí viven las estructuras de datos puras (Pydantic v2) del viaje.
- El dominio no conoce el disco, la CLI ni Rich: solo conceptos del problema.
"""
