"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos (vault).
- Permite invertir dependencias: el motor depende de abstracciones.
"""
