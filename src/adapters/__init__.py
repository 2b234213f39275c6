"""Adaptadores concretos (vault local, exportadores)."""
