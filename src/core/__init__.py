"""Core de Trip Planner: dominio, contratos y servicios sin dependencias de UI."""
