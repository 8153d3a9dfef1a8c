"""Route group exports."""

from . import health, maps, operations, routes

__all__ = ["routes", "maps", "operations", "health"]
