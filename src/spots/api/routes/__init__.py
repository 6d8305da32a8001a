"""Route group exports."""

from . import health, nearby

__all__ = ["health", "nearby"]
