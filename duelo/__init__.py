"""Turn-based battle simulator for two teams of armed characters."""

__version__ = "0.1.0"
__all__ = ["armas", "personagens", "simulador", "cli"]