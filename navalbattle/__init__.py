"""Battleship board with ship placement, area-of-effect abilities and a demo command."""

__version__ = "1.0.0"
__all__ = ["board", "abilities", "cli"]