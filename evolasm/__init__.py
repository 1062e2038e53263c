"""Tile-world simulation sandbox with noise terrain, a follow camera and a player."""

__version__ = "0.1.0"
__all__ = ["__version__"]