"""A turn-based text role-playing game played in the terminal."""

__version__ = "0.1.0"
__all__ = ["constants", "weapon", "monster", "player", "game"]