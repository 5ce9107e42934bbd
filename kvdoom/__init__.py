"""Game logic for a small first-person dungeon crawler: world, level, player and entities."""

__version__ = "0.1.0"