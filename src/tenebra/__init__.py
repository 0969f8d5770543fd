"""Tenebra -- layered dungeon map generation for a deck-building roguelike."""

__version__ = "0.1.0"
