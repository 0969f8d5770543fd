"""Core primitives shared by the map generator."""

from tenebra.core.rng import GameRNG

__all__ = ["GameRNG"]
