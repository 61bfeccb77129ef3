"""Scoring engines."""

from . import bowling
from .bowling import Frame, Game

__all__ = [
    "bowling",
    "Frame",
    "Game",
]
