"""Seton's memory game: memorize a board of stones, then rebuild it."""
from __future__ import annotations

from .controller import RoundController
from .models import Cell, RoundState, Score, SessionConfig

__all__ = ["Cell", "RoundController", "RoundState", "Score", "SessionConfig"]
