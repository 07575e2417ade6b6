"""
Block Invaders: a minimal rectangle-drawn arcade shooter.
"""

from __future__ import annotations

from block_invaders.session import GameSession
from block_invaders.settings import GameSettings
from block_invaders.world import GameState

__all__ = ["GameSession", "GameSettings", "GameState"]

__version__ = "0.1.0"
