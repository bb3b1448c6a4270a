"""
blockflap: a 128x128 side-scrolling block-through-pipes arcade game.
"""

from .data_models import GameSession, Pipe, PipeQueue, Player
from .game_loop import GameLoop, GameState
from .physics_core import PhysicsCore
from .physics_engine import PipeEngine

__all__ = [
    "GameLoop",
    "GameSession",
    "GameState",
    "PhysicsCore",
    "Pipe",
    "PipeEngine",
    "PipeQueue",
    "Player",
]

__version__ = "0.1.0"
