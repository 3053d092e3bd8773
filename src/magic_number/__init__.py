from .UI import UI as MagicNumberUI
from .game_round import GameRound
from .session import GameSession
from .secret_source_numpy import SecretSourceNumpy
from .secret_source_fixed import SecretSourceFixed
from .config import loadSettings

__all__ = [
    "MagicNumberUI", "GameRound", "GameSession", 
    "SecretSourceNumpy", "SecretSourceFixed", "loadSettings", 
]
