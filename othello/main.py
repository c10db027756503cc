import logging
from typing import Optional, Union

from othello.ai import RandomSource
from othello.config import CONFIG, Config
from othello.difficulty import Difficulty
from othello.game import GameEngine, GameMode

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None):
    logging.basicConfig(level=(level or CONFIG.log_level).upper(), format=LOG_FORMAT)


def create_engine(mode: Union[GameMode, str] = GameMode.PVP,
                  difficulty: Union[Difficulty, str, None] = None,
                  config: Optional[Config] = None,
                  rng: Optional[RandomSource] = None) -> GameEngine:
    """Build a game engine with a fresh game already started."""
    game = GameEngine(config, rng=rng)
    game.start_new_game(mode, difficulty)
    return game
