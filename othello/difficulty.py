"""Difficulty tiers and their search depth / thinking delay."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from othello.config import CONFIG, AIConfig


class Difficulty(str, Enum):
    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"


@dataclass(frozen=True)
class DifficultyProfile:
    difficulty: Difficulty
    search_depth: int
    thinking_delay_ms: int


def get_profile(difficulty: Union[Difficulty, str], cfg: Optional[AIConfig] = None) -> DifficultyProfile:
    cfg = cfg or CONFIG.ai
    difficulty = Difficulty(difficulty)
    tier = cfg.tiers[difficulty.value]
    depth = int(tier["depth"])
    delay = int(tier["delay_ms"])
    if depth < 1 or delay < 0:
        raise ValueError(f"Bad tier settings for {difficulty.value}: depth={depth} delay_ms={delay}")
    return DifficultyProfile(difficulty, depth, delay)
