"""Static positional evaluator and score -> win-rate mapping."""

import math
from typing import List, Optional

from othello.config import CONFIG, EvalConfig
from othello.core.board import SIZE, Board, Player


def score_to_win_rate(score: float, scale: float = 100.0) -> int:
    """Logistic squash of a Black-positive score into Black's win chance (0-100).

    0 maps to 50; large positive scores approach 100, large negative 0.
    """
    try:
        return round(100 / (1 + math.exp(-score / scale)))
    except OverflowError:
        return 0


class Evaluator:
    def __init__(self, cfg: Optional[EvalConfig] = None):
        self.cfg = cfg or CONFIG.eval
        self.weights: List[List[int]] = self.cfg.weights

    def evaluate(self, board: Board) -> int:
        """Return the positional score, positive favors Black regardless of turn."""
        score = 0
        for r in range(SIZE):
            row = board.grid[r]
            weights = self.weights[r]
            for c in range(SIZE):
                cell = row[c]
                if cell is Player.BLACK:
                    score += weights[c]
                elif cell is Player.WHITE:
                    score -= weights[c]
        return score

    def weight(self, row: int, col: int) -> int:
        return self.weights[row][col]

    def is_corner(self, row: int, col: int) -> bool:
        return self.weights[row][col] > self.cfg.corner_threshold

    def win_rate(self, score: float) -> int:
        return score_to_win_rate(score, self.cfg.win_rate_scale)
