"""Move selection per difficulty tier. Pure: no timing, no live-board mutation."""

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Protocol

from othello.commentary import CommentaryGenerator
from othello.config import CONFIG, AIConfig
from othello.core.board import Board, Player
from othello.core.moves import Move, get_valid_moves
from othello.core.search import SearchEngine, SearchOutcome
from othello.difficulty import Difficulty, get_profile

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


@dataclass(frozen=True)
class Decision:
    move: Move
    rationale: str
    difficulty: Difficulty
    outcome: Optional[SearchOutcome] = None


class MoveSelector:
    def __init__(self, search: Optional[SearchEngine] = None, rng: Optional[RandomSource] = None,
                 cfg: Optional[AIConfig] = None):
        self.cfg = cfg or CONFIG.ai
        self.search = search or SearchEngine()
        self.rng = rng or random.Random(self.cfg.seed)
        self.commentary = CommentaryGenerator(self.search.evaluator, self.cfg.clear_best_margin)

    def select_move(self, board: Board, player: Player, difficulty: Difficulty) -> Optional[Decision]:
        """Choose a move for `player`, or None when there is nothing to play."""
        moves = get_valid_moves(player, board)
        if not moves:
            return None
        difficulty = Difficulty(difficulty)
        if difficulty is Difficulty.EASY:
            return self._select_easy(moves)
        if difficulty is Difficulty.HARD:
            return self._select_hard(board, player)
        return self._select_normal(moves)

    def _select_easy(self, moves: List[Move]) -> Decision:
        move = moves[self.rng.randrange(len(moves))]
        return Decision(move, self.commentary.for_random(move), Difficulty.EASY)

    def _select_normal(self, moves: List[Move]) -> Decision:
        evaluator = self.search.evaluator
        best_move = moves[0]
        best_score = evaluator.weight(best_move.row, best_move.col) + len(best_move.flips)
        for move in moves[1:]:
            score = evaluator.weight(move.row, move.col) + len(move.flips)
            if score > best_score:
                best_score = score
                best_move = move
        return Decision(best_move, self.commentary.for_greedy(best_move), Difficulty.NORMAL)

    def _select_hard(self, board: Board, player: Player) -> Decision:
        depth = get_profile(Difficulty.HARD, self.cfg).search_depth
        outcome = self.search.search_best_move(board, player, depth)
        logger.debug("hard pick %s score %s worst alternative %s",
                     outcome.move.coords, outcome.score, outcome.worst_alternative_score)
        return Decision(outcome.move, self.commentary.for_search(outcome), Difficulty.HARD, outcome)


def select_move(board: Board, player: Player, difficulty: Difficulty,
                rng: Optional[RandomSource] = None,
                search: Optional[SearchEngine] = None) -> Optional[Decision]:
    return MoveSelector(search=search, rng=rng).select_move(board, player, difficulty)
