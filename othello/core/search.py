import logging
import time
from dataclasses import dataclass
from typing import Optional

from othello.core.board import Board, Player
from othello.core.evaluator import Evaluator
from othello.core.moves import Move, get_valid_moves
from othello.core.utils import format_search_info

logger = logging.getLogger(__name__)

INF = 1000000


@dataclass(frozen=True)
class SearchOutcome:
    move: Move
    score: int
    worst_alternative_score: Optional[int] = None


class SearchEngine:
    def __init__(self, evaluator: Optional[Evaluator] = None, depth: int = 3, pruning: bool = True):
        self.evaluator = evaluator or Evaluator()
        self.max_depth = depth
        self.pruning = pruning
        self.nodes = 0

    def minimax(self, board: Board, player: Player, depth: int,
                alpha: int = -INF, beta: int = INF, maximizing: bool = True) -> int:
        """Depth-limited minimax with alpha-beta over Black-positive scores.

        A side with no legal move is a leaf: passes are not simulated here.
        The board is mutated while searching and restored before returning.
        """
        self.nodes += 1
        if depth == 0:
            return self.evaluator.evaluate(board)

        moves = get_valid_moves(player, board)
        if not moves:
            return self.evaluator.evaluate(board)

        opponent = player.opponent

        if maximizing:
            best = -INF
            for move in moves:
                record = board.apply(move.row, move.col, player, move.flips)
                value = self.minimax(board, opponent, depth - 1, alpha, beta, False)
                board.undo(record)
                best = max(best, value)
                alpha = max(alpha, value)
                if self.pruning and beta <= alpha:
                    break  # beta cutoff
            return best

        best = INF
        for move in moves:
            record = board.apply(move.row, move.col, player, move.flips)
            value = self.minimax(board, opponent, depth - 1, alpha, beta, True)
            board.undo(record)
            best = min(best, value)
            beta = min(beta, value)
            if self.pruning and beta <= alpha:
                break  # alpha cutoff
        return best

    def evaluate_reply(self, board: Board, move: Move, player: Player, depth: int) -> int:
        """Score `move` by searching the opponent's replies, minimizing first.

        The reply is always searched with maximizing=False, whichever colour
        `player` is, so the score stays Black-positive.
        """
        record = board.apply(move.row, move.col, player, move.flips)
        try:
            return self.minimax(board, player.opponent, depth, -INF, INF, False)
        finally:
            board.undo(record)

    def search_best_move(self, board: Board, player: Player,
                         depth: Optional[int] = None) -> Optional[SearchOutcome]:
        """Pick the candidate with the highest reply score, first in scan order on ties.

        Also reports the lowest score among the other candidates, which the
        commentary uses to tell a clearly best move from a close call.
        """
        moves = get_valid_moves(player, board)
        if not moves:
            return None

        depth = self.max_depth if depth is None else depth
        search_board = board.copy()
        self.nodes = 0
        start_time = time.time()

        scores = [self.evaluate_reply(search_board, move, player, depth) for move in moves]

        best_index = 0
        for i, score in enumerate(scores):
            if score > scores[best_index]:
                best_index = i

        others = [s for i, s in enumerate(scores) if i != best_index]
        outcome = SearchOutcome(
            move=moves[best_index],
            score=scores[best_index],
            worst_alternative_score=min(others) if others else None,
        )

        elapsed = time.time() - start_time
        logger.debug(format_search_info(depth, outcome.score, self.nodes, elapsed,
                                        outcome.move, len(moves)))
        return outcome
