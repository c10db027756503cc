"""Game state machine: turn order, passes, termination, resignation and win-rate history."""

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple, Union

from othello.ai import Decision, MoveSelector, RandomSource
from othello.commentary import CommentaryGenerator
from othello.config import CONFIG, Config
from othello.core.board import Board, Player, in_bounds, to_coords
from othello.core.evaluator import Evaluator
from othello.core.moves import Move, get_flips, get_valid_moves, has_valid_move
from othello.core.search import INF, SearchEngine
from othello.difficulty import Difficulty, DifficultyProfile, get_profile

logger = logging.getLogger(__name__)


class GameMode(str, Enum):
    PVP = "pvp"
    PVE = "pve"


@dataclass(frozen=True)
class WinRateSample:
    turn: int
    black: int
    white: int


@dataclass(frozen=True)
class GameResult:
    winner: Optional[Player]  # None is a draw
    black_score: int
    white_score: int
    via_resignation: bool = False

    @property
    def is_draw(self) -> bool:
        return self.winner is None

    def describe(self) -> str:
        if self.winner is None:
            return f"Draw! {self.black_score} - {self.white_score}"
        suffix = " by resignation" if self.via_resignation else ""
        return f"{self.winner.label} wins{suffix}! {self.black_score} - {self.white_score}"


@dataclass(frozen=True)
class MoveOutcome:
    accepted: bool
    player: Player
    move: Optional[Move] = None
    passed: Optional[Player] = None  # side that had to pass after this move
    result: Optional[GameResult] = None
    message: str = ""


def score_result(board: Board) -> GameResult:
    black, white = board.counts()
    if black > white:
        winner = Player.BLACK
    elif white > black:
        winner = Player.WHITE
    else:
        winner = None
    return GameResult(winner, black, white)


class GameEngine:
    def __init__(self, config: Optional[Config] = None, rng: Optional[RandomSource] = None,
                 search: Optional[SearchEngine] = None):
        self.config = config or CONFIG
        self.evaluator = search.evaluator if search else Evaluator(self.config.eval)
        self.search = search or SearchEngine(self.evaluator)
        self.selector = MoveSelector(self.search, rng, self.config.ai)
        self.commentary: CommentaryGenerator = self.selector.commentary
        self.human_color = Player(self.config.ai.human_color.lower())
        self.lock = threading.RLock()

        self._board = Board()
        self.current_player = Player.BLACK
        self.mode = GameMode.PVP
        self.difficulty: Optional[Difficulty] = None
        self.result: Optional[GameResult] = None
        self.win_rate_history: List[WinRateSample] = []
        self._record_win_rate()

    # ---- commands ---------------------------------------------------------

    def start_new_game(self, mode: Union[GameMode, str] = GameMode.PVP,
                       difficulty: Union[Difficulty, str, None] = None):
        """Reset board, turn and history. PvE without a difficulty plays Normal."""
        with self.lock:
            self.mode = GameMode(mode)
            if self.mode is GameMode.PVE:
                self.difficulty = Difficulty(difficulty or self.config.ai.default_difficulty)
            else:
                self.difficulty = None
            self._board = Board()
            self.current_player = Player.BLACK
            self.result = None
            self.win_rate_history = []
            self._record_win_rate()
            logger.info("new game: mode=%s difficulty=%s", self.mode.value,
                        self.difficulty.value if self.difficulty else "-")

    def set_position(self, board: Board, player: Union[Player, str] = Player.BLACK):
        """Continue the current mode from an arbitrary position; history restarts.

        If `player` cannot move the turn passes, and if neither side can the game is over.
        """
        with self.lock:
            self._board = board.copy()
            self.current_player = Player(player)
            self.result = None
            self.win_rate_history = []
            if not has_valid_move(self.current_player, self._board):
                if has_valid_move(self.current_player.opponent, self._board):
                    self.current_player = self.current_player.opponent
                else:
                    self.result = score_result(self._board)
            self._record_win_rate()

    def apply_move(self, row: int, col: int) -> MoveOutcome:
        """Play (row, col) for the side to move. Illegal requests leave the state untouched."""
        with self.lock:
            player = self.current_player
            if self.result is not None:
                return MoveOutcome(False, player, message="The game is over.")
            if not in_bounds(row, col):
                return MoveOutcome(False, player, message="That square is off the board.")

            flips = get_flips(row, col, player, self._board)
            if not flips:
                logger.debug("rejected %s for %s", to_coords(row, col), player.value)
                return MoveOutcome(False, player, message="You cannot place a disc there.")

            move = Move(row, col, tuple(flips))
            self._board.apply(row, col, player, flips)

            passed = None
            message = ""
            opponent = player.opponent
            if has_valid_move(opponent, self._board):
                self.current_player = opponent
            else:
                passed = opponent
                message = self.commentary.for_pass(opponent)
                if not has_valid_move(player, self._board):
                    self.result = score_result(self._board)
                    logger.info("game over: %s", self.result.describe())
                else:
                    logger.info("%s passes", opponent.value)

            self._record_win_rate()
            return MoveOutcome(True, player, move, passed, self.result, message)

    def resign(self, player: Union[Player, str]) -> GameResult:
        """End the game at once in favour of the other side; disc counts are not compared."""
        with self.lock:
            if self.result is not None:
                return self.result
            player = Player(player)
            black, white = self._board.counts()
            self.result = GameResult(player.opponent, black, white, via_resignation=True)
            logger.info("%s resigns", player.value)
            return self.result

    def choose_ai_move(self) -> Optional[Decision]:
        """Pick the AI's move for the side to move, on a private copy of the board."""
        with self.lock:
            if self.result is not None:
                return None
            board = self._board.copy()
            player = self.current_player
            difficulty = self.difficulty or Difficulty(self.config.ai.default_difficulty)
        return self.selector.select_move(board, player, difficulty)

    def play_ai_move(self) -> Tuple[Optional[Decision], Optional[MoveOutcome]]:
        with self.lock:
            decision = self.choose_ai_move()
            if decision is None:
                return None, None
            return decision, self.apply_move(decision.move.row, decision.move.col)

    # ---- queries ----------------------------------------------------------

    @property
    def board(self) -> Board:
        """A copy; the live board is only changed through apply_move."""
        return self._board.copy()

    @property
    def is_over(self) -> bool:
        return self.result is not None

    @property
    def is_ai_turn(self) -> bool:
        return (self.mode is GameMode.PVE and self.result is None
                and self.current_player is not self.human_color)

    @property
    def profile(self) -> Optional[DifficultyProfile]:
        return get_profile(self.difficulty, self.config.ai) if self.difficulty else None

    @property
    def win_rate(self) -> Tuple[int, int]:
        """(black, white) percentages from the latest sample."""
        sample = self.win_rate_history[-1]
        return sample.black, sample.white

    def counts(self) -> Tuple[int, int]:
        return self._board.counts()

    def legal_moves(self) -> List[Move]:
        if self.result is not None:
            return []
        return get_valid_moves(self.current_player, self._board)

    # ---- internals --------------------------------------------------------

    def _record_win_rate(self):
        profile = self.profile
        depth = profile.search_depth if profile else 1
        score = self.search.minimax(self._board.copy(), self.current_player, depth,
                                    -INF, INF, self.current_player is Player.BLACK)
        black = self.evaluator.win_rate(score)
        self.win_rate_history.append(WinRateSample(len(self.win_rate_history) + 1, black, 100 - black))
