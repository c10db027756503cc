"""Core engine components: board, move generation, evaluator and search."""

from .board import Board, Player, opposite, to_coords, parse_coords
from .moves import Move, get_flips, get_valid_moves
from .evaluator import Evaluator, score_to_win_rate
from .search import SearchEngine, SearchOutcome
