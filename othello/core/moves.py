"""Legal move generation and flip computation."""

from dataclasses import dataclass
from typing import List, Tuple

from othello.core.board import SIZE, Board, Player, Square, in_bounds, to_coords

DIRECTIONS = ((-1, -1), (-1, 0), (-1, 1),
              (0, -1),           (0, 1),
              (1, -1),  (1, 0),  (1, 1))


@dataclass(frozen=True)
class Move:
    row: int
    col: int
    flips: Tuple[Square, ...]

    @property
    def coords(self) -> str:
        return to_coords(self.row, self.col)

    @property
    def square(self) -> Square:
        return self.row, self.col


def get_flips(row: int, col: int, player: Player, board: Board) -> List[Square]:
    """Discs captured by `player` placing at (row, col); empty if occupied or no capture."""
    if not board.is_empty(row, col):
        return []
    opponent = player.opponent
    flips = []
    for dr, dc in DIRECTIONS:
        r, c = row + dr, col + dc
        run = []
        while in_bounds(r, c) and board.get(r, c) is opponent:
            run.append((r, c))
            r += dr
            c += dc
        if run and in_bounds(r, c) and board.get(r, c) is player:
            flips.extend(run)
    return flips


def get_valid_moves(player: Player, board: Board) -> List[Move]:
    """All legal moves in row-major scan order.

    The order is the tie-break order for every selection rule, so callers
    must not reorder it.
    """
    moves = []
    for r in range(SIZE):
        for c in range(SIZE):
            if board.is_empty(r, c):
                flips = get_flips(r, c, player, board)
                if flips:
                    moves.append(Move(r, c, tuple(flips)))
    return moves


def has_valid_move(player: Player, board: Board) -> bool:
    return any(
        board.is_empty(r, c) and get_flips(r, c, player, board)
        for r in range(SIZE)
        for c in range(SIZE)
    )
