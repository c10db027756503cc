"""8x8 Othello board with in-place move application and exact undo."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

SIZE = 8
COLUMNS = "ABCDEFGH"

Square = Tuple[int, int]


class Player(Enum):
    BLACK = "black"
    WHITE = "white"

    @property
    def opponent(self) -> "Player":
        return Player.WHITE if self is Player.BLACK else Player.BLACK

    @property
    def symbol(self) -> str:
        return "B" if self is Player.BLACK else "W"

    @property
    def label(self) -> str:
        return self.value.capitalize()


def opposite(player: Player) -> Player:
    """Return the other side."""
    return player.opponent


# A cell is either empty (None) or holds a player's disc.
Cell = Optional[Player]


@dataclass(frozen=True)
class MoveRecord:
    """What changed when a disc was placed, enough to restore the board."""
    row: int
    col: int
    player: Player
    flips: Tuple[Square, ...]


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < SIZE and 0 <= col < SIZE


def to_coords(row: int, col: int) -> str:
    """(2, 3) -> 'D3'."""
    return f"{COLUMNS[col]}{row + 1}"


def parse_coords(text: str) -> Square:
    """'D3' or 'd3' -> (2, 3). Raises ValueError on anything else."""
    text = text.strip().upper()
    if len(text) != 2 or text[0] not in COLUMNS or not text[1].isdigit():
        raise ValueError(f"Invalid coordinates: {text!r}")
    row = int(text[1]) - 1
    if not 0 <= row < SIZE:
        raise ValueError(f"Invalid coordinates: {text!r}")
    return row, COLUMNS.index(text[0])


class Board:
    def __init__(self, grid: Optional[Sequence[Sequence[Cell]]] = None):
        """Copy the given grid, or set up the standard four-disc start."""
        if grid is not None:
            self.grid: List[List[Cell]] = [list(row) for row in grid]
        else:
            self.grid = [[None] * SIZE for _ in range(SIZE)]
            self.grid[3][3] = Player.WHITE
            self.grid[3][4] = Player.BLACK
            self.grid[4][3] = Player.BLACK
            self.grid[4][4] = Player.WHITE

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Board":
        """Build a board from 8 strings of 'B', 'W' and '.'."""
        symbols = {"B": Player.BLACK, "W": Player.WHITE, ".": None}
        if len(rows) != SIZE or any(len(r) != SIZE for r in rows):
            raise ValueError("Board needs 8 rows of 8 cells")
        bad = {ch for row in rows for ch in row} - symbols.keys()
        if bad:
            raise ValueError(f"Unknown cell symbols: {''.join(sorted(bad))}")
        return cls([[symbols[ch] for ch in row] for row in rows])

    def copy(self) -> "Board":
        return Board(self.grid)

    def reset(self):
        """Reset to the starting position."""
        self.grid = Board().grid

    def get(self, row: int, col: int) -> Cell:
        return self.grid[row][col]

    def is_empty(self, row: int, col: int) -> bool:
        return self.grid[row][col] is None

    def count(self, player: Player) -> int:
        return sum(cell is player for row in self.grid for cell in row)

    def counts(self) -> Tuple[int, int]:
        """(black, white) disc counts."""
        return self.count(Player.BLACK), self.count(Player.WHITE)

    def disc_count(self) -> int:
        return sum(cell is not None for row in self.grid for cell in row)

    def apply(self, row: int, col: int, player: Player, flips: Sequence[Square]) -> MoveRecord:
        """Place a disc and turn the captured ones. Flips must come from move generation."""
        self.grid[row][col] = player
        for r, c in flips:
            self.grid[r][c] = player
        return MoveRecord(row, col, player, tuple(flips))

    def undo(self, record: MoveRecord):
        """Revert exactly what apply() did."""
        self.grid[record.row][record.col] = None
        opponent = record.player.opponent
        for r, c in record.flips:
            self.grid[r][c] = opponent

    def rows(self) -> List[str]:
        return ["".join(cell.symbol if cell else "." for cell in row) for row in self.grid]

    def render(self, hints: Sequence[Square] = ()) -> str:
        """ASCII board with column letters and row numbers; hints shown as '*'."""
        hint_set = set(hints)
        lines = ["  " + " ".join(COLUMNS)]
        for r, row in enumerate(self.grid):
            cells = []
            for c, cell in enumerate(row):
                if cell is not None:
                    cells.append(cell.symbol)
                else:
                    cells.append("*" if (r, c) in hint_set else ".")
            lines.append(f"{r + 1} " + " ".join(cells))
        return "\n".join(lines)

    def __eq__(self, other):
        return isinstance(other, Board) and self.grid == other.grid

    def __str__(self):
        return self.render()
