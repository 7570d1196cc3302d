"""
Board model for TicTacToe.
An immutable 3x3 grid stored as 9 cells in row-major order.
"""

from enum import Enum
from typing import Iterable, List, Optional, Tuple
from dataclasses import dataclass

from .errors import InvalidState


class Mark(Enum):
    """The two marks a player can place."""
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the opposite mark."""
        return Mark.O if self == Mark.X else Mark.X


# TicTacToe is always a 3x3 grid
BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# Index layout:
#   0 | 1 | 2
#   3 | 4 | 5
#   6 | 7 | 8
WIN_LINES: Tuple[Tuple[int, int, int], ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)

# Values accepted for an empty cell when building a board from raw input
EMPTY_VALUES = (None, "", " ", ".")

Cell = Optional[Mark]


def _parse_cell(value, index: int) -> Cell:
    """Turn a raw cell value into a Mark (or None for empty)."""
    if isinstance(value, Mark):
        return value
    if value in EMPTY_VALUES:
        return None
    if isinstance(value, str) and value.upper() in ("X", "O"):
        return Mark(value.upper())
    raise InvalidState(f"Unknown value {value!r} at cell {index}")


@dataclass(frozen=True)
class Board:
    """
    The TicTacToe board.

    Cells are None (empty) or a Mark. A Board never changes after it is
    created; place() hands back a new board instead.
    """

    cells: Tuple[Cell, ...] = (None,) * CELL_COUNT

    def __post_init__(self):
        # Lists are accepted but stored as a tuple so boards stay hashable
        try:
            object.__setattr__(self, "cells", tuple(self.cells))
        except TypeError:
            raise InvalidState(f"Board must be a sequence of cells, got {self.cells!r}")
        if len(self.cells) != CELL_COUNT:
            raise InvalidState(
                f"Board must have {CELL_COUNT} cells, got {len(self.cells)}"
            )
        for index, cell in enumerate(self.cells):
            if cell is not None and not isinstance(cell, Mark):
                raise InvalidState(f"Unknown value {cell!r} at cell {index}")

    @classmethod
    def empty(cls) -> "Board":
        """Create an empty board."""
        return cls()

    @classmethod
    def from_cells(cls, cells: Iterable) -> "Board":
        """
        Build a board from any 9-item sequence.

        Accepts Mark values, "X"/"O" strings and the usual empty markers
        (None, "", " ", ".").

        Args:
            cells: The raw cells in row-major order.

        Returns:
            A new Board.

        Raises:
            InvalidState: wrong length or unknown cell value.
        """
        if isinstance(cells, Board):
            return cells
        if isinstance(cells, str):
            raise InvalidState("Board must be a sequence of cells, not a string")
        try:
            raw = list(cells)
        except TypeError:
            raise InvalidState(f"Board must be a sequence of cells, got {cells!r}")
        if len(raw) != CELL_COUNT:
            raise InvalidState(f"Board must have {CELL_COUNT} cells, got {len(raw)}")
        return cls(tuple(_parse_cell(value, i) for i, value in enumerate(raw)))

    def __getitem__(self, index: int) -> Cell:
        return self.cells[index]

    def __iter__(self):
        return iter(self.cells)

    def __len__(self) -> int:
        return CELL_COUNT

    def place(self, index: int, mark: Mark) -> "Board":
        """
        Return a copy of this board with `mark` placed at `index`.

        Raises:
            InvalidState: index out of range or cell already taken.
        """
        if not 0 <= index < CELL_COUNT:
            raise InvalidState(f"Invalid position {index}. Must be 0-{CELL_COUNT - 1}.")
        if self.cells[index] is not None:
            raise InvalidState(
                f"Cell {index} is already occupied by {self.cells[index].value}"
            )
        cells = list(self.cells)
        cells[index] = mark
        return Board(tuple(cells))

    def get_empty_cells(self) -> List[int]:
        """Indices of all empty cells, in ascending order."""
        return [i for i, cell in enumerate(self.cells) if cell is None]

    def is_full(self) -> bool:
        return all(cell is not None for cell in self.cells)

    def count(self, mark: Mark) -> int:
        """How many cells hold `mark`."""
        return sum(1 for cell in self.cells if cell == mark)

    @staticmethod
    def to_row_col(index: int) -> Tuple[int, int]:
        """Convert a cell index to (row, col)."""
        return divmod(index, BOARD_SIZE)

    @staticmethod
    def to_index(row: int, col: int) -> int:
        """Convert (row, col) to a cell index."""
        return row * BOARD_SIZE + col

    def render(self, highlight: Iterable[int] = ()) -> str:
        """
        Draw the board as text.

        Cells in `highlight` (e.g. a winning line) are wrapped in brackets.
        Empty cells show their index so the player knows what to type.
        """
        highlight = set(highlight)
        lines = ["┌───┬───┬───┐"]
        for row in range(BOARD_SIZE):
            row_str = "│"
            for col in range(BOARD_SIZE):
                index = self.to_index(row, col)
                cell = self.cells[index]
                if cell is None:
                    text = f" {index} "
                elif index in highlight:
                    text = f"[{cell.value}]"
                else:
                    text = f" {cell.value} "
                row_str += f"{text}│"
            lines.append(row_str)
            if row < BOARD_SIZE - 1:
                lines.append("├───┼───┼───┤")
        lines.append("└───┴───┴───┘")
        return "\n".join(lines)

    def __str__(self) -> str:
        return "".join(cell.value if cell is not None else "." for cell in self.cells)
