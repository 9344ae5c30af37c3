"""
Board basics: marks, the 9-cell grid, winning lines, serialization.
Notes:
- A board is a tuple of 9 cells laid out 0 1 2 / 3 4 5 / 6 7 8.
- A cell is a Mark or None. Tuples keep boards immutable and hashable.
- Lines are scanned in table order (rows, columns, diagonals); the first
  completed line wins any tie.
"""
from __future__ import annotations

from enum import Enum
from typing import List, Optional, Sequence, Tuple


class Mark(str, Enum):
    X = "X"
    O = "O"


Cell = Optional[Mark]
Board = Tuple[Cell, ...]
Line = Tuple[int, int, int]

BOARD_SIZE = 9

LINES: Tuple[Line, ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)

EMPTY_BOARD: Board = (None,) * BOARD_SIZE

_DIGITS = {None: "0", Mark.X: "1", Mark.O: "2"}
_CELLS = {v: k for k, v in _DIGITS.items()}


def other(mark: Mark) -> Mark:
    return Mark.O if mark is Mark.X else Mark.X


def detect_win(board: Sequence[Cell], lines: Sequence[Line] = LINES) -> Optional[Line]:
    """Return the first completed line in table order, or None."""
    for a, b, c in lines:
        v = board[a]
        if v is not None and v == board[b] and v == board[c]:
            return (a, b, c)
    return None


def empty_cells(board: Sequence[Cell]) -> List[int]:
    return [i for i, v in enumerate(board) if v is None]


def is_full(board: Sequence[Cell]) -> bool:
    return None not in board


def place(board: Board, position: int, mark: Cell) -> Board:
    """Copy of board with one cell replaced."""
    cells = list(board)
    cells[position] = mark
    return tuple(cells)


def serialize_board(board: Sequence[Cell]) -> str:
    return ''.join(_DIGITS[cell] for cell in board)


def deserialize_board(board_str: str) -> Board:
    raw = board_str.strip()
    if len(raw) != BOARD_SIZE or any(c not in _CELLS for c in raw):
        raise ValueError(f"Invalid board string {board_str!r}. Must be 9 chars of 0/1/2.")
    return tuple(_CELLS[c] for c in raw)
