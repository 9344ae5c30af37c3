"""ttt_reducer package.

Tic-tac-toe rules as a pure reducer: board and win detection, the core
RESET/MOVE reducer, and a history-tracking reducer with UNDO and SKIP.

Convenience imports are exposed for common workflows.
"""

from .actions import InvalidActionError, Move, Reset, Skip, Undo, action_from_dict, action_to_dict
from .board import LINES, Mark, detect_win
from .reducer import make_reducer, make_undo_reducer, reduce, reduce_with_history, replay
from .state import (
    INITIAL_STATE,
    INITIAL_UNDO_STATE,
    GameState,
    GameStatus,
    UndoState,
    legal_moves,
    status,
    winner,
)

__all__ = [
    "INITIAL_STATE",
    "INITIAL_UNDO_STATE",
    "LINES",
    "GameState",
    "GameStatus",
    "UndoState",
    "Mark",
    "Move",
    "Reset",
    "Skip",
    "Undo",
    "InvalidActionError",
    "action_from_dict",
    "action_to_dict",
    "detect_win",
    "legal_moves",
    "status",
    "winner",
    "make_reducer",
    "make_undo_reducer",
    "reduce",
    "reduce_with_history",
    "replay",
]
