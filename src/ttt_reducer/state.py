"""
Game state records and read-only queries over them.

States are frozen dataclasses over tuples, so a state handed to a caller
can be kept indefinitely (time travel, undo stacks in the host) without
being changed by later transitions. Transitions build new records with
``dataclasses.replace``.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from .board import EMPTY_BOARD, Board, Line, Mark, empty_cells, is_full


@dataclass(frozen=True)
class GameState:
    board: Board
    turn: Mark
    game_over: Optional[Line] = None


@dataclass(frozen=True)
class UndoState(GameState):
    """GameState that also records the played positions, oldest first."""

    moves: Tuple[int, ...] = ()


INITIAL_STATE = GameState(board=EMPTY_BOARD, turn=Mark.X)
INITIAL_UNDO_STATE = UndoState(board=EMPTY_BOARD, turn=Mark.X, moves=())


class GameStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


def status(state: GameState) -> GameStatus:
    """Classify a state.

    The reducer never flags a draw on the state itself; a full board with
    no completed line is reported here as DRAW.
    """
    if state.game_over is not None:
        return GameStatus.WON
    if is_full(state.board):
        return GameStatus.DRAW
    return GameStatus.IN_PROGRESS


def winner(state: GameState) -> Optional[Mark]:
    if state.game_over is None:
        return None
    return state.board[state.game_over[0]]


def legal_moves(state: GameState) -> List[int]:
    if state.game_over is not None:
        return []
    return empty_cells(state.board)


def state_to_dict(state: GameState) -> Dict[str, Any]:
    out: Dict[str, Any] = {
        'board': [None if cell is None else cell.value for cell in state.board],
        'turn': state.turn.value,
        'game_over': None if state.game_over is None else list(state.game_over),
    }
    if isinstance(state, UndoState):
        out['moves'] = list(state.moves)
    return out
