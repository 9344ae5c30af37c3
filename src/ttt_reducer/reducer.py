"""
Reducers: pure ``(state, action) -> state`` functions.

Two flavours share the MOVE logic:
- the core reducer understands RESET and MOVE over a GameState;
- the undo reducer works on an UndoState, appends accepted moves to its
  history and also understands UNDO and SKIP.

Any illegal or unknown action returns the input state object unchanged.
Rejections are logged at DEBUG so hosts can trace why input was ignored.
"""
from __future__ import annotations

import functools
import logging
from dataclasses import replace
from decimal import Decimal
from numbers import Integral, Real
from typing import Callable, Iterable, Optional, Sequence, TypeVar

from .actions import Action, Move, Reset, Skip, Undo
from .board import BOARD_SIZE, LINES, Line, detect_win, other, place
from .state import INITIAL_STATE, INITIAL_UNDO_STATE, GameState, UndoState

log = logging.getLogger(__name__)

S = TypeVar('S', bound=GameState)
Reducer = Callable[[S, Action], S]


def _as_position(position) -> Optional[int]:
    """Integer board index for position, or None when it is not an integer."""
    if isinstance(position, bool):
        return None
    if isinstance(position, Integral):
        return int(position)
    if isinstance(position, (Real, Decimal)):
        try:
            index = int(position)
        except (ValueError, OverflowError):  # NaN, infinities
            return None
        return index if index == position else None
    return None


def _move(state: S, position, lines: Sequence[Line]) -> S:
    if state.game_over is not None:
        log.debug("Ignoring move %r: game is over", position)
        return state
    index = _as_position(position)
    if index is None:
        log.debug("Ignoring move %r: not an integer position", position)
        return state
    if not 0 <= index < BOARD_SIZE:
        log.debug("Ignoring move %r: off the board", position)
        return state
    if state.board[index] is not None:
        log.debug("Ignoring move %d: cell occupied by %s", index, state.board[index].value)
        return state
    board = place(state.board, index, state.turn)
    return replace(state, board=board, turn=other(state.turn), game_over=detect_win(board, lines))


def make_reducer(initial_state: GameState = INITIAL_STATE,
                 lines: Sequence[Line] = LINES) -> Reducer:
    """Build a RESET/MOVE reducer bound to initial_state and a line table."""
    lines = tuple(lines)

    def reducer(state: GameState, action: Action) -> GameState:
        if isinstance(action, Reset):
            return initial_state
        if isinstance(action, Move):
            return _move(state, action.position, lines)
        log.debug("Ignoring unsupported action %r", action)
        return state

    reducer.initial_state = initial_state
    return reducer


def make_undo_reducer(initial_state: UndoState = INITIAL_UNDO_STATE,
                      lines: Sequence[Line] = LINES) -> Reducer:
    """Build a reducer that also tracks move history and supports UNDO and SKIP."""
    lines = tuple(lines)

    def reducer(state: UndoState, action: Action) -> UndoState:
        if isinstance(action, Reset):
            return initial_state
        if isinstance(action, Move):
            nxt = _move(state, action.position, lines)
            if nxt is state:
                return state
            return replace(nxt, moves=state.moves + (_as_position(action.position),))
        if isinstance(action, Undo):
            if not state.moves:
                log.debug("Ignoring undo: no moves to take back")
                return state
            last = state.moves[-1]
            return replace(
                state,
                board=place(state.board, last, None),
                turn=other(state.turn),
                game_over=None,
                moves=state.moves[:-1],
            )
        if isinstance(action, Skip):
            if state.game_over is not None:
                log.debug("Ignoring skip: game is over")
                return state
            return replace(state, turn=other(state.turn))
        log.debug("Ignoring unsupported action %r", action)
        return state

    reducer.initial_state = initial_state
    return reducer


reduce = make_reducer()
reduce_with_history = make_undo_reducer()


def replay(actions: Iterable[Action], state: Optional[GameState] = None,
           reducer: Optional[Reducer] = None) -> GameState:
    """Fold actions through a reducer.

    Defaults to the undo reducer. When state is omitted, folding starts
    from the initial state the reducer was built with.
    """
    if reducer is None:
        reducer = reduce_with_history
    if state is None:
        state = getattr(reducer, 'initial_state', None)
        if state is None:
            raise ValueError("state is required for reducers not built by make_reducer/make_undo_reducer")
    return functools.reduce(reducer, actions, state)
