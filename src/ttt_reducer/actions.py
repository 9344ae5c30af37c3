"""
Action vocabulary: RESET, MOVE{position}, UNDO, SKIP.

Actions are small frozen dataclasses; the reducer dispatches on their
class. Hosts that speak JSON use the dict form ``{"type": "MOVE",
"position": 4}``, and the CLI uses short text tokens (``4``, ``undo``).
Malformed input at this boundary raises InvalidActionError; the reducer
itself never raises.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Union


class InvalidActionError(ValueError):
    pass


@dataclass(frozen=True)
class Reset:
    type = 'RESET'


@dataclass(frozen=True)
class Move:
    position: Any
    type = 'MOVE'


@dataclass(frozen=True)
class Undo:
    type = 'UNDO'


@dataclass(frozen=True)
class Skip:
    type = 'SKIP'


Action = Union[Reset, Move, Undo, Skip]

_SIMPLE = {'RESET': Reset, 'UNDO': Undo, 'SKIP': Skip}


def action_from_dict(data: Mapping[str, Any]) -> Action:
    kind = data.get('type')
    if not isinstance(kind, str):
        raise InvalidActionError(f"Action needs a string 'type': {dict(data)!r}")
    kind = kind.upper()
    if kind == 'MOVE':
        if 'position' not in data:
            raise InvalidActionError("MOVE action needs a 'position'")
        return Move(position=data['position'])
    try:
        return _SIMPLE[kind]()
    except KeyError:
        raise InvalidActionError(f"Unknown action type: {data['type']!r}") from None


def action_to_dict(action: Action) -> Dict[str, Any]:
    if isinstance(action, Move):
        return {'type': action.type, 'position': action.position}
    return {'type': action.type}


def parse_action(token: str) -> Action:
    raw = token.strip()
    if not raw:
        raise InvalidActionError("Empty action token")
    if re.fullmatch(r'[+-]?\d+', raw):
        return Move(position=int(raw))
    try:
        return _SIMPLE[raw.upper()]()
    except KeyError:
        raise InvalidActionError(f"Unknown action token: {token!r}") from None


def parse_actions(text: str) -> List[Action]:
    """Parse a comma or whitespace separated token list, e.g. ``"0,3,undo"``."""
    return [parse_action(t) for t in re.split(r'[,\s]+', text) if t]
