from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List

from .actions import InvalidActionError, parse_actions
from .board import LINES
from .config import configure_logging, load_settings
from .reducer import reduce, reduce_with_history, replay
from .state import INITIAL_STATE, INITIAL_UNDO_STATE, GameState, state_to_dict, status, winner


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ttt-reducer", description="Tic-tac-toe reducer CLI")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument(
        "--info",
        action="store_true",
        help="Print environment and settings info and exit",
    )

    p_play = sub.add_parser(
        "play",
        help="Replay actions from the initial state and print the resulting state as JSON",
    )
    p_play.add_argument(
        "--actions",
        help='Comma-separated actions, e.g. "0,3,1,undo,skip" (omit with --stdin)',
    )
    p_play.add_argument(
        "--stdin", action="store_true", help="Read one action list per line and stream JSON lines"
    )
    p_play.add_argument(
        "--core",
        action="store_true",
        help="Use the core reducer (no move history, UNDO/SKIP ignored)",
    )

    sub.add_parser("lines", help="Print the winning line table")

    return p


def _print_info() -> None:
    import platform

    settings = load_settings()
    print(f"python={sys.version.split()[0]} platform={platform.platform()}")
    print(f"log_level={logging.getLevelName(settings.log_level)} history={settings.history}")


def _play(raw: str, use_history: bool) -> GameState:
    actions = parse_actions(raw)
    if use_history:
        return replay(actions, INITIAL_UNDO_STATE, reduce_with_history)
    return replay(actions, INITIAL_STATE, reduce)


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    try:
        settings = load_settings()
    except ValueError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2
    configure_logging(getattr(ns, "verbose", False), settings)

    if getattr(ns, "version", False):
        try:
            from importlib.metadata import version as _ver

            print(_ver("ttt-reducer"))
        except Exception:
            print("unknown")
        return 0
    if getattr(ns, "info", False):
        _print_info()
        return 0

    if ns.cmd == "lines":
        for line in LINES:
            print(" ".join(map(str, line)))
        return 0

    if ns.cmd == "play":
        use_history = settings.history and not ns.core
        if ns.stdin:
            for line in sys.stdin:
                raw = line.strip()
                if not raw:
                    continue
                try:
                    state = _play(raw, use_history)
                except InvalidActionError as e:
                    logging.warning("Skipping line %r: %s", raw, e)
                    continue
                print(json.dumps(state_to_dict(state)))
            return 0
        try:
            state = _play(ns.actions or "", use_history)
        except InvalidActionError as e:
            logging.error("%s", e)
            return 2
        mark = winner(state)
        logging.info(
            "status=%s winner=%s line=%s",
            status(state).value,
            mark.value if mark is not None else None,
            list(state.game_over) if state.game_over is not None else None,
        )
        print(json.dumps(state_to_dict(state)))
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
