"""Runtime settings read from the environment.

Environment-first: values are resolved each time ``load_settings`` is
called so tests and hosts can adjust ``os.environ`` without re-importing.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

LOG_FORMAT = "[%(levelname)s] %(message)s"

_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    log_level: int = logging.INFO
    history: bool = True


def _parse_level(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {name!r}")
    return level


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from TTT_LOG_LEVEL and TTT_HISTORY."""
    env = os.environ if env is None else env
    level = env.get("TTT_LOG_LEVEL")
    history = env.get("TTT_HISTORY")
    return Settings(
        log_level=_parse_level(level) if level else logging.INFO,
        history=history is None or history.strip().lower() not in _FALSE,
    )


def configure_logging(verbose: bool = False, settings: Optional[Settings] = None) -> None:
    settings = settings or load_settings()
    logging.basicConfig(level=logging.DEBUG if verbose else settings.log_level,
                        format=LOG_FORMAT)
