from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from .engine.game import DEFAULT_FIRST_TURN
from .engine.piece import parse_color


@dataclass(frozen=True)
class Settings:
    """Process settings.

    Sources, lowest precedence first: defaults, a ``.env`` file, the
    environment. The CLI applies its flags on top.
    """

    first_turn: str = DEFAULT_FIRST_TURN
    log_level: str = "INFO"
    http_host: str = "127.0.0.1"
    http_port: int = 8000


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build :class:`Settings` from ``env`` (default: ``os.environ``).

    Raises:
        ValueError: If a variable holds an unusable value.
    """
    if env is None:
        load_dotenv()
        env = os.environ
    first_turn = parse_color(env.get("CHESS_FIRST_TURN", DEFAULT_FIRST_TURN))
    log_level = env.get("CHESS_LOG_LEVEL", "INFO").strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"invalid CHESS_LOG_LEVEL: {log_level!r}")
    host = env.get("CHESS_HTTP_HOST", "127.0.0.1").strip()
    raw_port = env.get("CHESS_HTTP_PORT", "8000")
    try:
        port = int(raw_port)
    except ValueError:
        raise ValueError(f"invalid CHESS_HTTP_PORT: {raw_port!r}") from None
    if not 0 < port < 65536:
        raise ValueError(f"CHESS_HTTP_PORT out of range: {port}")
    return Settings(first_turn=first_turn, log_level=log_level, http_host=host, http_port=port)
