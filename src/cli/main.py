from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from typing import List, Optional

import uvicorn

from ..config import Settings, load_settings
from ..engine.game import Game
from ..protocol.http.app import create_app
from ..protocol.text.loop import run_text


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="chess-rules", description="Two-player chess rules engine")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level (default: CHESS_LOG_LEVEL or INFO)",
    )
    sub = parser.add_subparsers(dest="command")

    play = sub.add_parser("play", help="Play in the terminal (default)")
    play.add_argument("--first-turn", choices=("white", "black"), default=None, help="Side that moves first")

    serve = sub.add_parser("serve", help="Serve the HTTP API")
    serve.add_argument("--host", default=None, help="Bind address (default: CHESS_HTTP_HOST)")
    serve.add_argument("--port", type=int, default=None, help="Bind port (default: CHESS_HTTP_PORT)")
    serve.add_argument("--first-turn", choices=("white", "black"), default=None, help="Side that moves first")
    return parser


def resolve_settings(args: argparse.Namespace, base: Optional[Settings] = None) -> Settings:
    """Apply command-line overrides on top of environment settings."""
    settings = base if base is not None else load_settings()
    overrides = {}
    if args.log_level:
        overrides["log_level"] = args.log_level
    if getattr(args, "first_turn", None):
        overrides["first_turn"] = args.first_turn
    if getattr(args, "host", None):
        overrides["http_host"] = args.host
    if getattr(args, "port", None):
        overrides["http_port"] = args.port
    return replace(settings, **overrides)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = resolve_settings(args)

    if args.command == "serve":
        app = create_app(settings)
        uvicorn.run(app, host=settings.http_host, port=settings.http_port, log_level=settings.log_level.lower())
        return 0

    # Interactive play logs warnings only unless a level is given
    logging.basicConfig(level=settings.log_level if args.log_level else logging.WARNING)
    run_text(Game.new(settings.first_turn))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
