#!/usr/bin/env python3
# ruff: noqa: E402
from __future__ import annotations

import argparse
import time
import os
import sys

# Allow running this script directly via `python scripts/perft.py`
# by adding the repo root (which contains `src/`) to sys.path.
REPO_ROOT = os.path.dirname(os.path.dirname(__file__))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from src.engine.board import Board, STARTPOS_PLACEMENT
from src.engine.perft import perft
from src.engine.piece import WHITE, parse_color


def main() -> None:
    parser = argparse.ArgumentParser(description="Count move-tree leaves for a placement and depth")
    parser.add_argument(
        "--placement",
        type=str,
        default=STARTPOS_PLACEMENT,
        help="FEN piece-placement field (default: start position)",
    )
    parser.add_argument("--turn", type=str, default=WHITE, help="Side to move (default: white)")
    parser.add_argument("--depth", type=int, default=3, help="Depth (default: 3)")
    args = parser.parse_args()

    board = Board.from_placement(args.placement)
    start = time.perf_counter()
    nodes = perft(board, parse_color(args.turn), args.depth)
    dt = time.perf_counter() - start
    print(f"nodes={nodes} depth={args.depth} time_ms={int(dt*1000)} nps={int(nodes/max(dt,1e-9))}")


if __name__ == "__main__":
    main()
