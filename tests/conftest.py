import os
import sys

import pytest


# Ensure the repository root (which contains `src/`) is on sys.path for `from src...` imports
REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # Settings come from the environment; keep tests independent of the host
    for name in ("CHESS_FIRST_TURN", "CHESS_LOG_LEVEL", "CHESS_HTTP_HOST", "CHESS_HTTP_PORT"):
        monkeypatch.delenv(name, raising=False)
