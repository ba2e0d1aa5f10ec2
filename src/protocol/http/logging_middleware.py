from __future__ import annotations

import logging
import re
import time
import uuid
from typing import Callable, Dict, Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request


logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "x-request-id"

# /api/games/{game_id}[/{action}]
_GAME_PATH = re.compile(r"^/api/games/(?P<game_id>[^/]+)(?:/(?P<action>[^/]+))?")


def game_context(path: str) -> Dict[str, Optional[str]]:
    """Game id and action named by a session URL, if any."""
    m = _GAME_PATH.match(path)
    if m is None:
        return {"game_id": None, "action": None}
    return {"game_id": m.group("game_id"), "action": m.group("action")}


class GameRequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every API call against the game session it touches.

    The request id comes from the caller's ``x-request-id`` header when
    present; it is stored on ``request.state`` for the error envelope and
    echoed back on the response.
    """

    async def dispatch(self, request: Request, call_next: Callable):
        started = time.perf_counter()
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        ctx = game_context(request.url.path)

        logger.info(
            "%s %s",
            request.method,
            request.url.path,
            extra={"request_id": request_id, **ctx},
        )

        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000.0
        response.headers[REQUEST_ID_HEADER] = request_id

        # Rejected moves and unknown games are worth noticing in the logs
        level = logging.WARNING if response.status_code >= 400 else logging.INFO
        logger.log(
            level,
            "%s %s -> %d in %.1fms",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            extra={"request_id": request_id, "status_code": response.status_code, **ctx},
        )
        return response
