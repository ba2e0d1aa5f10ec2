from __future__ import annotations

import logging
from typing import Dict, Literal, Optional

from fastapi import FastAPI, HTTPException, Response
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, Field

from .error import (
    exception_handler,
    http_exception_handler,
    move_error_handler,
    request_validation_exception_handler,
)
from .logging_middleware import GameRequestLoggingMiddleware
from ..text.render import render_board
from ...config import Settings, load_settings
from ...engine.board import Board, STARTPOS_PLACEMENT
from ...engine.errors import MoveError
from ...engine.game import Game
from ...engine.move import parse_move
from ...engine.perft import perft as perft_nodes
from .session import InMemorySessionStore


logger = logging.getLogger(__name__)

Color = Literal["white", "black"]


class CreateGameRequest(BaseModel):
    first_turn: Optional[Color] = Field(default=None, description="Side that moves first")


class CreateGameResponse(BaseModel):
    game_id: str
    placement: str
    turn: Color


class SetPositionRequest(BaseModel):
    placement: str = Field(..., description="FEN piece-placement field")
    turn: Color = "white"


class MoveRequest(BaseModel):
    move: str = Field(..., description="Two squares, e.g. 'e2 e4'")


class PerftRequest(BaseModel):
    placement: str = STARTPOS_PLACEMENT
    turn: Color = "white"
    depth: int = Field(default=1, ge=0, le=4)


class GameState(BaseModel):
    game_id: str
    placement: str
    board: list[str]
    turn: Color
    legal_moves: list[str]
    checkmate: bool
    winner: Optional[Color]
    last_move: Optional[str]
    move_history: list[str]


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    if settings is None:
        settings = load_settings()
    app = FastAPI(title="Chess Rules API", version="0.1.0")

    logging.basicConfig(level=settings.log_level)

    # Middleware & error handling
    app.add_middleware(GameRequestLoggingMiddleware)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(MoveError, move_error_handler)
    app.add_exception_handler(Exception, exception_handler)

    store = InMemorySessionStore(first_turn=settings.first_turn)
    app.state.store = store

    @app.get("/healthz")
    async def healthz() -> Dict[str, str]:
        return {"status": "ok"}

    @app.post("/api/games", response_model=CreateGameResponse)
    async def create_game(req: Optional[CreateGameRequest] = None) -> CreateGameResponse:
        first_turn = req.first_turn if req is not None and req.first_turn else settings.first_turn
        game_id = store.create(Game.new(first_turn))
        game = _require_game(store, game_id)
        return CreateGameResponse(game_id=game_id, placement=game.to_placement(), turn=game.turn)

    @app.get("/api/games/{game_id}/state", response_model=GameState)
    async def get_state(game_id: str) -> GameState:
        return _state(game_id, _require_game(store, game_id))

    @app.post("/api/games/{game_id}/position", response_model=GameState)
    async def set_position(game_id: str, req: SetPositionRequest) -> GameState:
        _require_game(store, game_id)
        try:
            game = Game.from_placement(req.placement, req.turn)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=f"invalid placement: {e}")
        store.set(game_id, game)
        return _state(game_id, game)

    @app.post("/api/games/{game_id}/move", response_model=GameState)
    async def make_move(game_id: str, req: MoveRequest) -> GameState:
        game = _require_game(store, game_id)
        try:
            move = parse_move(req.move)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        # MoveError propagates to move_error_handler
        game.apply_move(move)
        return _state(game_id, game)

    @app.post("/api/games/{game_id}/undo", response_model=GameState)
    async def undo(game_id: str) -> GameState:
        game = _require_game(store, game_id)
        try:
            game.undo_move()
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return _state(game_id, game)

    @app.delete("/api/games/{game_id}", status_code=204, response_class=Response)
    async def delete_game(game_id: str) -> Response:
        if not store.delete(game_id):
            raise HTTPException(status_code=404, detail="game not found")
        return Response(status_code=204)

    @app.post("/api/perft")
    async def perft(req: PerftRequest) -> Dict[str, int]:
        try:
            board = Board.from_placement(req.placement)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=f"invalid placement: {e}")
        return {"nodes": perft_nodes(board, req.turn, req.depth)}

    return app


def _require_game(store: InMemorySessionStore, game_id: str) -> Game:
    game = store.get(game_id)
    if game is None:
        raise HTTPException(status_code=404, detail="game not found")
    return game


def _state(game_id: str, game: Game) -> GameState:
    history = game.move_history()
    return GameState(
        game_id=game_id,
        placement=game.to_placement(),
        board=render_board(game.board)[:-1],
        turn=game.turn,
        legal_moves=[m.to_text() for m in game.legal_moves()],
        checkmate=game.checkmate(),
        winner=game.winner(),
        last_move=history[-1] if history else None,
        move_history=history,
    )
