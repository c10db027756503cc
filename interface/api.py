"""FastAPI REST interface for the Othello engine."""

from typing import List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from othello.config import CONFIG, Config
from othello.core.board import Board, Player, parse_coords
from othello.difficulty import Difficulty
from othello.game import GameEngine, GameMode, GameResult


class NewGameRequest(BaseModel):
    mode: GameMode = GameMode.PVP
    difficulty: Optional[Difficulty] = None


class MoveRequest(BaseModel):
    move: str  # chess-style coordinates e.g. "D3"


class ResignRequest(BaseModel):
    player: Player


class PositionRequest(BaseModel):
    board: List[str]  # 8 rows of 'B', 'W', '.'
    turn: Player = Player.BLACK


def _result_json(result: Optional[GameResult]):
    if result is None:
        return None
    return {
        "winner": result.winner.value if result.winner else "draw",
        "black_score": result.black_score,
        "white_score": result.white_score,
        "via_resignation": result.via_resignation,
    }


def _state_json(game: GameEngine):
    black, white = game.counts()
    black_rate, white_rate = game.win_rate
    profile = game.profile
    return {
        "board": game.board.rows(),
        "turn": game.current_player.value,
        "mode": game.mode.value,
        "difficulty": game.difficulty.value if game.difficulty else None,
        "thinking_delay_ms": profile.thinking_delay_ms if profile else 0,
        "scores": {"black": black, "white": white},
        "legal_moves": [m.coords for m in game.legal_moves()],
        "win_rate": {"black": black_rate, "white": white_rate},
        "is_ai_turn": game.is_ai_turn,
        "is_game_over": game.is_over,
        "result": _result_json(game.result),
    }


def create_app(config: Optional[Config] = None, game: Optional[GameEngine] = None) -> FastAPI:
    config = config or CONFIG
    app = FastAPI(title=config.ui.engine_name, version="1.0.0")
    app.state.game = game or GameEngine(config)

    @app.get("/state")
    def get_state():
        game = app.state.game
        with game.lock:
            return _state_json(game)

    @app.post("/new")
    def new_game(req: NewGameRequest = NewGameRequest()):
        game = app.state.game
        game.start_new_game(req.mode, req.difficulty)
        with game.lock:
            return _state_json(game)

    @app.post("/position")
    def set_position(req: PositionRequest):
        game = app.state.game
        try:
            board = Board.from_rows(req.board)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=f"Invalid board: {e}")
        game.set_position(board, req.turn)
        with game.lock:
            return _state_json(game)

    @app.post("/move")
    def make_move(req: MoveRequest):
        game = app.state.game
        try:
            row, col = parse_coords(req.move)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        with game.lock:
            if game.is_ai_turn:
                raise HTTPException(status_code=409, detail="It is the AI's turn")
            outcome = game.apply_move(row, col)
            if not outcome.accepted:
                raise HTTPException(status_code=400, detail=outcome.message)
            return {
                "move": outcome.move.coords,
                "flips": len(outcome.move.flips),
                "passed": outcome.passed.value if outcome.passed else None,
                "message": outcome.message,
                "state": _state_json(game),
            }

    @app.post("/ai-move")
    def ai_move():
        game = app.state.game
        with game.lock:
            if game.is_over:
                raise HTTPException(status_code=400, detail="Game is already over")
            if not game.is_ai_turn:
                raise HTTPException(status_code=400, detail="It is not the AI's turn")
            decision, outcome = game.play_ai_move()
            return {
                "move": decision.move.coords,
                "rationale": decision.rationale,
                "passed": outcome.passed.value if outcome.passed else None,
                "message": outcome.message,
                "state": _state_json(game),
            }

    @app.post("/resign")
    def resign(req: ResignRequest):
        game = app.state.game
        if game.is_over:
            raise HTTPException(status_code=400, detail="Game is already over")
        return _result_json(game.resign(req.player))

    @app.get("/history")
    def history():
        game = app.state.game
        with game.lock:
            return [{"turn": s.turn, "black": s.black, "white": s.white}
                    for s in game.win_rate_history]

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="127.0.0.1", port=CONFIG.ui.api_port)
