# sudoku_tool_api.py
# FastAPI wrapper for the tool functions.
# Run with: uvicorn apps.api.sudoku_tool_api:app --reload

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from sudoku_trainer.errors import SudokuError
from sudoku_trainer.sudoku_tools import apply_action as _apply_action
from sudoku_trainer.sudoku_tools import compute_candidates_tool, sanity_check, solve_tool
from sudoku_trainer.sudoku_tools import next_moves as _next_moves

app = FastAPI(title="Sudoku Trainer Tool API")


class GridModel(BaseModel):
    grid: list[list[int]]


class SanityRequest(BaseModel):
    original: list[list[int]]
    current: list[list[int]]


class NextMovesRequest(BaseModel):
    current: list[list[int]]
    candidates: dict[str, list[int]] | None = None
    max_moves: int = 3
    techniques: list[str] | None = None
    chain: bool = True


class MoveModel(BaseModel):
    type: str = "placement"
    cell: str | None = None
    digit: int | None = None
    eliminate: list[str] = []
    eliminations: dict[str, list[int]] | None = None


class ApplyMoveRequest(BaseModel):
    current: list[list[int]]
    candidates: dict[str, list[int]] | None = None
    move: MoveModel


class SolveRequest(BaseModel):
    current: list[list[int]]
    method: str = "hints"
    forward: bool = True
    techniques: list[str] | None = None


@app.exception_handler(SudokuError)
@app.exception_handler(ValueError)
async def bad_input(request: Request, exc: Exception):
    return JSONResponse(status_code=400, content={"error": type(exc).__name__, "detail": str(exc)})


@app.post("/sanity_check")
def api_sanity(payload: SanityRequest):
    return sanity_check(payload.original, payload.current)


@app.post("/compute_candidates")
def api_cands(payload: GridModel):
    return compute_candidates_tool(payload.grid)


@app.post("/next_moves")
def api_moves(req: NextMovesRequest):
    return _next_moves(req.current, req.candidates, req.max_moves, req.techniques, req.chain)


@app.post("/apply_move")
def api_apply(req: ApplyMoveRequest):
    return _apply_action(req.current, req.candidates, req.move.model_dump(exclude_none=True))


@app.post("/solve")
def api_solve(req: SolveRequest):
    return solve_tool(req.current, req.method, req.forward, req.techniques)
