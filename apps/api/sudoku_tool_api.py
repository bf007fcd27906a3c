# sudoku_tool_api.py
# FastAPI wrapper for the puzzle engine.
# Run with: uvicorn apps.api.sudoku_tool_api:app --reload
#       or: python -m apps.api.sudoku_tool_api
import random
from typing import Annotated, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import AfterValidator, BaseModel, Field, StrictInt

from solver.backtracking import has_unique_solution, solve
from solver.config import load_engine_config
from solver.generator import GenerationExhausted, generate_puzzle
from solver.logging_utils import get_logger
from solver.sudoku_tools import check_entries, compute_candidates_tool, find_hint, is_complete
from solver.validator import is_valid_grid, sanity_check

config = load_engine_config()
logger = get_logger(config.log_level)

app = FastAPI(title="Sudoku Puzzle Engine API")


def _nine_by_nine(rows):
    if len(rows) != 9 or any(len(row) != 9 for row in rows):
        raise ValueError("grid must be 9 rows of 9 cells")
    return rows


# Endpoints that index into the grid need the shape up front; /solve,
# /validate and /unique accept any shape and report it themselves. Cells are
# strict ints so "5" or true never reach the engine coerced.
Board = Annotated[List[List[StrictInt]], AfterValidator(_nine_by_nine)]
Marks = Annotated[List[List[bool]], AfterValidator(_nine_by_nine)]


class GridModel(BaseModel):
    grid: List[List[StrictInt]]


class BoardModel(BaseModel):
    grid: Board


class ValidateRequest(GridModel):
    require_complete: bool = True


class GenerateRequest(BaseModel):
    difficulty: str = "easy"
    seed: Optional[int] = None


class GameStateModel(BaseModel):
    puzzle: Board
    user_entries: Optional[Board] = None
    official: Optional[Marks] = None
    solution: Board

    def to_state(self) -> Dict:
        official = self.official
        if official is None:
            official = [[v != 0 for v in row] for row in self.puzzle]
        entries = self.user_entries or [[0] * 9 for _ in range(9)]
        return {"puzzle": self.puzzle, "userEntries": entries, "official": official, "solution": self.solution}


class SanityRequest(BaseModel):
    original: Board
    current: Board


class HintModel(BaseModel):
    row: int
    col: int
    number: int
    technique: str
    explanation: str


class HintResponse(BaseModel):
    hint: Optional[HintModel] = Field(default=None, description="null when the board is already full")


@app.post("/generate")
def api_generate(req: GenerateRequest):
    seed = req.seed if req.seed is not None else config.seed
    rng = random.Random(seed)
    try:
        result = generate_puzzle(req.difficulty, config.max_attempts, rng, config.clue_ranges, config.solution_count_cap)
    except GenerationExhausted as e:
        logger.error("api_generate: %s", e)
        raise HTTPException(status_code=503, detail=str(e))
    clues = sum(1 for row in result["puzzle"] for v in row if v != 0)
    return {**result, "difficulty": req.difficulty, "clues": clues}


@app.post("/solve")
def api_solve(payload: GridModel):
    solution = solve(payload.grid)
    if solution is None:
        logger.info("api_solve: puzzle has no solution")
    return {"solution": solution}


@app.post("/validate")
def api_validate(req: ValidateRequest):
    return {"valid": is_valid_grid(req.grid, req.require_complete)}


@app.post("/unique")
def api_unique(payload: GridModel):
    return {"unique": has_unique_solution(payload.grid, config.solution_count_cap)}


@app.post("/compute_candidates")
def api_cands(payload: BoardModel):
    return compute_candidates_tool(payload.grid)


@app.post("/hint", response_model=HintResponse)
def api_hint(req: GameStateModel):
    return {"hint": find_hint(req.to_state())}


@app.post("/sanity_check")
def api_sanity(req: SanityRequest):
    return sanity_check(req.original, req.current)


@app.post("/check")
def api_check(req: GameStateModel):
    state = req.to_state()
    return {**check_entries(state), "complete": is_complete(state)}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="127.0.0.1", port=8000)
