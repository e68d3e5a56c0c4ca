from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
import pandas as pd

from sudoku_solver import solve_puzzle
from sudoku_solver.grid.parser import PuzzleFormatError, check_board_shape, normalize_grid
from sudoku_solver.logging_utils import get_logger
from sudoku_solver.postprocess.render_result import build_result

logger = get_logger()

app = FastAPI()


class SolveRequest(BaseModel):
    board: list[list[int | str | None]]  # 9x9, 0 / "" / "-" / null が空きマス
    max_nodes: int | None = None
    time_limit: float | None = None


class SolveResponse(BaseModel):
    status: str
    solved: bool
    board: list[list[int]]
    nodes: int
    elapsed: float
    verified: bool | None = None
    message: str = ""


@app.post("/api/solve", response_model=SolveResponse)
def api_solve(request: SolveRequest):
    """
    Solver API endpoint.
    Receives grid data (2D array), converts to DataFrame, and calls solver logic.
    探索は CPU を使い切るので、通常の def にして FastAPI のスレッドプールで動かす。
    """
    try:
        # 行の長さがそろっていないと DataFrame 化で None 埋めされるので先に確認
        check_board_shape(request.board)
        # 2D配列をDataFrameに変換
        df = pd.DataFrame(request.board)
        cells = normalize_grid(df)
    except PuzzleFormatError as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        result = solve_puzzle(
            cells,
            max_nodes=request.max_nodes,
            time_limit=request.time_limit,
        )
    except Exception as e:
        logger.exception("Solver failed")
        raise HTTPException(status_code=500, detail=str(e))

    payload = build_result(result)
    payload.pop("index")
    return payload
