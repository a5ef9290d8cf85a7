import hashlib
import logging
from typing import Any, Dict, List, Optional

import pandas as pd
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from sudoku import solve
from sudoku.config import MAX_SOLUTIONS
from sudoku.grid.parser import rows_from_dataframe
from sudoku.samples import SAMPLES

# ============================================================
# Configuration & Logging
# ============================================================
logger = logging.getLogger("sudoku_api")

app = FastAPI()


# ============================================================
# Pydantic Models
# ============================================================
class SolveRequest(BaseModel):
    board: List[List[Any]]  # 2D array of single characters ("5", ".", "/", "")
    topology: str = "classic"
    areas: Optional[List[str]] = None
    box_count_x: Optional[int] = None
    box_count_y: Optional[int] = None
    max_solutions: int = MAX_SOLUTIONS


class HealthResponse(BaseModel):
    ok: bool


def board_json_to_df(board_json: List[List[Any]]) -> pd.DataFrame:
    return pd.DataFrame(board_json, dtype=object)


# ============================================================
# Endpoints
# ============================================================
@app.get("/health", response_model=HealthResponse)
async def health():
    return {"ok": True}


@app.get("/api/samples")
async def api_samples():
    return {
        name: {"topology": s.topology, "rows": s.rows, "areas": s.areas, "options": s.options}
        for name, s in SAMPLES.items()
    }


@app.post("/api/solve")
async def api_solve(request: SolveRequest):
    """
    Solver API endpoint.
    Receives grid data (2D array), converts to DataFrame -> text rows, and calls solver logic.
    """
    try:
        df = board_json_to_df(request.board)
        rows = rows_from_dataframe(df)

        # パズルID生成（盤面のハッシュ）
        puzzle_id = hashlib.md5("\n".join(rows).encode()).hexdigest()[:8]

        options: Dict[str, int] = {}
        if request.box_count_x is not None:
            options["box_count_x"] = request.box_count_x
        if request.box_count_y is not None:
            options["box_count_y"] = request.box_count_y

        result = solve(
            rows,
            topology=request.topology,
            areas=request.areas,
            max_solutions=request.max_solutions,
            **options,
        )
        result["puzzle_id"] = puzzle_id
        return result

    except ValueError as e:
        # 盤面の書式エラー・範囲外の数字・未知のトポロジーなど
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error("Solve Error", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))
