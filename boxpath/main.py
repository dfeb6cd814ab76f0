from __future__ import annotations

import logging
import time
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from .algorithms import (
    Coordinate,
    InvalidBoxSize,
    NoPathFound,
    PathNode,
    SearchLimitExceeded,
    SearchOptions,
    SearchResult,
    search,
)
from .logging_config import configure_logging
from .settings import Settings

SETTINGS = Settings.from_env()
configure_logging(SETTINGS)

logger = logging.getLogger(__name__)

app = FastAPI(title="boxpath", version="0.3.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=SETTINGS.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class CoordinateModel(BaseModel):
    x: float
    y: float

    def to_core(self) -> Coordinate:
        return Coordinate(x=self.x, y=self.y)

    @classmethod
    def from_core(cls, c: Coordinate) -> "CoordinateModel":
        return cls(x=c.x, y=c.y)


class SearchOptionsModel(BaseModel):
    return_visited: bool = False
    max_visited: Optional[int] = Field(default=None, ge=0)
    max_steps: Optional[int] = Field(default=None, gt=0)


class PathRequestModel(BaseModel):
    source: CoordinateModel
    target: CoordinateModel
    box_size: float = Field(gt=0)
    terrain: List[CoordinateModel] = Field(default_factory=list)
    options: Optional[SearchOptionsModel] = None


class PathNodeModel(BaseModel):
    point: CoordinateModel
    heuristic: float
    source: Optional[CoordinateModel] = None

    @classmethod
    def from_core(cls, node: PathNode) -> "PathNodeModel":
        return cls(
            point=CoordinateModel.from_core(node.point),
            heuristic=node.heuristic,
            source=None if node.source is None else CoordinateModel.from_core(node.source),
        )


class PathResponseModel(BaseModel):
    path: List[PathNodeModel]
    visited: List[CoordinateModel]
    expanded: int
    runtime_ms: float


@app.get("/api/health")
def health():
    return {"ok": True, "max_steps": SETTINGS.max_steps}


@app.post("/api/path", response_model=PathResponseModel)
def find_path(req: PathRequestModel) -> PathResponseModel:
    opts = req.options or SearchOptionsModel()
    run_opts = SearchOptions(
        return_visited=opts.return_visited,
        max_visited=SETTINGS.max_visited if opts.max_visited is None else opts.max_visited,
        max_steps=SETTINGS.max_steps if opts.max_steps is None else opts.max_steps,
    )

    terrain = [c.to_core() for c in req.terrain]

    t0 = time.perf_counter()
    try:
        result: SearchResult = search(
            req.source.to_core(),
            req.target.to_core(),
            req.box_size,
            terrain,
            run_opts,
        )
    except InvalidBoxSize as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NoPathFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except SearchLimitExceeded as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.exception(
            "search crashed: source=%s target=%s box_size=%s terrain=%d",
            req.source.to_core(),
            req.target.to_core(),
            req.box_size,
            len(req.terrain),
        )
        raise HTTPException(status_code=500, detail=f"Algorithm crashed: {type(e).__name__}: {e}")
    t1 = time.perf_counter()

    runtime_ms = (t1 - t0) * 1000.0

    return PathResponseModel(
        path=[PathNodeModel.from_core(n) for n in result.path],
        visited=[CoordinateModel.from_core(c) for c in result.visited],
        expanded=int(result.expanded),
        runtime_ms=runtime_ms,
    )
