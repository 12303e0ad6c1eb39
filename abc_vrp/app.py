from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from typing import Any, Dict, List
import logging
import math
import random

from .models import (
    Node,
    EvaluateRequest, EvaluateResponse,
    RandomizeRequest, RandomizeResponse,
    ExploitRequest, ExploitResponse,
)
from .models.api_schemas import FoodSourceRequest
from .config import FoodSourceConfig
from .food_source import FoodSource, RouteError
from .localsearch import apply_exploitation

logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")
_log = logging.getLogger("abc-vrp")

app = FastAPI(title="ABC VRP Food Source", version="0.9")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"], allow_methods=["*"], allow_headers=["*"],
)


def _resolve_route(nodes: List[Node], ids: List[int]) -> List[Node]:
    by_id: Dict[int, Node] = {}
    for n in nodes:
        by_id.setdefault(n.id, n)
    try:
        return [by_id[i] for i in ids]
    except KeyError as e:
        raise RouteError(f"Unknown node id in route: {e.args[0]}") from e


def _build(req: FoodSourceRequest) -> FoodSource:
    cfg = FoodSourceConfig(**req.settings.model_dump())
    fs = FoodSource(req.nodes, req.vehicle_count, config=cfg)
    if req.route is not None:
        fs.route = _resolve_route(req.nodes, req.route)
    return fs


def _route_ids(fs: FoodSource) -> List[int]:
    return [n.id for n in fs.route]


@app.exception_handler(RouteError)
async def _route_error(_request: Request, exc: RouteError) -> JSONResponse:
    _log.info("rejected route: %s", exc)
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "healthy"}


@app.post("/evaluate", response_model=EvaluateResponse)
def endpoint_evaluate(req: EvaluateRequest) -> Dict[str, Any]:
    fs = _build(req)
    strict = fs.total_distance_strict()
    degenerate = math.isinf(strict)
    _log.info("evaluate: %d positions, degenerate=%s", len(fs), degenerate)
    return {
        "status": "ok",
        "distance": None if degenerate else strict,
        "distance_full": fs.total_distance_full(),
        "fitness": fs.refresh_fitness(),
        "degenerate": degenerate,
        "rendered": fs.render(),
    }


@app.post("/randomize", response_model=RandomizeResponse)
def endpoint_randomize(req: RandomizeRequest) -> Dict[str, Any]:
    rng = random.Random(req.seed)
    fs = _build(req)
    fs.randomize(rng)
    fitness = fs.refresh_fitness()
    _log.info("randomize: seed=%s fitness=%.6g", req.seed, fitness)
    return {"status": "ok", "route": _route_ids(fs), "fitness": fitness, "rendered": fs.render()}


@app.post("/exploit", response_model=ExploitResponse)
def endpoint_exploit(req: ExploitRequest) -> Dict[str, Any]:
    rng = random.Random(req.seed)
    fs = _build(req)
    fs.trial = req.trial
    fitness, improved, steps = apply_exploitation(
        fs, rng, req.budget, stop_when_exhausted=req.stop_when_exhausted
    )
    _log.info("exploit: %d/%d steps, fitness=%.6g trial=%d", steps, req.budget, fitness, fs.trial)
    return {
        "status": "ok",
        "route": _route_ids(fs),
        "fitness": fitness,
        "trial": fs.trial,
        "exhausted": fs.is_exhausted(),
        "improved": improved,
        "steps": steps,
    }
