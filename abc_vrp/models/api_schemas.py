from typing import List, Literal, Optional
from pydantic import BaseModel, Field, field_validator
from .node import Node


class FoodSourceSettings(BaseModel):
    trial_limit: int = Field(10, ge=0)
    shuffle: Literal["sweep", "uniform"] = "sweep"
    fitness_tolerance: float = Field(0.0, ge=0.0)


class FoodSourceRequest(BaseModel):
    nodes: List[Node] = Field(..., description="All nodes; nodes[0] must be the depot")
    vehicle_count: int = Field(..., ge=1)
    route: Optional[List[int]] = Field(None, description="Node ids, depot id repeated as separator")
    settings: FoodSourceSettings = FoodSourceSettings()

    @field_validator("nodes")
    @classmethod
    def _check_depot_first(cls, v: List[Node]):
        if not v or not v[0].is_depot:
            raise ValueError("nodes[0] must be the depot")
        return v


class EvaluateRequest(FoodSourceRequest):
    pass


class EvaluateResponse(BaseModel):
    status: str
    distance: Optional[float] = Field(None, description="Strict total; null when degenerate")
    distance_full: float
    fitness: float
    degenerate: bool
    rendered: str


class RandomizeRequest(FoodSourceRequest):
    seed: Optional[int] = None


class RandomizeResponse(BaseModel):
    status: str
    route: List[int]
    fitness: float
    rendered: str


class ExploitRequest(FoodSourceRequest):
    budget: int = Field(100, ge=0)
    trial: int = Field(0, ge=0)
    stop_when_exhausted: bool = True
    seed: Optional[int] = None


class ExploitResponse(BaseModel):
    status: str
    route: List[int]
    fitness: float
    trial: int
    exhausted: bool
    improved: bool
    steps: int
