from .node import Node

from .api_schemas import (
    FoodSourceSettings,
    EvaluateRequest, EvaluateResponse,
    RandomizeRequest, RandomizeResponse,
    ExploitRequest, ExploitResponse,
)
