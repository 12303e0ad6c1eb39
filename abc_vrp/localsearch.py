from __future__ import annotations
from typing import Tuple
import logging
import random

from .food_source import FoodSource

logger = logging.getLogger(__name__)


def apply_exploitation(
    source: FoodSource,
    rng: random.Random,
    budget: int,
    stop_when_exhausted: bool = True,
) -> Tuple[float, bool, int]:
    """
    Repeatedly exploit one food source.
    Stops after `budget` steps, or earlier once the source is exhausted
    (if stop_when_exhausted). Returns (fitness, improved: bool, steps).
    When no step runs, `source.fitness` is not touched and the returned
    fitness is the one computed from the current route.
    """
    start = source.compute_fitness()
    steps = 0
    for _ in range(max(0, budget)):
        if stop_when_exhausted and source.is_exhausted():
            break
        source.exploit(rng)
        steps += 1
    if steps == 0:
        # nothing ran: the cached fitness is left as is
        return start, False, 0

    improved = source.fitness > start
    logger.debug("food source %s: %d steps, fitness %.6g -> %.6g (trial=%d)",
                 source.id, steps, start, source.fitness, source.trial)
    return source.fitness, improved, steps
