# abc_vrp/config.py
from __future__ import annotations
from dataclasses import dataclass

DEFAULT_TRIAL_LIMIT = 10
SHUFFLE_MODES = ("sweep", "uniform")


@dataclass
class FoodSourceConfig:
    trial_limit: int = DEFAULT_TRIAL_LIMIT   # exhausted once trial > trial_limit
    shuffle: str = "sweep"                   # "sweep" (full-range draw per position) | "uniform"
    fitness_tolerance: float = 0.0           # |f1 - f2| <= tolerance → equal rank (0.0 = exact)

    def __post_init__(self):
        self.trial_limit = int(self.trial_limit)
        self.fitness_tolerance = float(self.fitness_tolerance)
        if self.trial_limit < 0:
            raise ValueError(f"trial_limit must be >= 0 (got {self.trial_limit})")
        if self.shuffle not in SHUFFLE_MODES:
            raise ValueError(f"shuffle must be one of {SHUFFLE_MODES} (got {self.shuffle!r})")
        if self.fitness_tolerance < 0.0:
            raise ValueError(f"fitness_tolerance must be >= 0 (got {self.fitness_tolerance})")
