""" FoodSource is one candidate solution of the Artificial Bee Colony: a full multi-vehicle route over every node.

The route is the node list followed by one depot copy per vehicle, e.g. for 3 vehicles

    [D, c1, c2, c3, c4, D, D, D]  →  after randomize  →  [D, c3, D, c1, c4, D, c2, D]

Position 0 and the last position are depot anchors and never move; interior depot markers
split the tour into one sub-route per vehicle. The food source caches its fitness
(1 / total distance, 0 for degenerate routes), improves itself with random interior swaps
(exploit), and counts unsuccessful attempts (trial) so the colony knows when to replace it. """

from __future__ import annotations
from typing import Iterable, List, Optional, Sequence, Tuple
import logging
import math
import random

from .config import FoodSourceConfig
from .fitness import (
    compare_fitness,
    fitness_from_distance,
    route_distance_full,
    route_distance_strict,
)
from .models import Node
from . import moves

logger = logging.getLogger(__name__)


class RouteError(ValueError):
    """Raised when a route or construction input breaks the food source layout."""


def _check_route(route: Iterable[Node]) -> List[Node]:
    if route is None:
        raise RouteError("Route must not be None")
    try:
        route = list(route)
    except TypeError as e:
        raise RouteError(f"Route must be a sequence of Nodes (got {type(route).__name__})") from e
    if not route:
        raise RouteError("Route must not be empty")
    for pos, node in enumerate(route):
        if node is None:
            raise RouteError(f"Route position {pos} is None")
        if not isinstance(node, Node):
            raise RouteError(f"Route position {pos} is not a Node (got {type(node).__name__})")
    if len(route) < 2:
        raise RouteError(f"Route needs a start and an end depot (got {len(route)} position)")
    if not route[0].is_depot or not route[-1].is_depot:
        raise RouteError(f"Route must start & end with a depot (got {route[0]} ... {route[-1]})")
    return route


class FoodSource:
    def __init__(
        self,
        all_nodes: Sequence[Node],
        vehicle_count: int,
        id: int = 0,
        config: Optional[FoodSourceConfig] = None,
        trial_limit: Optional[int] = None,
    ):
        if not all_nodes:
            raise RouteError("all_nodes must contain at least the depot")
        if not all_nodes[0].is_depot:
            raise RouteError(f"all_nodes[0] must be the depot (got {all_nodes[0]})")
        if vehicle_count < 1:
            raise RouteError(f"vehicle_count must be >= 1 (got {vehicle_count})")

        self.config = config or FoodSourceConfig()
        if trial_limit is not None:
            self.config = FoodSourceConfig(
                trial_limit=trial_limit,
                shuffle=self.config.shuffle,
                fitness_tolerance=self.config.fitness_tolerance,
            )

        self.id = id
        self.all_nodes: Tuple[Node, ...] = tuple(all_nodes)
        self.total_nodes = len(self.all_nodes)
        depot = self.all_nodes[0]
        self._route: List[Node] = list(self.all_nodes) + [depot] * vehicle_count
        self.fitness = 0.0
        self._trial = 0

    # ---------- route ----------
    @property
    def route(self) -> Tuple[Node, ...]:
        """Read-only snapshot; use set_route() or swap() to change it."""
        return tuple(self._route)

    @route.setter
    def route(self, route: Sequence[Node]) -> None:
        self._route = _check_route(route)

    def set_route(self, route: Sequence[Node]) -> None:
        self.route = route

    @property
    def vehicle_count(self) -> int:
        # one depot per vehicle start, plus the closing anchor
        return sum(n.is_depot for n in self._route) - 1

    def __len__(self) -> int:
        return len(self._route)

    def swap(self, idx1: int, idx2: int) -> None:
        n = len(self._route)
        lo, hi = moves.interior_bounds(n)
        for idx in (idx1, idx2):
            if not lo <= idx <= hi:
                raise RouteError(f"Swap index {idx} outside interior [{lo}, {hi}]")
        moves.swap(self._route, idx1, idx2)

    def vehicle_routes(self) -> List[List[Node]]:
        """Customers per vehicle, in visiting order (empty list for an idle vehicle)."""
        out: List[List[Node]] = [[]]
        for node in self._route[1:-1]:
            if node.is_depot:
                out.append([])
            else:
                out[-1].append(node)
        return out

    # ---------- evaluation ----------
    def total_distance_strict(self) -> float:
        return route_distance_strict(self._route)

    def total_distance_full(self) -> float:
        return route_distance_full(self._route)

    def compute_fitness(self) -> float:
        return fitness_from_distance(self.total_distance_strict())

    def refresh_fitness(self) -> float:
        self.fitness = self.compute_fitness()
        return self.fitness

    # ---------- staleness ----------
    @property
    def trial(self) -> int:
        return self._trial

    @trial.setter
    def trial(self, value: int) -> None:
        if value < 0:
            raise ValueError(f"trial must be >= 0 (got {value})")
        self._trial = int(value)

    def set_trial(self, value: int) -> None:
        self.trial = value

    def inc_trial(self, num: int = 1) -> None:
        self.trial = self._trial + num

    @property
    def trial_limit(self) -> int:
        return self.config.trial_limit

    def is_exhausted(self) -> bool:
        return self._trial > self.config.trial_limit

    # ---------- search ----------
    def randomize(self, rng: random.Random) -> None:
        """Permute the interior in place. The cached fitness is left as is."""
        moves.SHUFFLES[self.config.shuffle](self._route, rng)
        logger.debug("food source %s randomized (%s)", self.id, self.config.shuffle)

    def exploit(self, rng: random.Random) -> float:
        """
        One hill-climbing step: swap two random interior positions and keep the
        swap unless it makes the route strictly worse.
          - worse    → revert, trial += 1
          - better   → keep,   trial = 0
          - neutral  → keep,   trial unchanged
        Returns the retained fitness (also cached in self.fitness).
        """
        old_fitness = self.compute_fitness()
        n = len(self._route)
        if not moves.has_interior(n):
            self.fitness = old_fitness
            return self.fitness

        idx1 = moves.random_interior_index(rng, n)
        idx2 = moves.random_interior_index(rng, n)
        moves.swap(self._route, idx1, idx2)
        new_fitness = self.compute_fitness()

        if old_fitness > new_fitness:
            was_exhausted = self.is_exhausted()
            self.inc_trial(1)
            moves.swap(self._route, idx1, idx2)  # revert
            new_fitness = old_fitness
            if self.is_exhausted() and not was_exhausted:
                logger.debug("food source %s exhausted (trial=%d > %d)",
                             self.id, self._trial, self.trial_limit)
        if new_fitness != old_fitness:
            self.trial = 0

        self.fitness = new_fitness
        return self.fitness

    # ---------- ordering ----------
    def compare_to(self, other: "FoodSource") -> int:
        tolerance = max(self.config.fitness_tolerance, other.config.fitness_tolerance)
        return compare_fitness(self.fitness, other.fitness, tolerance)

    def __lt__(self, other: "FoodSource") -> bool:
        if not isinstance(other, FoodSource):
            return NotImplemented
        return self.compare_to(other) < 0

    # ---------- copy ----------
    def copy_from(self, other: "FoodSource") -> "FoodSource":
        self.fitness = other.fitness
        self._route = list(other._route)
        self.trial = other.trial
        self.id = other.id
        self.total_nodes = other.total_nodes
        return self

    def copy_into(self, target: "FoodSource") -> "FoodSource":
        return target.copy_from(self)

    def clone(self) -> "FoodSource":
        twin = FoodSource.__new__(FoodSource)
        twin.config = self.config
        twin.all_nodes = self.all_nodes
        return twin.copy_from(self)

    def __copy__(self) -> "FoodSource":
        return self.clone()

    def __deepcopy__(self, memo) -> "FoodSource":
        return self.clone()

    # ---------- rendering ----------
    def render(self) -> str:
        total = self.total_distance_strict()
        if math.isinf(total):
            total = self.total_distance_full()

        parts: List[str] = [f"Total distance: {total}\nRoute:"]
        last = len(self._route) - 1
        vehicle_no = 1
        for pos, node in enumerate(self._route):
            if node.is_depot:
                if pos != 0:
                    parts.append(f"{node}\n")
                if pos != last:
                    parts.append(f"\nVehicle {vehicle_no}: {node}")
                    vehicle_no += 1
            else:
                parts.append(str(node))
        return "".join(parts)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (f"FoodSource(id={self.id}, fitness={self.fitness}, trial={self._trial}, "
                f"vehicles={self.vehicle_count})")
