from typing import Sequence
import math

from .models import Node


def distance(n1: Node, n2: Node) -> float:
    return math.hypot(n2.x - n1.x, n2.y - n1.y)


def route_distance_strict(route: Sequence[Node]) -> float:
    """
    Sum of leg distances, or +inf as soon as one leg has length exactly 0
    (two adjacent depot markers, or a node repeated back-to-back).
    Remaining legs are not evaluated once a zero leg is found.
    """
    total = 0.0
    for i in range(len(route) - 1):
        d = distance(route[i], route[i + 1])
        if d == 0:
            return math.inf
        total += d
    return total


def route_distance_full(route: Sequence[Node]) -> float:
    return sum(distance(route[i], route[i + 1]) for i in range(len(route) - 1))


def fitness_from_distance(total: float) -> float:
    # 1/inf == 0.0, so degenerate routes rank last
    return 1.0 / total


def compare_fitness(f1: float, f2: float, tolerance: float = 0.0) -> int:
    """Descending order: -1 if f1 ranks first, 1 if f2 does, 0 when tied."""
    if abs(f1 - f2) <= tolerance:
        return 0
    return -1 if f1 > f2 else 1
