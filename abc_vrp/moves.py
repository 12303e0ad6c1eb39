from typing import List, MutableSequence, Tuple
import random

# Interior of a route of length n is [1 .. n-2]; positions 0 and n-1 are depot anchors.


def interior_bounds(n: int) -> Tuple[int, int]:
    return 1, n - 2


def has_interior(n: int) -> bool:
    return n > 2


def random_interior_index(rng: random.Random, n: int) -> int:
    lo, hi = interior_bounds(n)
    return rng.randint(lo, hi)


def swap(route: MutableSequence, idx1: int, idx2: int) -> None:
    route[idx1], route[idx2] = route[idx2], route[idx1]


def sweep_shuffle(route: MutableSequence, rng: random.Random) -> None:
    """
    Swap every interior position with an interior position drawn over the
    full interior range (self-swaps allowed). Not a uniform shuffle: the
    draw range never shrinks, so some permutations come up more often.
    """
    n = len(route)
    if not has_interior(n):
        return
    for i in range(1, n - 1):
        swap(route, i, random_interior_index(rng, n))


def uniform_shuffle(route: MutableSequence, rng: random.Random) -> None:
    n = len(route)
    if not has_interior(n):
        return
    inner: List = list(route[1:n - 1])
    rng.shuffle(inner)
    route[1:n - 1] = inner


SHUFFLES = {
    "sweep": sweep_shuffle,
    "uniform": uniform_shuffle,
}
