""" The Node Pydantic model is a single location of the routing graph: a customer or the depot.

It:

Holds integer grid coordinates (x, y) and a depot flag.
Is frozen, so food sources can share Node references safely and use them as dict keys.
Exposes .coords for unified coordinate access, and renders as "(x, y)".

In short: Node is the read-only building block that food source routes are made of. """

from typing import Tuple                              # Type hint for the coordinate pair
from pydantic import BaseModel, ConfigDict            # Pydantic base class + model configuration


class Node(BaseModel):                                # Customer or depot location
    model_config = ConfigDict(frozen=True)            # Immutable + hashable

    id: int = 0                                       # Identifier used in payloads and display
    x: int                                            # X-coordinate on the integer grid
    y: int                                            # Y-coordinate on the integer grid
    is_depot: bool = False                            # Depot nodes separate vehicle sub-routes

    @property
    def coords(self) -> Tuple[int, int]:              # Unified coordinate accessor
        return self.x, self.y

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
