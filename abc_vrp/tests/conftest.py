# abc_vrp/tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from abc_vrp.app import app
from abc_vrp.models import Node


class ScriptedRng:
    """Stand-in for random.Random: randint() replays scripted values, shuffle() reverses."""
    def __init__(self, values=()):
        self.values = list(values)
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        return self.values.pop(0)

    def shuffle(self, x):
        x.reverse()


@pytest.fixture
def scripted():
    return ScriptedRng


@pytest.fixture(scope="session")
def client():
    # server exceptions come back as HTTP 500
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def depot():
    return Node(id=0, x=0, y=0, is_depot=True)


@pytest.fixture
def square(depot):
    """Depot + 3 customers on a 4x3 rectangle: the one-vehicle tour is 3+4+4+3 = 14."""
    return [
        depot,
        Node(id=1, x=0, y=3),
        Node(id=2, x=4, y=3),
        Node(id=3, x=4, y=0),
    ]


@pytest.fixture
def square_payload(square):
    return {"nodes": [n.model_dump() for n in square], "vehicle_count": 1}
