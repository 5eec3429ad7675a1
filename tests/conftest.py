import matplotlib
matplotlib.use("Agg")

import pytest
from pathlib import Path

from nbody.helpers import Body, Universe

DATA_DIR = Path(__file__).parent.parent / 'data'


@pytest.fixture
def planets_file():
    return DATA_DIR / 'planets.txt'


@pytest.fixture
def unit_config():
    return {'G': 1.0, 'dt': 0.01, 'total_time': 1.0}


@pytest.fixture
def binary():
    """Equal masses with equal and opposite velocities."""
    return Universe(10.0, [
        Body(1.0, [-1.0, 0.0], [0.0, 0.5]),
        Body(1.0, [1.0, 0.0], [0.0, -0.5]),
    ])
