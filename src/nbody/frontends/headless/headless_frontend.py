import numpy as np
from tqdm import tqdm
from nbody.frontends import Frontend
from nbody.backends import Backend
from nbody.helpers import Universe
from nbody.simulator import step_count


class Frontend(Frontend):
    """Records the position of every body after every step."""

    def __init__(self, backend: Backend, progress: bool = True):
        super().__init__(backend)
        self.progress = progress
        self._trajectories = []
        self._bar = None

    def render(self, universe: Universe, step: int, elapsed: float) -> None:
        self._trajectories.append(universe.positions())
        if self._bar is not None:
            self._bar.update(1)

    def simulate(self, universe: Universe, total_time: float, dt: float) -> np.ndarray:
        self._trajectories = []
        try:
            with tqdm(total=step_count(total_time, dt), disable=not self.progress, unit='step') as self._bar:
                super().simulate(universe, total_time, dt)
        finally:
            self._bar = None
        return np.array(self._trajectories).reshape(-1, len(universe), 2)
