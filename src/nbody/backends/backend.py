import numpy as np
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from nbody.constants import GRAVITATIONAL_CONSTANT
from nbody.helpers import Body, Universe, NonFiniteStateError


class Backend(ABC):
    """Advances a universe by one step.

    A step is two passes separated by a barrier: net forces for every body
    are computed from a read-only snapshot, and only then are the bodies
    integrated.
    """

    def __init__(self, device: str, config: dict):
        super().__init__()

        self.device = device
        self.config = config

    @property
    def G(self) -> float:
        return self.config.get('G', GRAVITATIONAL_CONSTANT)

    @abstractmethod
    def _compute_forces(self, bodies: Sequence[Body]) -> np.ndarray:
        raise NotImplementedError

    def _update_bodies(self, universe: Universe, forces: np.ndarray, dt: float) -> None:
        for body, (fx, fy) in zip(universe, forces):
            body.advance(dt, fx, fy)
            if not (np.all(np.isfinite(body.position)) and np.all(np.isfinite(body.velocity))):
                raise NonFiniteStateError(f'body {body.index} diverged: {body!r}')

    def step(self, universe: Universe, dt: Optional[float] = None) -> np.ndarray:
        if dt is None:
            dt = self.config['dt']
        snapshot = universe.snapshot()
        forces = self._compute_forces(snapshot)
        if not np.all(np.isfinite(forces)):
            raise NonFiniteStateError(f'non-finite net force: {forces}')
        self._update_bodies(universe, forces, dt)
        return universe.positions()
