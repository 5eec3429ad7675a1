import numpy as np
from typing import Iterable, Iterator, List, Tuple

from nbody.helpers.body import Body
from nbody.helpers.exceptions import ZeroSeparationError


class Universe:
    """Ordered collection of bodies and the radius of the scene they live in.

    Bodies get their index from their position in ``bodies``. The bodies are
    taken as they are, not copied, so their ``index`` is overwritten: a body
    belongs to one universe at a time. The radius only matters to renderers.
    """

    def __init__(self, radius: float, bodies: Iterable[Body]):
        radius = float(radius)
        if not np.isfinite(radius) or radius <= 0:
            raise ValueError(f'radius must be a positive finite number, got {radius}')
        self.radius = radius
        self.bodies: List[Body] = list(bodies)
        for i, body in enumerate(self.bodies):
            body.index = i
        self._check_separation()

    def _check_separation(self):
        seen = {}
        for body in self.bodies:
            key = tuple(body.position)
            if key in seen:
                raise ZeroSeparationError(f'bodies {seen[key]} and {body.index} both start at {body.position}')
            seen[key] = body.index

    def __len__(self):
        return len(self.bodies)

    def __iter__(self) -> Iterator[Body]:
        return iter(self.bodies)

    def __getitem__(self, i: int) -> Body:
        return self.bodies[i]

    def __repr__(self):
        return f'Universe(radius={self.radius}, bodies={len(self.bodies)})'

    def snapshot(self) -> Tuple[Body, ...]:
        """Read-only copies of every body, indices preserved."""
        return tuple(body.frozen() for body in self.bodies)

    def positions(self) -> np.ndarray:
        return np.array([body.position for body in self.bodies], dtype=float).reshape(-1, 2)

    def velocities(self) -> np.ndarray:
        return np.array([body.velocity for body in self.bodies], dtype=float).reshape(-1, 2)

    def masses(self) -> np.ndarray:
        return np.array([body.mass for body in self.bodies], dtype=float)

    def center_of_mass(self) -> np.ndarray:
        masses = self.masses()
        return (masses[:, None] * self.positions()).sum(axis=0) / masses.sum()

    def momentum(self) -> np.ndarray:
        return (self.masses()[:, None] * self.velocities()).sum(axis=0)
