import numpy as np
from typing import Sequence
from nbody.helpers import Body, ZeroSeparationError
from nbody.backends import Backend


class Backend(Backend):
    """Direct summation over whole position and mass arrays at once."""

    def __init__(self, config: dict):
        super().__init__(device='vectorized', config=config)

    def _compute_forces(self, bodies: Sequence[Body]) -> np.ndarray:
        n = len(bodies)
        if n == 0:
            return np.zeros((0, 2), dtype=float)
        q = np.array([b.position for b in bodies], dtype=float)
        m = np.array([b.mass for b in bodies], dtype=float)

        indices = [b.index for b in bodies]
        if None in indices:
            same = np.array([[a.is_same(b) for b in bodies] for a in bodies], dtype=bool)
        else:
            indices = np.array(indices)
            same = indices[:, None] == indices[None, :]

        # dr[i, j] points from body i to body j
        dr = q[None, :, :] - q[:, None, :]
        distance = np.hypot(dr[..., 0], dr[..., 1])
        coincident = (distance == 0) & ~same
        if coincident.any():
            i, j = np.argwhere(coincident)[0]
            raise ZeroSeparationError(f'bodies {bodies[i].index} and {bodies[j].index} share position {q[i]}')

        safe = np.where(same, 1.0, distance)
        magnitude = self.G * m[:, None] * m[None, :] / safe**2
        pair = np.where(same[..., None], 0.0, magnitude[..., None] * dr / safe[..., None])
        return pair.sum(axis=1)
