import numpy as np
from typing import Sequence
from nbody.helpers import Body
from nbody.backends import Backend


class Backend(Backend):

    def __init__(self, config: dict):
        super().__init__(device='cpu', config=config)

    def _compute_forces(self, bodies: Sequence[Body]) -> np.ndarray:
        forces = np.zeros((len(bodies), 2), dtype=float)
        for i, body in enumerate(bodies):
            forces[i, 0] = body.net_force_x(bodies, self.G)
            forces[i, 1] = body.net_force_y(bodies, self.G)
        return forces
