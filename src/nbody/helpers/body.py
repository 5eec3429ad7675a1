import numpy as np
from typing import Iterable, Optional

from nbody.constants import GRAVITATIONAL_CONSTANT
from nbody.helpers.exceptions import InvalidMassError, NonFiniteStateError, ZeroSeparationError


class Body:
    """A point mass moving in the plane.

    ``index`` is the identity of the body inside a Universe. Two bodies with
    the same index are the same body even when one is a copy of the other,
    which is what lets the force pass work on a snapshot.
    """

    def __init__(self, mass: float, position: Iterable[float], velocity: Iterable[float],
                 image: Optional[str] = None, index: Optional[int] = None):
        mass = float(mass)
        if not np.isfinite(mass) or mass <= 0:
            raise InvalidMassError(f'mass must be a positive finite number, got {mass}')
        self.mass = mass
        self.position = np.array(position, dtype=float)
        self.velocity = np.array(velocity, dtype=float)
        if self.position.shape != (2,) or self.velocity.shape != (2,):
            raise ValueError('position and velocity must be 2D vectors')
        if not (np.all(np.isfinite(self.position)) and np.all(np.isfinite(self.velocity))):
            raise NonFiniteStateError(f'non-finite initial state: P:{self.position} V:{self.velocity}')
        self.image = image
        self.index = index

    def __repr__(self):
        return f'M:{self.mass} P:{self.position}  V: {self.velocity}'

    def copy(self) -> 'Body':
        return Body(self.mass, self.position, self.velocity, image=self.image, index=self.index)

    def frozen(self) -> 'Body':
        """Copy whose position and velocity cannot be written to."""
        body = self.copy()
        body.position.setflags(write=False)
        body.velocity.setflags(write=False)
        return body

    def is_same(self, other: 'Body') -> bool:
        if other is self:
            return True
        if self.index is None or other.index is None:
            return False
        return self.index == other.index

    def _separation(self, other: 'Body') -> np.float64:
        dx, dy = other.position - self.position
        return np.hypot(dx, dy)

    def distance_to(self, other: 'Body') -> float:
        return float(self._separation(other))

    def force_from(self, other: 'Body', G: float = GRAVITATIONAL_CONSTANT) -> float:
        """Magnitude of the gravitational pull of ``other`` on this body."""
        if self.is_same(other):
            return 0.0
        distance = self._separation(other)
        if distance == 0:
            raise ZeroSeparationError(f'bodies {self.index} and {other.index} share position {self.position}')
        # numpy scalars so tiny or huge separations give inf or 0 instead of raising
        with np.errstate(over='ignore', under='ignore', divide='ignore'):
            force = np.float64(G) * self.mass * other.mass / distance**2
        if not np.isfinite(force):
            raise NonFiniteStateError(f'force between bodies {self.index} and {other.index} is {force}')
        return float(force)

    def _force_component(self, other: 'Body', axis: int, G: float) -> float:
        if self.is_same(other):
            return 0.0
        force = self.force_from(other, G)
        return force * (other.position[axis] - self.position[axis]) / self.distance_to(other)

    def force_component_x(self, other: 'Body', G: float = GRAVITATIONAL_CONSTANT) -> float:
        return self._force_component(other, 0, G)

    def force_component_y(self, other: 'Body', G: float = GRAVITATIONAL_CONSTANT) -> float:
        return self._force_component(other, 1, G)

    def net_force_x(self, bodies: Iterable['Body'], G: float = GRAVITATIONAL_CONSTANT) -> float:
        return sum((self.force_component_x(other, G) for other in bodies), 0.0)

    def net_force_y(self, bodies: Iterable['Body'], G: float = GRAVITATIONAL_CONSTANT) -> float:
        return sum((self.force_component_y(other, G) for other in bodies), 0.0)

    def net_force(self, bodies: Iterable['Body'], G: float = GRAVITATIONAL_CONSTANT) -> np.ndarray:
        bodies = list(bodies)
        return np.array([self.net_force_x(bodies, G), self.net_force_y(bodies, G)])

    def advance(self, dt: float, fx: float, fy: float) -> None:
        """Semi-implicit Euler: the position moves with the updated velocity."""
        acceleration = np.array([fx, fy], dtype=float) / self.mass
        self.velocity += acceleration * dt
        self.position += self.velocity * dt
