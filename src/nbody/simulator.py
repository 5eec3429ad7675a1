import math
from typing import Callable, Iterator, Optional, Tuple

from loguru import logger

from nbody.backends import Backend
from nbody.helpers import Universe

Renderer = Callable[[Universe, int, float], None]


def _check_times(total_time: float, dt: float) -> None:
    for name, value in (('total_time', total_time), ('dt', dt)):
        if not math.isfinite(value) or value <= 0:
            raise ValueError(f'{name} must be a positive finite number, got {value}')


def step_count(total_time: float, dt: float) -> int:
    """Number of steps ``Simulator.run`` performs for these times."""
    _check_times(total_time, dt)
    steps, elapsed = 0, 0.0
    while not elapsed > total_time:
        steps += 1
        elapsed += dt
    return steps


class Simulator:
    """Owns a universe for the length of a run and steps it with a backend."""

    def __init__(self, universe: Universe, backend: Backend):
        self.universe = universe
        self.backend = backend
        self.elapsed = 0.0
        self.steps = 0

    def step(self, dt: float) -> None:
        self.backend.step(self.universe, dt)
        self.steps += 1

    def iter_steps(self, total_time: float, dt: float) -> Iterator[Tuple[int, float]]:
        """Yield ``(step, elapsed)`` after every completed step.

        The loop stops once the elapsed time exceeds ``total_time``, so the
        last step may overshoot it by up to ``dt``. Stopping the iteration
        early is only possible between steps.
        """
        _check_times(total_time, dt)
        count, time = 0, 0.0
        while not time > total_time:
            self.step(dt)
            count += 1
            time += dt
            self.elapsed += dt
            yield count, time

    def run(self, total_time: float, dt: float, renderer: Optional[Renderer] = None) -> int:
        logger.info(f'Running {len(self.universe)} bodies on {self.backend.device} backend '
                    f'for {total_time} with dt = {dt}')
        steps = 0
        for steps, elapsed in self.iter_steps(total_time, dt):
            if renderer is not None:
                renderer(self.universe, steps, elapsed)
        logger.info(f'Simulation finished after {steps} steps')
        return steps
