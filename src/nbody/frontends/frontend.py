import numpy as np
import matplotlib.pyplot as plt
from abc import ABC, abstractmethod

from nbody.backends import Backend
from nbody.helpers import Universe
from nbody.simulator import Simulator


class Frontend(ABC):
    """Renderer driven by a Simulator once per completed step."""

    def __init__(self, backend: Backend):
        super().__init__()
        self.backend = backend

    @abstractmethod
    def render(self, universe: Universe, step: int, elapsed: float) -> None:
        raise NotImplementedError

    def simulate(self, universe: Universe, total_time: float, dt: float):
        simulator = Simulator(universe, self.backend)
        return simulator.run(total_time, dt, renderer=self.render)

    def plot_trajectories(self, trajectories, radius=None, labels=None, show=True):
        trajectories = np.asarray(trajectories)
        fig = plt.figure(figsize=(10, 10))
        ax = fig.add_subplot(111)

        for i in range(trajectories.shape[1]):
            trajectory = trajectories[:, i, :]
            label = labels[i] if labels is not None else f'Body {i}'
            ax.plot(trajectory[:, 0], trajectory[:, 1], label=label)

        if radius is not None:
            ax.set_xlim(-radius, radius)
            ax.set_ylim(-radius, radius)
        ax.set_xlabel('X position (m)')
        ax.set_ylabel('Y position (m)')
        ax.set_title('N-Body Simulation Trajectories')
        ax.legend()
        if show:
            plt.show()
        return fig
