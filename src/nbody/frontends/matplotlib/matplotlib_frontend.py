import numpy as np
import matplotlib.pyplot as plt
from pathlib import Path
from loguru import logger
from matplotlib.animation import FuncAnimation
from matplotlib.offsetbox import AnnotationBbox, OffsetImage
from nbody.frontends import Frontend
from nbody.frontends.headless import Frontend as HeadlessFrontend
from nbody.backends import Backend
from nbody.helpers import Universe
from nbody.simulator import Simulator

COLORS = ['yellow', 'blue', 'gray', 'green', 'red', 'purple']


def body_label(body) -> str:
    if body.image:
        return Path(body.image).stem
    return f'Body {body.index}'


def load_image(path):
    """Image array for a body, or None when there is nothing to draw."""
    if not path or not Path(path).is_file():
        return None
    try:
        return plt.imread(path)
    except (OSError, ValueError) as e:
        logger.warning(f"Cannot read image {path}, drawing a marker instead: {e}")
        return None


class Frontend(Frontend):

    def __init__(self, backend: Backend, live: bool = False, interval: float = 0.01, show: bool = True,
                 image_zoom: float = 0.5):
        super().__init__(backend)
        self.live = live
        self.interval = interval
        self.show = show
        self.fig = None
        self.ax = None
        self.image_zoom = image_zoom
        self.scatters = []
        self.animation = None
        self.images = {}

    def _setup(self, universe: Universe):
        n = len(universe)
        self.fig = plt.figure(figsize=(10, 10))
        self.ax = self.fig.add_subplot(111)
        self.ax.set_xlim(-universe.radius, universe.radius)
        self.ax.set_ylim(-universe.radius, universe.radius)
        self.ax.set_facecolor('black')

        # Calculate marker sizes based on mass
        max_mass = max((body.mass for body in universe), default=1.0)
        marker_sizes = [max(5, 20 * (body.mass/max_mass)**(1/3)) for body in universe]
        self.scatters = [self.ax.plot([], [], 'o', markersize=size, color=COLORS[i % len(COLORS)],
                                      label=body_label(body))[0]
                         for i, (size, body) in enumerate(zip(marker_sizes, universe))]

        self.images = {}
        for i, body in enumerate(universe):
            picture = load_image(body.image)
            if picture is None:
                continue
            box = AnnotationBbox(OffsetImage(picture, zoom=self.image_zoom), tuple(body.position), frameon=False)
            self.images[i] = self.ax.add_artist(box)
            self.scatters[i].set_visible(False)

        self.ax.set_xlabel('X position (m)')
        self.ax.set_ylabel('Y position (m)')
        self.ax.set_title(f'{n} Body Simulation')
        if n:
            self.ax.legend(loc='upper right')

    def _draw(self, positions: np.ndarray):
        for scatter, position in zip(self.scatters, positions):
            scatter.set_data([position[0]], [position[1]])
        for i, box in self.images.items():
            box.xy = box.xybox = (positions[i][0], positions[i][1])
        return self.scatters + list(self.images.values())

    def render(self, universe: Universe, step: int, elapsed: float) -> None:
        self._draw(universe.positions())
        self.ax.set_title(f'{len(universe)} Body Simulation, t = {elapsed:.3e} s')
        plt.pause(self.interval)

    def simulate(self, universe: Universe, total_time: float, dt: float) -> np.ndarray:
        self._setup(universe)
        if self.live:
            trajectories = []

            def record(universe, step, elapsed):
                trajectories.append(universe.positions())
                self.render(universe, step, elapsed)

            Simulator(universe, self.backend).run(total_time, dt, renderer=record)
            trajectories = np.array(trajectories).reshape(-1, len(universe), 2)
        else:
            headless_frontend = HeadlessFrontend(backend=self.backend, progress=False)
            trajectories = headless_frontend.simulate(universe, total_time, dt)

            def init():
                for scatter in self.scatters:
                    scatter.set_data([], [])
                return self.scatters + list(self.images.values())

            def update(frame):
                return self._draw(trajectories[frame])

            self.animation = FuncAnimation(self.fig, update, frames=len(trajectories), init_func=init,
                                           blit=True, interval=1)
        if self.show:
            plt.show()
        return trajectories
