import numpy as np
from pathlib import Path
from typing import Optional, Union

from loguru import logger

from nbody.helpers.body import Body
from nbody.helpers.exceptions import UniverseFileError
from nbody.helpers.universe import Universe

PathLike = Union[str, Path]


def read_universe(filename: PathLike, image_dir: Optional[PathLike] = None) -> Universe:
    """Read a universe file.

    The file holds the number of bodies, the radius of the universe and then
    one ``x y vx vy mass image`` row per body, all separated by whitespace.
    """
    try:
        tokens = Path(filename).read_text().split()
    except OSError as e:
        raise UniverseFileError(f'cannot read universe file {filename}: {e}') from e

    try:
        count = int(tokens[0])
        radius = float(tokens[1])
    except (IndexError, ValueError) as e:
        raise UniverseFileError(f'{filename}: expected body count and radius in header') from e
    if count < 0:
        raise UniverseFileError(f'{filename}: negative body count {count}')
    if not radius > 0:
        raise UniverseFileError(f'{filename}: radius must be positive, got {radius}')

    rows = tokens[2:]
    if len(rows) < count * 6:
        raise UniverseFileError(f'{filename}: expected {count} bodies, found {len(rows) // 6}')

    bodies = []
    for i in range(count):
        x, y, vx, vy, mass, image = rows[i * 6:(i + 1) * 6]
        try:
            state = [float(v) for v in (x, y, vx, vy, mass)]
        except ValueError as e:
            raise UniverseFileError(f'{filename}: malformed row for body {i}: {e}') from e
        if image_dir is not None:
            image = str(Path(image_dir) / image)
        bodies.append(Body(state[4], state[0:2], state[2:4], image=image))

    logger.debug(f'Read {count} bodies from {filename} (radius {radius:.3e})')
    return Universe(radius, bodies)


def save_trajectories(filename: PathLike, trajectories: np.ndarray) -> None:
    """Save trajectories to a text file, one line per step."""
    trajectories = np.asarray(trajectories, dtype=float)
    with open(filename, "w") as file:
        for step in trajectories:
            file.write(" ".join(map(str, step.ravel())) + "\n")
    logger.debug(f'Saved {len(trajectories)} steps to {filename}')


def read_trajectories(filename: PathLike) -> np.ndarray:
    """Read trajectories back as a ``(steps, bodies, 2)`` array."""
    steps = []
    with open(filename, "r") as file:
        for line in file:
            if line.strip():
                steps.append(np.array(list(map(float, line.split()))).reshape(-1, 2))
    return np.array(steps)
