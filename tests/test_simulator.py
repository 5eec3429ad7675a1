import numpy as np
import pytest

from nbody.backends import create_backend
from nbody.helpers import Body, Universe
from nbody.helpers.io import read_universe
from nbody.simulator import Simulator, step_count


def lone_body():
    return Universe(1.0, [Body(1.0, [0.0, 0.0], [0.0, 0.0])])


@pytest.mark.parametrize("total_time, dt, steps", [(10, 3, 4), (10, 5, 3), (0.5, 1, 1), (1.0, 0.25, 5)])
def test_step_count(total_time, dt, steps):
    assert step_count(total_time, dt) == steps


def test_loop_runs_until_elapsed_time_exceeds_total(unit_config):
    calls = []
    simulator = Simulator(lone_body(), create_backend('cpu', unit_config))
    steps = simulator.run(10, 3, renderer=lambda universe, step, elapsed: calls.append((step, elapsed)))
    assert steps == 4
    assert calls == [(1, 3), (2, 6), (3, 9), (4, 12)]
    assert simulator.steps == 4
    assert simulator.elapsed == 12


@pytest.mark.parametrize("total_time, dt", [(10, 0), (10, -1), (0, 1), (float('inf'), 1), (10, float('nan'))])
def test_invalid_times(total_time, dt, unit_config):
    simulator = Simulator(lone_body(), create_backend('cpu', unit_config))
    with pytest.raises(ValueError):
        simulator.run(total_time, dt)
    assert simulator.steps == 0


def test_renderer_sees_state_after_each_step(binary, unit_config):
    seen = []
    simulator = Simulator(binary, create_backend('cpu', unit_config))
    simulator.run(0.5, 0.125, renderer=lambda universe, step, elapsed: seen.append(universe.positions()))
    assert len(seen) == 5
    np.testing.assert_array_equal(seen[-1], binary.positions())
    assert not np.array_equal(seen[0], [[-1.0, 0.0], [1.0, 0.0]])


def test_rendering_does_not_change_trajectories(planets_file):
    config = {'G': 6.674e-11, 'dt': 25000.0}
    rendered, bare = read_universe(planets_file), read_universe(planets_file)

    def renderer(universe, step, elapsed):
        universe.positions().sum()

    Simulator(rendered, create_backend('cpu', config)).run(1e6, 25000.0, renderer=renderer)
    Simulator(bare, create_backend('cpu', config)).run(1e6, 25000.0)
    np.testing.assert_array_equal(rendered.positions(), bare.positions())
    np.testing.assert_array_equal(rendered.velocities(), bare.velocities())


def test_stopping_between_steps(binary, unit_config):
    simulator = Simulator(binary, create_backend('cpu', unit_config))
    for step, elapsed in simulator.iter_steps(100.0, 1.0):
        if step == 2:
            break
    assert simulator.steps == 2
    assert simulator.elapsed == 2.0
