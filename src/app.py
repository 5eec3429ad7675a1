from pathlib import Path
from typing import Optional

import typer
from loguru import logger
from prettytable import PrettyTable

from nbody.backends import BACKENDS, create_backend
from nbody.config import load_config
from nbody.frontends import FRONTENDS, headless, matplotlib as matplotlib_frontend
from nbody.helpers import NBodyError
from nbody.helpers.io import read_universe, save_trajectories
from nbody.simulator import step_count

app = typer.Typer(add_completion=False)


def print_parameters(config: dict, universe, backend_name: str, frontend_name: str):
    table = PrettyTable()
    table.field_names = ["Parameter", "Value", "Unit"]
    table.align = "l"
    table.add_row(["Gravitational constant (G)", f"{config['G']:.3e}", "m³ kg⁻¹ s⁻²"])
    table.add_row(["Time step (dt)", f"{config['dt']}", "s"])
    table.add_row(["Total time", f"{config['total_time']}", "s"])
    table.add_row(["Simulation steps", f"{step_count(config['total_time'], config['dt'])}", "-"])
    table.add_row(["Bodies", f"{len(universe)}", "-"])
    table.add_row(["Universe radius", f"{universe.radius:.3e}", "m"])
    print("\nSimulation Parameters:")
    print(table)

    table = PrettyTable()
    table.field_names = ["Backend", "Frontend"]
    table.align = "l"
    table.add_row([f"{backend_name}", f"{frontend_name}"])
    print("\nSimulation Pipeline:")
    print(table)


def print_bodies(universe):
    table = PrettyTable()
    table.field_names = ["Body", "x", "y", "vx", "vy", "Mass"]
    table.align = "l"
    for body in universe:
        table.add_row([matplotlib_frontend.body_label(body), *(f"{v:.4e}" for v in (*body.position, *body.velocity, body.mass))])
    print("\nFinal State:")
    print(table)


@app.command()
def run(universe_file: Path = typer.Argument(..., help='Universe file: count, radius, then x y vx vy mass image rows'),
        total_time: Optional[float] = typer.Argument(None, help='Total simulated time in seconds'),
        dt: Optional[float] = typer.Argument(None, help='Time step in seconds'),
        backend_name: str = typer.Option('cpu', '--backend', help=f'One of {", ".join(BACKENDS)}'),
        frontend_name: str = typer.Option('headless', '--frontend', help=f'One of {", ".join(FRONTENDS)}'),
        config_file: Optional[Path] = typer.Option(None, '--config', help='JSON file with G, dt and total_time'),
        output: Optional[Path] = typer.Option(None, '--output', help='Write trajectories to this file'),
        image_dir: Optional[Path] = typer.Option(None, '--image-dir', help='Directory prepended to image names'),
        live: bool = typer.Option(False, '--live', help='Draw every step while simulating'),
        plot: bool = typer.Option(False, '--plot', help='Plot trajectories after the run')):
    """Simulate a universe under Newtonian gravity."""
    if backend_name not in BACKENDS:
        raise typer.BadParameter(f'unknown backend {backend_name!r}', param_hint='--backend')
    if frontend_name not in FRONTENDS:
        raise typer.BadParameter(f'unknown frontend {frontend_name!r}', param_hint='--frontend')

    try:
        config = load_config(config_file, total_time=total_time, dt=dt)
        universe = read_universe(universe_file, image_dir=image_dir)
        print_parameters(config, universe, backend_name, frontend_name)

        backend = create_backend(backend_name, config)
        if frontend_name == 'headless':
            frontend = headless.Frontend(backend=backend)
        else:
            frontend = matplotlib_frontend.Frontend(backend=backend, live=live)

        logger.info('Starting simulation')
        trajectories = frontend.simulate(universe, config['total_time'], config['dt'])
    except NBodyError as e:
        logger.error(f'Simulation aborted: {e}')
        raise typer.Exit(code=1)

    print_bodies(universe)
    if output is not None:
        save_trajectories(output, trajectories)
        logger.info(f'Trajectories saved to {output}')
    if plot:
        frontend.plot_trajectories(trajectories, radius=universe.radius,
                                   labels=[matplotlib_frontend.body_label(body) for body in universe])


def main():
    app()


if __name__ == "__main__":
    main()
