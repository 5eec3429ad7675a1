import json
import math
from pathlib import Path
from typing import Optional, Union

from loguru import logger

from nbody.constants import GRAVITATIONAL_CONSTANT
from nbody.helpers.exceptions import ConfigError

DEFAULT_CONFIG_FILE = Path(__file__).parent / 'nbody_constant.json'


def load_config(config_file: Optional[Union[str, Path]] = None, **overrides) -> dict:
    """Load the simulation constants, letting non-``None`` overrides win."""
    if config_file is None:
        logger.info('No config file provided, using default one')
        config_file = DEFAULT_CONFIG_FILE
    try:
        with open(config_file) as f:
            logger.debug(f'Reading config file from {config_file}')
            config = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f'cannot load config file {config_file}: {e}') from e

    config.setdefault('G', GRAVITATIONAL_CONSTANT)
    for key, value in overrides.items():
        if value is not None:
            logger.debug(f"{key} = {value} passed as an argument therefore {key} in config file will not be used")
            config[key] = value

    for key in ('G', 'dt', 'total_time'):
        if key not in config:
            logger.error(f"{key} hasn't been found in {config_file}. Aborting")
            raise ConfigError(f'missing {key!r} in {config_file}')
        value = config[key]
        if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value) or value <= 0:
            raise ConfigError(f'{key} must be a positive number, got {value!r}')
        config[key] = float(value)
    return config
