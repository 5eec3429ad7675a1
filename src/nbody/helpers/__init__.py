from .exceptions import (
    NBodyError,
    InvalidMassError,
    ZeroSeparationError,
    NonFiniteStateError,
    UniverseFileError,
    ConfigError,
)
from .body import Body
from .universe import Universe
