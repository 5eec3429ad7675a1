class NBodyError(Exception):
    """Base class for every error raised by the simulator."""


class InvalidMassError(NBodyError, ValueError):
    pass


class ZeroSeparationError(NBodyError, ArithmeticError):
    """Two distinct bodies occupy the same position."""


class NonFiniteStateError(NBodyError, ArithmeticError):
    """A force, position or velocity became NaN or infinite."""


class UniverseFileError(NBodyError, ValueError):
    pass


class ConfigError(NBodyError, ValueError):
    pass
