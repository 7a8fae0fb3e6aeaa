import math
import numbers


class SimulationError(Exception):
    """Base class for every error raised by the simulation."""


class InvalidValueError(SimulationError, ValueError):
    """A numeric value is NaN or infinite where a finite one is required."""


class InvalidConfigurationError(SimulationError, ValueError):
    """A world dimension, time step, tick interval or strategy is unusable."""


class EmptyWorldError(InvalidConfigurationError):
    pass


class OverlapError(SimulationError):
    pass


class EnergyRenormalizationAnomaly(SimulationError, ArithmeticError):
    """
    The per-step velocity scale factor is undefined.
    Reported by the engine and skipped for that tick, never fatal.
    """

    def __init__(self, message, radicand=None):
        super().__init__(message)
        self.radicand = radicand


def check_finite(value, name, error=InvalidValueError):
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise error(f"The {name} must be a real number, got {value!r}.")
    value = float(value)
    if math.isnan(value):
        raise error(f"The {name} is NaN.")
    if math.isinf(value):
        raise error(f"The {name} is infinite.")
    return value


def check_positive(value, name, error=InvalidConfigurationError):
    value = check_finite(value, name, error)
    if value <= 0.0:
        raise error(f"The {name} is non-positive: {value}")
    return value
