"""
Pairwise repulsion laws. Both strategies return magnitudes only; the engine
resolves direction.
"""
from . import constants
from .errors import InvalidConfigurationError, InvalidValueError, check_finite


class _PairLaw:
    def __init__(self, force_constant=constants.FORCE_CONSTANT):
        k = check_finite(force_constant, "force constant", InvalidConfigurationError)
        if k < 0.0:
            raise InvalidConfigurationError(f"The force constant is negative: {k}")
        self.force_constant = k

    def _distance(self, a, b):
        distance = a.distance_to(b)
        if distance == 0.0:
            raise InvalidValueError(f"Particles coincide at ({a.x}, {a.y}); the interaction is undefined.")
        return distance

    def __repr__(self):
        return f"{self.__class__.__name__}(force_constant={self.force_constant})"


class RepellingForce(_PairLaw):
    """K * m1 * m2 / d**2"""

    def __call__(self, a, b):
        distance = self._distance(a, b)
        return self.force_constant * a.mass * b.mass / (distance * distance)


class RepellingPotentialEnergy(_PairLaw):
    """K * m1 * m2 / d"""

    def __call__(self, a, b):
        distance = self._distance(a, b)
        return self.force_constant * a.mass * b.mass / distance
