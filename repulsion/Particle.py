import math
from collections import namedtuple

from .Vec2 import Vec2
from .errors import InvalidValueError, check_finite

# Read-only view of one particle handed to renderers.
ParticleState = namedtuple("ParticleState", ["x", "y", "vx", "vy", "mass", "radius"])


def _as_vec2(value, name):
    if isinstance(value, Vec2):
        return value
    try:
        x, y = value
    except (TypeError, ValueError):
        raise InvalidValueError(f"The {name} must be a pair of numbers, got {value!r}.") from None
    return Vec2(check_finite(x, f"{name} x-component"), check_finite(y, f"{name} y-component"))


class Particle:
    def __init__(self, mass, pos=None, vel=None, radius=0.0):
        self._mass = self._check_mass(mass)
        self._radius = self._check_radius(radius)
        self._pos = Vec2()
        self._vel = Vec2()

        # Use setters so positions and velocities are validated
        if pos is not None:
            self.pos = pos
        if vel is not None:
            self.vel = vel

    @staticmethod
    def _check_mass(value):
        mass = check_finite(value, "particle mass")
        if mass <= 0.0:
            raise InvalidValueError(f"The particle mass is non-positive: {mass}")
        return mass

    @staticmethod
    def _check_radius(value):
        radius = check_finite(value, "particle radius")
        if radius < 0.0:
            raise InvalidValueError(f"The particle radius is negative: {radius}")
        return radius

    @property
    def mass(self):
        return self._mass

    @property
    def radius(self):
        return self._radius

    @property
    def pos(self):
        return self._pos

    @pos.setter
    def pos(self, value):
        self._pos = _as_vec2(value, "position")

    @property
    def vel(self):
        return self._vel

    @vel.setter
    def vel(self, value):
        self._vel = _as_vec2(value, "velocity")

    @property
    def x(self):
        return self._pos.x

    @property
    def y(self):
        return self._pos.y

    def set_position(self, x, y):
        self._pos = Vec2(check_finite(x, "x-coordinate"), check_finite(y, "y-coordinate"))

    def set_velocity(self, vx, vy):
        self._vel = Vec2(check_finite(vx, "x-velocity"), check_finite(vy, "y-velocity"))

    def distance_to(self, other):
        return math.hypot(self._pos.x - other.pos.x, self._pos.y - other.pos.y)

    def speed(self):
        return self._vel.length()

    def kinetic_energy(self):
        return 0.5 * self._mass * self._vel.dot(self._vel)

    def copy(self):
        return Particle(self._mass, self._pos, self._vel, self._radius)

    def state(self):
        return ParticleState(self._pos.x, self._pos.y, self._vel.x, self._vel.y, self._mass, self._radius)

    def __repr__(self):
        return f"Particle(pos=({self._pos.x:.2f}, {self._pos.y:.2f}), vel=({self._vel.x:.2f}, {self._vel.y:.2f}), radius={self._radius}, mass={self._mass})"

