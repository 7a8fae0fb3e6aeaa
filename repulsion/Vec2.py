import math

from .errors import check_finite


class Vec2:
    """Immutable 2-D vector. Both components are always finite."""

    __slots__ = ("_x", "_y")

    def __init__(self, x=0.0, y=0.0):
        object.__setattr__(self, "_x", check_finite(x, "x-component"))
        object.__setattr__(self, "_y", check_finite(y, "y-component"))

    def __setattr__(self, name, value):
        raise AttributeError("Vec2 is immutable")

    @classmethod
    def from_polar(cls, magnitude, angle):
        return cls(magnitude * math.cos(angle), magnitude * math.sin(angle))

    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

    def __add__(self, other):
        return Vec2(self._x + other.x, self._y + other.y)

    def __sub__(self, other):
        return Vec2(self._x - other.x, self._y - other.y)

    def __mul__(self, scalar):
        return Vec2(self._x * scalar, self._y * scalar)

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    def __neg__(self):
        return Vec2(-self._x, -self._y)

    def dot(self, other):
        return self._x * other.x + self._y * other.y

    def length(self):
        return math.hypot(self._x, self._y)

    def length_sq(self):
        return self._x * self._x + self._y * self._y

    def __iter__(self):
        yield self._x
        yield self._y

    def __eq__(self, other):
        if other is None or not isinstance(other, Vec2):
            return False
        return self._x == other.x and self._y == other.y

    def __hash__(self):
        return hash((self._x, self._y))

    def __repr__(self):
        return f"Vec2({self._x!r}, {self._y!r})"
