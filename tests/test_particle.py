import pytest

from repulsion import InvalidValueError, Particle, Vec2


def test_derived_quantities():
    p = Particle(2.0, pos=(0.0, 0.0), vel=(3.0, 4.0))
    q = Particle(1.0, pos=(6.0, 8.0))
    assert p.speed() == 5.0
    assert p.kinetic_energy() == 25.0
    assert p.distance_to(q) == 10.0
    assert q.distance_to(p) == 10.0
    assert p.distance_to(p) == 0.0


@pytest.mark.parametrize("mass", [float("nan"), float("inf"), 0.0, -1.0])
def test_rejects_invalid_mass(mass):
    with pytest.raises(InvalidValueError):
        Particle(mass)


def test_rejects_negative_radius():
    with pytest.raises(InvalidValueError):
        Particle(1.0, radius=-1.0)


def test_rejects_non_finite_initial_state():
    with pytest.raises(InvalidValueError):
        Particle(1.0, pos=(float("nan"), 0.0))
    with pytest.raises(InvalidValueError):
        Particle(1.0, vel=Vec2(0.0, 1.0) * 1e308 * 10)


def test_setters_replace_state():
    p = Particle(1.0)
    p.set_position(1.5, -2.0)
    p.set_velocity(0.25, 4.0)
    assert p.pos == Vec2(1.5, -2.0)
    assert p.vel == Vec2(0.25, 4.0)


@pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
def test_setters_reject_non_finite_and_leave_state_untouched(bad):
    p = Particle(1.0, pos=(1.0, 2.0), vel=(3.0, 4.0))
    with pytest.raises(InvalidValueError):
        p.set_position(bad, 0.0)
    with pytest.raises(InvalidValueError):
        p.set_velocity(0.0, bad)
    assert p.pos == Vec2(1.0, 2.0)
    assert p.vel == Vec2(3.0, 4.0)


def test_position_property_rejects_garbage():
    p = Particle(1.0)
    with pytest.raises(InvalidValueError):
        p.pos = "xy"
    with pytest.raises(InvalidValueError):
        p.pos = (1.0, 2.0, 3.0)


def test_copy_is_independent():
    p = Particle(3.0, pos=(1.0, 1.0), vel=(2.0, 0.0), radius=0.5)
    q = p.copy()
    q.set_position(9.0, 9.0)
    assert p.pos == Vec2(1.0, 1.0)
    assert q.mass == 3.0 and q.radius == 0.5


def test_state_snapshot():
    p = Particle(3.0, pos=(1.0, 2.0), vel=(-1.0, 0.5), radius=2.0)
    s = p.state()
    assert s == (1.0, 2.0, -1.0, 0.5, 3.0, 2.0)
    assert s.x == 1.0 and s.radius == 2.0


@pytest.mark.parametrize("mass", ["10", None, True, [1.0]])
def test_rejects_non_numeric_mass(mass):
    with pytest.raises(InvalidValueError):
        Particle(mass)


def test_setters_reject_non_numeric_values():
    p = Particle(1.0, pos=(1.0, 2.0))
    with pytest.raises(InvalidValueError):
        p.set_position("1", 2.0)
    with pytest.raises(InvalidValueError):
        p.pos = ("1", "2")
    assert p.pos == Vec2(1.0, 2.0)
