import pytest

from repulsion import Particle, RepellingForce, RepellingPotentialEnergy, SimulationEngine


def make_engine(particles, force_constant=1000.0, world=(100.0, 100.0), time_step=0.01, **kwargs):
    return SimulationEngine(
        particles,
        RepellingForce(force_constant),
        RepellingPotentialEnergy(force_constant),
        world[0],
        world[1],
        time_step,
        **kwargs
    )


@pytest.fixture
def pair():
    return [
        Particle(10.0, pos=(10.0, 10.0)),
        Particle(20.0, pos=(14.0, 10.0)),
    ]


@pytest.fixture
def trio():
    return [
        Particle(10.0, pos=(20.0, 20.0), vel=(5.0, -3.0)),
        Particle(20.0, pos=(40.0, 25.0), vel=(-4.0, 2.0)),
        Particle(15.0, pos=(30.0, 40.0), vel=(1.0, 6.0)),
    ]
