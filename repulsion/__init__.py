from .Vec2 import Vec2
from .Particle import Particle, ParticleState
from .interaction import RepellingForce, RepellingPotentialEnergy
from .control import EngineControl
from .engine import SimulationEngine
from .errors import (
    SimulationError,
    InvalidValueError,
    InvalidConfigurationError,
    EmptyWorldError,
    OverlapError,
    EnergyRenormalizationAnomaly,
)
