import logging
import math
import threading

import numpy as np

from . import constants
from .Vec2 import Vec2
from .control import EngineControl
from .errors import (
    EmptyWorldError,
    EnergyRenormalizationAnomaly,
    InvalidConfigurationError,
    OverlapError,
    check_positive,
)

logger = logging.getLogger(__name__)


class SimulationEngine:
    def __init__(self, particles, force, potential_energy, world_width, world_height,
                 time_step=constants.TIME_STEP, tick_interval=constants.TICK_INTERVAL, *,
                 renormalize_energy=True, control=None, start_paused=True):
        """
        :param particles: iterable of Particle; the engine works on private copies.
        :param force: callable (a, b) -> repelling force magnitude.
        :param potential_energy: callable (a, b) -> pair potential energy.
        :param world_width: extent of the world along x, walls at 0 and world_width.
        :param world_height: extent of the world along y, walls at 0 and world_height.
        :param time_step: simulated time advanced by one step.
        :param tick_interval: wall-clock seconds the run loop sleeps between steps.
        :param renormalize_energy: rescale velocities after every step to hold total energy.
        :param control: shared EngineControl; a new one is created when omitted.
        :param start_paused: initial pause state of a newly created control.
        """
        if not callable(force):
            raise InvalidConfigurationError("The particle pair force is not callable.")
        if not callable(potential_energy):
            raise InvalidConfigurationError("The particle pair potential energy is not callable.")
        self._force = force
        self._potential_energy = potential_energy

        self._particles = [p.copy() for p in particles]
        if not self._particles:
            raise EmptyWorldError("No particles given.")
        self._check_particles_do_not_overlap()

        self.world_width = check_positive(world_width, "world width")
        self.world_height = check_positive(world_height, "world height")
        self.time_step = check_positive(time_step, "time step")
        self.tick_interval = check_positive(tick_interval, "tick interval")
        self.renormalize_energy = bool(renormalize_energy)

        self.control = control if control is not None else EngineControl(paused=start_paused)

        # per-particle net force, indexed like self._particles; scratch for one step only
        self._forces = np.zeros((len(self._particles), 2), dtype=np.float64)
        self._lock = threading.RLock()
        self._running = False
        self.steps_taken = 0
        self.anomaly_count = 0

        self._reference_total_energy = self.compute_total_energy()

    def _check_particles_do_not_overlap(self):
        n = len(self._particles)
        for i in range(n):
            p1 = self._particles[i]
            for j in range(i + 1, n):
                p2 = self._particles[j]
                if p1.x == p2.x and p1.y == p2.y:
                    raise OverlapError(f"Particles {i} and {j} occupy the same spot ({p1.x}, {p1.y}).")

    # --- Queries ---

    @property
    def reference_total_energy(self):
        return self._reference_total_energy

    @property
    def particle_count(self):
        return len(self._particles)

    @property
    def paused(self):
        return self.control.paused

    @property
    def running(self):
        return self._running

    def compute_total_kinetic_energy(self):
        with self._lock:
            return sum(p.kinetic_energy() for p in self._particles)

    def compute_total_potential_energy(self):
        with self._lock:
            energy = 0.0
            n = len(self._particles)
            for i in range(n):
                p1 = self._particles[i]
                for j in range(i + 1, n):
                    p2 = self._particles[j]
                    if p1.distance_to(p2) == 0.0:
                        logger.debug(f"Particles {i} and {j} coincide; pair left out of the potential energy.")
                        continue
                    energy += self._potential_energy(p1, p2)
            return energy

    def compute_total_energy(self):
        with self._lock:
            return self.compute_total_kinetic_energy() + self.compute_total_potential_energy()

    def energy_drift(self):
        return self.compute_total_energy() - self._reference_total_energy

    def snapshot(self):
        with self._lock:
            return tuple(p.state() for p in self._particles)

    # --- Control ---

    def toggle_pause(self):
        return self.control.toggle_pause()

    def request_exit(self):
        self.control.request_exit()

    # --- Stepping ---

    def step(self):
        """
        Advances the world by one time step using symplectic Euler
        (velocities first, then positions from the new velocities),
        followed by wall reflection and energy renormalization.
        """
        with self._lock:
            self._compute_forces()
            self._update_velocities()
            self._move_particles()
            for p in self._particles:
                self._resolve_wall_collision(p)
            if self.renormalize_energy:
                self._renormalize_velocities()
            self.steps_taken += 1
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(f"Step {self.steps_taken}: energy drift {self.energy_drift():.6g}")

    def _compute_forces(self):
        forces = self._forces
        forces.fill(0.0)
        coincident = 0
        for i, p in enumerate(self._particles):
            for j, other in enumerate(self._particles):
                if i == j:
                    continue
                # a coincident pair has no defined direction; it exerts nothing this step
                if p.distance_to(other) == 0.0:
                    if i < j:
                        coincident += 1
                    continue
                # direction points from `other` toward `p`
                angle = math.atan2(p.y - other.y, p.x - other.x)
                f = Vec2.from_polar(self._force(p, other), angle)
                forces[i, 0] += f.x
                forces[i, 1] += f.y

        if coincident:
            self.anomaly_count += 1
            logger.warning(f"Step {self.steps_taken + 1}: {coincident} coincident particle pair(s) skipped in force accumulation.")

    def _update_velocities(self):
        dt = self.time_step
        for i, p in enumerate(self._particles):
            acceleration = Vec2(self._forces[i, 0], self._forces[i, 1]) * (1.0 / p.mass)
            p.vel += acceleration * dt

    def _move_particles(self):
        dt = self.time_step
        for p in self._particles:
            p.pos += p.vel * dt

    def _resolve_wall_collision(self, particle):
        r = particle.radius
        x, y = particle.pos
        vx, vy = particle.vel

        if x - r <= 0.0:
            x = r
            vx = -vx
        elif x + r >= self.world_width:
            x = self.world_width - r
            vx = -vx

        if y - r <= 0.0:
            y = r
            vy = -vy
        elif y + r >= self.world_height:
            y = self.world_height - r
            vy = -vy

        particle.set_position(x, y)
        particle.set_velocity(vx, vy)

    def _normalization_factor(self):
        kinetic = self.compute_total_kinetic_energy()
        current = kinetic + self.compute_total_potential_energy()
        delta = self._reference_total_energy - current

        if kinetic == 0.0:
            if delta == 0.0:
                return 1.0
            raise EnergyRenormalizationAnomaly(
                f"Cannot compute normalization factor: no kinetic energy to absorb delta {delta}.")

        radicand = 1.0 + delta / kinetic
        if not math.isfinite(radicand) or radicand < 0.0:
            raise EnergyRenormalizationAnomaly(
                f"Cannot compute normalization factor: radicand = {radicand}.", radicand)
        return math.sqrt(radicand)

    def _renormalize_velocities(self):
        try:
            factor = self._normalization_factor()
        except EnergyRenormalizationAnomaly as e:
            self.anomaly_count += 1
            logger.warning(f"Step {self.steps_taken + 1}: {e} Skipping energy correction.")
            return
        if factor == 1.0:
            return
        for p in self._particles:
            p.vel = p.vel * factor

    # --- Run loop ---

    def run(self, request_redraw=None):
        """
        Steps the world every `tick_interval` seconds until exit is requested.
        `request_redraw` is called with a snapshot after each step; it must not block,
        and an exception it raises is logged without ending the loop.
        """
        self._running = True
        logger.info(f"Simulation loop started with {self.particle_count} particles.")
        try:
            while not self.control.exit_requested:
                if not self.control.paused:
                    self.step()
                    if request_redraw is not None:
                        try:
                            request_redraw(self.snapshot())
                        except Exception:
                            logger.exception(f"Redraw request failed after step {self.steps_taken}.")
                self.control.wait(self.tick_interval)
        finally:
            self._running = False
            logger.info(f"Simulation loop stopped after {self.steps_taken} steps.")

    def start(self, request_redraw=None):
        thread = threading.Thread(target=self.run, args=(request_redraw,),
                                  name="simulation-engine", daemon=True)
        thread.start()
        return thread

    def __repr__(self):
        return (f"<{self.__class__.__name__} particles={self.particle_count} "
                f"world=({self.world_width}, {self.world_height}) dt={self.time_step}>")
