"""Particle swarm global optimiser."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable

import numpy as np

from .errors import DEFAULT_ITERMAX, DEFAULT_TOL, IncorrectInput

DEFAULT_INERTIA_WEIGHT = 0.5
"""Default inertia weight of the particles' velocities."""

DEFAULT_COGNITIVE_COEFFICIENT = 1.0
"""Default pull of a particle towards its own best position."""

DEFAULT_SOCIAL_COEFFICIENT = 1.0
"""Default pull of a particle towards the swarm's best position."""

DEFAULT_PARTICLE_COUNT = 100
"""Default number of particles in the swarm."""

STALL_ITERATIONS = 50
"""Number of previous global bests that must lie within tolerance to stop early."""


def _as_vector(value) -> np.ndarray:
    return np.asarray(value, dtype=float).reshape(-1)


@dataclass
class _Particle:
    position: np.ndarray
    velocity: np.ndarray
    best_position: np.ndarray
    best_cost: float


@dataclass
class ParticleSwarm:
    """Approximate the global minimum of an objective ``f: R^n -> R``.

    The swarm is scattered uniformly over the hyperrectangle given by
    ``lower_bounds`` and ``upper_bounds``. The search stops after ``iter_max``
    iterations, or earlier when the last recorded improvements of the global
    best all lie within ``tolerance`` of it. ``rng`` is a seed or a numpy
    ``Generator``.
    """

    f: Callable[[np.ndarray], float]
    lower_bounds: Any
    upper_bounds: Any
    inertia_weight: float = DEFAULT_INERTIA_WEIGHT
    cognitive_coefficient: float = DEFAULT_COGNITIVE_COEFFICIENT
    social_coefficient: float = DEFAULT_SOCIAL_COEFFICIENT
    particle_count: int = DEFAULT_PARTICLE_COUNT
    tolerance: float = DEFAULT_TOL
    iter_max: int = DEFAULT_ITERMAX
    rng: Any = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self.lower_bounds = _as_vector(self.lower_bounds)
        self.upper_bounds = _as_vector(self.upper_bounds)
        if self.lower_bounds.shape != self.upper_bounds.shape:
            raise IncorrectInput("lower and upper bounds must have the same length")
        if np.any(self.lower_bounds > self.upper_bounds):
            raise IncorrectInput("every lower bound must not exceed its upper bound")
        self.rng = np.random.default_rng(self.rng)

    def _cost(self, position: np.ndarray) -> float:
        return float(self.f(position.copy()))

    def solve(self, x0) -> np.ndarray:
        """Return the best position found, starting from the guess ``x0``."""
        x0 = _as_vector(x0)
        if x0.shape != self.lower_bounds.shape:
            raise IncorrectInput("the guess must have the same length as the bounds")

        rng = self.rng
        span = np.abs(self.upper_bounds - self.lower_bounds)

        global_position = x0.copy()
        global_cost = self._cost(global_position)
        previous_best = deque([math.inf] * STALL_ITERATIONS, maxlen=STALL_ITERATIONS)

        particles = []
        for _ in range(self.particle_count):
            position = rng.uniform(self.lower_bounds, self.upper_bounds)
            velocity = rng.uniform(-span, span)
            cost = self._cost(position)
            if cost < global_cost:
                previous_best.append(global_cost)
                global_position = position.copy()
                global_cost = cost
            particles.append(_Particle(position, velocity, position.copy(), cost))

        for _ in range(self.iter_max):
            if self._stalled(global_cost, previous_best):
                break

            for particle in particles:
                rp = rng.uniform(0.0, 1.0, size=x0.size)
                rg = rng.uniform(0.0, 1.0, size=x0.size)
                particle.velocity = (
                    self.inertia_weight * particle.velocity
                    + self.cognitive_coefficient * rp * (particle.best_position - particle.position)
                    + self.social_coefficient * rg * (global_position - particle.position)
                )
                particle.position = particle.position + particle.velocity

                cost = self._cost(particle.position)
                if cost < particle.best_cost:
                    particle.best_position = particle.position.copy()
                    particle.best_cost = cost
                    if cost < global_cost:
                        previous_best.append(global_cost)
                        global_position = particle.position.copy()
                        global_cost = cost

        return global_position

    def _stalled(self, global_best: float, previous: deque) -> bool:
        return all(abs(value - global_best) < self.tolerance for value in previous)