"""Explicit solvers for initial value problems of ordinary differential equations."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable

import numpy as np

from .errors import IncorrectInput


class ODESolverMethod(Enum):
    """Explicit stepping method used by :class:`ODESolver`."""

    EULER_FORWARD = "euler_forward"
    """Explicit Euler method, order of accuracy 1."""

    HEUN = "heun"
    """Heun's method (Runge-Kutta 2), order of accuracy 2."""

    RUNGE_KUTTA_4 = "runge_kutta_4"
    """Classical Runge-Kutta 4, order of accuracy 4."""


def _as_state(value):
    """Keep scalars as floats and turn anything else into a float array."""
    if np.ndim(value) == 0:
        return float(value)
    return np.asarray(value, dtype=float)


def _step_count(span: float) -> int:
    """Truncate a non-negative finite step count; anything else counts as zero steps."""
    if not math.isfinite(span) or span <= -1.0:
        return 0
    return int(span)


@dataclass
class ODESolver:
    """Solver for ``y' = f(x, y)`` with ``y(x0) = y0`` and fixed step size ``h``.

    ``y`` is a float for a single equation or a vector for a first order
    system. The default method is Runge-Kutta 4.
    """

    f: Callable[[float, object], object]
    x0: float
    y0: object
    h: float
    method: ODESolverMethod = ODESolverMethod.RUNGE_KUTTA_4

    def with_steps(self, x_end: float, steps: int) -> "ODESolver":
        """Set the step size so that ``steps`` steps span ``x0`` to ``x_end``."""
        self.h = (x_end - self.x0) / steps
        return self

    def solve(self, x_end: float):
        """Return the approximation of ``y`` at ``x_end``.

        Raises ``IncorrectInput`` when no step fits between ``x0`` and ``x_end``.
        """
        steps = _step_count((x_end - self.x0) / self.h)
        if steps == 0:
            raise IncorrectInput("x_end must lie at least one step after x0")

        step = self._stepper()
        x = float(self.x0)
        y = _as_state(self.y0)
        for _ in range(1, steps):
            y = step(x, y)
            x += self.h
        return y

    def _rate(self, x: float, y):
        return _as_state(self.f(x, y))

    def _stepper(self):
        method = ODESolverMethod(self.method)
        if method is ODESolverMethod.EULER_FORWARD:
            return self._euler_step
        if method is ODESolverMethod.HEUN:
            return self._heun_step
        return self._rk4_step

    def _euler_step(self, x: float, y):
        return y + self._rate(x, y) * self.h

    def _heun_step(self, x: float, y):
        half_h = self.h / 2.0
        y1 = y + self._rate(x, y) * self.h
        return y + (y1 + self._rate(x + self.h, y1)) * half_h

    def _rk4_step(self, x: float, y):
        h = self.h
        half_h = h / 2.0
        k1 = self._rate(x, y)
        k2 = self._rate(x + half_h, y + k1 * half_h)
        k3 = self._rate(x + half_h, y + k2 * half_h)
        k4 = self._rate(x + h, y + k3 * h)
        return y + (k1 + k2 + k2 + k3 + k3 + k4) * (h / 6.0)