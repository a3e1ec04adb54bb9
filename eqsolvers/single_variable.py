"""Root finders for equations of a single variable."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Callable

import numpy as np

from .errors import (
    DEFAULT_ITERMAX,
    DEFAULT_TOL,
    IncorrectInput,
    MaxIterReached,
    NotANumber,
)
from .finite_differences import FiniteDifferenceType, backward, central, forward

_FORMULAS = {
    FiniteDifferenceType.CENTRAL: central,
    FiniteDifferenceType.FORWARD: forward,
    FiniteDifferenceType.BACKWARD: backward,
}

_DEFAULT_FD_STEP = math.sqrt(sys.float_info.epsilon)


def _ratio(numerator: float, denominator: float) -> float:
    """Divide with IEEE semantics: zero denominators give inf or NaN."""
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))


def _finish(x: float, iterations: int, iter_max: int) -> float:
    if iterations >= iter_max:
        raise MaxIterReached()
    if math.isnan(x):
        raise NotANumber()
    return x


@dataclass
class Newton:
    """Newton-Raphson root finder for ``f(x) = 0`` given ``f`` and its derivative ``df``."""

    f: Callable[[float], float]
    df: Callable[[float], float]
    tolerance: float = DEFAULT_TOL
    iter_max: int = DEFAULT_ITERMAX

    def solve(self, x0: float) -> float:
        """Return a root of ``f`` starting from the guess ``x0``."""
        x = float(x0)
        dx = sys.float_info.max
        iterations = 1
        while abs(dx) > self.tolerance and iterations <= self.iter_max:
            dx = _ratio(self.f(x), self.df(x))
            x -= dx
            iterations += 1
        return _finish(x, iterations, self.iter_max)


@dataclass
class FDNewton:
    """Newton-Raphson root finder whose derivative is a finite difference."""

    f: Callable[[float], float]
    tolerance: float = DEFAULT_TOL
    iter_max: int = DEFAULT_ITERMAX
    fd_step_length: float = _DEFAULT_FD_STEP
    finite_difference: FiniteDifferenceType = FiniteDifferenceType.CENTRAL

    def solve(self, x0: float) -> float:
        """Return a root of ``f`` starting from the guess ``x0``."""
        derivative = _FORMULAS[FiniteDifferenceType(self.finite_difference)]
        x = float(x0)
        dx = sys.float_info.max
        iterations = 1
        while abs(dx) > self.tolerance and iterations <= self.iter_max:
            dx = _ratio(self.f(x), derivative(self.f, x, self.fd_step_length))
            x -= dx
            iterations += 1
        return _finish(x, iterations, self.iter_max)


@dataclass
class Secant:
    """Secant-method root finder for ``f(x) = 0``."""

    f: Callable[[float], float]
    tolerance: float = DEFAULT_TOL
    iter_max: int = DEFAULT_ITERMAX

    def solve(self, x0: float, x1: float) -> float:
        """Return a root of ``f`` starting from the two distinct guesses ``x0`` and ``x1``."""
        x0, x1 = float(x0), float(x1)
        if x0 == x1:
            raise IncorrectInput("the two starting guesses must differ")

        dx = sys.float_info.max
        iterations = 1
        f0, f1 = self.f(x0), self.f(x1)
        while abs(dx) > self.tolerance and iterations <= self.iter_max:
            dx = _ratio(f1 * (x1 - x0), f1 - f0)
            x0, x1 = x1, x1 - dx
            f0, f1 = f1, self.f(x1)
            iterations += 1
        return _finish(x1, iterations, self.iter_max)