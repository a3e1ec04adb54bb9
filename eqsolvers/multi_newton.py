"""Newton-Raphson root finders for square systems of equations."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Callable

import numpy as np

from .errors import (
    DEFAULT_ITERMAX,
    DEFAULT_TOL,
    BadJacobian,
    IncorrectInput,
    MaxIterReached,
)
from .finite_differences import forward_jacobian

_DEFAULT_FD_STEP = math.sqrt(sys.float_info.epsilon)


def _as_vector(value) -> np.ndarray:
    return np.asarray(value, dtype=float).reshape(-1)


def _square_inverse(matrix: np.ndarray) -> np.ndarray:
    """Invert a square matrix, raising the solver errors on failure."""
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise IncorrectInput(f"the Jacobian must be square, got shape {matrix.shape}")
    try:
        with np.errstate(all="ignore"):
            return np.linalg.inv(matrix)
    except np.linalg.LinAlgError as exc:
        raise BadJacobian() from exc


def _newton_iterate(f, jacobian_at, x0, tolerance: float, iter_max: int) -> np.ndarray:
    x = _as_vector(x0).copy()
    step_size = math.inf
    iterations = 1
    while step_size > tolerance and iterations <= iter_max:
        j_inv, fx = jacobian_at(x)
        with np.errstate(all="ignore"):
            dv = j_inv @ fx
        x = x - dv
        step_size = float(np.max(np.abs(dv))) if dv.size else 0.0
        if math.isnan(step_size):
            step_size = math.inf
        iterations += 1

    if iterations >= iter_max:
        raise MaxIterReached()
    return x


@dataclass
class MultiVarNewton:
    """Newton-Raphson solver for ``F(x) = 0`` with ``F: R^n -> R^n`` and its Jacobian ``j``."""

    f: Callable[[np.ndarray], object]
    j: Callable[[np.ndarray], object]
    tolerance: float = DEFAULT_TOL
    iter_max: int = DEFAULT_ITERMAX

    def solve(self, x0) -> np.ndarray:
        """Return ``x`` with ``F(x) = 0``, starting from the guess ``x0``."""

        def jacobian_at(x: np.ndarray):
            jacobian = np.asarray(self.j(x.copy()), dtype=float).reshape(-1, x.size)
            j_inv = _square_inverse(jacobian)
            return j_inv, _as_vector(self.f(x.copy()))

        return _newton_iterate(self.f, jacobian_at, x0, self.tolerance, self.iter_max)


@dataclass
class MultiVarNewtonFD:
    """Newton-Raphson solver for ``F(x) = 0`` whose Jacobian is a forward difference."""

    f: Callable[[np.ndarray], object]
    tolerance: float = DEFAULT_TOL
    iter_max: int = DEFAULT_ITERMAX
    fd_step_length: float = _DEFAULT_FD_STEP

    def solve(self, x0) -> np.ndarray:
        """Return ``x`` with ``F(x) = 0``, starting from the guess ``x0``."""

        def jacobian_at(x: np.ndarray):
            fx = _as_vector(self.f(x.copy()))
            with np.errstate(all="ignore"):
                jacobian = forward_jacobian(self.f, x, fx, self.fd_step_length)
            return _square_inverse(jacobian), fx

        return _newton_iterate(self.f, jacobian_at, x0, self.tolerance, self.iter_max)