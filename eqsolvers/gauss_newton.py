"""Gauss-Newton least-squares solvers for systems of equations."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Callable

import numpy as np

from .errors import DEFAULT_ITERMAX, DEFAULT_TOL, BadJacobian, MaxIterReached
from .finite_differences import forward_jacobian

_DEFAULT_FD_STEP = math.sqrt(sys.float_info.epsilon)


def _as_vector(value) -> np.ndarray:
    return np.asarray(value, dtype=float).reshape(-1)


def _gauss_newton_step(jacobian: np.ndarray, fx: np.ndarray) -> np.ndarray:
    """Return ``(J^T J)^-1 J^T F(x)``, raising ``BadJacobian`` when ``J^T J`` is singular."""
    jt = jacobian.T
    try:
        with np.errstate(all="ignore"):
            normal_inv = np.linalg.inv(jt @ jacobian)
    except np.linalg.LinAlgError as exc:
        raise BadJacobian() from exc
    with np.errstate(all="ignore"):
        return normal_inv @ jt @ fx


def _iterate(step_at, x0, tolerance: float, iter_max: int) -> np.ndarray:
    x = _as_vector(x0).copy()
    step_size = math.inf
    iterations = 1
    while step_size > tolerance and iterations <= iter_max:
        dv = step_at(x)
        x = x - dv
        step_size = float(np.max(np.abs(dv))) if dv.size else 0.0
        if math.isnan(step_size):
            step_size = math.inf
        iterations += 1

    if iterations >= iter_max:
        raise MaxIterReached()
    return x


@dataclass
class GaussNewton:
    """Minimise ``||F(x)||`` for ``F: R^m -> R^n`` given ``F`` and its ``n x m`` Jacobian ``j``."""

    f: Callable[[np.ndarray], object]
    j: Callable[[np.ndarray], object]
    tolerance: float = DEFAULT_TOL
    iter_max: int = DEFAULT_ITERMAX

    def solve(self, x0) -> np.ndarray:
        """Return the ``x`` minimising ``||F(x)||`` in a least-squares sense."""

        def step_at(x: np.ndarray) -> np.ndarray:
            jacobian = np.asarray(self.j(x.copy()), dtype=float).reshape(-1, x.size)
            jt = jacobian.T
            try:
                with np.errstate(all="ignore"):
                    normal_inv = np.linalg.inv(jt @ jacobian)
            except np.linalg.LinAlgError as exc:
                raise BadJacobian() from exc
            fx = _as_vector(self.f(x.copy()))
            with np.errstate(all="ignore"):
                return normal_inv @ jt @ fx

        return _iterate(step_at, x0, self.tolerance, self.iter_max)


@dataclass
class GaussNewtonFD:
    """Gauss-Newton least-squares solver whose Jacobian is a forward difference."""

    f: Callable[[np.ndarray], object]
    tolerance: float = DEFAULT_TOL
    iter_max: int = DEFAULT_ITERMAX
    fd_step_length: float = _DEFAULT_FD_STEP

    def solve(self, x0) -> np.ndarray:
        """Return the ``x`` minimising ``||F(x)||`` in a least-squares sense."""

        def step_at(x: np.ndarray) -> np.ndarray:
            fx = _as_vector(self.f(x.copy()))
            with np.errstate(all="ignore"):
                jacobian = forward_jacobian(self.f, x, fx, self.fd_step_length)
            return _gauss_newton_step(jacobian, fx)

        return _iterate(step_at, x0, self.tolerance, self.iter_max)