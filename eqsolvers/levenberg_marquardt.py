"""Levenberg-Marquardt least-squares solvers for systems of equations."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Callable

import numpy as np

from .errors import DEFAULT_ITERMAX, DEFAULT_TOL, BadJacobian, MaxIterReached
from .finite_differences import forward_jacobian

DEFAULT_DAMPING_INITIAL_VALUE = 0.01
"""Default initial damping factor ``mu_0``."""

DEFAULT_DAMPING_DECAY_FACTOR = 10.0
"""Default damping decay factor ``beta``."""

_DEFAULT_FD_STEP = math.sqrt(sys.float_info.epsilon)


def _as_vector(value) -> np.ndarray:
    return np.asarray(value, dtype=float).reshape(-1)


def _norm(vector: np.ndarray) -> float:
    with np.errstate(all="ignore"):
        return float(np.linalg.norm(vector))


def _damped_step(jacobian: np.ndarray, fx: np.ndarray, damping: float) -> np.ndarray:
    """Return ``-(J^T J + damping I)^-1 J^T F(x)``."""
    jt = jacobian.T
    identity = np.eye(jacobian.shape[1])
    try:
        with np.errstate(all="ignore"):
            inverse = np.linalg.inv(jt @ jacobian + identity * damping)
    except np.linalg.LinAlgError as exc:
        raise BadJacobian() from exc
    with np.errstate(all="ignore"):
        return inverse @ -jt @ fx


def _iterate(
    f,
    jacobian_at,
    x0,
    tolerance: float,
    iter_max: int,
    initial_damping: float,
    damping_decay: float,
) -> np.ndarray:
    x = _as_vector(x0).copy()
    step_size = math.inf
    iterations = 1
    damping = initial_damping
    fx = _as_vector(f(x.copy()))

    while step_size > tolerance and iterations <= iter_max:
        jacobian = jacobian_at(x, fx)
        dv = _damped_step(jacobian, fx, damping)
        x = x + dv
        fx_next = _as_vector(f(x.copy()))

        if _norm(fx_next) < _norm(fx):
            damping /= damping_decay
        else:
            damping *= damping_decay

        fx = fx_next
        step_size = float(np.max(np.abs(dv))) if dv.size else 0.0
        if math.isnan(step_size):
            step_size = math.inf
        iterations += 1

    if iterations >= iter_max:
        raise MaxIterReached()
    return x


@dataclass
class LevenbergMarquardt:
    """Minimise ``||F(x)||`` for ``F: R^m -> R^n`` given ``F`` and its ``n x m`` Jacobian ``j``.

    The damping starts at ``initial_damping`` and is divided by
    ``damping_decay`` after a step that lowers ``||F||``, multiplied otherwise.
    """

    f: Callable[[np.ndarray], object]
    j: Callable[[np.ndarray], object]
    tolerance: float = DEFAULT_TOL
    iter_max: int = DEFAULT_ITERMAX
    initial_damping: float = DEFAULT_DAMPING_INITIAL_VALUE
    damping_decay: float = DEFAULT_DAMPING_DECAY_FACTOR

    def solve(self, x0) -> np.ndarray:
        """Return the ``x`` minimising ``||F(x)||``, starting from the guess ``x0``."""

        def jacobian_at(x: np.ndarray, fx: np.ndarray) -> np.ndarray:
            return np.asarray(self.j(x.copy()), dtype=float).reshape(-1, x.size)

        return _iterate(
            self.f,
            jacobian_at,
            x0,
            self.tolerance,
            self.iter_max,
            self.initial_damping,
            self.damping_decay,
        )


@dataclass
class LevenbergMarquardtFD:
    """Levenberg-Marquardt least-squares solver whose Jacobian is a forward difference."""

    f: Callable[[np.ndarray], object]
    tolerance: float = DEFAULT_TOL
    iter_max: int = DEFAULT_ITERMAX
    initial_damping: float = DEFAULT_DAMPING_INITIAL_VALUE
    damping_decay: float = DEFAULT_DAMPING_DECAY_FACTOR
    fd_step_length: float = _DEFAULT_FD_STEP

    def solve(self, x0) -> np.ndarray:
        """Return the ``x`` minimising ``||F(x)||``, starting from the guess ``x0``."""

        def jacobian_at(x: np.ndarray, fx: np.ndarray) -> np.ndarray:
            with np.errstate(all="ignore"):
                return forward_jacobian(self.f, x, fx, self.fd_step_length)

        return _iterate(
            self.f,
            jacobian_at,
            x0,
            self.tolerance,
            self.iter_max,
            self.initial_damping,
            self.damping_decay,
        )