"""Finite difference approximations of derivatives."""

from __future__ import annotations

from enum import Enum
from typing import Callable

import numpy as np


class FiniteDifferenceType(Enum):
    """Kind of finite difference used to approximate a derivative."""

    CENTRAL = "central"
    """``(f(x+h) - f(x-h)) / (2h)``, order of accuracy 2."""

    FORWARD = "forward"
    """``(f(x+h) - f(x)) / h``, order of accuracy 1."""

    BACKWARD = "backward"
    """``(f(x) - f(x-h)) / h``, order of accuracy 1."""


def central(f: Callable[[float], float], x: float, h: float) -> float:
    """Approximate ``f'(x)`` with ``(f(x+h) - f(x-h)) / (2h)``."""
    return (f(x + h) - f(x - h)) / (h + h)


def forward(f: Callable[[float], float], x: float, h: float) -> float:
    """Approximate ``f'(x)`` with ``(f(x+h) - f(x)) / h``."""
    return (f(x + h) - f(x)) / h


def backward(f: Callable[[float], float], x: float, h: float) -> float:
    """Approximate ``f'(x)`` with ``(f(x) - f(x-h)) / h``."""
    return (f(x) - f(x - h)) / h


def forward_jacobian(f, x, fx, h: float) -> np.ndarray:
    """Approximate the Jacobian of a vector function ``f`` at ``x``.

    ``fx`` is ``f(x)``, already evaluated. Column ``i`` of the result is the
    forward difference of ``f`` with respect to ``x[i]``.
    """
    x = np.asarray(x, dtype=float)
    fx = np.asarray(fx, dtype=float).reshape(-1)
    jacobian = np.zeros((fx.size, x.size))
    for i in range(x.size):
        stepped = x.copy()
        stepped[i] = stepped[i] + h
        jacobian[:, i] = (np.asarray(f(stepped), dtype=float).reshape(-1) - fx) / h
    return jacobian