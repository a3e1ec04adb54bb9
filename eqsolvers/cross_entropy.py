"""Cross-entropy global optimiser."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Callable

import numpy as np

from .errors import DEFAULT_ITERMAX, DEFAULT_TOL, IncorrectInput, NotANumber

DEFAULT_SAMPLE_SIZE = 100
"""Default number of samples drawn in each iteration."""

DEFAULT_IMPORTANCE_SELECTION_SIZE = 10
"""Default number of best samples used to update the distribution."""


def _as_vector(value) -> np.ndarray:
    return np.asarray(value, dtype=float).reshape(-1)


@dataclass
class CrossEntropy:
    """Approximate the global minimum of an objective ``f: R^n -> R``.

    Samples are drawn from independent normal distributions, one per
    dimension, centred on the current mean with the current standard
    deviations. The best ``importance_selection_size`` samples give the next
    mean and (Bessel-corrected) standard deviations. The search stops when the
    largest standard deviation is within ``tolerance`` or after ``iter_max``
    iterations, and the current mean is returned. ``std_dev`` defaults to a
    vector of ones. ``rng`` is a seed or a numpy ``Generator``.
    """

    f: Callable[[np.ndarray], float]
    std_dev: Any = None
    tolerance: float = DEFAULT_TOL
    iter_max: int = DEFAULT_ITERMAX
    sample_size: int = DEFAULT_SAMPLE_SIZE
    importance_selection_size: int = DEFAULT_IMPORTANCE_SELECTION_SIZE
    rng: Any = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.std_dev is not None:
            self.std_dev = _as_vector(self.std_dev).copy()
            if np.any(self.std_dev < 0) or not np.all(np.isfinite(self.std_dev)):
                raise IncorrectInput("standard deviations must be finite and non-negative")
        if self.importance_selection_size < 2:
            raise IncorrectInput("the importance selection size must be at least 2")
        if self.importance_selection_size > self.sample_size:
            raise IncorrectInput(
                "the importance selection size must not exceed the sample size"
            )
        self.rng = np.random.default_rng(self.rng)

    def solve(self, x0) -> np.ndarray:
        """Return the final mean vector, starting from the guess ``x0``."""
        mus = _as_vector(x0).copy()
        if self.std_dev is None:
            sigmas = np.ones_like(mus)
        else:
            sigmas = self.std_dev.copy()
            if sigmas.shape != mus.shape:
                raise IncorrectInput(
                    "the standard deviations must have the same length as the guess"
                )

        iterations = 1
        while self._spread(sigmas) > self.tolerance and iterations < self.iter_max:
            samples = self.rng.normal(mus, sigmas, size=(self.sample_size, mus.size))
            costs = np.array([float(self.f(sample.copy())) for sample in samples])
            if np.any(np.isnan(costs)):
                raise NotANumber("the objective function returned NaN")

            order = np.argsort(costs, kind="stable")[: self.importance_selection_size]
            elite = samples[order]
            mus = elite.mean(axis=0)
            sigmas = elite.std(axis=0, ddof=1)
            iterations += 1

        return mus

    @staticmethod
    def _spread(sigmas: np.ndarray) -> float:
        if sigmas.size == 0:
            return 0.0
        largest = float(np.max(np.abs(sigmas)))
        return math.inf if math.isnan(largest) else largest