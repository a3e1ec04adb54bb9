"""Errors raised by the solvers, and the defaults they share."""

DEFAULT_TOL = 1e-6
"""Default tolerance (magnitude of the error) of the iterative methods."""

DEFAULT_ITERMAX = 50
"""Default number of iterations allowed for the iterative methods."""


class SolverError(Exception):
    """Base class of every error raised by a solver."""


class MaxIterReached(SolverError):
    """The number of iterations reached the limit."""

    def __init__(self, message: str = "maximum number of iterations reached") -> None:
        super().__init__(message)


class NotANumber(SolverError):
    """The value evaluated is NaN."""

    def __init__(self, message: str = "the iteration produced NaN") -> None:
        super().__init__(message)


class IncorrectInput(SolverError):
    """The given input is not valid for the solver."""

    def __init__(self, message: str = "incorrect input") -> None:
        super().__init__(message)


class BadJacobian(SolverError):
    """A Jacobian matrix in the iteration was singular or ill-defined."""

    def __init__(self, message: str = "the Jacobian matrix is singular or ill-defined") -> None:
        super().__init__(message)