"""Numerical solvers for equations, equation systems, ODEs and global optimisation."""

__version__ = "0.2.0"

__all__ = [
    "errors",
    "finite_differences",
    "single_variable",
    "multi_newton",
    "gauss_newton",
    "levenberg_marquardt",
    "ode",
    "particle_swarm",
    "cross_entropy",
]