import math

import pytest

from eqsolvers.errors import IncorrectInput, MaxIterReached, NotANumber
from eqsolvers.finite_differences import FiniteDifferenceType
from eqsolvers.single_variable import FDNewton, Newton, Secant


def no_roots(x):
    return x * x + 1.0


def no_roots_derivative(x):
    return 2.0 * x


def test_solve_secant():
    solution = Secant(lambda x: x * x - 2.0, tolerance=1e-3).solve(0.0, 2.0)
    assert abs(solution - math.sqrt(2.0)) <= 1e-3
    assert abs(solution - math.sqrt(2.0)) > 1e-12


def test_solve_newton():
    expected = 1.8954942670339809471
    solution = Newton(
        lambda x: math.sin(x) * 2.0 - x,
        lambda x: math.cos(x) * 2.0 - 1.0,
        tolerance=1e-3,
    ).solve(2.0)
    assert abs(solution - expected) <= 1e-3
    assert abs(solution - expected) > 1e-12


def test_newton_with_finite_differences():
    expected = 0.1168941457861853920
    f = lambda x: math.sin(math.exp(x)) / (1.0 + x * x) - math.exp(-x)  # noqa: E731
    solution = FDNewton(f, tolerance=1e-3).solve(0.0)
    assert abs(solution - expected) <= 1e-3
    assert abs(solution - expected) > 1e-12


def test_mutable_state_function():
    trace = []

    def f(x):
        trace.append(x)
        return x * x - 2.0

    solution = Secant(f, tolerance=1e-3).solve(0.0, 2.0)
    assert abs(solution - math.sqrt(2.0)) <= 1e-3
    assert len(trace) > 0
    assert trace[:2] == [0.0, 2.0]


def test_max_iter_reached_newton():
    with pytest.raises(MaxIterReached):
        Newton(no_roots, no_roots_derivative, tolerance=1e-3).solve(3.0)


def test_max_iter_reached_fdnewton():
    with pytest.raises(MaxIterReached):
        FDNewton(no_roots, tolerance=1e-3).solve(3.0)


def test_max_iter_reached_secant():
    with pytest.raises(MaxIterReached):
        Secant(no_roots, tolerance=1e-3).solve(3.0, 4.0)


def test_smaller_iteration_limit():
    with pytest.raises(MaxIterReached):
        Newton(no_roots, no_roots_derivative, iter_max=20).solve(3.0)


def test_newton_diverges_to_nan():
    with pytest.raises(NotANumber):
        Newton(no_roots, no_roots_derivative).solve(1.0)


def test_fdnewton_diverges_to_nan():
    with pytest.raises(NotANumber):
        FDNewton(no_roots).solve(1.0)


def test_secant_diverges_to_nan():
    with pytest.raises(NotANumber):
        Secant(no_roots).solve(0.0, 1.0)


def test_secant_rejects_equal_guesses():
    with pytest.raises(IncorrectInput):
        Secant(lambda x: x * x - 2.0).solve(1.4, 1.4)


@pytest.mark.parametrize(
    "solver",
    [
        lambda f, df: Newton(f, df).solve(0.8),
        lambda f, df: FDNewton(f).solve(0.8),
        lambda f, df: Secant(f).solve(0.7, 0.8),
    ],
)
def test_cos_equals_sin(solver):
    f = lambda x: math.cos(x) - math.sin(x)  # noqa: E731
    df = lambda x: -math.sin(x) - math.cos(x)  # noqa: E731
    assert abs(solver(f, df) - math.pi / 4) <= 1e-6


def test_tight_tolerance_newton():
    solution = Newton(lambda x: x * x - 2.0, lambda x: 2.0 * x, tolerance=1e-12).solve(1.4)
    assert abs(solution - math.sqrt(2.0)) <= 1e-12


def test_tight_tolerance_fdnewton():
    solution = FDNewton(lambda x: x * x - 2.0, tolerance=1e-12).solve(1.4)
    assert abs(solution - math.sqrt(2.0)) <= 1e-12


def test_tight_tolerance_secant():
    solution = Secant(lambda x: x * x - 2.0, tolerance=1e-12).solve(1.4, 1.5)
    assert abs(solution - math.sqrt(2.0)) <= 1e-12


def test_fdnewton_custom_step_length():
    solution = FDNewton(lambda x: math.exp(x) - 2.0, fd_step_length=0.1).solve(0.7)
    assert abs(solution - math.log(2.0)) <= 1e-6


@pytest.mark.parametrize(
    "kind",
    [FiniteDifferenceType.FORWARD, FiniteDifferenceType.BACKWARD, FiniteDifferenceType.CENTRAL],
)
def test_fdnewton_each_difference_kind(kind):
    solution = FDNewton(lambda x: math.exp(x) - 2.0, finite_difference=kind).solve(0.7)
    assert abs(solution - math.log(2.0)) <= 1e-6


def test_default_tolerance_newton():
    solution = Newton(lambda x: x * x - 2.0, lambda x: 2.0 * x).solve(1.4)
    assert abs(solution - math.sqrt(2.0)) <= 1e-6