import numpy as np
import pytest

from eqsolvers.errors import BadJacobian, MaxIterReached
from eqsolvers.levenberg_marquardt import LevenbergMarquardt, LevenbergMarquardtFD

C0 = (3.0, 5.0, 3.0)
C1 = (1.0, 0.0, 4.0)
C2 = (6.0, 2.0, 2.0)
SOLUTION = np.array([4.217265312839526, 2.317879970005811])


def circles(v):
    return np.array(
        [
            (v[0] - c[0]) ** 2 + (v[1] - c[1]) ** 2 - c[2] * c[2]
            for c in (C0, C1, C2)
        ]
    )


def circles_jacobian(v):
    return np.array([[2.0 * (v[0] - c[0]), 2.0 * (v[1] - c[1])] for c in (C0, C1, C2)])


def test_levenberg_marquardt_closest_point():
    solution = LevenbergMarquardt(circles, circles_jacobian, tolerance=1e-3).solve(
        np.array([4.5, 2.5])
    )
    error = np.linalg.norm(SOLUTION - solution)
    assert error <= 1e-3
    assert error > 1e-12


def test_levenberg_marquardt_fd_closest_point():
    solution = LevenbergMarquardtFD(circles, tolerance=1e-3).solve(np.array([4.5, 2.5]))
    error = np.linalg.norm(SOLUTION - solution)
    assert error <= 1e-3
    assert error > 1e-12


def test_accepts_list_guess_and_list_outputs():
    f = lambda v: list(circles(v))
    j = lambda v: circles_jacobian(v).tolist()
    solution = LevenbergMarquardt(f, j, tolerance=1e-3).solve([4.5, 2.5])
    assert solution.shape == (2,)
    assert np.linalg.norm(SOLUTION - solution) <= 1e-3


def test_default_tolerance_matches_reference():
    solution = LevenbergMarquardt(circles, circles_jacobian).solve([4.5, 2.5])
    assert np.linalg.norm(SOLUTION - solution) <= 1e-5


def test_other_damping_parameters_still_converge():
    solver = LevenbergMarquardtFD(
        circles, tolerance=1e-6, initial_damping=1.0, damping_decay=2.0
    )
    solution = solver.solve([4.5, 2.5])
    assert np.linalg.norm(SOLUTION - solution) <= 1e-4


def test_input_not_modified():
    guess = np.array([4.5, 2.5])
    LevenbergMarquardt(circles, circles_jacobian, tolerance=1e-3).solve(guess)
    assert guess.tolist() == [4.5, 2.5]


def test_singular_system_raises_bad_jacobian():
    f = lambda v: np.array([1.0, 2.0])
    j = lambda v: np.zeros((2, 2))
    with pytest.raises(BadJacobian):
        LevenbergMarquardt(f, j, initial_damping=0.0).solve([1.0, 1.0])


def test_constant_function_fd_raises_bad_jacobian_without_damping():
    f = lambda v: np.array([3.0, 4.0, 5.0])
    with pytest.raises(BadJacobian):
        LevenbergMarquardtFD(f, initial_damping=0.0).solve([0.0, 0.0])


@pytest.mark.parametrize("iter_max", [1, 2])
def test_too_few_iterations_raise(iter_max):
    with pytest.raises(MaxIterReached):
        LevenbergMarquardt(circles, circles_jacobian, iter_max=iter_max).solve([4.5, 2.5])
    with pytest.raises(MaxIterReached):
        LevenbergMarquardtFD(circles, iter_max=iter_max).solve([4.5, 2.5])