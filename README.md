# eqsolvers

Numerical methods for solving equations, systems of equations, initial value
problems and global optimisation problems, built on numpy.

| Module | Contents |
| --- | --- |
| `eqsolvers.single_variable` | `Newton`, `FDNewton`, `Secant` |
| `eqsolvers.multi_newton` | `MultiVarNewton`, `MultiVarNewtonFD` for square systems `F(x) = 0` |
| `eqsolvers.gauss_newton` | `GaussNewton`, `GaussNewtonFD` for least squares, `F: R^m -> R^n` |
| `eqsolvers.levenberg_marquardt` | `LevenbergMarquardt`, `LevenbergMarquardtFD` for least squares |
| `eqsolvers.ode` | `ODESolver`, `ODESolverMethod` |
| `eqsolvers.particle_swarm` | `ParticleSwarm` |
| `eqsolvers.cross_entropy` | `CrossEntropy` |
| `eqsolvers.finite_differences` | `central`, `forward`, `backward`, `forward_jacobian`, `FiniteDifferenceType` |
| `eqsolvers.errors` | `SolverError` and its subclasses, `DEFAULT_TOL`, `DEFAULT_ITERMAX` |

Every solver is a dataclass: the function or functions come first, and
settings such as `tolerance` and `iter_max` are keyword fields with defaults.
Call `solve(...)` to run it. The default tolerance is `1e-6` and the default
iteration limit is `50`.

## Errors

A solver that fails raises a subclass of `eqsolvers.errors.SolverError`:

- `MaxIterReached`: the iteration limit was reached before the step fell within tolerance.
- `NotANumber`: a single-variable solver ended on NaN, or `CrossEntropy`'s objective returned NaN.
- `IncorrectInput`: for example equal starting guesses for `Secant`, an `x_end` with no
  whole step after `x0` for `ODESolver`, a non-square Jacobian for `MultiVarNewton`, or
  bounds, guesses and standard deviations of mismatched lengths for the optimisers.
- `BadJacobian`: a Jacobian (or `J^T J`, or the damped matrix) could not be inverted.

## Installation

```
pip install eqsolvers
```

## Single variable

```python
import math
from eqsolvers.single_variable import Newton, FDNewton, Secant
from eqsolvers.finite_differences import FiniteDifferenceType

f = lambda x: math.cos(x) - math.sin(x)
df = lambda x: -math.sin(x) - math.cos(x)

Newton(f, df).solve(0.8)                 # about pi/4
FDNewton(f).solve(0.8)                   # central difference by default
FDNewton(f, finite_difference=FiniteDifferenceType.FORWARD).solve(0.8)
Secant(f, tolerance=1e-12).solve(0.5, 1.0)
```

`FDNewton` also takes `fd_step_length` (default: the square root of machine epsilon).

## Systems of equations

```python
import numpy as np
from eqsolvers.multi_newton import MultiVarNewton, MultiVarNewtonFD

f = lambda v: np.array([v[0] ** 2 - v[1] - 1.0, v[0] * v[1] - 2.0])
j = lambda v: np.array([[2.0 * v[0], -1.0], [v[1], v[0]]])

MultiVarNewton(f, j).solve(np.array([1.0, 1.0]))
MultiVarNewtonFD(f).solve(np.array([1.0, 1.0]))
```

For over-determined systems, such as the point closest to three circles,
use the least-squares solvers. The `FD` variants approximate the Jacobian
with forward differences.

```python
import numpy as np
from eqsolvers.gauss_newton import GaussNewton, GaussNewtonFD
from eqsolvers.levenberg_marquardt import LevenbergMarquardt, LevenbergMarquardtFD

circles = [(3.0, 5.0, 3.0), (1.0, 0.0, 4.0), (6.0, 2.0, 2.0)]

def f(v):
    return np.array([(v[0] - x) ** 2 + (v[1] - y) ** 2 - r * r for x, y, r in circles])

def j(v):
    return np.array([[2.0 * (v[0] - x), 2.0 * (v[1] - y)] for x, y, _ in circles])

guess = np.array([4.5, 2.5])
GaussNewton(f, j).solve(guess)
GaussNewtonFD(f).solve(guess)
LevenbergMarquardt(f, j).solve(guess)
LevenbergMarquardtFD(f).solve(guess)
```

Levenberg-Marquardt starts its damping at `initial_damping` (default `0.01`) and
divides it by `damping_decay` (default `10`) after a step that lowers `||F(x)||`,
multiplying by it otherwise.

## Initial value problems

`y' = t*y` with `y(0) = 0.2`:

```python
import numpy as np
from eqsolvers.ode import ODESolver, ODESolverMethod

ODESolver(lambda t, y: t * y, 0.0, 0.2, 1e-3).solve(2.0)          # Runge-Kutta 4
ODESolver(lambda t, y: t * y, 0.0, 0.2, 1e-3, method=ODESolverMethod.HEUN).solve(2.0)

# A first order system: y'' = t - y written as (y, y')
system = ODESolver(lambda t, v: np.array([v[1], t - v[0]]), 0.0, np.array([1.0, 1.0]), 1e-3)
system.solve(2.0)[0]

# Choose the step size by the number of steps instead
ODESolver(lambda t, y: -y, 0.0, 1.0, 0.1).with_steps(1.0, 1000).solve(1.0)
```

The methods are `EULER_FORWARD`, `HEUN` and `RUNGE_KUTTA_4`. The solver only
steps forward: an `x_end` that leaves no whole step after `x0` raises `IncorrectInput`.

## Global optimisation

```python
import numpy as np
from eqsolvers.particle_swarm import ParticleSwarm
from eqsolvers.cross_entropy import CrossEntropy

def rastrigin(v):
    return 10.0 * len(v) + float(np.sum(v * v - 10.0 * np.cos(2.0 * np.pi * v)))

guess = np.full(4, 80.0)
ParticleSwarm(rastrigin, np.full(4, -100.0), np.full(4, 100.0), rng=1).solve(guess)
CrossEntropy(rastrigin, std_dev=np.full(4, 100.0), rng=1).solve(guess)
```

`ParticleSwarm` takes `inertia_weight`, `cognitive_coefficient`,
`social_coefficient`, `particle_count`, `tolerance` and `iter_max`.
`CrossEntropy` takes `std_dev` (default: ones), `tolerance`, `iter_max`,
`sample_size` (default `100`) and `importance_selection_size` (default `10`).
Both take `rng`, a seed or a `numpy.random.Generator`, so runs can be made
reproducible.

A system `F(x) = b` can be handed to the optimisers as the objective
`lambda x: np.linalg.norm(F(x) - b)`.

## What it does not do

This is a library only: there is no command-line tool. The ODE solver uses
fixed steps only, with no adaptive step size or implicit methods.

## Tests

```
pip install -e ".[test]"
pytest
```