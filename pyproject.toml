[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eqsolvers"
version = "0.2.0"
description = "Numerical solvers for equations, equation systems, ODEs and global optimisation"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = [
    "equation",
    "solver",
    "mathematics",
    "ode",
    "optimization",
    "newton",
    "gauss-newton",
    "levenberg-marquardt",
    "particle-swarm",
    "cross-entropy",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["eqsolvers"]

[tool.pytest.ini_options]
addopts = "-ra"
