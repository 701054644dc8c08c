[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nonlinear-voter"
version = "0.1.0"
description = "Nonlinear voter model with absorbing zealots: transition rates, fixation times, quasi-stationary distributions and stochastic simulation"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "voter model",
    "nonlinear voter model",
    "zealots",
    "fixation time",
    "quasi-stationary distribution",
    "gillespie",
    "stochastic simulation",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nonlinear_voter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
