[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mclab"
version = "0.1.0"
description = "Monte Carlo simulation exercises: a portable RANNYU generator, blocking statistics, integration, option pricing and random walks"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "monte-carlo",
    "simulation",
    "random-walk",
    "blocking-method",
    "importance-sampling",
    "black-scholes",
    "buffon",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mclab = "mclab.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mclab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
