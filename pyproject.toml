[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "parsim"
version = "0.1.0"
description = "Two-dimensional particle simulation with a cell grid, centre-of-mass approximation and collision detection"
requires-python = ">=3.10"
dependencies = []
keywords = ["n-body", "particles", "gravity", "simulation", "physics"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
parsim = "parsim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["parsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
