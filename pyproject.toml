[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aocsolver"
version = "0.1.0"
description = "Solvers for the first eight days of a yearly programming puzzle calendar"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "solver", "command-line"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aocsolver-day01 = "aocsolver.day01:main"
aocsolver-day02 = "aocsolver.day02:main"
aocsolver-day03 = "aocsolver.day03:main"
aocsolver-day04 = "aocsolver.day04:main"
aocsolver-day05 = "aocsolver.day05:main"
aocsolver-day06 = "aocsolver.day06:main"
aocsolver-day07 = "aocsolver.day07:main"
aocsolver-day08 = "aocsolver.day08:main"

[tool.hatch.build.targets.wheel]
packages = ["aocsolver"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
