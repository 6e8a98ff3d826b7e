[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adventkit"
version = "0.1.0"
description = "Solvers for a collection of grid, graph and number puzzles that read their puzzle input as text."
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "solver", "grid", "graph"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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

[tool.hatch.build.targets.wheel]
packages = ["adventkit"]

[tool.hatch.build.targets.sdist]
include = ["adventkit", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
