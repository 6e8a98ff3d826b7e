"""Solvers for grid, graph and number puzzles that read their input as text."""

__version__ = "0.1.0"

__all__ = [
    "arcade",
    "boat_race",
    "bricks",
    "camel_cards",
    "cubes",
    "fences",
    "garden_walk",
    "gears",
    "hail",
    "hike",
    "navigation",
    "oasis",
    "overload",
    "scratchcards",
    "seeds",
    "stones",
    "trails",
]