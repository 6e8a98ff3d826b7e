import pytest

from adventkit.garden_walk import parse_garden, reachable_plots

EXAMPLE = """...........
.....###.#.
.###.##..#.
..#.#...#..
....#.#....
.##..S####.
.##..#...#.
.......##..
.##.#.####.
.##..##.##.
...........
"""


def test_example_six_steps():
    assert reachable_plots(EXAMPLE, 6) == 16


def test_zero_steps_counts_only_start():
    assert reachable_plots(EXAMPLE, 0) == 1


def test_parse_finds_start():
    garden = parse_garden(EXAMPLE)
    assert garden.start == (5, 5)
    assert garden.start in garden.open_cells
    assert (1, 5) not in garden.open_cells


def test_distances_respect_limit_and_walls():
    garden = parse_garden(EXAMPLE)
    distances = garden.distances(6)
    assert distances[garden.start] == 0
    assert all(0 <= d <= 6 for d in distances.values())
    assert set(distances) <= garden.open_cells


def test_distances_are_shortest_paths():
    garden = parse_garden(EXAMPLE)
    distances = garden.distances(20)
    for (row, col), distance in distances.items():
        if distance == 0:
            continue
        neighbours = [(row + 1, col), (row - 1, col), (row, col + 1), (row, col - 1)]
        assert min(distances.get(n, distance + 10) for n in neighbours) == distance - 1


def test_larger_limit_reaches_at_least_as_far():
    garden = parse_garden(EXAMPLE)
    small = garden.distances(4)
    large = garden.distances(8)
    assert set(small) <= set(large)
    assert all(large[cell] == d for cell, d in small.items())


def test_counts_match_parity_of_distances():
    garden = parse_garden(EXAMPLE)
    distances = garden.distances(7)
    odd = sum(1 for d in distances.values() if d % 2 == 1)
    assert reachable_plots(EXAMPLE, 7) == odd


def test_walls_block_the_walk():
    text = "S#.\n"
    garden = parse_garden(text)
    assert set(garden.distances(10)) == {garden.start}


def test_missing_start_raises():
    with pytest.raises(ValueError):
        parse_garden("...\n.#.\n")


def test_unknown_character_raises():
    with pytest.raises(ValueError):
        parse_garden("S.x\n")


def test_negative_steps_raise():
    with pytest.raises(ValueError):
        parse_garden(EXAMPLE).distances(-1)