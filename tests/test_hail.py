import pytest

from adventkit.hail import Hailstone, count_crossings, crossing_count, parse_hailstones

EXAMPLE = """19, 13, 30 @ -2,  1, -2
18, 19, 22 @ -1, -1, -2
20, 25, 34 @ -2, -2, -4
12, 31, 28 @ -1, -2, -1
20, 19, 15 @  1, -5, -3
"""


def test_example_crossings():
    assert count_crossings(EXAMPLE, 7, 27) == 2


def test_parse_first_stone():
    stones = parse_hailstones(EXAMPLE)
    assert len(stones) == len(EXAMPLE.splitlines())
    assert stones[0] == Hailstone(19, 13, -2, 1)
    assert stones[4] == Hailstone(20, 19, 1, -5)


def test_parse_stops_at_blank_line():
    stones = parse_hailstones("19, 13, 30 @ -2, 1, -2\n\n18, 19, 22 @ -1, -1, -2\n")
    assert stones == [Hailstone(19, 13, -2, 1)]


def test_parse_rejects_short_line():
    with pytest.raises(ValueError):
        parse_hailstones("19, 13 @ -2\n")


def test_slope_and_offset_describe_path():
    stone = Hailstone(19, 13, -2, 1)
    for t in (1, 3, 5):
        x, y = stone.x + stone.vx * t, stone.y + stone.vy * t
        assert y == pytest.approx(stone.slope() * x + stone.offset())


def test_zero_x_velocity_has_no_slope():
    with pytest.raises(ValueError):
        Hailstone(1, 2, 0, 3).slope()


def test_is_future():
    stone = Hailstone(19, 13, -2, 1)
    assert stone.is_future(15, 15) is True
    assert stone.is_future(21, 12) is False


def test_coincident_paths_always_count():
    stones = [Hailstone(0, 0, 1, 1), Hailstone(5, 5, 2, 2)]
    assert crossing_count(stones, 1000, 2000) == 1


def test_count_independent_of_order():
    stones = parse_hailstones(EXAMPLE)
    assert crossing_count(stones[::-1], 7, 27) == crossing_count(stones, 7, 27)


def test_wider_area_never_counts_fewer():
    stones = parse_hailstones(EXAMPLE)
    assert crossing_count(stones, 0, 100) >= crossing_count(stones, 7, 27)


def test_past_crossing_not_counted():
    away = [Hailstone(0, 0, -1, 1), Hailstone(10, 0, 1, 1)]
    toward = [Hailstone(0, 0, 1, 1), Hailstone(10, 0, -1, 1)]
    assert crossing_count(away, -100, 100) < crossing_count(toward, -100, 100)