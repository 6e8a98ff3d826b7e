import pytest

from adventkit.bricks import (
    Brick,
    BrickStack,
    chain_reaction_total,
    parse_bricks,
    safe_to_disintegrate,
)

EXAMPLE = """1,0,1~1,2,1
0,0,2~2,0,2
0,2,3~2,2,3
0,0,4~0,2,4
2,0,5~2,2,5
0,1,6~2,1,6
1,1,8~1,1,9
"""

TOWER = "0,0,1~0,0,1\n0,0,3~0,0,3\n0,0,6~0,0,6\n"


def test_example_safe_to_disintegrate():
    assert safe_to_disintegrate(EXAMPLE) == 5


def test_example_chain_reaction_total():
    assert chain_reaction_total(EXAMPLE) == 7


def test_parse_bricks_reads_every_line():
    bricks = parse_bricks(EXAMPLE)
    assert len(bricks) == len(EXAMPLE.strip().splitlines())
    assert bricks[0] == Brick(1, 0, 1, 1, 2, 1)


def test_parse_stops_at_blank_line():
    text = "1,1,1~1,1,1\n\n2,2,2~2,2,2\n"
    assert parse_bricks(text) == [Brick(1, 1, 1, 1, 1, 1)]


def test_reversed_corners_are_normalised():
    brick = Brick(1, 1, 5, 1, 1, 3)
    assert brick.bottom == 3
    assert brick.top == 5
    assert brick == Brick(1, 1, 3, 1, 1, 5)


def test_cubes_cover_the_box():
    brick = Brick(0, 0, 1, 1, 0, 2)
    cubes = brick.cubes()
    assert set(cubes) == {(0, 0, 1), (1, 0, 1), (0, 0, 2), (1, 0, 2)}
    assert len(cubes) == len(set(cubes))


def test_bad_line_raises():
    with pytest.raises(ValueError):
        parse_bricks("1,2,3~4,5\n")


def test_brick_below_ground_raises():
    with pytest.raises(ValueError):
        Brick(0, 0, 0, 0, 0, 1)


def test_tower_settles_onto_itself():
    stack = BrickStack(parse_bricks(TOWER))
    settled = stack.settle()
    assert [brick.bottom for brick in settled] == [1, 2, 3]


def test_settle_is_stable():
    stack = BrickStack(parse_bricks(EXAMPLE))
    first = stack.settle()
    again = BrickStack(first).settle()
    assert again == first


def test_settled_bricks_do_not_overlap_and_rest_on_something():
    stack = BrickStack(parse_bricks(EXAMPLE))
    settled = stack.settle()
    cells = [cube for brick in settled for cube in brick.cubes()]
    assert len(cells) == len(set(cells))
    occupied = set(cells)
    for brick in settled:
        if brick.bottom == 1:
            continue
        assert any((x, y, brick.bottom - 1) in occupied for x, y in brick.footprint())


def test_tower_chain_reaction_from_bottom_drops_everything_else():
    stack = BrickStack(parse_bricks(TOWER))
    settled = stack.settle()
    assert stack.chain_reaction(settled[0]) == len(settled) - 1
    assert stack.chain_reaction(settled[-1]) == 0


def test_tower_only_top_can_be_removed():
    stack = BrickStack(parse_bricks(TOWER))
    settled = stack.settle()
    assert [stack.can_remove(brick) for brick in settled] == [False, False, True]


def test_removable_bricks_cause_no_chain_reaction():
    stack = BrickStack(parse_bricks(EXAMPLE))
    for brick in stack.settle():
        assert stack.can_remove(brick) == (stack.chain_reaction(brick) == 0)


def test_can_remove_settles_when_needed():
    stack = BrickStack(parse_bricks(TOWER))
    with pytest.raises(ValueError):
        stack.can_remove(Brick(9, 9, 9, 9, 9, 9))
    assert stack.bricks[0].bottom == 1


def test_empty_input_gives_zero():
    assert safe_to_disintegrate("") == 0
    assert chain_reaction_total("") == 0