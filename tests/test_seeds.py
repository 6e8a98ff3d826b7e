import pytest

from adventkit.seeds import (
    MappingRange,
    Table,
    lowest_location,
    lowest_location_of_ranges,
    parse_almanac,
)

EXAMPLE = """seeds: 79 14 55 13

seed-to-soil map:
50 98 2
52 50 48

soil-to-fertilizer map:
0 15 37
37 52 2
39 0 15

fertilizer-to-water map:
49 53 8
0 11 42
42 0 7
57 7 4

water-to-light map:
88 18 7
18 25 70

light-to-temperature map:
45 77 23
81 45 19
68 64 13

temperature-to-humidity map:
0 69 1
1 0 69

humidity-to-location map:
60 56 37
56 93 4
"""


def test_example_lowest_location():
    assert lowest_location(EXAMPLE) == 35


def test_example_lowest_location_of_ranges():
    assert lowest_location_of_ranges(EXAMPLE) == 46


def test_parse_reads_seeds_and_tables():
    almanac = parse_almanac(EXAMPLE)
    assert almanac.seeds == (79, 14, 55, 13)
    assert len(almanac.tables) == 7
    assert almanac.tables[0].name == "seed-to-soil map"
    assert almanac.tables[0].ranges[0] == MappingRange(50, 98, 2)


def test_mapping_range_bounds():
    mapping = MappingRange(50, 98, 2)
    assert mapping.contains(98)
    assert mapping.contains(99)
    assert not mapping.contains(100)
    assert not mapping.contains(97)


def test_table_lookup_inside_and_outside():
    table = Table("t", (MappingRange(50, 98, 2), MappingRange(52, 50, 48)))
    assert table.lookup(98) == 50
    assert table.lookup(53) == 55
    assert table.lookup(10) == 10


def test_first_range_wins_on_overlap():
    table = Table("t", (MappingRange(100, 0, 10), MappingRange(200, 5, 10)))
    assert table.lookup(7) == 107
    assert table.lookup(12) == 207


def test_location_is_composition_of_tables():
    almanac = parse_almanac(EXAMPLE)
    for seed in almanac.seeds:
        value = seed
        for table in almanac.tables:
            value = table.lookup(value)
        assert almanac.location(seed) == value


def test_unit_ranges_agree_with_single_seeds():
    almanac = parse_almanac(EXAMPLE)
    pairs_text = "seeds: " + " ".join(f"{s} 1" for s in almanac.seeds)
    body = EXAMPLE.split("\n", 1)[1]
    assert lowest_location_of_ranges(pairs_text + "\n" + body) == lowest_location(EXAMPLE)


def test_interval_mapping_matches_pointwise():
    almanac = parse_almanac(EXAMPLE)
    for start, length in almanac.seed_ranges():
        pointwise = min(almanac.location(s) for s in range(start, start + length))
        low = min(s for s, _ in almanac.location_intervals([(start, start + length)]))
        assert low == pointwise


def test_bad_range_line_raises():
    with pytest.raises(ValueError):
        parse_almanac("seeds: 1\n\na map:\n1 2\n")


def test_no_seeds_raises():
    with pytest.raises(ValueError):
        lowest_location("seeds:\n\na map:\n1 2 3\n")


def test_no_seed_ranges_raises():
    with pytest.raises(ValueError):
        lowest_location_of_ranges("seeds: 5\n\na map:\n1 2 3\n")