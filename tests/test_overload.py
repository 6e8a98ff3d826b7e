import pytest

from adventkit.overload import Wiring, cut_product, parse_wiring

PATH = "a: b\nb: c\nc: d\n"


def test_parse_orders_nodes_and_edges():
    wiring = parse_wiring("a: b c\nb: d\n")
    assert wiring.nodes == ("a", "b", "c", "d")
    assert wiring.edges == (("a", "b"), ("a", "c"), ("b", "d"))


def test_component_size_whole_graph():
    wiring = parse_wiring("a: b c\nb: d\n")
    assert wiring.component_size("a") == len(wiring.nodes)


def test_component_size_after_removing_a_wire():
    wiring = parse_wiring("a: b c\nb: d\n")
    from_a = wiring.component_size("a", {2})
    from_d = wiring.component_size("d", {2})
    assert from_d == 1
    assert from_a + from_d == len(wiring.nodes)


def test_traffic_sums_to_total_distance_on_a_path():
    wiring = parse_wiring(PATH)
    traffic = wiring.edge_traffic()
    position = {name: index for index, name in enumerate(wiring.nodes)}
    total_distance = sum(
        abs(position[x] - position[y])
        for x in wiring.nodes
        for y in wiring.nodes
        if position[x] < position[y]
    )
    assert sum(traffic) == total_distance


def test_middle_wire_of_a_path_is_busiest():
    traffic = parse_wiring(PATH).edge_traffic()
    assert traffic[0] == traffic[2]
    assert traffic[1] > traffic[0]


def test_cut_product_on_a_path():
    assert cut_product(PATH) == 1 * 3


def test_too_few_wires_is_rejected():
    with pytest.raises(ValueError):
        cut_product("a: b\n")


def test_unknown_start_is_rejected():
    with pytest.raises(ValueError):
        parse_wiring(PATH).component_size("zz")


def test_wire_to_unknown_component_is_rejected():
    with pytest.raises(ValueError):
        Wiring(["a"], [("a", "b")])