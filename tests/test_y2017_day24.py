from aocsolver.y2017_day24 import BridgeStats, parse_input, solve

EXAMPLE = ["0/2", "2/2", "2/3", "3/4", "3/5", "0/1", "10/1", "9/10"]


def test_parse_input():
    assert parse_input(["0/2", "10/1"]) == [(0, 2), (10, 1)]


def test_example_bridges():
    stats = solve(EXAMPLE)
    assert stats.strength == 31
    assert stats.length == 4
    assert stats.strength_for_longest == 19


def test_single_component():
    assert solve(["0/3"]) == BridgeStats(strength=3, length=1, strength_for_longest=3)


def test_no_zero_port_means_no_bridge():
    assert solve(["1/2", "2/3"]) == BridgeStats()


def test_longest_never_stronger_than_strongest():
    stats = solve(EXAMPLE)
    assert stats.strength_for_longest <= stats.strength