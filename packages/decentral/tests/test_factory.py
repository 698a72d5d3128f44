"""Tests for geometry helpers and the node/disaster factories."""
import random

from decentral import DISASTERS, NODE_RADIUS, TICKER_HEIGHT, VIEW
from decentral.factory import (
    clamp_to_play_area,
    make_node,
    make_nodes,
    next_node_id,
    roll_disaster,
)
from decentral.geometry import distance, rand_range
from decentral.types import Node


class TestGeometry:
    def test_distance(self):
        assert distance(0, 0, 3, 4) == 5.0
        assert distance(7, 7, 7, 7) == 0.0

    def test_rand_range_stays_in_bounds(self):
        rng = random.Random(42)
        values = [rand_range(rng, 10, 20) for _ in range(200)]
        assert all(10 <= v <= 20 for v in values)


class TestMakeNode:
    def test_nodes_stay_above_the_banner(self):
        rng = random.Random(42)
        max_y = VIEW - TICKER_HEIGHT - NODE_RADIUS * 2
        for i in range(500):
            node = make_node(i, rng)
            assert NODE_RADIUS <= node.x <= VIEW - NODE_RADIUS
            assert NODE_RADIUS <= node.y <= max_y
            assert node.alive is True

    def test_same_seed_same_layout(self):
        assert make_nodes(12, random.Random(9)) == make_nodes(12, random.Random(9))

    def test_different_seed_different_layout(self):
        assert make_nodes(12, random.Random(1)) != make_nodes(12, random.Random(2))

    def test_make_nodes_ids(self):
        nodes = make_nodes(12, random.Random(0))
        assert [n.id for n in nodes] == list(range(12))

    def test_next_node_id(self):
        assert next_node_id(()) == 0
        nodes = (Node(0, 1, 1), Node(5, 1, 1, alive=False), Node(2, 1, 1))
        assert next_node_id(nodes) == 6


class TestRollDisaster:
    def test_epicenter_keeps_splash_visible(self):
        rng = random.Random(42)
        radii = {d.name: d.radius for d in DISASTERS}
        for _ in range(300):
            action = roll_disaster(rng, 1234.0)
            r = radii[action.text]
            assert action.splash.r == r
            assert 0 <= action.splash.cx <= VIEW
            assert 0 <= action.splash.cy <= VIEW - TICKER_HEIGHT - r
            assert action.splash.t == 1234.0

    def test_color_matches_catalogue(self):
        colors = {d.name: d.color for d in DISASTERS}
        action = roll_disaster(random.Random(3), 0.0)
        assert action.color == colors[action.text]

    def test_every_type_eventually_rolled(self):
        rng = random.Random(11)
        names = {roll_disaster(rng, 0.0).text for _ in range(100)}
        assert names == {d.name for d in DISASTERS}


class TestClamp:
    def test_clamps_into_play_area(self):
        assert clamp_to_play_area(-50, -50) == (NODE_RADIUS, NODE_RADIUS)
        assert clamp_to_play_area(9999, 9999) == (
            VIEW - NODE_RADIUS,
            VIEW - TICKER_HEIGHT - NODE_RADIUS * 2,
        )

    def test_inside_point_untouched(self):
        assert clamp_to_play_area(100, 200) == (100, 200)

    def test_drag_bound_matches_spawn_bound(self):
        rng = random.Random(5)
        lowest = max(make_node(i, rng).y for i in range(500))
        _, y = clamp_to_play_area(100, 9999)
        assert lowest <= y == VIEW - TICKER_HEIGHT - NODE_RADIUS * 2
