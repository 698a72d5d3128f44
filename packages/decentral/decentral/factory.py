"""Node and disaster factories."""
from __future__ import annotations

import random
from typing import Iterable

from decentral.constants import DISASTERS, NODE_RADIUS, TICKER_HEIGHT, VIEW
from decentral.geometry import rand_range
from decentral.types import Disaster, Node, Splash

# Largest y a node may take: two radii above the ticker banner.
MAX_NODE_Y = VIEW - TICKER_HEIGHT - NODE_RADIUS * 2


def make_node(node_id: int, rng: random.Random) -> Node:
    """Place a node uniformly, keeping it clear of the ticker banner."""
    x = rand_range(rng, NODE_RADIUS, VIEW - NODE_RADIUS)
    y = rand_range(rng, NODE_RADIUS, MAX_NODE_Y)
    return Node(id=node_id, x=x, y=y, alive=True)


def make_nodes(count: int, rng: random.Random) -> tuple[Node, ...]:
    return tuple(make_node(i, rng) for i in range(count))


def next_node_id(nodes: Iterable[Node]) -> int:
    return max((n.id for n in nodes), default=-1) + 1


def roll_disaster(rng: random.Random, now: float) -> Disaster:
    """Pick a disaster type and an epicenter whose splash stays on screen."""
    kind = rng.choice(DISASTERS)
    cx = rand_range(rng, 0, VIEW)
    cy = rand_range(rng, 0, VIEW - TICKER_HEIGHT - kind.radius)
    return Disaster(
        splash=Splash(cx=cx, cy=cy, r=kind.radius, t=now),
        text=kind.name,
        color=kind.color,
    )


def clamp_to_play_area(x: float, y: float) -> tuple[float, float]:
    """Clamp a pointer position to where a node may be placed or dragged."""
    cx = min(max(x, NODE_RADIUS), VIEW - NODE_RADIUS)
    cy = min(max(y, NODE_RADIUS), MAX_NODE_Y)
    return cx, cy
