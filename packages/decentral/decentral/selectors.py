"""Read-only views over GameState for presentation adapters."""
from __future__ import annotations

import math

from decentral.config import GameConfig
from decentral.constants import CONFIRM, MAIN, NODE_RADIUS, SPLASH_MS
from decentral.geometry import distance
from decentral.types import GameState, Node


def can_buy(state: GameState) -> bool:
    return state.run and state.phase == MAIN and state.sats >= state.node_cost


def splash_visible(state: GameState, now: float) -> bool:
    return state.spl is not None and 0 <= now - state.spl.t < SPLASH_MS


def confirm_remaining(
    state: GameState, now: float, config: GameConfig | None = None,
) -> int | None:
    """Whole seconds left to answer a proposal, or None outside confirm."""
    if state.phase != CONFIRM or state.confirm_start is None:
        return None
    cfg = config if config is not None else GameConfig()
    left = cfg.confirm_ms - (now - state.confirm_start)
    return max(0, math.ceil(left / 1000.0))


def node_at(state: GameState, x: float, y: float) -> Node | None:
    """Nearest alive node within grabbing distance of ``(x, y)``."""
    best: Node | None = None
    best_d = NODE_RADIUS * 2.0
    for n in state.nodes:
        if not n.alive:
            continue
        d = distance(n.x, n.y, x, y)
        if d <= best_d:
            best, best_d = n, d
    return best
