"""decentral - Node survival game state machine."""
from __future__ import annotations

from decentral.config import GameConfig
from decentral.constants import (
    DISASTERS,
    NODE_COST_BASE,
    NODE_RADIUS,
    TICKER_HEIGHT,
    VIEW,
    DisasterType,
)
from decentral.factory import clamp_to_play_area, make_node, make_nodes, roll_disaster
from decentral.geometry import distance, rand_range
from decentral.highscores import HighScores, load_scores, save_scores
from decentral.reducer import Reducer, challenge_needed, initial_state, make_reducer
from decentral.selectors import can_buy, confirm_remaining, node_at, splash_visible
from decentral.store import Store
from decentral.types import (
    Action,
    BeginChallenge,
    Buy,
    CleanupTickers,
    Click,
    Disaster,
    Drag,
    EndChallenge,
    GameState,
    Node,
    Reject,
    Resume,
    Splash,
    Start,
    Tick,
    TickerMessage,
    UpgradePop,
)

__all__ = [
    "GameConfig",
    "DISASTERS",
    "NODE_COST_BASE",
    "NODE_RADIUS",
    "TICKER_HEIGHT",
    "VIEW",
    "DisasterType",
    "clamp_to_play_area",
    "make_node",
    "make_nodes",
    "roll_disaster",
    "distance",
    "rand_range",
    "HighScores",
    "load_scores",
    "save_scores",
    "Reducer",
    "challenge_needed",
    "initial_state",
    "make_reducer",
    "can_buy",
    "confirm_remaining",
    "node_at",
    "splash_visible",
    "Store",
    "Action",
    "BeginChallenge",
    "Buy",
    "CleanupTickers",
    "Click",
    "Disaster",
    "Drag",
    "EndChallenge",
    "GameState",
    "Node",
    "Reject",
    "Resume",
    "Splash",
    "Start",
    "Tick",
    "TickerMessage",
    "UpgradePop",
]
