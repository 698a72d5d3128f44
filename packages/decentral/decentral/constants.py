"""Static game constants shared with the presentation layer."""
from __future__ import annotations

from dataclasses import dataclass

# Play area (square, in game coordinates)
VIEW = 640
NODE_RADIUS = 12
TICKER_HEIGHT = 36

# Network
INITIAL_NODES = 12
MIN_ALIVE = 2
NODE_COST_BASE = 10

# Rewards (sats)
TICK_REWARD = 1
DISASTER_REWARD = 2
CHALLENGE_REWARD = 50

BIP_RANGE = (300, 399)
SPLASH_MS = 1000

# Phases
IDLE = "idle"
MAIN = "main"
CONFIRM = "confirm"
CHALLENGE = "challenge"
RESULT = "result"
GAMEOVER = "gameover"

# Ticker colors
COLOR_DEFAULT = "#000000"
COLOR_SUCCESS = "#10b981"
COLOR_FAILURE = "#ef4444"


@dataclass(frozen=True)
class DisasterType:
    """Catalogue entry: a named disaster with its kill radius and color."""

    name: str
    radius: float
    color: str


DISASTERS: tuple[DisasterType, ...] = (
    DisasterType("Power Outage", 100, "#fbbf24"),
    DisasterType("Government Censorship", 120, "#ef4444"),
    DisasterType("Solar Flare", 140, "#7c3aed"),
)
