"""Game state and the closed set of actions that can change it."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from decentral.constants import COLOR_DEFAULT, IDLE, NODE_COST_BASE


@dataclass(frozen=True)
class Node:
    id: int
    x: float
    y: float
    alive: bool = True


@dataclass(frozen=True)
class TickerMessage:
    """Transient banner message. ``created_at`` is in clock milliseconds."""

    id: str
    text: str
    color: str
    created_at: float


@dataclass(frozen=True)
class Splash:
    """Visual extent of the last disaster, ``t`` is when it fired."""

    cx: float
    cy: float
    r: float
    t: float


@dataclass(frozen=True)
class GameState:
    """Immutable aggregate. Every transition produces a new instance.

    ``run`` is only ever true while ``phase == "main"``. ``overlay`` carries
    the modal message, if any. ``tick``/``tcol`` mirror the most recent
    ticker for adapters that show a single line.
    """

    nodes: tuple[Node, ...] = ()
    sats: int = 0
    sec: int = 0
    run: bool = False
    overlay: str | None = None
    spl: Splash | None = None
    tick: str = ""
    tcol: str = COLOR_DEFAULT
    phase: str = IDLE
    clicked: frozenset[int] = field(default_factory=frozenset)
    confirm_start: float | None = None
    tickers: tuple[TickerMessage, ...] = ()
    node_cost: int = NODE_COST_BASE
    bip_number: int | None = None

    def alive_nodes(self) -> list[Node]:
        return [n for n in self.nodes if n.alive]

    @property
    def alive_count(self) -> int:
        return sum(1 for n in self.nodes if n.alive)

    def node(self, node_id: int) -> Node | None:
        for n in self.nodes:
            if n.id == node_id:
                return n
        return None


# -- Actions --


@dataclass(frozen=True)
class Start:
    pass


@dataclass(frozen=True)
class Tick:
    pass


@dataclass(frozen=True)
class Disaster:
    splash: Splash
    text: str
    color: str


@dataclass(frozen=True)
class Buy:
    x: float
    y: float


@dataclass(frozen=True)
class Drag:
    id: int
    x: float
    y: float


@dataclass(frozen=True)
class UpgradePop:
    pass


@dataclass(frozen=True)
class BeginChallenge:
    pass


@dataclass(frozen=True)
class Reject:
    pass


@dataclass(frozen=True)
class Click:
    id: int


@dataclass(frozen=True)
class EndChallenge:
    pass


@dataclass(frozen=True)
class Resume:
    pass


@dataclass(frozen=True)
class CleanupTickers:
    tickers: tuple[TickerMessage, ...]


Action = Union[
    Start,
    Tick,
    Disaster,
    Buy,
    Drag,
    UpgradePop,
    BeginChallenge,
    Reject,
    Click,
    EndChallenge,
    Resume,
    CleanupTickers,
]

ACTION_TYPES: tuple[type, ...] = (
    Start,
    Tick,
    Disaster,
    Buy,
    Drag,
    UpgradePop,
    BeginChallenge,
    Reject,
    Click,
    EndChallenge,
    Resume,
    CleanupTickers,
)
