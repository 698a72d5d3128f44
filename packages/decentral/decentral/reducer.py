"""Reducer factory: the game state machine.

Phases run ``idle -> main -> (confirm -> challenge -> result -> main)``,
with ``gameover`` reachable from any running phase once fewer than
``MIN_ALIVE`` nodes are left. ``gameover`` is left only through ``Start``.

Every transition is total. An action that does not apply to the current
phase returns the very same state object so callers can detect changes
by identity.
"""
from __future__ import annotations

import math
import random
import time
from dataclasses import replace
from typing import Any, Callable

from decentral.config import GameConfig
from decentral.constants import (
    BIP_RANGE,
    CHALLENGE,
    CHALLENGE_REWARD,
    COLOR_FAILURE,
    COLOR_SUCCESS,
    CONFIRM,
    DISASTER_REWARD,
    GAMEOVER,
    IDLE,
    INITIAL_NODES,
    MAIN,
    MIN_ALIVE,
    RESULT,
    TICK_REWARD,
)
from decentral.factory import make_nodes, next_node_id
from decentral.geometry import distance
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
    Start,
    Tick,
    TickerMessage,
    UpgradePop,
)

Reducer = Callable[[GameState, Action], GameState]

OVERLAY_IDLE = "Click Start"
OVERLAY_GAMEOVER = (
    f"Network collapsed: fewer than {MIN_ALIVE} nodes online. Press Start."
)

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def monotonic_ms() -> float:
    return time.monotonic() * 1000.0


def initial_state(rng: random.Random | None = None) -> GameState:
    """Idle state shown before the first ``Start``."""
    rng = rng if rng is not None else random.Random()
    return GameState(nodes=make_nodes(INITIAL_NODES, rng), overlay=OVERLAY_IDLE)


def challenge_needed(alive: int, threshold: float) -> int:
    """Selections required to pass a challenge with ``alive`` nodes online."""
    return math.ceil(alive * threshold)


def make_reducer(
    config: GameConfig | None = None,
    rng: random.Random | None = None,
    clock: Callable[[], float] | None = None,
) -> Reducer:
    """Return ``reducer(state, action) -> state``.

    ``rng`` feeds node placement on ``Start``, BIP numbers and ticker ids.
    ``clock`` returns milliseconds and stamps tickers and ``confirm_start``;
    it must be the same clock the scheduler reads.
    """
    cfg = config if config is not None else GameConfig()
    rand = rng if rng is not None else random.Random()
    now = clock if clock is not None else monotonic_ms

    def _ticker_id(ts: float) -> str:
        suffix = "".join(rand.choice(_BASE36) for _ in range(9))
        return f"ticker-{int(ts)}-{suffix}"

    def _push_ticker(
        tickers: tuple[TickerMessage, ...], text: str, color: str,
    ) -> tuple[TickerMessage, ...]:
        if cfg.dedupe_tickers and any(t.text == text for t in tickers):
            return tickers
        ts = now()
        msg = TickerMessage(id=_ticker_id(ts), text=text, color=color, created_at=ts)
        return tickers + (msg,)

    def _game_over(s: GameState, **changes: Any) -> GameState:
        return replace(
            s,
            run=False,
            phase=GAMEOVER,
            overlay=OVERLAY_GAMEOVER,
            clicked=frozenset(),
            confirm_start=None,
            bip_number=None,
            **changes,
        )

    # -- Handlers --

    def _start(s: GameState, a: Start) -> GameState:
        return GameState(
            nodes=make_nodes(INITIAL_NODES, rand),
            run=True,
            phase=MAIN,
        )

    def _tick(s: GameState, a: Tick) -> GameState:
        if not s.run:
            return s
        return replace(s, sec=s.sec + 1, sats=s.sats + TICK_REWARD)

    def _disaster(s: GameState, a: Disaster) -> GameState:
        if s.phase != MAIN:
            return s
        sp = a.splash
        nodes = tuple(
            replace(n, alive=False)
            if n.alive and distance(n.x, n.y, sp.cx, sp.cy) < sp.r
            else n
            for n in s.nodes
        )
        nxt = replace(
            s,
            nodes=nodes,
            sats=s.sats + DISASTER_REWARD,
            spl=sp,
            tick=a.text,
            tcol=a.color,
            tickers=_push_ticker(s.tickers, a.text, a.color),
        )
        if nxt.alive_count < MIN_ALIVE:
            return _game_over(nxt)
        return nxt

    def _buy(s: GameState, a: Buy) -> GameState:
        if not s.run or s.sats < s.node_cost:
            return s
        node = Node(id=next_node_id(s.nodes), x=a.x, y=a.y)
        return replace(
            s,
            sats=s.sats - s.node_cost,
            nodes=s.nodes + (node,),
            node_cost=s.node_cost + 1,
        )

    def _drag(s: GameState, a: Drag) -> GameState:
        if s.phase in (IDLE, GAMEOVER):
            return s
        target = s.node(a.id)
        if target is None or not target.alive:
            return s
        nodes = tuple(
            replace(n, x=a.x, y=a.y) if n.id == a.id else n for n in s.nodes
        )
        return replace(s, nodes=nodes)

    def _upgrade_pop(s: GameState, a: UpgradePop) -> GameState:
        if s.phase != MAIN:
            return s
        bip = rand.randint(*BIP_RANGE)
        return replace(
            s,
            run=False,
            phase=CONFIRM,
            bip_number=bip,
            overlay=f"Approve BIP-{bip}?",
            confirm_start=now(),
        )

    def _begin_challenge(s: GameState, a: BeginChallenge) -> GameState:
        if s.phase != CONFIRM:
            return s
        return replace(
            s, phase=CHALLENGE, clicked=frozenset(), overlay=None, confirm_start=None,
        )

    def _reject(s: GameState, a: Reject) -> GameState:
        if s.phase not in (CONFIRM, RESULT):
            return s
        return replace(
            s,
            run=True,
            phase=MAIN,
            overlay=None,
            bip_number=None,
            confirm_start=None,
            clicked=frozenset(),
        )

    def _click(s: GameState, a: Click) -> GameState:
        if s.phase != CHALLENGE or a.id in s.clicked:
            return s
        target = s.node(a.id)
        if target is None or not target.alive:
            return s
        return replace(s, clicked=s.clicked | {a.id})

    def _end_challenge(s: GameState, a: EndChallenge) -> GameState:
        if s.phase != CHALLENGE:
            return s
        alive_ids = {n.id for n in s.nodes if n.alive}
        selected = s.clicked & alive_ids
        needed = challenge_needed(len(alive_ids), cfg.win_threshold)
        proposal = f"BIP-{s.bip_number}" if s.bip_number is not None else "Upgrade"

        if len(selected) >= needed:
            text = f"{proposal} accepted"
            return replace(
                s,
                phase=RESULT,
                sats=s.sats + CHALLENGE_REWARD,
                overlay=f"{text} +{CHALLENGE_REWARD} sats",
                tick=text,
                tcol=COLOR_SUCCESS,
                tickers=_push_ticker(s.tickers, text, COLOR_SUCCESS),
                bip_number=None,
            )

        # Loss: every node that did not signal support forks off.
        nodes = tuple(
            replace(n, alive=False) if n.alive and n.id not in selected else n
            for n in s.nodes
        )
        lost = len(alive_ids) - len(selected)
        if len(selected) < MIN_ALIVE:
            text = f"{proposal} split the network, chain halted"
            return _game_over(
                s,
                nodes=nodes,
                tick=text,
                tcol=COLOR_FAILURE,
                tickers=_push_ticker(s.tickers, text, COLOR_FAILURE),
            )
        text = f"{proposal} rejected — partial hard fork"
        return replace(
            s,
            phase=RESULT,
            nodes=nodes,
            overlay=f"{text}: {lost} nodes lost",
            tick=text,
            tcol=COLOR_FAILURE,
            tickers=_push_ticker(s.tickers, text, COLOR_FAILURE),
            bip_number=None,
        )

    def _resume(s: GameState, a: Resume) -> GameState:
        if s.phase != RESULT:
            return s
        return replace(
            s, run=True, phase=MAIN, overlay=None, clicked=frozenset(), bip_number=None,
        )

    def _cleanup_tickers(s: GameState, a: CleanupTickers) -> GameState:
        tickers = tuple(a.tickers)
        if tickers == s.tickers:
            return s
        return replace(s, tickers=tickers)

    handlers: dict[type, Callable[[GameState, Any], GameState]] = {
        Start: _start,
        Tick: _tick,
        Disaster: _disaster,
        Buy: _buy,
        Drag: _drag,
        UpgradePop: _upgrade_pop,
        BeginChallenge: _begin_challenge,
        Reject: _reject,
        Click: _click,
        EndChallenge: _end_challenge,
        Resume: _resume,
        CleanupTickers: _cleanup_tickers,
    }

    def reducer(state: GameState, action: Action) -> GameState:
        handler = handlers.get(type(action))
        if handler is None:
            return state
        # A network that already dropped below quorum ends the game
        # before anything else is applied.
        if (
            not isinstance(action, Start)
            and state.phase not in (IDLE, GAMEOVER)
            and state.alive_count < MIN_ALIVE
        ):
            return _game_over(state)
        return handler(state, action)

    return reducer
