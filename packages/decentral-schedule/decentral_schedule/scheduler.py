"""Scheduler — phase-scoped timers that feed actions into the store."""
from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from decentral import (
    CleanupTickers,
    EndChallenge,
    GameConfig,
    Reject,
    Resume,
    Tick,
    UpgradePop,
    roll_disaster,
)
from decentral.constants import CHALLENGE, CONFIRM, MAIN, RESULT

from decentral_schedule.clock import Clock
from decentral_schedule.components import TimerHandle

if TYPE_CHECKING:
    from decentral import Action, GameState, Store

logger = logging.getLogger(__name__)

TICK = "tick"
DISASTER = "disaster"
UPGRADE = "upgrade"
CONFIRM_TIMEOUT = "confirm_timeout"
CHALLENGE_TIMEOUT = "challenge_timeout"
RESULT_TIMEOUT = "result_timeout"
PRUNE_TICKERS = "prune_tickers"

TICKER_SCOPE = "tickers"

PHASE_TIMERS: dict[str, tuple[str, ...]] = {
    MAIN: (TICK, DISASTER, UPGRADE),
    CONFIRM: (CONFIRM_TIMEOUT,),
    CHALLENGE: (CHALLENGE_TIMEOUT,),
    RESULT: (RESULT_TIMEOUT,),
}

TimerKey = tuple[str, str]


class Scheduler:
    """Owns every timer of a game and fires them into ``store``.

    The active set is a table ``(scope, kind) -> TimerHandle`` derived only
    from ``phase``, ``confirm_start`` and ``tickers``. Phase timers are
    registered when their phase is entered and cancelled when it is left.
    The ticker pruner lives while any ticker exists.

    ``poll()`` fires whatever is due at the current clock reading. Handles
    are fired one at a time and the table is re-read between firings, so a
    timer cancelled by an earlier dispatch in the same poll never fires.
    """

    def __init__(
        self,
        store: Store,
        clock: Clock,
        rng: random.Random | None = None,
        config: GameConfig | None = None,
    ) -> None:
        self._store = store
        self._clock = clock
        self._rng = rng if rng is not None else random.Random()
        self._config = config if config is not None else GameConfig()
        self._timers: dict[TimerKey, TimerHandle] = {}
        self._scope: tuple[str, float | None] | None = None
        self._seq = 0
        self._closed = False
        store.subscribe(self._on_change)
        self.sync(store.state)

    # --- Queries ---

    def active(self) -> list[TimerKey]:
        """Keys of live handles in registration order."""
        handles = sorted(self._timers.values(), key=lambda h: h.seq)
        return [(h.scope, h.kind) for h in handles]

    def handle(self, scope: str, kind: str) -> TimerHandle | None:
        return self._timers.get((scope, kind))

    # --- Lifecycle ---

    def sync(self, state: GameState) -> None:
        """Bring the timer table in line with ``state``."""
        if self._closed:
            return
        scope = (state.phase, state.confirm_start)
        if scope != self._scope:
            for key in [k for k in self._timers if k[0] != TICKER_SCOPE]:
                self._cancel(key)
            self._scope = scope
            now = self._clock()
            for kind in PHASE_TIMERS.get(state.phase, ()):
                self._register(state, kind, now)

        prune_key = (TICKER_SCOPE, PRUNE_TICKERS)
        if state.tickers and prune_key not in self._timers:
            self._add(
                TICKER_SCOPE, PRUNE_TICKERS,
                self._clock() + self._config.ticker_prune_ms,
                self._config.ticker_prune_ms,
            )
        elif not state.tickers and prune_key in self._timers:
            self._cancel(prune_key)

    def poll(self) -> int:
        """Fire every handle due now. Returns how many fired."""
        if self._closed:
            return 0
        now = self._clock()
        fired = 0
        while True:
            due = [h for h in self._timers.values() if h.due <= now]
            if not due:
                break
            self._fire(min(due, key=lambda h: (h.due, h.seq)), now)
            fired += 1
        return fired

    def close(self) -> None:
        """Cancel every timer and stop following the store."""
        for key in list(self._timers):
            self._cancel(key)
        self._store.unsubscribe(self._on_change)
        self._closed = True

    # --- Internal ---

    def _on_change(self, old: GameState, new: GameState) -> None:
        self.sync(new)

    def _register(self, state: GameState, kind: str, now: float) -> None:
        cfg = self._config
        phase = state.phase
        if kind == TICK:
            self._add(phase, kind, now + cfg.tick_ms, cfg.tick_ms)
        elif kind == DISASTER:
            self._add(phase, kind, now + cfg.disaster_ms, cfg.disaster_ms)
        elif kind == UPGRADE:
            self._add(phase, kind, now + cfg.upgrade_ms, cfg.upgrade_ms)
        elif kind == CONFIRM_TIMEOUT:
            if state.confirm_start is None:
                return
            self._add(phase, kind, state.confirm_start + cfg.confirm_ms)
        elif kind == CHALLENGE_TIMEOUT:
            self._add(phase, kind, now + cfg.challenge_ms)
        elif kind == RESULT_TIMEOUT:
            self._add(phase, kind, now + cfg.result_ms)

    def _add(
        self, scope: str, kind: str, due: float, interval: float | None = None,
    ) -> None:
        self._seq += 1
        handle = TimerHandle(
            scope=scope, kind=kind, due=due, interval=interval, seq=self._seq,
        )
        self._timers[(scope, kind)] = handle
        logger.debug("timer %s/%s due at %.0f", scope, kind, due)

    def _cancel(self, key: TimerKey) -> None:
        if self._timers.pop(key, None) is not None:
            logger.debug("timer %s/%s cancelled", *key)

    def _fire(self, handle: TimerHandle, now: float) -> None:
        if handle.interval is None:
            del self._timers[(handle.scope, handle.kind)]
        else:
            handle.due += handle.interval
        action = self._action_for(handle.kind, now)
        if action is not None:
            self._store.dispatch(action)

    def _action_for(self, kind: str, now: float) -> Action | None:
        if kind == TICK:
            return Tick()
        if kind == DISASTER:
            return roll_disaster(self._rng, now)
        if kind == UPGRADE:
            return UpgradePop()
        if kind == CONFIRM_TIMEOUT:
            return Reject()
        if kind == CHALLENGE_TIMEOUT:
            return EndChallenge()
        if kind == RESULT_TIMEOUT:
            return Resume()
        if kind == PRUNE_TICKERS:
            return self._prune(now)
        return None

    def _prune(self, now: float) -> CleanupTickers | None:
        tickers = self._store.state.tickers
        lifespan = self._config.ticker_lifespan_ms
        kept = tuple(t for t in tickers if now - t.created_at < lifespan)
        if len(kept) == len(tickers):
            return None
        return CleanupTickers(tickers=kept)
