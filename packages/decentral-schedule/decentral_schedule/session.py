"""Wire a reducer, store and scheduler into a playable session."""
from __future__ import annotations

import os
import random
import time
from dataclasses import dataclass
from typing import Callable

from decentral import Action, GameConfig, GameState, Store, initial_state, make_reducer

from decentral_schedule.clock import Clock, MonotonicClock
from decentral_schedule.scheduler import Scheduler


@dataclass
class GameSession:
    """Everything a presentation adapter needs to run one game."""

    store: Store
    scheduler: Scheduler
    clock: Clock
    rng: random.Random
    config: GameConfig
    seed: int

    @property
    def state(self) -> GameState:
        return self.store.state

    def dispatch(self, action: Action) -> GameState:
        return self.store.dispatch(action)


def build_session(
    seed: int | None = None,
    config: GameConfig | None = None,
    clock: Clock | None = None,
) -> GameSession:
    """Build an idle session. The reducer and scheduler share rng and clock."""
    if seed is None:
        seed = int.from_bytes(os.urandom(8))
    rng = random.Random(seed)
    cfg = config if config is not None else GameConfig()
    clk = clock if clock is not None else MonotonicClock()

    reducer = make_reducer(cfg, rng, clk)
    store = Store(reducer, initial_state(rng))
    scheduler = Scheduler(store, clk, rng, cfg)
    return GameSession(
        store=store, scheduler=scheduler, clock=clk, rng=rng, config=cfg, seed=seed,
    )


def run_forever(
    session: GameSession,
    hz: int = 60,
    should_stop: Callable[[], bool] = lambda: False,
    on_frame: Callable[[GameState], None] | None = None,
) -> None:
    """Poll the scheduler ``hz`` times per second until ``should_stop()``."""
    if hz <= 0:
        raise ValueError("hz must be positive")
    dt = 1.0 / hz
    while not should_stop():
        start = time.monotonic()
        session.scheduler.poll()
        if on_frame is not None:
            on_frame(session.state)
        elapsed = time.monotonic() - start
        sleep_time = dt - elapsed
        if sleep_time > 0:
            time.sleep(sleep_time)
    session.scheduler.close()
