"""Store — the single dispatch point for game actions."""
from __future__ import annotations

import logging
from collections import deque
from typing import Callable

from decentral.types import ACTION_TYPES, Action, GameState

logger = logging.getLogger(__name__)

Listener = Callable[[GameState, GameState], None]


class Store:
    """Serializes actions through a reducer and notifies listeners.

    Actions dispatched from inside a listener are queued and applied after
    the current one, so the reducer always sees them in dispatch order.
    Listeners receive ``(old, new)`` and only when the reducer returned a
    different object.
    """

    def __init__(
        self,
        reducer: Callable[[GameState, Action], GameState],
        state: GameState,
    ) -> None:
        self._reducer = reducer
        self._state = state
        self._listeners: list[Listener] = []
        self._pending: deque[Action] = deque()
        self._dispatching = False

    @property
    def state(self) -> GameState:
        return self._state

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    def dispatch(self, action: Action) -> GameState:
        """Apply ``action`` and return the resulting state.

        Raises ``TypeError`` for objects that are not game actions.
        """
        if not isinstance(action, ACTION_TYPES):
            raise TypeError(f"Not a game action: {type(action).__qualname__}")
        self._pending.append(action)
        if self._dispatching:
            return self._state
        self._dispatching = True
        try:
            while self._pending:
                self._apply(self._pending.popleft())
        except BaseException:
            self._pending.clear()
            raise
        finally:
            self._dispatching = False
        return self._state

    def _apply(self, action: Action) -> None:
        old = self._state
        new = self._reducer(old, action)
        if new is old:
            return
        self._state = new
        if new.phase != old.phase:
            logger.info(
                "%s: %s -> %s (alive=%d sats=%d)",
                type(action).__name__, old.phase, new.phase,
                new.alive_count, new.sats,
            )
        else:
            logger.debug("%s applied in %s", type(action).__name__, new.phase)
        for listener in list(self._listeners):
            listener(old, new)
