"""Timer handle stored in the scheduler's table."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TimerHandle:
    """One scheduled callback.

    One-shot when ``interval`` is None and removed once it fires. Periodic
    otherwise: ``due`` moves forward by ``interval`` after every firing.
    ``scope`` is the phase that owns the handle (or ``"tickers"``), ``seq``
    breaks ties between handles due at the same instant.
    """

    scope: str
    kind: str
    due: float
    interval: float | None = None
    seq: int = 0

    @property
    def periodic(self) -> bool:
        return self.interval is not None
