"""Game configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass, fields

LOSS_POLICIES = ("unclicked",)


@dataclass(frozen=True)
class GameConfig:
    """Immutable tuning for the reducer and the scheduler.

    Attributes:
        win_threshold: Fraction of alive nodes that must be selected for an
            upgrade challenge to pass. ``needed = ceil(alive * threshold)``.
        loss_policy: What a failed challenge costs. ``"unclicked"`` kills
            every alive node the player did not select.
        dedupe_tickers: Skip appending a ticker whose text is already queued.
        tick_ms: Block cadence while running.
        disaster_ms: Disaster cadence while running.
        upgrade_ms: Upgrade proposal cadence while running.
        challenge_ms: How long the player has to select nodes.
        result_ms: How long the challenge result stays up.
        confirm_ms: How long a proposal waits for an answer before it is
            rejected, measured from ``confirm_start``.
        ticker_prune_ms: How often expired tickers are swept.
        ticker_lifespan_ms: Age at which a ticker is swept.
    """

    win_threshold: float = 0.5
    loss_policy: str = "unclicked"
    dedupe_tickers: bool = False
    tick_ms: float = 1000
    disaster_ms: float = 5000
    upgrade_ms: float = 30000
    challenge_ms: float = 5000
    result_ms: float = 3000
    confirm_ms: float = 9000
    ticker_prune_ms: float = 2000
    ticker_lifespan_ms: float = 15000

    def __post_init__(self) -> None:
        if not 0 < self.win_threshold <= 1:
            raise ValueError(
                f"win_threshold must be in (0, 1], got {self.win_threshold}"
            )
        if self.loss_policy not in LOSS_POLICIES:
            raise ValueError(f"Unknown loss_policy {self.loss_policy!r}")
        for f in fields(self):
            if f.name.endswith("_ms") and getattr(self, f.name) <= 0:
                raise ValueError(
                    f"{f.name} must be positive, got {getattr(self, f.name)}"
                )
