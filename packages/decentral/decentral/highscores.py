"""Best block height and best alive-node count, persisted as JSON."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from decentral.types import GameState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HighScores:
    best_height: int = 0
    best_nodes: int = 0

    def observe(self, state: GameState) -> HighScores:
        """Return a record raised to the state's height and alive count."""
        height = max(self.best_height, state.sec)
        nodes = max(self.best_nodes, state.alive_count)
        if height == self.best_height and nodes == self.best_nodes:
            return self
        return HighScores(best_height=height, best_nodes=nodes)

    def reset(self) -> HighScores:
        return HighScores()

    def to_dict(self) -> dict[str, int]:
        return {"best_height": self.best_height, "best_nodes": self.best_nodes}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> HighScores:
        height = int(data.get("best_height", 0))
        nodes = int(data.get("best_nodes", 0))
        if height < 0 or nodes < 0:
            raise ValueError(f"High scores must be >= 0, got {data!r}")
        return cls(best_height=height, best_nodes=nodes)


def load_scores(path: str | Path) -> HighScores:
    """Read scores from ``path``. A missing or unreadable file gives zeros."""
    p = Path(path)
    if not p.exists():
        return HighScores()
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
        return HighScores.from_dict(data)
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable high score file %s: %s", p, exc)
        return HighScores()


def save_scores(scores: HighScores, path: str | Path) -> None:
    Path(path).write_text(json.dumps(scores.to_dict()), encoding="utf-8")
