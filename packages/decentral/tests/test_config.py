"""Tests for GameConfig validation."""
import dataclasses

import pytest

from decentral import GameConfig


class TestGameConfig:
    def test_defaults(self):
        cfg = GameConfig()
        assert cfg.win_threshold == 0.5
        assert cfg.loss_policy == "unclicked"
        assert cfg.dedupe_tickers is False
        assert (cfg.tick_ms, cfg.disaster_ms, cfg.upgrade_ms) == (1000, 5000, 30000)
        assert (cfg.challenge_ms, cfg.result_ms, cfg.confirm_ms) == (5000, 3000, 9000)
        assert (cfg.ticker_prune_ms, cfg.ticker_lifespan_ms) == (2000, 15000)

    @pytest.mark.parametrize("threshold", [0, -0.1, 1.01])
    def test_threshold_bounds(self, threshold):
        with pytest.raises(ValueError, match="win_threshold"):
            GameConfig(win_threshold=threshold)

    def test_full_threshold_allowed(self):
        assert GameConfig(win_threshold=1).win_threshold == 1

    def test_intervals_must_be_positive(self):
        with pytest.raises(ValueError, match="tick_ms"):
            GameConfig(tick_ms=0)
        with pytest.raises(ValueError, match="ticker_lifespan_ms"):
            GameConfig(ticker_lifespan_ms=-1)

    def test_unknown_loss_policy(self):
        with pytest.raises(ValueError, match="loss_policy"):
            GameConfig(loss_policy="random_third")

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            GameConfig().tick_ms = 5  # type: ignore[misc]
