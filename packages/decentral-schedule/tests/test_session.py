"""Tests for build_session and run_forever."""
import pytest

from decentral import GameConfig, Start
from decentral.constants import IDLE, MAIN
from decentral_schedule import ManualClock, MonotonicClock, build_session, run_forever


class TestBuildSession:
    def test_starts_idle(self):
        session = build_session(seed=1, clock=ManualClock())
        assert session.state.phase == IDLE
        assert session.seed == 1
        assert isinstance(session.config, GameConfig)

    def test_same_seed_same_network(self):
        a = build_session(seed=5, clock=ManualClock())
        b = build_session(seed=5, clock=ManualClock())
        assert a.dispatch(Start()).nodes == b.dispatch(Start()).nodes

    def test_random_seed_when_none(self):
        session = build_session()
        assert isinstance(session.seed, int)
        assert isinstance(session.clock, MonotonicClock)


class TestRunForever:
    def test_polls_until_stopped(self):
        session = build_session(seed=3, clock=ManualClock())
        session.dispatch(Start())
        frames = []
        run_forever(
            session,
            hz=1000,
            should_stop=lambda: len(frames) >= 3,
            on_frame=frames.append,
        )
        assert len(frames) == 3
        assert all(f.phase == MAIN for f in frames)
        assert session.scheduler.active() == []

    def test_hz_must_be_positive(self):
        session = build_session(seed=3, clock=ManualClock())
        with pytest.raises(ValueError):
            run_forever(session, hz=0)
