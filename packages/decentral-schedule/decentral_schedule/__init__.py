"""decentral-schedule - Real-time timers that drive the decentral reducer."""
from __future__ import annotations

from decentral_schedule.clock import Clock, ManualClock, MonotonicClock
from decentral_schedule.components import TimerHandle
from decentral_schedule.scheduler import PHASE_TIMERS, Scheduler
from decentral_schedule.session import GameSession, build_session, run_forever

__all__ = [
    "Clock",
    "ManualClock",
    "MonotonicClock",
    "TimerHandle",
    "PHASE_TIMERS",
    "Scheduler",
    "GameSession",
    "build_session",
    "run_forever",
]
