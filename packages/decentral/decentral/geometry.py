"""Random range and distance helpers."""
from __future__ import annotations

import math
import random


def rand_range(rng: random.Random, lo: float, hi: float) -> float:
    return rng.uniform(lo, hi)


def distance(ax: float, ay: float, bx: float, by: float) -> float:
    return math.hypot(ax - bx, ay - by)
