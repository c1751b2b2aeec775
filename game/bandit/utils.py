"""
Utility functions for game mechanics
"""

from __future__ import annotations
import math
from typing import NamedTuple, Optional, Tuple

import numpy as np


class Box(NamedTuple):
    """Axis-aligned box, top-left origin"""
    x: float
    y: float
    w: float
    h: float


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def vec_len(x: float, y: float) -> float:
    """Calculate vector length (magnitude)"""
    return math.hypot(x, y)


def normalize(
    x: float,
    y: float,
    fallback: Tuple[float, float] = (1.0, 0.0),
    eps: float = 1e-8,
) -> Tuple[float, float]:
    """Normalize a vector to unit length, returning `fallback` for a zero vector"""
    l = math.hypot(x, y)
    if l < eps:
        return fallback
    return x / l, y / l


def aabb_overlap(a: Box, b: Box) -> bool:
    """Check if two boxes overlap (touching edges do not count)"""
    return a.x < b.x + b.w and a.x + a.w > b.x and a.y < b.y + b.h and a.y + a.h > b.y


def random_unit(rng: np.random.Generator) -> Tuple[float, float]:
    """Uniformly distributed unit vector"""
    ang = float(rng.uniform(0.0, 2.0 * math.pi))
    return math.cos(ang), math.sin(ang)


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Random generator used by every stochastic part of the engine"""
    return np.random.default_rng(seed)
