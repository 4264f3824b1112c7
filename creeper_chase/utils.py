"""
Utility functions for game mechanics
"""

from __future__ import annotations
import math
import random
from typing import Tuple, Optional
import numpy as np


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def normalize(x: float, y: float) -> Tuple[float, float]:
    """Normalize a vector to unit length; the zero vector stays zero"""
    l = math.hypot(x, y)
    if l == 0:
        return 0.0, 0.0
    return x / l, y / l


def distance(a, b) -> float:
    """Euclidean distance between the centres of two entities"""
    return math.hypot(a.x - b.x, a.y - b.y)


def touching(a, b) -> bool:
    """True when centres are closer than the mean of the two sizes"""
    return distance(a, b) < (a.size + b.size) / 2


def seed_everything(py_seed: Optional[int]):
    """Seed all random number generators"""
    if py_seed is None:
        return
    random.seed(py_seed)
    np.random.seed(py_seed)
