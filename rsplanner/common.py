import math
from typing import Tuple


def normalize_angle(angle: float) -> float:
    """Wrap angle to [-pi, pi)."""
    a = (angle + math.pi) % (2.0 * math.pi) - math.pi
    return a


def cartesian_to_polar(x: float, y: float) -> Tuple[float, float]:
    """Return (radius, angle); atan2 keeps the 0/0 case well defined."""
    return math.hypot(x, y), math.atan2(y, x)


def heading_diff(a: float, b: float) -> float:
    """Smallest signed difference a-b."""
    return normalize_angle(a - b)
