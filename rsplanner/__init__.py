"""
Shortest Reeds–Shepp paths for a car-like vehicle that drives forwards and backwards.
Exports:
- ReedsShepp: search, selection and discretization
- reeds_shepp_shortest_path: tuple-based convenience wrapper
"""

from .config import PlannerConfig
from .reeds_shepp import DiscretizedPath, ReedsShepp, ReedsSheppPath, SegmentType, reeds_shepp_shortest_path
from .robot import Pose, VehicleParams

__all__ = [
    "ReedsShepp",
    "reeds_shepp_shortest_path",
    "DiscretizedPath",
    "ReedsSheppPath",
    "SegmentType",
    "PlannerConfig",
    "VehicleParams",
    "Pose",
]
