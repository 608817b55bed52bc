from .path import DiscretizedPath, ReedsSheppPath, SegmentType, set_rsp
from .planner import ReedsShepp, reeds_shepp_shortest_path, select_shortest
from .primitives import RSPParam

__all__ = [
    "DiscretizedPath",
    "ReedsSheppPath",
    "ReedsShepp",
    "RSPParam",
    "SegmentType",
    "reeds_shepp_shortest_path",
    "select_shortest",
    "set_rsp",
]
