import logging
import math
from typing import List, Optional, Sequence, Tuple, Union

from ..common import heading_diff
from ..config import PlannerConfig
from ..robot import Pose, VehicleParams
from .discretize import discretize
from .families import generate_candidates
from .path import DiscretizedPath, ReedsSheppPath

logger = logging.getLogger(__name__)

PoseLike = Union[Pose, Sequence[float]]

# Endpoint deviation that is reported after discretization (meters / radians).
_ENDPOINT_TOL = 1e-3


def _as_pose(pose: PoseLike) -> Pose:
    if isinstance(pose, Pose):
        return pose
    return Pose.from_tuple(pose)


def select_shortest(all_possible_paths: Sequence[ReedsSheppPath]) -> Optional[ReedsSheppPath]:
    """Minimum total length; the first candidate wins ties."""
    optimal: Optional[ReedsSheppPath] = None
    optimal_length = float("inf")
    for path in all_possible_paths:
        if path.total_length < optimal_length:
            optimal = path
            optimal_length = path.total_length
    return optimal


class ReedsShepp:
    """
    Shortest Reeds–Shepp paths for a car with a bounded steering angle.

    The curvature bound is fixed at construction:
    `max_kappa = tan(max_steering) / front_edge_to_center`.
    """

    def __init__(self, vehicle_params: Optional[VehicleParams] = None, config: Optional[PlannerConfig] = None):
        self.vehicle_params = vehicle_params if vehicle_params is not None else VehicleParams()
        self.config = config if config is not None else PlannerConfig()
        max_kappa = self.vehicle_params.max_kappa(self.config.max_steering)
        if not math.isfinite(max_kappa) or max_kappa <= 0.0:
            raise ValueError("max_kappa must be finite and > 0")
        self._max_kappa = max_kappa

    @classmethod
    def from_turning_radius(cls, turning_radius: float, step_size: float = 0.1) -> "ReedsShepp":
        params = VehicleParams()
        config = PlannerConfig.from_turning_radius(turning_radius, params.front_edge_to_center, step_size)
        return cls(params, config)

    @property
    def max_kappa(self) -> float:
        return self._max_kappa

    def normalize(self, start: PoseLike, goal: PoseLike) -> Tuple[float, float, float]:
        """Goal relative to `start` (origin, zero heading) with the curvature bound scaled to 1."""
        start = _as_pose(start)
        goal = _as_pose(goal)
        dx = goal.x - start.x
        dy = goal.y - start.y
        dphi = goal.heading - start.heading
        c = math.cos(start.heading)
        s = math.sin(start.heading)
        x = (c * dx + s * dy) * self._max_kappa
        y = (-s * dx + c * dy) * self._max_kappa
        return x, y, dphi

    def generate_rsps(self, start: PoseLike, goal: PoseLike) -> List[ReedsSheppPath]:
        """All candidate paths in unit-curvature space, in search order."""
        x, y, phi = self.normalize(start, goal)
        all_possible_paths = generate_candidates(x, y, phi)
        logger.debug("Generated %d Reeds–Shepp candidates", len(all_possible_paths))
        return all_possible_paths

    def generate_local_configuration(self, start: PoseLike, path: ReedsSheppPath) -> DiscretizedPath:
        return discretize(path, _as_pose(start), self._max_kappa, self.config.step_size)

    def shortest_rsp(self, start: PoseLike, goal: PoseLike) -> Optional[DiscretizedPath]:
        """
        Shortest path from `start` to `goal`, discretized in the global frame.

        Returns None when no candidate family applies.
        """
        start = _as_pose(start)
        goal = _as_pose(goal)
        optimal = select_shortest(self.generate_rsps(start, goal))
        if optimal is None:
            logger.info("Fail to generate different combination of Reeds–Shepp paths")
            return None

        result = self.generate_local_configuration(start, optimal)
        end_err = math.hypot(float(result.x[-1]) - goal.x, float(result.y[-1]) - goal.y)
        heading_err = abs(heading_diff(float(result.phi[-1]), goal.heading))
        if end_err > _ENDPOINT_TOL or heading_err > _ENDPOINT_TOL:
            logger.warning(
                "RSP end pose off by %.2e m / %.2e rad (word %s)", end_err, heading_err, result.word
            )
        return result

    def distance(self, start: PoseLike, goal: PoseLike) -> float:
        """Metric length of the shortest path (inf when none exists)."""
        optimal = select_shortest(self.generate_rsps(start, goal))
        if optimal is None:
            return float("inf")
        return optimal.total_length / self._max_kappa


def reeds_shepp_shortest_path(
    start: PoseLike,
    goal: PoseLike,
    turning_radius: float,
    step_size: float = 0.1,
) -> Optional[DiscretizedPath]:
    """
    Compute the shortest Reeds–Shepp path between `start` and `goal`.

    Returns None when no candidate families apply (should be rare).
    """
    return ReedsShepp.from_turning_radius(turning_radius, step_size).shortest_rsp(start, goal)
