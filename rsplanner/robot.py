import math
from dataclasses import dataclass
from typing import Sequence, Tuple


@dataclass
class VehicleParams:
    # distance from the rear axle center to the front edge (meters)
    front_edge_to_center: float = 3.89

    def __post_init__(self):
        self.front_edge_to_center = float(self.front_edge_to_center)
        if not math.isfinite(self.front_edge_to_center) or self.front_edge_to_center <= 0.0:
            raise ValueError("front_edge_to_center must be finite and > 0")

    def max_kappa(self, max_steering: float) -> float:
        """Maximum path curvature reachable with the given steering bound."""
        return math.tan(max_steering) / self.front_edge_to_center

    def min_turn_radius(self, max_steering: float) -> float:
        return 1.0 / self.max_kappa(max_steering)


@dataclass(frozen=True)
class Pose:
    x: float
    y: float
    heading: float

    @classmethod
    def from_tuple(cls, pose: Sequence[float]) -> "Pose":
        x, y, heading = pose
        return cls(float(x), float(y), float(heading))

    def as_tuple(self) -> Tuple[float, float, float]:
        return self.x, self.y, self.heading
