import math
from dataclasses import dataclass


@dataclass
class PlannerConfig:
    """
    Open-space planner settings consumed by the Reeds–Shepp module.

    `step_size` is the metric arc-length spacing of the discretized path,
    `max_steering` the steering bound (radians) used to derive the curvature
    limit together with the vehicle geometry.
    """

    step_size: float = 0.1
    max_steering: float = math.radians(30.0)

    def __post_init__(self):
        self.step_size = float(self.step_size)
        self.max_steering = float(self.max_steering)
        if not math.isfinite(self.step_size) or self.step_size <= 0.0:
            raise ValueError("step_size must be finite and > 0")
        if not 0.0 < self.max_steering < math.pi / 2.0:
            raise ValueError("max_steering must lie in (0, pi/2)")

    @classmethod
    def from_turning_radius(
        cls, turning_radius: float, front_edge_to_center: float, step_size: float = 0.1
    ) -> "PlannerConfig":
        """Pick the steering bound that yields `turning_radius` for the given geometry."""
        turning_radius = float(turning_radius)
        if not math.isfinite(turning_radius) or turning_radius <= 0.0:
            raise ValueError("turning_radius must be finite and > 0")
        return cls(step_size=step_size, max_steering=math.atan(front_edge_to_center / turning_radius))
