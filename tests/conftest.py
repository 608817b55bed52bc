import math
import sys
from pathlib import Path

import pytest

# Run against the checkout without an editable install.
REPO_ROOT = Path(__file__).resolve().parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from rsplanner import PlannerConfig, ReedsShepp, VehicleParams  # noqa: E402


@pytest.fixture
def unit_planner():
    """Planner with a one meter turning radius and 0.1 m samples."""
    return ReedsShepp(VehicleParams(front_edge_to_center=1.0), PlannerConfig(max_steering=math.radians(45.0)))
