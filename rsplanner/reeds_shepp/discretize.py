import math
from typing import List, Tuple

import numpy as np

from ..common import normalize_angle
from ..robot import Pose
from .path import DiscretizedPath, ReedsSheppPath, SegmentType

# Arc length (unit curvature) below which a step is not worth its own sample:
# interior samples this close to a segment end and whole segments this short.
_END_TOL = 1e-9


def interpolate(
    pd: float, seg_type: SegmentType, ox: float, oy: float, ophi: float, max_kappa: float
) -> Tuple[float, float, float]:
    """
    Pose reached after a signed step `pd` (unit-curvature arc length) along a
    segment anchored at (ox, oy, ophi). Positions are metric.
    """
    if seg_type is SegmentType.STRAIGHT:
        return ox + pd / max_kappa * math.cos(ophi), oy + pd / max_kappa * math.sin(ophi), ophi

    ldx = math.sin(pd) / max_kappa
    if seg_type is SegmentType.LEFT:
        ldy = (1.0 - math.cos(pd)) / max_kappa
        phi = ophi + pd
    else:
        ldy = (1.0 - math.cos(pd)) / -max_kappa
        phi = ophi - pd
    gdx = math.cos(-ophi) * ldx + math.sin(-ophi) * ldy
    gdy = -math.sin(-ophi) * ldx + math.cos(-ophi) * ldy
    return ox + gdx, oy + gdy, phi


def resample_local(
    path: ReedsSheppPath, max_kappa: float, step_size: float
) -> Tuple[List[float], List[float], List[float], List[bool]]:
    """
    Walk the segments at a fixed arc-length step in the path's local frame
    (start at the origin, zero heading).

    Returns parallel lists (x, y, phi, gear) holding the start sample, the
    interior samples of every segment and the exact end of each segment.
    """
    step = step_size * max_kappa
    first = next((length for length in path.segment_lengths if abs(length) > _END_TOL), 1.0)
    px: List[float] = [0.0]
    py: List[float] = [0.0]
    pphi: List[float] = [0.0]
    pgear: List[bool] = [first > 0.0]

    ox, oy, ophi = 0.0, 0.0, 0.0
    for seg_type, length in path.segments():
        if abs(length) <= _END_TOL:
            # negligible segment: move the anchor, fold it into the last sample
            ox, oy, ophi = interpolate(length, seg_type, ox, oy, ophi, max_kappa)
            px[-1], py[-1], pphi[-1] = ox, oy, ophi
            continue
        d = step if length > 0.0 else -step
        k = 1
        while k * step < abs(length) - _END_TOL:
            pd = k * d
            sx, sy, sphi = interpolate(pd, seg_type, ox, oy, ophi, max_kappa)
            px.append(sx)
            py.append(sy)
            pphi.append(sphi)
            pgear.append(pd > 0.0)
            k += 1
        ox, oy, ophi = interpolate(length, seg_type, ox, oy, ophi, max_kappa)
        px.append(ox)
        py.append(oy)
        pphi.append(ophi)
        pgear.append(length > 0.0)

    if len(px) == 1:
        # zero-length path: still report start and end
        px.append(ox)
        py.append(oy)
        pphi.append(ophi)
        pgear.append(pgear[0])
    return px, py, pphi, pgear


def discretize(path: ReedsSheppPath, start: Pose, max_kappa: float, step_size: float) -> DiscretizedPath:
    """Sample `path` from `start` in the global frame and rescale lengths to meters."""
    px, py, pphi, pgear = resample_local(path, max_kappa, step_size)
    lx = np.asarray(px, dtype=float)
    ly = np.asarray(py, dtype=float)

    c = math.cos(start.heading)
    s = math.sin(start.heading)
    x = c * lx - s * ly + start.x
    y = s * lx + c * ly + start.y
    phi = normalize_angle(np.asarray(pphi, dtype=float) + start.heading)

    return DiscretizedPath(
        segment_types=path.segment_types,
        segment_lengths=tuple(length / max_kappa for length in path.segment_lengths),
        total_length=path.total_length / max_kappa,
        x=x,
        y=y,
        phi=phi,
        gear=np.asarray(pgear, dtype=bool),
    )
