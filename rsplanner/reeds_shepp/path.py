import enum
import logging
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple, Union

import numpy as np

from ..robot import Pose

logger = logging.getLogger(__name__)


class SegmentType(enum.Enum):
    STRAIGHT = "S"
    LEFT = "L"
    RIGHT = "R"

    @classmethod
    def from_char(cls, char: str) -> "SegmentType":
        try:
            return cls(char)
        except ValueError:
            raise ValueError(f"Unknown Reeds–Shepp segment type: {char!r}") from None

    def reflected(self) -> "SegmentType":
        if self is SegmentType.LEFT:
            return SegmentType.RIGHT
        if self is SegmentType.RIGHT:
            return SegmentType.LEFT
        return self


def _word(types: Sequence[SegmentType]) -> str:
    return "".join(t.value for t in types)


@dataclass(frozen=True)
class ReedsSheppPath:
    """
    Candidate Reeds–Shepp path in unit-curvature space.

    `segment_lengths` are signed: a negative value means the segment is
    traversed in reverse. Turn lengths are angles (radians on the unit circle).
    """

    segment_types: Tuple[SegmentType, ...]
    segment_lengths: Tuple[float, ...]
    total_length: float

    @property
    def word(self) -> str:
        return _word(self.segment_types)

    def segments(self) -> Iterable[Tuple[SegmentType, float]]:
        for t, length in zip(self.segment_types, self.segment_lengths):
            yield t, float(length)


@dataclass(frozen=True)
class DiscretizedPath:
    """
    Shortest path in metric units with samples in the global frame.

    `x`, `y`, `phi` and `gear` are parallel arrays; `gear[i]` is True when the
    vehicle drives forward at sample i.
    """

    segment_types: Tuple[SegmentType, ...]
    segment_lengths: Tuple[float, ...]
    total_length: float
    x: np.ndarray
    y: np.ndarray
    phi: np.ndarray
    gear: np.ndarray

    def __len__(self) -> int:
        return int(self.x.shape[0])

    @property
    def word(self) -> str:
        return _word(self.segment_types)

    @property
    def gear_switches(self) -> int:
        signs = [length > 0.0 for length in self.segment_lengths if abs(length) > 1e-9]
        return sum(1 for a, b in zip(signs, signs[1:]) if a != b)

    def poses(self) -> List[Pose]:
        return [Pose(float(x), float(y), float(p)) for x, y, p in zip(self.x, self.y, self.phi)]


def set_rsp(
    lengths: Sequence[float],
    types: Sequence[Union[SegmentType, str]],
    all_possible_paths: List[ReedsSheppPath],
) -> ReedsSheppPath:
    """Build a candidate from parallel length/type sequences and append it."""
    if len(lengths) != len(types):
        raise ValueError("Segment lengths and types differ in size")
    seg_types = tuple(t if isinstance(t, SegmentType) else SegmentType.from_char(t) for t in types)
    seg_lengths = tuple(float(v) for v in lengths)
    total = sum(abs(v) for v in seg_lengths)
    # NaN compares false, so a broken solver result lands here too
    if not total >= 0.0:
        logger.error("total length %r is not a non-negative number for %s", total, _word(seg_types))
        raise RuntimeError("Reeds–Shepp candidate has an invalid total length")
    path = ReedsSheppPath(segment_types=seg_types, segment_lengths=seg_lengths, total_length=total)
    all_possible_paths.append(path)
    return path
