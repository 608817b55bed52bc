"""
Reeds–Shepp path families.

Each family pairs one or more primitive solvers with the symmetry variants
that map the primitive's base pattern onto the other words of the family:

- timeflip `(-x, y, -phi)`: drive the same shape in reverse, all lengths negate
- reflect `(x, -y, -phi)`: mirror about the x axis, L and R swap
- backwards `(x cos phi + y sin phi, x sin phi - y cos phi, phi)`: plan from the
  goal back to the start, segment order reverses

A family tries every timeflip/reflect combination and, when it is not closed
under reversal (CCC, CCSC), the same four again on the backwards pose.
"""

import logging
import math
from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple

from .path import ReedsSheppPath, SegmentType, set_rsp
from .primitives import RSPParam, lrl, lrlrn, lrlrp, lrsl, lrslr, lrsr, lsl, lsr, sls

logger = logging.getLogger(__name__)

Pose3 = Tuple[float, float, float]


def timeflip(x: float, y: float, phi: float) -> Pose3:
    return -x, y, -phi


def reflect(x: float, y: float, phi: float) -> Pose3:
    return x, -y, -phi


def backwards(x: float, y: float, phi: float) -> Pose3:
    return x * math.cos(phi) + y * math.sin(phi), x * math.sin(phi) - y * math.cos(phi), phi


@dataclass(frozen=True)
class Variant:
    timeflip: bool = False
    reflect: bool = False
    backwards: bool = False

    def transform(self, x: float, y: float, phi: float) -> Pose3:
        if self.backwards:
            x, y, phi = backwards(x, y, phi)
        if self.timeflip:
            x, y, phi = timeflip(x, y, phi)
        if self.reflect:
            x, y, phi = reflect(x, y, phi)
        return x, y, phi

    def remap(
        self, lengths: Sequence[float], types: Sequence[SegmentType]
    ) -> Tuple[List[float], List[SegmentType]]:
        """Carry a solution for the transformed pose back to the original one."""
        out_lengths = [-v for v in lengths] if self.timeflip else list(lengths)
        out_types = [t.reflected() for t in types] if self.reflect else list(types)
        if self.backwards:
            out_lengths.reverse()
            out_types.reverse()
        return out_lengths, out_types


FORWARD_VARIANTS: Tuple[Variant, ...] = (
    Variant(),
    Variant(timeflip=True),
    Variant(reflect=True),
    Variant(timeflip=True, reflect=True),
)
BACKWARD_VARIANTS: Tuple[Variant, ...] = tuple(
    Variant(v.timeflip, v.reflect, backwards=True) for v in FORWARD_VARIANTS
)


@dataclass(frozen=True)
class Pattern:
    """A primitive solver plus how its (t, u, v) expand into segment lengths."""

    solver: Callable[[float, float, float], RSPParam]
    word: str
    lengths: Callable[[RSPParam], Tuple[float, ...]]

    @property
    def types(self) -> Tuple[SegmentType, ...]:
        return tuple(SegmentType.from_char(c) for c in self.word)


def _tuv(p: RSPParam) -> Tuple[float, ...]:
    return p.t, p.u, p.v


_HALF_PI = 0.5 * math.pi

SLS = Pattern(sls, "SLS", _tuv)
LSL = Pattern(lsl, "LSL", _tuv)
LSR = Pattern(lsr, "LSR", _tuv)
LRL = Pattern(lrl, "LRL", _tuv)
LRLRN = Pattern(lrlrn, "LRLR", lambda p: (p.t, p.u, -p.u, p.v))
LRLRP = Pattern(lrlrp, "LRLR", lambda p: (p.t, p.u, p.u, p.v))
LRSL = Pattern(lrsl, "LRSL", lambda p: (p.t, -_HALF_PI, p.u, p.v))
LRSR = Pattern(lrsr, "LRSR", lambda p: (p.t, -_HALF_PI, p.u, p.v))
LRSLR = Pattern(lrslr, "LRSLR", lambda p: (p.t, -_HALF_PI, p.u, -_HALF_PI, p.v))


def _enumerate(
    name: str,
    x: float,
    y: float,
    phi: float,
    patterns: Sequence[Pattern],
    variant_groups: Sequence[Sequence[Variant]],
    all_possible_paths: List[ReedsSheppPath],
) -> int:
    found = 0
    for variants in variant_groups:
        for pattern in patterns:
            base_types = pattern.types
            for variant in variants:
                param = pattern.solver(*variant.transform(x, y, phi))
                if not param.flag:
                    continue
                lengths, types = variant.remap(pattern.lengths(param), base_types)
                set_rsp(lengths, types, all_possible_paths)
                found += 1
    logger.debug("%s: %d candidate(s)", name, found)
    return found


def scs(x: float, y: float, phi: float, all_possible_paths: List[ReedsSheppPath]) -> int:
    """Straight-turn-straight: SLS / SRS and their reversed forms."""
    return _enumerate("SCS", x, y, phi, (SLS,), (FORWARD_VARIANTS,), all_possible_paths)


def csc(x: float, y: float, phi: float, all_possible_paths: List[ReedsSheppPath]) -> int:
    return _enumerate("CSC", x, y, phi, (LSL, LSR), (FORWARD_VARIANTS,), all_possible_paths)


def ccc(x: float, y: float, phi: float, all_possible_paths: List[ReedsSheppPath]) -> int:
    return _enumerate(
        "CCC", x, y, phi, (LRL,), (FORWARD_VARIANTS, BACKWARD_VARIANTS), all_possible_paths
    )


def cccc(x: float, y: float, phi: float, all_possible_paths: List[ReedsSheppPath]) -> int:
    return _enumerate("CCCC", x, y, phi, (LRLRN, LRLRP), (FORWARD_VARIANTS,), all_possible_paths)


def ccsc(x: float, y: float, phi: float, all_possible_paths: List[ReedsSheppPath]) -> int:
    return _enumerate(
        "CCSC", x, y, phi, (LRSL, LRSR), (FORWARD_VARIANTS, BACKWARD_VARIANTS), all_possible_paths
    )


def ccscc(x: float, y: float, phi: float, all_possible_paths: List[ReedsSheppPath]) -> int:
    return _enumerate("CCSCC", x, y, phi, (LRSLR,), (FORWARD_VARIANTS,), all_possible_paths)


# Search order; the selector breaks length ties by first occurrence.
FAMILIES: Tuple[Callable[[float, float, float, List[ReedsSheppPath]], int], ...] = (
    scs,
    csc,
    ccc,
    cccc,
    ccsc,
    ccscc,
)


def generate_candidates(x: float, y: float, phi: float) -> List[ReedsSheppPath]:
    """Every valid candidate for a normalized goal pose, in search order."""
    all_possible_paths: List[ReedsSheppPath] = []
    for family in FAMILIES:
        family(x, y, phi, all_possible_paths)
    return all_possible_paths
