"""Orientation matrices, layouts and the hex <-> pixel transforms."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from math import sqrt

from .conversions import hex_to_offset, offset_to_hex
from .coords import (
    Hex,
    HexFrac,
    HexOff,
    OrientationType,
    Parity,
    Point,
    _is_int,
    coerce_orientation_type,
    coerce_parity,
)
from .errors import InvalidArgument, NumericDegeneracy, OutOfRange
from .rounding import hex_round

CORNER_COUNT = 6


@dataclass(frozen=True, slots=True)
class Orientation:
    f0: float; f1: float; f2: float; f3: float  # axial(q,r) -> pixel
    b0: float; b1: float; b2: float; b3: float  # pixel -> axial
    start_angle: float                           # first corner, in sixths of a turn


# Literal inverses of each other; do not replace with a computed inversion.
ORIENTATION_POINTY = Orientation(
    f0 =  sqrt(3.0), f1 =  sqrt(3.0)/2.0,
    f2 =  0.0,       f3 =  3.0/2.0,
    b0 =  sqrt(3.0)/3.0, b1 = -1.0/3.0,
    b2 =  0.0,            b3 =  2.0/3.0,
    start_angle = 0.5,
)
ORIENTATION_FLAT = Orientation(
    f0 =  3.0/2.0,  f1 = 0.0,
    f2 =  sqrt(3.0)/2.0, f3 = sqrt(3.0),
    b0 =  2.0/3.0,  b1 = 0.0,
    b2 = -1.0/3.0,  b3 = sqrt(3.0)/3.0,
    start_angle = 0.0,
)

_ORIENTATIONS: dict[OrientationType, Orientation] = {
    OrientationType.POINTY: ORIENTATION_POINTY,
    OrientationType.FLAT: ORIENTATION_FLAT,
}


def orientation_for(kind: OrientationType | str) -> Orientation:
    return _ORIENTATIONS[coerce_orientation_type(kind)]


@dataclass(frozen=True, slots=True)
class Layout:
    """Everything needed to move between hex and pixel space.

    ``size`` scales x and y independently, so non-regular (squashed) hexes are
    allowed, but neither component may be zero. ``parity`` only matters for
    offset conversions.
    """

    kind: OrientationType = OrientationType.POINTY
    size: Point = field(default_factory=lambda: Point(1.0, 1.0))
    origin: Point = field(default_factory=lambda: Point(0.0, 0.0))
    parity: Parity = Parity.EVEN

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", coerce_orientation_type(self.kind))
        object.__setattr__(self, "parity", coerce_parity(self.parity))
        for name in ("x", "y"):
            value = getattr(self.size, name)
            if value == 0 or not math.isfinite(value):
                raise NumericDegeneracy(f"Layout size.{name} must be finite and non-zero, got {value!r}")

    @classmethod
    def from_orientation(
        cls,
        orientation: Orientation,
        size: Point,
        origin: Point,
        parity: Parity | int = Parity.EVEN,
    ) -> Layout:
        for kind, known in _ORIENTATIONS.items():
            if orientation == known:
                return cls(kind, size, origin, parity)
        raise InvalidArgument("Orientation must be ORIENTATION_POINTY or ORIENTATION_FLAT")

    @property
    def orientation(self) -> Orientation:
        return _ORIENTATIONS[self.kind]

    def hex_to_pixel(self, h: Hex) -> Point:
        return hex_to_pixel(self, h)

    def pixel_to_hex(self, p: Point) -> Hex:
        return pixel_to_hex(self, p)

    def pixel_to_hex_frac(self, p: Point) -> HexFrac:
        return pixel_to_hex_frac(self, p)

    def hex_corners(self, h: Hex) -> tuple[Point, ...]:
        return hex_corners(self, h)

    def hex_to_offset(self, h: Hex) -> HexOff:
        return hex_to_offset(h, self.kind, self.parity)

    def offset_to_hex(self, o: HexOff) -> Hex:
        return offset_to_hex(o, self.kind, self.parity)


def hex_to_pixel(layout: Layout, h: Hex) -> Point:
    M = layout.orientation
    x = (M.f0 * h.q + M.f1 * h.r) * layout.size.x
    y = (M.f2 * h.q + M.f3 * h.r) * layout.size.y
    return Point(x + layout.origin.x, y + layout.origin.y)


def hex_corner_offset(layout: Layout, corner: int) -> Point:
    if not _is_int(corner):
        raise InvalidArgument(f"Corner must be an integer, got {corner!r}")
    if not 0 <= corner < CORNER_COUNT:
        raise OutOfRange(f"Corner {corner} outside [0, {CORNER_COUNT})")
    angle = 2.0 * math.pi * (layout.orientation.start_angle + corner) / CORNER_COUNT
    return Point(layout.size.x * math.cos(angle), layout.size.y * math.sin(angle))


def hex_corners(layout: Layout, h: Hex) -> tuple[Point, ...]:
    """Return the six corners of ``h`` in pixel space, as a new tuple per call."""

    center = hex_to_pixel(layout, h)
    return tuple(center + hex_corner_offset(layout, i) for i in range(CORNER_COUNT))


def pixel_to_hex_frac(layout: Layout, p: Point) -> HexFrac:
    M = layout.orientation
    px = (p.x - layout.origin.x) / layout.size.x
    py = (p.y - layout.origin.y) / layout.size.y
    q = M.b0 * px + M.b1 * py
    r = M.b2 * px + M.b3 * py
    return HexFrac(q, r, -q - r)


def pixel_to_hex(layout: Layout, p: Point) -> Hex:
    return hex_round(pixel_to_hex_frac(layout, p))
