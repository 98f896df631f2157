from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from numbers import Integral

from .errors import InvalidArgument, InvariantViolation


def _is_int(value: object) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


@dataclass(frozen=True, slots=True)
class Point:
    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)


@dataclass(frozen=True, slots=True)
class Hex:
    """Cube coordinate of a single cell; ``q + r + s`` is always zero."""

    q: int
    r: int
    s: int

    def __post_init__(self) -> None:
        if not (_is_int(self.q) and _is_int(self.r) and _is_int(self.s)):
            raise InvalidArgument(
                f"Hex components must be integers, got ({self.q!r}, {self.r!r}, {self.s!r})"
            )
        if self.q + self.r + self.s != 0:
            raise InvariantViolation(
                f"For cube coords, q + r + s must be 0, got ({self.q}, {self.r}, {self.s})"
            )

    @classmethod
    def from_axial(cls, q: int, r: int) -> Hex:
        return cls(q, r, -q - r)

    def __add__(self, other: Hex) -> Hex:
        return Hex(self.q + other.q, self.r + other.r, self.s + other.s)

    def __sub__(self, other: Hex) -> Hex:
        return Hex(self.q - other.q, self.r - other.r, self.s - other.s)

    def __mul__(self, k: int) -> Hex:
        if not _is_int(k):
            raise InvalidArgument(f"Hex can only be scaled by an integer, got {k!r}")
        return Hex(self.q * k, self.r * k, self.s * k)

    __rmul__ = __mul__


@dataclass(frozen=True, slots=True)
class HexFrac:
    """Fractional cube coordinate produced by a pixel query before rounding."""

    q: float
    r: float
    s: float

    @classmethod
    def from_hex(cls, h: Hex) -> HexFrac:
        return cls(float(h.q), float(h.r), float(h.s))


@dataclass(frozen=True, slots=True)
class HexOff:
    row: int
    col: int

    def __post_init__(self) -> None:
        if not (_is_int(self.row) and _is_int(self.col)):
            raise InvalidArgument(
                f"HexOff components must be integers, got ({self.row!r}, {self.col!r})"
            )


class OrientationType(str, Enum):
    """Which way the hexes of a grid are drawn."""

    POINTY = "pointy"  # row offset
    FLAT = "flat"  # column offset


class Parity(int, Enum):
    """Whether even or odd rows/columns are pushed in an offset grid."""

    EVEN = +1
    ODD = -1


def coerce_orientation_type(value: OrientationType | str) -> OrientationType:
    try:
        return OrientationType(value)
    except ValueError as exc:
        raise InvalidArgument(
            f"Unknown orientation {value!r}; expected 'pointy' or 'flat'"
        ) from exc


def coerce_parity(value: Parity | int) -> Parity:
    if not _is_int(value):
        raise InvalidArgument(f"Unknown parity {value!r}; expected +1 or -1")
    try:
        return Parity(int(value))
    except ValueError as exc:
        raise InvalidArgument(f"Unknown parity {value!r}; expected +1 or -1") from exc
