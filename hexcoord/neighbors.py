from __future__ import annotations

from typing import Iterable

from .algebra import hex_add
from .conversions import hex_to_offset, offset_to_hex
from .coords import (
    Hex,
    HexOff,
    OrientationType,
    Parity,
    _is_int,
    coerce_orientation_type,
    coerce_parity,
)
from .errors import InvalidArgument, OutOfRange

# Counter-clockwise from +q; direction i and i + 3 are opposite.
DIRECTIONS: tuple[Hex, ...] = (
    Hex(+1, 0, -1),
    Hex(+1, -1, 0),
    Hex(0, -1, +1),
    Hex(-1, 0, +1),
    Hex(-1, +1, 0),
    Hex(0, +1, -1),
)


def hex_direction(direction: int) -> Hex:
    if not _is_int(direction):
        raise InvalidArgument(f"Direction must be an integer, got {direction!r}")
    if not 0 <= direction < len(DIRECTIONS):
        raise OutOfRange(f"Direction {direction} outside [0, {len(DIRECTIONS)})")
    return DIRECTIONS[direction]


def hex_neighbor(h: Hex, direction: int) -> Hex:
    return hex_add(h, hex_direction(direction))


def hex_neighbors(h: Hex) -> Iterable[Hex]:
    for d in DIRECTIONS:
        yield hex_add(h, d)


def neighbors_offset(
    o: HexOff,
    kind: OrientationType | str = OrientationType.POINTY,
    parity: Parity | int = Parity.EVEN,
) -> Iterable[HexOff]:
    """Iterate the six neighbors of an offset cell in direction order.

    ``kind`` and ``parity`` are checked when called, not when iterated.
    """

    kind = coerce_orientation_type(kind)
    parity = coerce_parity(parity)
    center = offset_to_hex(o, kind, parity)
    return (hex_to_offset(n, kind, parity) for n in hex_neighbors(center))


def neighbors_offset_bounded(
    o: HexOff,
    width: int,
    height: int,
    kind: OrientationType | str = OrientationType.POINTY,
    parity: Parity | int = Parity.EVEN,
) -> Iterable[HexOff]:
    return (
        n
        for n in neighbors_offset(o, kind, parity)
        if 0 <= n.col < width and 0 <= n.row < height
    )
