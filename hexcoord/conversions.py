from __future__ import annotations

from .coords import (
    Hex,
    HexOff,
    OrientationType,
    Parity,
    coerce_orientation_type,
    coerce_parity,
)

# The numerators below are always even (x + parity * (x & 1) with parity = +/-1),
# so floor division matches truncating division for negative coordinates too.


def qoffset_from_hex(parity: Parity | int, h: Hex) -> HexOff:
    p = coerce_parity(parity)
    col = h.q
    row = h.r + (h.q + p * (h.q & 1)) // 2
    return HexOff(row, col)


def roffset_from_hex(parity: Parity | int, h: Hex) -> HexOff:
    p = coerce_parity(parity)
    col = h.q + (h.r + p * (h.r & 1)) // 2
    row = h.r
    return HexOff(row, col)


def qoffset_to_hex(parity: Parity | int, o: HexOff) -> Hex:
    p = coerce_parity(parity)
    q = o.col
    r = o.row - (o.col + p * (o.col & 1)) // 2
    return Hex(q, r, -q - r)


def roffset_to_hex(parity: Parity | int, o: HexOff) -> Hex:
    p = coerce_parity(parity)
    q = o.col - (o.row + p * (o.row & 1)) // 2
    r = o.row
    return Hex(q, r, -q - r)


def hex_to_offset(
    h: Hex,
    kind: OrientationType | str = OrientationType.POINTY,
    parity: Parity | int = Parity.EVEN,
) -> HexOff:
    """Pointy grids shift alternate rows, flat grids alternate columns."""

    if coerce_orientation_type(kind) is OrientationType.POINTY:
        return roffset_from_hex(parity, h)
    return qoffset_from_hex(parity, h)


def offset_to_hex(
    o: HexOff,
    kind: OrientationType | str = OrientationType.POINTY,
    parity: Parity | int = Parity.EVEN,
) -> Hex:
    if coerce_orientation_type(kind) is OrientationType.POINTY:
        return roffset_to_hex(parity, o)
    return qoffset_to_hex(parity, o)


def hex_to_axial(h: Hex) -> tuple[int, int]:
    return h.q, h.r


def axial_to_hex(q: int, r: int) -> Hex:
    return Hex.from_axial(q, r)
