from __future__ import annotations

from .coords import Hex


def hex_equals(a: Hex, b: Hex) -> bool:
    return a.q == b.q and a.r == b.r and a.s == b.s


def hex_add(a: Hex, b: Hex) -> Hex:
    return a + b


def hex_sub(a: Hex, b: Hex) -> Hex:
    return a - b


def hex_scale(a: Hex, k: int) -> Hex:
    return a * k


def hex_length(h: Hex) -> int:
    # |q| + |r| + |s| is even whenever q + r + s == 0
    return (abs(h.q) + abs(h.r) + abs(h.s)) // 2


def hex_distance(a: Hex, b: Hex) -> int:
    """Number of neighbor steps between ``a`` and ``b``."""

    return hex_length(hex_sub(a, b))
