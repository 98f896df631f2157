"""Cube rounding of fractional hex coordinates.

Each component is rounded on its own, which can leave ``q + r + s`` off by
one. The component that moved furthest is then rebuilt from the other two.
Ties are resolved by checking ``q`` first, then ``r``, and adjusting ``s``
otherwise; points exactly on an edge or vertex depend on that order.
"""

from __future__ import annotations

import math

from .coords import Hex, HexFrac
from .errors import NumericDegeneracy


def round_half_away(value: float) -> int:
    """Round to nearest, with ties going away from zero (C ``roundf``)."""

    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return int(math.copysign(whole, value))


def hex_round(frac: HexFrac) -> Hex:
    if not (math.isfinite(frac.q) and math.isfinite(frac.r) and math.isfinite(frac.s)):
        raise NumericDegeneracy(f"Cannot round non-finite coordinate {frac!r}")
    qi, ri, si = round_half_away(frac.q), round_half_away(frac.r), round_half_away(frac.s)
    dq, dr, ds = abs(qi - frac.q), abs(ri - frac.r), abs(si - frac.s)
    if dq > dr and dq > ds:
        qi = -ri - si
    elif dr > ds:
        ri = -qi - si
    else:
        si = -qi - ri
    return Hex(qi, ri, si)
