"""numpy versions of the pixel transforms for converting many points at once.

Every function here agrees element-wise with its scalar counterpart in
:mod:`hexcoord.layout` and :mod:`hexcoord.rounding`.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .errors import InvalidArgument, NumericDegeneracy
from .layout import Layout


def _pair(a: ArrayLike, b: ArrayLike, dtype: type) -> tuple[NDArray, NDArray]:
    a_arr = np.asarray(a, dtype=dtype)
    b_arr = np.asarray(b, dtype=dtype)
    if a_arr.shape != b_arr.shape:
        raise InvalidArgument(f"Shape mismatch: {a_arr.shape} vs {b_arr.shape}")
    return a_arr, b_arr


def hex_to_pixel_array(layout: Layout, qs: ArrayLike, rs: ArrayLike) -> tuple[NDArray, NDArray]:
    q, r = _pair(qs, rs, np.float64)
    M = layout.orientation
    xs = (M.f0 * q + M.f1 * r) * layout.size.x + layout.origin.x
    ys = (M.f2 * q + M.f3 * r) * layout.size.y + layout.origin.y
    return xs, ys


def pixel_to_hex_frac_array(
    layout: Layout, xs: ArrayLike, ys: ArrayLike
) -> tuple[NDArray, NDArray, NDArray]:
    x, y = _pair(xs, ys, np.float64)
    M = layout.orientation
    px = (x - layout.origin.x) / layout.size.x
    py = (y - layout.origin.y) / layout.size.y
    q = M.b0 * px + M.b1 * py
    r = M.b2 * px + M.b3 * py
    return q, r, -q - r


def _round_half_away(values: NDArray) -> NDArray:
    magnitude = np.abs(values)
    whole = np.floor(magnitude)
    whole = whole + (magnitude - whole >= 0.5)
    return np.copysign(whole, values)


def hex_round_array(
    qs: ArrayLike, rs: ArrayLike, ss: ArrayLike
) -> tuple[NDArray, NDArray, NDArray]:
    """Cube-round arrays of fractional coordinates into int64 arrays."""

    q, r = _pair(qs, rs, np.float64)
    _, s = _pair(qs, ss, np.float64)
    if not (np.isfinite(q).all() and np.isfinite(r).all() and np.isfinite(s).all()):
        raise NumericDegeneracy("Cannot round non-finite coordinates")

    qi, ri, si = _round_half_away(q), _round_half_away(r), _round_half_away(s)
    dq, dr, ds = np.abs(qi - q), np.abs(ri - r), np.abs(si - s)

    fix_q = (dq > dr) & (dq > ds)
    fix_r = ~fix_q & (dr > ds)
    fix_s = ~fix_q & ~fix_r
    qi = np.where(fix_q, -ri - si, qi)
    ri = np.where(fix_r, -qi - si, ri)
    si = np.where(fix_s, -qi - ri, si)
    return qi.astype(np.int64), ri.astype(np.int64), si.astype(np.int64)


def pixel_to_hex_array(
    layout: Layout, xs: ArrayLike, ys: ArrayLike
) -> tuple[NDArray, NDArray, NDArray]:
    return hex_round_array(*pixel_to_hex_frac_array(layout, xs, ys))
