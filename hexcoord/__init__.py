"""Cube/axial hex coordinates, pixel and offset transforms, and cube rounding."""

import logging

from .algebra import hex_add, hex_distance, hex_equals, hex_length, hex_scale, hex_sub
from .config import LayoutSettings, layout_from_settings
from .conversions import (
    axial_to_hex,
    hex_to_axial,
    hex_to_offset,
    offset_to_hex,
    qoffset_from_hex,
    qoffset_to_hex,
    roffset_from_hex,
    roffset_to_hex,
)
from .coords import Hex, HexFrac, HexOff, OrientationType, Parity, Point
from .errors import (
    HexError,
    InvalidArgument,
    InvariantViolation,
    NumericDegeneracy,
    OutOfRange,
)
from .layout import (
    ORIENTATION_FLAT,
    ORIENTATION_POINTY,
    Layout,
    Orientation,
    hex_corner_offset,
    hex_corners,
    hex_to_pixel,
    orientation_for,
    pixel_to_hex,
    pixel_to_hex_frac,
)
from .neighbors import (
    DIRECTIONS,
    hex_direction,
    hex_neighbor,
    hex_neighbors,
    neighbors_offset,
    neighbors_offset_bounded,
)
from .rounding import hex_round

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DIRECTIONS",
    "Hex",
    "HexError",
    "HexFrac",
    "HexOff",
    "InvalidArgument",
    "InvariantViolation",
    "Layout",
    "LayoutSettings",
    "NumericDegeneracy",
    "ORIENTATION_FLAT",
    "ORIENTATION_POINTY",
    "Orientation",
    "OrientationType",
    "OutOfRange",
    "Parity",
    "Point",
    "axial_to_hex",
    "hex_add",
    "hex_corner_offset",
    "hex_corners",
    "hex_direction",
    "hex_distance",
    "hex_equals",
    "hex_length",
    "hex_neighbor",
    "hex_neighbors",
    "hex_round",
    "hex_scale",
    "hex_sub",
    "hex_to_axial",
    "hex_to_offset",
    "hex_to_pixel",
    "layout_from_settings",
    "neighbors_offset",
    "neighbors_offset_bounded",
    "offset_to_hex",
    "orientation_for",
    "pixel_to_hex",
    "pixel_to_hex_frac",
    "qoffset_from_hex",
    "qoffset_to_hex",
    "roffset_from_hex",
    "roffset_to_hex",
]
