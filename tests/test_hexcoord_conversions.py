import pytest

from hexcoord import Hex, HexOff, InvalidArgument, OrientationType, Parity
from hexcoord import (
    axial_to_hex,
    hex_to_axial,
    hex_to_offset,
    offset_to_hex,
    qoffset_from_hex,
    qoffset_to_hex,
    roffset_from_hex,
    roffset_to_hex,
)

SAMPLE = [Hex.from_axial(q, r) for q in range(-9, 10) for r in range(-9, 10)]


def test_flat_even_scenario():
    o = hex_to_offset(Hex(1, -1, 0), OrientationType.FLAT, Parity.EVEN)
    assert o.col == 1
    assert o == HexOff(0, 1)
    assert offset_to_hex(o, OrientationType.FLAT, Parity.EVEN) == Hex(1, -1, 0)


@pytest.mark.parametrize(
    ("parity", "h", "expected"),
    [
        (Parity.EVEN, Hex(0, 1, -1), HexOff(1, 1)),
        (Parity.ODD, Hex(0, 1, -1), HexOff(1, 0)),
        (Parity.EVEN, Hex(-1, -1, 2), HexOff(-1, -1)),
        (Parity.ODD, Hex(-1, -1, 2), HexOff(-1, -2)),
        (Parity.EVEN, Hex(2, -3, 1), HexOff(-3, 1)),
        (Parity.ODD, Hex(2, -3, 1), HexOff(-3, 0)),
    ],
)
def test_roffset_known_values(parity, h, expected):
    assert roffset_from_hex(parity, h) == expected
    assert roffset_to_hex(parity, expected) == h


@pytest.mark.parametrize(
    ("parity", "h", "expected"),
    [
        (Parity.EVEN, Hex(1, 0, -1), HexOff(1, 1)),
        (Parity.ODD, Hex(1, 0, -1), HexOff(0, 1)),
        (Parity.EVEN, Hex(-1, -1, 2), HexOff(-1, -1)),
        (Parity.ODD, Hex(-1, -1, 2), HexOff(-2, -1)),
        (Parity.EVEN, Hex(-3, 2, 1), HexOff(1, -3)),
        (Parity.ODD, Hex(-3, 2, 1), HexOff(0, -3)),
    ],
)
def test_qoffset_known_values(parity, h, expected):
    assert qoffset_from_hex(parity, h) == expected
    assert qoffset_to_hex(parity, expected) == h


@pytest.mark.parametrize("kind", [OrientationType.POINTY, OrientationType.FLAT])
@pytest.mark.parametrize("parity", [Parity.EVEN, Parity.ODD, 1, -1])
def test_offset_roundtrip_including_negative_coordinates(kind, parity):
    for h in SAMPLE:
        assert offset_to_hex(hex_to_offset(h, kind, parity), kind, parity) == h


@pytest.mark.parametrize("kind", ["pointy", "flat"])
def test_offset_to_hex_roundtrip_from_offset_side(kind):
    for row in range(-6, 7):
        for col in range(-6, 7):
            o = HexOff(row, col)
            for parity in (Parity.EVEN, Parity.ODD):
                assert hex_to_offset(offset_to_hex(o, kind, parity), kind, parity) == o


def test_pointy_keeps_row_flat_keeps_col():
    h = Hex(-5, 3, 2)
    assert hex_to_offset(h, "pointy").row == h.r
    assert hex_to_offset(h, "flat").col == h.q


@pytest.mark.parametrize("parity", [0, 2, -3])
def test_invalid_parity_rejected(parity):
    with pytest.raises(InvalidArgument):
        hex_to_offset(Hex(0, 0, 0), OrientationType.POINTY, parity)
    with pytest.raises(InvalidArgument):
        qoffset_to_hex(parity, HexOff(0, 0))


def test_invalid_kind_rejected():
    with pytest.raises(InvalidArgument):
        offset_to_hex(HexOff(0, 0), "square")


def test_axial_cube_roundtrip():
    h = axial_to_hex(3, -2)
    assert h == Hex(3, -2, -1)
    assert hex_to_axial(h) == (3, -2)
