import pytest

from hexcoord import Hex, HexFrac, HexOff, OrientationType, Parity, Point
from hexcoord import InvalidArgument, InvariantViolation
from hexcoord.coords import coerce_orientation_type, coerce_parity


def test_cube_invariant():
    h = Hex(1, -2, 1)
    assert h.q + h.r + h.s == 0


def test_cube_invariant_violation_rejected():
    with pytest.raises(InvariantViolation):
        Hex(1, 1, 1)


def test_invariant_violation_is_a_value_error():
    with pytest.raises(ValueError):
        Hex(0, 0, 1)


@pytest.mark.parametrize("components", [(0.5, -0.5, 0), (1.0, -1, 0), (True, -1, 0)])
def test_non_integer_components_rejected(components):
    with pytest.raises(InvalidArgument):
        Hex(*components)


def test_from_axial_derives_s():
    assert Hex.from_axial(3, -2) == Hex(3, -2, -1)


def test_hex_is_hashable_value():
    cells = {Hex(0, 0, 0): "origin", Hex(1, -1, 0): "east"}
    assert cells[Hex(1, -1, 0)] == "east"


def test_operators():
    a = Hex(1, -3, 2)
    b = Hex(-2, 0, 2)
    assert a + b == Hex(-1, -3, 4)
    assert a - b == Hex(3, -3, 0)
    assert a * 3 == Hex(3, -9, 6)
    assert 2 * b == Hex(-4, 0, 4)


def test_scale_by_float_rejected():
    with pytest.raises(InvalidArgument):
        Hex(1, -1, 0) * 1.5


def test_hexfrac_from_hex_widens():
    f = HexFrac.from_hex(Hex(2, -5, 3))
    assert f == HexFrac(2.0, -5.0, 3.0)
    assert isinstance(f.q, float)


def test_hexoff_accepts_any_integer_pair():
    o = HexOff(-7, 12)
    assert (o.row, o.col) == (-7, 12)


def test_coerce_orientation_type():
    assert coerce_orientation_type("flat") is OrientationType.FLAT
    assert coerce_orientation_type(OrientationType.POINTY) is OrientationType.POINTY
    with pytest.raises(InvalidArgument):
        coerce_orientation_type("hexagonal")


@pytest.mark.parametrize(("raw", "expected"), [(1, Parity.EVEN), (-1, Parity.ODD), (Parity.ODD, Parity.ODD)])
def test_coerce_parity(raw, expected):
    assert coerce_parity(raw) is expected


@pytest.mark.parametrize("raw", [0, 2, -2, 1.0, "even", None])
def test_coerce_parity_rejects_other_values(raw):
    with pytest.raises(InvalidArgument):
        coerce_parity(raw)


@pytest.mark.parametrize("components", [(1.5, 2), (0, 2.0), (True, 0)])
def test_hexoff_rejects_non_integer_components(components):
    with pytest.raises(InvalidArgument):
        HexOff(*components)


def test_point_arithmetic():
    a = Point(3.5, -2.0)
    b = Point(1.0, 4.25)
    assert a + b == Point(4.5, 2.25)
    assert a - b == Point(2.5, -6.25)
    assert (a + b) - b == a
