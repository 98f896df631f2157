"""Exceptions raised by the hex coordinate library."""

from __future__ import annotations


class HexError(Exception):
    """Base class for every failure raised by :mod:`hexcoord`."""


class InvariantViolation(HexError, ValueError):
    """A cube coordinate whose components do not sum to zero."""


class OutOfRange(HexError, IndexError):
    """A direction or corner index outside ``[0, 6)``."""


class InvalidArgument(HexError, ValueError):
    """A discriminant or argument outside its closed set of values."""


class NumericDegeneracy(HexError, ZeroDivisionError):
    """A zero or non-finite quantity where a finite, non-zero one is required."""
