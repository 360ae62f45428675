from __future__ import annotations

import operator
from fractions import Fraction
from numbers import Integral, Number, Rational
from typing import Any, Callable, Generic, NamedTuple, TypeVar

import numpy as np

from exunits.exceptions import DimensionError
from exunits.types import coax_type
from ._base import (AnyUnit, AffineUnit, Unit, NO_UNITS, absolute_unit,
                    is_affine, zero_point)
from ._coerce import match_operand, value_type
from ._dims import Dimension, NO_DIMS, dimension, same_dimension
from ._factor import convfact

# Written by Eric J. Whitney, January 2020.

T = TypeVar('T')


# ===========================================================================

class Quantity(NamedTuple, Generic[T]):
    """
    ``Quantity`` represents a dimensioned value, consisting of a numeric
    `value` and the `unit` it is expressed in.  The value can be any
    numeric type (``int``, ``Fraction``, ``float``, ``complex``, NumPy
    scalars or arrays) and its type is preserved by conversions wherever
    possible.

    ``Quantity`` objects are implemented as a namedtuple and are thus
    immutable.  Equality is structural, i.e. ``Quantity(100, cm) !=
    Quantity(1, m)``; convert to common units before comparing.

    .. note:: ``Quantity`` objects are normally made by multiplying a
       value by a unit, e.g. ``3602 * s``.
    """
    value: T
    unit: AnyUnit

    # Make numpy defer to our reflected operators.
    __array_ufunc__ = None

    # -- Unary Operators ----------------------------------------------------

    def __abs__(self) -> Quantity[T]:
        return Quantity(abs(self.value), self.unit)

    def __complex__(self) -> complex:
        """
        Returns the value as a ``complex``.  The quantity must be
        dimensionless (see ``convert()``).
        """
        return convert(complex, self)

    def __float__(self) -> float:
        """
        Returns the value as a ``float``.  The quantity must be
        dimensionless (see ``convert()``).
        """
        return convert(float, self)

    def __int__(self) -> int:
        """
        Returns the value as an ``int``.  The quantity must be
        dimensionless and the value must be whole (see ``convert()``).
        """
        return convert(int, self)

    def __neg__(self) -> Quantity[T]:
        return Quantity(-self.value, self.unit)

    def __round__(self, n: int = None) -> Quantity[T]:
        return Quantity(round(self.value, n), self.unit)

    # -- Binary Operators ---------------------------------------------------

    def __add__(self, rhs: Quantity | Number) -> Quantity:
        """
        Add two quantities.  `rhs` is converted to the units of `self`
        first.  If `rhs` is an ordinary value it is promoted to a
        dimensionless ``Quantity``, so this only succeeds if `self` is
        also dimensionless.  Quantities on affine scales can't be added.
        """
        return _add_sub(self, rhs, operator.add)

    def __sub__(self, rhs: Quantity | Number) -> Quantity:
        """Subtract two quantities.  See ``__add__`` for rules."""
        return _add_sub(self, rhs, operator.sub)

    def __mul__(self, rhs: Number) -> Quantity:
        """
        Multiply the value by an ordinary number, keeping the units.
        Quantities on affine scales can't be multiplied.
        """
        return _scale(self, rhs, operator.mul)

    def __truediv__(self, rhs: Number) -> Quantity:
        """Divide the value by an ordinary number, keeping the units."""
        return _scale(self, rhs, operator.truediv)

    def __radd__(self, lhs: Number) -> Quantity:
        """See ``__add__`` for addition rules."""
        return _add_sub(Quantity(lhs, NO_UNITS), self, operator.add)

    def __rsub__(self, lhs: Number) -> Quantity:
        """See ``__sub__`` for subtraction rules."""
        return _add_sub(Quantity(lhs, NO_UNITS), self, operator.sub)

    def __rmul__(self, lhs: Number) -> Quantity:
        """See ``__mul__`` for multiplication rules."""
        return _scale(self, lhs, lambda a, b: operator.mul(b, a))

    # -- String Magic Methods -----------------------------------------------

    def __repr__(self) -> str:
        return f"Quantity({self.value!r}, {self.unit!r})"

    # -- Normal Methods -----------------------------------------------------

    @property
    def dim(self) -> Dimension:
        """Dimension of the units of this quantity."""
        return self.unit.dim

    def astype(self, dtype: type) -> Quantity:
        """
        Returns a new ``Quantity`` with the same units and the value
        converted to numeric type `dtype`.  Lossy conversions to exact
        types (e.g. 1.5 -> ``int``) raise ``ValueError``.
        """
        return convert(QuantityType(dtype), self)

    def convert(self, to_unit: AnyUnit) -> Quantity:
        """
        Generate new ``Quantity`` converted to the requested units.  See
        ``uconvert()``.
        """
        return uconvert(to_unit, self)

    def is_affine(self) -> bool:
        """Returns ``True`` if the units are on an offset scale."""
        return is_affine(self.unit)

    def to_value(self, to_unit: AnyUnit = None) -> T:
        """
        Remove units and return a plain value.  The target units can be
        optionally specified.  This is a convenience method equivalent to
        ``self.convert(to_unit).value``

        .. note:: Unit information is lost.
        """
        if to_unit is not None:
            return self.convert(to_unit).value
        else:
            return self.value


class QuantityType(NamedTuple):
    """
    ``QuantityType`` describes the target of a type conversion made using
    ``convert()``.  Any field can be left as ``None`` which means it is
    not constrained:

        - ``QuantityType(dtype)``: Any units, value converted to `dtype`.
        - ``QuantityType(dtype, dim=d)``: Any units of dimension `d`.
        - ``QuantityType(dtype, unit=u)``: Units `u` exactly.  This also
          covers dimensionless quantities in a particular unit (e.g.
          percent).
    """
    dtype: Any = None
    dim: Dimension | None = None
    unit: AnyUnit | None = None


# ---------------------------------------------------------------------------

def uconvert(unit: AnyUnit, x: Quantity | Number | None) -> Quantity | None:
    """
    Convert a ``Quantity`` to different units.  The conversion will fail
    if the target units have a different dimension to the quantity `x`.
    This can be used to switch between equivalent representations of the
    same unit, like ``N·m`` and ``J``.

    The following cases are handled:

        - Same units: The value is returned unchanged in a new
          ``Quantity`` (no arithmetic is done).
        - Either unit is affine (e.g. °C): The offset of each scale is
          included, i.e.  ``(value - zero_from) * factor + zero_to``.
        - Otherwise: ``value * factor`` with the factor given by
          ``convfact()`` and suited to the numeric type of the value.
        - `x` a plain number: Only valid if `unit` is dimensionless.
        - `x` is ``None`` (absent): ``None`` is returned.

    Where `x` has an integer value and the result is a whole number,
    the result is given as an ``int``.

    Examples
    --------
    >>> from exunits.units import hr, s, J, N, m
    >>> uconvert(hr, 3602 * s)
    Quantity(Fraction(1801, 1800), hr)
    >>> uconvert(J, 1.0 * (N * m))
    Quantity(1.0, J)

    Raises
    ------
    DimensionError
        If `unit` and `x` have different dimensions.
    NumericRangeError
        If the conversion factor can't be represented in floating point.
    """
    if x is None:
        return None

    if not isinstance(x, Quantity):
        return _uconvert_number(unit, x)

    if x.unit == unit:
        return Quantity(x.value, unit)  # Preserves numeric type.

    if is_affine(unit) or is_affine(x.unit):
        return _uconvert_affine(unit, x)

    factor = convfact(unit, x.unit, num_type=value_type(x.value))
    res_value = x.value * match_operand(factor, x.value)
    return Quantity(_keep_int(x.value, res_value), unit)


def convert(target: type | QuantityType, x: Quantity | Number | None):
    """
    Convert `x` to the type given by `target`, checking dimensions before
    any value is changed.

        - `target` is a ``QuantityType``: A ``Quantity`` is returned.  See
          ``QuantityType`` for the meaning of the fields.  Plain numbers
          are treated as dimensionless.
        - `target` is ``numbers.Number``: `x` is returned unchanged.
        - `target` is a concrete numeric type (e.g. ``float``, ``int``,
          ``Fraction``, ``np.float32``): A plain value is returned.  If `x`
          is a ``Quantity`` it must be dimensionless and is first
          converted to have no units (e.g. 50 % -> 1/2).
        - `x` is ``None``: ``None`` is returned.

    Conversions to exact types (``int``, ``Fraction``, NumPy integers)
    must be lossless.

    Examples
    --------
    >>> from exunits.units import km, m, percent
    >>> convert(QuantityType(float, unit=m), 2 * km)
    Quantity(2000.0, m)
    >>> convert(float, 50 * percent)
    0.5

    Raises
    ------
    DimensionError
        If the dimensions of `x` don't match `target`.
    ValueError
        If the value can't be converted to the required type without
        loss, or `target` is inconsistent.
    """
    if x is None:
        return None

    if isinstance(target, QuantityType):
        return _convert_quantity_type(target, x)

    if target is Number:
        return x

    if isinstance(x, Quantity):
        x = uconvert(NO_UNITS, x).value

    return _cast(x, target)


def to_absolute(x: Quantity | None) -> Quantity | None:
    """
    Convert a quantity on an offset (affine) scale to the equivalent on
    its absolute scale (e.g. °C → K or °F → °R).  Quantities already on
    an absolute (linear) scale are returned directly.
    """
    if x is None or not x.is_affine():
        return x

    return uconvert(absolute_unit(x.unit), x)


# ===========================================================================

def _add_sub(lhs: Quantity, rhs, op: Callable) -> Quantity:
    if not isinstance(rhs, Quantity):
        # Promote to Quantity.  This is only valid if the LHS is
        # dimensionless.
        rhs = Quantity(rhs, NO_UNITS)

    if lhs.is_affine() or rhs.is_affine():
        raise TypeError(f"Quantities on affine scales can't be added or "
                        f"subtracted, got: '{lhs.unit}' and '{rhs.unit}'. "
                        f"Use to_absolute() first.")

    rhs = uconvert(lhs.unit, rhs)
    return Quantity(op(lhs.value, rhs.value), lhs.unit)


def _cast(value, dtype):
    """
    Convert `value` to `dtype`.  Conversion to exact types must be
    lossless.
    """
    if dtype is None:
        return value

    if isinstance(value, np.ndarray):
        return value.astype(dtype)

    if isinstance(dtype, np.dtype):
        dtype = dtype.type

    if isinstance(dtype, type) and issubclass(dtype, Rational):
        return coax_type(value, dtype)

    if isinstance(value, Fraction):
        value = float(value)

    return dtype(value)


def _convert_quantity_type(target: QuantityType, x) -> Quantity:
    dtype, dim, unit = target

    if unit is not None:
        if dim is not None and not same_dimension(dim, unit.dim):
            raise ValueError(f"Inconsistent target: '{unit}' does not have "
                             f"dimensions {dim!r}.")
        if not same_dimension(dimension(x), unit.dim):
            raise DimensionError(unit, x)
        res = uconvert(unit, x)
        return Quantity(_cast(res.value, dtype), unit)

    if isinstance(x, Quantity):
        if dim is not None and not same_dimension(x.dim, dim):
            raise DimensionError(dim, x)
        return Quantity(_cast(x.value, dtype), x.unit)

    # Plain numbers are dimensionless.
    if dim is not None and not same_dimension(dim, NO_DIMS):
        raise DimensionError(dim, NO_DIMS)
    return Quantity(_cast(x, dtype), NO_UNITS)


def _keep_int(orig, res):
    """If `orig` was an integer, return `res` as an int if it is whole."""
    if isinstance(orig, Integral) and isinstance(res, Fraction):
        return coax_type(res, int, default=res)
    return res


def _scale(x: Quantity, k, op: Callable) -> Quantity:
    if isinstance(k, (Quantity, Unit, AffineUnit)):
        return NotImplemented
    if isinstance(k, tuple):
        return NotImplemented  # Don't allow tuple repetition.
    if x.is_affine():
        raise TypeError(f"Quantities on affine scales can't be scaled, "
                        f"got: '{x.unit}'.  Use to_absolute() first.")

    return Quantity(op(x.value, k), x.unit)


def _uconvert_affine(unit: AnyUnit, x: Quantity) -> Quantity:
    if not same_dimension(unit.dim, x.dim):
        raise DimensionError(unit, x)

    conv = convfact(absolute_unit(unit), absolute_unit(x.unit))
    t0, t1 = zero_point(x.unit), zero_point(unit)

    v = x.value
    res_value = ((v - match_operand(t0, v)) * match_operand(conv, v) +
                 match_operand(t1, v))
    return Quantity(_keep_int(v, res_value), unit)


def _uconvert_number(unit: AnyUnit, x: Number) -> Quantity:
    if not same_dimension(unit.dim, NO_DIMS):
        raise DimensionError(unit, x)

    res_value = x * match_operand(convfact(unit, NO_UNITS), x)
    return Quantity(_keep_int(x, res_value), unit)
