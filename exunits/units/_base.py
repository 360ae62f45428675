from __future__ import annotations

import math
from dataclasses import dataclass, replace
from fractions import Fraction
from numbers import Number, Rational
from typing import TYPE_CHECKING, Union

import numpy as np

from ._dims import Dimension, NO_DIMS

if TYPE_CHECKING:
    from ._quantity import Quantity

# Written by Eric J. Whitney, January 2020.

ExactScalar = Union[int, Fraction]


# ===========================================================================


@dataclass(frozen=True)
class Unit:
    """
    ``Unit`` is an immutable description of a linear (purely
    multiplicative) unit.  One of these units is equal to::

        inex * ex * 10**pow

    base units of dimension `dim`, where `ex` is an exact rational, `inex`
    is a float holding any part of the scale that is not exactly known and
    `pow` is a decimal exponent (typically from an SI prefix).  Keeping
    these three parts separate allows conversion factors to be computed
    exactly wherever possible.

    Units are hashable and compare equal only when the name, dimension
    and scale all match.  Two different units can have the same scale
    (e.g. ``N·m`` and ``J``); these convert with a factor of exactly one.

    .. note:: ``Unit`` objects are not normally created directly.  Refer
       to the standard units in ``exunits.units`` and the methods
       ``scaled()``, ``prefixed()`` and ``named()`` for deriving new ones.

    Examples
    --------
    >>> from exunits.units import m, s
    >>> fps = (m / s).named('m/s')
    >>> fps.dim
    Dimension(L=1, T=-1)
    """
    name: str
    dim: Dimension = NO_DIMS
    ex: ExactScalar = 1
    inex: float = 1.0
    pow: int = 0

    # Make numpy defer to __rmul__ so that array * unit gives a Quantity.
    __array_ufunc__ = None

    def __post_init__(self):
        if not isinstance(self.dim, Dimension):
            raise TypeError(f"Unit '{self.name}' requires a Dimension, got "
                            f"{self.dim!r}.")

        if not isinstance(self.ex, Rational) or self.ex <= 0:
            raise ValueError(f"Unit '{self.name}' exact factor must be a "
                             f"positive rational, got {self.ex!r}.")

        inex = float(self.inex)
        if not (inex > 0 and math.isfinite(inex)):
            raise ValueError(f"Unit '{self.name}' inexact factor must be "
                             f"positive and finite, got {self.inex!r}.")

        if int(self.pow) != self.pow:
            raise ValueError(f"Unit '{self.name}' decimal exponent must be "
                             f"an integer, got {self.pow!r}.")

        object.__setattr__(self, 'ex', Fraction(self.ex))
        object.__setattr__(self, 'inex', inex)
        object.__setattr__(self, 'pow', int(self.pow))

    # -- Binary Operators ---------------------------------------------------

    def __mul__(self, rhs: Unit) -> Unit:
        """
        Multiply two units, giving a derived unit.  The exact, inexact
        and decimal parts of the scale are combined separately.
        """
        if isinstance(rhs, AffineUnit):
            raise _affine_combine_error(rhs)
        if not isinstance(rhs, Unit):
            return NotImplemented

        return Unit(f"{self.name}·{rhs.name}", self.dim * rhs.dim,
                    ex=self.ex * rhs.ex, inex=self.inex * rhs.inex,
                    pow=self.pow + rhs.pow)

    def __truediv__(self, rhs: Unit) -> Unit:
        if isinstance(rhs, AffineUnit):
            raise _affine_combine_error(rhs)
        if not isinstance(rhs, Unit):
            return NotImplemented

        return Unit(f"{self.name}/{_bracket(rhs.name)}", self.dim / rhs.dim,
                    ex=self.ex / rhs.ex, inex=self.inex / rhs.inex,
                    pow=self.pow - rhs.pow)

    def __pow__(self, pwr: int | Fraction) -> Unit:
        """
        Raise unit to a power.  Integer powers keep the scale exact.  For
        a fractional power the exact part and any decimal exponent that
        doesn't divide evenly become part of the inexact factor.
        """
        if isinstance(pwr, bool) or not isinstance(pwr, Number):
            return NotImplemented

        pwr = Fraction(pwr).limit_denominator(1000)
        name = f"{_bracket(self.name)}^{pwr}"
        if pwr.denominator == 1:
            n = pwr.numerator
            return Unit(name, self.dim ** n, ex=self.ex ** n,
                        inex=self.inex ** n, pow=self.pow * n)

        inex = (self.inex * float(self.ex)) ** float(pwr)
        res_pow = self.pow * pwr
        if res_pow.denominator != 1:
            inex *= 10.0 ** float(res_pow)
            res_pow = 0

        return Unit(name, self.dim ** pwr, ex=1, inex=inex,
                    pow=int(res_pow))

    def __rmul__(self, lhs) -> Quantity:
        """
        Multiplying a number by a unit gives a ``Quantity``, e.g.
        ``3602 * s``.
        """
        if not _is_value(lhs):
            return NotImplemented
        from ._quantity import Quantity
        return Quantity(lhs, self)

    # -- String Magic Methods -----------------------------------------------

    def __repr__(self) -> str:
        return self.name if self.name else '∅'

    # -- Normal Methods -----------------------------------------------------

    def named(self, name: str) -> Unit:
        """Returns the same unit with a new `name`."""
        return replace(self, name=name)

    def prefixed(self, pwr: int, name: str) -> Unit:
        """
        Returns a new unit scaled by ``10**pwr``, e.g. an SI prefix.  The
        decimal exponent is kept separate so that it remains exact.
        """
        return replace(self, name=name, pow=self.pow + pwr)

    def scaled(self, factor: Number, name: str) -> Unit:
        """
        Returns a new unit equal to `factor` of this unit.  Integer and
        ``Fraction`` factors are exact, float factors are inexact.
        """
        if isinstance(factor, Rational):
            return replace(self, name=name, ex=self.ex * factor)

        return replace(self, name=name, inex=self.inex * float(factor))


@dataclass(frozen=True)
class AffineUnit:
    """
    ``AffineUnit`` describes a unit on an offset scale such as °C or °F.
    It has the same scale as its (linear) `base` unit, but its zero is
    shifted: a reading of `zero` in this unit corresponds to zero of the
    `base` unit.  For example, °C has base unit K and ``zero = -273.15``.

    Affine units can only be used on their own; they cannot be combined
    into derived units as there is no way to multiply out the offset.
    """
    name: str
    base: Unit
    zero: Number = 0

    __array_ufunc__ = None

    def __post_init__(self):
        if not isinstance(self.base, Unit):
            raise TypeError(f"Affine unit '{self.name}' requires a linear "
                            f"base unit, got {self.base!r}.")
        if isinstance(self.zero, float) and not math.isfinite(self.zero):
            raise ValueError(f"Affine unit '{self.name}' zero point must "
                             f"be finite.")

    @property
    def dim(self) -> Dimension:
        return self.base.dim

    def __mul__(self, rhs):
        if isinstance(rhs, (Unit, AffineUnit)):
            raise _affine_combine_error(self)
        return NotImplemented

    __truediv__ = __mul__

    def __pow__(self, pwr):
        raise _affine_combine_error(self)

    def __rmul__(self, lhs) -> Quantity:
        if not _is_value(lhs):
            return NotImplemented
        from ._quantity import Quantity
        return Quantity(lhs, self)

    def __repr__(self) -> str:
        return self.name


AnyUnit = Union[Unit, AffineUnit]

NO_UNITS = Unit('', NO_DIMS)
"""Dimensionless unit with a scale of exactly one."""


# ---------------------------------------------------------------------------

def absolute_unit(u: AnyUnit) -> Unit:
    """
    Returns the purely multiplicative unit underlying `u`.  For an affine
    unit this is its base unit, otherwise `u` is returned directly.
    """
    if isinstance(u, AffineUnit):
        return u.base
    return u


def basefactor(u: AnyUnit) -> tuple[float, Fraction]:
    """
    Returns the ``(inex, ex)`` parts of the scale of `u` relative to the
    base unit of its dimension.  The decimal exponent is not included,
    see ``tensfactor()``.
    """
    u = absolute_unit(u)
    return u.inex, u.ex


def tensfactor(u: AnyUnit) -> int:
    """Returns the decimal exponent of the scale of `u`."""
    return absolute_unit(u).pow


def is_affine(u: AnyUnit) -> bool:
    """Returns ``True`` if `u` is on an offset (affine) scale."""
    return isinstance(u, AffineUnit)


def zero_point(u: AnyUnit) -> Number:
    """
    Returns the reading in `u` that corresponds to zero of its absolute
    unit.  This is zero for linear units.
    """
    if isinstance(u, AffineUnit):
        return u.zero
    return 0


# ===========================================================================

def _affine_combine_error(u: AffineUnit) -> TypeError:
    return TypeError(f"Affine units are only permitted to be used on their "
                     f"own, got: '{u.name}'.")


def _bracket(name: str) -> str:
    if any(c in name for c in '·/^'):
        return f"({name})"
    return name


def _is_value(x) -> bool:
    """
    Returns ``True`` if `x` can be the value of a ``Quantity``, i.e. a
    number or NumPy array (but not a ``Quantity`` or unit).
    """
    return isinstance(x, (Number, np.ndarray))
