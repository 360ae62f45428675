"""
Units (:mod:`exunits.units`)
============================

.. currentmodule:: exunits.units

Conversion factors between units and conversion of quantities, kept
exact wherever possible.

Examples
--------

Quantities are made by multiplying a value by a unit, and converted
using ``uconvert()``.  Exact (``int`` / ``Fraction``) values stay exact
when the units involved have exact definitions:

>>> uconvert(hr, 3602 * s)
Quantity(Fraction(1801, 1800), hr)

The type of the value is preserved where possible; integers remain
integers when the result is whole:

>>> uconvert(ft, 144 * inch)
Quantity(12, ft)
>>> uconvert(m, 1.0 * km)
Quantity(1000.0, m)

The conversion factor itself is available from ``convfact()``:

>>> convfact(m, cm)
Fraction(1, 100)

Units that are different representations of the same thing convert
with a factor of exactly one:

>>> uconvert(J, 1.0 * (N * m))
Quantity(1.0, J)

Attempting to convert between different dimensions raises a
``DimensionError``:

>>> uconvert(kg, 1 * m)  # doctest: +ELLIPSIS, +IGNORE_EXCEPTION_DETAIL
Traceback (most recent call last):
...
exunits.exceptions.DimensionError: Dimensions of kg and m are not
compatible: Dimension(M=1) != Dimension(L=1)

Temperatures on offset scales (°C, °F) are affine units and their
offsets are included in conversions:

>>> uconvert(degF, 100 * degC)
Quantity(212, °F)
>>> uconvert(degC, 300 * K)
Quantity(Fraction(537, 20), °C)

Offset temperatures can't be used in derived units:

>>> degC / s  # doctest: +ELLIPSIS, +IGNORE_EXCEPTION_DETAIL
Traceback (most recent call last):
...
TypeError: Affine units are only permitted to be used on their own, got:
'°C'.

Decimal exponents (e.g. from SI prefixes) are folded into the exact
factor unless this would exceed the exact integer range (see
``set_unit_options``), in which case floating point is used and an
``InexactFactorWarning`` is issued.
"""

from ._base import (Unit, AffineUnit, AnyUnit, NO_UNITS, absolute_unit,
                    basefactor, tensfactor, is_affine, zero_point)
from ._coerce import float_type_for, match_operand, value_type
from ._dims import Dimension, NO_DIMS, dimension, same_dimension
from ._factor import convfact, clear_conversion_cache
from ._opts import (UnitOptions, get_unit_options, set_unit_options,
                    unit_options)
from ._quantity import (Quantity, QuantityType, convert, to_absolute,
                        uconvert)
from ._defs import *  # Sets up standard units.
