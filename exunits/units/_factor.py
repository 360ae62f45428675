from __future__ import annotations

import math
import warnings
from fractions import Fraction
from numbers import Number
from typing import Any

from exunits.exceptions import (DimensionError, NumericRangeError,
                                InexactFactorWarning)
from exunits.types import coax_type
from . import _opts
from ._base import AnyUnit, absolute_unit, basefactor, tensfactor
from ._coerce import float_type_for
from ._dims import same_dimension

# Written by Eric J. Whitney, January 2020.

_COMP_CONV_CACHE: dict[tuple[AnyUnit, AnyUnit], Number] = {}
_cache_version = 0  # Options version the cache was computed under.


# ===========================================================================


def convfact(s: AnyUnit, t: AnyUnit, *, num_type: Any = None) -> Number:
    """
    Find the conversion factor from unit `t` to unit `s`, i.e.
    ``value_in_s = value_in_t * convfact(s, t)``.

    The factor is exact (``int`` or ``Fraction``) wherever the scales of
    the two units allow it, otherwise it is a ``float``.  Identical units
    always give exactly ``1``.  Affine (offset) units are converted
    using their underlying absolute units, i.e. the offset is not
    included.

    Examples
    --------
    >>> from exunits.units import m, cm, hr, s
    >>> convfact(m, cm)
    Fraction(1, 100)
    >>> convfact(hr, s)
    Fraction(1, 3600)
    >>> convfact(cm, m)
    100

    Parameters
    ----------
    s : Unit or AffineUnit
        Target units.
    t : Unit or AffineUnit
        Units being converted from.
    num_type : type, optional
        Numeric type of the values that the factor will be applied to.
        If given and the factor is inexact, it is converted to the float
        precision suited to `num_type` (see ``float_type_for()``).  Exact
        factors are returned unchanged.

    Returns
    -------
    factor : int, Fraction or float
        Conversion factor.

    Raises
    ------
    DimensionError
        If `s` and `t` have different dimensions.
    NumericRangeError
        If the factor overflows or underflows floating point range.
    """
    cf = _conversion_factor(s, t)
    if num_type is not None and isinstance(cf, float):
        return float_type_for(num_type)(cf)
    return cf


def clear_conversion_cache():
    """Discard all cached conversion factors."""
    _COMP_CONV_CACHE.clear()


# ===========================================================================

def _conversion_factor(s: AnyUnit, t: AnyUnit) -> Number:
    """
    Returns the factor for converting `t` -> `s`, using the cache if
    enabled.
    """
    # Conversion to same units gives unity.
    if s == t:
        return 1

    opts = _opts._unit_options
    if opts.cache_conversions:
        _sync_cache(opts)
        try:
            return _COMP_CONV_CACHE[s, t]
        except KeyError:
            pass

    factor = _compute_factor(s, t, opts)
    if opts.cache_conversions:
        _COMP_CONV_CACHE[s, t] = factor

    return factor


def _compute_factor(s: AnyUnit, t: AnyUnit,
                    opts: _opts.UnitOptions) -> Number:
    # Check if conversion is possible in principle.
    if not same_dimension(s.dim, t.dim):
        raise DimensionError(s, t)

    # Offsets play no part in the factor, so use absolute units.
    conv = absolute_unit(t) / absolute_unit(s)
    inex, ex = basefactor(conv)
    pwr = tensfactor(conv)
    inex_orig = inex

    # Put the decimal exponent into the exact part if the numerator or
    # denominator stays in range, otherwise into the inexact part.
    max_int = opts.max_exact_int
    fpow = _pow10(pwr)
    if pwr == 0:
        to_inex = False  # Nothing to fold.
    elif fpow > max_int or fpow < 1 / max_int:
        to_inex = True
    elif pwr > 0:
        to_inex = ex.numerator * 10 ** pwr > max_int
    else:
        to_inex = ex.denominator * 10 ** -pwr > max_int

    if to_inex:
        inex *= fpow
        if inex_orig == 1.0 and opts.warn_inexact_fallback:
            warnings.warn(f"Conversion factor '{t}' -> '{s}' exceeds the "
                          f"exact integer range and has been computed in "
                          f"floating point.", InexactFactorWarning)
    else:
        ex *= Fraction(10) ** pwr

    ex = coax_type(ex, int, default=ex)  # Whole numbers become int.

    # Drop a float coefficient that is effectively one so that the result
    # stays exact.
    if math.isclose(inex, 1.0, rel_tol=opts.unity_rtol):
        result = ex
    else:
        try:
            result = inex * ex
        except OverflowError:
            # Exact part alone is out of float range.
            result = _float_product(inex, ex)

    if _fp_overflow_underflow(inex_orig, result):
        raise NumericRangeError(
            "Floating point overflow/underflow, probably due to large "
            "exponents and/or SI prefixes in units.",
            from_unit=t, to_unit=s, pow=pwr)

    return result


def _float_product(x: float, ex: Number) -> float:
    """
    Returns ``x * ex`` computed exactly and rounded once to a float, giving
    ``inf`` if the result is out of range.
    """
    try:
        return float(Fraction(x) * ex)
    except OverflowError:
        return math.inf


def _fp_overflow_underflow(inex: float, result: Number) -> bool:
    """
    Returns ``True`` if a float `result` became infinite or zero when
    the original inexact coefficient `inex` was neither.  Exact results
    can't overflow.
    """
    if not isinstance(result, float):
        return False

    return ((not math.isfinite(result) and math.isfinite(inex)) or
            (result == 0.0 and inex != 0.0))


def _pow10(pwr: int) -> float:
    """Returns ``10.0 ** pwr``, giving ``inf`` if this overflows."""
    try:
        return 10.0 ** pwr
    except OverflowError:
        return math.inf


def _sync_cache(opts: _opts.UnitOptions):
    """Discard cached factors computed under different options."""
    global _cache_version
    # noinspection PyProtectedMember
    if opts._version != _cache_version:
        _COMP_CONV_CACHE.clear()
        _cache_version = opts._version
