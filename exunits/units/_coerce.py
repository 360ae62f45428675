from __future__ import annotations

from fractions import Fraction
from numbers import Number
from typing import Any

import numpy as np

# Written by Eric J. Whitney, January 2020.

# Narrow float types that are kept for conversion factors.  Anything
# else uses double precision.
_NARROW_FLOATS = (np.float16, np.float32)


# ===========================================================================


def float_type_for(num_type: Any) -> type:
    """
    Returns the floating point type to use for an inexact conversion
    factor applied to values of type `num_type`.

        - Half and single precision types (including ``np.complex64``,
          which has a single precision real part) give that precision
          (``np.float16``, ``np.float32``).
        - All other types give ``float`` (double precision).  This
          includes extended precision types such as ``np.longdouble``,
          because conversion factors only carry double precision in the
          first place.
        - If the precision can't be determined for any reason, ``float``
          is returned.

    Parameters
    ----------
    num_type :
        A Python numeric type, NumPy scalar type / dtype or anything else
        accepted by ``np.dtype()``.

    Returns
    -------
    float_type : type
        ``float``, ``np.float16`` or ``np.float32``.

    Examples
    --------
    >>> float_type_for(np.float32)
    <class 'numpy.float32'>
    >>> float_type_for(int)
    <class 'float'>
    """
    try:
        dt = np.dtype(num_type)
        if dt.kind == 'c':
            # Use the precision of the real component.
            dt = np.finfo(dt).dtype

        if dt.kind == 'f' and dt.type in _NARROW_FLOATS:
            return dt.type

    except (TypeError, ValueError):
        pass  # Unsupported type, use the default.

    return float


def value_type(value: Any) -> Any:
    """
    Returns the numeric type of `value`.  For NumPy arrays and scalars
    this is the ``dtype``, otherwise it is simply ``type(value)``.
    """
    if isinstance(value, (np.ndarray, np.generic)):
        return value.dtype
    return type(value)


def match_operand(c: Number, value: Any) -> Any:
    """
    Prepare constant `c` (e.g. a conversion factor or zero point) for
    arithmetic with `value`.  If `value` is a NumPy floating point or
    complex scalar / array, `c` is converted to the matching float
    precision so that the result keeps the numeric type of `value`.
    Otherwise `c` is returned unchanged (e.g. so that ``int`` and
    ``Fraction`` values stay exact).
    """
    if not isinstance(value, (np.ndarray, np.generic)):
        return c

    if value.dtype.kind not in 'fc' or isinstance(c, np.generic):
        return c

    ftype = float_type_for(value.dtype)
    if ftype is float:
        # Match double / extended precision of the value itself.
        ftype = np.finfo(value.dtype).dtype.type

    if isinstance(c, (int, Fraction, float)):
        return ftype(float(c))

    return c
