"""
Functions for changing numeric values between different types.
"""

import numbers


# =============================================================================


def coax_type(x, *types, default=None):
    """
    Try converting `x` into a series of types, returning first result which
    passes test:  next_type(`x`) == x.  NaN values are considered to pass
    the test when the result is also NaN.

    Examples
    --------
    >>> coax_type(3.5, int, float)  # float result.
    3.5
    >>> coax_type(3.0, int, str)  # int result.
    3
    >>> from fractions import Fraction
    >>> coax_type(Fraction(6, 3), int)  # Whole fraction gives int.
    2
    >>> coax_type("3.0", int, float)  # Error: 3.0 != "3.0".
    Traceback (most recent call last):
    ...
    ValueError: Couldn't coax '3.0' to <class 'int'> or <class 'float'>.
    >>> xa = 3 + 2j
    >>> coax_type(xa, int, float, default=xa)  # Can't conv., gives default.
    (3+2j)

    Parameters
    ----------
    x :
        Argument to be converted.
    types : list_like
        Target types to use when trying conversion.
    default :
        Value to return if conversion was unsuccessful.

    Returns
    -------
    x_converted :
        `x` converted to the first successful type (if possible) or default.

    Raises
    ------
    ValueError
        If default is None and conversion was unsuccessful.
    """
    for this_type in types:
        try:
            res = this_type(x)
            if isinstance(x, numbers.Number):
                # Equality test applies to numeric values.
                if res == x or (_is_nan(res) and _is_nan(x)):
                    return res

        except (TypeError, ValueError, OverflowError):
            pass
    if default is not None:
        return default
    else:
        raise ValueError(f"Couldn't coax {repr(x)} to "
                         f"{' or '.join(str(t) for t in types)}.")


def _is_nan(x) -> bool:
    # NaN is the only value that compares unequal to itself.
    return x != x
