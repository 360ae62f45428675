from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, replace, field
from typing import Iterator

import numpy as np

# Written by Eric J. Whitney, January 2020.

# ======================================================================


@dataclass(frozen=True, kw_only=True)
class UnitOptions:
    """
    Dataclass that holds option flags for handling units.  See
    'get_unit_options' and  'set_unit_options' for full details.
    """
    cache_conversions: bool = True
    max_exact_int: int = int(np.iinfo(np.int64).max)
    unity_rtol: float = float(np.sqrt(np.finfo(np.float64).eps))
    warn_inexact_fallback: bool = True
    _version: int = field(default=0, repr=False, compare=False)

    def __post_init__(self):
        """Check certain values"""
        if self.max_exact_int < 1:
            raise ValueError("Require 'max_exact_int' >= 1.")
        if not (0.0 <= self.unity_rtol < 1.0):
            raise ValueError("Require 0 <= 'unity_rtol' < 1.")


# Create single instance and set defaults.
_unit_options = UnitOptions()


# ----------------------------------------------------------------------

def get_unit_options() -> UnitOptions:
    """
    Returns
    -------
    unit_options : UnitOptions
        Returns a UnitOptions object containing the options.  For a
        full description of each option, see `set_unit_options`.
    """
    return replace(_unit_options)


# noinspection PyIncorrectDocstring
def set_unit_options(**kwargs):
    """
    Set the current unit options.  Any cached conversion factors are
    discarded because they may depend on the previous options.

    Parameters
    ----------
    cache_conversions : bool, default = True
        If `True`, computed conversion factors are cached for faster
        repeat access. To ensure accurate handling of values only the
        requested conversion 'direction' is cached; the reverse
        conversion is not automatically computed and would need to be
        separately cached when encountered.

        .. note:: There is presently no size limit on this cache. This
           is normally not a problem as only a few types of conversions
           occur in any application.

    max_exact_int : int, default = 2**63 - 1
        Largest numerator or denominator permitted when folding a
        decimal exponent into an exact conversion factor.  Beyond this
        the exponent is applied in floating point instead.

    unity_rtol : float, default = sqrt(eps)
        Relative tolerance used to decide that a floating point
        coefficient is indistinguishable from 1.0 and can be dropped,
        leaving an exact factor.

    warn_inexact_fallback : bool, default = True
        Issue an `InexactFactorWarning` when an otherwise exact factor
        has to be computed in floating point because of its size.

    See Also
    --------
    get_unit_options, unit_options

    Examples
    --------
    >>> from exunits.units import set_unit_options, get_unit_options
    >>> set_unit_options(cache_conversions=False)
    >>> get_unit_options().cache_conversions
    False
    >>> set_unit_options(cache_conversions=True)
    """
    global _unit_options
    if '_version' in kwargs:
        raise TypeError("'_version' cannot be set directly.")
    _unit_options = replace(_unit_options,
                            _version=_unit_options._version + 1, **kwargs)


@contextmanager
def unit_options(**kwargs) -> Iterator[UnitOptions]:
    """
    Context manager that applies the given unit options (see
    `set_unit_options`) and restores the previous options on exit.

    Examples
    --------
    >>> from exunits.units import unit_options, get_unit_options
    >>> with unit_options(warn_inexact_fallback=False):
    ...     get_unit_options().warn_inexact_fallback
    False
    >>> get_unit_options().warn_inexact_fallback
    True
    """
    prev = {k: getattr(_unit_options, k) for k in kwargs}
    set_unit_options(**kwargs)
    try:
        yield get_unit_options()
    finally:
        set_unit_options(**prev)
