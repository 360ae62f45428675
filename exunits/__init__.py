"""
.. This module acts as the top-level API documentation.

.. module: exunits

Unit conversions that stay exact wherever possible.

.. autosummary::
    :toctree: generated/

    units
    exceptions
    types
"""

__version__ = "0.1.0"

import sys

# Written by Eric J. Whitney, November 2019.

# ======================================================================

assert sys.version_info >= (3, 11)

from exunits.exceptions import (DimensionError, NumericRangeError,
                                InexactFactorWarning)
from exunits.units import (Dimension, NO_DIMS, dimension, same_dimension,
                           Unit, AffineUnit, NO_UNITS, absolute_unit,
                           basefactor, tensfactor, is_affine, zero_point,
                           convfact, clear_conversion_cache, float_type_for,
                           Quantity, QuantityType, convert, to_absolute,
                           uconvert, UnitOptions, get_unit_options,
                           set_unit_options, unit_options)
