"""
Exceptions and warnings raised by unit conversions.
"""

# Written by Eric J. Whitney, April 2023.


# ======================================================================

class DimensionError(ValueError):
    """
    This exception is raised when two objects that are required to have
    the same dimensions (e.g. both lengths, both pressures) do not.  The
    offending objects are retained to allow the reason for the failure
    to be determined.

    Notes
    -----
    `DimensionError` is a `ValueError` so that existing handlers for
    invalid unit operations will also catch it.
    """

    def __init__(self, x, y, *args):
        """
        Parameters
        ----------
        x, y :
            The two objects (units, quantities, dimensions or plain
            numbers) with incompatible dimensions.
        args :
            Passed to `ValueError`.
        """
        super().__init__(*args)
        self.x, self.y = x, y

    def __str__(self):
        from exunits.units._dims import dimension

        error_str = (f"Dimensions of {self.x!r} and {self.y!r} are not "
                     f"compatible: {dimension(self.x)!r} != "
                     f"{dimension(self.y)!r}")
        extra = super().__str__()
        if extra:
            error_str += f"\n{extra}"
        return error_str


class NumericRangeError(OverflowError):
    """
    This exception is raised when a conversion factor cannot be
    represented without floating point overflow or underflow.  This
    normally happens when units include very large exponents and / or SI
    prefixes.

    Notes
    -----
    `NumericRangeError` may also have additional attributes not listed
    here depending on where it was raised.
    """

    def __init__(self, *args, details: str = None, **kwargs):
        """
        Parameters
        ----------
        args :
            Passed to `OverflowError`.
        details : str, default = None
            Additional text relating to the specific failure.
        kwargs :
            Additional attributes can be added to the object using
            keyword arguments (e.g. `from_unit`, `to_unit`).
        """
        super().__init__(*args)
        self.details = details
        for k, v in kwargs.items():
            setattr(self, k, v)

    def __str__(self):
        """Add additional details below the main failure notice."""
        error_str = super().__str__()
        for k, v in self.__dict__.items():
            if k.startswith('__'):
                continue  # e.g. __notes__ from add_note().
            if v is not None:
                error_str += f"\n{k} -> {v}"
        return error_str


class InexactFactorWarning(UserWarning):
    """
    Issued when a conversion factor that would otherwise be exact had to
    be computed in floating point to stay within the exact integer range.
    """
    pass
