from __future__ import annotations

from collections.abc import Mapping, Iterator
from fractions import Fraction
from numbers import Number, Rational
from typing import Union

from exunits.types import coax_type

# Written by Eric J. Whitney, January 2020.

ExponentLike = Union[int, Fraction]

# Order used when displaying dimensions.  Other symbols follow in
# alphabetical order.
_SYMBOL_ORDER = ('M', 'L', 'T', 'θ', 'N', 'I', 'J')


# ===========================================================================


class Dimension(Mapping):
    """
    ``Dimension`` represents a physical dimension as an immutable mapping
    of fundamental dimension symbols (e.g. length ``'L'``, mass ``'M'``,
    time ``'T'``) to exact rational exponents.

    Symbols that are not present have an exponent of zero, and zero
    exponents are dropped on construction.  This means that two
    dimensions compare equal exactly when all exponents match, which is
    the compatibility test used for all conversions.

    Examples
    --------
    >>> velocity = Dimension(L=1, T=-1)
    >>> velocity == Dimension({'L': 1, 'T': -1, 'M': 0})
    True
    >>> velocity ** 2
    Dimension(L=2, T=-2)
    """

    __slots__ = ('_exps', '_hash')

    def __init__(self, exps: Mapping[str, ExponentLike] = None, /,
                 **kwargs: ExponentLike):
        merged = dict(exps or {})
        merged.update(kwargs)

        res = {}
        for sym, exp in merged.items():
            if not isinstance(sym, str) or not sym:
                raise ValueError(f"Dimension symbols must be non-empty "
                                 f"strings, got {sym!r}.")
            exp = _exact_exponent(exp)
            if exp != 0:
                res[sym] = exp

        object.__setattr__(self, '_exps', res)
        object.__setattr__(self, '_hash', hash(frozenset(res.items())))

    # -- Mapping Interface --------------------------------------------------

    def __getitem__(self, sym: str) -> ExponentLike:
        # Missing symbols are not an error; they simply have no power.
        return self._exps.get(sym, 0)

    def __contains__(self, sym) -> bool:
        return sym in self._exps

    def __iter__(self) -> Iterator[str]:
        return iter(self._exps)

    def __len__(self) -> int:
        return len(self._exps)

    def __setattr__(self, key, value):
        raise AttributeError("Dimension objects are immutable.")

    # -- Comparison / Hashing -----------------------------------------------

    def __eq__(self, rhs) -> bool:
        if not isinstance(rhs, Dimension):
            return NotImplemented
        return self._exps == rhs._exps

    def __hash__(self) -> int:
        return self._hash

    # -- Binary Operators ---------------------------------------------------

    def __mul__(self, rhs: Dimension) -> Dimension:
        if not isinstance(rhs, Dimension):
            return NotImplemented
        res = dict(self._exps)
        for sym, exp in rhs._exps.items():
            res[sym] = res.get(sym, 0) + exp
        return Dimension(res)

    def __truediv__(self, rhs: Dimension) -> Dimension:
        if not isinstance(rhs, Dimension):
            return NotImplemented
        return self * rhs ** -1

    def __pow__(self, pwr: ExponentLike) -> Dimension:
        pwr = _exact_exponent(pwr)
        return Dimension({sym: exp * pwr for sym, exp in self._exps.items()})

    # -- String Magic Methods -----------------------------------------------

    def __repr__(self) -> str:
        parts = [f"{sym}={exp}" if isinstance(exp, int)
                 else f"{sym}=Fraction({exp.numerator}, {exp.denominator})"
                 for sym, exp in self._sorted_items()]
        return f"Dimension({', '.join(parts)})"

    # -- Normal Methods -----------------------------------------------------

    @property
    def is_dimless(self) -> bool:
        """``True`` if all exponents are zero."""
        return not self._exps

    def _sorted_items(self) -> list[tuple[str, ExponentLike]]:
        def order(item):
            sym = item[0]
            if sym in _SYMBOL_ORDER:
                return 0, _SYMBOL_ORDER.index(sym), sym
            return 1, 0, sym

        return sorted(self._exps.items(), key=order)


NO_DIMS = Dimension()
"""The dimension of dimensionless values (all exponents zero)."""


# ---------------------------------------------------------------------------

def dimension(x) -> Dimension | None:
    """
    Returns the dimension of `x`:

        - ``Dimension``: Returned directly.
        - Units (linear or affine): The dimension of the unit.
        - ``Quantity``: The dimension of its units.
        - Plain numbers (including numpy values): ``NO_DIMS``.
        - ``None`` (absent value): ``None``.
    """
    if x is None:
        return None

    if isinstance(x, Dimension):
        return x

    # Units and quantities expose a 'dim' attribute / property.
    dim = getattr(x, 'dim', None)
    if isinstance(dim, Dimension):
        return dim

    return NO_DIMS


def same_dimension(d1: Dimension, d2: Dimension) -> bool:
    """
    Returns ``True`` if dimensions `d1` and `d2` are exactly equal.  There
    is no tolerance as exponents are exact rationals.
    """
    return d1 == d2


# ===========================================================================

def _exact_exponent(exp) -> ExponentLike:
    """
    Convert `exp` to an exact exponent, giving an `int` where possible
    or otherwise a `Fraction`.  Float exponents are accepted if they are
    simple fractions (e.g. 0.5).
    """
    if isinstance(exp, bool) or not isinstance(exp, Number):
        raise TypeError(f"Dimension exponent must be a number, got "
                        f"{exp!r}.")

    if not isinstance(exp, Rational):
        try:
            exp = Fraction(exp).limit_denominator(1000)
        except (TypeError, ValueError, OverflowError):
            raise TypeError(f"Dimension exponent must be a real finite "
                            f"number, got {exp!r}.")
    else:
        exp = Fraction(exp)

    return coax_type(exp, int, default=exp)
