"""
Standard unit definitions.  All units are defined relative to the SI base
unit of their dimension, with exact factors used wherever the definition
of the unit is exact.
"""
import math
from fractions import Fraction

from ._base import AffineUnit, Unit, NO_UNITS
from ._dims import Dimension

# Written by Eric J. Whitney, January 2020.

__all__ = [
    'LENGTH', 'MASS', 'TIME', 'CURRENT', 'TEMPERATURE', 'AMOUNT',
    'LUMINOSITY', 'SI_PREFIXES', 'si_prefix',
    # Dimensionless.
    'percent', 'rad', 'deg',
    # Mass.
    'kg', 'g', 'mg', 't', 'lbm', 'slug',
    # Length.
    'm', 'km', 'cm', 'mm', 'um', 'nm', 'inch', 'ft', 'ft_US', 'yd', 'mi',
    'NM',
    # Time.
    's', 'ms', 'minute', 'hr', 'day',
    # Temperature.
    'K', 'Ra', 'degC', 'degF',
    # Amount, current, luminosity.
    'mol', 'kmol', 'mmol', 'A', 'mA', 'cd',
    # Derived.
    'ha', 'L', 'mL', 'kph', 'kt', 'mph', 'G', 'N', 'kN', 'lbf', 'Pa',
    'kPa', 'MPa', 'bar', 'atm', 'psi', 'J', 'kJ', 'cal', 'Btu', 'eV', 'W',
    'kW', 'hp']

# -- Dimensions --------------------------------------------------------

LENGTH = Dimension(L=1)
MASS = Dimension(M=1)
TIME = Dimension(T=1)
CURRENT = Dimension(I=1)
TEMPERATURE = Dimension(θ=1)
AMOUNT = Dimension(N=1)
LUMINOSITY = Dimension(J=1)

# -- SI Prefixes -------------------------------------------------------

SI_PREFIXES = {
    'Q': 30, 'R': 27, 'Y': 24, 'Z': 21, 'E': 18, 'P': 15, 'T': 12, 'G': 9,
    'M': 6, 'k': 3, 'h': 2, 'da': 1, 'd': -1, 'c': -2, 'm': -3, 'μ': -6,
    'n': -9, 'p': -12, 'f': -15, 'a': -18, 'z': -21, 'y': -24, 'r': -27,
    'q': -30}


def si_prefix(prefix: str, unit: Unit) -> Unit:
    """
    Returns `unit` scaled by the given SI prefix, e.g. ``si_prefix('k',
    m)`` gives km.  The decimal exponent is kept exact.

    Raises
    ------
    ValueError
        If `prefix` is not a known SI prefix.
    """
    try:
        pwr = SI_PREFIXES[prefix]
    except KeyError:
        raise ValueError(f"Unknown SI prefix '{prefix}'.")

    return unit.prefixed(pwr, prefix + unit.name)


# == Base Unit Definitions =============================================

# -- Dimensionless -----------------------------------------------------

percent = NO_UNITS.scaled(Fraction(1, 100), '%')
rad = NO_UNITS.named('rad')
deg = rad.scaled(math.pi / 180, '°')  # Inexact.

# -- Mass --------------------------------------------------------------

kg = Unit('kg', MASS)
g = kg.prefixed(-3, 'g')
mg = si_prefix('m', g)
t = kg.scaled(1000, 't')  # Note: t = Metric tonne.
lbm = kg.scaled(Fraction(45359237, 10 ** 8), 'lbm')
# Defn Intl & US Standard Pound.

# -- Length ------------------------------------------------------------

m = Unit('m', LENGTH)
km = si_prefix('k', m)
cm = si_prefix('c', m)
mm = si_prefix('m', m)
um = si_prefix('μ', m)
nm = si_prefix('n', m)

inch = m.scaled(Fraction(254, 10000), 'in')  # Defn British, US, industry.
ft = inch.scaled(12, 'ft')  # International foot.
yd = ft.scaled(3, 'yd')
mi = yd.scaled(1760, 'mi')
NM = m.scaled(1852, 'NM')  # International NM.

ft_US = m.scaled(Fraction(1200, 3937), 'ft_US')
# US Survey Foot per National Bureau of Standards F.R. Doc. 59-5442.

# -- Time --------------------------------------------------------------

s = Unit('s', TIME)
ms = si_prefix('m', s)
minute = s.scaled(60, 'min')
hr = minute.scaled(60, 'hr')
day = hr.scaled(24, 'day')

# -- Temperature -------------------------------------------------------

K = Unit('K', TEMPERATURE)
Ra = K.scaled(Fraction(5, 9), '°R')

# Offset scales.  Zero points are the readings at absolute zero.
degC = AffineUnit('°C', K, Fraction(-27315, 100))
degF = AffineUnit('°F', Ra, Fraction(-45967, 100))

# -- Amount of Substance, Current, Luminous Intensity ------------------

mol = Unit('mol', AMOUNT)
kmol = si_prefix('k', mol)
mmol = si_prefix('m', mol)

A = Unit('A', CURRENT)
mA = si_prefix('m', A)

cd = Unit('cd', LUMINOSITY)

# == Derived Unit Definitions ==========================================

# -- Area / Volume -----------------------------------------------------

ha = (m ** 2).scaled(10000, 'ha')
L = (m ** 3).scaled(Fraction(1, 1000), 'L')
mL = si_prefix('m', L)

# -- Speed / Acceleration ----------------------------------------------

kph = (km / hr).named('kph')
kt = (NM / hr).named('kt')
mph = (mi / hr).named('mph')

G = (m / s ** 2).scaled(Fraction(980665, 100000), 'G')
# WGS-84 definition.

# -- Force -------------------------------------------------------------

N = (kg * m / s ** 2).named('N')
kN = si_prefix('k', N)
lbf = (lbm * G).named('lbf')
slug = (lbf * s ** 2 / ft).named('slug')

# -- Pressure ----------------------------------------------------------

Pa = (N / m ** 2).named('Pa')
kPa = si_prefix('k', Pa)
MPa = si_prefix('M', Pa)
bar = Pa.scaled(100000, 'bar')
atm = Pa.scaled(101325, 'atm')  # ISO 2533-1975
psi = (lbf / inch ** 2).named('psi')

# -- Energy ------------------------------------------------------------

J = (N * m).named('J')
kJ = si_prefix('k', J)
cal = J.scaled(Fraction(4184, 1000), 'cal')  # Thermochemical calorie.
Btu = J.scaled(Fraction(105506, 100), 'Btu')  # ISO British Thermal Unit.
eV = J.scaled(1602176634, 'eV').prefixed(-28, 'eV')  # Exact since 2019.

# -- Power -------------------------------------------------------------

W = (J / s).named('W')
kW = si_prefix('k', W)
hp = (ft * lbf / s).scaled(550, 'hp')
