#!/usr/bin/env python3

# Examples of unit conversions.
# Written by: Eric J. Whitney  Last updated: 8 January 2020

import warnings

import numpy as np

from exunits import InexactFactorWarning
from exunits.units import (uconvert, convert, convfact, to_absolute,
                           QuantityType, Quantity, m, ft, kg, lbm, G, N, lbf,
                           s, hr, kt, slug, J, eV, degC, degF, K, percent)


# ----------------------------------------------------------------------------

def main():
    wing_area = (10 * 1.5) * (m * m)
    print(f"Wing area = {wing_area} [{uconvert(ft * ft, wing_area)}]")

    takeoff_mass = 300 * kg
    print(f"Takeoff mass = {takeoff_mass} "
          f"[{uconvert(lbm, takeoff_mass)}]")

    # Exact definitions give exact factors.
    print(f"lbf -> N factor = {convfact(N, lbf)}")
    print(f"1 G = {uconvert(ft / s ** 2, 1 * G)}")
    print(f"1 slug = {uconvert(lbm, 1.0 * slug).value:.5f} lbm")
    print(f"3602 s = {uconvert(hr, 3602 * s)}")

    # Values keep their own precision.
    speeds = Quantity(np.array([50, 60, 70], dtype=np.float32), kt)
    fps = uconvert(ft / s, speeds)
    print(f"Speeds = {fps.value} ft/s [{fps.value.dtype}]")

    # Offset temperature scales.
    oat = 15 * degC
    print(f"OAT = {oat} = {uconvert(degF, oat)} = {to_absolute(oat)}")
    print(f"As float = {convert(QuantityType(float, unit=K), oat)}")

    print(f"Efficiency = {convert(float, 85 * percent)}")

    # Very large decimal exponents fall back to floating point.
    with warnings.catch_warnings(record=True) as w:
        warnings.simplefilter('always', InexactFactorWarning)
        print(f"1 eV = {convfact(J, eV)} J")
    for warning in w:
        print(f"Warning: {warning.message}")


# -----------------------------------------------------------------------------

if __name__ == "__main__":
    main()
