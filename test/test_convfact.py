from unittest import TestCase


class TestConvFact(TestCase):
    def setUp(self):
        from exunits.units import clear_conversion_cache
        clear_conversion_cache()

    def test_exact(self):
        from fractions import Fraction
        from exunits.units import (convfact, m, cm, km, mm, hr, s, ft, ft_US,
                                   inch, J, N, lbf, lbm, G, kg, degC, degF, K,
                                   Ra)

        # Identical units are exactly one.
        for u in (m, hr, degC, N * m):
            with self.subTest(u=u):
                self.assertEqual(convfact(u, u), 1)
                self.assertIsInstance(convfact(u, u), int)

        self.assertEqual(convfact(m, cm), Fraction(1, 100))
        self.assertEqual(convfact(km, mm), Fraction(1, 1000000))
        self.assertEqual(convfact(hr, s), Fraction(1, 3600))
        self.assertEqual(convfact(ft, m), Fraction(1250, 381))
        self.assertEqual(convfact(m, ft_US), Fraction(1200, 3937))

        # Whole factors are given as int.
        self.assertEqual(convfact(cm, m), 100)
        self.assertIsInstance(convfact(cm, m), int)
        self.assertEqual(convfact(inch, ft), 12)
        self.assertIsInstance(convfact(inch, ft), int)

        # Different representations of the same unit.
        self.assertEqual(convfact(J, N * m), 1)
        self.assertIsInstance(convfact(J, N * m), int)
        self.assertEqual(convfact(N, lbf),
                         Fraction(45359237, 10 ** 8) * Fraction(980665, 10 ** 5))
        self.assertEqual(convfact(kg * G, lbf), Fraction(45359237, 10 ** 8))
        self.assertEqual(convfact(lbm, kg), Fraction(10 ** 8, 45359237))

        # Affine units use their absolute scales (no offsets).
        self.assertEqual(convfact(degC, K), 1)
        self.assertEqual(convfact(degF, degC), Fraction(9, 5))
        self.assertEqual(convfact(K, Ra), Fraction(5, 9))

    def test_inexact(self):
        import math
        from fractions import Fraction
        import numpy as np
        from exunits.units import convfact, rad, deg, m, cm

        f = convfact(rad, deg)
        self.assertIsInstance(f, float)
        self.assertAlmostEqual(f, math.pi / 180)

        # Inexact factors follow the precision of the values.
        f = convfact(rad, deg, num_type=np.float32)
        self.assertIsInstance(f, np.float32)
        f = convfact(rad, deg, num_type=np.dtype('float16'))
        self.assertIsInstance(f, np.float16)
        f = convfact(rad, deg, num_type=np.longdouble)
        self.assertIsInstance(f, float)

        # ... but exact factors are unaffected.
        f = convfact(m, cm, num_type=np.float32)
        self.assertEqual(f, Fraction(1, 100))
        self.assertIsInstance(f, Fraction)

    def test_dimension_error(self):
        from exunits import DimensionError
        from exunits.units import convfact, kg, m, degC, s

        with self.assertRaises(DimensionError) as cm:
            convfact(kg, m)
        self.assertIs(cm.exception.x, kg)
        self.assertIs(cm.exception.y, m)
        self.assertIn('not compatible', str(cm.exception))

        with self.assertRaises(ValueError):  # Also a ValueError.
            convfact(degC, s)

    def test_dimension_check(self):
        from unittest import mock
        from exunits import DimensionError
        from exunits.units import (convfact, uconvert, convert, QuantityType,
                                   same_dimension, kg, m, km, degC, percent)

        # All dimension checks go through same_dimension().
        with mock.patch('exunits.units._factor.same_dimension',
                        wraps=same_dimension) as check:
            convfact(m, km)
            check.assert_called_once_with(m.dim, km.dim)

        with mock.patch('exunits.units._quantity.same_dimension',
                        wraps=same_dimension) as check:
            with self.assertRaises(DimensionError):
                uconvert(degC, 1 * kg)
            self.assertEqual(check.call_count, 1)

            with self.assertRaises(DimensionError):
                uconvert(m, 3)
            self.assertEqual(check.call_count, 2)

            uconvert(percent, 3)
            self.assertEqual(check.call_count, 3)

            with self.assertRaises(DimensionError):
                convert(QuantityType(float, unit=m), 2 * kg)
            self.assertEqual(check.call_count, 4)

    def test_large_exponents(self):
        import math
        import warnings
        from exunits import InexactFactorWarning
        from exunits.units import convfact, si_prefix, m, J, eV, unit_options

        Em, Zm = si_prefix('E', m), si_prefix('Z', m)
        Ym, ym = si_prefix('Y', m), si_prefix('y', m)

        # Still inside the exact integer range.
        f = convfact(m, Em)
        self.assertEqual(f, 10 ** 18)
        self.assertIsInstance(f, int)

        # Outside the exact range, folded into a float with a warning.
        with self.assertWarns(InexactFactorWarning):
            f = convfact(m, Zm)
        self.assertIsInstance(f, float)
        self.assertEqual(f, 1e21)

        with self.assertWarns(InexactFactorWarning):
            f = convfact(ym, Ym)
        self.assertEqual(f, 1e48)

        with self.assertWarns(InexactFactorWarning):
            f = convfact(J, eV)
        self.assertTrue(math.isclose(f, 1.602176634e-19, rel_tol=1e-12))

        # Exact part also counts towards the integer range.
        u = m.scaled(10, 'dam').prefixed(18, 'Edam')
        with self.assertWarns(InexactFactorWarning):
            f = convfact(m, u)
        self.assertIsInstance(f, float)
        self.assertEqual(f, 1e19)

        with self.assertWarns(InexactFactorWarning):
            f = convfact(u, m)
        self.assertTrue(math.isclose(f, 1e-19, rel_tol=1e-12))

        # The warning can be switched off.
        with unit_options(warn_inexact_fallback=False):
            with warnings.catch_warnings(record=True) as w:
                warnings.simplefilter('always')
                f = convfact(ym, Ym)
            self.assertEqual(len(w), 0)
            self.assertEqual(f, 1e48)

    def test_no_exponent_stays_exact(self):
        import warnings
        from fractions import Fraction
        from exunits.units import convfact, m, ft

        # No decimal exponent to fold, so the factor stays exact and no
        # warning is given even though the denominator is very large.
        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter('always')
            f = convfact(m ** 7, ft ** 7)
        self.assertEqual(len(w), 0)
        self.assertIsInstance(f, Fraction)
        self.assertEqual(f, Fraction(381, 1250) ** 7)

    def test_max_exact_int(self):
        from exunits import InexactFactorWarning
        from exunits.units import convfact, km, mm, unit_options

        with unit_options(max_exact_int=10 ** 6):
            f = convfact(mm, km)
            self.assertEqual(f, 10 ** 6)
            self.assertIsInstance(f, int)

        with unit_options(max_exact_int=10 ** 6 - 1):
            with self.assertWarns(InexactFactorWarning):
                f = convfact(mm, km)
            self.assertIsInstance(f, float)
            self.assertEqual(f, 1e6)

        # Recomputed once the option is restored.
        self.assertIsInstance(convfact(mm, km), int)

    def test_numeric_range(self):
        import math
        from exunits import NumericRangeError
        from exunits.units import convfact, m, unit_options

        huge = m.prefixed(400, 'huge')
        with unit_options(warn_inexact_fallback=False):
            with self.assertRaises(NumericRangeError) as cm:
                convfact(m, huge)  # Overflow.
            self.assertIs(cm.exception.from_unit, huge)
            self.assertIs(cm.exception.to_unit, m)
            self.assertEqual(cm.exception.pow, 400)
            self.assertIn('pow -> 400', str(cm.exception))

            with self.assertRaises(NumericRangeError):
                convfact(huge, m)  # Underflow.

            with self.assertRaises(OverflowError):  # Also an OverflowError.
                convfact(m, huge)

        # Already inexact units can also go out of range.
        bigger = m.scaled(1e200, 'big').prefixed(200, 'bigger')
        with self.assertRaises(NumericRangeError):
            convfact(m, bigger)
        with self.assertRaises(NumericRangeError):
            convfact(bigger, m)

        # Exact part too large for a float.
        x = m.scaled(1.5, 'x')
        big = m.scaled(10 ** 400, 'big')
        with self.assertRaises(NumericRangeError) as cm:
            convfact(x, big)
        self.assertIs(cm.exception.from_unit, big)
        self.assertIs(cm.exception.to_unit, x)
        self.assertEqual(cm.exception.pow, 0)
        with self.assertRaises(NumericRangeError):
            convfact(big, x)  # Underflow.

        # ... unless the inexact part brings it back into range.
        scaled_big = big.scaled(1e-300, 'scaled_big')
        f = convfact(m, scaled_big)
        self.assertIsInstance(f, float)
        self.assertTrue(math.isclose(f, 1e100, rel_tol=1e-12))

    def test_unity_tolerance(self):
        from exunits.units import convfact, m, unit_options

        almost_m = m.scaled(1.0 + 1e-12, 'almost_m')
        f = convfact(m, almost_m)
        self.assertEqual(f, 1)
        self.assertIsInstance(f, int)

        with unit_options(unity_rtol=0.0):
            f = convfact(m, almost_m)
            self.assertIsInstance(f, float)
            self.assertNotEqual(f, 1.0)

    def test_cache(self):
        import warnings
        from exunits.units import (convfact, clear_conversion_cache, m, cm,
                                   km, si_prefix, unit_options, _factor)

        convfact(m, cm)
        self.assertIn((m, cm), _factor._COMP_CONV_CACHE)
        self.assertNotIn((cm, m), _factor._COMP_CONV_CACHE)

        # Same units are never cached.
        convfact(km, km)
        self.assertNotIn((km, km), _factor._COMP_CONV_CACHE)

        clear_conversion_cache()
        self.assertEqual(len(_factor._COMP_CONV_CACHE), 0)

        with unit_options(cache_conversions=False):
            convfact(m, cm)
        self.assertEqual(len(_factor._COMP_CONV_CACHE), 0)

        # Cached factors are discarded when options change.
        convfact(km, m)
        with unit_options(unity_rtol=0.0):
            convfact(m, cm)
            self.assertNotIn((km, m), _factor._COMP_CONV_CACHE)

        # A cached inexact factor only warns the first time.
        Zm = si_prefix('Z', m)
        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter('always')
            f1 = convfact(m, Zm)
            f2 = convfact(m, Zm)
        self.assertEqual(len(w), 1)
        self.assertEqual(f1, f2)
