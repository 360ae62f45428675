from unittest import TestCase


class TestUnit(TestCase):
    def test___init__(self):
        from fractions import Fraction
        from exunits.units import Unit, LENGTH

        u = Unit('x', LENGTH, ex=3, inex=2, pow=-1)
        self.assertIsInstance(u.ex, Fraction)
        self.assertIsInstance(u.inex, float)
        self.assertEqual(u.pow, -1)

        with self.assertRaises(TypeError):
            Unit('x', 'L')
        with self.assertRaises(ValueError):
            Unit('x', LENGTH, ex=0)
        with self.assertRaises(ValueError):
            Unit('x', LENGTH, ex=0.5)  # Must be exact.
        with self.assertRaises(ValueError):
            Unit('x', LENGTH, inex=0.0)
        with self.assertRaises(ValueError):
            Unit('x', LENGTH, inex=float('inf'))
        with self.assertRaises(ValueError):
            Unit('x', LENGTH, pow=1.5)

    def test_equality(self):
        from exunits.units import N, J, m, Unit, LENGTH

        # Equal scale isn't enough, the name must match as well.
        self.assertNotEqual(J, N * m)
        self.assertEqual((N * m).named('J'), J)
        self.assertEqual(hash((N * m).named('J')), hash(J))
        self.assertEqual(m, Unit('m', LENGTH))

    def test_derived(self):
        from fractions import Fraction
        from exunits.units import (m, km, cm, s, kg, Dimension, basefactor,
                                   tensfactor)

        u = m * km
        self.assertEqual(u.name, 'm·km')
        self.assertEqual(u.dim, Dimension(L=2))
        self.assertEqual(tensfactor(u), 3)

        u = m / (kg * s)
        self.assertEqual(u.name, 'm/(kg·s)')
        self.assertEqual(u.dim, Dimension(M=-1, L=1, T=-1))

        u = km ** 2
        self.assertEqual(u.dim, Dimension(L=2))
        self.assertEqual(tensfactor(u), 6)
        self.assertEqual(basefactor(u), (1.0, Fraction(1)))

        # Fractional power with an even decimal exponent stays exact.
        u = cm ** Fraction(1, 2)
        self.assertEqual(u.dim, Dimension(L=Fraction(1, 2)))
        self.assertEqual(tensfactor(u), -1)
        self.assertEqual(basefactor(u), (1.0, Fraction(1)))

        # ... otherwise it becomes inexact.
        u = km ** 0.5
        self.assertEqual(tensfactor(u), 0)
        self.assertAlmostEqual(basefactor(u)[0], 1000 ** 0.5)

    def test_scaled_prefixed_named(self):
        from fractions import Fraction
        from exunits.units import m, si_prefix, km, basefactor, tensfactor

        u = m.scaled(Fraction(1, 3), 'third_m')
        self.assertEqual(basefactor(u), (1.0, Fraction(1, 3)))

        u = m.scaled(2.5, 'x')
        self.assertEqual(basefactor(u), (2.5, Fraction(1)))

        u = m.prefixed(-6, 'um')
        self.assertEqual(tensfactor(u), -6)
        self.assertEqual(u.name, 'um')

        self.assertEqual(si_prefix('k', m), km)
        with self.assertRaises(ValueError):
            si_prefix('x', m)

    def test___rmul__(self):
        import numpy as np
        from exunits.units import m, degC, Quantity

        self.assertEqual(3 * m, Quantity(3, m))
        self.assertEqual(-40 * degC, Quantity(-40, degC))

        # Arrays must give a single quantity, not an array of them.
        q = np.array([1.0, 2.0]) * m
        self.assertIsInstance(q, Quantity)
        np.testing.assert_array_equal(q.value, [1.0, 2.0])
        self.assertEqual(q.unit, m)

        # Only plain values can be given units.
        with self.assertRaises(TypeError):
            _ = 'a' * m
        with self.assertRaises(TypeError):
            _ = (2 * m) * degC

    def test___repr__(self):
        from exunits.units import m, NO_UNITS, degF

        self.assertEqual(repr(m), 'm')
        self.assertEqual(repr(NO_UNITS), '∅')
        self.assertEqual(repr(degF), '°F')


class TestAffineUnit(TestCase):
    def test___init__(self):
        from exunits.units import AffineUnit, K, degC

        with self.assertRaises(TypeError):
            AffineUnit('x', degC)  # Base must be linear.
        with self.assertRaises(ValueError):
            AffineUnit('x', K, float('inf'))

    def test_no_derived_units(self):
        from exunits.units import degC, degF, m, s

        with self.assertRaises(TypeError):
            _ = degC / s
        with self.assertRaises(TypeError):
            _ = m * degF
        with self.assertRaises(TypeError):
            _ = degC * degF
        with self.assertRaises(TypeError):
            _ = degC ** 2

    def test_functions(self):
        from fractions import Fraction
        from exunits.units import (absolute_unit, basefactor, tensfactor,
                                   is_affine, zero_point, degC, degF, K, Ra,
                                   m, TEMPERATURE)

        self.assertIs(absolute_unit(degC), K)
        self.assertIs(absolute_unit(degF), Ra)
        self.assertIs(absolute_unit(m), m)
        self.assertEqual(basefactor(degF), (1.0, Fraction(5, 9)))
        self.assertEqual(tensfactor(degC), 0)
        self.assertTrue(is_affine(degC))
        self.assertFalse(is_affine(K))
        self.assertEqual(zero_point(degC), Fraction(-27315, 100))
        self.assertEqual(zero_point(degF), Fraction(-45967, 100))
        self.assertEqual(zero_point(K), 0)
        self.assertEqual(degC.dim, TEMPERATURE)
