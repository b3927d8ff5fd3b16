"""
Tests for the shared quantity contract.
"""

from decimal import Decimal
import math
import unittest

import numpy as np

from kinematics.unit import Acceleration, Distance, Speed, Time


class Displacement(Distance):
    """A subclass that stays in the Distance family."""


class TestConstruction(unittest.TestCase):
    """Test constructing quantities from raw values."""

    def test_from_numbers(self):
        """Test that every real number type is accepted."""
        self.assertEqual(Distance(2).value, 2.0)
        self.assertEqual(Distance(Decimal("1.5")).value, 1.5)
        self.assertEqual(Distance(np.float32(0.5)).value, 0.5)
        self.assertEqual(Distance(True).value, 1.0)
        self.assertEqual(Distance().value, 0.0)

    def test_from_same_family(self):
        """Test copying a quantity of the same family."""
        self.assertEqual(Distance(Displacement(4)), Distance(4))

    def test_rejects_other_family_and_text(self):
        """Test that cross-family values and text are refused."""
        with self.assertRaises(TypeError):
            Distance(Speed(1))
        with self.assertRaises(TypeError):
            Distance("1.0")

    def test_value_is_plain_float(self):
        """Test that .value strips the quantity type."""
        self.assertIs(type(Speed(3).value), float)
        self.assertEqual(float(Speed(3)), 3.0)

    def test_family(self):
        """Test family resolution for roots and subclasses."""
        self.assertIs(Displacement.ROOT, Distance)
        self.assertEqual(Displacement.family_name(), "Distance")
        self.assertFalse(Distance.is_same_family(Time))


class TestConstants(unittest.TestCase):
    """Test the per-family constants."""

    def test_values(self):
        """Test ZERO, ONE, PI and TWO_PI values."""
        self.assertEqual(Distance.ZERO.value, 0.0)
        self.assertEqual(Speed.ONE.value, 1.0)
        self.assertEqual(Time.PI.value, math.pi)
        self.assertEqual(Acceleration.TWO_PI.value, 2.0 * math.pi)

    def test_constants_belong_to_their_family(self):
        """Test that every family gets its own typed constants."""
        self.assertIsInstance(Speed.ZERO, Speed)
        self.assertIsInstance(Displacement.ONE, Displacement)
        self.assertIsNot(Speed.ZERO, Distance.ZERO)


class TestComparisons(unittest.TestCase):
    """Test IEEE-754 comparison semantics."""

    def test_ordering(self):
        """Test relational operators between quantities."""
        self.assertTrue(Distance(1) < Distance(2))
        self.assertTrue(Distance(2) <= Distance(2))
        self.assertTrue(Distance(3) > Distance(2))
        self.assertTrue(Distance(2) >= Distance(2))
        self.assertTrue(Distance(2) != Distance(3))
        self.assertTrue(Distance(2.5) == Distance(2.5))

    def test_plain_numbers_compare_by_value(self):
        """Test comparisons against ints and floats."""
        self.assertTrue(Distance(2) == 2)
        self.assertTrue(Distance(2) < 3)
        self.assertTrue(Distance(2) >= 1.5)

    def test_nan_is_unequal_to_everything(self):
        """Test that NaN quantities follow IEEE-754."""
        nan = Distance(math.nan)
        self.assertFalse(nan == nan)
        self.assertTrue(nan != nan)
        self.assertFalse(nan < Distance(0))
        self.assertFalse(nan > Distance(0))
        self.assertFalse(nan <= nan)
        self.assertFalse(nan >= nan)

    def test_no_epsilon(self):
        """Test that equality has no tolerance."""
        self.assertFalse(Distance(0.1 + 0.2) == Distance(0.3))

    def test_compare_to(self):
        """Test the -1/0/1 comparison helper."""
        self.assertEqual(Time(1).compare_to(Time(2)), -1)
        self.assertEqual(Time(2).compare_to(Time(1)), 1)
        self.assertEqual(Time(2).compare_to(Time(2)), 0)

    def test_compare_to_nan_returns_zero(self):
        """Test that NaN compares as 0 because neither < nor > holds."""
        nan = Time(math.nan)
        self.assertEqual(nan.compare_to(nan), 0)
        self.assertEqual(nan.compare_to(Time(5)), 0)
        self.assertEqual(Time(5).compare_to(nan), 0)

    def test_cross_family_comparison_raises(self):
        """Test that different dimensions cannot be compared."""
        with self.assertRaises(TypeError):
            Distance(1) < Time(1)
        with self.assertRaises(TypeError):
            Speed(1) >= Acceleration(1)

    def test_cross_family_equality_is_false(self):
        """Test that equal values of different dimensions are unequal."""
        self.assertFalse(Distance(1) == Speed(1))
        self.assertTrue(Distance(1) != Speed(1))
        self.assertTrue(Displacement(1) == Distance(1))

    def test_hashable(self):
        """Test that quantities hash like their float value."""
        self.assertEqual(hash(Distance(1.5)), hash(1.5))
        self.assertEqual(len({Distance(1), Distance(1), Distance(2)}), 2)

    def test_mixed_families_share_a_set(self):
        """Test that equal-valued quantities of different dimensions coexist as keys."""
        mixed = {Distance(1), Speed(1), Time(1)}
        self.assertEqual(len(mixed), 3)
        self.assertIn(Speed(1), mixed)
        lookup = {Distance(2): "s", Time(2): "t"}
        self.assertEqual(lookup[Time(2)], "t")


class TestArithmetic(unittest.TestCase):
    """Test arithmetic operators."""

    def test_add_sub(self):
        """Test addition and subtraction within a family."""
        total = Distance(2) + Distance(3)
        self.assertEqual(total, Distance(5))
        self.assertIsInstance(total, Distance)
        self.assertEqual(Distance(2) - Distance(3), Distance(-1))

    def test_add_rejects_other_families_and_numbers(self):
        """Test that + and - require a same-family quantity."""
        with self.assertRaises(TypeError):
            Distance(1) + Speed(1)
        with self.assertRaises(TypeError):
            Distance(1) + 1.0
        with self.assertRaises(TypeError):
            1.0 + Distance(1)
        with self.assertRaises(TypeError):
            Time(1) - Acceleration(1)

    def test_subclass_mixes_with_root(self):
        """Test that subclasses stay in their family."""
        self.assertEqual(Displacement(1) + Distance(2), Distance(3))

    def test_mul(self):
        """Test multiplication by quantities and scalars."""
        self.assertEqual(Distance(3) * Distance(2), Distance(6))
        self.assertEqual(Distance(3) * 2, Distance(6))
        product = 2 * Distance(3)
        self.assertEqual(product, Distance(6))
        self.assertIsInstance(product, Distance)
        with self.assertRaises(TypeError):
            Distance(3) * Speed(2)

    def test_div(self):
        """Test division by quantities and scalars."""
        self.assertEqual(Speed(9) / Speed(3), Speed(3))
        self.assertEqual(Speed(9) / 2, Speed(4.5))
        self.assertEqual(1 / Speed(4), Speed(0.25))
        self.assertIsInstance(Speed(9) / 3, Speed)

    def test_div_by_zero_propagates(self):
        """Test that division by zero yields inf/NaN instead of raising."""
        self.assertEqual(Distance(1) / Distance(0), Distance(math.inf))
        self.assertEqual(Distance(-1) / 0, Distance(-math.inf))
        self.assertTrue(math.isnan(Distance(0) / 0))
        self.assertTrue(math.isinf(1.0 / Distance(0)))

    def test_mod_is_truncated(self):
        """Test that the remainder has the sign of the dividend."""
        self.assertEqual(Distance(5) % Distance(3), Distance(2))
        self.assertEqual(Distance(-5) % 3, Distance(-2))
        self.assertEqual(Distance(5) % -3, Distance(2))

    def test_mod_by_zero_is_nan(self):
        """Test that modulo by zero yields NaN."""
        self.assertTrue(math.isnan(Distance(5) % Distance(0)))

    def test_pow(self):
        """Test exponentiation and overflow."""
        self.assertEqual(Distance(2) ** 3, Distance(8))
        self.assertEqual(Distance(4).pow(Distance(0.5)), Distance(2))
        self.assertEqual(Distance(10.0) ** 400, Distance(math.inf))
        self.assertTrue(math.isnan(Distance(-8).pow(1 / 3)))

    def test_unary(self):
        """Test negation, plus and absolute value."""
        self.assertEqual(-Time(2), Time(-2))
        self.assertIsInstance(-Time(2), Time)
        self.assertEqual(+Time(2), Time(2))
        self.assertEqual(abs(Time(-2)), Time(2))
        self.assertIsInstance(abs(Time(-2)), Time)

    def test_increment_decrement(self):
        """Test add_one and sub_one."""
        self.assertEqual(Speed(1.5).add_one(), Speed(2.5))
        self.assertEqual(Speed(1.5).sub_one(), Speed(0.5))


class TestNumericFunctions(unittest.TestCase):
    """Test abs, sign, truncate, frac and the elementary functions."""

    def test_abs(self):
        """Test the named absolute value."""
        self.assertEqual(Distance(-3).abs(), Distance(3))
        self.assertEqual(Distance.abs(Distance(-3)), Distance(3))

    def test_sign(self):
        """Test sign, including infinities and NaN."""
        self.assertEqual(Distance(-2).sign(), -1)
        self.assertEqual(Distance(0).sign(), 0)
        self.assertEqual(Distance(7).sign(), 1)
        self.assertEqual(Distance(-math.inf).sign(), -1)
        self.assertEqual(Distance(math.nan).sign(), 0)

    def test_truncate(self):
        """Test truncation toward zero."""
        self.assertEqual(Distance(2.7).truncate(), Distance(2))
        self.assertEqual(Distance(-2.7).truncate(), Distance(-2))

    def test_frac_avoids_binary_drift(self):
        """Test that frac is computed in decimal arithmetic."""
        self.assertNotEqual(1.1 % 1, 0.1)
        self.assertEqual(Distance(1.1).frac().value, 0.1)
        self.assertEqual(Time(12.34).frac().value, 0.34)

    def test_frac_sign_and_edges(self):
        """Test frac for negatives, integers, huge and non-finite values."""
        self.assertEqual(Distance(-2.25).frac(), Distance(-0.25))
        self.assertEqual(Distance(3.0).frac(), Distance.ZERO)
        self.assertEqual(Distance(1e20).frac(), Distance.ZERO)
        self.assertTrue(math.isnan(Distance(math.inf).frac()))
        self.assertTrue(math.isnan(Distance(math.nan).frac()))

    def test_dist(self):
        """Test that dist is symmetric and non-negative."""
        pairs = [(2, 5), (-4, 1), (3.5, 3.5), (-7, -2)]
        for a, b in pairs:
            with self.subTest(a=a, b=b):
                forward = Distance(a).dist(Distance(b))
                self.assertEqual(forward, Distance(b).dist(Distance(a)))
                self.assertGreaterEqual(forward, Distance.ZERO)
        self.assertEqual(Distance(-4).dist(Distance(1)), Distance(5))

    def test_sqrt(self):
        """Test square roots, including negative input."""
        self.assertEqual(Distance(4).sqrt(), Distance(2))
        self.assertTrue(math.isnan(Distance(-4).sqrt()))

    def test_min_max(self):
        """Test min and max, with NaN propagation."""
        self.assertEqual(Speed(1).min(Speed(2)), Speed(1))
        self.assertEqual(Speed(1).max(Speed(2)), Speed(2))
        self.assertEqual(Speed.min(Speed(3), 2), Speed(2))
        self.assertTrue(math.isnan(Speed(math.nan).min(Speed(1))))
        self.assertTrue(math.isnan(Speed(1).max(Speed(math.nan))))

    def test_rounding(self):
        """Test round (half to even), floor and ceil."""
        self.assertEqual(Distance(2.5).round(), Distance(2))
        self.assertEqual(Distance(3.5).round(), Distance(4))
        self.assertEqual(Distance(-2.5).round(), Distance(-2))
        self.assertEqual(Distance(-1.5).floor(), Distance(-2))
        self.assertEqual(Distance(-1.5).ceil(), Distance(-1))

    def test_rounding_non_finite(self):
        """Test that rounding infinities and NaN does not raise."""
        self.assertEqual(Distance(math.inf).round(), Distance(math.inf))
        self.assertEqual(Distance(-math.inf).floor(), Distance(-math.inf))
        self.assertTrue(math.isnan(Distance(math.nan).ceil()))

    def test_trigonometry(self):
        """Test sin, cos and tan."""
        self.assertEqual(Distance(0).sin(), Distance(0))
        self.assertEqual(Distance.PI.cos(), Distance(-1))
        self.assertEqual(Distance(0).tan(), Distance(0))
        self.assertTrue(math.isnan(Distance(math.inf).sin()))


class TestClamp(unittest.TestCase):
    """Test clamp, including the unordered-bounds case."""

    def test_within_bounds(self):
        """Test that in-range values are returned unchanged."""
        self.assertEqual(Distance(5).clamp(Distance(0), Distance(10)), Distance(5))
        self.assertEqual(Distance(0).clamp(0, 10), Distance(0))
        self.assertEqual(Distance(10).clamp(0, 10), Distance(10))

    def test_outside_bounds(self):
        """Test clamping below and above the range."""
        self.assertEqual(Distance(-1).clamp(0, 10), Distance(0))
        self.assertEqual(Distance(11).clamp(0, 10), Distance(10))
        self.assertIsInstance(Distance(11).clamp(0, 10), Distance)

    def test_inverted_bounds_follow_branch_order(self):
        """Test the result when low > high: low is checked first."""
        self.assertEqual(Distance(5).clamp(10, 0), Distance(10))
        self.assertEqual(Distance(-5).clamp(10, 0), Distance(10))
        self.assertEqual(Distance(20).clamp(10, 0), Distance(0))

    def test_cross_family_bounds_raise(self):
        """Test that bounds must be of the same family."""
        with self.assertRaises(TypeError):
            Distance(5).clamp(Time(0), Time(10))


class TestStep(unittest.TestCase):
    """Test stepping toward a target."""

    def test_single_steps(self):
        """Test stepping up, down and onto the target."""
        self.assertEqual(Distance(0).step(Distance(10), Distance(4)), Distance(4))
        self.assertEqual(Distance(8).step(Distance(10), Distance(4)), Distance(10))
        self.assertEqual(Distance(10).step(Distance(0), Distance(3)), Distance(7))
        self.assertEqual(Distance(10).step(Distance(10), Distance(3)), Distance(10))

    def test_step_size_sign_is_ignored(self):
        """Test that a negative step size still moves toward the target."""
        self.assertEqual(Distance(10).step(0, -3), Distance(7))
        self.assertEqual(Distance(0).step(10, -3), Distance(3))

    def test_converges_without_overshoot(self):
        """Test that repeated steps land exactly on the target."""
        for start, target in [(0.0, 1.0), (5.0, -2.5)]:
            with self.subTest(start=start, target=target):
                position = Distance(start)
                goal = Distance(target)
                for _ in range(100):
                    position = position.step(goal, Distance(0.3))
                    self.assertLessEqual(position.dist(goal), Distance(start).dist(goal))
                    if start < target:
                        self.assertLessEqual(position, goal)
                    else:
                        self.assertGreaterEqual(position, goal)
                self.assertEqual(position, goal)


class TestLerp(unittest.TestCase):
    """Test linear interpolation."""

    def setUp(self):
        self.a = Speed(2)
        self.b = Speed(10)

    def test_end_points(self):
        """Test factors 0 and 1."""
        self.assertEqual(self.a.lerp(self.b, 0), self.a)
        self.assertEqual(self.a.lerp(self.b, 1), self.b)

    def test_midpoint(self):
        """Test interior factors."""
        self.assertEqual(self.a.lerp(self.b, 0.5), Speed(6))
        self.assertEqual(self.a.lerp(self.b, 0.25), Speed(4))
        self.assertEqual(self.a.lerp(10, 0.5), Speed(6))

    def test_inexact_end_points(self):
        """Test that factors 0 and 1 return the end points exactly."""
        for start, end in [(-3.7, 0.1), (1e16, 1.0), (0.1, 0.3), (2.5e-8, -7.3)]:
            with self.subTest(start=start, end=end):
                a, b = Distance(start), Distance(end)
                self.assertEqual(a.lerp(b, 1), b)
                self.assertEqual(a.lerp(b, 0), a)
                self.assertEqual(a.lerp(b, 3), b)

    def test_result_between_end_points(self):
        """Test that interior factors stay inside the interval."""
        a, b = Distance(-3.7), Distance(0.1)
        for factor in [0.0, 0.1, 0.33, 0.5, 0.9, 0.999, 1.0]:
            with self.subTest(factor=factor):
                result = a.lerp(b, factor)
                self.assertGreaterEqual(result, a)
                self.assertLessEqual(result, b)

    def test_factor_is_clamped(self):
        """Test that out-of-range factors are clamped to [0, 1]."""
        self.assertEqual(self.a.lerp(self.b, -1), self.a.lerp(self.b, 0))
        self.assertEqual(self.a.lerp(self.b, 2), self.a.lerp(self.b, 1))
        self.assertEqual(self.b.lerp(self.a, 7.5), self.a)


class TestDisplay(unittest.TestCase):
    """Test string representations."""

    def test_str(self):
        """Test value followed by the unit symbol."""
        self.assertEqual(str(Distance(9)), "9.0 m")
        self.assertEqual(str(Speed(6)), "6.0 m/s")
        self.assertEqual(str(Acceleration(2)), "2.0 m/s²")
        self.assertEqual(str(Time(3)), "3.0 s")

    def test_repr(self):
        """Test the constructor-like repr."""
        self.assertEqual(repr(Distance(9)), "Distance(9.0)")
        self.assertEqual(repr(Speed(math.nan)), "Speed(nan)")

    def test_format(self):
        """Test that format specs apply to the value."""
        self.assertEqual(f"{Time(1.23456):.2f}", "1.23")


if __name__ == "__main__":
    unittest.main()
