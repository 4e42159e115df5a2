"""
Testing zint integer.py
"""

import numbers
import pickle
import unittest

from hypothesis import example, given, settings
from hypothesis.strategies import integers

from zint import arith, convert
from zint.integer import (
    Integer, ZERO, ONE, MINUS_ONE, MIN_SMALL, MAX_SMALL, SMALL_BITS,
    promote, demote_check, compare, equal, lt, leq, gt, geq, sign, is_even, is_odd,
)


bigints = integers(min_value=-2 ** 300, max_value=2 ** 300)
edge_values = [
    0, 1, -1,
    MAX_SMALL, MAX_SMALL + 1, MIN_SMALL, MIN_SMALL - 1,
    2 ** 64, -2 ** 64, 2 ** 64 - 1, 10 ** 40, -10 ** 40,
]


class IntegerTests(unittest.TestCase):

    def assertSmall(self, n):
        self.assertTrue(n.is_small(), "{} should be Small".format(repr(n)))
        self.assertFalse(n.is_big())

    def assertBig(self, n):
        self.assertTrue(n.is_big(), "{} should be Big".format(repr(n)))
        self.assertFalse(n.is_small())

    def assertCanonical(self, n):
        """Small exactly when the value fits the Small range."""
        value = int(n)
        if MIN_SMALL <= value <= MAX_SMALL:
            self.assertSmall(n)
        else:
            self.assertBig(n)

    def assertPositive(self, n):
        self.assertTrue(n.is_positive())
        self.assertFalse(n.is_zero())
        self.assertFalse(n.is_negative())

    def assertZero(self, n):
        self.assertFalse(n.is_positive())
        self.assertTrue(n.is_zero())
        self.assertFalse(n.is_negative())

    def assertNegative(self, n):
        self.assertFalse(n.is_positive())
        self.assertFalse(n.is_zero())
        self.assertTrue(n.is_negative())


class IntegerBasicTests(IntegerTests):

    def test_small_range(self):
        self.assertEqual(63, SMALL_BITS)
        self.assertEqual(2 ** 62 - 1, MAX_SMALL)
        self.assertEqual(-2 ** 62, MIN_SMALL)

    def test_canonical_boundaries(self):
        self.assertSmall(Integer(MAX_SMALL))
        self.assertBig(Integer(MAX_SMALL + 1))
        self.assertSmall(Integer(MIN_SMALL))
        self.assertBig(Integer(MIN_SMALL - 1))
        for value in edge_values:
            self.assertCanonical(Integer(value))

    def test_int_round_trip(self):
        for value in edge_values:
            self.assertEqual(value, int(Integer(value)))
            self.assertIs(type(int(Integer(value))), int)

    def test_signs(self):
        self.assertPositive(Integer(5))
        self.assertPositive(Integer(10 ** 30))
        self.assertZero(Integer(0))
        self.assertNegative(Integer(-5))
        self.assertNegative(Integer(-10 ** 30))

    def test_constants(self):
        self.assertEqual(0, ZERO)
        self.assertEqual(1, ONE)
        self.assertEqual(-1, MINUS_ONE)
        self.assertEqual(ZERO, Integer())

    def test_from_string(self):
        self.assertEqual(42, Integer('42'))
        self.assertEqual(-26, Integer('-0x1A'))
        self.assertEqual(10 ** 30, Integer('1' + '0' * 30))

    def test_from_float(self):
        self.assertEqual(42, Integer(42.9))
        self.assertEqual(-42, Integer(-42.9))
        self.assertEqual(2 ** 70, Integer(2.0 ** 70))

    def test_from_integer(self):
        big = Integer(10 ** 30)
        self.assertEqual(big, Integer(big))
        self.assertBig(Integer(big))

    def test_bool_is_an_int(self):
        self.assertEqual(1, Integer(True))

    def test_unsupported_type(self):
        with self.assertRaises(Integer.ConstructorTypeError):
            Integer(None)
        with self.assertRaises(Integer.ConstructorTypeError):
            Integer([1, 2])
        with self.assertRaises(TypeError):
            Integer(object())

    def test_coerce(self):
        self.assertIs(ONE, Integer.coerce(ONE))
        self.assertEqual(Integer(7), Integer.coerce(7))
        self.assertBig(Integer.coerce(2 ** 70))
        self.assertEqual(Integer(1), Integer.coerce(True))
        for operand in (0.5, 2.0, '5', None):
            with self.assertRaises(Integer.ConstructorTypeError):
                Integer.coerce(operand)

    def test_bad_string(self):
        with self.assertRaises(Integer.ConstructorValueError):
            Integer('alpha string')
        with self.assertRaises(Integer.InvalidArgument):
            Integer('')
        with self.assertRaises(ValueError):
            Integer('12z')

    def test_magnitude(self):
        self.assertEqual((42,), Integer(-42).magnitude())
        self.assertEqual((0, 0, 1), Integer(-2 ** 64).magnitude())
        self.assertEqual((0,), ZERO.magnitude())

    def test_small_property(self):
        self.assertEqual(-7, Integer(-7).small)
        self.assertIsNone(Integer(2 ** 64).small)

    def test_isinstance(self):
        self.assertIsInstance(Integer(1), numbers.Integral)
        self.assertIsInstance(Integer(1), numbers.Number)

    def test_repr_str(self):
        self.assertEqual('Integer(42)', repr(Integer(42)))
        self.assertEqual('Integer(-100000000000000000000)', repr(Integer(-10 ** 20)))
        self.assertEqual('-100000000000000000000', str(Integer(-10 ** 20)))

    def test_format(self):
        self.assertEqual('0x1a', format(Integer(26), '#x'))
        self.assertEqual('  -42', '{:5d}'.format(Integer(-42)))
        self.assertEqual('1,000,000', format(Integer(10 ** 6), ','))
        self.assertEqual('42', format(Integer(42), ''))
        self.assertEqual('1000000000000000000000', f"{Integer(10 ** 21)}")

    def test_format_python_specs(self):
        for value in (26, -26, 10 ** 6, 2 ** 70):
            for spec in (',d', '<5d', '^7x', '=+8d', '_x', '>12,'):
                self.assertEqual(format(value, spec), format(Integer(value), spec))

    def test_pickle(self):
        for value in edge_values:
            n = Integer(value)
            for protocol in range(pickle.HIGHEST_PROTOCOL + 1):
                unpickled = pickle.loads(pickle.dumps(n, protocol))
                self.assertEqual(n, unpickled)
                self.assertCanonical(unpickled)

    def test_package_exports(self):
        import zint
        for name in zint.__all__:
            self.assertTrue(hasattr(zint, name), name)
        for builtin_name in ('abs', 'pow', 'bin'):
            self.assertNotIn(builtin_name, zint.__all__)
            self.assertTrue(callable(getattr(zint, builtin_name)))
        self.assertEqual(5, zint.abs(-5))

    def test_immutable(self):
        with self.assertRaises(AttributeError):
            Integer(1).anything = 2


class IntegerNormalizerTests(IntegerTests):

    def test_promote_small(self):
        self.assertSmall(promote([5]))
        self.assertEqual(-5, promote([5], negative=True))

    def test_promote_big(self):
        self.assertBig(promote([0, 0, 1]))
        self.assertEqual(-2 ** 64, promote([0, 0, 1], negative=True))

    def test_promote_trims(self):
        self.assertSmall(promote([5, 0, 0, 0]))
        self.assertEqual(5, promote([5, 0, 0, 0]))

    def test_promote_negative_zero(self):
        self.assertZero(promote([0], negative=True))
        self.assertZero(promote([], negative=True))

    def test_promote_min_small(self):
        """The one negative value whose magnitude exceeds MAX_SMALL, yet fits Small."""
        self.assertSmall(promote([0, 1 << 30], negative=True))
        self.assertEqual(MIN_SMALL, promote([0, 1 << 30], negative=True))
        self.assertBig(promote([0, 1 << 30]))

    def test_demote_check(self):
        self.assertSmall(demote_check(Integer(7)))
        self.assertBig(demote_check(Integer(2 ** 100)))

    def test_add_promotes(self):
        """Sum of two Smalls overflowing to Big."""
        total = arith.add(convert.of_int(MAX_SMALL), ONE)
        self.assertBig(total)
        self.assertEqual(MAX_SMALL + 1, total)
        self.assertFalse(convert.fits_int(total))

    def test_sub_demotes(self):
        difference = arith.sub(Integer(MAX_SMALL + 1), ONE)
        self.assertSmall(difference)
        self.assertEqual(MAX_SMALL, difference)

    def test_neg_at_the_boundaries(self):
        self.assertBig(arith.neg(Integer(MIN_SMALL)))
        self.assertSmall(arith.neg(Integer(MAX_SMALL + 1)))
        self.assertEqual(MIN_SMALL, arith.neg(Integer(MAX_SMALL + 1)))

    @settings(deadline=None)
    @given(bigints, bigints)
    @example(MAX_SMALL, 1)
    @example(MIN_SMALL, -1)
    @example(2 ** 64, -2 ** 64 + 5)
    def test_results_canonical(self, a, b):
        for result in (arith.add(a, b), arith.sub(a, b), arith.mul(a, b), arith.neg(a)):
            self.assertCanonical(result)


class IntegerComparisonTests(IntegerTests):

    def test_compare(self):
        self.assertEqual(0, compare(5, 5))
        self.assertEqual(-1, compare(4, 5))
        self.assertEqual(1, compare(Integer(10 ** 30), 5))
        self.assertEqual(-1, compare(Integer(-10 ** 30), -5))
        self.assertEqual(1, compare(Integer(-5), Integer(-10 ** 30)))
        self.assertEqual(-1, compare(Integer(10 ** 30), Integer(10 ** 31)))
        self.assertEqual(1, compare(Integer(-10 ** 30), Integer(-10 ** 31)))

    def test_named_predicates(self):
        self.assertTrue(equal(3, Integer(3)))
        self.assertTrue(lt(2, 3))
        self.assertTrue(leq(3, 3))
        self.assertTrue(gt(Integer(2 ** 70), Integer(2 ** 69)))
        self.assertTrue(geq(-1, -1))
        self.assertFalse(lt(3, 2))

    def test_named_predicates_refuse_floats(self):
        with self.assertRaises(Integer.ConstructorTypeError):
            equal(Integer(1), 1.5)
        with self.assertRaises(TypeError):
            lt(1.0, Integer(2))
        with self.assertRaises(Integer.ConstructorTypeError):
            compare('5', 5)

    def test_operators_still_fob_off_on_floats(self):
        self.assertFalse(Integer(1) == 1.5)
        self.assertTrue(Integer(1) < 1.5)

    def test_sign(self):
        self.assertEqual(-1, sign(-10 ** 30))
        self.assertEqual(0, sign(0))
        self.assertEqual(1, sign(7))

    def test_even_odd(self):
        self.assertTrue(is_even(0))
        self.assertTrue(is_even(-2 ** 100))
        self.assertTrue(is_odd(-3))
        self.assertTrue(is_odd(2 ** 100 + 1))

    def test_operators(self):
        self.assertTrue(Integer(1) < Integer(2))
        self.assertTrue(Integer(2) <= 2)
        self.assertTrue(3 > Integer(2))
        self.assertTrue(Integer(10 ** 30) >= 10 ** 30)
        self.assertTrue(Integer(1) != Integer(2))
        self.assertTrue(Integer(1) < 1.5)
        self.assertFalse(Integer(1) == 'one')

    @settings(deadline=None)
    @given(bigints, bigints)
    def test_compare_like_int(self, a, b):
        self.assertEqual((a > b) - (a < b), compare(a, b))
        self.assertEqual(a == b, Integer(a) == Integer(b))

    @settings(deadline=None)
    @given(bigints)
    @example(MAX_SMALL + 1)
    @example(-2 ** 61 * 3)
    def test_hash_like_int(self, a):
        self.assertEqual(hash(a), hash(Integer(a)))

    def test_dict_key(self):
        d = {Integer(10 ** 30): 'big', Integer(5): 'small'}
        self.assertEqual('big', d[10 ** 30])
        self.assertEqual('small', d[5])

    def test_bool(self):
        self.assertFalse(Integer(0))
        self.assertTrue(Integer(-1))
        self.assertTrue(Integer(2 ** 100))


class IntegerOperatorTests(IntegerTests):

    def test_arithmetic_operators(self):
        a = Integer(10 ** 20)
        self.assertEqual(10 ** 20 + 3, a + 3)
        self.assertEqual(3 + 10 ** 20, 3 + a)
        self.assertEqual(10 ** 20 - 3, a - 3)
        self.assertEqual(3 - 10 ** 20, 3 - a)
        self.assertEqual(10 ** 40, a * a)
        self.assertEqual(-10 ** 20, -a)
        self.assertEqual(10 ** 20, abs(-a))
        self.assertEqual(10 ** 20, +a)

    def test_floor_division_operators(self):
        self.assertEqual(-4, Integer(-7) // 2)
        self.assertEqual(1, Integer(-7) % 2)
        self.assertEqual(-1, Integer(7) % -2)
        self.assertEqual((-4, 1), divmod(Integer(-7), 2))
        self.assertEqual(divmod(-10 ** 30, 7), divmod(Integer(-10 ** 30), 7))
        self.assertEqual(100 // Integer(7), 14)

    def test_true_division(self):
        self.assertEqual(3.5, Integer(7) / 2)
        self.assertIsInstance(Integer(8) / 2, float)

    def test_division_by_zero(self):
        with self.assertRaises(ZeroDivisionError):
            Integer(1) // 0
        with self.assertRaises(Integer.DivisionByZero):
            Integer(1) % Integer(0)

    def test_power(self):
        self.assertEqual(2 ** 100, Integer(2) ** 100)
        self.assertEqual(2 ** 100, 2 ** Integer(100))
        self.assertEqual(0.5, Integer(2) ** -1)
        self.assertEqual(445, pow(Integer(4), 13, 497))

    def test_bit_operators(self):
        a = Integer(-10 ** 20)
        self.assertEqual(-10 ** 20 & 0xffff, a & 0xffff)
        self.assertEqual(-10 ** 20 | 0xffff, a | 0xffff)
        self.assertEqual(-10 ** 20 ^ 0xffff, a ^ 0xffff)
        self.assertEqual(~(-10 ** 20), ~a)
        self.assertEqual(-10 ** 20 << 70, a << 70)
        self.assertEqual(-10 ** 20 >> 3, a >> 3)
        self.assertEqual(1 << 100, 1 << Integer(100))

    def test_negative_shift(self):
        with self.assertRaises(ValueError):
            Integer(1) << -1

    def test_mixed_float(self):
        self.assertEqual(2.5, Integer(2) + 0.5)
        self.assertEqual(2.5, 0.5 + Integer(2))
        self.assertEqual(3.0, Integer(6) * 0.5)

    def test_unsupported_operand(self):
        with self.assertRaises(TypeError):
            Integer(1) + 'one'

    def test_integral_interface(self):
        self.assertEqual(7, int(Integer(7)))
        self.assertEqual(7.0, float(Integer(7)))
        self.assertEqual([0, 1, 2], list(range(Integer(3))))
        self.assertEqual('c', 'abc'[Integer(2)])
        self.assertEqual(100, round(Integer(123), -2))
        self.assertEqual(123, round(Integer(123)))
        self.assertEqual(1, Integer(5).denominator)
        self.assertEqual(5, Integer(5).numerator)

    @settings(deadline=None)
    @given(bigints, bigints)
    def test_operators_like_int(self, a, b):
        x, y = Integer(a), Integer(b)
        self.assertEqual(a + b, x + y)
        self.assertEqual(a - b, x - y)
        self.assertEqual(a * b, x * y)
        self.assertEqual(a & b, x & y)
        self.assertEqual(a | b, x | y)
        self.assertEqual(a ^ b, x ^ y)
        if b != 0:
            self.assertEqual(a // b, x // y)
            self.assertEqual(a % b, x % y)


if __name__ == '__main__':
    unittest.main()
