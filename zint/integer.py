"""
A zint Integer is an arbitrary precision integer, small when it can be, big when it must be.

Features:
 - arbitrary precision
 - no allocation of a digit buffer for values that fit a machine word
 - identical behavior whichever representation holds the value
"""

import numbers
import operator

from . import digits


SMALL_BITS = 63   # a 64-bit word, less one bit of headroom for detecting overflow
MIN_SMALL = -(1 << (SMALL_BITS - 1))
MAX_SMALL = (1 << (SMALL_BITS - 1)) - 1
_SMALL_DIGITS = -(-SMALL_BITS // digits.DIGIT_BITS)   # most digits a small magnitude can need
assert MAX_SMALL == 2**62 - 1
assert _SMALL_DIGITS == 2


class Integer(numbers.Integral):
    """
    Integers of any size, seamlessly represented.

    A zint Integer is internally one of two things:
        Small - a native int in the range MIN_SMALL to MAX_SMALL, stored as is
        Big - a sign and a digit buffer (see digits.py) for everything outside that range

        assert Integer(42).is_small()
        assert Integer(2**62).is_big()
        assert Integer(2**62) - 1 == Integer(2**62 - 1)
        assert (Integer(2**62) - 1).is_small()

    Canonical form
    --------------
    Every value that fits the Small range is stored Small.  Zero is always Small.
    A Big value is only ever a magnitude too large for Small.  So there is
    exactly one internal representation for each integer,
    and the representation never affects equality, ordering or hashing.

    Promotion and demotion
    ----------------------
    Every operation that might grow a value past the Small range promotes it to Big.
    Every operation that might shrink a Big value demotes it back.
    Both happen in promote() and Integer.from_native(), nowhere else.
    Callers never see either one, except by asking is_small() or is_big().

    Immutability
    ------------
    There are no setters.  Big values own a tuple of digits.
    Operations build new Integers from scratch lists that never escape.
    """

    __slots__ = ('_small', '_negative', '_digits')

    def __init__(self, content=0):
        """
        Integer constructor.

        content - the type can be:
            int               10**100
            numeric string   '-42'  '0x2A'  '0b101010'
            float             42.9  (truncated toward zero)
            another Integer   Integer(42)
        """
        if isinstance(content, Integer):
            self._copy_from(content)
        elif isinstance(content, int):
            self._set_native(int(content))
        elif isinstance(content, str):
            try:
                parsed = convert.of_string(content)
            except self.InvalidArgument as e:
                raise self.ConstructorValueError(
                    "An Integer string must be a valid integer, not {}:  {}".format(repr(content), str(e))
                )
            self._copy_from(parsed)
        elif isinstance(content, float):
            self._copy_from(convert.of_float(content))
        else:
            raise self.ConstructorTypeError("{outer}({inner}) is not supported".format(
                outer=type(self).__name__,
                inner=type(content).__name__,
            ))

    # Errors
    # ------
    # Each kind of failure subclasses the builtin exception a Python programmer would expect,
    # so except ZeroDivisionError catches Integer.DivisionByZero, etc.
    class Overflow(OverflowError):
        """
        A value does not fit, or a count is infinite.

        e.g. to_int32(Integer(2**31)), of_float(float('inf')), popcount(Integer(-1))
        """

    class DivisionByZero(ZeroDivisionError):
        """e.g. div(Integer(1), Integer(0)), gcd(Integer(0), Integer(5)), invert(Integer(2), Integer(4))"""

    class InvalidArgument(ValueError):
        """e.g. sqrt(Integer(-1)), shift_left(Integer(1), -1), of_string('12z')"""

    class ConstructorTypeError(TypeError):
        """e.g. Integer(object) or Integer([])"""

    class ConstructorValueError(InvalidArgument):
        """e.g. Integer('alpha string')"""

    # Internal representation
    # -----------------------
    def _set_native(self, i):
        """Fill in from a native int of any size.  Promotes if it must."""
        if MIN_SMALL <= i <= MAX_SMALL:
            self._small = i
            self._negative = i < 0
            self._digits = None
        else:
            self._small = None
            self._negative = i < 0
            self._digits = tuple(digits.from_int(-i if i < 0 else i))

    def _copy_from(self, other):
        self._small = other._small
        self._negative = other._negative
        self._digits = other._digits

    @classmethod
    def from_native(cls, i):
        """Canonical Integer for a native int.  The fast path of every Small operation ends here."""
        return_value = cls.__new__(cls)
        return_value._set_native(i)
        return return_value

    @classmethod
    def _big_unchecked(cls, negative, magnitude_tuple):
        """Wrap a digit tuple already known to be trimmed and too big for Small."""
        return_value = cls.__new__(cls)
        return_value._small = None
        return_value._negative = negative
        return_value._digits = magnitude_tuple
        return return_value

    @classmethod
    def coerce(cls, x):
        """
        Engine operand:  an Integer passes through, an int (or bool) is wrapped.

        Floats and strings are refused rather than truncated or parsed.
        Use Integer(x), convert.of_float() or convert.of_string() for those.
        """
        if isinstance(x, Integer):
            return x
        elif isinstance(x, int):
            return cls.from_native(int(x))
        else:
            raise cls.ConstructorTypeError(
                "An Integer operand must be an Integer or int, not {}".format(type(x).__name__)
            )

    @property
    def small(self):
        """The native int of a Small value.  None for a Big value."""
        return self._small

    def is_small(self):
        return self._small is not None

    def is_big(self):
        return self._small is None

    def is_negative(self):
        return self._negative

    def is_positive(self):
        return not self._negative and not self.is_zero()

    def is_zero(self):
        return self._small == 0

    def magnitude(self):
        """
        Digit tuple of the absolute value, least significant digit first.

        assert (42,) == Integer(-42).magnitude()
        """
        if self._small is None:
            return self._digits
        else:
            return tuple(digits.from_int(-self._small if self._negative else self._small))

    # Pickling
    # --------
    def __getstate__(self):
        """For the 'pickle' package.  The sign and the little-endian magnitude bytes."""
        return self._negative, digits.to_bytes_little(self.magnitude())

    def __setstate__(self, state):
        """For the 'pickle' package."""
        negative, magnitude_bytes = state
        self._copy_from(promote(digits.from_bytes_little(magnitude_bytes), negative))

    # Rendering
    # ---------
    def __repr__(self):
        """Handle repr(Integer(x))"""
        return "Integer({})".format(convert.to_string(self))

    def __str__(self):
        """Handle str(Integer(x))"""
        return convert.to_string(self)

    def __format__(self, format_spec):
        """
        Handle format(Integer(x), spec) and f-strings.

        Specs made entirely of format_integer() flags, width and type use format_integer().
        Everything else fobs off on int formatting, e.g. fill, align and the ',' separator.
        """
        if format_spec == '':
            return str(self)
        elif convert.FORMAT_PATTERN.match(format_spec):
            return convert.format_integer(format_spec, self)
        else:
            return format(int(self), format_spec)

    # Comparison
    # ----------
    def __eq__(self, other):
        """Handle Integer(x) == something"""
        if self.is_integral(other):
            return compare(self, other) == 0
        elif isinstance(other, numbers.Number):
            return int(self) == other
        else:
            return NotImplemented

    def __ne__(self, other):
        """Handle Integer(x) != something"""
        eq_result = self.__eq__(other)
        if eq_result is NotImplemented:
            return NotImplemented
        return not eq_result

    def __lt__(self, other):  return self._order(operator.__lt__, other)
    def __le__(self, other):  return self._order(operator.__le__, other)
    def __gt__(self, other):  return self._order(operator.__gt__, other)
    def __ge__(self, other):  return self._order(operator.__ge__, other)

    def _order(self, op, other):
        """Ordering against integers uses compare(), against other reals fobs off on int."""
        if self.is_integral(other):
            return op(compare(self, other), 0)
        elif isinstance(other, numbers.Real):
            return op(int(self), other)
        else:
            return NotImplemented

    def __hash__(self):
        """Same hash as the native int, so Integer(n) and n are interchangeable as dict keys."""
        if self._small is not None:
            return hash(self._small)
        return hash(int(self))

    def __bool__(self):
        return not self.is_zero()

    @staticmethod
    def is_integral(x):
        """Can this be an operand of the integer engines without losing anything?"""
        return isinstance(x, (Integer, int))

    # Math
    # ----
    # Operator sugar.  The canonical API is the named functions, e.g. arith.add(a, b).
    def __pos__(self): return self
    def __neg__(self): return arith.neg(self)
    def __abs__(self): return arith.abs(self)
    def __invert__(self): return bitwise.lognot(self)

    def __add__(self, other): return self._binary_op(arith.add, operator.__add__, self, other)
    def __radd__(self, other): return self._binary_op(arith.add, operator.__add__, other, self)
    def __sub__(self, other): return self._binary_op(arith.sub, operator.__sub__, self, other)
    def __rsub__(self, other): return self._binary_op(arith.sub, operator.__sub__, other, self)
    def __mul__(self, other): return self._binary_op(arith.mul, operator.__mul__, self, other)
    def __rmul__(self, other): return self._binary_op(arith.mul, operator.__mul__, other, self)
    def __floordiv__( self, other): return self._binary_op(arith.fdiv, operator.__floordiv__, self, other)
    def __rfloordiv__(self, other): return self._binary_op(arith.fdiv, operator.__floordiv__, other, self)
    def __mod__( self, other): return self._binary_op(arith.frem, operator.__mod__, self, other)
    def __rmod__(self, other): return self._binary_op(arith.frem, operator.__mod__, other, self)
    def __divmod__( self, other): return self._binary_op(arith.fdiv_rem, divmod, self, other)
    def __rdivmod__(self, other): return self._binary_op(arith.fdiv_rem, divmod, other, self)
    def __and__(self, other): return self._binary_op(bitwise.logand, operator.__and__, self, other)
    def __rand__(self, other): return self._binary_op(bitwise.logand, operator.__and__, other, self)
    def __or__(self, other): return self._binary_op(bitwise.logor, operator.__or__, self, other)
    def __ror__(self, other): return self._binary_op(bitwise.logor, operator.__or__, other, self)
    def __xor__(self, other): return self._binary_op(bitwise.logxor, operator.__xor__, self, other)
    def __rxor__(self, other): return self._binary_op(bitwise.logxor, operator.__xor__, other, self)

    def __lshift__(self, other): return self._shift_op(bitwise.shift_left, self, other)
    def __rlshift__(self, other): return self._shift_op(bitwise.shift_left, other, self)
    def __rshift__(self, other): return self._shift_op(bitwise.shift_right, self, other)
    def __rrshift__(self, other): return self._shift_op(bitwise.shift_right, other, self)

    def __truediv__(self, other):
        """True division outputs floating point, the way int / int does."""
        return self._binary_op(self._true_divide, operator.__truediv__, self, other)

    def __rtruediv__(self, other):
        return self._binary_op(self._true_divide, operator.__truediv__, other, self)

    @staticmethod
    def _true_divide(a, b):
        return operator.__truediv__(int(a), int(b))

    def __pow__(self, other, modulo=None):
        """
        Handle Integer(x) ** y and pow(Integer(x), y, m)

        A negative exponent without a modulus gives a float, the way int ** int does.
        With a modulus it is powm(), so a negative exponent means a modular inverse.
        """
        if modulo is not None:
            if self.is_integral(other) and self.is_integral(modulo):
                return theory.powm(self, other, modulo)
            return NotImplemented
        return self._binary_op(self._power, operator.__pow__, self, other)

    def __rpow__(self, other):
        return self._binary_op(self._power, operator.__pow__, other, self)

    @staticmethod
    def _power(base, exponent):
        exponent = int(exponent)
        if exponent < 0:
            return operator.__pow__(int(base), exponent)
        return arith.pow(base, exponent)

    @classmethod
    def _binary_op(cls, engine_op, native_op, input_left, input_right):
        """Two-input operator - the integer engines, or fob off on float or complex math."""
        if cls.is_integral(input_left) and cls.is_integral(input_right):
            return engine_op(cls.coerce(input_left), cls.coerce(input_right))
        elif isinstance(input_left, numbers.Number) and isinstance(input_right, numbers.Number):
            return native_op(cls._native(input_left), cls._native(input_right))
        else:
            return NotImplemented

    @classmethod
    def _shift_op(cls, engine_op, input_left, input_right):
        """Shift counts are native ints.  A negative count raises InvalidArgument, a ValueError."""
        if cls.is_integral(input_left) and cls.is_integral(input_right):
            return engine_op(cls.coerce(input_left), int(input_right))
        else:
            return NotImplemented

    @staticmethod
    def _native(x):
        return int(x) if isinstance(x, Integer) else x

    # numbers.Integral
    # ----------------
    def __int__(self):
        """Convert to a native int."""
        if self._small is not None:
            return self._small
        magnitude = digits.to_int(self._digits)
        return -magnitude if self._negative else magnitude

    __index__ = __int__

    def __float__(self):
        return convert.to_float(self)

    def __trunc__(self): return self
    def __floor__(self): return self
    def __ceil__(self): return self

    def __round__(self, ndigits=None):
        """Rounding to a negative number of decimal places fobs off on int, ties to even."""
        if ndigits is None or ndigits >= 0:
            return self
        return type(self)(round(int(self), ndigits))

    @property
    def numerator(self):
        return self

    @property
    def denominator(self):
        return self.ONE

    # Constants named for convenience
    # ---------
    ZERO = None
    ONE = None
    MINUS_ONE = None

    @classmethod
    def internal_setup(cls):
        """Initialize Integer constants after the Integer class is defined."""
        cls.ZERO      = cls.from_native(0)
        cls.ONE       = cls.from_native(1)
        cls.MINUS_ONE = cls.from_native(-1)


Integer.internal_setup()
ZERO = Integer.ZERO
ONE = Integer.ONE
MINUS_ONE = Integer.MINUS_ONE
assert ZERO.is_small() and ONE.is_small() and MINUS_ONE.is_negative()


# Representation Normalizer
# -------------------------
def promote(magnitude, negative=False):
    """
    Canonical Integer for a sign and a magnitude digit sequence.

    The result is Small if the value fits, otherwise Big.  (So this demotes as readily as it promotes.)
    The magnitude may be untrimmed scratch, it is never kept.

        assert promote([5], negative=True) == -5
        assert promote([0, 0, 0, 1]).is_big()
    """
    magnitude = digits.trim(list(magnitude))
    if len(magnitude) <= _SMALL_DIGITS:
        value = digits.to_int(magnitude)
        if negative:
            value = -value
        if MIN_SMALL <= value <= MAX_SMALL:
            return Integer.from_native(value)
    return Integer._big_unchecked(negative, tuple(magnitude))
assert promote([1, 1]).is_small()
assert promote([0, 0, 1]).is_big()
assert promote([0], negative=True).is_zero()


def demote_check(t):
    """Return t in canonical form, demoting a Big value whose magnitude fits Small."""
    if t.is_big() and len(t.magnitude()) <= _SMALL_DIGITS:
        return promote(t.magnitude(), t.is_negative())
    return t


# Comparison
# ----------
def compare(a, b):
    """
    Three-way comparison:  -1, 0, +1

    Canonical form makes mixed comparisons easy:
    a Big positive value is above every Small value, a Big negative value below.
    """
    a = Integer.coerce(a)
    b = Integer.coerce(b)
    if a.small is not None and b.small is not None:
        return (a.small > b.small) - (a.small < b.small)
    if a.is_negative() != b.is_negative():
        return -1 if a.is_negative() else 1
    if a.is_small():
        return 1 if a.is_negative() else -1
    if b.is_small():
        return -1 if a.is_negative() else 1
    magnitude_order = digits.compare(a.magnitude(), b.magnitude())
    return -magnitude_order if a.is_negative() else magnitude_order


def equal(a, b):
    return compare(a, b) == 0


def lt(a, b):
    return compare(a, b) < 0


def leq(a, b):
    return compare(a, b) <= 0


def gt(a, b):
    return compare(a, b) > 0


def geq(a, b):
    return compare(a, b) >= 0


def sign(a):
    """-1, 0, or +1"""
    a = Integer.coerce(a)
    if a.is_negative():
        return -1
    return 0 if a.is_zero() else 1


def is_even(a):
    a = Integer.coerce(a)
    return a.magnitude()[0] & 1 == 0


def is_odd(a):
    return not is_even(a)


# NOTE:  The engines import Integer from here, so they load after it is defined.
#        The operator sugar above looks them up at call time.
from . import arith     # noqa: E402
from . import bitwise   # noqa: E402
from . import theory    # noqa: E402
from . import convert   # noqa: E402
