"""
Bit-level operations on zint Integers.

Negative numbers behave as two's complement with an infinite prefix of 1 bits.
    -1 is ...11111111
    -6 is ...11111010

A negative value's digits are its complement, |a| - 1, with every missing high digit a DIGIT_MASK.
So the digit loops below only ever handle nonnegative digits plus a mask per operand.
THANKS:  PyPy rbigint _bitwise(), which does the same with its maska and maskb.
"""

from . import arith
from . import digits
from .digits import DIGIT_MASK
from .integer import Integer, ZERO, SMALL_BITS, promote


def _complement(a):
    """(digits, mask) of a value.  Nonnegative:  (|a|, 0).  Negative:  (|a| - 1, DIGIT_MASK)."""
    if a.is_negative():
        return digits.sub_digit(a.magnitude(), 1), DIGIT_MASK
    return a.magnitude(), 0


def _bitwise(a, op, b):
    """
    One of '&', '|', '^' on the infinite two's complement of a and b.

    Whenever the answer is negative, compute its complement instead, then undo that at the end:
    result = -(complement + 1)
    """
    a_digits, mask_a = _complement(a)
    b_digits, mask_b = _complement(b)

    negative_result = False
    if op == '^':
        if mask_a != mask_b:
            mask_a ^= DIGIT_MASK
            negative_result = True
    elif op == '&':
        if mask_a and mask_b:
            op = '|'
            mask_a ^= DIGIT_MASK
            mask_b ^= DIGIT_MASK
            negative_result = True
    elif op == '|':
        if mask_a or mask_b:
            op = '&'
            mask_a ^= DIGIT_MASK
            mask_b ^= DIGIT_MASK
            negative_result = True

    # Digits above a shorter operand all equal its mask.  Those can cut the result short for '&'.
    if op == '&':
        if mask_a:
            size = len(b_digits)
        elif mask_b:
            size = len(a_digits)
        else:
            size = min(len(a_digits), len(b_digits))
    else:
        size = max(len(a_digits), len(b_digits))

    z = [0] * size
    for i in range(size):
        digit_a = (a_digits[i] if i < len(a_digits) else 0) ^ mask_a
        digit_b = (b_digits[i] if i < len(b_digits) else 0) ^ mask_b
        if op == '&':
            z[i] = digit_a & digit_b
        elif op == '|':
            z[i] = digit_a | digit_b
        else:
            z[i] = digit_a ^ digit_b
    digits.trim(z)

    if negative_result:
        return promote(digits.add_digit(z, 1), negative=True)
    return promote(z)


def logand(a, b):
    a, b = Integer.coerce(a), Integer.coerce(b)
    if a.small is not None and b.small is not None:
        return Integer.from_native(a.small & b.small)
    return _bitwise(a, '&', b)


def logor(a, b):
    a, b = Integer.coerce(a), Integer.coerce(b)
    if a.small is not None and b.small is not None:
        return Integer.from_native(a.small | b.small)
    return _bitwise(a, '|', b)


def logxor(a, b):
    a, b = Integer.coerce(a), Integer.coerce(b)
    if a.small is not None and b.small is not None:
        return Integer.from_native(a.small ^ b.small)
    return _bitwise(a, '^', b)


def lognot(a):
    """Bitwise complement, -a - 1"""
    a = Integer.coerce(a)
    if a.small is not None:
        return Integer.from_native(~a.small)
    if a.is_negative():
        return promote(digits.sub_digit(a.magnitude(), 1))
    return promote(digits.add_digit(a.magnitude(), 1), negative=True)


# Shifts
# ------
def _shift_count(k):
    k = int(k)
    if k < 0:
        raise Integer.InvalidArgument("Integer shift count must not be negative, not {}".format(k))
    return k


def shift_left(a, k):
    """a * 2**k"""
    a = Integer.coerce(a)
    k = _shift_count(k)
    if a.small is not None:
        if a.small == 0:
            return ZERO
        if abs(a.small).bit_length() + k < SMALL_BITS:
            return Integer.from_native(a.small << k)
    return promote(digits.shift_left(a.magnitude(), k), a.is_negative())


def shift_right(a, k):
    """
    Arithmetic shift, rounding toward negative infinity, the way >> does.

        assert shift_right(-7, 1) == -4
    """
    a = Integer.coerce(a)
    k = _shift_count(k)
    if a.small is not None:
        return Integer.from_native(a.small >> k)
    shifted = digits.shift_right(a.magnitude(), k)
    if a.is_negative() and digits.low_bits_nonzero(a.magnitude(), k):
        shifted = digits.add_digit(shifted, 1)
    return promote(shifted, a.is_negative())


def shift_right_trunc(a, k):
    """
    Shift rounding toward zero, like division by 2**k.

        assert shift_right_trunc(-7, 1) == -3
    """
    a = Integer.coerce(a)
    k = _shift_count(k)
    return promote(digits.shift_right(a.magnitude(), k), a.is_negative())


# Bit fields
# ----------
def testbit(a, n):
    """Bit n of the infinite two's complement.  Always True far enough up a negative number."""
    a = Integer.coerce(a)
    n = int(n)
    if n < 0:
        raise Integer.InvalidArgument("Integer bit index must not be negative, not {}".format(n))
    if a.small is not None:
        return (a.small >> n) & 1 == 1
    if a.is_negative():
        return not digits.test_bit(digits.sub_digit(a.magnitude(), 1), n)
    return digits.test_bit(a.magnitude(), n)


def _check_field(off, length):
    if off < 0 or length < 0:
        raise Integer.InvalidArgument(
            "Integer bit field needs nonnegative offset and length, not {} and {}".format(off, length)
        )


def extract(a, off, length):
    """
    Unsigned bit field, length bits starting at bit off.

        assert extract(-1, 3, 4) == 15
    """
    a = Integer.coerce(a)
    off, length = int(off), int(length)
    _check_field(off, length)
    if length == 0:
        return ZERO
    if a.small is not None and length < SMALL_BITS:
        return Integer.from_native((a.small >> off) & ((1 << length) - 1))
    field_mask = promote(digits.sub_digit(digits.shift_left([1], length), 1))
    return logand(shift_right(a, off), field_mask)


def signed_extract(a, off, length):
    """
    Bit field with its top bit taken as a sign.

        assert signed_extract(0b1100, 2, 2) == -1
    """
    field = extract(a, off, length)
    if length > 0 and testbit(field, length - 1):
        field = arith.sub(field, shift_left(1, length))
    return field


# Counting
# --------
def numbits(a):
    """Bit length of |a|, 0 for zero."""
    return digits.bit_length(Integer.coerce(a).magnitude())


def popcount(a):
    """Number of 1 bits.  A negative number has infinitely many."""
    a = Integer.coerce(a)
    if a.is_negative():
        raise Integer.Overflow("Integer popcount of a negative number is infinite:  {}".format(a))
    return digits.popcount(a.magnitude())


def hamdist(a, b):
    """Number of differing bits.  Mixed signs differ in infinitely many."""
    a, b = Integer.coerce(a), Integer.coerce(b)
    if a.is_negative() != b.is_negative():
        raise Integer.Overflow("Integer hamdist of mixed signs is infinite:  {}, {}".format(a, b))
    return popcount(logxor(a, b))


def trailing_zeros(a):
    """Index of the lowest 1 bit.  Same for a and -a."""
    a = Integer.coerce(a)
    if a.is_zero():
        raise Integer.Overflow("Integer zero has infinitely many trailing zeros")
    return digits.trailing_zeros(a.magnitude())


def log2(a):
    """Floor of the base 2 logarithm, a > 0."""
    a = Integer.coerce(a)
    if a.is_negative() or a.is_zero():
        raise Integer.InvalidArgument("Integer log2 needs a positive number, not {}".format(a))
    return numbits(a) - 1


def log2up(a):
    """Ceiling of the base 2 logarithm, a > 0."""
    a = Integer.coerce(a)
    if a.is_negative() or a.is_zero():
        raise Integer.InvalidArgument("Integer log2up needs a positive number, not {}".format(a))
    return numbits(arith.pred(a))
