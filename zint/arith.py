"""
Arithmetic on zint Integers.

Every function takes Integer (or native int) operands and returns canonical Integers.
Small operands are computed natively and normalized with Integer.from_native().
Anything Big goes through the digit buffers.

Division comes in four roundings:
    div, rem, div_rem         truncate toward zero, remainder has the sign of the dividend
    fdiv, frem, fdiv_rem      floor, remainder has the sign of the divisor (Python's // and %)
    cdiv, cdiv_rem            ceiling, remainder has the opposite sign of the divisor
    ediv, erem, ediv_rem      Euclidean, remainder in [0, |divisor|)
In every case  a == b * q + r  and  |r| < |b|.
"""

import builtins
import math

from . import digits
from .integer import Integer, ZERO, ONE, promote, compare


def _operands(*args):
    return [Integer.coerce(x) for x in args]


def _signed_add(a_magnitude, a_negative, b_magnitude, b_negative):
    """Add two sign-magnitude values."""
    if a_negative == b_negative:
        return promote(digits.add(a_magnitude, b_magnitude), a_negative)
    order = digits.compare(a_magnitude, b_magnitude)
    if order == 0:
        return ZERO
    elif order > 0:
        return promote(digits.sub(a_magnitude, b_magnitude), a_negative)
    else:
        return promote(digits.sub(b_magnitude, a_magnitude), b_negative)


def add(a, b):
    a, b = _operands(a, b)
    if a.small is not None and b.small is not None:
        return Integer.from_native(a.small + b.small)
    return _signed_add(a.magnitude(), a.is_negative(), b.magnitude(), b.is_negative())


def sub(a, b):
    a, b = _operands(a, b)
    if a.small is not None and b.small is not None:
        return Integer.from_native(a.small - b.small)
    return _signed_add(a.magnitude(), a.is_negative(), b.magnitude(), not b.is_negative())


def mul(a, b):
    a, b = _operands(a, b)
    if a.small is not None and b.small is not None:
        return Integer.from_native(a.small * b.small)
    return promote(digits.mul(a.magnitude(), b.magnitude()), a.is_negative() != b.is_negative())


def neg(a):
    a = Integer.coerce(a)
    if a.small is not None:
        return Integer.from_native(-a.small)
    return promote(a.magnitude(), not a.is_negative())


def abs(a):
    """Absolute value.  (Named like operator.abs.)"""
    a = Integer.coerce(a)
    return neg(a) if a.is_negative() else a


def succ(a):
    return add(a, ONE)


def pred(a):
    return sub(a, ONE)


# Division
# --------
def _check_divisor(b):
    if b.is_zero():
        raise Integer.DivisionByZero("Integer division by zero")


def div_rem(a, b):
    """
    Truncating division.  (q, r) with q rounded toward zero.

        assert div_rem(-7, 2) == (-3, -1)
    """
    a, b = _operands(a, b)
    _check_divisor(b)
    if a.small is not None and b.small is not None:
        q = builtins.abs(a.small) // builtins.abs(b.small)
        if (a.small < 0) != (b.small < 0):
            q = -q
        return Integer.from_native(q), Integer.from_native(a.small - q * b.small)
    q_magnitude, r_magnitude = digits.divmod(a.magnitude(), b.magnitude())
    return (
        promote(q_magnitude, a.is_negative() != b.is_negative()),
        promote(r_magnitude, a.is_negative()),
    )
assert div_rem(-7, 2) == (-3, -1)
assert div_rem(7, -2) == (-3, 1)


def div(a, b):
    return div_rem(a, b)[0]


def rem(a, b):
    return div_rem(a, b)[1]


def fdiv_rem(a, b):
    """
    Flooring division, the way Python's divmod() does it.

        assert fdiv_rem(-7, 2) == (-4, 1)
    """
    b = Integer.coerce(b)
    q, r = div_rem(a, b)
    if not r.is_zero() and r.is_negative() != b.is_negative():
        q = pred(q)
        r = add(r, b)
    return q, r


def fdiv(a, b):
    return fdiv_rem(a, b)[0]


def frem(a, b):
    return fdiv_rem(a, b)[1]


def cdiv_rem(a, b):
    """
    Ceiling division.

        assert cdiv_rem(7, 2) == (4, -1)
    """
    b = Integer.coerce(b)
    q, r = div_rem(a, b)
    if not r.is_zero() and r.is_negative() == b.is_negative():
        q = succ(q)
        r = sub(r, b)
    return q, r


def cdiv(a, b):
    return cdiv_rem(a, b)[0]


def ediv_rem(a, b):
    """
    Euclidean division.  The remainder is never negative.

        assert ediv_rem(-7, 2) == (-4, 1)
        assert ediv_rem(-7, -2) == (4, 1)
    """
    b = Integer.coerce(b)
    q, r = div_rem(a, b)
    if r.is_negative():
        if b.is_negative():
            q = succ(q)
            r = sub(r, b)
        else:
            q = pred(q)
            r = add(r, b)
    return q, r
assert ediv_rem(-7, 2) == (-4, 1)


def ediv(a, b):
    return ediv_rem(a, b)[0]


def erem(a, b):
    return ediv_rem(a, b)[1]


def divexact(a, b):
    """Quotient of a division known to be exact.  An inexact division gives an unspecified quotient."""
    a, b = _operands(a, b)
    _check_divisor(b)
    if a.small is not None and b.small is not None:
        q = builtins.abs(a.small) // builtins.abs(b.small)
        return Integer.from_native(-q if (a.small < 0) != (b.small < 0) else q)
    q_magnitude, _ = digits.divmod(a.magnitude(), b.magnitude())
    return promote(q_magnitude, a.is_negative() != b.is_negative())


def divisible(a, b):
    """Does b divide a?  Zero divides only zero."""
    a, b = _operands(a, b)
    if b.is_zero():
        return a.is_zero()
    return rem(a, b).is_zero()


def congruent(a, b, m):
    """Is a == b modulo m?  Modulo zero that means plain equality."""
    return divisible(sub(a, b), m)


# Powers and roots
# ----------------
def pow(base, exponent):
    """
    base ** exponent, for a native int exponent >= 0.  (Named like operator.pow.)

    Square-and-multiply, low bit first.
    """
    base = Integer.coerce(base)
    exponent = int(exponent)
    if exponent < 0:
        raise Integer.InvalidArgument("Integer pow() exponent must not be negative, not {}".format(exponent))
    result = ONE
    while exponent:
        if exponent & 1:
            result = mul(result, base)
        exponent >>= 1
        if exponent:
            base = mul(base, base)
    return result


def _check_root_args(x, n):
    if n < 1:
        raise Integer.InvalidArgument("Integer root degree must be positive, not {}".format(n))
    if x.is_negative():
        raise Integer.InvalidArgument("Integer root of a negative number:  {}".format(x))


def _newton_root(x, n):
    """
    Truncated n-th root of a positive x by integer Newton iteration.

    Starting at 2**ceil(bits/n), which is above the root, the iterates fall monotonically
    until the first one that does not fall.  That one is the truncated root.
    """
    if n == 1:
        return x
    bits = digits.bit_length(x.magnitude())
    guess = promote(digits.shift_left([1], -(-bits // n)))
    while True:
        better = div(add(mul(guess, n - 1), div(x, pow(guess, n - 1))), n)
        if compare(better, guess) >= 0:
            return guess
        guess = better


def root(x, n):
    """Truncated n-th root, n >= 1 a native int, x >= 0."""
    x = Integer.coerce(x)
    n = int(n)
    _check_root_args(x, n)
    if x.is_zero():
        return ZERO
    if n == 2 and x.small is not None:
        return Integer.from_native(math.isqrt(x.small))
    return _newton_root(x, n)


def rootrem(x, n):
    """(r, x - r**n) where r is the truncated n-th root."""
    x = Integer.coerce(x)
    r = root(x, n)
    return r, sub(x, pow(r, int(n)))


def sqrt(x):
    """Truncated square root.  InvalidArgument if x < 0."""
    return root(x, 2)


def sqrt_rem(x):
    """(s, x - s*s)"""
    return rootrem(x, 2)

