"""
zint - Arbitrary precision integers, small when they can be, big when they must be.

Usage example:

    import zint

    n = zint.Integer(2) ** 100
    assert n.is_big()
    assert zint.powm(4, 13, 497) == 445
    assert zint.format_integer('#x', 26) == '0x1a'

Usage example:

    from zint import Integer, add, div_rem, gcdext

    q, r = div_rem(-7, 2)   # (-3, -1), truncating
    g, s, t = gcdext(240, 46)   # (2, -9, 47)
"""

from .integer import Integer
from .integer import ZERO, ONE, MINUS_ONE
from .integer import SMALL_BITS, MIN_SMALL, MAX_SMALL
from .integer import promote, demote_check
from .integer import compare, equal, lt, leq, gt, geq, sign, is_even, is_odd
from .arith import (
    add, sub, mul, neg, abs, succ, pred,
    div, rem, div_rem, fdiv, frem, fdiv_rem, cdiv, cdiv_rem, ediv, erem, ediv_rem,
    divexact, divisible, congruent,
    pow, sqrt, sqrt_rem, root, rootrem,
)
from .bitwise import (
    logand, logor, logxor, lognot,
    shift_left, shift_right, shift_right_trunc,
    testbit, extract, signed_extract,
    numbits, popcount, hamdist, trailing_zeros, log2, log2up,
)
from .theory import (
    Primality,
    gcd, gcdext, lcm, invert, powm,
    probab_prime, nextprime, perfect_power, perfect_square,
    jacobi, legendre, kronecker, remove,
    fac, primorial, bin, fib, lucnum,
)
from .convert import (
    of_int, to_int, to_int32, to_int64, to_nativeint,
    to_int32_unsigned, to_int64_unsigned, to_nativeint_unsigned,
    fits_int, fits_int32, fits_int64, fits_nativeint,
    fits_int32_unsigned, fits_int64_unsigned, fits_nativeint_unsigned,
    of_float, to_float,
    of_string, of_string_base, to_string, to_string_base,
    format_integer, to_bits, of_bits,
)

Overflow = Integer.Overflow
DivisionByZero = Integer.DivisionByZero
InvalidArgument = Integer.InvalidArgument

# abs, pow and bin are zint.abs, zint.pow and zint.bin only.  A star import keeps the builtins.
__all__ = [
    'Integer', 'ZERO', 'ONE', 'MINUS_ONE', 'SMALL_BITS', 'MIN_SMALL', 'MAX_SMALL',
    'Overflow', 'DivisionByZero', 'InvalidArgument',
    'promote', 'demote_check',
    'compare', 'equal', 'lt', 'leq', 'gt', 'geq', 'sign', 'is_even', 'is_odd',

    'add', 'sub', 'mul', 'neg', 'succ', 'pred',
    'div', 'rem', 'div_rem', 'fdiv', 'frem', 'fdiv_rem', 'cdiv', 'cdiv_rem', 'ediv', 'erem', 'ediv_rem',
    'divexact', 'divisible', 'congruent',
    'sqrt', 'sqrt_rem', 'root', 'rootrem',

    'logand', 'logor', 'logxor', 'lognot',
    'shift_left', 'shift_right', 'shift_right_trunc',
    'testbit', 'extract', 'signed_extract',
    'numbits', 'popcount', 'hamdist', 'trailing_zeros', 'log2', 'log2up',

    'Primality',
    'gcd', 'gcdext', 'lcm', 'invert', 'powm',
    'probab_prime', 'nextprime', 'perfect_power', 'perfect_square',
    'jacobi', 'legendre', 'kronecker', 'remove',
    'fac', 'primorial', 'fib', 'lucnum',

    'of_int', 'to_int', 'to_int32', 'to_int64', 'to_nativeint',
    'to_int32_unsigned', 'to_int64_unsigned', 'to_nativeint_unsigned',
    'fits_int', 'fits_int32', 'fits_int64', 'fits_nativeint',
    'fits_int32_unsigned', 'fits_int64_unsigned', 'fits_nativeint_unsigned',
    'of_float', 'to_float',
    'of_string', 'of_string_base', 'to_string', 'to_string_base',
    'format_integer', 'to_bits', 'of_bits',
]

from . import version
__version__ = version.__doc__
