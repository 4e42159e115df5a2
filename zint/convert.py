"""
Converting zint Integers to and from native ints, floats, strings and bytes.
"""

import math
import re

from . import digits
from .bitwise import shift_left, shift_right_trunc
from .integer import Integer, ZERO, compare, promote


# Native ints
# -----------
def of_int(i):
    """Integer from a native int of any size."""
    if not isinstance(i, int):
        raise Integer.ConstructorTypeError("of_int() needs an int, not {}".format(type(i).__name__))
    return Integer.from_native(int(i))


def _signed_range(bits):
    return Integer(-(1 << (bits - 1))), Integer((1 << (bits - 1)) - 1)


def _unsigned_range(bits):
    return ZERO, Integer((1 << bits) - 1)


RANGE_INT32 = _signed_range(32)
RANGE_INT64 = _signed_range(64)
RANGE_NATIVEINT = RANGE_INT64
RANGE_INT32_UNSIGNED = _unsigned_range(32)
RANGE_INT64_UNSIGNED = _unsigned_range(64)
RANGE_NATIVEINT_UNSIGNED = RANGE_INT64_UNSIGNED


def _fits(t, value_range):
    low, high = value_range
    return compare(low, t) <= 0 and compare(t, high) <= 0


def _to_native(t, value_range, type_name):
    t = Integer.coerce(t)
    if not _fits(t, value_range):
        raise Integer.Overflow("Integer {} does not fit {}".format(t, type_name))
    return int(t)


def fits_int(t):
    """Does t fit the native int range?  That range is the Small range, so this is is_small()."""
    return Integer.coerce(t).is_small()


def fits_int32(t): return _fits(Integer.coerce(t), RANGE_INT32)
def fits_int64(t): return _fits(Integer.coerce(t), RANGE_INT64)
def fits_nativeint(t): return _fits(Integer.coerce(t), RANGE_NATIVEINT)
def fits_int32_unsigned(t): return _fits(Integer.coerce(t), RANGE_INT32_UNSIGNED)
def fits_int64_unsigned(t): return _fits(Integer.coerce(t), RANGE_INT64_UNSIGNED)
def fits_nativeint_unsigned(t): return _fits(Integer.coerce(t), RANGE_NATIVEINT_UNSIGNED)


def to_int(t):
    """Native int in the Small range, Overflow otherwise."""
    t = Integer.coerce(t)
    if not t.is_small():
        raise Integer.Overflow("Integer {} does not fit int".format(t))
    return t.small


def to_int32(t): return _to_native(t, RANGE_INT32, 'int32')
def to_int64(t): return _to_native(t, RANGE_INT64, 'int64')
def to_nativeint(t): return _to_native(t, RANGE_NATIVEINT, 'nativeint')
def to_int32_unsigned(t): return _to_native(t, RANGE_INT32_UNSIGNED, 'unsigned int32')
def to_int64_unsigned(t): return _to_native(t, RANGE_INT64_UNSIGNED, 'unsigned int64')
def to_nativeint_unsigned(t): return _to_native(t, RANGE_NATIVEINT_UNSIGNED, 'unsigned nativeint')


# Floats
# ------
FLOAT_MANTISSA_BITS = 53


def of_float(x):
    """
    Integer from a float, truncating toward zero.

    Overflow on infinity or NaN.  Exact otherwise:  every finite float is
    a 53-bit mantissa times a power of two.
    """
    if math.isinf(x) or math.isnan(x):
        raise Integer.Overflow("Integer cannot represent {}".format(x))
    mantissa, exponent = math.frexp(x)
    mantissa = int(mantissa * (1 << FLOAT_MANTISSA_BITS))   # exact, frexp mantissa is in [0.5, 1)
    exponent -= FLOAT_MANTISSA_BITS
    if exponent >= 0:
        return shift_left(mantissa, exponent)
    return shift_right_trunc(mantissa, -exponent)


def to_float(t):
    """
    Nearest float.  Saturates to infinity beyond the float range, the way float arithmetic does.

    NOTE:  Fobs off on int-to-float conversion, which rounds half to even.
    """
    t = Integer.coerce(t)
    if t.small is not None:
        return float(t.small)
    try:
        return float(int(t))
    except OverflowError:
        return -math.inf if t.is_negative() else math.inf


# Strings
# -------
DIGIT_CHARACTERS = '0123456789abcdef'
_DIGIT_VALUES = {c: v for v, c in enumerate(DIGIT_CHARACTERS)}
_DIGIT_VALUES.update({c.upper(): v for c, v in list(_DIGIT_VALUES.items())})
PREFIX_BASES = {'0x': 16, '0o': 8, '0b': 2}
MIN_BASE = 2
MAX_BASE = 16


def _chunk_size(base):
    """Most base-digits that always fit one digit buffer digit."""
    size = 1
    while base ** (size + 1) < digits.DIGIT_BASE:
        size += 1
    return size
assert 9 == _chunk_size(10)
assert 7 == _chunk_size(16)


def _split_sign(s):
    if s[:1] == '-':
        return True, s[1:]
    elif s[:1] == '+':
        return False, s[1:]
    else:
        return False, s


def _parse_magnitude(body, base, original):
    """Digits of an unsigned numeral.  Underscores may separate digits."""
    if body == '' or body.startswith('_') or body.endswith('_') or '__' in body:
        raise Integer.InvalidArgument("Malformed integer string {}".format(repr(original)))
    body = body.replace('_', '')
    values = []
    for c in body:
        v = _DIGIT_VALUES.get(c)
        if v is None or v >= base:
            raise Integer.InvalidArgument(
                "Malformed base {} integer string {}".format(base, repr(original))
            )
        values.append(v)

    chunk = _chunk_size(base)
    magnitude = [0]
    for start in range(0, len(values), chunk):
        piece = values[start:start + chunk]
        piece_value = 0
        for v in piece:
            piece_value = piece_value * base + v
        magnitude = digits.add_digit(digits.mul_digit(magnitude, base ** len(piece)), piece_value)
    return magnitude


def of_string(s):
    """
    Integer from a numeral:  [sign]['0x'|'0o'|'0b']digits

        assert of_string('-0x1A') == -26
        assert of_string('1_000_000') == 1000000
    """
    negative, body = _split_sign(s)
    base = PREFIX_BASES.get(body[:2].lower(), None)
    if base is None:
        base = 10
    else:
        body = body[2:]
    return promote(_parse_magnitude(body, base, s), negative)


def of_string_base(base, s):
    """
    Integer from a numeral in base 2 to 16, no prefix.  Base 0 means of_string(), with prefix detection.

        assert of_string_base(16, 'ff') == 255
    """
    base = int(base)
    if base == 0:
        return of_string(s)
    if not MIN_BASE <= base <= MAX_BASE:
        raise Integer.InvalidArgument("Integer base must be 0 or 2 to 16, not {}".format(base))
    negative, body = _split_sign(s)
    return promote(_parse_magnitude(body, base, s), negative)


def to_string_base(base, t):
    """
    Numeral in base 2 to 16, lowercase, a minus sign but no prefix.

        assert to_string_base(16, -255) == '-ff'
    """
    base = int(base)
    if not MIN_BASE <= base <= MAX_BASE:
        raise Integer.InvalidArgument("Integer base must be 2 to 16, not {}".format(base))
    t = Integer.coerce(t)
    chunk = _chunk_size(base)
    chunk_divisor = base ** chunk
    pieces = []
    magnitude = t.magnitude()
    while True:
        magnitude, piece_value = digits.divmod_digit(magnitude, chunk_divisor)
        piece = []
        for _ in range(chunk):
            piece_value, v = divmod(piece_value, base)
            piece.append(DIGIT_CHARACTERS[v])
        pieces.append(''.join(reversed(piece)))
        if digits.is_zero(magnitude):
            break
    numeral = ''.join(reversed(pieces)).lstrip('0') or '0'
    return '-' + numeral if t.is_negative() else numeral


def to_string(t):
    """Decimal numeral."""
    return to_string_base(10, t)


# Formatting
# ----------
FORMAT_TYPES = 'iduboxX'
FORMAT_FLAGS = '+ -0#'
FORMAT_PATTERN = re.compile(r'%?[+ \-0#]*[0-9]*[iduboxX]\Z')
_FORMAT_BASES = {'i': 10, 'd': 10, 'u': 10, 'b': 2, 'o': 8, 'x': 16, 'X': 16}
_FORMAT_PREFIXES = {'b': '0b', 'o': '0o', 'x': '0x', 'X': '0X'}


def format_integer(fmt, t):
    """
    printf-style rendering:  ['%'] [flags] [width] type

        flags  +  force a sign
               space  a space where a + would go
               -  left justify
               0  pad with zeros after the sign and prefix
               #  base prefix 0b 0o 0x 0X
        type   i d u decimal, b binary, o octal, x X hexadecimal

        assert format_integer('#x', 26) == '0x1a'
        assert format_integer('+08d', 42) == '+0000042'

    Characters outside that grammar are dropped.
    """
    t = Integer.coerce(t)
    flags = set()
    width = 0
    width_started = False
    type_letter = None
    for c in fmt:
        if type_letter is not None:
            continue
        elif c in FORMAT_FLAGS and not width_started:
            flags.add(c)
        elif c in '0123456789':
            width = width * 10 + int(c)
            width_started = True
        elif c in FORMAT_TYPES:
            type_letter = c
    if type_letter is None:
        type_letter = 'd'

    body = to_string_base(_FORMAT_BASES[type_letter], abs(t))
    if type_letter == 'X':
        body = body.upper()
    if t.is_negative():
        sign = '-'
    elif '+' in flags:
        sign = '+'
    elif ' ' in flags:
        sign = ' '
    else:
        sign = ''
    prefix = _FORMAT_PREFIXES.get(type_letter, '') if '#' in flags else ''

    padding = width - len(sign) - len(prefix) - len(body)
    if padding <= 0:
        return sign + prefix + body
    elif '-' in flags:
        return sign + prefix + body + ' ' * padding
    elif '0' in flags:
        return sign + prefix + '0' * padding + body
    else:
        return ' ' * padding + sign + prefix + body


# Bytes
# -----
def to_bits(t):
    """
    Little-endian bytes of |t|, no trailing zero bytes.  The sign is lost.

        assert to_bits(258) == b'\\x02\\x01'
    """
    return digits.to_bytes_little(Integer.coerce(t).magnitude())


def of_bits(b):
    """Nonnegative Integer from little-endian bytes."""
    return promote(digits.from_bytes_little(bytes(b)))
