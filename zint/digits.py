"""
Digit buffers - the magnitude of a big zint Integer.

A digit buffer is a sequence of unsigned DIGIT_BITS-bit digits, least significant first.
    [0x00000001, 0x00000002] is 2**32 * 2 + 1 == 0x200000001

The buffer has no leading zero digits, except the single digit [0] which represents zero.
Functions here take any sequence of digits (list or tuple) and return new lists.
They never modify their inputs.  Big Integers hold tuples, the lists here are scratch.

All magnitudes are nonnegative.  Signs are the business of integer.py.
"""

import struct


DIGIT_BITS = 32
DIGIT_BASE = 1 << DIGIT_BITS
DIGIT_MASK = DIGIT_BASE - 1

KARATSUBA_THRESHOLD = 40   # digits in the shorter factor, below this schoolbook multiplication wins
# NOTE:  Pure Python pays per loop iteration, not per multiply, so the crossover is later than in C.


def trim(ds):
    """Remove leading zero digits from a scratch list, in place.  Returns the same list."""
    while len(ds) > 1 and ds[-1] == 0:
        ds.pop()
    if len(ds) == 0:
        ds.append(0)
    return ds
assert [1, 2] == trim([1, 2, 0, 0])
assert [0] == trim([])


def is_zero(ds):
    return len(ds) == 1 and ds[0] == 0


def from_int(n):
    """Split a nonnegative native int into digits."""
    assert n >= 0
    ds = []
    while True:
        ds.append(n & DIGIT_MASK)
        n >>= DIGIT_BITS
        if n == 0:
            return ds
assert [0] == from_int(0)
assert [1, 1] == from_int(DIGIT_BASE + 1)


def to_int(ds):
    """Join digits into a native int."""
    n = 0
    for d in reversed(ds):
        n = (n << DIGIT_BITS) | d
    return n
assert DIGIT_BASE + 1 == to_int([1, 1])


def from_bytes_little(b):
    """Little-endian unsigned bytes to digits.  Trailing zero bytes are harmless."""
    width = DIGIT_BITS // 8
    padded = b + bytes(b'\x00') * (-len(b) % width)
    ds = list(struct.unpack('<{}I'.format(len(padded) // width), padded))
    return trim(ds)
assert [0x04030201, 0x05] == from_bytes_little(b'\x01\x02\x03\x04\x05')


def to_bytes_little(ds):
    """Digits to little-endian unsigned bytes, with no trailing zero bytes.  Zero is b''."""
    return struct.pack('<{}I'.format(len(ds)), *ds).rstrip(bytes(b'\x00'))
assert b'\x01\x02\x03\x04\x05' == to_bytes_little([0x04030201, 0x05])
assert b'' == to_bytes_little([0])


def compare(a, b):
    """Three-way comparison of two magnitudes:  -1, 0, +1"""
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return -1 if a[i] < b[i] else 1
    return 0
assert -1 == compare([5], [0, 1])
assert 0 == compare([5, 1], [5, 1])
assert 1 == compare([6, 1], [5, 1])


def add(a, b):
    """Sum of two magnitudes."""
    if len(a) < len(b):
        a, b = b, a
    z = [0] * (len(a) + 1)
    carry = 0
    for i in range(len(b)):
        carry += a[i] + b[i]
        z[i] = carry & DIGIT_MASK
        carry >>= DIGIT_BITS
    for i in range(len(b), len(a)):
        carry += a[i]
        z[i] = carry & DIGIT_MASK
        carry >>= DIGIT_BITS
    z[len(a)] = carry
    return trim(z)
assert [0, 1] == add([DIGIT_MASK], [1])


def add_digit(a, d):
    """Sum of a magnitude and a single digit (0 <= d < DIGIT_BASE)."""
    z = list(a) + [0]
    i = 0
    while d:
        d += z[i]
        z[i] = d & DIGIT_MASK
        d >>= DIGIT_BITS
        i += 1
    return trim(z)
assert [0, 0, 1] == add_digit([DIGIT_MASK, DIGIT_MASK], 1)


def sub(a, b):
    """Difference of two magnitudes.  Caller guarantees a >= b."""
    z = [0] * len(a)
    borrow = 0
    for i in range(len(b)):
        borrow = a[i] - b[i] - borrow
        z[i] = borrow & DIGIT_MASK
        borrow = 1 if borrow < 0 else 0
    for i in range(len(b), len(a)):
        borrow = a[i] - borrow
        z[i] = borrow & DIGIT_MASK
        borrow = 1 if borrow < 0 else 0
    assert borrow == 0, "Magnitude subtraction underflow"
    return trim(z)
assert [DIGIT_MASK] == sub([0, 1], [1])


def sub_digit(a, d):
    """Difference of a magnitude and a single digit.  Caller guarantees a >= d."""
    z = list(a)
    i = 0
    while d:
        d = z[i] - d
        z[i] = d & DIGIT_MASK
        d = 1 if d < 0 else 0
        i += 1
    return trim(z)
assert [DIGIT_MASK, DIGIT_MASK] == sub_digit([0, 0, 1], 1)


def mul_digit(a, d):
    """Product of a magnitude and a single digit."""
    z = [0] * (len(a) + 1)
    carry = 0
    for i in range(len(a)):
        carry += a[i] * d
        z[i] = carry & DIGIT_MASK
        carry >>= DIGIT_BITS
    z[len(a)] = carry
    return trim(z)


def mul(a, b):
    """
    Product of two magnitudes.

    Schoolbook for short factors, Karatsuba above KARATSUBA_THRESHOLD digits.
    SEE:  Knuth TAOCP vol 2, 4.3.3 for the split
    """
    if len(a) < len(b):
        a, b = b, a
    if is_zero(b):
        return [0]
    if len(b) == 1:
        return mul_digit(a, b[0])
    if len(b) < KARATSUBA_THRESHOLD:
        return _schoolbook_mul(a, b)
    return _karatsuba_mul(a, b)


def _schoolbook_mul(a, b):
    z = [0] * (len(a) + len(b))
    for i in range(len(b)):
        bi = b[i]
        if bi == 0:
            continue
        carry = 0
        k = i
        for ai in a:
            carry += z[k] + ai * bi
            z[k] = carry & DIGIT_MASK
            carry >>= DIGIT_BITS
            k += 1
        while carry:
            carry += z[k]
            z[k] = carry & DIGIT_MASK
            carry >>= DIGIT_BITS
            k += 1
    return trim(z)


def _split(ds, n):
    """Split into (low n digits, the rest), each trimmed."""
    return trim(list(ds[:n])), trim(list(ds[n:]))


def _shift_digits(ds, n):
    """Multiply by DIGIT_BASE**n."""
    if is_zero(ds):
        return [0]
    return [0] * n + list(ds)


def _karatsuba_mul(a, b):
    """Karatsuba product, len(a) >= len(b) >= KARATSUBA_THRESHOLD."""
    half = len(a) // 2
    a_low, a_high = _split(a, half)
    if len(b) <= half:
        # NOTE:  Lopsided, b fits in the low half.  Two products instead of three.
        return add(mul(a_low, b), _shift_digits(mul(a_high, b), half))
    b_low, b_high = _split(b, half)
    low = mul(a_low, b_low)
    high = mul(a_high, b_high)
    middle = mul(add(a_low, a_high), add(b_low, b_high))
    middle = sub(sub(middle, low), high)
    return add(add(low, _shift_digits(middle, half)), _shift_digits(high, 2 * half))


def divmod_digit(a, d):
    """Short division of a magnitude by a single nonzero digit.  Returns (quotient digits, remainder int)."""
    assert 0 < d < DIGIT_BASE
    q = [0] * len(a)
    r = 0
    for i in range(len(a) - 1, -1, -1):
        r = (r << DIGIT_BITS) | a[i]
        q[i] = r // d
        r -= q[i] * d
    return trim(q), r
assert ([3], 1) == divmod_digit([10], 3)


def digit_bit_length(d):
    return d.bit_length()


def _lshift_bits(ds, s):
    """Shift left by 0 <= s < DIGIT_BITS.  Result has one extra digit, possibly zero, untrimmed."""
    z = [0] * (len(ds) + 1)
    carry = 0
    for i in range(len(ds)):
        carry |= ds[i] << s
        z[i] = carry & DIGIT_MASK
        carry >>= DIGIT_BITS
    z[len(ds)] = carry
    return z


def _rshift_bits(ds, s):
    """Shift right by 0 <= s < DIGIT_BITS.  Untrimmed."""
    z = [0] * len(ds)
    if s == 0:
        z[:] = ds
        return z
    low_mask = (1 << s) - 1
    carry = 0
    for i in range(len(ds) - 1, -1, -1):
        d = ds[i]
        z[i] = (carry << (DIGIT_BITS - s)) | (d >> s)
        carry = d & low_mask
    return z


def divmod(a, b):
    """
    Long division of two magnitudes.  Returns (quotient, remainder) digit lists.

    Knuth's algorithm D.  The divisor is first shifted left so its top digit has its high bit set,
    which keeps every trial quotient digit within 2 of the truth.
    SEE:  Knuth TAOCP vol 2, 4.3.1
    """
    if is_zero(b):
        raise ZeroDivisionError("Digit buffer division by zero")
    if compare(a, b) < 0:
        return [0], trim(list(a))
    if len(b) == 1:
        q, r = divmod_digit(a, b[0])
        return q, [r]

    shift = DIGIT_BITS - digit_bit_length(b[-1])
    w = _lshift_bits(b, shift)
    assert w[-1] == 0
    w.pop()
    v = _lshift_bits(a, shift)
    n = len(w)
    m = len(v) - n
    q = [0] * m
    w_top = w[n - 1]
    w_next = w[n - 2]

    for j in range(m - 1, -1, -1):
        numerator = (v[j + n] << DIGIT_BITS) | v[j + n - 1]
        q_hat = numerator // w_top
        r_hat = numerator - q_hat * w_top
        while q_hat >= DIGIT_BASE or q_hat * w_next > (r_hat << DIGIT_BITS) + v[j + n - 2]:
            q_hat -= 1
            r_hat += w_top
            if r_hat >= DIGIT_BASE:
                break

        # Multiply and subtract q_hat * w from v[j : j+n+1]
        borrow = 0
        carry = 0
        for i in range(n):
            product = q_hat * w[i] + carry
            carry = product >> DIGIT_BITS
            t = v[i + j] - (product & DIGIT_MASK) - borrow
            v[i + j] = t & DIGIT_MASK
            borrow = 1 if t < 0 else 0
        t = v[j + n] - carry - borrow
        v[j + n] = t & DIGIT_MASK

        if t < 0:
            # NOTE:  q_hat was one too big.  Rare, about 2/DIGIT_BASE of the time.  Add w back.
            q_hat -= 1
            carry = 0
            for i in range(n):
                carry += v[i + j] + w[i]
                v[i + j] = carry & DIGIT_MASK
                carry >>= DIGIT_BITS
            v[j + n] = (v[j + n] + carry) & DIGIT_MASK

        q[j] = q_hat

    r = _rshift_bits(v[:n], shift)
    return trim(q), trim(r)


def bit_length(ds):
    """Number of bits in the magnitude, 0 for zero."""
    return (len(ds) - 1) * DIGIT_BITS + digit_bit_length(ds[-1])
assert 33 == bit_length([0, 1])
assert 0 == bit_length([0])


def shift_left(ds, nbits):
    """Multiply by 2**nbits, nbits >= 0."""
    assert nbits >= 0
    if is_zero(ds):
        return [0]
    whole, s = nbits // DIGIT_BITS, nbits % DIGIT_BITS
    return trim([0] * whole + _lshift_bits(ds, s))
assert [0, 2] == shift_left([1], 33)


def shift_right(ds, nbits):
    """Floor divide by 2**nbits, nbits >= 0."""
    assert nbits >= 0
    whole, s = nbits // DIGIT_BITS, nbits % DIGIT_BITS
    if whole >= len(ds):
        return [0]
    return trim(_rshift_bits(ds[whole:], s))
assert [1] == shift_right([0, 2], 33)


def low_bits_nonzero(ds, nbits):
    """Are any of the lowest nbits bits set?  That is, would shift_right() drop anything?"""
    whole, s = nbits // DIGIT_BITS, nbits % DIGIT_BITS
    for i in range(min(whole, len(ds))):
        if ds[i] != 0:
            return True
    if whole < len(ds) and s > 0:
        return (ds[whole] & ((1 << s) - 1)) != 0
    return False
assert low_bits_nonzero([0, 1], 33)
assert not low_bits_nonzero([0, 2], 33)


def test_bit(ds, n):
    whole, s = n // DIGIT_BITS, n % DIGIT_BITS
    if whole >= len(ds):
        return False
    return (ds[whole] >> s) & 1 == 1


def trailing_zeros(ds):
    """Count of zero bits below the lowest set bit.  Caller guarantees nonzero."""
    for i, d in enumerate(ds):
        if d != 0:
            return i * DIGIT_BITS + digit_bit_length(d & -d) - 1
    raise ValueError("Zero has no lowest set bit")
assert 33 == trailing_zeros([0, 2])


def popcount(ds):
    return sum(bin(d).count('1') for d in ds)
assert 3 == popcount([7])


def gcd(a, b):
    """
    Binary GCD of two nonzero magnitudes.

    Stein's algorithm:  strip the common power of two, then subtract-and-shift odd values.
    SEE:  Knuth TAOCP vol 2, 4.5.2 algorithm B
    """
    assert not is_zero(a) and not is_zero(b)
    za = trailing_zeros(a)
    zb = trailing_zeros(b)
    common = min(za, zb)
    a = shift_right(a, za)
    b = shift_right(b, zb)
    while True:
        c = compare(a, b)
        if c == 0:
            break
        if c < 0:
            a, b = b, a
        a = sub(a, b)
        a = shift_right(a, trailing_zeros(a))
    return shift_left(a, common)
assert [6] == gcd([48], [18])
