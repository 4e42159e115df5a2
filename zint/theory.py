"""
Number theory on zint Integers:  gcd, modular arithmetic, primes, and friends.
"""

import logging
import random

from . import digits
from .arith import (
    abs, add, sub, mul, neg, succ, pred, pow, div_rem, divexact, erem, root, sqrt,
)
from .bitwise import extract, numbits, shift_right, testbit, trailing_zeros
from .integer import Integer, ZERO, ONE, compare, is_even, promote


logger = logging.getLogger(__name__)


PROBAB_PRIME_ROUNDS_DEFAULT = 25   # Miller-Rabin rounds, error probability at most 4**-rounds
TRIAL_DIVISION_LIMIT = 1000        # trial divide by the primes below this before Miller-Rabin


class Primality(object):
    """Outcomes of probab_prime()"""
    COMPOSITE        = 0
    PROBABLY_PRIME   = 1
    DEFINITELY_PRIME = 2

    name_from_code = {
        COMPOSITE:        'COMPOSITE',
        PROBABLY_PRIME:   'PROBABLY_PRIME',
        DEFINITELY_PRIME: 'DEFINITELY_PRIME',
    }


def _sieve(limit):
    """Native primes below limit, Eratosthenes."""
    if limit < 3:
        return []
    is_prime = [True] * limit
    is_prime[0] = is_prime[1] = False
    for i in range(2, int(limit ** 0.5) + 1):
        if is_prime[i]:
            is_prime[i * i::i] = [False] * len(range(i * i, limit, i))
    return [i for i, flag in enumerate(is_prime) if flag]
assert [2, 3, 5, 7] == _sieve(10)


SMALL_PRIMES = _sieve(TRIAL_DIVISION_LIMIT)
assert 168 == len(SMALL_PRIMES)

# Miller-Rabin with the first 13 prime bases has no false positives below this.
# SEE:  Sorenson and Webster, Strong pseudoprimes to twelve prime bases, 2015
DETERMINISTIC_LIMIT = Integer(3317044064679887385961981)
DETERMINISTIC_WITNESSES = SMALL_PRIMES[:13]
assert 41 == DETERMINISTIC_WITNESSES[-1]


# Greatest common divisor
# -----------------------
def _check_nonzero(name, *args):
    for x in args:
        if x.is_zero():
            raise Integer.DivisionByZero("Integer {} of zero is undefined".format(name))


def gcd(a, b):
    """Greatest common divisor, never negative.  DivisionByZero if either is zero."""
    a, b = Integer.coerce(a), Integer.coerce(b)
    _check_nonzero('gcd', a, b)
    if a.small is not None and b.small is not None:
        x, y = a.small, b.small
        while y:
            x, y = y, x % y
        return Integer.from_native(x if x >= 0 else -x)
    return promote(digits.gcd(a.magnitude(), b.magnitude()))


def gcdext(a, b):
    """
    Extended Euclid.  (g, s, t) with g == a*s + b*t and g == gcd(a, b).

        assert gcdext(240, 46) == (2, -9, 47)
    """
    a, b = Integer.coerce(a), Integer.coerce(b)
    _check_nonzero('gcdext', a, b)
    old_r, r = a, b
    old_s, s = ONE, ZERO
    old_t, t = ZERO, ONE
    while not r.is_zero():
        q, remainder = div_rem(old_r, r)
        old_r, r = r, remainder
        old_s, s = s, sub(old_s, mul(q, s))
        old_t, t = t, sub(old_t, mul(q, t))
    if old_r.is_negative():
        return neg(old_r), neg(old_s), neg(old_t)
    return old_r, old_s, old_t


def lcm(a, b):
    """Least common multiple, never negative.  DivisionByZero if either is zero."""
    a, b = Integer.coerce(a), Integer.coerce(b)
    _check_nonzero('lcm', a, b)
    return mul(divexact(abs(a), gcd(a, b)), abs(b))


# Modular arithmetic
# ------------------
def invert(base, mod):
    """
    Modular inverse, in [0, |mod|).

    DivisionByZero if there isn't one, that is when base and mod share a factor, or mod is zero.
    """
    base, mod = Integer.coerce(base), Integer.coerce(mod)
    if mod.is_zero():
        raise Integer.DivisionByZero("Integer invert modulo zero")
    if base.is_zero():
        raise Integer.DivisionByZero("Integer zero is not invertible")
    g, s, _ = gcdext(base, mod)
    if compare(g, ONE) != 0:
        raise Integer.DivisionByZero("Integer {} is not invertible modulo {}".format(base, mod))
    return erem(s, abs(mod))


def powm(base, exponent, mod):
    """
    base ** exponent modulo mod, in [0, |mod|).

    Left-to-right square-and-multiply, reducing after every step.
    A negative exponent raises the modular inverse of base.

        assert powm(4, 13, 497) == 445
    """
    base, exponent, mod = Integer.coerce(base), Integer.coerce(exponent), Integer.coerce(mod)
    if mod.is_zero():
        raise Integer.DivisionByZero("Integer powm modulo zero")
    mod = abs(mod)
    if exponent.is_negative():
        base = invert(base, mod)
        exponent = neg(exponent)
    if compare(mod, ONE) == 0:
        return ZERO
    base = erem(base, mod)
    result = ONE
    for i in range(numbits(exponent) - 1, -1, -1):
        result = erem(mul(result, result), mod)
        if testbit(exponent, i):
            result = erem(mul(result, base), mod)
    return result


# Primes
# ------
def _small_prime_factor(x):
    """Smallest prime below TRIAL_DIVISION_LIMIT dividing a positive x, or None."""
    magnitude = x.magnitude()
    for p in SMALL_PRIMES:
        if x.small is not None:
            if x.small % p == 0:
                return p
        else:
            _, r = digits.divmod_digit(magnitude, p)
            if r == 0:
                return p
    return None


def _is_strong_probable_prime(n, n_minus_1, d, s, witness):
    """One Miller-Rabin round.  False means n is certainly composite."""
    y = powm(witness, d, n)
    if compare(y, ONE) == 0 or compare(y, n_minus_1) == 0:
        return True
    for _ in range(s - 1):
        y = erem(mul(y, y), n)
        if compare(y, n_minus_1) == 0:
            return True
        if compare(y, ONE) == 0:
            return False
    return False


def _random_witnesses(n, rounds):
    """
    Witnesses in [2, n - 2], the first few small primes, the rest random.

    The random.Random instance is local and seeded by n, so the answer for n never varies.
    """
    rng = random.Random(digits.to_bytes_little(n.magnitude()))
    witnesses = [Integer(p) for p in SMALL_PRIMES[:min(rounds, 4)]]
    span = sub(n, 3)
    bits = numbits(n)
    while len(witnesses) < rounds:
        witnesses.append(add(erem(Integer(rng.getrandbits(bits)), span), 2))
    return witnesses


def probab_prime(x, rounds=PROBAB_PRIME_ROUNDS_DEFAULT):
    """
    Is x prime?  Returns one of the Primality codes.

        assert probab_prime(97) == Primality.DEFINITELY_PRIME
        assert probab_prime(91) == Primality.COMPOSITE

    Trial division settles everything below TRIAL_DIVISION_LIMIT**2.
    Miller-Rabin settles everything below DETERMINISTIC_LIMIT, using fixed witnesses.
    Above that, rounds random witnesses leave an error probability of at most 4**-rounds.
    Negative numbers, 0 and 1 are composite.
    """
    x = Integer.coerce(x)
    rounds = int(rounds)
    if rounds < 1:
        raise Integer.InvalidArgument("Integer probab_prime needs at least one round, not {}".format(rounds))
    if compare(x, 2) < 0:
        return Primality.COMPOSITE

    factor = _small_prime_factor(x)
    if factor is not None:
        return Primality.DEFINITELY_PRIME if compare(x, factor) == 0 else Primality.COMPOSITE
    if compare(x, TRIAL_DIVISION_LIMIT ** 2) < 0:
        return Primality.DEFINITELY_PRIME

    n_minus_1 = pred(x)
    s = trailing_zeros(n_minus_1)
    d = shift_right(n_minus_1, s)
    deterministic = compare(x, DETERMINISTIC_LIMIT) < 0
    if deterministic:
        witnesses = [Integer(p) for p in DETERMINISTIC_WITNESSES]
    else:
        witnesses = _random_witnesses(x, rounds)
    logger.debug("probab_prime: %d-bit candidate, %d witnesses", numbits(x), len(witnesses))

    for witness in witnesses:
        if not _is_strong_probable_prime(x, n_minus_1, d, s, witness):
            return Primality.COMPOSITE
    return Primality.DEFINITELY_PRIME if deterministic else Primality.PROBABLY_PRIME


def nextprime(x, rounds=PROBAB_PRIME_ROUNDS_DEFAULT):
    """Smallest (probable) prime greater than x."""
    x = Integer.coerce(x)
    if compare(x, 2) < 0:
        return Integer(2)
    candidate = succ(x)
    if is_even(candidate):
        candidate = succ(candidate)
    examined = 1
    while probab_prime(candidate, rounds) == Primality.COMPOSITE:
        candidate = add(candidate, 2)
        examined += 1
    logger.debug("nextprime: %d candidates examined above a %d-bit number", examined, numbits(x))
    return candidate


# Powers
# ------
def perfect_square(x):
    """Is x == a**2 for some integer a?"""
    x = Integer.coerce(x)
    if x.is_negative():
        return False
    if extract(x, 0, 4).small not in (0, 1, 4, 9):
        return False   # squares modulo 16
    s = sqrt(x)
    return compare(mul(s, s), x) == 0


def perfect_power(x):
    """
    Is x == a**b for some integers a and b > 1?

    Trying prime exponents is enough, since a**(p*q) == (a**q)**p.
    A negative x needs an odd exponent.
    """
    x = Integer.coerce(x)
    if compare(abs(x), ONE) <= 0:
        return True
    magnitude = abs(x)
    for b in _sieve(numbits(magnitude) + 1):
        if b == 2 and x.is_negative():
            continue
        r = root(magnitude, b)
        if compare(pow(r, b), magnitude) == 0:
            return True
    return False


def remove(x, f):
    """
    Remove every factor f from x.  Returns (x / f**k, k) for the biggest such k.

        assert remove(40, 2) == (5, 3)
    """
    x, f = Integer.coerce(x), Integer.coerce(f)
    if compare(abs(f), 2) < 0:
        raise Integer.InvalidArgument("Integer remove needs a factor with |f| > 1, not {}".format(f))
    if x.is_zero():
        return ZERO, 0
    k = 0
    while True:
        q, r = div_rem(x, f)
        if not r.is_zero():
            return x, k
        x = q
        k += 1


# Symbols
# -------
def jacobi(a, n):
    """
    Jacobi symbol (a/n), n odd and positive.  Returns -1, 0 or 1.

    SEE:  Cohen, A Course in Computational Algebraic Number Theory, algorithm 1.4.10
    """
    a, n = Integer.coerce(a), Integer.coerce(n)
    if n.is_negative() or is_even(n):
        raise Integer.InvalidArgument("Integer jacobi needs an odd positive n, not {}".format(n))
    a = erem(a, n)
    result = 1
    while not a.is_zero():
        zeros = trailing_zeros(a)
        a = shift_right(a, zeros)
        if zeros & 1 and extract(n, 0, 3).small in (3, 5):
            result = -result
        if extract(a, 0, 2).small == 3 and extract(n, 0, 2).small == 3:
            result = -result
        a, n = erem(n, a), a
    return result if compare(n, ONE) == 0 else 0


def legendre(a, p):
    """Legendre symbol (a/p), p an odd prime.  Returns -1, 0 or 1."""
    return jacobi(a, p)


def kronecker(a, n):
    """Kronecker symbol (a/n), the Jacobi symbol extended to every n.  Returns -1, 0 or 1."""
    a, n = Integer.coerce(a), Integer.coerce(n)
    if n.is_zero():
        return 1 if compare(abs(a), ONE) == 0 else 0
    result = 1
    if n.is_negative():
        n = neg(n)
        if a.is_negative():
            result = -result
    if is_even(n):
        if is_even(a):
            return 0
        zeros = trailing_zeros(n)
        n = shift_right(n, zeros)
        if zeros & 1 and extract(a, 0, 3).small in (3, 5):
            result = -result
    return result * jacobi(a, n)


# Sequences
# ---------
def _natural(name, n):
    n = int(n)
    if n < 0:
        raise Integer.InvalidArgument("Integer {} needs a nonnegative argument, not {}".format(name, n))
    return n


def _product(factors):
    """Product of a list of Integers, multiplying balanced halves so Karatsuba gets its chance."""
    if len(factors) == 0:
        return ONE
    if len(factors) == 1:
        return factors[0]
    half = len(factors) // 2
    return mul(_product(factors[:half]), _product(factors[half:]))


def fac(n):
    """n!"""
    n = _natural('fac', n)
    return _product([Integer(i) for i in range(2, n + 1)])


def primorial(n):
    """Product of the primes <= n"""
    n = _natural('primorial', n)
    return _product([Integer(p) for p in _sieve(n + 1)])


def bin(n, k):
    """
    Binomial coefficient, n choose k.  n may be negative, k is a native int >= 0.

        assert bin(5, 2) == 10
        assert bin(-3, 2) == 6
    """
    n = Integer.coerce(n)
    k = _natural('bin', k)
    if n.is_negative():
        # (-n choose k) == (-1)**k * (n+k-1 choose k)
        magnitude = bin(sub(add(neg(n), k), 1), k)
        return neg(magnitude) if k & 1 else magnitude
    if compare(n, k) < 0:
        return ZERO
    if compare(sub(n, k), k) < 0:
        k = int(sub(n, k))
    result = ONE
    for i in range(1, k + 1):
        result = divexact(mul(result, add(sub(n, k), i)), i)
    return result


def _fib_pair(n):
    """(F(n), F(n+1)) by fast doubling."""
    if n == 0:
        return ZERO, ONE
    f, g = _fib_pair(n >> 1)
    f2 = mul(f, sub(mul(g, 2), f))   # F(2m) = F(m) * (2F(m+1) - F(m))
    g2 = add(mul(f, f), mul(g, g))   # F(2m+1) = F(m)**2 + F(m+1)**2
    if n & 1:
        return g2, add(f2, g2)
    return f2, g2


def fib(n):
    """n-th Fibonacci number, F(0) == 0, F(1) == 1"""
    return _fib_pair(_natural('fib', n))[0]


def lucnum(n):
    """n-th Lucas number, L(0) == 2, L(1) == 1.  L(n) == 2F(n+1) - F(n)"""
    f, g = _fib_pair(_natural('lucnum', n))
    return sub(mul(g, 2), f)


assert compare(fib(10), 55) == 0
assert compare(lucnum(10), 123) == 0
