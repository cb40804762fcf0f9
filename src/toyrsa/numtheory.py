"""Small-integer number theory used by the key generator and the codec.

Every routine here is deliberately naive: trial division for primality, divisor enumeration for coprimality. They are
meant for toy-sized inputs, where being able to follow the arithmetic by hand matters more than speed. Faster
drop-in alternatives (`is_prime_fast`, `are_coprime_strict`) live next to them with identical signatures, so callers
can swap strategies freely.

Typical usage example:

    is_prime(61)
    phi = totient(3233, 61, 53)
    c = mod_pow(65, 7, 3233)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import math
import typing


def is_prime(x: int) -> bool:
    """Checks primality by trial division with every integer strictly between 1 and `x`.

    No special casing is applied, so 0, 1 and negative numbers have no divisor in that range and are classified as
    prime.

    Args:
        x: The candidate.

    Returns:
        False if any `i` with `1 < i < x` divides `x`, True otherwise.
    """
    for i in range(2, x):
        if x % i == 0:
            return False
    return True


def is_prime_fast(x: int) -> bool:
    """Trial division up to the square root of `x`.

    Classifies every integer exactly like `is_prime`, quirks included, but only tests divisors up to `isqrt(x)`.

    Args:
        x: The candidate.

    Returns:
        Same result as `is_prime(x)`.
    """
    if x < 4:
        return True
    for i in range(2, math.isqrt(x) + 1):
        if x % i == 0:
            return False
    return True


def divisors(x: int) -> list[int]:
    """Lists every divisor of `x` in ascending order.

    Args:
        x: The number to factor. Must be >= 1; the result for anything else is undefined.

    Returns:
        All `i` in `[1, x]` with `x % i == 0`.
    """
    return [i for i in range(1, x + 1) if x % i == 0]


def are_coprime(a: int, b: int) -> bool:
    """Divisor-list coprimality check.

    Anything is coprime with 1. Otherwise the divisor lists of `a` and `b` are compared entry by entry, skipping the
    shared leading 1: the pair is reported as not coprime only if some same-indexed entries are equal. Entries past
    the end of the shorter list never match.

    The comparison is positional, not a set intersection, so shared divisors sitting at different positions go
    unnoticed. For example `are_coprime(3, 3120)` is True although 3 divides 3120. Use `are_coprime_strict` for the
    real thing.

    Args:
        a: First number, >= 1.
        b: Second number, >= 1.

    Returns:
        Whether the two numbers pass the positional check.
    """
    if a == 1 or b == 1:
        return True
    a_divs = divisors(a)
    b_divs = divisors(b)
    for i in range(1, min(len(a_divs), len(b_divs))):
        if a_divs[i] == b_divs[i]:
            return False
    return True


def are_coprime_strict(a: int, b: int) -> bool:
    """True coprimality, gcd(a, b) == 1."""
    return math.gcd(a, b) == 1


def eea(a: int, b: int) -> tuple[int, int, int]:
    """Implements the Extended Euclidean Algorithm.

    Such that a*s0 + b*t0 = r0 = gcd(a, b).

    Args:
        a: The first natural number.
        b: The second natural number.

    Returns:
        Greatest common divisor of two integers.
        As well as the Bezout coefficients.
    """
    r0, r1 = a, b
    s0, s1, t0, t1 = 1, 0, 0, 1
    while r1 != 0:
        q = r0 // r1
        r0, r1 = r1, r0 - q * r1
        s0, s1 = s1, s0 - q * s1
        t0, t1 = t1, t0 - q * t1
    return r0, s0, t0


def mod_inverse(a: int, m: int) -> int:
    """Modular inverse of `a` modulo `m`.

    Args:
        a: The number to invert.
        m: The modulus, > 1.

    Returns:
        The `x` in `[0, m)` such that `a * x % m == 1`.

    Raises:
        ValueError: If `a` and `m` are not coprime.
    """
    g, s, _ = eea(a, m)
    if g != 1:
        raise ValueError(f"{a} has no inverse modulo {m}")
    return s % m


def totient(n: int, p: int, q: int, prime_test: typing.Callable[[int], bool] = is_prime) -> int:
    """Euler's totient of `n`, shortcut through its two prime factors.

    Args:
        n: The modulus. Must equal `p * q`.
        p: First prime factor.
        q: Second prime factor.
        prime_test: Primality check for `p` and `q`. Defaults to `is_prime`.

    Returns:
        `(p - 1) * (q - 1)`

    Raises:
        ValueError: If `p * q != n` or either factor is not prime.
    """
    if p * q != n:
        raise ValueError("p * q != n")
    if not prime_test(p) or not prime_test(q):
        raise ValueError("p and/or q are not prime numbers.")
    return (p - 1) * (q - 1)


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """Modular exponentiation.

    The result is always reduced, so a zero exponent yields `1 % modulus` (0 for a modulus of 1).

    Args:
        base: The base.
        exponent: The exponent. Must be >= 0.
        modulus: The modulus. Must be >= 1.

    Returns:
        `base ** exponent % modulus`, computed without building the full power.

    Raises:
        ValueError: If `exponent` is negative.
    """
    if exponent < 0:
        raise ValueError("exponent must be >= 0")
    return pow(base, exponent, modulus)
