"""Key derivation from a pair of caller-supplied primes.

Picks the smallest acceptable public exponent for the totient of `p * q` and derives the matching private exponent.
Primality and coprimality checks are passed in as plain callables, defaulting to the naive trial division test and
to true (gcd based) coprimality.

Typical usage example:

    pub = derive_public_key(61, 53)
    priv = derive_private_key(61, 53, pub)
    pub, priv = generate_key_pair(3, 11)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import math
import typing
import warnings

from toyrsa import numtheory

PrimeTest = typing.Callable[[int], bool]
CoprimeTest = typing.Callable[[int, int], bool]

_SEARCH_EPSILON: float = 0.0001


class PublicKey(typing.NamedTuple):
    """Public half of a key pair.

    Attributes:
        modulus: n, the product of the two primes.
        exponent: e, coprime with the totient of n.
    """
    modulus: int
    exponent: int


class PrivateKey(typing.NamedTuple):
    """Private half of a key pair.

    Attributes:
        p: Private prime 1.
        q: Private prime 2.
        exponent: d, the inverse of the public exponent modulo the totient.
    """
    p: int
    q: int
    exponent: int

    @property
    def modulus(self) -> int:
        return self.p * self.q


def _check_primes(p: int, q: int, prime_test: PrimeTest) -> None:
    if not prime_test(p) or not prime_test(q):
        raise ValueError("p and/or q are not prime numbers.")


def derive_public_key(p: int,
                      q: int,
                      coprime: CoprimeTest = numtheory.are_coprime_strict,
                      prime_test: PrimeTest = numtheory.is_prime) -> PublicKey:
    """Derives the public key for the primes `p` and `q`.

    Scans candidate exponents upward from 2 and keeps the first one that `coprime` accepts against the totient. The
    scan stops below the totient itself.

    Args:
        p: First prime.
        q: Second prime.
        coprime: Coprimality check used to accept an exponent. Defaults to `are_coprime_strict`.
            Pass `numtheory.are_coprime` for the positional divisor-list check.
        prime_test: Primality check for `p` and `q`. Defaults to `is_prime`.

    Returns:
        The public key `(p * q, e)`.

    Raises:
        ValueError: If `p` or `q` is not prime.
        RuntimeError: If no exponent below the totient is accepted.
    """
    _check_primes(p, q, prime_test)
    n = p * q
    phi = numtheory.totient(n, p, q, prime_test)
    for e in range(2, phi):
        if coprime(e, phi):
            if math.gcd(e, phi) != 1:
                warnings.warn(f"Public exponent {e} shares a factor with the totient {phi}, it cannot be inverted.",
                              RuntimeWarning)
            return PublicKey(n, e)
    raise RuntimeError(f"No public exponent found below the totient {phi}.")


def derive_private_key(p: int, q: int, pub: PublicKey, prime_test: PrimeTest = numtheory.is_prime) -> PrivateKey:
    """Derives the private key matching `pub`.

    The private exponent is the inverse of the public exponent modulo the totient, found with the Extended Euclidean
    Algorithm. It is the same `d` as the smallest `k >= 1` making `(1 + k * phi) / e` whole, see
    `search_private_exponent`.

    Args:
        p: First prime, as used for `pub`.
        q: Second prime, as used for `pub`.
        pub: The public key generated from `p` and `q`.
        prime_test: Primality check for `p` and `q`. Defaults to `is_prime`.

    Returns:
        The private key `(p, q, d)`.

    Raises:
        ValueError: If `p` or `q` is not prime, or `pub.modulus != p * q`.
        RuntimeError: If the public exponent has no inverse modulo the totient.
    """
    _check_primes(p, q, prime_test)
    phi = numtheory.totient(pub.modulus, p, q, prime_test)
    try:
        d = numtheory.mod_inverse(pub.exponent, phi)
    except ValueError as exc:
        raise RuntimeError(f"No private exponent exists for e={pub.exponent}, phi={phi}.") from exc
    return PrivateKey(p, q, d)


def search_private_exponent(e: int, phi: int, limit: int | None = None) -> int:
    """Brute-force search for the private exponent.

    Tries k = 1, 2, ... and computes `1/e + k * phi/e` in floating point, accepting the first value within a small
    epsilon of a whole number. Only reliable for small inputs; kept as a reference for `derive_private_key`.

    Args:
        e: The public exponent.
        phi: The totient.
        limit: Largest k to try. Defaults to `e`, which always suffices when an inverse exists.

    Returns:
        The private exponent.

    Raises:
        RuntimeError: If no k up to `limit` yields a whole number.
    """
    if limit is None:
        limit = e
    for k in range(1, limit + 1):
        approx = (1.0 / e) + k * (phi / e)
        if abs(approx - round(approx)) <= _SEARCH_EPSILON:
            return round(approx)
    raise RuntimeError(f"Searched {limit} candidates with no private exponent found.")


def generate_key_pair(p: int,
                      q: int,
                      coprime: CoprimeTest = numtheory.are_coprime_strict,
                      prime_test: PrimeTest = numtheory.is_prime) -> tuple[PublicKey, PrivateKey]:
    """Derives both halves of the key pair for `p` and `q`.

    Args:
        p: First prime.
        q: Second prime.
        coprime: Passed to `derive_public_key`.
        prime_test: Passed to both derivations.

    Returns:
        A tuple of (public, private) keys.
    """
    pub = derive_public_key(p, q, coprime, prime_test)
    return pub, derive_private_key(p, q, pub, prime_test)
