# pylint: disable=missing-module-docstring
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import math
import warnings

import pytest
import sympy

from toyrsa import keygen
from toyrsa import numtheory

SMALL_PRIMES = list(sympy.primerange(3, 60))
prime_pairs = [(p, q) for p in SMALL_PRIMES for q in SMALL_PRIMES if p != q]


def test_textbook_public_key():
    pub = keygen.derive_public_key(61, 53)
    assert pub == keygen.PublicKey(3233, 7)


def test_textbook_private_key():
    pub = keygen.derive_public_key(61, 53)
    priv = keygen.derive_private_key(61, 53, pub)
    assert priv == keygen.PrivateKey(61, 53, 1783)
    assert priv.modulus == 3233


def test_small_key_pair():
    pub, priv = keygen.generate_key_pair(3, 11)
    assert pub == (33, 3)
    assert priv.exponent == 7
    assert (pub.exponent * priv.exponent) % 20 == 1


def test_public_key_deterministic():
    assert keygen.derive_public_key(61, 53) == keygen.derive_public_key(61, 53)


@pytest.mark.parametrize("p,q", prime_pairs)
def test_public_exponent_properties(p, q):
    phi = (p - 1) * (q - 1)
    pub = keygen.derive_public_key(p, q)
    assert pub.modulus == p * q
    assert 2 <= pub.exponent < phi
    assert math.gcd(pub.exponent, phi) == 1
    assert numtheory.are_coprime(pub.exponent, phi)
    # Smallest acceptable one.
    assert all(math.gcd(e, phi) != 1 for e in range(2, pub.exponent))


@pytest.mark.parametrize("p,q", prime_pairs)
def test_private_exponent_inverts(p, q):
    phi = (p - 1) * (q - 1)
    pub, priv = keygen.generate_key_pair(p, q)
    assert (pub.exponent * priv.exponent) % phi == 1
    assert 0 < priv.exponent < phi
    assert priv.exponent == keygen.search_private_exponent(pub.exponent, phi)


@pytest.mark.parametrize("p,q", [(4, 7), (7, 4), (61, 52), (9, 15)])
def test_derive_public_key_validates(p, q):
    with pytest.raises(ValueError, match="not prime"):
        keygen.derive_public_key(p, q)


def test_derive_private_key_validates():
    pub = keygen.derive_public_key(3, 11)
    with pytest.raises(ValueError):
        keygen.derive_private_key(4, 11, pub)
    with pytest.raises(ValueError):
        keygen.derive_private_key(5, 11, pub)


def test_derive_public_key_exhausted():
    # phi = 2 leaves no candidate between 2 and phi.
    with pytest.raises(RuntimeError):
        keygen.derive_public_key(2, 3)


def test_custom_prime_test(mocker):
    prime_test = mocker.Mock(return_value=True)
    keygen.derive_public_key(61, 53, prime_test=prime_test)
    prime_test.assert_any_call(61)
    prime_test.assert_any_call(53)


def test_custom_coprime_test(mocker):
    coprime = mocker.Mock(side_effect=[False, False, True])
    with pytest.warns(RuntimeWarning):
        pub = keygen.derive_public_key(61, 53, coprime=coprime)
    assert pub.exponent == 4
    coprime.assert_called_with(4, 3120)


def test_positional_coprime_small_pair():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        pub, priv = keygen.generate_key_pair(3, 11, numtheory.are_coprime)
    assert pub == (33, 3)
    assert priv.exponent == 7


def test_positional_coprime_uninvertible():
    with pytest.warns(RuntimeWarning, match="shares a factor"):
        pub = keygen.derive_public_key(61, 53, numtheory.are_coprime)
    assert pub == (3233, 3)
    with pytest.raises(RuntimeError, match="No private exponent"):
        keygen.derive_private_key(61, 53, pub)


@pytest.mark.parametrize("e,phi,expected", [(7, 3120, 1783), (3, 20, 7), (17, 3120, 2753), (5, 72, 29)])
def test_search_private_exponent(e, phi, expected):
    assert keygen.search_private_exponent(e, phi) == expected


@pytest.mark.parametrize("e,phi,limit", [(3, 3120, None), (2, 20, None), (7, 3120, 3)])
def test_search_private_exponent_bounded(e, phi, limit):
    with pytest.raises(RuntimeError):
        keygen.search_private_exponent(e, phi, limit)


def test_keys_immutable():
    pub, priv = keygen.generate_key_pair(3, 11)
    with pytest.raises(AttributeError):
        pub.exponent = 5
    with pytest.raises(AttributeError):
        priv.exponent = 5


@pytest.mark.slow
def test_fast_prime_strategy_same_keys():
    for p, q in prime_pairs:
        assert keygen.generate_key_pair(p, q, prime_test=numtheory.is_prime_fast) == keygen.generate_key_pair(p, q)


def test_prime_test_reaches_totient(mocker):
    spy = mocker.spy(numtheory, "is_prime")
    prime_test = mocker.Mock(wraps=numtheory.is_prime_fast)
    keygen.generate_key_pair(61, 53, prime_test=prime_test)
    assert spy.call_count == 0
    # Two checks per derivation, then two more inside the totient.
    assert prime_test.call_count == 8


def test_textbook_exponent_both_checks():
    assert keygen.derive_public_key(61, 53) == (3233, 7)
    with pytest.warns(RuntimeWarning, match="shares a factor with the totient 3120"):
        assert keygen.derive_public_key(61, 53, numtheory.are_coprime) == (3233, 3)
