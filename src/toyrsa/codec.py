"""Encoding and decoding of a single integer message with a key pair."""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from toyrsa.keygen import PrivateKey
from toyrsa.keygen import PublicKey
from toyrsa.numtheory import mod_pow


def encode(pub: PublicKey, m: int) -> int:
    """Encodes the message `m` with the public key.

    Args:
        pub: The public key.
        m: The message, in range (0, n).

    Returns:
        The ciphertext `m ** e % n`.

    Raises:
        ValueError: If the message is out of range for the key.
    """
    if not 0 < m < pub.modulus:
        raise ValueError("Message must be in range (0, n)")
    return mod_pow(m, pub.exponent, pub.modulus)


def decode(pub: PublicKey, priv: PrivateKey, c: int) -> int:
    """Decodes the ciphertext `c`.

    The modulus is taken from `pub` and the exponent from `priv`; the two are not checked against each other, so a
    mismatched pair silently yields a wrong message.

    Args:
        pub: The public key.
        priv: The private key generated alongside `pub`.
        c: The ciphertext, in range [0, n).

    Returns:
        The message `c ** d % n`.

    Raises:
        ValueError: If the ciphertext is out of range for the key.
    """
    if not 0 <= c < pub.modulus:
        raise ValueError("Ciphertext must be in range [0, n)")
    return mod_pow(c, priv.exponent, pub.modulus)
