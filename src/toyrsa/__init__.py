"""Toy RSA on small integers, for following the arithmetic by hand.

Derives a public/private key pair from two user-supplied primes, encodes and decodes a single integer message with
it, and stores the keys as plain text or PEM. Number-theory helpers (naive primality and coprimality checks, totient,
modular exponentiation and inverse) are exposed as well.

Typical usage example:

    pub, priv = generate_key_pair(61, 53)
    c = encode(pub, 65)
    m = decode(pub, priv, c)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from toyrsa.codec import decode
from toyrsa.codec import encode
from toyrsa.keygen import derive_private_key
from toyrsa.keygen import derive_public_key
from toyrsa.keygen import generate_key_pair
from toyrsa.keygen import PrivateKey
from toyrsa.keygen import PublicKey
from toyrsa.keystore import load_private
from toyrsa.keystore import load_public
from toyrsa.keystore import save_private
from toyrsa.keystore import save_public

__version__ = "0.0.1"
__all__ = [
    "PublicKey",
    "PrivateKey",
    "derive_public_key",
    "derive_private_key",
    "generate_key_pair",
    "encode",
    "decode",
    "save_public",
    "save_private",
    "load_public",
    "load_private",
]
