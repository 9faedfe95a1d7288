#!/usr/bin/env python3

# Copyright (C) The bip85 developers
#
# This file is part of bip85. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of bip85 including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Deterministic RSA key generation.

The 64 bytes of entropy seed a BIP85-DRNG, which is then the only
source of randomness for the prime search of the RSA key generator:
same entropy, same key pair.
"""

from Crypto.PublicKey import RSA
from Crypto.PublicKey.RSA import RsaKey

from bip85.drng import BIP85DRNG

KEY_BITS = (1024, 2048, 3072, 4096)
PUBLIC_EXPONENT = 65537


def rsa_from_entropy(entropy: bytes, key_bits: int) -> RsaKey:
    "Return the RSA key pair generated from the BIP85-DRNG stream."

    drng = BIP85DRNG(bytes(entropy))
    return RSA.generate(key_bits, randfunc=drng.read, e=PUBLIC_EXPONENT)
