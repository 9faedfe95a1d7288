#!/usr/bin/env python3

# Copyright (C) The bip85 developers
#
# This file is part of bip85. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of bip85 including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Entropy from a derived private key.

The 32 bytes private key k at the end of the BIP85 derivation path
is turned into 64 bytes of entropy as

    HMAC-SHA512(key=b"bip-entropy-from-k", msg=k)

The HMAC key is public: it provides domain separation, not secrecy.
Every application slices its output from these 64 bytes.
"""

import hmac

from btclib.alias import Octets
from btclib.utils import bytes_from_octets

HMAC_KEY = b"bip-entropy-from-k"
ENTROPY_SIZE = 64


def entropy_from_prv_key(prv_key: Octets) -> bytes:
    "Return the 64 bytes entropy of a 32 bytes private key."

    prv_key = bytes_from_octets(prv_key, 32)
    return hmac.new(HMAC_KEY, prv_key, "sha512").digest()
