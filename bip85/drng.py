#!/usr/bin/env python3

# Copyright (C) The bip85 developers
#
# This file is part of bip85. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of bip85 including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""BIP85-DRNG: deterministic random byte stream.

The 64 bytes of BIP85 entropy seed a SHAKE256 extendable output
function; the stream is then read in chunks of arbitrary size,
each read starting where the previous one ended.

It is used wherever an application needs more than 64 bytes,
e.g. as random source for RSA key generation.
"""

import hashlib

from btclib.alias import Octets

from bip85.entropy import ENTROPY_SIZE
from bip85.exceptions import InvalidParameter


class BIP85DRNG:
    def __init__(self, entropy: Octets) -> None:

        if isinstance(entropy, str):
            entropy = bytes.fromhex(entropy)
        if len(entropy) != ENTROPY_SIZE:
            err_msg = f"invalid seed size: {len(entropy)} bytes"
            err_msg += f" instead of {ENTROPY_SIZE}"
            raise InvalidParameter(err_msg)

        self._shake = hashlib.shake_256(entropy)
        self._stream = b""
        self._position = 0

    @property
    def position(self) -> int:
        "Number of bytes already read from the stream."
        return self._position

    def read(self, n: int) -> bytes:
        "Return the next n bytes of the stream."

        if n < 0:
            raise InvalidParameter(f"invalid number of bytes: {n}")
        end = self._position + n
        if end > len(self._stream):
            # SHAKE output is not incremental in hashlib: the prefix is
            # recomputed, doubling its size to keep reads amortized linear
            self._stream = self._shake.digest(max(end, 2 * len(self._stream)))
        data = self._stream[self._position : end]
        self._position = end
        return data
