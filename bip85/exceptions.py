#!/usr/bin/env python3

# Copyright (C) The bip85 developers
#
# This file is part of bip85. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of bip85 including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

BIP85Error is only meant to discriminate between Exceptions being raised
by bip85 from those raised by other codebase.

Users are usually better off just dealing with the regular
ValueError and RuntimeError from which the bip85 versions are derived.

Nothing is ever retried: derivation is deterministic,
so the same input always reproduces the same error.
"""


class BIP85Error(Exception):
    pass


class InvalidParameter(BIP85Error, ValueError):
    "Out-of-range or malformed derivation request."


class InsufficientEntropy(BIP85Error, ValueError):
    "The 64 bytes of entropy are not enough for the requested output."


class DerivationFailed(BIP85Error, RuntimeError):
    "An intermediate or derived key is not a valid private key."
