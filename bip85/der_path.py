#!/usr/bin/env python3

# Copyright (C) The bip85 developers
#
# This file is part of bip85. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of bip85 including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""BIP85 derivation path.

A BIP85 derivation path is

    m/83696968'/{app_no}'/{param_1}'/.../{param_n}'

i.e. the BIP85 purpose, the application number, and the application
parameters in their standard order; all indexes are hardened.
"""

from typing import List, Sequence

from btclib.bip32 import indexes_from_bip32_path, str_from_bip32_path
from btclib.bip32.der_path import BIP32DerPath

from bip85.applications import AppLike, application
from bip85.exceptions import InvalidParameter

HARDENED = 0x80000000
PURPOSE = 83696968


def build_path(app: AppLike, params: Sequence[int]) -> List[int]:
    "Return the hardened indexes of the application derivation path."

    application_ = application(app)
    params = application_.assert_valid_params(params)
    indexes = [PURPOSE, application_.app_id, *params]
    return [HARDENED + i for i in indexes]


def path_below_purpose(der_path: BIP32DerPath) -> List[int]:
    """Return the hardened indexes of a custom application path.

    The path is relative to the BIP85 purpose node,
    e.g. "m/0'/0'", and it must be hardened at every level.
    """

    try:
        indexes = indexes_from_bip32_path(der_path)
    except ValueError as e:
        raise InvalidParameter(f"invalid derivation path: {e}") from e

    if not indexes:
        raise InvalidParameter("empty derivation path")
    for i in indexes:
        if not HARDENED <= i <= 0xFFFFFFFF:
            raise InvalidParameter(f"invalid index: {hex(i)}, not hardened")
    return [HARDENED + PURPOSE, *indexes]


def str_from_path(indexes: Sequence[int]) -> str:
    "Return the path as string, e.g. \"m/83696968'/39'/0'/12'/0'\"."
    return str_from_bip32_path(indexes, hardening="'")
