#!/usr/bin/env python3

# Copyright (C) The bip85 developers
#
# This file is part of bip85. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of bip85 including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the bip85 package."

import logging

from bip85.applications import APPLICATIONS, Application, application_from_id
from bip85.derivation import (
    derive,
    derive_dice,
    derive_entropy,
    derive_hex,
    derive_mnemonic,
    derive_pwd_base64,
    derive_pwd_base85,
    derive_rsa,
    derive_wif,
    derive_xprv,
)
from bip85.drng import BIP85DRNG
from bip85.exceptions import (
    BIP85Error,
    DerivationFailed,
    InsufficientEntropy,
    InvalidParameter,
)

name = "bip85"
__version__ = "2023.7.12"
__author__ = "The bip85 developers"
__copyright__ = "Copyright (C) 2020-2023 The bip85 developers"
__license__ = "MIT License"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "APPLICATIONS",
    "Application",
    "application_from_id",
    "BIP85DRNG",
    "BIP85Error",
    "DerivationFailed",
    "InsufficientEntropy",
    "InvalidParameter",
    "derive",
    "derive_dice",
    "derive_entropy",
    "derive_hex",
    "derive_mnemonic",
    "derive_pwd_base64",
    "derive_pwd_base85",
    "derive_rsa",
    "derive_wif",
    "derive_xprv",
]
