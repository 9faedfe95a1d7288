#!/usr/bin/env python3

# Copyright (C) The bip85 developers
#
# This file is part of bip85. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of bip85 including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""BIP85 deterministic entropy from BIP32 keychains.

Application specific secrets are derived from a single extended
private key without any additional state:

1. the application derivation path is built and its parameters checked;
2. the root key is derived along the path down to its private key k;
3. k becomes 64 bytes of entropy as HMAC-SHA512(b"bip-entropy-from-k", k);
4. the application formatter turns the entropy into its output.

Every call is independent, same input same output.
"""

import logging
from typing import Any, List, Optional, Sequence

from btclib.bip32 import BIP32KeyData
from btclib.bip32.der_path import BIP32DerPath
from btclib.network import NETWORKS
from Crypto.PublicKey.RSA import RsaKey

from bip85.applications import AppLike, application
from bip85.der_path import HARDENED, build_path, path_below_purpose, str_from_path
from bip85.entropy import entropy_from_prv_key
from bip85.exceptions import InvalidParameter
from bip85.key_tree import KEY_TREE, KeyTree, XPrv

log = logging.getLogger(__name__)


def _wipe(buffer: bytearray) -> None:
    buffer[:] = b"\x00" * len(buffer)


def _terminal_prv_key(
    xkey: BIP32KeyData, indexes: Sequence[int], key_tree: KeyTree
) -> bytes:
    for index in indexes:
        xkey = key_tree.derive_child(xkey, index)
    return key_tree.prv_key(xkey)


def terminal_prv_key(
    root: XPrv, indexes: Sequence[int], key_tree: KeyTree = KEY_TREE
) -> bytes:
    "Return the private key at the end of the derivation path."
    return _terminal_prv_key(key_tree.root(root), indexes, key_tree)


def _entropy(
    xkey: BIP32KeyData, indexes: Sequence[int], key_tree: KeyTree
) -> bytearray:
    prv_key = bytearray(_terminal_prv_key(xkey, indexes, key_tree))
    try:
        return bytearray(entropy_from_prv_key(bytes(prv_key)))
    finally:
        _wipe(prv_key)


def derive_entropy(
    root: XPrv, der_path: BIP32DerPath, key_tree: KeyTree = KEY_TREE
) -> bytes:
    """Return the 64 bytes entropy of a custom application path.

    The path is relative to the BIP85 purpose node:
    e.g. "m/0'/0'" is m/83696968'/0'/0'.
    """

    indexes = path_below_purpose(der_path)
    log.debug("deriving entropy at %s", str_from_path(indexes))
    entropy = _entropy(key_tree.root(root), indexes, key_tree)
    try:
        return bytes(entropy)
    finally:
        _wipe(entropy)


def derive(
    root: XPrv,
    app: AppLike,
    params: Sequence[int],
    network: Optional[str] = None,
    key_tree: KeyTree = KEY_TREE,
) -> Any:
    """Return the application secret derived from the root key.

    The application is given by name (e.g. "bip39") or number (e.g. 39);
    params are the application parameters in path order.
    The network of WIF and xprv outputs is the root key network,
    unless explicitly provided.
    """

    application_ = application(app)
    indexes = build_path(application_, params)
    if network is not None and network not in NETWORKS:
        raise InvalidParameter(f"unknown network: {network}")

    log.debug("deriving %s at %s", application_.name, str_from_path(indexes))
    xkey = key_tree.root(root)
    if network is None:
        network = key_tree.network(xkey)

    # the validated parameters, without purpose and application number
    params = tuple(i - HARDENED for i in indexes[2:])
    entropy = _entropy(xkey, indexes, key_tree)
    try:
        return application_.formatter(entropy, params, key_tree, network)
    finally:
        _wipe(entropy)


def derive_mnemonic(
    root: XPrv, words: int = 12, index: int = 0, language: int = 0
) -> str:
    "Return a BIP39 mnemonic sentence (language 0 is English)."
    return derive(root, "bip39", [language, words, index])


def derive_wif(root: XPrv, index: int = 0, network: Optional[str] = None) -> str:
    "Return a compressed WIF private key."
    return derive(root, "wif", [index], network)


def derive_xprv(root: XPrv, index: int = 0, network: Optional[str] = None) -> str:
    "Return a BIP32 root extended private key."
    return derive(root, "xprv", [index], network)


def derive_hex(root: XPrv, num_bytes: int = 32, index: int = 0) -> bytes:
    "Return num_bytes (16 to 64) bytes of entropy."
    return derive(root, "hex", [num_bytes, index])


def derive_pwd_base64(root: XPrv, pwd_len: int = 21, index: int = 0) -> str:
    "Return a base64 password, pwd_len from 20 to 86 characters."
    return derive(root, "pwd_base64", [pwd_len, index])


def derive_pwd_base85(root: XPrv, pwd_len: int = 12, index: int = 0) -> str:
    "Return a base85 password, pwd_len from 10 to 80 characters."
    return derive(root, "pwd_base85", [pwd_len, index])


def derive_dice(
    root: XPrv, sides: int = 6, rolls: int = 10, index: int = 0
) -> List[int]:
    "Return rolls of a die with the given number of sides, each in 1..sides."
    return derive(root, "dice", [sides, rolls, index])


def derive_rsa(root: XPrv, key_bits: int = 2048, index: int = 0) -> RsaKey:
    "Return a RSA key pair."
    return derive(root, "rsa", [key_bits, index])
