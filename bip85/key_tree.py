#!/usr/bin/env python3

# Copyright (C) The bip85 developers
#
# This file is part of bip85. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of bip85 including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Narrow interface to the BIP32 key tree and its encodings.

BIP85 does not re-implement BIP32: it only needs

- child private key derivation (always hardened),
- the private key of an extended key,
- WIF and xprv text encodings,
- BIP39 mapping of entropy bits to a checksummed word sequence.

KeyTree provides them on top of btclib;
any object with the same methods can be passed instead,
e.g. a mock feeding fixed byte vectors in tests.
"""

from typing import Union

from btclib.b58 import wif_from_prv_key
from btclib.bip32 import BIP32KeyData, derive
from btclib.exceptions import BTClibValueError
from btclib.mnemonic import bip39
from btclib.network import NETWORKS, network_from_xkeyversion

from bip85.exceptions import DerivationFailed, InvalidParameter

# an extended private key, as BIP32KeyData or base58 string
XPrv = Union[BIP32KeyData, str]


class KeyTree:
    "BIP32 key tree, encodings, and BIP39 word lists provided by btclib."

    def root(self, xprv: XPrv) -> BIP32KeyData:
        "Return the BIP32KeyData of the caller-supplied extended private key."

        try:
            if isinstance(xprv, BIP32KeyData):
                xprv.assert_valid()
            else:
                xprv = BIP32KeyData.b58decode(xprv)
        except (ValueError, TypeError) as e:
            raise InvalidParameter(f"invalid extended key: {e}") from e

        if not xprv.is_private:
            raise InvalidParameter("not a private key: extended public key")
        return xprv

    def derive_child(self, xprv: BIP32KeyData, index: int) -> BIP32KeyData:
        "Return the child extended private key at the given index."

        try:
            return BIP32KeyData.b58decode(derive(xprv, index))
        except BTClibValueError as e:
            err_msg = f"invalid child key at index {hex(index)}: {e}"
            raise DerivationFailed(err_msg) from e

    def prv_key(self, xprv: BIP32KeyData) -> bytes:
        "Return the 32 bytes private key of an extended private key."
        return xprv.key[1:]

    def network(self, xprv: BIP32KeyData) -> str:
        return network_from_xkeyversion(xprv.version)

    def wif(self, prv_key: bytes, network: str) -> str:
        "Return the compressed WIF of a 32 bytes private key."

        q = int.from_bytes(prv_key, byteorder="big", signed=False)
        try:
            return wif_from_prv_key(q, network, compressed=True)
        except BTClibValueError as e:
            raise DerivationFailed(f"invalid private key: {e}") from e

    def xprv(self, chain_code: bytes, prv_key: bytes, network: str) -> str:
        "Return a standalone root xprv from chain code and private key."

        try:
            xkey = BIP32KeyData(
                version=NETWORKS[network].bip32_prv,
                depth=0,
                parent_fingerprint=b"\x00" * 4,
                index=0,
                chain_code=bytes(chain_code),
                key=b"\x00" + bytes(prv_key),
            )
            return xkey.b58encode()
        except BTClibValueError as e:
            raise DerivationFailed(f"invalid extended key: {e}") from e

    def mnemonic(self, entropy: bytes, lang: str) -> str:
        "Return the BIP39 checksummed mnemonic sentence of the entropy."
        return bip39.mnemonic_from_entropy(bytes(entropy), lang)


KEY_TREE = KeyTree()
