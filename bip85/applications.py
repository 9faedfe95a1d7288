#!/usr/bin/env python3

# Copyright (C) The bip85 developers
#
# This file is part of bip85. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of bip85 including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""BIP85 applications.

Each application has a registered number, used as the first index
after the BIP85 purpose, and an ordered list of parameters,
used as the following path indexes:

+------------+--------+-----------------------------+
| name       | number | parameters                  |
+============+========+=============================+
| bip39      |     39 | language, words, index      |
+------------+--------+-----------------------------+
| wif        |      2 | index                       |
+------------+--------+-----------------------------+
| xprv       |     32 | index                       |
+------------+--------+-----------------------------+
| hex        | 128169 | num_bytes, index            |
+------------+--------+-----------------------------+
| pwd_base64 | 707764 | pwd_len, index              |
+------------+--------+-----------------------------+
| pwd_base85 | 707785 | pwd_len, index              |
+------------+--------+-----------------------------+
| dice       |  89101 | sides, rolls, index         |
+------------+--------+-----------------------------+
| rsa        | 828365 | key_bits, index             |
+------------+--------+-----------------------------+

The application also owns the formatter turning the 64 bytes of
entropy into its output: a closed set of variants dispatched on the
application, extended by adding entries to APPLICATIONS.

Passwords are the standard PWD BASE64 and PWD BASE85 applications,
i.e. the encoded entropy truncated to pwd_len characters; there is no
variant mapping bytes into a custom printable alphabet.

https://github.com/bitcoin/bips/blob/master/bip-0085.mediawiki
"""

import base64
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Sequence, Tuple, Union

from bip85.entropy import ENTROPY_SIZE
from bip85.exceptions import InsufficientEntropy, InvalidParameter
from bip85.key_tree import KeyTree
from bip85.rsa import KEY_BITS, rsa_from_entropy

Params = Tuple[int, ...]
# (entropy, params, key_tree, network) -> derived secret
Formatter = Callable[[bytes, Params, KeyTree, str], Any]

# BIP85 language code -> btclib word-list
LANGUAGES: Dict[int, str] = {
    0: "en",
    7: "it",
}
WORDS = (12, 18, 24)


def _assert_in_range(name: str, value: int, lower: int, upper: int) -> None:
    if not lower <= value <= upper:
        raise InvalidParameter(f"invalid {name}: {value}, not in {lower}..{upper}")


def mnemonic_entropy_size(words: int) -> int:
    "Return the bytes of entropy encoded by a BIP39 mnemonic."

    # 11 bits per word, 1 bit of checksum every 32 bits of entropy
    return words * 4 // 3


def dice_rolls(entropy: bytes, sides: int, rolls: int) -> List[int]:
    """Return rolls of a die with the given number of sides.

    Entropy bytes are consumed in order; a byte is discarded if it is
    not lower than the largest multiple of sides not exceeding 256,
    otherwise it becomes the roll byte % sides + 1 (in 1..sides).
    These rolls differ from the DRNG-based, 0-based dice of later
    BIP85 revisions and their published test vector.
    """

    limit = 256 - 256 % sides
    result: List[int] = []
    for byte in entropy:
        if len(result) == rolls:
            break
        if byte < limit:
            result.append(byte % sides + 1)
    if len(result) < rolls:
        err_msg = f"not enough entropy for {rolls} rolls of a {sides} sided die:"
        err_msg += f" {len(result)} rolls from {len(entropy)} bytes"
        raise InsufficientEntropy(err_msg)
    return result


def _check_bip39(params: Params) -> None:
    language, words, _index = params
    if language not in LANGUAGES:
        raise InvalidParameter(f"unsupported language: {language}")
    if words not in WORDS:
        raise InvalidParameter(f"invalid number of words: {words}, not in {WORDS}")


def _bip39(entropy: bytes, params: Params, key_tree: KeyTree, *_: Any) -> str:
    language, words, _index = params
    size = mnemonic_entropy_size(words)
    return key_tree.mnemonic(entropy[:size], LANGUAGES[language])


def _wif(entropy: bytes, _: Params, key_tree: KeyTree, network: str) -> str:
    return key_tree.wif(entropy[:32], network)


def _xprv(entropy: bytes, _: Params, key_tree: KeyTree, network: str) -> str:
    # chain code first, then private key
    return key_tree.xprv(entropy[:32], entropy[32:], network)


def _check_hex(params: Params) -> None:
    _assert_in_range("num_bytes", params[0], 16, ENTROPY_SIZE)


def _hex(entropy: bytes, params: Params, *_: Any) -> bytes:
    return bytes(entropy[: params[0]])


def _check_pwd_base64(params: Params) -> None:
    _assert_in_range("pwd_len", params[0], 20, 86)


def _pwd_base64(entropy: bytes, params: Params, *_: Any) -> str:
    return base64.b64encode(entropy).decode("ascii")[: params[0]]


def _check_pwd_base85(params: Params) -> None:
    _assert_in_range("pwd_len", params[0], 10, 80)


def _pwd_base85(entropy: bytes, params: Params, *_: Any) -> str:
    return base64.b85encode(entropy).decode("ascii")[: params[0]]


def _check_dice(params: Params) -> None:
    sides, rolls, _index = params
    _assert_in_range("sides", sides, 2, 256)
    if rolls < 1:
        raise InvalidParameter(f"invalid rolls: {rolls}, not positive")


def _dice(entropy: bytes, params: Params, *_: Any) -> List[int]:
    sides, rolls, _index = params
    return dice_rolls(entropy, sides, rolls)


def _check_rsa(params: Params) -> None:
    if params[0] not in KEY_BITS:
        raise InvalidParameter(f"invalid key_bits: {params[0]}, not in {KEY_BITS}")


def _rsa(entropy: bytes, params: Params, *_: Any) -> Any:
    return rsa_from_entropy(entropy, params[0])


def _no_check(_: Params) -> None:
    pass


@dataclass(frozen=True)
class Application:
    name: str
    app_id: int
    params: Tuple[str, ...]
    formatter: Formatter
    check: Callable[[Params], None] = _no_check

    def assert_valid_params(self, params: Sequence[int]) -> Params:
        """Return the validated parameters as tuple of int.

        Each parameter is checked on its own,
        as swapping two of them would silently select another path.
        """

        if len(params) != len(self.params):
            err_msg = f"invalid number of {self.name} parameters: {len(params)}"
            err_msg += f" instead of {len(self.params)} {self.params}"
            raise InvalidParameter(err_msg)

        for name, value in zip(self.params, params):
            # bool is an int subclass, but not a meaningful parameter
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidParameter(f"invalid {name}: {value!r}, not an int")
            _assert_in_range(name, value, 0, 0x7FFFFFFF)

        result = tuple(params)
        self.check(result)
        return result


_APPLICATIONS = [
    Application("bip39", 39, ("language", "words", "index"), _bip39, _check_bip39),
    Application("wif", 2, ("index",), _wif),
    Application("xprv", 32, ("index",), _xprv),
    Application("hex", 128169, ("num_bytes", "index"), _hex, _check_hex),
    Application(
        "pwd_base64", 707764, ("pwd_len", "index"), _pwd_base64, _check_pwd_base64
    ),
    Application(
        "pwd_base85", 707785, ("pwd_len", "index"), _pwd_base85, _check_pwd_base85
    ),
    Application("dice", 89101, ("sides", "rolls", "index"), _dice, _check_dice),
    Application("rsa", 828365, ("key_bits", "index"), _rsa, _check_rsa),
]
APPLICATIONS: Dict[str, Application] = {app.name: app for app in _APPLICATIONS}


def application_from_id(app_id: int) -> Application:
    "Return the application registered with the given number."

    for app in APPLICATIONS.values():
        if app.app_id == app_id:
            return app
    raise InvalidParameter(f"unknown application: {app_id}")


AppLike = Union[Application, str, int]


def application(app: AppLike) -> Application:
    "Return the application from its name, number, or itself."

    if isinstance(app, Application):
        return app
    if isinstance(app, str):
        name = app.strip().lower()
        if name not in APPLICATIONS:
            raise InvalidParameter(f"unknown application: {app}")
        return APPLICATIONS[name]
    if isinstance(app, bool) or not isinstance(app, int):
        raise InvalidParameter(f"invalid application: {app!r}")
    return application_from_id(app)
