#!/usr/bin/env python3

# Copyright (C) The bip85 developers
#
# This file is part of bip85. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of bip85 including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `bip85.applications` module."

import base64

import pytest

from bip85.applications import (
    APPLICATIONS,
    LANGUAGES,
    application,
    application_from_id,
    dice_rolls,
    mnemonic_entropy_size,
)
from bip85.exceptions import InsufficientEntropy, InvalidParameter
from bip85.key_tree import KEY_TREE

# RFC1924, as used by base64.b85encode
B85_ALPHABET = (
    "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz!#$%&()*+-;<=>?@^_`{|}~"
)

# entropy of m/83696968'/89101'/6'/10'/0'
DICE_ENTROPY = bytes.fromhex(
    "5e41f8f5d5d9ac09a20b8a5797a3172b28c806aead00d27e36609e2dd116a591"
    "76a738804236586f668da8a51b90c708a4226d7f92259c69f64c51124b6f6cd2"
)


def test_registry() -> None:
    app_ids = [app.app_id for app in APPLICATIONS.values()]
    assert len(set(app_ids)) == len(app_ids)
    for name, app in APPLICATIONS.items():
        assert app.name == name
        assert application(name) is app
        assert application(f" {name.upper()} ") is app
        assert application(app.app_id) is app
        assert application(app) is app
        assert application_from_id(app.app_id) is app

    assert application("bip39").params == ("language", "words", "index")
    assert application(128169).name == "hex"

    with pytest.raises(InvalidParameter, match="unknown application: 3"):
        application_from_id(3)
    with pytest.raises(InvalidParameter, match="invalid application: True"):
        application(True)


def test_mnemonic_entropy_size() -> None:
    assert mnemonic_entropy_size(12) == 16
    assert mnemonic_entropy_size(18) == 24
    assert mnemonic_entropy_size(24) == 32


def test_dice_rolls() -> None:
    # 252 is the largest multiple of 6 not exceeding 256
    entropy = bytes([0, 5, 6, 251, 252, 255, 13, 17])
    assert dice_rolls(entropy, 6, 5) == [1, 6, 1, 6, 2]
    assert dice_rolls(entropy, 6, 6) == [1, 6, 1, 6, 2, 6]

    # 256 sides: no byte is rejected
    assert dice_rolls(entropy, 256, 8) == [1, 6, 7, 252, 253, 256, 14, 18]
    # 2 sides: no byte is rejected either
    assert dice_rolls(entropy, 2, 8) == [1, 2, 1, 2, 1, 2, 2, 2]
    # 255 sides: only 255 is rejected
    assert dice_rolls(entropy, 255, 7) == [1, 6, 7, 252, 253, 14, 18]

    rolls = dice_rolls(DICE_ENTROPY, 6, 10)
    assert rolls == [5, 6, 3, 6, 4, 2, 5, 4, 1, 6]
    # one byte per roll in 1..sides, not the DRNG-based 0-based rolls
    assert rolls != [1, 0, 0, 2, 0, 1, 5, 5, 2, 4]
    assert 0 not in dice_rolls(DICE_ENTROPY, 6, 40)


def test_dice_rolls_range() -> None:
    for sides in (2, 3, 6, 7, 10, 20, 100, 129, 255, 256):
        rolls = dice_rolls(DICE_ENTROPY, sides, 20)
        assert len(rolls) == 20
        assert all(1 <= roll <= sides for roll in rolls)


def test_insufficient_entropy() -> None:
    # every byte rejected
    err_msg = "not enough entropy for 1 rolls of a 6 sided die: 0 rolls from 64 bytes"
    with pytest.raises(InsufficientEntropy, match=err_msg):
        dice_rolls(b"\xff" * 64, 6, 1)

    # more rolls than bytes
    err_msg = "not enough entropy for 65 rolls of a 2 sided die: 64 rolls from 64 bytes"
    with pytest.raises(InsufficientEntropy, match=err_msg):
        dice_rolls(b"\x00" * 64, 2, 65)

    # 129 sides: bytes from 129 are rejected
    entropy = bytes(range(129, 193)) + bytes(range(64))
    assert len(entropy) == 128
    with pytest.raises(InsufficientEntropy):
        dice_rolls(entropy[:64], 129, 1)
    assert dice_rolls(entropy, 129, 64) == list(range(1, 65))


def test_formatters() -> None:
    entropy = bytes(range(64))
    network = "mainnet"

    hex_app = APPLICATIONS["hex"]
    assert hex_app.formatter(entropy, (16, 0), KEY_TREE, network) == entropy[:16]
    assert hex_app.formatter(entropy, (64, 0), KEY_TREE, network) == entropy

    pwd = APPLICATIONS["pwd_base64"].formatter(entropy, (86, 0), KEY_TREE, network)
    assert len(pwd) == 86
    assert pwd.startswith("AAECAwQFBgcICQoLDA0ODxAREhMUFRYXGBkaGxwdHh8g")

    pwd = APPLICATIONS["pwd_base85"].formatter(entropy, (80, 0), KEY_TREE, network)
    assert len(pwd) == 80
    assert pwd == base64.b85encode(entropy).decode("ascii")[:80]
    assert set(pwd) <= set(B85_ALPHABET)
    assert "=" in pwd

    dice = APPLICATIONS["dice"].formatter(entropy, (6, 10, 0), KEY_TREE, network)
    assert dice == [1, 2, 3, 4, 5, 6, 1, 2, 3, 4]


def test_languages() -> None:
    assert LANGUAGES[0] == "en"
    assert LANGUAGES[7] == "it"
