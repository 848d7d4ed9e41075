# Copyright 2026 zip321 Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recipient addresses and their network-dependent classification.

Addresses are opaque strings. They are classified by human-readable prefix
only; checksums are not verified here. Callers that need stronger checks
pass an :data:`AddressValidator` to :meth:`RecipientAddress.create` or to
:func:`zip321.parse`.
"""

from __future__ import annotations

import enum
from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, model_validator

from zip321.errors import InvalidAddress, SproutRecipientsNotAllowed

# ###############
# Public Interface
# ###############

# A side-effect free predicate that returns True for acceptable addresses.
AddressValidator = Callable[[str], bool]


class AddressKind(enum.Enum):
    """Pool of a recipient address as far as its prefix reveals."""

    TRANSPARENT = "transparent"
    SHIELDED = "shielded"
    SPROUT = "sprout"
    INVALID = "invalid"


class ParserContext(enum.Enum):
    """The network whose address prefixes apply while parsing and validating."""

    MAINNET = "mainnet"
    TESTNET = "testnet"
    REGTEST = "regtest"

    @property
    def sprout_prefix(self) -> str:
        return _PREFIXES[self][0]

    @property
    def sapling_prefix(self) -> str:
        return _PREFIXES[self][1]

    @property
    def unified_prefix(self) -> str:
        return _PREFIXES[self][2]

    @property
    def p2sh_prefix(self) -> str:
        return _PREFIXES[self][3]

    @property
    def p2pkh_prefix(self) -> str:
        return _PREFIXES[self][4]

    @property
    def tex_prefix(self) -> str:
        return _PREFIXES[self][5]

    def is_sprout(self, address: str) -> bool:
        """Return True for a Sprout address.

        On testnet the Sprout prefix ``zt`` is a prefix of the Sapling prefix
        ``ztestsapling``; Sapling addresses are excluded explicitly.
        """
        return (
            _is_ascii_alphanumeric(address)
            and address.startswith(self.sprout_prefix)
            and not address.startswith(self.sapling_prefix)
        )

    def is_transparent(self, address: str) -> bool:
        """Return True for P2PKH, P2SH, and TEX addresses."""
        return _is_ascii_alphanumeric(address) and address.startswith(
            (self.p2pkh_prefix, self.p2sh_prefix, self.tex_prefix + _BECH32_SEPARATOR)
        )

    def is_shielded(self, address: str) -> bool:
        """Return True for Sapling and Unified addresses.

        Unified addresses are assumed to contain a shielded receiver. Bech32
        prefixes must be followed by the separator, so that ``utest1...`` is
        not taken for a mainnet ``u`` address.
        """
        return _is_ascii_alphanumeric(address) and address.startswith(
            (self.sapling_prefix + _BECH32_SEPARATOR, self.unified_prefix + _BECH32_SEPARATOR)
        )

    def is_valid(self, address: str) -> bool:
        """Return True if the address may be a ZIP-321 recipient on this network."""
        if self.is_sprout(address):
            return False
        return self.is_transparent(address) or self.is_shielded(address)

    def classify(self, address: str) -> AddressKind:
        """Return the :class:`AddressKind` of ``address`` on this network."""
        if self.is_sprout(address):
            return AddressKind.SPROUT
        if self.is_shielded(address):
            return AddressKind.SHIELDED
        if self.is_transparent(address):
            return AddressKind.TRANSPARENT
        return AddressKind.INVALID


def charset_validator(address: str) -> bool:
    """Check that the data part of ``address`` uses its encoding's alphabet.

    Sapling, Unified, and TEX addresses must be a known human-readable part
    followed by ``1`` and bech32 characters; other ``t`` addresses must be
    base58. Checksums are not verified.
    """
    if not address:
        return False
    first = address[0]
    if first == "z":
        return _has_bech32_data(address, _SAPLING_HRPS)
    if first == "u":
        return _has_bech32_data(address, _UNIFIED_HRPS)
    if first == "t":
        if address.startswith(_TEX_HRPS):
            return _has_bech32_data(address, _TEX_HRPS)
        return all(character in _BASE58 for character in address)
    return False


class RecipientAddress(BaseModel):
    """An address that passed the prefix rules of its network.

    Constructing the model directly applies the network rules only; use
    :meth:`create` to add a caller-supplied validator.

    Raises:
        SproutRecipientsNotAllowed: If ``value`` is a Sprout address.
        InvalidAddress: If ``value`` is not a valid address on ``network``.
    """

    model_config = ConfigDict(frozen=True)

    value: str
    network: ParserContext

    @model_validator(mode="after")
    def check_network_rules(self) -> RecipientAddress:
        if self.network.is_sprout(self.value):
            raise SproutRecipientsNotAllowed(None)
        if not self.network.is_valid(self.value):
            raise InvalidAddress(None)
        return self

    @classmethod
    def create(
        cls,
        value: str,
        network: ParserContext,
        validating: AddressValidator | None = None,
    ) -> RecipientAddress:
        """Create an address checked by the network rules and ``validating``.

        Raises:
            SproutRecipientsNotAllowed: If ``value`` is a Sprout address.
            InvalidAddress: If either check rejects ``value``.
        """
        address = cls(value=value, network=network)
        if validating is not None and not validating(value):
            raise InvalidAddress(None)
        return address

    @property
    def kind(self) -> AddressKind:
        return self.network.classify(self.value)

    @property
    def is_transparent(self) -> bool:
        return self.kind is AddressKind.TRANSPARENT

    @property
    def can_receive_memos(self) -> bool:
        """Only shielded recipients can receive memos."""
        return self.kind is AddressKind.SHIELDED

    def __str__(self) -> str:
        return self.value


# ################
# Implementation
# ################

# (sprout, sapling, unified, p2sh, p2pkh, tex)
_PREFIXES: dict[ParserContext, tuple[str, str, str, str, str, str]] = {
    ParserContext.MAINNET: ("zc", "zs", "u", "t3", "t1", "tex"),
    ParserContext.TESTNET: ("zt", "ztestsapling", "utest", "t2", "tm", "textest"),
    ParserContext.REGTEST: ("zt", "zregtestsapling", "uregtest", "t3", "tm", "texregtest"),
}

_BECH32_SEPARATOR = "1"

_SAPLING_HRPS = ("zs1", "ztestsapling1", "zregtestsapling1")
_UNIFIED_HRPS = ("u1", "utest1", "uregtest1")
_TEX_HRPS = ("tex1", "textest1", "texregtest1")

_BECH32 = frozenset("qpzry9x8gf2tvdw0s3jn54khce6mua7l")
_BASE58 = frozenset("123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz")


def _is_ascii_alphanumeric(address: str) -> bool:
    """Reject control, punctuation, and non-ASCII look-alike characters."""
    return address.isascii() and address.isalnum()


def _has_bech32_data(address: str, hrps: tuple[str, ...]) -> bool:
    for hrp in hrps:
        if address.startswith(hrp):
            data = address[len(hrp) :]
            return bool(data) and all(character in _BECH32 for character in data)
    return False
