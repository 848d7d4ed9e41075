# Copyright 2026 zip321 Contributors
# SPDX-License-Identifier: Apache-2.0

"""Memo payloads and their base64url wire encoding."""

from __future__ import annotations

import base64
import binascii
import re

# ###############
# Public Interface
# ###############

MAX_MEMO_LENGTH = 512


class MemoError(Exception):
    """Base class for errors raised while constructing :class:`MemoBytes`."""


class MemoEmpty(MemoError):
    """Raised when the memo payload is empty."""


class MemoTooLong(MemoError):
    """Raised when the memo payload exceeds 512 bytes."""


class NotUTF8String(MemoError):
    """Raised when memo text cannot be encoded as UTF-8."""


class InvalidBase64URL(MemoError):
    """Raised when memo text is not valid RFC 4648 base64url."""


class MemoBytes:
    """An immutable memo payload of 1 to 512 bytes.

    Raises:
        MemoEmpty: If ``data`` is empty.
        MemoTooLong: If ``data`` is longer than 512 bytes.
    """

    __slots__ = ("_data",)

    def __init__(self, data: bytes) -> None:
        if not data:
            raise MemoEmpty("Memo must not be empty")
        if len(data) > MAX_MEMO_LENGTH:
            raise MemoTooLong(f"Memo is {len(data)} bytes, the maximum is {MAX_MEMO_LENGTH}")
        self._data = bytes(data)

    @classmethod
    def from_utf8(cls, text: str) -> MemoBytes:
        """Create a memo from the UTF-8 encoding of ``text``.

        Use :meth:`from_base64url` for memos taken from a URI.
        """
        if not text:
            raise MemoEmpty("Memo must not be empty")
        try:
            data = text.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise NotUTF8String("Memo text cannot be encoded as UTF-8") from exc
        return cls(data)

    @classmethod
    def from_base64url(cls, text: str) -> MemoBytes:
        """Decode an unpadded base64url string (alphabet ``A-Z a-z 0-9 - _``)."""
        if not _BASE64URL.fullmatch(text):
            raise InvalidBase64URL(f"Not a base64url string: {text!r}")
        padding = "=" * (-len(text) % 4)
        try:
            data = base64.b64decode(text + padding, altchars=b"-_", validate=True)
        except binascii.Error as exc:
            raise InvalidBase64URL(f"Not a base64url string: {text!r}") from exc
        return cls(data)

    @property
    def data(self) -> bytes:
        """The raw memo bytes."""
        return self._data

    def to_base64url(self) -> str:
        """Encode the memo as base64url without padding."""
        return base64.urlsafe_b64encode(self._data).decode("ascii").rstrip("=")

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"MemoBytes({self.to_base64url()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MemoBytes):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash(self._data)


# ################
# Implementation
# ################

_BASE64URL = re.compile(r"[A-Za-z0-9_-]*", re.ASCII)
