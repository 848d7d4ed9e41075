# Copyright 2026 zip321 Contributors
# SPDX-License-Identifier: Apache-2.0

"""Validated string wrappers for ZIP-321 parameter names and values.

ZIP-321 defines the characters allowed unescaped in parameter values as::

    qchar          = unreserved / pct-encoded / allowed-delims / ":" / "@"
    allowed-delims = "!" / "$" / "'" / "(" / ")" / "*" / "+" / "," / ";"
    unreserved     = ALPHA / DIGIT / "-" / "." / "_" / "~"

and parameter names as::

    paramname      = ALPHA *( ALPHA / DIGIT / "+" / "-" )
"""

from __future__ import annotations

import re
from urllib.parse import quote, unquote_to_bytes

from zip321.errors import QcharDecodeFailed

# ###############
# Public Interface
# ###############

QCHAR_SAFE_CHARACTERS = "-._~!$'()*+,;:@"


class InvalidQcharString(ValueError):
    """Raised when a value cannot be wrapped in a :class:`QcharString`."""


class InvalidParamName(ValueError):
    """Raised when a value is not a valid ZIP-321 ``paramname``."""


def qchar_encode(text: str) -> str:
    """Percent-encode every UTF-8 byte of ``text`` that is not a qchar."""
    return quote(text, safe=QCHAR_SAFE_CHARACTERS, encoding="utf-8", errors="strict")


def qchar_decode(text: str) -> str:
    """Decode qchar text taken from a URI.

    Raises:
        QcharDecodeFailed: If ``text`` contains characters outside the qchar
            set, a malformed percent triplet, or bytes that are not UTF-8.
    """
    if not _QCHAR_TEXT.fullmatch(text):
        raise QcharDecodeFailed(text)
    try:
        return unquote_to_bytes(text).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise QcharDecodeFailed(text) from exc


def is_qchar(character: str) -> bool:
    """Return True if ``character`` may appear in a URI parameter value.

    ``%`` counts as a qchar here; whether it starts a valid percent triplet
    is checked when the value is decoded.
    """
    return len(character) == 1 and (character in _QCHAR_CHARACTERS)


class QcharString:
    """A non-empty string stored in its qchar-encoded form.

    Args:
        value: The decoded text.
        strict: When True, reject text that percent-decodes to something
            other than itself, i.e. text that already looks encoded.

    Raises:
        InvalidQcharString: If ``value`` is empty, cannot be encoded, or is
            rejected by strict mode.
    """

    __slots__ = ("_encoded",)

    def __init__(self, value: str, strict: bool = False) -> None:
        if not value:
            raise InvalidQcharString("Value must not be empty")
        try:
            encoded = qchar_encode(value)
        except UnicodeEncodeError as exc:
            raise InvalidQcharString(f"Value cannot be encoded as UTF-8: {value!r}") from exc
        if strict and "%" in value and _percent_decoded(value) != value:
            raise InvalidQcharString(f"Value appears to be percent-encoded already: {value!r}")
        self._encoded = encoded

    @classmethod
    def from_encoded(cls, text: str) -> QcharString:
        """Create a value from qchar text as it appears in a URI.

        Raises:
            QcharDecodeFailed: If the text cannot be decoded or decodes to
                an empty string.
        """
        decoded = qchar_decode(text)
        if not decoded:
            raise QcharDecodeFailed(text)
        return cls(decoded)

    @property
    def value(self) -> str:
        """The decoded text."""
        return unquote_to_bytes(self._encoded).decode("utf-8")

    @property
    def encoded(self) -> str:
        """The qchar-encoded text, ready to be placed in a URI."""
        return self._encoded

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"QcharString({self.value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QcharString):
            return NotImplemented
        return self._encoded == other._encoded

    def __hash__(self) -> int:
        return hash(self._encoded)


class ParamNameString:
    """A valid ZIP-321 ``paramname``.

    The mandatory leading letter keeps a name from being confused with its
    numeric ``.index`` suffix.

    Raises:
        InvalidParamName: If ``value`` is empty or violates the grammar.
    """

    __slots__ = ("_value",)

    def __init__(self, value: str) -> None:
        if not PARAM_NAME.fullmatch(value):
            raise InvalidParamName(f"Not a valid parameter name: {value!r}")
        self._value = value

    @property
    def value(self) -> str:
        return self._value

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"ParamNameString({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParamNameString):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)


PARAM_NAME = re.compile(r"[A-Za-z][A-Za-z0-9+\-]*", re.ASCII)


# ################
# Implementation
# ################

_QCHAR_CHARACTERS = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789%" + QCHAR_SAFE_CHARACTERS
)

_QCHAR_TEXT = re.compile(r"(?:[A-Za-z0-9\-._~!$'()*+,;:@]|%[0-9A-Fa-f]{2})*", re.ASCII)


def _percent_decoded(value: str) -> str:
    """Best-effort percent decoding used by strict mode."""
    return unquote_to_bytes(value).decode("utf-8", errors="replace")
