# Copyright 2026 zip321 Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for ``zcash:`` payment request URIs.

Splits a URI into its optional leading address and its query tokens::

    zcash:[address][?qkeyvalue *("&" qkeyvalue)]
    qkeyvalue  = paramname ["." paramindex] ["=" *qchar]
    paramindex = %x31-39 0*3DIGIT

Values are returned still percent-encoded; decoding and interpretation
happen in :mod:`zip321.parser.params`.
"""

from dataclasses import dataclass

from zip321.errors import InvalidParamIndex, ParseError
from zip321.model.strings import is_qchar

# ###############
# Public Interface
# ###############

SCHEME = "zcash:"

MAX_PARAM_INDEX_DIGITS = 4


@dataclass(frozen=True)
class QueryToken:
    """A single ``key[.index][=value]`` element of the query.

    Attributes:
        name: The parameter name.
        index: The explicit ``paramindex``, or ``None`` if absent.
        value: The raw qchar text after ``=``, or ``None`` if there is no ``=``.
        position: 0-based offset of the token in the URI.
    """

    name: str
    index: int | None
    value: str | None
    position: int


@dataclass(frozen=True)
class ScannedURI:
    """The lexical structure of a payment request URI.

    Attributes:
        leading_address: Text between the scheme and ``?``, or ``None`` if empty.
        query_tokens: Tokens after ``?``, or ``None`` if the URI has no query.
    """

    leading_address: str | None
    query_tokens: tuple[QueryToken, ...] | None


def tokenize(uri: str) -> ScannedURI:
    """Split a ``zcash:`` URI into its leading address and query tokens.

    Args:
        uri: The full URI text.

    Returns:
        The scanned URI structure.

    Raises:
        ParseError: If the scheme is missing or the query violates the grammar.
        InvalidParamIndex: If a ``paramindex`` is zero, has a leading zero,
            or has more than four digits.
    """
    return _Lexer(uri).scan()


# ################
# Implementation
# ################


def _is_name_start(character: str) -> bool:
    return character.isascii() and character.isalpha()


def _is_name_char(character: str) -> bool:
    return character.isascii() and (character.isalnum() or character in "+-")


class _Lexer:
    """Internal scanner state machine."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0

    def scan(self) -> ScannedURI:
        if not self._source.startswith(SCHEME):
            raise ParseError(f"URI must start with {SCHEME!r}", 0)
        self._pos = len(SCHEME)
        address = self._scan_leading_address()
        if self._current() != "?":
            return ScannedURI(address, None)
        self._advance()
        tokens = [self._scan_query_token()]
        while self._current() == "&":
            self._advance()
            tokens.append(self._scan_query_token())
        return ScannedURI(address, tuple(tokens))

    # ------------------------------------------------------------------
    # Low-level character access helpers
    # ------------------------------------------------------------------

    def _current(self) -> str:
        """Return the character at the current position, or '' at end of input."""
        if self._pos < len(self._source):
            return self._source[self._pos]
        return ""

    def _advance(self) -> str:
        ch = self._source[self._pos]
        self._pos += 1
        return ch

    def _at_token_end(self) -> bool:
        return self._current() in ("", "&")

    # ------------------------------------------------------------------
    # Scanners
    # ------------------------------------------------------------------

    def _scan_leading_address(self) -> str | None:
        start = self._pos
        while self._current() not in ("", "?"):
            self._advance()
        return self._source[start : self._pos] or None

    def _scan_query_token(self) -> QueryToken:
        start = self._pos
        if self._at_token_end():
            raise ParseError("Expected a query parameter", start)
        name = self._scan_name()
        index = None
        if self._current() == ".":
            self._advance()
            index = self._scan_index(name)
        value = None
        if self._current() == "=":
            self._advance()
            value = self._scan_value()
        elif not self._at_token_end():
            raise ParseError(f"Unexpected character {self._current()!r} after parameter name", self._pos)
        return QueryToken(name, index, value, start)

    def _scan_name(self) -> str:
        start = self._pos
        if not _is_name_start(self._current()):
            raise ParseError("Parameter name must start with a letter", start)
        while self._current() and _is_name_char(self._current()):
            self._advance()
        return self._source[start : self._pos]

    def _scan_index(self, name: str) -> int:
        start = self._pos
        while self._current() and self._current().isascii() and self._current().isdigit():
            self._advance()
        digits = self._source[start : self._pos]
        if not digits:
            raise ParseError(f"Expected a parameter index after '{name}.'", start)
        if digits[0] == "0" or len(digits) > MAX_PARAM_INDEX_DIGITS:
            raise InvalidParamIndex(f"{name}.{digits}")
        return int(digits)

    def _scan_value(self) -> str:
        start = self._pos
        while not self._at_token_end():
            if not is_qchar(self._current()):
                raise ParseError(f"Character {self._current()!r} is not allowed in a value", self._pos)
            self._advance()
        return self._source[start : self._pos]
