# Copyright 2026 zip321 Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the payment request URI scanner."""

import pytest

from zip321.errors import InvalidParamIndex, ParseError
from zip321.parser.lexer import QueryToken, ScannedURI, tokenize

ADDRESS = "tmEZhbWHTpdKMw5it8YDspUXSMGQyFwovpU"

# ###############
# Test Helpers
# ###############


def _tokens(uri: str) -> tuple[QueryToken, ...]:
    """Return the query tokens, which must be present."""
    scanned = tokenize(uri)
    assert scanned.query_tokens is not None
    return scanned.query_tokens


def _triples(uri: str) -> list[tuple[str, int | None, str | None]]:
    """Return ``(name, index, value)`` for every query token."""
    return [(tok.name, tok.index, tok.value) for tok in _tokens(uri)]


# ###############
# Scheme and Leading Address
# ###############


class TestSchemeAndAddress:
    def test_bare_address(self) -> None:
        assert tokenize(f"zcash:{ADDRESS}") == ScannedURI(ADDRESS, None)

    def test_scheme_only(self) -> None:
        assert tokenize("zcash:") == ScannedURI(None, None)

    def test_address_followed_by_query(self) -> None:
        scanned = tokenize(f"zcash:{ADDRESS}?amount=1")
        assert scanned.leading_address == ADDRESS
        assert scanned.query_tokens == (QueryToken("amount", None, "1", len(f"zcash:{ADDRESS}?")),)

    def test_query_without_address(self) -> None:
        assert tokenize("zcash:?amount=1").leading_address is None

    @pytest.mark.parametrize("uri", ["", "zcash", "ZCASH:" + ADDRESS, "bitcoin:" + ADDRESS, " zcash:" + ADDRESS])
    def test_wrong_scheme(self, uri: str) -> None:
        with pytest.raises(ParseError) as exc_info:
            tokenize(uri)
        assert exc_info.value.position == 0


# ###############
# Query Tokens
# ###############


class TestQueryTokens:
    def test_unindexed_pairs(self) -> None:
        assert _triples("zcash:?address=abc&amount=1.5") == [("address", None, "abc"), ("amount", None, "1.5")]

    def test_indexed_pairs(self) -> None:
        assert _triples("zcash:?address.1=abc&amount.12=1") == [("address", 1, "abc"), ("amount", 12, "1")]

    def test_extension_names(self) -> None:
        assert _triples("zcash:?asset-id=zPOAP&asset-id.1=zPOAP") == [
            ("asset-id", None, "zPOAP"),
            ("asset-id", 1, "zPOAP"),
        ]

    def test_key_only(self) -> None:
        assert _triples("zcash:?flag&x+y.2") == [("flag", None, None), ("x+y", 2, None)]

    def test_empty_value(self) -> None:
        assert _triples("zcash:?memo=") == [("memo", None, "")]

    def test_values_stay_encoded(self) -> None:
        assert _triples("zcash:?message=Thank%20you!") == [("message", None, "Thank%20you!")]

    def test_positions(self) -> None:
        assert [tok.position for tok in _tokens("zcash:?a=1&bb=2")] == [7, 11]

    @pytest.mark.parametrize(
        "uri",
        [
            "zcash:?",
            "zcash:?&amount=1",
            "zcash:?amount=1&",
            "zcash:?amount=1&&label=x",
            "zcash:?=1",
            "zcash:?1abc=1",
            "zcash:?-abc=1",
            "zcash:?ab*c=1",
            "zcash:?amount.=1",
            "zcash:?amount.x=1",
            "zcash:?amount.1x=1",
            "zcash:?message=a b",
            "zcash:?message=a#b",
            "zcash:?message=a=b",
            "zcash:?message=a?b",
            "zcash:?message=café",
        ],
    )
    def test_grammar_violations(self, uri: str) -> None:
        with pytest.raises(ParseError):
            tokenize(uri)


# ###############
# Parameter Indexes
# ###############


class TestParamIndex:
    @pytest.mark.parametrize("digits", ["1", "10", "100", "1000", "9990", "9999"])
    def test_valid_indexes(self, digits: str) -> None:
        assert _tokens(f"zcash:?amount.{digits}=1")[0].index == int(digits)

    @pytest.mark.parametrize("digits", ["0", "00", "01", "0001", "10000", "99999"])
    def test_invalid_indexes(self, digits: str) -> None:
        with pytest.raises(InvalidParamIndex) as exc_info:
            tokenize(f"zcash:?amount.{digits}=1")
        assert exc_info.value.value == f"amount.{digits}"
