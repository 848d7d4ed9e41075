# Copyright 2026 zip321 Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the payment request parser."""

from decimal import Decimal
from typing import Any

import pytest

import zip321
from zip321.errors import (
    DuplicateParameter,
    InvalidAddress,
    InvalidParamIndex,
    InvalidURI,
    ParseError,
    RecipientMissing,
)
from zip321.model import Amount, MemoBytes, OtherParam, ParserContext, QcharString, RecipientAddress
from zip321.parser import (
    AddressParam,
    AmountParam,
    IndexedParameter,
    LegacyResult,
    MemoParam,
    RequestResult,
    leading_address,
    map_to_payments,
    parse,
    parse_parameters,
    tokenize,
)

TESTNET = ParserContext.TESTNET
SAPLING = "ztestsapling10yy2ex5dcqkclhc7z7yrnjq2z6feyjad56ptwlfgmy77dmaqqrl9gyhprdx59qgmsnyfska2kez"
TRANSPARENT = "tmEZhbWHTpdKMw5it8YDspUXSMGQyFwovpU"
UNICODE_MEMO_B64 = "VGhpcyBpcyBhIHVuaWNvZGUgbWVtbyDinKjwn6aE8J-PhvCfjok"

# ###############
# Test Helpers
# ###############


def _request(uri: str, context: ParserContext = TESTNET) -> zip321.PaymentRequest:
    """Parse a URI that must yield a payment request."""
    result = parse(uri, context)
    assert isinstance(result, RequestResult)
    return result.request


def _address(value: str) -> RecipientAddress:
    return RecipientAddress(value=value, network=TESTNET)


def _indexed(index: int, param: Any) -> IndexedParameter:
    return IndexedParameter(index, param)


# ###############
# Legacy URIs
# ###############


class TestLegacy:
    def test_bare_sapling_address(self) -> None:
        result = parse(f"zcash:{SAPLING}", TESTNET)
        assert result == LegacyResult(address=_address(SAPLING))
        assert result.kind == "legacy"

    def test_scheme_only(self) -> None:
        with pytest.raises(InvalidURI):
            parse("zcash:", TESTNET)

    def test_leading_address_is_validated(self) -> None:
        with pytest.raises(InvalidAddress) as exc_info:
            parse("zcash:tm000HTpdKMw5it8YDspUXSMGQyFwovpU", TESTNET)
        assert exc_info.value.index is None

    def test_custom_validator_replaces_charset_check(self) -> None:
        result = parse("zcash:tm000HTpdKMw5it8YDspUXSMGQyFwovpU", TESTNET, validating=lambda _: True)
        assert isinstance(result, LegacyResult)


# ###############
# Payment Requests
# ###############


class TestRequests:
    def test_leading_address_with_parameters(self) -> None:
        request = _request(f"zcash:{TRANSPARENT}?amount=123.45&label=apple+banana")
        (payment,) = request.payments
        assert payment.recipient_address == _address(TRANSPARENT)
        assert payment.amount == Amount(Decimal("123.45"))
        assert payment.label == QcharString("apple+banana")

    def test_two_payments(self) -> None:
        request = _request(
            f"zcash:?address={TRANSPARENT}&amount=123.456"
            f"&address.1={SAPLING}&amount.1=0.789&memo.1={UNICODE_MEMO_B64}"
        )
        first, second = request.payments
        assert first.recipient_address.value == TRANSPARENT
        assert first.amount == Amount.from_string("123.456")
        assert second.recipient_address.value == SAPLING
        assert second.memo == MemoBytes.from_base64url(UNICODE_MEMO_B64)

    def test_parameters_in_any_order(self) -> None:
        request = _request(f"zcash:?amount.1=2&message.1=lunch&address.1={SAPLING}")
        (payment,) = request.payments
        assert payment.message == QcharString("lunch")
        assert payment.amount == Amount(2)

    def test_payments_sorted_by_index(self) -> None:
        request = _request(f"zcash:?address.10={SAPLING}&address.2={TRANSPARENT}&address={SAPLING}&amount.2=2")
        assert [p.recipient_address.value for p in request.payments] == [SAPLING, TRANSPARENT, SAPLING]
        assert request.payments[1].amount == Amount(2)

    def test_extension_parameters_keep_order(self) -> None:
        request = _request(f"zcash:?address={TRANSPARENT}&b=2&a=1&flag")
        assert request.payments[0].other_params == (
            OtherParam.from_strings("b", "2"),
            OtherParam.from_strings("a", "1"),
            OtherParam.from_strings("flag"),
        )

    def test_missing_amount_stays_absent(self) -> None:
        assert _request(f"zcash:?address={SAPLING}").payments[0].amount is None

    def test_key_only_address_is_invalid(self) -> None:
        with pytest.raises(InvalidAddress):
            parse("zcash:?address", TESTNET)

    def test_parse_error_reports_position(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse(f"zcash:?address={TRANSPARENT}&label=a b", TESTNET)
        assert exc_info.value.position == len(f"zcash:?address={TRANSPARENT}&label=a")

    def test_index_zero(self) -> None:
        with pytest.raises(InvalidParamIndex) as exc_info:
            parse(f"zcash:?address.0={SAPLING}&amount.0=2", TESTNET)
        assert exc_info.value.value == "address.0"

    def test_mainnet_request(self) -> None:
        address = "t1Hsc1LR8yKnbbe3twRp88p6vFfC5t7DLbs"
        request = _request(f"zcash:{address}?amount=1", ParserContext.MAINNET)
        assert request.payments[0].recipient_address.network is ParserContext.MAINNET


# ###############
# Pipeline Stages
# ###############


class TestPipelineStages:
    def test_leading_address(self) -> None:
        param = leading_address(f"zcash:{SAPLING}?amount=1.0001&message=lunch", TESTNET)
        assert param == _indexed(0, AddressParam(address=_address(SAPLING)))

    def test_no_leading_address(self) -> None:
        assert leading_address(f"zcash:?address.1={SAPLING}", TESTNET) is None

    def test_leading_address_requires_scheme(self) -> None:
        with pytest.raises(ParseError):
            leading_address(SAPLING, TESTNET)

    def test_parse_parameters_prepends_leading_address(self) -> None:
        leading = _indexed(0, AddressParam(address=_address(SAPLING)))
        tokens = tokenize("zcash:?amount=1&memo.1=YQ").query_tokens
        assert tokens is not None
        parameters = parse_parameters(tokens, leading, TESTNET)
        assert parameters == [
            leading,
            _indexed(0, AmountParam(amount=Amount(1))),
            _indexed(1, MemoParam(memo=MemoBytes(b"a"))),
        ]

    def test_map_to_payments_empty(self) -> None:
        with pytest.raises(RecipientMissing) as exc_info:
            map_to_payments([])
        assert exc_info.value.index is None

    def test_map_to_payments_duplicate(self) -> None:
        address = AddressParam(address=_address(SAPLING))
        with pytest.raises(DuplicateParameter) as exc_info:
            map_to_payments([_indexed(5, address), _indexed(5, address)])
        assert exc_info.value.name == "address"
        assert exc_info.value.index == 5

    def test_map_to_payments_same_param_different_index(self) -> None:
        address = AddressParam(address=_address(SAPLING))
        payments = map_to_payments([_indexed(2, address), _indexed(1, address)])
        assert len(payments) == 2


# ###############
# Shared Vectors
# ###############


class TestVectors:
    def test_valid(self, valid_vector: dict[str, Any]) -> None:
        result = parse(valid_vector["uri"], ParserContext(valid_vector["network"]))
        assert result.kind == valid_vector["kind"]
        if isinstance(result, RequestResult):
            assert len(result.request.payments) == valid_vector["payments"]

    def test_invalid(self, invalid_vector: dict[str, Any]) -> None:
        error = getattr(zip321, invalid_vector["error"])
        with pytest.raises(error) as exc_info:
            parse(invalid_vector["uri"], ParserContext(invalid_vector["network"]))
        for name, expected in invalid_vector.get("attrs", {}).items():
            assert getattr(exc_info.value, name) == expected
