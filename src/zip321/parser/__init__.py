# Copyright 2026 zip321 Contributors
# SPDX-License-Identifier: Apache-2.0

"""Scanner and parser for ``zcash:`` payment request URIs."""

from zip321.parser.lexer import QueryToken, ScannedURI, tokenize
from zip321.parser.params import (
    AddressParam,
    AmountParam,
    IndexedParameter,
    LabelParam,
    MemoParam,
    MessageParam,
    OtherParamValue,
    Param,
    param_from,
)
from zip321.parser.parser import (
    LegacyResult,
    ParserResult,
    RequestResult,
    leading_address,
    map_to_payments,
    parse,
    parse_parameters,
)

__all__ = [
    # Scanning
    "tokenize",
    "QueryToken",
    "ScannedURI",
    # Parameters
    "Param",
    "AddressParam",
    "AmountParam",
    "MemoParam",
    "LabelParam",
    "MessageParam",
    "OtherParamValue",
    "IndexedParameter",
    "param_from",
    # Parsing
    "parse",
    "leading_address",
    "parse_parameters",
    "map_to_payments",
    "ParserResult",
    "LegacyResult",
    "RequestResult",
]
