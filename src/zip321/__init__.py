# Copyright 2026 zip321 Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parse and render Zcash ZIP-321 payment request URIs.

Typical use::

    from zip321 import ParserContext, RequestResult, parse, render_request

    result = parse(uri, ParserContext.MAINNET)
    if isinstance(result, RequestResult):
        canonical = render_request(result.request)
"""

from zip321.errors import (
    AmountExceededSupply,
    AmountTooSmall,
    DuplicateParameter,
    InvalidAddress,
    InvalidBase64,
    InvalidParamIndex,
    InvalidParamValue,
    InvalidURI,
    MemoBytesError,
    NetworkMismatchFound,
    OtherParamEncodingError,
    OtherParamUsesReservedKey,
    ParseError,
    QcharDecodeFailed,
    RecipientMissing,
    SproutRecipientsNotAllowed,
    TransparentMemoNotAllowed,
    UnknownRequiredParameter,
    ZIP321Error,
)
from zip321.model import (
    AddressValidator,
    Amount,
    MemoBytes,
    OtherParam,
    ParamNameString,
    ParserContext,
    Payment,
    PaymentRequest,
    QcharString,
    RecipientAddress,
    charset_validator,
)
from zip321.parser import LegacyResult, ParserResult, RequestResult, parse
from zip321.render import (
    EnumerateAllPayments,
    FormattingOptions,
    UseEmptyParamIndex,
    render_address,
    render_payment,
    render_request,
)

__all__ = [
    # Parsing
    "parse",
    "ParserContext",
    "ParserResult",
    "LegacyResult",
    "RequestResult",
    "AddressValidator",
    "charset_validator",
    # Rendering
    "render_request",
    "render_payment",
    "render_address",
    "FormattingOptions",
    "EnumerateAllPayments",
    "UseEmptyParamIndex",
    # Model
    "Amount",
    "MemoBytes",
    "QcharString",
    "ParamNameString",
    "RecipientAddress",
    "OtherParam",
    "Payment",
    "PaymentRequest",
    # Errors
    "ZIP321Error",
    "ParseError",
    "InvalidURI",
    "InvalidParamIndex",
    "InvalidAddress",
    "SproutRecipientsNotAllowed",
    "AmountExceededSupply",
    "AmountTooSmall",
    "InvalidParamValue",
    "InvalidBase64",
    "MemoBytesError",
    "DuplicateParameter",
    "RecipientMissing",
    "TransparentMemoNotAllowed",
    "NetworkMismatchFound",
    "UnknownRequiredParameter",
    "OtherParamUsesReservedKey",
    "OtherParamEncodingError",
    "QcharDecodeFailed",
]
