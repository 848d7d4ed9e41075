# Copyright 2026 zip321 Contributors
# SPDX-License-Identifier: Apache-2.0

"""Value types and entities of ZIP-321 payment requests."""

from zip321.model.address import (
    AddressKind,
    AddressValidator,
    ParserContext,
    RecipientAddress,
    charset_validator,
)
from zip321.model.amount import (
    MAX_FRACTIONAL_DIGITS,
    MAX_SUPPLY,
    Amount,
    AmountError,
    GreaterThanSupply,
    InvalidTextInput,
    NegativeAmount,
    TooManyFractionalDigits,
)
from zip321.model.entities import (
    RESERVED_PARAM_NAMES,
    OtherParam,
    Payment,
    PaymentRequest,
)
from zip321.model.memo import (
    MAX_MEMO_LENGTH,
    InvalidBase64URL,
    MemoBytes,
    MemoEmpty,
    MemoError,
    MemoTooLong,
    NotUTF8String,
)
from zip321.model.strings import (
    InvalidParamName,
    InvalidQcharString,
    ParamNameString,
    QcharString,
    qchar_decode,
    qchar_encode,
)

__all__ = [
    # Amounts
    "Amount",
    "AmountError",
    "NegativeAmount",
    "GreaterThanSupply",
    "TooManyFractionalDigits",
    "InvalidTextInput",
    "MAX_FRACTIONAL_DIGITS",
    "MAX_SUPPLY",
    # Memos
    "MemoBytes",
    "MemoError",
    "MemoEmpty",
    "MemoTooLong",
    "NotUTF8String",
    "InvalidBase64URL",
    "MAX_MEMO_LENGTH",
    # Strings
    "QcharString",
    "ParamNameString",
    "InvalidQcharString",
    "InvalidParamName",
    "qchar_encode",
    "qchar_decode",
    # Addresses
    "AddressKind",
    "AddressValidator",
    "ParserContext",
    "RecipientAddress",
    "charset_validator",
    # Entities
    "OtherParam",
    "Payment",
    "PaymentRequest",
    "RESERVED_PARAM_NAMES",
]
