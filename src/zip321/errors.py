# Copyright 2026 zip321 Contributors
# SPDX-License-Identifier: Apache-2.0

"""Errors raised while parsing, validating, or rendering ZIP-321 payment requests.

Every error that belongs to a specific payment carries that payment's
``index``. ``None`` denotes the first, unindexed payment (``address=``);
all other payments carry their explicit 1-based ``paramindex``. The amount
range errors are the exception: they keep the raw index, so ``0`` denotes
the unindexed payment.
"""

from __future__ import annotations

# ###############
# Public Interface
# ###############


class ZIP321Error(Exception):
    """Base class for all payment request errors."""


# ------------------------------------------------------------------
# Structural errors
# ------------------------------------------------------------------


class ParseError(ZIP321Error):
    """Raised when the URI does not match the ZIP-321 grammar.

    Attributes:
        message: Description of the grammar violation.
        position: 0-based offset into the URI where the violation was found,
            or ``None`` when it is not tied to a position.
    """

    def __init__(self, message: str, position: int | None = None) -> None:
        if position is None:
            super().__init__(message)
        else:
            super().__init__(f"Position {position}: {message}")
        self.message = message
        self.position = position


class InvalidURI(ZIP321Error):
    """Raised for a ``zcash:`` URI with neither an address nor parameters."""

    def __init__(self) -> None:
        super().__init__("URI contains no address and no parameters")


class InvalidParamIndex(ZIP321Error):
    """Raised for a ``paramindex`` that is zero, has leading zeros, or exceeds 9999.

    Attributes:
        value: The offending ``name.index`` text.
    """

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid parameter index: {value!r}")
        self.value = value


# ------------------------------------------------------------------
# Address errors
# ------------------------------------------------------------------


class InvalidAddress(ZIP321Error):
    """Raised when a recipient address fails validation."""

    def __init__(self, index: int | None = None) -> None:
        super().__init__(f"Invalid recipient address{_at(index)}")
        self.index = index


class SproutRecipientsNotAllowed(ZIP321Error):
    """Raised when a Sprout address is used as a recipient."""

    def __init__(self, index: int | None = None) -> None:
        super().__init__(f"Sprout recipients are not allowed{_at(index)}")
        self.index = index


# ------------------------------------------------------------------
# Amount errors
# ------------------------------------------------------------------


class AmountExceededSupply(ZIP321Error):
    """Raised when a payment amount exceeds the 21,000,000 ZEC supply.

    Attributes:
        index: Payment index of the amount, ``0`` for the unindexed payment.
    """

    def __init__(self, index: int) -> None:
        super().__init__(f"Amount exceeds maximum supply{_at(index)}")
        self.index = index


class AmountTooSmall(ZIP321Error):
    """Raised when an amount is negative or finer than one zatoshi.

    Attributes:
        index: Payment index of the amount, ``0`` for the unindexed payment.
    """

    def __init__(self, index: int) -> None:
        super().__init__(f"Amount is negative or has more than 8 fractional digits{_at(index)}")
        self.index = index


class InvalidParamValue(ZIP321Error):
    """Raised when a reserved parameter holds text that cannot be interpreted.

    Attributes:
        param: Name of the parameter, e.g. ``"amount"``.
        index: Payment index of the parameter.
    """

    def __init__(self, param: str, index: int | None = None) -> None:
        super().__init__(f"Invalid value for parameter {param!r}{_at(index)}")
        self.param = param
        self.index = index


# ------------------------------------------------------------------
# Memo errors
# ------------------------------------------------------------------


class InvalidBase64(ZIP321Error):
    """Raised when a ``memo`` value is not valid base64url."""

    def __init__(self) -> None:
        super().__init__("Memo is not valid base64url")


class MemoBytesError(ZIP321Error):
    """Raised when a decoded memo is empty, too long, or not UTF-8.

    Attributes:
        reason: The underlying :class:`~zip321.model.memo.MemoError`.
        index: Payment index of the memo.
    """

    def __init__(self, reason: Exception, index: int | None = None) -> None:
        super().__init__(f"Invalid memo{_at(index)}: {reason}")
        self.reason = reason
        self.index = index


# ------------------------------------------------------------------
# Conflicts between parameters and payments
# ------------------------------------------------------------------


class DuplicateParameter(ZIP321Error):
    """Raised when a parameter appears twice for the same payment index."""

    def __init__(self, name: str, index: int | None = None) -> None:
        super().__init__(f"Duplicate parameter {name!r}{_at(index)}")
        self.name = name
        self.index = index


class RecipientMissing(ZIP321Error):
    """Raised when a payment has no recipient address."""

    def __init__(self, index: int | None = None) -> None:
        super().__init__(f"Recipient address missing{_at(index)}")
        self.index = index


class TransparentMemoNotAllowed(ZIP321Error):
    """Raised when a memo is attached to a recipient that cannot receive memos."""

    def __init__(self, index: int | None = None) -> None:
        super().__init__(f"Memos are not allowed for transparent recipients{_at(index)}")
        self.index = index


class NetworkMismatchFound(ZIP321Error):
    """Raised when a payment request mixes recipients from different networks."""

    def __init__(self) -> None:
        super().__init__("Payment request mixes recipients from different networks")


class UnknownRequiredParameter(ZIP321Error):
    """Raised for an unrecognized ``req-`` parameter, which invalidates the URI."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Unknown required parameter: {key!r}")
        self.key = key


class OtherParamUsesReservedKey(ZIP321Error):
    """Raised when an extension parameter uses a reserved key."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Extension parameter uses reserved key: {key!r}")
        self.key = key


class OtherParamEncodingError(ZIP321Error):
    """Raised when an extension key or value cannot be represented in the URI."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Extension parameter cannot be encoded: {value!r}")
        self.value = value


class QcharDecodeFailed(ZIP321Error):
    """Raised when a parameter value is not valid percent-encoded qchar text."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Value is not valid qchar text: {value!r}")
        self.value = value


def index_or_none(index: int) -> int | None:
    """Map the internal ``0`` sentinel of the unindexed payment to ``None``."""
    return index if index > 0 else None


# ################
# Implementation
# ################


def _at(index: int | None) -> str:
    return "" if index is None else f" (payment {index})"
