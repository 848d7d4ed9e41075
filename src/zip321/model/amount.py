# Copyright 2026 zip321 Contributors
# SPDX-License-Identifier: Apache-2.0

"""Exact-precision ZEC amounts.

An :class:`Amount` is a non-negative decimal with at most 8 fractional
digits (one zatoshi) and at most the 21,000,000 ZEC supply. Values are
stored as :class:`decimal.Decimal`; binary floats are only accepted
through :meth:`Amount.from_float`, which rounds half-to-even.
"""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation

# ###############
# Public Interface
# ###############

MAX_FRACTIONAL_DIGITS = 8

MAX_SUPPLY = Decimal(21_000_000)


class AmountError(Exception):
    """Base class for errors raised while constructing an :class:`Amount`."""


class NegativeAmount(AmountError):
    """Raised when the value is below zero."""


class GreaterThanSupply(AmountError):
    """Raised when the value exceeds :data:`MAX_SUPPLY`."""


class TooManyFractionalDigits(AmountError):
    """Raised when the value has more than 8 significant fractional digits."""


class InvalidTextInput(AmountError):
    """Raised when the input cannot be read as a finite decimal number."""


class Amount:
    """A validated, immutable ZEC amount.

    Construct from :class:`~decimal.Decimal` or ``int`` directly; use
    :meth:`from_string` for text and :meth:`from_float` for binary floats.
    Equality and hashing follow the numeric value, so ``Amount(1)`` equals
    ``Amount.from_string("1.000")``.

    Raises:
        NegativeAmount: If the value is below zero.
        GreaterThanSupply: If the value exceeds 21,000,000.
        TooManyFractionalDigits: If the value is finer than one zatoshi.
        InvalidTextInput: If the value is NaN or infinite.
    """

    __slots__ = ("_value",)

    def __init__(self, value: Decimal | int) -> None:
        if isinstance(value, bool) or not isinstance(value, (Decimal, int)):
            raise TypeError(
                f"Amount expects Decimal or int, got {type(value).__name__}; "
                "use Amount.from_float or Amount.from_string"
            )
        value = Decimal(value)
        if not value.is_finite():
            raise InvalidTextInput(f"Amount must be a finite number, got {value}")
        if value < 0:
            raise NegativeAmount(f"Amount must not be negative, got {value}")
        if value > MAX_SUPPLY:
            raise GreaterThanSupply(f"Amount {value} exceeds the maximum supply of {MAX_SUPPLY}")
        if _significant_fractional_digits(value) > MAX_FRACTIONAL_DIGITS:
            raise TooManyFractionalDigits(
                f"Amount {value} has more than {MAX_FRACTIONAL_DIGITS} fractional digits"
            )
        self._value = _trim(value)

    @classmethod
    def from_decimal(cls, value: Decimal | int) -> Amount:
        """Create an amount from an exact decimal without rounding."""
        return cls(value)

    @classmethod
    def from_float(cls, value: float) -> Amount:
        """Create an amount from a binary float.

        The float is converted through its shortest decimal representation
        and rounded to 8 fractional digits with banker's rounding, because
        many valid amounts (``0.02``) have no exact binary representation.
        """
        if not math.isfinite(value):
            raise InvalidTextInput(f"Amount must be a finite number, got {value}")
        if value < 0:
            raise NegativeAmount(f"Amount must not be negative, got {value}")
        if value > float(MAX_SUPPLY):
            raise GreaterThanSupply(f"Amount {value} exceeds the maximum supply of {MAX_SUPPLY}")
        rounded = Decimal(repr(value)).quantize(_ZATOSHI, rounding=ROUND_HALF_EVEN)
        return cls(rounded)

    @classmethod
    def from_string(cls, text: str) -> Amount:
        """Create an amount from decimal text such as ``"123.45"``.

        Only plain decimal notation is accepted: no exponents, grouping
        separators, or surrounding whitespace. Values are never rounded.
        """
        if not _DECIMAL_TEXT.fullmatch(text):
            raise InvalidTextInput(f"Not a decimal amount: {text!r}")
        try:
            value = Decimal(text)
        except InvalidOperation as exc:
            raise InvalidTextInput(f"Not a decimal amount: {text!r}") from exc
        return cls(value)

    @property
    def value(self) -> Decimal:
        """The amount as a trimmed :class:`~decimal.Decimal`."""
        return self._value

    def to_string(self) -> str:
        """Return the canonical text form, e.g. ``"0.5"`` or ``"21000000"``."""
        return format(self._value, "f")

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Amount({self.to_string()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)


# ################
# Implementation
# ################

_ZATOSHI = Decimal(1).scaleb(-MAX_FRACTIONAL_DIGITS)

_DECIMAL_TEXT = re.compile(r"-?[0-9]+(?:\.[0-9]+)?", re.ASCII)


def _significant_fractional_digits(value: Decimal) -> int:
    """Count fractional digits, ignoring trailing zeros."""
    _, digits, exponent = value.as_tuple()
    assert isinstance(exponent, int)
    count = max(-exponent, 0)
    for digit in reversed(digits):
        if count == 0 or digit != 0:
            break
        count -= 1
    return count


def _trim(value: Decimal) -> Decimal:
    """Strip trailing zeros; validated amounts fit well within default precision."""
    if value.is_zero():
        return Decimal(0)
    return value.normalize()
