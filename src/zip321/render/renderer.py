# Copyright 2026 zip321 Contributors
# SPDX-License-Identifier: Apache-2.0

"""Renders payment requests as canonical ``zcash:`` URIs.

The parameters of a payment are always emitted in the order ``address``,
``amount``, ``memo``, ``label``, ``message``, followed by extension
parameters in their stored order. Rendering never fails for a validated
:class:`~zip321.model.entities.PaymentRequest`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from zip321.model.address import RecipientAddress
from zip321.model.entities import OtherParam, Payment, PaymentRequest
from zip321.parser.lexer import SCHEME

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class EnumerateAllPayments:
    """Give every payment an explicit index, starting at ``1``."""


@dataclass(frozen=True)
class UseEmptyParamIndex:
    """Render the first payment without an index.

    Attributes:
        omit_address_label: Place the first address directly after the
            scheme (``zcash:<address>?...``) instead of as ``address=``.
    """

    omit_address_label: bool


FormattingOptions = EnumerateAllPayments | UseEmptyParamIndex


def render_request(
    request: PaymentRequest,
    options: FormattingOptions = EnumerateAllPayments(),
) -> str:
    """Render a payment request as a URI.

    Args:
        request: The payment request.
        options: How the first payment is indexed.

    Returns:
        The URI text.
    """
    payments = request.payments
    if isinstance(options, EnumerateAllPayments):
        query = _join(render_payment_params(payment, index) for index, payment in enumerate(payments, start=1))
        uri = f"{SCHEME}?{query}"
    else:
        first, rest = payments[0], payments[1:]
        omit = options.omit_address_label
        parts = [render_payment_params(first, None, omit_address_label=omit)]
        parts.extend(render_payment_params(payment, index) for index, payment in enumerate(rest, start=1))
        query = _join(parts)
        if omit:
            uri = f"{SCHEME}{first.recipient_address.value}" + (f"?{query}" if query else "")
        else:
            uri = f"{SCHEME}?{query}"
    logger.debug("Rendered payment request with %d payment(s)", len(payments))
    return uri


def render_payment(payment: Payment, options: FormattingOptions = EnumerateAllPayments()) -> str:
    """Render a single payment as a one-payment request."""
    return render_request(PaymentRequest(payments=(payment,)), options)


def render_address(
    address: RecipientAddress,
    options: FormattingOptions = UseEmptyParamIndex(omit_address_label=True),
) -> str:
    """Render a bare recipient; the default yields ``zcash:<address>``."""
    return render_payment(Payment(recipient_address=address), options)


def render_payment_params(payment: Payment, index: int | None, omit_address_label: bool = False) -> str:
    """Render the query parameters of one payment joined by ``&``.

    Args:
        payment: The payment.
        index: The ``paramindex`` to append to every key, or ``None`` for
            the unindexed payment.
        omit_address_label: Leave out the ``address`` parameter of the
            unindexed payment; the caller renders it after the scheme.
            Ignored when ``index`` is given.

    Returns:
        The parameters; empty when only the address was omitted.

    Raises:
        ValueError: If ``index`` is not a valid ``paramindex``.
    """
    if index is not None and not 1 <= index <= _MAX_PARAM_INDEX:
        raise ValueError(f"Payment index must be between 1 and {_MAX_PARAM_INDEX}, got {index}")
    suffix = "" if index is None else f".{index}"
    parts: list[str] = []
    if index is not None or not omit_address_label:
        parts.append(f"address{suffix}={payment.recipient_address.value}")
    if payment.amount is not None:
        parts.append(f"amount{suffix}={payment.amount}")
    if payment.memo is not None:
        parts.append(f"memo{suffix}={payment.memo.to_base64url()}")
    if payment.label is not None:
        parts.append(f"label{suffix}={payment.label.encoded}")
    if payment.message is not None:
        parts.append(f"message{suffix}={payment.message.encoded}")
    for param in payment.other_params or ():
        parts.append(_render_other(param, suffix))
    return _join(parts)


# ################
# Implementation
# ################

_MAX_PARAM_INDEX = 9999


def _join(parts: Iterable[str]) -> str:
    return "&".join(part for part in parts if part)


def _render_other(param: OtherParam, suffix: str) -> str:
    if param.value is None:
        return f"{param.key}{suffix}"
    return f"{param.key}{suffix}={param.value.encoded}"
