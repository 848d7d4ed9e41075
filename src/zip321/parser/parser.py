# Copyright 2026 zip321 Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parser for ``zcash:`` payment request URIs.

Scans the URI, interprets every query parameter, groups the parameters by
payment index and assembles a validated :class:`PaymentRequest`. A URI that
consists of a bare address and no query is returned as a legacy result.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

from zip321.errors import (
    DuplicateParameter,
    InvalidURI,
    ParseError,
    RecipientMissing,
    TransparentMemoNotAllowed,
    index_or_none,
)
from zip321.model.address import AddressValidator, ParserContext, RecipientAddress, charset_validator
from zip321.model.entities import Payment, PaymentRequest
from zip321.parser.lexer import SCHEME, QueryToken, tokenize
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

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class LegacyResult(BaseModel):
    """A URI of the form ``zcash:<address>`` without query parameters."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["legacy"] = "legacy"
    address: RecipientAddress


class RequestResult(BaseModel):
    """A URI carrying a full payment request."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["request"] = "request"
    request: PaymentRequest


# The outcome of parsing a URI, discriminated by `kind`.
ParserResult = Annotated[LegacyResult | RequestResult, _Field(discriminator="kind")]


def parse(
    uri: str,
    context: ParserContext,
    validating: AddressValidator | None = None,
) -> ParserResult:
    """Parse a ``zcash:`` URI.

    Args:
        uri: The URI text.
        context: The network whose address rules apply.
        validating: Additional address check; defaults to
            :func:`~zip321.model.address.charset_validator`.

    Returns:
        A :class:`LegacyResult` for ``zcash:<address>``, otherwise a
        :class:`RequestResult`.

    Raises:
        ZIP321Error: The first violation found; no partial result is returned.
    """
    if validating is None:
        validating = charset_validator
    scanned = tokenize(uri)
    leading = _leading_parameter(scanned.leading_address, context, validating)
    if scanned.query_tokens is None:
        if leading is None:
            raise InvalidURI()
        assert isinstance(leading.param, AddressParam)
        logger.debug("Parsed legacy address URI on %s", context.value)
        return LegacyResult(address=leading.param.address)

    parameters = parse_parameters(scanned.query_tokens, leading, context, validating)
    request = PaymentRequest(payments=tuple(map_to_payments(parameters)))
    logger.debug("Parsed payment request with %d payment(s) on %s", len(request.payments), context.value)
    return RequestResult(request=request)


def leading_address(
    uri: str,
    context: ParserContext,
    validating: AddressValidator | None = None,
) -> IndexedParameter | None:
    """Validate the address between ``zcash:`` and ``?``, if there is one.

    Returns:
        The address as the unindexed ``address`` parameter, or ``None`` if
        the URI has no leading address.

    Raises:
        ParseError: If the URI does not start with ``zcash:``.
        InvalidAddress: If the leading address is invalid.
        SproutRecipientsNotAllowed: If the leading address is a Sprout address.
    """
    if not uri.startswith(SCHEME):
        raise ParseError(f"URI must start with {SCHEME!r}", 0)
    address, _, _ = uri[len(SCHEME) :].partition("?")
    return _leading_parameter(address or None, context, validating)


def parse_parameters(
    tokens: Sequence[QueryToken],
    leading: IndexedParameter | None,
    context: ParserContext,
    validating: AddressValidator | None = None,
) -> list[IndexedParameter]:
    """Interpret query tokens, preceded by the leading address if present.

    Raises:
        ZIP321Error: The first parameter that fails to interpret.
    """
    parameters = [] if leading is None else [leading]
    for token in tokens:
        index = token.index or 0
        param = param_from(token.name, token.value, index, context, validating)
        parameters.append(IndexedParameter(index, param))
    return parameters


def map_to_payments(parameters: Sequence[IndexedParameter]) -> list[Payment]:
    """Group parameters by payment index and build one payment per group.

    Groups are emitted in ascending index order, the unindexed payment first.

    Raises:
        RecipientMissing: If there are no parameters or a group has no address.
        DuplicateParameter: If a group contains the same parameter twice.
        TransparentMemoNotAllowed: If a memo is sent to a transparent address.
    """
    if not parameters:
        raise RecipientMissing(None)

    groups: dict[int, list[Param]] = {}
    for parameter in parameters:
        group = groups.setdefault(parameter.index, [])
        if any(existing.name == parameter.param.name for existing in group):
            raise DuplicateParameter(parameter.param.name, index_or_none(parameter.index))
        group.append(parameter.param)

    return [_payment(index, groups[index]) for index in sorted(groups)]


# ################
# Implementation
# ################


def _leading_parameter(
    address: str | None,
    context: ParserContext,
    validating: AddressValidator | None,
) -> IndexedParameter | None:
    if address is None:
        return None
    return IndexedParameter(0, param_from("address", address, 0, context, validating))


def _payment(index: int, params: list[Param]) -> Payment:
    """Build the payment of a single group whose parameters are unique."""
    address = next((p.address for p in params if isinstance(p, AddressParam)), None)
    if address is None:
        raise RecipientMissing(index_or_none(index))

    fields: dict[str, object] = {"recipient_address": address}
    other_params = []
    for param in params:
        if isinstance(param, AmountParam):
            fields["amount"] = param.amount
        elif isinstance(param, MemoParam):
            if not address.can_receive_memos:
                raise TransparentMemoNotAllowed(index_or_none(index))
            fields["memo"] = param.memo
        elif isinstance(param, LabelParam):
            fields["label"] = param.label
        elif isinstance(param, MessageParam):
            fields["message"] = param.message
        elif isinstance(param, OtherParamValue):
            other_params.append(param.param)
    if other_params:
        fields["other_params"] = tuple(other_params)
    return Payment(**fields)
