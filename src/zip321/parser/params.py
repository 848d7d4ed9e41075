# Copyright 2026 zip321 Contributors
# SPDX-License-Identifier: Apache-2.0

"""Typed query parameters and their interpretation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

from zip321.errors import (
    AmountExceededSupply,
    AmountTooSmall,
    InvalidAddress,
    InvalidBase64,
    InvalidParamValue,
    MemoBytesError,
    OtherParamEncodingError,
    SproutRecipientsNotAllowed,
    UnknownRequiredParameter,
    index_or_none,
)
from zip321.model.address import AddressValidator, ParserContext, RecipientAddress
from zip321.model.amount import Amount, AmountError, GreaterThanSupply, InvalidTextInput
from zip321.model.entities import REQUIRED_PARAM_PREFIX, OtherParam
from zip321.model.memo import InvalidBase64URL, MemoBytes, MemoError
from zip321.model.strings import InvalidParamName, ParamNameString, QcharString

# ###############
# Public Interface
# ###############


class AddressParam(BaseModel):
    """An ``address`` parameter."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["address"] = "address"
    address: RecipientAddress

    @property
    def name(self) -> str:
        return "address"


class AmountParam(BaseModel):
    """An ``amount`` parameter."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: Literal["amount"] = "amount"
    amount: Amount

    @property
    def name(self) -> str:
        return "amount"


class MemoParam(BaseModel):
    """A ``memo`` parameter."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: Literal["memo"] = "memo"
    memo: MemoBytes

    @property
    def name(self) -> str:
        return "memo"


class LabelParam(BaseModel):
    """A ``label`` parameter."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: Literal["label"] = "label"
    label: QcharString

    @property
    def name(self) -> str:
        return "label"


class MessageParam(BaseModel):
    """A ``message`` parameter."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: Literal["message"] = "message"
    message: QcharString

    @property
    def name(self) -> str:
        return "message"


class OtherParamValue(BaseModel):
    """An extension parameter; its name is the extension key."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["other"] = "other"
    param: OtherParam

    @property
    def name(self) -> str:
        return self.param.key.value


# A single interpreted query parameter, discriminated by `kind`.
Param = Annotated[
    AddressParam | AmountParam | MemoParam | LabelParam | MessageParam | OtherParamValue,
    _Field(discriminator="kind"),
]


@dataclass(frozen=True)
class IndexedParameter:
    """A parameter together with the payment it belongs to.

    Attributes:
        index: The payment index; ``0`` stands for the unindexed payment.
        param: The interpreted parameter.
    """

    index: int
    param: Param


def param_from(
    key: str,
    value: str | None,
    index: int,
    context: ParserContext,
    validating: AddressValidator | None = None,
) -> Param:
    """Interpret one query parameter.

    Reserved keys written without ``=`` are interpreted as if their value
    were empty. Extension parameters with an empty value are key-only.

    Args:
        key: The parameter name.
        value: The raw, still percent-encoded value, or ``None``.
        index: The payment index, ``0`` for the unindexed payment.
        context: The network used to validate addresses.
        validating: Optional additional address check.

    Returns:
        The interpreted parameter.

    Raises:
        ZIP321Error: The error describing why the parameter is invalid; errors
            tied to a payment carry its index.
    """
    text = value or ""
    if key == "address":
        return AddressParam(address=_address(text, index, context, validating))
    if key == "amount":
        return AmountParam(amount=_amount(text, index))
    if key == "memo":
        return MemoParam(memo=_memo(text, index))
    if key == "label":
        return LabelParam(label=QcharString.from_encoded(text))
    if key == "message":
        return MessageParam(message=QcharString.from_encoded(text))
    if key.startswith(REQUIRED_PARAM_PREFIX):
        raise UnknownRequiredParameter(key)
    return OtherParamValue(param=_other(key, text))


# ################
# Implementation
# ################


def _address(
    text: str,
    index: int,
    context: ParserContext,
    validating: AddressValidator | None,
) -> RecipientAddress:
    try:
        return RecipientAddress.create(text, context, validating)
    except SproutRecipientsNotAllowed as exc:
        raise SproutRecipientsNotAllowed(index_or_none(index)) from exc
    except InvalidAddress as exc:
        raise InvalidAddress(index_or_none(index)) from exc


def _amount(text: str, index: int) -> Amount:
    try:
        return Amount.from_string(text)
    except GreaterThanSupply as exc:
        raise AmountExceededSupply(index) from exc
    except InvalidTextInput as exc:
        raise InvalidParamValue("amount", index_or_none(index)) from exc
    except AmountError as exc:
        raise AmountTooSmall(index) from exc


def _memo(text: str, index: int) -> MemoBytes:
    try:
        return MemoBytes.from_base64url(text)
    except InvalidBase64URL as exc:
        raise InvalidBase64() from exc
    except MemoError as exc:
        raise MemoBytesError(exc, index_or_none(index)) from exc


def _other(key: str, text: str) -> OtherParam:
    try:
        name = ParamNameString(key)
    except InvalidParamName as exc:
        raise OtherParamEncodingError(key) from exc
    if not text:
        return OtherParam(key=name)
    return OtherParam(key=name, value=QcharString.from_encoded(text))
