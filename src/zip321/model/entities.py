# Copyright 2026 zip321 Contributors
# SPDX-License-Identifier: Apache-2.0

"""Payments and payment requests, the entities a ZIP-321 URI describes."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from zip321.errors import (
    InvalidParamValue,
    NetworkMismatchFound,
    OtherParamEncodingError,
    OtherParamUsesReservedKey,
    RecipientMissing,
    TransparentMemoNotAllowed,
)
from zip321.model.address import RecipientAddress
from zip321.model.amount import Amount
from zip321.model.memo import MemoBytes
from zip321.model.strings import InvalidParamName, InvalidQcharString, ParamNameString, QcharString

# ###############
# Public Interface
# ###############

RESERVED_PARAM_NAMES = frozenset({"address", "amount", "label", "memo", "message"})

REQUIRED_PARAM_PREFIX = "req-"


class OtherParam(BaseModel):
    """An extension parameter that is not interpreted by this library.

    A ``value`` of ``None`` denotes a key-only parameter (``key`` without ``=``).

    Raises:
        OtherParamUsesReservedKey: If ``key`` is a reserved name or starts
            with ``req-``.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    key: ParamNameString
    value: QcharString | None = None

    @model_validator(mode="after")
    def check_key(self) -> OtherParam:
        name = self.key.value
        if name in RESERVED_PARAM_NAMES or name.startswith(REQUIRED_PARAM_PREFIX):
            raise OtherParamUsesReservedKey(name)
        return self

    @classmethod
    def from_strings(cls, key: str, value: str | None = None) -> OtherParam:
        """Create an extension parameter from plain (decoded) text.

        An empty ``value`` is treated like ``None``.

        Raises:
            OtherParamEncodingError: If ``key`` is not a valid parameter name
                or ``value`` cannot be qchar-encoded.
            OtherParamUsesReservedKey: If ``key`` is reserved.
        """
        try:
            param_key = ParamNameString(key)
        except InvalidParamName as exc:
            raise OtherParamEncodingError(key) from exc
        param_value = None
        if value:
            try:
                param_value = QcharString(value)
            except InvalidQcharString as exc:
                raise OtherParamEncodingError(value) from exc
        return cls(key=param_key, value=param_value)


class Payment(BaseModel):
    """A single payment to one recipient.

    ``label`` and ``message`` accept plain strings, which are wrapped in
    :class:`QcharString`. An ``amount`` of ``None`` means the amount is left
    to the payer; it is different from a zero amount.

    Raises:
        TransparentMemoNotAllowed: If a memo is attached to a recipient that
            cannot receive memos.
        InvalidParamValue: If ``label`` or ``message`` is an empty string.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    recipient_address: RecipientAddress
    amount: Amount | None = None
    memo: MemoBytes | None = None
    label: QcharString | None = None
    message: QcharString | None = None
    other_params: tuple[OtherParam, ...] | None = None

    @model_validator(mode="before")
    @classmethod
    def wrap_plain_values(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        for name in ("label", "message"):
            text = data.get(name)
            if isinstance(text, str):
                try:
                    data[name] = QcharString(text)
                except InvalidQcharString as exc:
                    raise InvalidParamValue(name) from exc
        other_params = data.get("other_params")
        if other_params is not None and len(other_params) == 0:
            data["other_params"] = None
        return data

    @model_validator(mode="after")
    def check_memo_recipient(self) -> Payment:
        if self.memo is not None and not self.recipient_address.can_receive_memos:
            raise TransparentMemoNotAllowed(None)
        return self


class PaymentRequest(BaseModel):
    """An ordered, non-empty list of payments on a single network.

    Raises:
        RecipientMissing: If ``payments`` is empty.
        NetworkMismatchFound: If the recipients belong to different networks.
    """

    model_config = ConfigDict(frozen=True)

    payments: tuple[Payment, ...]

    @model_validator(mode="after")
    def check_payments(self) -> PaymentRequest:
        if not self.payments:
            raise RecipientMissing(None)
        networks = {payment.recipient_address.network for payment in self.payments}
        if len(networks) > 1:
            raise NetworkMismatchFound()
        return self
