# Copyright 2026 zip321 Contributors
# SPDX-License-Identifier: Apache-2.0

"""Rendering of payment requests as ``zcash:`` URIs."""

from zip321.render.renderer import (
    EnumerateAllPayments,
    FormattingOptions,
    UseEmptyParamIndex,
    render_address,
    render_payment,
    render_payment_params,
    render_request,
)

__all__ = [
    "FormattingOptions",
    "EnumerateAllPayments",
    "UseEmptyParamIndex",
    "render_request",
    "render_payment",
    "render_address",
    "render_payment_params",
]
