"""Payment models for Softline SDK.

Business fields are forwarded as the gateway sends them: amounts and ids may
be strings or numbers, so they are not coerced.
"""
from __future__ import annotations

from typing import Any, Optional, Union

from .base import SoftlineModel


class PaymentRequest(SoftlineModel):
    """Request to create a payment."""

    order_id: Optional[Any] = None
    amount: Optional[Any] = None
    currency: Optional[Any] = None
    payment_method: Optional[Any] = None
    customer_email: Optional[Any] = None
    description: Optional[Any] = None


class RecurringPaymentRequest(SoftlineModel):
    """Request to charge a previously saved payment method."""

    order_id: Optional[Any] = None
    amount: Optional[Any] = None
    currency: Optional[Any] = None
    recurring_token: Optional[Any] = None
    description: Optional[Any] = None


class PaymentResult(SoftlineModel):
    """Payment, order status or refund result returned by the gateway."""

    order_id: Optional[Any] = None
    status: Optional[Any] = None
    payment_url: Optional[Any] = None
    amount: Optional[Any] = None
    currency: Optional[Any] = None
    message: Optional[Any] = None


class RefundRequest(SoftlineModel):
    """Request to refund an order.

    ``order_id`` is also used to build the refund path.
    """

    order_id: Union[str, int]
    amount: Optional[Any] = None
    reason: Optional[Any] = None
