"""Softline SDK Models."""
from .base import SoftlineModel
from .auth import AuthRequest, AuthResult
from .payment import PaymentRequest, PaymentResult, RecurringPaymentRequest, RefundRequest
from .errors import (
    DecodeError,
    DispatchError,
    EncodingError,
    GatewayServerError,
    SoftlineError,
    TransportError,
)

__all__ = [
    "SoftlineModel",
    "AuthRequest",
    "AuthResult",
    "PaymentRequest",
    "PaymentResult",
    "RecurringPaymentRequest",
    "RefundRequest",
    "SoftlineError",
    "EncodingError",
    "DispatchError",
    "TransportError",
    "GatewayServerError",
    "DecodeError",
]
