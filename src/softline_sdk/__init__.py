"""
Softline Python SDK

Client for the Softline payment gateway and helpers for verifying
payment-status callback signatures.
"""

from .client import SoftlineClient
from .config import GatewayConfig, load_config
from .dispatch import GatewayRequest, GatewayResponse, send_request
from .endpoints import Endpoint
from .models.auth import AuthRequest, AuthResult
from .models.errors import (
    DecodeError,
    DispatchError,
    EncodingError,
    GatewayServerError,
    SoftlineError,
    TransportError,
)
from .models.payment import (
    PaymentRequest,
    PaymentResult,
    RecurringPaymentRequest,
    RefundRequest,
)
from .signing import SignatureFields, generate_signature, verify_signature

__version__ = "0.1.0"

__all__ = [
    # Client
    "SoftlineClient",
    "GatewayConfig",
    "load_config",
    # Dispatch
    "GatewayRequest",
    "GatewayResponse",
    "send_request",
    "Endpoint",
    # Errors
    "SoftlineError",
    "EncodingError",
    "DispatchError",
    "TransportError",
    "GatewayServerError",
    "DecodeError",
    # Models
    "AuthRequest",
    "AuthResult",
    "PaymentRequest",
    "RecurringPaymentRequest",
    "PaymentResult",
    "RefundRequest",
    # Signatures
    "SignatureFields",
    "generate_signature",
    "verify_signature",
]
