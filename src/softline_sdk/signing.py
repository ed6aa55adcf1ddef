"""
Callback signature scheme.

The gateway signs payment-status callbacks with a SHA-512 digest over seven
fields joined by ``;`` in a fixed order, the shared secret first::

    secret_key;event;order_id;create_date;payment_method;currency;customer_email

Use these helpers in the webhook receiver to check that a callback really
came from the gateway.
"""
from __future__ import annotations

import hashlib
import hmac
from dataclasses import astuple, dataclass

SIGNATURE_SEPARATOR = ";"


@dataclass(frozen=True)
class SignatureFields:
    """Fields covered by a callback signature. Field order is significant."""

    secret_key: str
    event: str
    order_id: str
    create_date: str
    payment_method: str
    currency: str
    customer_email: str

    def as_message(self) -> str:
        """Return the exact message that gets hashed."""
        return SIGNATURE_SEPARATOR.join(astuple(self))


def generate_signature(fields: SignatureFields) -> str:
    """
    Compute the signature for a set of callback fields.

    Args:
        fields: Callback fields plus the shared secret

    Returns:
        Lowercase hex SHA-512 digest (128 characters)
    """
    return hashlib.sha512(fields.as_message().encode("utf-8")).hexdigest()


def verify_signature(signature: str, fields: SignatureFields) -> bool:
    """
    Verify a callback signature.

    Args:
        signature: Signature received with the callback
        fields: Callback fields plus the shared secret

    Returns:
        True if signature is valid
    """
    expected = generate_signature(fields)
    # Compare (timing-safe)
    return hmac.compare_digest(expected.encode("utf-8"), signature.encode("utf-8"))
