"""
Softline Python SDK

Client for the Softline payment gateway.

Example usage:
    ```python
    from softline_sdk import GatewayConfig, SoftlineClient

    client = SoftlineClient(GatewayConfig(
        uri="https://pay.softline.example",
        login="merchant",
        password="secret",
    ))

    auth = client.authenticate()

    # Create a payment
    response = client.create_payment(
        {"order_id": "order_1", "amount": "10.00", "currency": "RUB"},
        token=auth.token,
    )
    print(response.data.payment_url)

    # Check order status
    status = client.get_order_status("order_1", token=auth.token)
    ```
"""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from .config import GatewayConfig, load_config
from .dispatch import GatewayRequest, GatewayResponse, send_request
from .endpoints import CHARGE_RECURRING, CREATE_PAYMENT, LOGIN, ORDER_STATUS, REFUND, Endpoint
from .models.auth import AuthRequest, AuthResult
from .models.errors import DispatchError, EncodingError
from .models.payment import PaymentRequest, PaymentResult, RecurringPaymentRequest, RefundRequest
from .signing import SignatureFields, generate_signature, verify_signature

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)
M = TypeVar("M", bound=BaseModel)


def _coerce(model: Type[M], data: Union[M, Mapping[str, Any]]) -> M:
    if isinstance(data, model):
        return data
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise EncodingError(str(exc)) from exc


def _encode(payload: BaseModel) -> bytes:
    try:
        return payload.model_dump_json(exclude_none=True).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise EncodingError(str(exc)) from exc


class SoftlineClient:
    """
    Softline gateway client.

    Every operation is one blocking HTTP round trip. Operations other than
    :meth:`authenticate` need the bearer token it returns.

    Args:
        config: Gateway configuration
    """

    def __init__(self, config: GatewayConfig):
        if not config.uri:
            raise ValueError("Gateway URI is required")
        self._config = config

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "SoftlineClient":
        """Create a client from ``SOFTLINE_*`` environment variables."""
        return cls(load_config(env_file))

    @property
    def config(self) -> GatewayConfig:
        return self._config

    def _call(
        self,
        endpoint: Endpoint,
        response_model: Type[T],
        token: str = "",
        payload: Optional[BaseModel] = None,
        **path_params: Any,
    ) -> GatewayResponse[T]:
        body = _encode(payload) if payload is not None else None
        request = GatewayRequest(
            path=endpoint.format_path(**path_params),
            method=endpoint.method,
            body=body,
            auth_required=endpoint.auth_required,
            token=token,
        )
        return send_request(self._config, request, response_model)

    def authenticate(self) -> AuthResult:
        """
        Log in with the configured credentials.

        Returns:
            AuthResult with the bearer token and the server ``date`` header
        """
        credentials = AuthRequest(
            username=self._config.login,
            password=self._config.password.get_secret_value(),
        )
        response = self._call(LOGIN, AuthResult, payload=credentials)
        result = response.data
        result.date = response.date
        return result

    def create_payment(
        self,
        data: Union[PaymentRequest, Mapping[str, Any]],
        token: str,
    ) -> GatewayResponse[PaymentResult]:
        """
        Create a payment.

        Args:
            data: Payment payload, forwarded as-is
            token: Bearer token from :meth:`authenticate`

        Returns:
            GatewayResponse with the raw body and the decoded PaymentResult
        """
        request = _coerce(PaymentRequest, data)
        return self._call(CREATE_PAYMENT, PaymentResult, token=token, payload=request)

    def charge_recurring(
        self,
        data: Union[RecurringPaymentRequest, Mapping[str, Any]],
        token: str,
    ) -> GatewayResponse[PaymentResult]:
        """
        Charge a saved payment method.

        Args:
            data: Recurring payment payload, forwarded as-is
            token: Bearer token from :meth:`authenticate`

        Returns:
            GatewayResponse with the raw body and the decoded PaymentResult
        """
        request = _coerce(RecurringPaymentRequest, data)
        return self._call(CHARGE_RECURRING, PaymentResult, token=token, payload=request)

    def get_order_status(self, order_id: Union[str, int], token: str) -> GatewayResponse[PaymentResult]:
        """
        Get the status of an order.

        Args:
            order_id: The order ID
            token: Bearer token from :meth:`authenticate`

        Returns:
            GatewayResponse with the raw body and the decoded PaymentResult
        """
        return self._call(ORDER_STATUS, PaymentResult, token=token, order_id=order_id)

    def refund(
        self,
        data: Union[RefundRequest, Mapping[str, Any]],
        token: str,
    ) -> PaymentResult:
        """
        Refund an order.

        A dispatch error is raised only when the gateway did not answer with
        HTTP 200. If it did answer 200 but the body could not be decoded, the
        error is logged and an empty PaymentResult is returned.

        Args:
            data: Refund payload; ``order_id`` selects the order
            token: Bearer token from :meth:`authenticate`

        Returns:
            PaymentResult for the refund
        """
        request = _coerce(RefundRequest, data)
        try:
            response = self._call(
                REFUND, PaymentResult, token=token, payload=request, order_id=request.order_id
            )
        except DispatchError as exc:
            if exc.status_code != 200:
                raise
            logger.warning(f"Refund for order {request.order_id} answered 200 with an error: {exc}")
            return PaymentResult()
        return response.data

    # ========== Callback Signatures ==========

    def generate_signature(self, fields: SignatureFields) -> str:
        """Compute the signature of a payment-status callback."""
        return generate_signature(fields)

    def verify_signature(self, signature: str, fields: SignatureFields) -> bool:
        """Check the signature of a payment-status callback."""
        return verify_signature(signature, fields)
