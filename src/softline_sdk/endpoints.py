"""Gateway endpoint table."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Endpoint:
    """A gateway endpoint: path template, HTTP method and auth requirement."""

    path: str
    method: str
    auth_required: bool = True

    def format_path(self, **params: Any) -> str:
        """Fill the path template, e.g. ``{order_id}``."""
        return self.path.format(**params)


LOGIN = Endpoint("/v1/login_check", "POST", auth_required=False)
CREATE_PAYMENT = Endpoint("/v1/payment", "POST")
CHARGE_RECURRING = Endpoint("/v1/payment/recurring", "POST")
# No leading slash: the deployed gateway is addressed as <base>v1/order/<id>
ORDER_STATUS = Endpoint("v1/order/{order_id}", "GET")
REFUND = Endpoint("/v1/order/{order_id}/refund", "POST")

