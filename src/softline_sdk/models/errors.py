"""Error models for Softline SDK."""
from __future__ import annotations

from typing import Any, Optional

DISPATCH_ERROR_PREFIX = "softline! send_request"


class SoftlineError(Exception):
    """Base exception for Softline SDK."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or "SOFTLINE_ERROR"
        self.details = details or {}

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
            }
        }


class EncodingError(SoftlineError):
    """Request payload could not be serialized to JSON."""

    def __init__(self, message: str):
        super().__init__(f"can't encode request: {message}", code="ENCODING_ERROR")


class DispatchError(SoftlineError):
    """Error raised while sending a request to the gateway.

    ``status_code`` is the HTTP status of the response, or ``None`` when no
    response was received. ``body`` is the raw response body, if any.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        status_code: Optional[int] = None,
        body: bytes = b"",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.status_code = status_code
        self.body = body

    def __str__(self) -> str:
        return f"{DISPATCH_ERROR_PREFIX}: {super().__str__()}"

    @property
    def text(self) -> str:
        """Response body decoded as text."""
        return self.body.decode("utf-8", errors="replace")


class TransportError(DispatchError):
    """URL, connection, DNS, timeout or protocol failure."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message, code="TRANSPORT_ERROR", details={"url": url})
        self.url = url


class GatewayServerError(DispatchError):
    """The gateway answered with a generic server error (HTTP 500)."""

    def __init__(self, status_code: int, body: bytes):
        super().__init__(
            "error: " + body.decode("utf-8", errors="replace"),
            code="GATEWAY_SERVER_ERROR",
            status_code=status_code,
            body=body,
        )


class DecodeError(DispatchError):
    """Response body is not valid JSON for the expected shape."""

    def __init__(self, status_code: int, body: bytes, reason: str):
        text = body.decode("utf-8", errors="replace")
        super().__init__(
            f"can't decode response: '{text}'. Err: {reason}",
            code="DECODE_ERROR",
            status_code=status_code,
            body=body,
        )
