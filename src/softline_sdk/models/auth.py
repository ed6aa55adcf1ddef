"""Authentication models for Softline SDK."""
from __future__ import annotations

from typing import Optional

from .base import SoftlineModel


class AuthRequest(SoftlineModel):
    """Credentials sent to the login endpoint."""

    username: str
    password: str


class AuthResult(SoftlineModel):
    """Bearer token issued by the gateway.

    ``date`` is the value of the ``date`` header of the login response,
    copied verbatim. It is not read from the response body.
    """

    token: Optional[str] = None
    date: Optional[str] = None
