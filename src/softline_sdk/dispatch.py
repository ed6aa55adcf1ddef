"""
Request dispatch for the Softline gateway.

Every gateway operation goes through :func:`send_request`, which resolves the
URL against the configured base URI, sends JSON with the gateway headers,
classifies failures and decodes the body into a pydantic model.

Errors:
    TransportError: the request could not be sent or no response arrived
    GatewayServerError: HTTP 500, body returned verbatim, nothing decoded
    DecodeError: any other status whose body does not fit the response model
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Generic, Mapping, Optional, Type, TypeVar
from urllib.parse import parse_qs, quote, urlencode, urlsplit, urlunsplit

import httpx
from pydantic import BaseModel, ValidationError

from .config import GatewayConfig
from .models.errors import DecodeError, GatewayServerError, TransportError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

AUTH_HEADER = "AuthorizationJWT"
DEFAULT_HEADERS = {
    "Content-Type": "application/json; charset=utf-8",
    "Accept": "application/json",
}

# Characters kept as-is when appending a path to the base URI
_PATH_SAFE = "/$&+,:;=@"


@dataclass
class GatewayRequest:
    """A single call to the gateway."""

    path: str
    method: str
    body: Optional[bytes] = None
    query_params: Optional[Mapping[str, str]] = None
    auth_required: bool = False
    token: str = ""


@dataclass(frozen=True)
class GatewayResponse(Generic[T]):
    """Outcome of a successful call.

    Attributes:
        status_code: HTTP status of the response
        date: Value of the ``date`` response header, if present
        raw: Raw response body
        data: Body decoded into the response model
    """

    status_code: int
    date: Optional[str]
    raw: bytes
    data: T


def resolve_url(
    base_uri: str,
    path: str,
    query_params: Optional[Mapping[str, str]] = None,
) -> str:
    """Build the final URL for a request.

    ``path`` is appended to the path of ``base_uri`` as-is, so slashes must
    already match the base. Query parameters are merged into the base query;
    a parameter replaces every existing value with the same key.
    """
    try:
        parts = urlsplit(base_uri)
    except ValueError as exc:
        raise TransportError(f"can't parse URI from config: {exc}", url=base_uri) from exc

    full_path = parts.path + quote(path, safe=_PATH_SAFE)

    query = parse_qs(parts.query, keep_blank_values=True)
    for key, value in (query_params or {}).items():
        query[key] = [value]
    encoded_query = urlencode(sorted(query.items()), doseq=True)

    return urlunsplit((parts.scheme, parts.netloc, full_path, encoded_query, parts.fragment))


def build_headers(request: GatewayRequest) -> dict[str, str]:
    """Headers sent with every gateway request."""
    headers = dict(DEFAULT_HEADERS)
    if request.auth_required:
        headers[AUTH_HEADER] = f"Bearer {request.token}"
    return headers


def _http_client(config: GatewayConfig) -> httpx.Client:
    return httpx.Client(
        timeout=httpx.Timeout(config.request_timeout),
        limits=httpx.Limits(keepalive_expiry=config.idle_conn_timeout),
    )


def send_request(
    config: GatewayConfig,
    request: GatewayRequest,
    response_model: Type[T],
) -> GatewayResponse[T]:
    """
    Send a request to the gateway and decode the response.

    Args:
        config: Gateway configuration
        request: Path, method, body and auth for this call
        response_model: Model the response body is decoded into

    Returns:
        GatewayResponse with status code, date header, raw body and decoded data

    Raises:
        TransportError: If the URL is invalid or the request fails in transit
        GatewayServerError: If the gateway answers with HTTP 500
        DecodeError: If the body can't be decoded into ``response_model``
    """
    url = resolve_url(config.uri, request.path, request.query_params)
    logger.debug(f"{request.method} url: {url}")

    try:
        with _http_client(config) as client:
            response = client.request(
                request.method,
                url,
                content=request.body,
                headers=build_headers(request),
            )
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise TransportError(f"can't do request! Err: {exc}", url=url) from exc

    status_code = response.status_code
    raw = response.content
    logger.debug(f"{request.method} {url} -> {status_code}")

    if status_code == httpx.codes.INTERNAL_SERVER_ERROR:
        raise GatewayServerError(status_code, raw)

    date = response.headers.get("date")

    try:
        if raw.strip() == b"null":
            # JSON null leaves the result zero-valued
            data = response_model.model_validate({})
        else:
            data = response_model.model_validate_json(raw)
    except ValidationError as exc:
        raise DecodeError(status_code, raw, str(exc)) from exc

    return GatewayResponse(status_code=status_code, date=date, raw=raw, data=data)
