"""Helpers that decorate an existing request builder in place."""

from collections.abc import Mapping
from typing import Any

from apitest.request import RequestBuilder


def with_auth(req: RequestBuilder, token: str) -> RequestBuilder:
    """Attach a bearer-token ``Authorization`` header."""
    return req.set("Authorization", f"Bearer {token}")


def with_api_key(req: RequestBuilder, api_key: str, header_name: str = "x-api-key") -> RequestBuilder:
    """Attach an API key under ``header_name``."""
    return req.set(header_name, api_key)


def with_headers(req: RequestBuilder, headers: Mapping[str, str]) -> RequestBuilder:
    """Set every header in ``headers``."""
    for name, value in headers.items():
        req.set(name, value)
    return req


def with_query_params(req: RequestBuilder, params: Mapping[str, Any]) -> RequestBuilder:
    """Merge ``params`` into the query string."""
    return req.query(params)
