"""One-call builders for the common HTTP methods."""

from typing import Any

from apitest.decorators import with_auth
from apitest.factory import create_request
from apitest.request import RequestBuilder
from apitest.services import ServiceName
from apitest.settings import Settings


def _authorize(req: RequestBuilder, token: str | None) -> RequestBuilder:
    """Attach a bearer token only when one was supplied."""
    return with_auth(req, token) if token else req


def build_get_request(
    path: str,
    token: str | None = None,
    service_name: ServiceName | str | None = None,
    *,
    settings: Settings | None = None,
) -> RequestBuilder:
    """GET ``path`` on the service, authorized when ``token`` is given."""
    req = create_request(service_name, settings=settings).get(path)
    return _authorize(req, token)


def build_post_request(
    path: str,
    body: Any,
    token: str | None = None,
    service_name: ServiceName | str | None = None,
    *,
    settings: Settings | None = None,
) -> RequestBuilder:
    """POST ``body`` to ``path``, authorized when ``token`` is given."""
    req = create_request(service_name, settings=settings).post(path).send(body)
    return _authorize(req, token)


def build_put_request(
    path: str,
    body: Any,
    token: str | None = None,
    service_name: ServiceName | str | None = None,
    *,
    settings: Settings | None = None,
) -> RequestBuilder:
    """PUT ``body`` to ``path``, authorized when ``token`` is given."""
    req = create_request(service_name, settings=settings).put(path).send(body)
    return _authorize(req, token)


def build_patch_request(
    path: str,
    body: Any,
    token: str | None = None,
    service_name: ServiceName | str | None = None,
    *,
    settings: Settings | None = None,
) -> RequestBuilder:
    """PATCH ``path`` with ``body``, authorized when ``token`` is given."""
    req = create_request(service_name, settings=settings).patch(path).send(body)
    return _authorize(req, token)


def build_delete_request(
    path: str,
    token: str | None = None,
    service_name: ServiceName | str | None = None,
    *,
    settings: Settings | None = None,
) -> RequestBuilder:
    """DELETE ``path`` on the service, authorized when ``token`` is given."""
    req = create_request(service_name, settings=settings).delete(path)
    return _authorize(req, token)
