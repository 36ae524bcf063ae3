"""
Chainable request description bound to a single service base URL.

The builder only records method, path, headers, query parameters and body.
Nothing goes over the wire until the caller awaits it (or calls ``execute``),
at which point the request is handed to httpx.
"""

import logging
from collections.abc import Generator, Mapping
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class RequestBuilderError(RuntimeError):
    """Raised when a request description is incomplete."""


class RequestBuilder:
    """Mutable request description; every chaining call returns ``self``."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url
        self._timeout = timeout
        self._transport = transport
        self._method: str | None = None
        self._path = ""
        self._headers = httpx.Headers()
        self._params: dict[str, Any] = {}
        self._body: Any = None

    def __repr__(self) -> str:
        return f"<RequestBuilder {self._method or '?'} {self.url}>"

    @property
    def base_url(self) -> str:
        """Service base URL, fixed at construction."""
        return self._base_url

    @property
    def method(self) -> str | None:
        """HTTP method, or ``None`` until a verb is chosen."""
        return self._method

    @property
    def path(self) -> str:
        """Path relative to the base URL."""
        return self._path

    @property
    def url(self) -> str:
        """Base URL joined with the path."""
        if not self._path:
            return self._base_url
        return f"{self._base_url.rstrip('/')}/{self._path.lstrip('/')}"

    @property
    def headers(self) -> httpx.Headers:
        """Case-insensitive headers set so far."""
        return self._headers

    @property
    def params(self) -> dict[str, Any]:
        """Query parameters merged so far."""
        return self._params

    @property
    def body(self) -> Any:
        """Request body, or ``None`` when nothing was sent."""
        return self._body

    def _target(self, method: str, path: str) -> "RequestBuilder":
        """Record method and path."""
        self._method = method
        self._path = path
        return self

    def get(self, path: str) -> "RequestBuilder":
        """Target ``path`` with GET."""
        return self._target("GET", path)

    def post(self, path: str) -> "RequestBuilder":
        """Target ``path`` with POST."""
        return self._target("POST", path)

    def put(self, path: str) -> "RequestBuilder":
        """Target ``path`` with PUT."""
        return self._target("PUT", path)

    def patch(self, path: str) -> "RequestBuilder":
        """Target ``path`` with PATCH."""
        return self._target("PATCH", path)

    def delete(self, path: str) -> "RequestBuilder":
        """Target ``path`` with DELETE."""
        return self._target("DELETE", path)

    def set(self, name: str, value: str) -> "RequestBuilder":
        """Set a single header, replacing any earlier value under the same name."""
        self._headers[name] = value
        return self

    def query(self, params: Mapping[str, Any]) -> "RequestBuilder":
        """Merge query parameters; serialisation of values is left to httpx."""
        self._params.update(params)
        return self

    def send(self, body: Any) -> "RequestBuilder":
        """
        Attach a request body.

        Mappings and lists are encoded as JSON, ``str`` and ``bytes`` are sent as
        raw content. Sending a mapping on top of a mapping body merges the two.
        """
        if isinstance(body, Mapping):
            merged = dict(self._body) if isinstance(self._body, Mapping) else {}
            merged.update(body)
            self._body = merged
        else:
            self._body = body
        return self

    def _request_kwargs(self) -> dict[str, Any]:
        """Translate the description into httpx request arguments."""
        if self._method is None:
            raise RequestBuilderError(
                f"No HTTP method chosen for request to {self._base_url}; "
                "call get/post/put/patch/delete first."
            )

        kwargs: dict[str, Any] = {
            "headers": self._headers,
            "params": self._params or None,
        }
        if isinstance(self._body, (str, bytes)):
            kwargs["content"] = self._body
        elif self._body is not None:
            kwargs["json"] = self._body
        return kwargs

    def build(self) -> httpx.Request:
        """Freeze the current description into an ``httpx.Request``."""
        kwargs = self._request_kwargs()
        return httpx.Request(self._method, self.url, **kwargs)

    async def execute(self, client: httpx.AsyncClient | None = None) -> httpx.Response:
        """Send the request, through ``client`` when given, else a short-lived one."""
        if client is not None:
            return await self._send(client)
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as owned:
            return await self._send(owned)

    async def _send(self, client: httpx.AsyncClient) -> httpx.Response:
        """Build the request on ``client`` so its defaults apply, then send it."""
        kwargs = self._request_kwargs()
        request = client.build_request(self._method, self.url, **kwargs)
        logger.debug(
            "Executing request",
            extra={"method": request.method, "url": str(request.url)},
        )
        return await client.send(request)

    def __await__(self) -> Generator[Any, None, httpx.Response]:
        return self.execute().__await__()
