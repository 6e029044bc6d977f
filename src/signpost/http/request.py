"""The request object handed to handlers and middleware.

Metadata is frozen; the body is read lazily. Every request carries the
app's ``RouteTable`` so handlers can resolve route names without
reaching for globals.
"""

from __future__ import annotations

import json
from collections.abc import AsyncGenerator
from dataclasses import dataclass, field
from typing import Any

from signpost._internal.asgi import Receive, Scope
from signpost.http.headers import Headers
from signpost.http.query import QueryParams
from signpost.routing.table import RouteTable


@dataclass(frozen=True, slots=True)
class Request:
    """One HTTP request, bound to the route table of the app serving it.

    Read the body with ``await request.body()``, ``.text()`` or ``.json()``.
    Resolve links with ``request.routes.require(name)`` or
    ``request.url_for(name, **params)``.
    """

    method: str
    path: str
    headers: Headers
    query: QueryParams
    path_params: dict[str, str]
    http_version: str
    client: tuple[str, int] | None

    # Private: ASGI receive callable for body streaming
    _receive: Receive

    routes: RouteTable = field(default_factory=RouteTable)

    # Private: name of the route dispatch matched, set by the pipeline
    _route_name: str | None = field(default=None, repr=False)

    # Private: body cache (the dict is mutable, the field reference is not)
    _cache: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @property
    def content_type(self) -> str | None:
        return self.headers.get("content-type")

    @property
    def url(self) -> str:
        """Full request URL (path + query string)."""
        qs = self.query.raw
        if qs:
            return f"{self.path}?{qs.decode('latin-1')}"
        return self.path

    @property
    def route_name(self) -> str | None:
        """Name of the route serving this request.

        Set once dispatch has matched a route, so placeholder routes
        (``/users/42`` for ``/users/{id:int}``) and trailing-slash variants
        report their registered name. Before that, for instance in
        middleware, the name is looked up from the literal path.
        """
        return self._route_name or self.routes.find_name_by_path(self.path)

    def url_for(self, name: str, /, **params: object) -> str:
        """Build a URL for route *name* (see ``RouteTable.url_for``)."""
        return self.routes.url_for(name, **params)

    # -- Body --

    async def body(self) -> bytes:
        """The whole request body. ASGI receive is drained once, then cached."""
        cached = self._cache.get("body")
        if cached is None:
            cached = self._cache["body"] = b"".join([chunk async for chunk in self.stream()])
        return cached

    async def stream(self) -> AsyncGenerator[bytes]:
        """Yield body chunks as ASGI delivers them."""
        more = True
        while more:
            message = await self._receive()
            more = message.get("more_body", False)
            if chunk := message.get("body", b""):
                yield chunk

    async def json(self) -> Any:
        return json.loads(await self.body())

    async def text(self) -> str:
        return (await self.body()).decode("utf-8")

    # -- Factory --

    @classmethod
    def from_asgi(
        cls,
        scope: Scope,
        receive: Receive,
        *,
        routes: RouteTable | None = None,
        path_params: dict[str, str] | None = None,
    ) -> Request:
        """Create a Request from an ASGI scope and receive callable."""
        client = scope.get("client")
        return cls(
            method=scope["method"],
            path=scope["path"],
            headers=Headers(tuple(scope.get("headers", ()))),
            query=QueryParams(scope.get("query_string", b"")),
            path_params=path_params or {},
            http_version=scope.get("http_version", "1.1"),
            client=tuple(client) if client else None,
            _receive=receive,
            routes=routes if routes is not None else RouteTable(),
        )
