"""Request-scoped context via ContextVar.

Provides:
- ``request_var``: The current ``Request`` for this task/thread.
- ``routes_var``: The app's frozen ``RouteTable``.

Both are set by the handler pipeline and reset after each request.
Accessing them outside a request raises ``LookupError``.

Thread safety:
    ``ContextVar`` is task-local under asyncio and thread-local under
    free-threading. The table itself is immutable. No locks needed.
"""

from contextvars import ContextVar

from signpost.http.request import Request
from signpost.routing.table import RouteTable

request_var: ContextVar[Request] = ContextVar("signpost_request")
"""The current request. Set by the ASGI handler before dispatch."""

routes_var: ContextVar[RouteTable] = ContextVar("signpost_routes")
"""The route table of the app serving the current request."""


def get_request() -> Request:
    """Return the current request.

    Raises ``LookupError`` if called outside a request context.
    """
    return request_var.get()


def get_routes() -> RouteTable:
    """Return the route table for the current request.

    Raises ``LookupError`` if called outside a request context.
    """
    return routes_var.get()


def url_for(name: str, /, **params: object) -> str:
    """Build a URL for route *name* against the current request's table.

    Usage::

        from signpost.context import url_for

        link = url_for("users.detail", id=42)
    """
    return routes_var.get().url_for(name, **params)
