"""Signpost exception hierarchy.

Shared across the registry, Router, App, and handler pipeline so every
module raises and catches the same types.
"""

from dataclasses import dataclass


class SignpostError(Exception):
    """Base for all signpost-specific errors."""


class ConfigurationError(SignpostError):
    """Raised when app or route configuration is invalid.

    Typically raised during ``App._freeze()`` at startup, before any
    request is served.
    """


class RouteRegistryError(ConfigurationError):
    """Base for failures while composing named routes."""


class DuplicateRouteName(RouteRegistryError):  # noqa: N818
    """A route name is already present in the registry being built."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Route name {name!r} is already registered.")


class InvalidRouteName(RouteRegistryError, ValueError):
    """A route name (or nest prefix) is empty or not a string."""


class InvalidRoutePath(RouteRegistryError, ValueError):
    """A route path is not rooted (does not start with ``/``)."""


class RegistryFinalized(RouteRegistryError, RuntimeError):  # noqa: N818
    """The registry was already finalized into a RouteTable."""


class UnknownRouteError(SignpostError, AssertionError):
    """``RouteTable.require()`` was called for a name that was never registered.

    A programming error, not a recoverable condition: the call site
    asserted the route exists. The request pipeline does not map it to
    an HTTP status; it surfaces as a logged 500.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Route {name!r} is required but was never registered.")


@dataclass(frozen=True, slots=True)
class HTTPError(SignpostError):
    """An error that maps directly to an HTTP status code.

    Raised by the router, middleware, or handlers. The ASGI handler
    catches these and dispatches to the matching ``@app.error()`` handler.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818
    """404: no route matched the request path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class MethodNotAllowed(HTTPError):  # noqa: N818
    """405: route exists but not for this HTTP method.

    Includes an ``Allow`` header listing the valid methods.
    """

    def __init__(self, allowed: frozenset[str], detail: str = "") -> None:
        allow_value = ", ".join(sorted(allowed))
        default_detail = f"Method not allowed. Allowed methods: {allow_value}"
        super().__init__(
            status=405,
            detail=detail or default_detail,
            headers=(("Allow", allow_value),),
        )
