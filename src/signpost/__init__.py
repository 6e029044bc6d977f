"""Signpost: named, composable routes for ASGI apps.

Every route has a dot-separated name. Routers nest and merge, names and
paths are prefixed together, and the composed mapping is frozen into a
``RouteTable`` that every request can read.

Basic usage::

    from signpost import App, NamedRouter, RouteTable

    ui = NamedRouter()

    @ui.add("index", "/")
    def index(routes: RouteTable):
        return f"other lives at {routes.require('ui.other')}"

    @ui.add("other", "/other")
    def other():
        return "other"

    app = App()
    app.nest("ui", "/ui/", ui)
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "ConfigurationError",
    "DuplicateRouteName",
    "HTTPError",
    "MethodNotAllowed",
    "NamedRouter",
    "NotFound",
    "Redirect",
    "Request",
    "Response",
    "RoutePath",
    "RouteRegistry",
    "RouteTable",
    "SignpostError",
    "Template",
    "UnknownRouteError",
    "get_request",
    "get_routes",
    "url_for",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import signpost`` fast while providing a clean top-level API.
    """
    if name == "App":
        from signpost.app import App

        return App

    if name == "AppConfig":
        from signpost.config import AppConfig

        return AppConfig

    if name == "Request":
        from signpost.http.request import Request

        return Request

    if name in ("Response", "Redirect"):
        from signpost.http import response as _resp

        return getattr(_resp, name)

    if name == "Template":
        from signpost.templating.returns import Template

        return Template

    if name in ("NamedRouter", "RoutePath", "RouteRegistry", "RouteTable"):
        from signpost import routing as _routing

        return getattr(_routing, name)

    if name in ("get_request", "get_routes", "url_for"):
        from signpost import context as _ctx

        return getattr(_ctx, name)

    if name in (
        "ConfigurationError",
        "DuplicateRouteName",
        "HTTPError",
        "MethodNotAllowed",
        "NotFound",
        "SignpostError",
        "UnknownRouteError",
    ):
        from signpost import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
