"""NamedRouter: composable routers whose routes carry names.

Each ``NamedRouter`` keeps two structures in lockstep: the dispatch
routes handed to ``Router`` at build time, and a ``RouteRegistry`` of
``name -> path``. ``nest()`` and ``merge()`` apply the same prefixing
to both, so the names always resolve to the paths the dispatcher
actually serves.
"""

import logging
from collections.abc import Callable

from signpost._internal.types import Handler
from signpost.routing.paths import RoutePath
from signpost.routing.registry import DEFAULT_SEPARATOR, RouteRegistry
from signpost.routing.route import Route
from signpost.routing.router import Router
from signpost.routing.table import RouteTable

logger = logging.getLogger("signpost.routing")


def _methods(methods: list[str] | None) -> frozenset[str]:
    return frozenset(m.upper() for m in (methods or ["GET"]))


class NamedRouter:
    """A group of named routes that can be nested or merged into others.

    Usage::

        ui = NamedRouter()
        ui.route("index", "/", index)

        @ui.add("other", "/other")
        def other(routes: RouteTable):
            ...

        app_router = NamedRouter().nest("ui", "/ui/", ui)
        app_router.lookup("ui.other")   # RoutePath("/ui/other")

    Composition copies routes out of the sub-router; the sub-router is
    left untouched and may be nested again under a different prefix.
    """

    __slots__ = ("_registry", "_routes")

    def __init__(self, separator: str = DEFAULT_SEPARATOR) -> None:
        self._registry = RouteRegistry(separator)
        self._routes: list[Route] = []

    # -- Registration --

    def route(
        self,
        name: str,
        path: str,
        handler: Handler,
        *,
        methods: list[str] | None = None,
    ) -> "NamedRouter":
        """Register *handler* at *path* under *name*. Returns ``self``."""
        self._registry.register(name, path)
        self._routes.append(Route(path, handler, _methods(methods), name))
        return self

    def add(
        self,
        name: str,
        path: str,
        *,
        methods: list[str] | None = None,
    ) -> Callable[[Handler], Handler]:
        """Decorator form of ``route()``."""

        def decorator(func: Handler) -> Handler:
            self.route(name, path, func, methods=methods)
            return func

        return decorator

    # -- Composition --

    def nest(self, name: str, path: str, router: "NamedRouter") -> "NamedRouter":
        """Mount *router* under a name prefix and a path prefix.

        Route names become ``name + separator + inner_name`` and paths
        become ``path`` joined with the inner path.
        """
        self._registry.nest(name, path, router._registry)
        prefix = RoutePath.coerce(path)
        sep = self._registry.separator
        self._routes.extend(inner.mounted(name, prefix, sep) for inner in router._routes)
        return self

    def merge(self, router: "NamedRouter") -> "NamedRouter":
        """Combine *router*'s routes into this one without renaming."""
        self._registry.merge(router._registry)
        self._routes.extend(router._routes)
        return self

    # -- Introspection --

    @property
    def registry(self) -> RouteRegistry:
        return self._registry

    @property
    def routes(self) -> list[Route]:
        """Dispatch routes collected so far, in registration order."""
        return list(self._routes)

    def lookup(self, name: str) -> RoutePath | None:
        """Return the path registered so far for *name*, or ``None``."""
        return self._registry.lookup_builder(name)

    def __len__(self) -> int:
        return len(self._routes)

    def __repr__(self) -> str:
        return f"<NamedRouter {len(self._routes)} routes>"

    # -- Build --

    def build(self, router: Router | None = None) -> tuple[Router, RouteTable]:
        """Compile the dispatch router and finalize the name registry.

        Path syntax errors and duplicate paths surface here as
        ``ConfigurationError`` from ``Router.add()``. The NamedRouter is
        spent afterwards.
        """
        dispatcher = router if router is not None else Router()
        for route in self._routes:
            dispatcher.add(route)
        dispatcher.compile()
        table = self._registry.finalize()
        logger.debug("built %d dispatch routes, %d names", len(self._routes), len(table))
        return dispatcher, table
