"""Dispatch-side route types.

A ``Route`` is what the router stores and a ``RouteMatch`` is what it
hands back. ``Segment`` is one parsed piece of a route path.
"""

from dataclasses import dataclass, replace

from signpost._internal.types import Handler
from signpost.routing.paths import RoutePath


@dataclass(frozen=True, slots=True)
class Segment:
    """One ``/``-separated piece of a route path.

    Literal:  ``users``     -> ``Segment("users")``
    Param:    ``{id}``      -> ``Segment("id", "str")``
    Typed:    ``{id:int}``  -> ``Segment("id", "int")``
    Tail:     ``{p:path}``  -> ``Segment("p", "path")``, consumes the rest
    """

    text: str
    converter: str | None = None

    @property
    def is_param(self) -> bool:
        return self.converter is not None

    @property
    def is_tail(self) -> bool:
        return self.converter == "path"


@dataclass(frozen=True, slots=True)
class Route:
    """A handler bound to a path and a set of methods.

    ``name`` is the fully composed route name (``"ui.index"``) once the
    route has been nested into its final position.
    """

    path: str
    handler: Handler
    methods: frozenset[str] = frozenset({"GET"})
    name: str | None = None

    def mounted(self, name_prefix: str, path_prefix: RoutePath, separator: str) -> "Route":
        """Return this route re-rooted under *path_prefix* and renamed under *name_prefix*."""
        return replace(
            self,
            path=str(path_prefix.join(self.path)),
            name=f"{name_prefix}{separator}{self.name}" if self.name else None,
        )


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """A matched route plus the raw strings captured by its placeholders."""

    route: Route
    path_params: dict[str, str]

    @property
    def name(self) -> str | None:
        return self.route.name
