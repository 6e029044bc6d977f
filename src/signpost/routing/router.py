"""Dispatch router: a segment trie compiled from the app's routes.

The router owns path syntax. ``add()`` rejects unrooted paths,
``<param>`` placeholders, unknown converters, misplaced ``{x:path}``
tails, and any route claiming a path and method that is already taken.
Placeholder names do not make paths distinct: ``/users/{id}`` and
``/users/{slug}`` are the same path. All of these are ``ConfigurationError`` and surface when the app
freezes, before the first request.

Lookup order at each level: literal segment, then placeholders in the
order they were added, then a ``{x:path}`` tail.
"""

import re
from dataclasses import dataclass

from signpost.errors import ConfigurationError, MethodNotAllowed, NotFound
from signpost.routing.params import CONVERTERS, split_placeholder
from signpost.routing.route import Route, RouteMatch, Segment

_ANGLE_PARAM = re.compile(r"<[^>]*>")


def parse_path(path: str) -> list[Segment]:
    """Split a route path into segments, validating placeholder syntax.

    ``"/users/{id:int}"`` -> ``[Segment("users"), Segment("id", "int")]``
    """
    if not path.startswith("/"):
        msg = f"Route path {path!r} must start with '/'."
        raise ConfigurationError(msg)
    if _ANGLE_PARAM.search(path):
        msg = f"Route path {path!r} uses <param> syntax; use {{param}} instead."
        raise ConfigurationError(msg)

    segments: list[Segment] = []
    for piece in path.split("/"):
        if not piece:
            continue
        if segments and segments[-1].is_tail:
            msg = f"Route path {path!r}: a {{name:path}} placeholder must be the last segment."
            raise ConfigurationError(msg)
        placeholder = split_placeholder(piece)
        if placeholder is None:
            segments.append(Segment(piece))
            continue
        name, converter = placeholder
        if converter not in CONVERTERS:
            msg = f"Unknown converter {converter!r} in route path {path!r}."
            raise ConfigurationError(msg)
        segments.append(Segment(name, converter))
    return segments


@dataclass(slots=True)
class _ParamEdge:
    converter: str
    pattern: re.Pattern[str]
    node: "_Node"


@dataclass(frozen=True, slots=True)
class _Endpoint:
    route: Route
    names: tuple[str, ...]


class _Node:
    __slots__ = ("by_method", "literals", "params", "tail")

    def __init__(self) -> None:
        self.literals: dict[str, _Node] = {}
        self.params: list[_ParamEdge] = []
        self.tail: dict[str, _Endpoint] | None = None
        self.by_method: dict[str, _Endpoint] = {}

    def child(self, segment: Segment) -> "_Node":
        """Return the child for *segment*, creating it on first use.

        Placeholders share an edge per converter: ``{id}`` and ``{slug}``
        are the same shape, so they lead to the same node.
        """
        if not segment.is_param:
            return self.literals.setdefault(segment.text, _Node())
        for edge in self.params:
            if edge.converter == segment.converter:
                return edge.node
        assert segment.converter is not None
        pattern, _ = CONVERTERS[segment.converter]
        edge = _ParamEdge(segment.converter, re.compile(pattern), _Node())
        self.params.append(edge)
        return edge.node


def _claim(by_method: dict[str, _Endpoint], endpoint: _Endpoint) -> None:
    # All or nothing: a rejected route claims no methods.
    route = endpoint.route
    for method in sorted(route.methods):
        holder = by_method.get(method)
        if holder is not None:
            msg = (
                f"Route conflict: {method} {route.path!r} is already handled "
                f"by {holder.route.path!r}."
            )
            raise ConfigurationError(msg)
    by_method.update(dict.fromkeys(route.methods, endpoint))


class Router:
    """Trie-based dispatch over the app's routes.

    Usage::

        router = Router()
        router.add(Route("/users/{id:int}", show_user, name="users.detail"))
        router.compile()
        router.match("GET", "/users/42").path_params   # {"id": "42"}

    Trailing slashes are not significant for matching: ``/ui`` and
    ``/ui/`` reach the same node.
    """

    __slots__ = ("_compiled", "_root", "_routes")

    def __init__(self) -> None:
        self._root = _Node()
        self._routes: list[Route] = []
        self._compiled = False

    def add(self, route: Route) -> None:
        """Insert *route*. Must be called before ``compile()``."""
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)

        segments = parse_path(route.path)
        endpoint = _Endpoint(route, tuple(s.text for s in segments if s.is_param))
        node = self._root
        slot = node.by_method
        for segment in segments:
            if segment.is_tail:
                if node.tail is None:
                    node.tail = {}
                slot = node.tail
                break
            node = node.child(segment)
            slot = node.by_method

        _claim(slot, endpoint)
        self._routes.append(route)

    def compile(self) -> None:
        """Freeze the router. No more routes can be added."""
        self._compiled = True

    @property
    def compiled(self) -> bool:
        return self._compiled

    @property
    def routes(self) -> list[Route]:
        """All routes, in the order they were added."""
        return list(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    def __repr__(self) -> str:
        state = "compiled" if self._compiled else "building"
        return f"<Router {len(self._routes)} routes {state}>"

    def match(self, method: str, path: str) -> RouteMatch:
        """Find the route for *method* and *path*.

        ``HEAD`` falls back to the ``GET`` route. Raises ``NotFound``
        when no path matches and ``MethodNotAllowed`` when the path
        matches under other methods only.
        """
        parts = [part for part in path.split("/") if part]
        found = _walk(self._root, parts, 0, ())
        if found is None:
            raise NotFound(f"No route matches {method} {path!r}")

        by_method, values = found
        endpoint = by_method.get(method)
        if endpoint is None and method == "HEAD":
            endpoint = by_method.get("GET")
        if endpoint is None:
            raise MethodNotAllowed(frozenset(by_method))
        return RouteMatch(route=endpoint.route, path_params=dict(zip(endpoint.names, values)))


def _walk(
    node: _Node,
    parts: list[str],
    index: int,
    values: tuple[str, ...],
) -> tuple[dict[str, _Endpoint], tuple[str, ...]] | None:
    # Captures are positional; the matched route supplies their names.
    if index == len(parts):
        return (node.by_method, values) if node.by_method else None

    part = parts[index]

    literal = node.literals.get(part)
    if literal is not None:
        found = _walk(literal, parts, index + 1, values)
        if found is not None:
            return found

    for edge in node.params:
        if edge.pattern.fullmatch(part):
            found = _walk(edge.node, parts, index + 1, (*values, part))
            if found is not None:
                return found

    if node.tail:
        return node.tail, (*values, "/".join(parts[index:]))

    return None
