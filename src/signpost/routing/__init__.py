"""Routing: named routes, composition, and the compiled dispatch trie.

Routes are registered during setup, composed with ``nest()`` and
``merge()``, and compiled into immutable lookup structures when the
app freezes: a ``Router`` for dispatch and a ``RouteTable`` for names.
"""

from signpost.routing.named import NamedRouter
from signpost.routing.paths import RoutePath
from signpost.routing.registry import RouteRegistry
from signpost.routing.route import Route, RouteMatch, Segment
from signpost.routing.router import Router
from signpost.routing.table import RouteTable

__all__ = [
    "NamedRouter",
    "Route",
    "RouteMatch",
    "RoutePath",
    "RouteRegistry",
    "RouteTable",
    "Router",
    "Segment",
]
