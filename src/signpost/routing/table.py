"""Immutable route table: the frozen ``name -> path`` mapping.

Produced once by ``RouteRegistry.finalize()`` and shared by every
request for the lifetime of the app.

Thread safety:
    The backing mapping is a ``MappingProxyType`` over a dict nothing
    else references. Copies return the same object. Concurrent reads
    need no locks.
"""

from collections.abc import Callable, Iterator, Mapping
from types import MappingProxyType
from typing import NoReturn
from urllib.parse import quote

from signpost.errors import UnknownRouteError
from signpost.routing.params import split_placeholder
from signpost.routing.paths import RoutePath


class RouteTable:
    """Read-only lookup of route paths by name, and names by path.

    Usage::

        table.require("ui.index")     # RoutePath("/ui/"), or UnknownRouteError
        table.get("ui.missing")       # None
        table.find_name_by_path("/ui/")  # "ui.index"
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, RoutePath] | None = None) -> None:
        object.__setattr__(self, "_entries", MappingProxyType(dict(entries or {})))

    def __setattr__(self, name: str, value: object) -> NoReturn:
        msg = "RouteTable is immutable"
        raise AttributeError(msg)

    def __delattr__(self, name: str) -> NoReturn:
        msg = "RouteTable is immutable"
        raise AttributeError(msg)

    def __copy__(self) -> "RouteTable":
        return self

    def __deepcopy__(self, memo: dict[int, object]) -> "RouteTable":
        return self

    # -- Lookup --

    def require(self, name: str) -> RoutePath:
        """Return the path for *name*.

        Use where the caller knows the route was registered. A missing
        name raises ``UnknownRouteError``, a programming error.
        """
        try:
            return self._entries[name]
        except KeyError:
            raise UnknownRouteError(name) from None

    def get(self, name: str) -> RoutePath | None:
        """Return the path for *name*, or ``None`` if it was never registered."""
        return self._entries.get(name)

    def get_or(self, name: str, error: BaseException) -> RoutePath:
        """Return the path for *name*, raising *error* if it is missing."""
        path = self._entries.get(name)
        if path is None:
            raise error
        return path

    def get_or_else(self, name: str, factory: Callable[[], BaseException]) -> RoutePath:
        """Return the path for *name*, raising ``factory()`` if it is missing.

        The factory is only called on a miss.
        """
        path = self._entries.get(name)
        if path is None:
            raise factory()
        return path

    def find_name_by_path(self, path: str | RoutePath) -> str | None:
        """Return the first name registered for *path*, in registration order.

        Different names may share a path (the registry does not forbid
        it), so this is a reverse-mapping convenience and not a
        bijection.
        """
        target = path.value if isinstance(path, RoutePath) else path
        for name, candidate in self._entries.items():
            if candidate.value == target:
                return name
        return None

    def url_for(self, name: str, /, **params: object) -> str:
        """Build a URL for *name*, filling ``{param}`` segments from *params*.

        Raises ``UnknownRouteError`` for unregistered names and
        ``ValueError`` for missing or unexpected parameters.
        """
        path = self.require(name)
        remaining = dict(params)
        parts: list[str] = []
        for part in path.value.split("/"):
            placeholder = split_placeholder(part)
            if placeholder is not None:
                param_name, param_type = placeholder
                if param_name not in remaining:
                    msg = f"Route {name!r} needs parameter {param_name!r}"
                    raise ValueError(msg)
                safe = "/" if param_type == "path" else ""
                parts.append(quote(str(remaining.pop(param_name)), safe=safe))
            else:
                parts.append(part)
        if remaining:
            unexpected = ", ".join(sorted(remaining))
            msg = f"Route {name!r} got unexpected parameters: {unexpected}"
            raise ValueError(msg)
        return "/".join(parts)

    # -- Introspection --

    @property
    def entries(self) -> Mapping[str, RoutePath]:
        """Read-only view of every ``name -> path`` entry."""
        return self._entries

    def names(self) -> tuple[str, ...]:
        return tuple(self._entries)

    def items(self) -> Iterator[tuple[str, RoutePath]]:
        return iter(self._entries.items())

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RouteTable):
            return NotImplemented
        return dict(self._entries) == dict(other._entries)

    def __hash__(self) -> int:
        return hash(frozenset(self._entries.items()))

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {str(v)!r}" for k, v in self._entries.items())
        return f"RouteTable({{{items}}})"
