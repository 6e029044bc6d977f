"""Route registry: builds the ``name -> path`` mapping by composition.

Mutable during setup. Sub-registries are combined with ``merge()``
(names unchanged) or ``nest()`` (names prefixed, paths re-rooted).
``finalize()`` hands the entries to an immutable ``RouteTable`` and
retires the registry.

Composition is atomic: ``merge()`` and ``nest()`` check every incoming
name before inserting any of them.
"""

import logging
from collections.abc import Iterable, Iterator

from signpost.errors import (
    DuplicateRouteName,
    InvalidRouteName,
    RegistryFinalized,
)
from signpost.routing.paths import RoutePath
from signpost.routing.table import RouteTable

logger = logging.getLogger("signpost.routing")

DEFAULT_SEPARATOR = "."


def _check_name(name: object, *, what: str = "Route name") -> str:
    if not isinstance(name, str) or not name:
        msg = f"{what} must be a non-empty string, got {name!r}"
        raise InvalidRouteName(msg)
    return name


class RouteRegistry:
    """Accumulates named routes while an app is being assembled.

    Usage::

        ui = RouteRegistry()
        ui.register("index", "/")

        root = RouteRegistry()
        root.nest("ui", "/ui/", ui)
        root.lookup_builder("ui.index")   # RoutePath("/ui/")

        table = root.finalize()

    Not thread-safe. Registries are built by one thread during startup.
    """

    __slots__ = ("_entries", "_finalized", "_separator")

    def __init__(self, separator: str = DEFAULT_SEPARATOR) -> None:
        if not isinstance(separator, str):
            msg = f"Separator must be a string, got {separator!r}"
            raise TypeError(msg)
        self._entries: dict[str, RoutePath] = {}
        self._separator = separator
        self._finalized = False

    @property
    def separator(self) -> str:
        return self._separator

    # -- Building --

    def register(self, name: str, path: str | RoutePath) -> None:
        """Add a single ``name -> path`` entry.

        Raises ``DuplicateRouteName`` if *name* is already registered.
        """
        self._check_building()
        _check_name(name)
        route_path = RoutePath.coerce(path)
        if name in self._entries:
            raise DuplicateRouteName(name)
        self._entries[name] = route_path
        logger.debug("registered route %r -> %s", name, route_path)

    def merge(self, other: "RouteRegistry") -> None:
        """Add every entry of *other* without renaming.

        Nothing is inserted if any of *other*'s names already exists
        here; the first collision (in *other*'s insertion order) is
        reported.
        """
        self._check_building()
        other._check_building()
        self._commit(other._entries.items())
        logger.debug("merged %d routes", len(other._entries))

    def nest(
        self,
        name_prefix: str,
        path_prefix: str | RoutePath,
        sub_registry: "RouteRegistry",
    ) -> None:
        """Add every entry of *sub_registry* under a name and path prefix.

        Each ``inner_name -> inner_path`` becomes
        ``name_prefix + separator + inner_name -> path_prefix.join(inner_path)``.
        *sub_registry* is only read, so it may be nested again elsewhere.
        """
        self._check_building()
        sub_registry._check_building()
        _check_name(name_prefix, what="Nest name")
        prefix = RoutePath.coerce(path_prefix)
        composed = [
            (f"{name_prefix}{self._separator}{inner_name}", prefix.join(inner_path))
            for inner_name, inner_path in sub_registry._entries.items()
        ]
        self._commit(composed)
        logger.debug(
            "nested %d routes under %r at %s", len(composed), name_prefix, prefix
        )

    def _commit(self, entries: Iterable[tuple[str, RoutePath]]) -> None:
        staged = list(entries)
        seen: set[str] = set()
        for name, _ in staged:
            if name in self._entries or name in seen:
                raise DuplicateRouteName(name)
            seen.add(name)
        self._entries.update(staged)

    def finalize(self) -> RouteTable:
        """Freeze the entries into a ``RouteTable``.

        The registry cannot be used afterwards; further calls raise
        ``RegistryFinalized``.
        """
        self._check_building()
        entries = self._entries
        self._entries = {}
        self._finalized = True
        logger.debug("finalized route table with %d routes", len(entries))
        return RouteTable(entries)

    # -- Introspection --

    def lookup_builder(self, name: str) -> RoutePath | None:
        """Return the path registered so far for *name*, or ``None``."""
        return self._entries.get(name)

    @property
    def finalized(self) -> bool:
        return self._finalized

    def items(self) -> Iterator[tuple[str, RoutePath]]:
        return iter(self._entries.items())

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        state = "finalized" if self._finalized else f"{len(self._entries)} routes"
        return f"<RouteRegistry {state} separator={self._separator!r}>"

    def _check_building(self) -> None:
        if self._finalized:
            msg = (
                "This RouteRegistry was already finalized into a RouteTable. "
                "Build a new registry instead of reusing it."
            )
            raise RegistryFinalized(msg)
