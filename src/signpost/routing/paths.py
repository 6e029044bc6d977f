"""Rooted route paths and the join used when nesting.

A ``RoutePath`` is the value stored against every route name. It keeps
the string exactly as registered (trailing slash included) so the
dispatcher and the name registry see the same path.
"""

from dataclasses import dataclass

from signpost.errors import InvalidRoutePath


@dataclass(frozen=True, slots=True)
class RoutePath:
    """An immutable, rooted URL path.

    Usage::

        RoutePath("/b").join("/a")      # RoutePath("/b/a")
        RoutePath("/ui/").join("/")     # RoutePath("/ui/")
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.startswith("/"):
            msg = f"Route path {self.value!r} must be rooted (start with '/')."
            raise InvalidRoutePath(msg)

    @classmethod
    def coerce(cls, path: "str | RoutePath") -> "RoutePath":
        """Return *path* as a RoutePath, constructing one from a string."""
        if isinstance(path, RoutePath):
            return path
        return cls(path)

    @property
    def segments(self) -> tuple[str, ...]:
        """Non-empty path segments, in order."""
        return tuple(part for part in self.value.split("/") if part)

    @property
    def relative(self) -> str:
        """The path with its root marker stripped."""
        return self.value.lstrip("/")

    def join(self, other: "str | RoutePath") -> "RoutePath":
        """Append *other* below this path.

        *other* is rooted, so its leading ``/`` is stripped before
        appending; otherwise the prefix would be discarded.
        """
        tail = RoutePath.coerce(other).relative
        if not tail:
            return self
        if self.value.endswith("/"):
            return RoutePath(self.value + tail)
        return RoutePath(f"{self.value}/{tail}")

    def __str__(self) -> str:
        return self.value

    def __fspath__(self) -> str:
        return self.value
