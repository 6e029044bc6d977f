"""Responses and redirects.

``Response`` is frozen; every ``with_*()`` call returns a modified copy.
``Redirect`` is a return value that negotiation turns into a
``Location`` response, and ``Redirect.to()`` targets a route by name.
"""

from collections.abc import Mapping
from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class Response:
    """An HTTP response.

    ``Response("Created").with_status(201).with_header("X-Id", "7")``
    """

    body: str | bytes = ""
    status: int = 200
    content_type: str = "text/html; charset=utf-8"
    headers: tuple[tuple[str, str], ...] = ()

    def with_status(self, status: int) -> "Response":
        return replace(self, status=status)

    def with_header(self, name: str, value: str) -> "Response":
        return replace(self, headers=(*self.headers, (name, value)))

    def with_headers(self, headers: Mapping[str, str]) -> "Response":
        return replace(self, headers=(*self.headers, *headers.items()))

    def with_content_type(self, content_type: str) -> "Response":
        return replace(self, content_type=content_type)

    def header(self, name: str, default: str | None = None) -> str | None:
        """Return the first value of header *name* (case-insensitive)."""
        wanted = name.lower()
        for key, value in self.headers:
            if key.lower() == wanted:
                return value
        return default

    @property
    def body_bytes(self) -> bytes:
        if isinstance(self.body, str):
            return self.body.encode("utf-8")
        return self.body

    @property
    def text(self) -> str:
        if isinstance(self.body, bytes):
            return self.body.decode("utf-8")
        return self.body


@dataclass(frozen=True, slots=True)
class Redirect:
    """A redirect response.

    ``Redirect.to()`` resolves a route name against the table of the
    request being handled::

        return Redirect.to("users.detail", id=user.id)
    """

    url: str
    status: int = 302
    headers: tuple[tuple[str, str], ...] = ()

    @classmethod
    def to(cls, name: str, /, *, status: int = 302, **params: object) -> "Redirect":
        from signpost.context import url_for

        return cls(url_for(name, **params), status=status)
