"""Write a ``Response`` to ASGI ``send()``."""

from signpost._internal.asgi import Send
from signpost.http.response import Response

# Informational, 204 No Content, and 304 Not Modified never carry a body.
_NO_BODY = frozenset({204, 304})


async def send_response(response: Response, send: Send, *, head: bool = False) -> None:
    """Emit ``http.response.start`` and a single ``http.response.body``.

    ``content-length`` always describes the body a GET would receive,
    so HEAD responses report it too while sending no bytes.
    """
    status = response.status
    body = b"" if status < 200 or status in _NO_BODY else response.body_bytes
    headers = [(b"content-type", response.content_type.encode("latin-1"))]
    headers += [
        (name.lower().encode("latin-1"), value.encode("latin-1"))
        for name, value in response.headers
    ]
    headers.append((b"content-length", str(len(body)).encode("latin-1")))

    await send({"type": "http.response.start", "status": status, "headers": headers})
    await send({"type": "http.response.body", "body": b"" if head else body})
