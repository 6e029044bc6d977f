"""Turning exceptions into responses.

``HTTPError`` subclasses map to their own status. Anything else,
including ``UnknownRouteError`` from ``RouteTable.require()``, is a
programming error: it is logged with its traceback and becomes a 500.
Either way a handler registered with ``@app.error(...)`` wins, looked up
first by exception class and then by status code.
"""

import inspect
import logging
from typing import Any

from signpost._internal.invoke import invoke
from signpost._internal.types import ErrorHandler, ErrorHandlerKey
from signpost.errors import HTTPError
from signpost.http.request import Request
from signpost.http.response import Response
from signpost.server.negotiation import negotiate

logger = logging.getLogger("signpost.server")

_TEXT = "text/plain; charset=utf-8"


def _find_handler(
    error_handlers: dict[ErrorHandlerKey, ErrorHandler], exc: Exception, status: int
) -> ErrorHandler | None:
    return error_handlers.get(type(exc)) or error_handlers.get(status)


async def call_error_handler(
    handler: ErrorHandler,
    request: Request,
    exc: Exception,
    status: int,
    template_env: Any,
) -> Response:
    """Run a user error handler and negotiate its return value.

    The handler takes ``()``, ``(request)`` or ``(request, exc)``. A
    plain 200 result is given *status* so handlers can return a body.
    """
    arity = len(inspect.signature(handler).parameters)
    result = await invoke(handler, *(request, exc)[:arity])
    response = negotiate(result, template_env=template_env)
    return response.with_status(status) if response.status == 200 else response


async def handle_http_error(
    exc: HTTPError,
    request: Request,
    error_handlers: dict[ErrorHandlerKey, ErrorHandler],
    template_env: Any,
    debug: bool,
) -> Response:
    """Respond to an ``HTTPError`` raised by routing, middleware, or a handler."""
    logger.debug("%d %s %s: %s", exc.status, request.method, request.path, exc.detail)

    handler = _find_handler(error_handlers, exc, exc.status)
    if handler is not None:
        return await call_error_handler(handler, request, exc, exc.status, template_env)

    body = exc.detail or f"Error {exc.status}"
    if debug and exc.detail:
        body = f"{exc.status}: {exc.detail}"
    return Response(body=body, status=exc.status, content_type=_TEXT, headers=exc.headers)


async def handle_internal_error(
    exc: Exception,
    request: Request,
    error_handlers: dict[ErrorHandlerKey, ErrorHandler],
    template_env: Any,
    debug: bool,
) -> Response:
    """Log an unexpected exception and respond with a 500."""
    logger.exception("500 %s %s", request.method, request.path)

    handler = _find_handler(error_handlers, exc, 500)
    if handler is not None:
        return await call_error_handler(handler, request, exc, 500, template_env)

    body = f"Internal Server Error: {exc!r}" if debug else "Internal Server Error"
    return Response(body=body, status=500, content_type=_TEXT)
