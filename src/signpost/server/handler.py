"""Per-request pipeline: ASGI in, ``Response`` out.

The only module that reads raw ASGI HTTP scopes. For each request it
builds a ``Request`` carrying the app's ``RouteTable``, publishes the
request and the table through context vars, runs middleware around
dispatch, maps errors to responses, and sends the result.
"""

import inspect
from dataclasses import replace
from functools import partial
from typing import Any

from signpost._internal.asgi import Receive, Scope, Send
from signpost._internal.invoke import invoke
from signpost._internal.types import ErrorHandler, ErrorHandlerKey, Handler, Middleware
from signpost.context import request_var, routes_var
from signpost.errors import HTTPError
from signpost.http.request import Request
from signpost.http.response import Response
from signpost.routing.params import convert_params
from signpost.routing.router import Router
from signpost.routing.table import RouteTable
from signpost.server.errors import handle_http_error, handle_internal_error
from signpost.server.negotiation import negotiate
from signpost.server.sender import send_response


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    router: Router,
    routes: RouteTable,
    middleware: tuple[Middleware, ...],
    error_handlers: dict[ErrorHandlerKey, ErrorHandler],
    template_env: Any = None,
    debug: bool,
) -> None:
    """Serve one HTTP request. Non-HTTP scopes are ignored."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope, receive, routes=routes)
    tokens = request_var.set(request), routes_var.set(routes)
    try:
        pipeline = _chain(middleware, partial(_dispatch, router, template_env))
        response = await pipeline(request)
    except HTTPError as exc:
        response = await handle_http_error(exc, request, error_handlers, template_env, debug)
    except Exception as exc:
        response = await handle_internal_error(exc, request, error_handlers, template_env, debug)
    finally:
        request_var.reset(tokens[0])
        routes_var.reset(tokens[1])

    await send_response(response, send, head=request.method == "HEAD")


def _chain(middleware: tuple[Middleware, ...], endpoint: Any) -> Any:
    """Wrap *endpoint* so ``middleware[0]`` runs first."""
    call_next = endpoint
    for mw in reversed(middleware):
        call_next = partial(_step, mw, call_next)
    return call_next


async def _step(mw: Middleware, call_next: Any, request: Request) -> Response:
    return await mw(request, call_next)


async def _dispatch(router: Router, template_env: Any, request: Request) -> Response:
    match = router.match(request.method, request.path)
    request = replace(request, path_params=match.path_params, _route_name=match.name)
    request_var.set(request)
    kwargs = _resolve_kwargs(
        match.route.handler,
        request,
        convert_params(match.route.path, match.path_params),
    )
    result = await invoke(match.route.handler, **kwargs)
    return negotiate(result, template_env=template_env)


def _resolve_kwargs(handler: Handler, request: Request, params: dict[str, Any]) -> dict[str, Any]:
    """Fill the handler's parameters by name or annotation.

    ``request`` / ``Request`` gets the request, ``routes`` / ``RouteTable``
    gets the route table, and any other name matching a path placeholder
    gets its converted value. A ``str`` capture on a parameter
    annotated ``int`` or ``float`` is converted when it parses.
    """
    kwargs: dict[str, Any] = {}
    for name, param in inspect.signature(handler, eval_str=True).parameters.items():
        annotation = param.annotation
        if name == "request" or annotation is Request:
            kwargs[name] = request
        elif name == "routes" or annotation is RouteTable:
            kwargs[name] = request.routes
        elif name in params:
            kwargs[name] = _coerce(params[name], annotation)
    return kwargs


_COERCIBLE = (int, float)


def _coerce(value: Any, annotation: Any) -> Any:
    if not isinstance(value, str) or annotation not in _COERCIBLE:
        return value
    try:
        return annotation(value)
    except (ValueError, TypeError):
        return value
