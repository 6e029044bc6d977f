"""Content negotiation: maps handler return values to Response objects.

isinstance-based dispatch, no magic, fully predictable.
"""

import json
from typing import Any

from signpost.errors import ConfigurationError
from signpost.http.response import Redirect, Response
from signpost.templating.returns import Template


def negotiate(value: Any, *, template_env: Any = None) -> Response:
    """Convert a route handler's return value to a Response.

    Dispatch order:

    1. ``Response``            -> pass through
    2. ``Redirect``            -> status + Location header
    3. ``Template``            -> render via kida
    4. ``str``                 -> 200, text/html
    5. ``bytes``               -> 200, application/octet-stream
    6. ``dict`` / ``list``     -> 200, application/json
    7. ``(value, int)``        -> negotiate value, override status
    8. ``(value, int, dict)``  -> negotiate value, override status + headers
    9. ``None``                -> 204, empty body
    """
    match value:
        case Response():
            return value
        case Redirect():
            return (
                Response(body="")
                .with_status(value.status)
                .with_header("Location", value.url)
                .with_headers(dict(value.headers))
            )
        case Template():
            if template_env is None:
                msg = (
                    "Template return type requires kida. Install signpost[templates] "
                    "and make sure AppConfig.template_dir exists."
                )
                raise ConfigurationError(msg)
            from signpost.templating.integration import render_template

            return Response(body=render_template(template_env, value))
        case str():
            return Response(body=value)
        case bytes():
            return Response(body=value, content_type="application/octet-stream")
        case dict() | list():
            return Response(
                body=json.dumps(value, default=str),
                content_type="application/json",
            )
        case (inner, int() as status):
            return negotiate(inner, template_env=template_env).with_status(status)
        case (inner, int() as status, dict() as headers):
            return (
                negotiate(inner, template_env=template_env)
                .with_status(status)
                .with_headers(headers)
            )
        case None:
            return Response(body="", status=204)

    msg = f"Handler returned unsupported type {type(value).__name__!r}"
    raise TypeError(msg)
