"""Path parameter placeholders: ``{name}`` and ``{name:type}``.

Shared by the dispatch router (matching), the route table (URL
building), and the handler pipeline (typed conversion).
"""


# (regex_pattern, python_type) for each supported converter
CONVERTERS: dict[str, tuple[str, type]] = {
    "str": (r"[^/]+", str),
    "int": (r"\d+", int),
    "float": (r"\d+(?:\.\d+)?", float),
    "path": (r".+", str),
}


def split_placeholder(segment: str) -> tuple[str, str] | None:
    """Return ``(name, type)`` for a ``{name:type}`` segment, else ``None``.

    The type defaults to ``"str"``. Unknown types are returned as-is;
    the router decides whether to reject them.
    """
    if not (segment.startswith("{") and segment.endswith("}")):
        return None
    name, _, param_type = segment[1:-1].partition(":")
    return name, param_type or "str"


def param_types(path: str) -> dict[str, str]:
    """Map each placeholder name in *path* to its converter type."""
    found: dict[str, str] = {}
    for segment in path.split("/"):
        placeholder = split_placeholder(segment)
        if placeholder is not None:
            found[placeholder[0]] = placeholder[1]
    return found


def convert_param(value: str, param_type: str) -> str | int | float:
    """Convert a captured path parameter string to the target type.

    Raises ``ValueError`` if the string cannot be converted.
    Raises ``KeyError`` if *param_type* is not a registered converter.
    """
    _, target_type = CONVERTERS[param_type]
    return target_type(value)


def convert_params(path: str, raw: dict[str, str]) -> dict[str, str | int | float]:
    """Convert every captured value in *raw* using the types declared in *path*."""
    types = param_types(path)
    return {name: convert_param(value, types.get(name, "str")) for name, value in raw.items()}
