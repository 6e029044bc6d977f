"""Locate an App from a ``"module:attribute"`` string."""

import importlib

from signpost.app import App


def resolve_app(import_string: str) -> App:
    """Import *import_string* and return the signpost App it names.

    The attribute defaults to ``app``. If it names a callable that is
    not an App, it is called as a zero-argument factory.

    Raises:
        ModuleNotFoundError: The module cannot be imported.
        AttributeError: The module has no such attribute.
        TypeError: The attribute (or the factory's result) is not an App.
    """
    module_name, _, attribute = import_string.partition(":")
    target = getattr(importlib.import_module(module_name), attribute or "app")

    if not isinstance(target, App) and callable(target):
        try:
            target = target()
        except Exception as exc:
            msg = f"App factory {import_string!r} raised: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(target, App):
        msg = f"{import_string!r} resolved to {type(target).__name__}, not a signpost.App instance"
        raise TypeError(msg)
    return target
