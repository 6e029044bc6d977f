"""Callable shapes accepted by App and NamedRouter."""

from collections.abc import Awaitable, Callable
from typing import Any, TypeAlias

# def or async def; arguments are injected by parameter name or annotation
Handler: TypeAlias = Callable[..., Any]

# Takes (), (request,) or (request, exc)
ErrorHandler: TypeAlias = Callable[..., Any]

# Keyed by status code or exception class
ErrorHandlerKey: TypeAlias = int | type[Exception]

Middleware: TypeAlias = Callable[[Any, Callable[[Any], Awaitable[Any]]], Awaitable[Any]]

# Startup and shutdown hooks take no arguments
LifecycleHook: TypeAlias = Callable[[], Any]
