"""The signpost ``App``: a root ``NamedRouter`` plus an ASGI entry point.

Setup is mutable: routes, nested routers, error handlers, middleware,
and lifecycle hooks are collected as the application module imports.
The first ASGI event (lifespan startup, or the first request when the
server skips lifespan) freezes the app. Freezing builds the dispatch
``Router`` and the ``RouteTable`` exactly once; after that every
setup method raises.
"""

import logging
import threading
from collections.abc import Callable
from pathlib import Path
from typing import Any

from signpost._internal.asgi import Receive, Scope, Send
from signpost._internal.invoke import invoke
from signpost._internal.types import (
    ErrorHandler,
    ErrorHandlerKey,
    Handler,
    LifecycleHook,
    Middleware,
)
from signpost.config import AppConfig
from signpost.routing.named import NamedRouter
from signpost.routing.router import Router
from signpost.routing.table import RouteTable
from signpost.server.handler import handle_request

logger = logging.getLogger("signpost.app")


class App:
    """A signpost application.

    Usage::

        app = App()

        @app.route("/", name="index")
        def index(routes: RouteTable):
            return f'<a href="{routes.require("ui.other")}">other</a>'

        app.nest("ui", "/ui/", ui_router)

    Thread safety:
        Setup runs on one thread at import time. Freezing takes a lock
        and re-checks the flag, so concurrent first requests compile
        the route tree once.
    """

    __slots__ = (
        "_error_handlers",
        "_frozen",
        "_lock",
        "_on_shutdown",
        "_on_startup",
        "_pending_middleware",
        "_root",
        # Populated by _freeze()
        "_middleware",
        "_router",
        "_routes",
        "_template_env",
        "config",
    )

    def __init__(self, config: AppConfig | None = None) -> None:
        self.config: AppConfig = config or AppConfig()
        self._root = NamedRouter(self.config.name_separator)
        self._error_handlers: dict[ErrorHandlerKey, ErrorHandler] = {}
        self._pending_middleware: list[Middleware] = []
        self._on_startup: list[LifecycleHook] = []
        self._on_shutdown: list[LifecycleHook] = []
        self._lock = threading.Lock()
        self._frozen = False

        self._router: Router | None = None
        self._routes: RouteTable | None = None
        self._middleware: tuple[Middleware, ...] = ()
        self._template_env: Any = None

    # -- Setup --

    def route(
        self,
        path: str,
        *,
        name: str | None = None,
        methods: list[str] | None = None,
    ) -> Callable[[Handler], Handler]:
        """Decorator: serve the handler at *path* under route *name*.

        *name* defaults to the handler's ``__name__`` and *methods*
        to ``["GET"]``. A name that is already taken raises
        ``DuplicateRouteName`` immediately.
        """

        def register(func: Handler) -> Handler:
            self._check_not_frozen()
            self._root.route(name or func.__name__, path, func, methods=methods)
            return func

        return register

    def nest(self, name: str, path: str, router: NamedRouter) -> None:
        """Mount *router* under a name prefix and path prefix."""
        self._check_not_frozen()
        self._root.nest(name, path, router)

    def merge(self, router: NamedRouter) -> None:
        """Add *router*'s routes without renaming them."""
        self._check_not_frozen()
        self._root.merge(router)

    def error(self, key: ErrorHandlerKey) -> Callable[[ErrorHandler], ErrorHandler]:
        """Decorator: handle a status code or exception class."""

        def register(func: ErrorHandler) -> ErrorHandler:
            self._check_not_frozen()
            self._error_handlers[key] = func
            return func

        return register

    def add_middleware(self, middleware: Middleware) -> None:
        """Append ``async def mw(request, next) -> Response`` to the pipeline.

        The first middleware added is the outermost.
        """
        self._check_not_frozen()
        self._pending_middleware.append(middleware)

    def on_startup(self, func: LifecycleHook) -> LifecycleHook:
        """Decorator: run *func* after the app freezes at startup."""
        return self._add_hook(self._on_startup, func)

    def on_shutdown(self, func: LifecycleHook) -> LifecycleHook:
        """Decorator: run *func* at lifespan shutdown."""
        return self._add_hook(self._on_shutdown, func)

    def _add_hook(self, hooks: list[LifecycleHook], func: LifecycleHook) -> LifecycleHook:
        self._check_not_frozen()
        hooks.append(func)
        return func

    # -- Frozen state --

    @property
    def routes(self) -> RouteTable:
        """The route table. Accessing it freezes the app."""
        self._ensure_frozen()
        assert self._routes is not None
        return self._routes

    @property
    def router(self) -> Router:
        """The dispatch router. Accessing it freezes the app."""
        self._ensure_frozen()
        assert self._router is not None
        return self._router

    def url_for(self, name: str, /, **params: object) -> str:
        """Build a URL for *name* outside any request."""
        return self.routes.url_for(name, **params)

    # -- ASGI --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "lifespan":
            await self._lifespan(receive, send)
            return

        router, routes = self.router, self.routes
        await handle_request(
            scope,
            receive,
            send,
            router=router,
            routes=routes,
            middleware=self._middleware,
            error_handlers=self._error_handlers,
            template_env=self._template_env,
            debug=self.config.debug,
        )

    async def _lifespan(self, receive: Receive, send: Send) -> None:
        """Serve ASGI lifespan events until shutdown.

        The app freezes on ``lifespan.startup``, so duplicate names or
        conflicting paths fail startup rather than the first request.
        """
        while True:
            event = (await receive())["type"]
            if event == "lifespan.startup":
                try:
                    self._ensure_frozen()
                    await self._run_hooks(self._on_startup)
                except Exception as exc:
                    logger.exception("startup failed")
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})
            elif event == "lifespan.shutdown":
                await self._run_hooks(self._on_shutdown)
                await send({"type": "lifespan.shutdown.complete"})
                return

    @staticmethod
    async def _run_hooks(hooks: list[LifecycleHook]) -> None:
        for hook in hooks:
            await invoke(hook)

    def _ensure_frozen(self) -> None:
        if self._frozen:
            return
        with self._lock:
            if not self._frozen:
                self._freeze()

    def _freeze(self) -> None:
        # Caller holds self._lock. build() spends the registry; nothing that
        # can fail may run after it.
        template_env = self._load_templates()
        router, routes = self._root.build()
        self._router, self._routes = router, routes
        self._middleware = tuple(self._pending_middleware)
        self._template_env = template_env
        self._frozen = True
        logger.info(
            "app frozen: %d routes, %d middleware", len(routes), len(self._middleware)
        )

    def _load_templates(self) -> Any:
        if not Path(self.config.template_dir).is_dir():
            return None
        try:
            from signpost.templating.integration import create_environment
        except ImportError:
            logger.debug("kida not installed; Template returns are disabled")
            return None
        return create_environment(self.config)

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the app after it has started serving requests. "
                "Register and nest routes before the first request."
            )
            raise RuntimeError(msg)
