"""Tests for signpost.routing.named: NamedRouter composition and build."""

import pytest

from signpost.errors import ConfigurationError, DuplicateRouteName, RegistryFinalized
from signpost.routing.named import NamedRouter
from signpost.routing.paths import RoutePath


def dummy() -> str:
    return "ok"


def _paths(router: NamedRouter) -> dict[str, str]:
    return {name: str(path) for name, path in router.registry.items()}


class TestRegistration:
    def test_route_chains(self) -> None:
        router = NamedRouter().route("index", "/", dummy).route("about", "/about", dummy)

        assert _paths(router) == {"index": "/", "about": "/about"}
        assert [r.path for r in router.routes] == ["/", "/about"]
        assert [r.name for r in router.routes] == ["index", "about"]

    def test_add_decorator(self) -> None:
        router = NamedRouter()

        @router.add("create", "/items", methods=["post"])
        def create() -> str:
            return "created"

        assert router.lookup("create") == RoutePath("/items")
        assert router.routes[0].methods == frozenset({"POST"})
        assert router.routes[0].handler is create

    def test_default_method_is_get(self) -> None:
        router = NamedRouter().route("index", "/", dummy)
        assert router.routes[0].methods == frozenset({"GET"})

    def test_duplicate_name_leaves_dispatch_routes_alone(self) -> None:
        router = NamedRouter().route("index", "/", dummy)

        with pytest.raises(DuplicateRouteName):
            router.route("index", "/other", dummy)

        assert len(router) == 1


class TestNesting:
    def test_nesting(self) -> None:
        a = NamedRouter().route("route_a", "/a", dummy)
        b = NamedRouter().route("route_a", "/a", dummy).route("route_b", "/b", dummy)
        c = NamedRouter().route("route_c", "/c", dummy)

        app = NamedRouter().nest("a", "/", a).nest("b", "/b", b).nest("c", "/b", c)

        assert _paths(app) == {
            "a.route_a": "/a",
            "b.route_a": "/b/a",
            "b.route_b": "/b/b",
            "c.route_c": "/b/c",
        }

    def test_dispatch_paths_follow_names(self) -> None:
        ui = NamedRouter().route("index", "/", dummy).route("other", "/other", dummy)
        app = NamedRouter().nest("ui", "/ui/", ui).route("other", "/other", dummy)

        by_name = {r.name: r.path for r in app.routes}
        assert by_name == {"ui.index": "/ui/", "ui.other": "/ui/other", "other": "/other"}
        assert app.lookup("ui.index") == RoutePath("/ui/")

    def test_same_router_nested_twice(self) -> None:
        a = NamedRouter().route("route_c", "/c", dummy)

        app = NamedRouter().nest("a", "/", a).nest("b", "/b", a)

        assert _paths(app) == {"a.route_c": "/c", "b.route_c": "/b/c"}
        assert _paths(a) == {"route_c": "/c"}
        assert [r.path for r in a.routes] == ["/c"]

    def test_custom_separator(self) -> None:
        ui = NamedRouter().route("index", "/", dummy)
        app = NamedRouter(separator="/").nest("ui", "/ui", ui)

        assert app.lookup("ui/index") == RoutePath("/ui")
        assert app.routes[0].name == "ui/index"

    def test_name_collision_is_atomic(self) -> None:
        app = NamedRouter().route("ui.other", "/legacy", dummy)
        ui = NamedRouter().route("index", "/", dummy).route("other", "/other", dummy)

        with pytest.raises(DuplicateRouteName):
            app.nest("ui", "/ui", ui)

        assert _paths(app) == {"ui.other": "/legacy"}
        assert len(app) == 1


class TestMerging:
    def test_merge_union(self) -> None:
        left = NamedRouter().route("a", "/a", dummy)
        right = NamedRouter().route("b", "/b", dummy)

        left.merge(right)

        assert _paths(left) == {"a": "/a", "b": "/b"}
        assert [r.path for r in left.routes] == ["/a", "/b"]

    def test_merge_collision_is_atomic(self) -> None:
        left = NamedRouter().route("a", "/a", dummy)
        right = NamedRouter().route("z", "/z", dummy).route("a", "/other", dummy)

        with pytest.raises(DuplicateRouteName):
            left.merge(right)

        assert _paths(left) == {"a": "/a"}
        assert len(left) == 1


class TestBuild:
    def test_build_returns_router_and_table(self) -> None:
        ui = NamedRouter().route("index", "/", dummy)
        app = NamedRouter().nest("ui", "/ui/", ui)

        router, table = app.build()

        assert table.require("ui.index") == RoutePath("/ui/")
        match = router.match("GET", "/ui/")
        assert match.route.name == "ui.index"

    def test_route_overlap_rejected_by_dispatcher(self) -> None:
        a = NamedRouter().route("route_a", "/a", dummy)
        b = NamedRouter().route("route_a", "/a", dummy)
        app = NamedRouter().nest("a", "/", a).nest("b", "/", b)

        # Names differ, so the registry accepts both.
        assert len(app.registry) == 2

        with pytest.raises(ConfigurationError, match="Route conflict"):
            app.build()

    def test_path_syntax_errors_pass_through(self) -> None:
        app = NamedRouter().route("share", "/share/<slug>", dummy)

        with pytest.raises(ConfigurationError, match="<param>"):
            app.build()

    def test_router_spent_after_build(self) -> None:
        app = NamedRouter().route("index", "/", dummy)
        app.build()

        with pytest.raises(RegistryFinalized):
            app.route("about", "/about", dummy)
