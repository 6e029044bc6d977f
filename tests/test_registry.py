"""Tests for signpost.routing.registry: building the name -> path mapping."""

import pytest

from signpost.errors import (
    DuplicateRouteName,
    InvalidRouteName,
    InvalidRoutePath,
    RegistryFinalized,
)
from signpost.routing.paths import RoutePath
from signpost.routing.registry import RouteRegistry
from signpost.routing.table import RouteTable


def _registry(**entries: str) -> RouteRegistry:
    reg = RouteRegistry()
    for name, path in entries.items():
        reg.register(name, path)
    return reg


def _snapshot(reg: RouteRegistry) -> dict[str, str]:
    return {name: str(path) for name, path in reg.items()}


class TestRegister:
    def test_distinct_names(self) -> None:
        reg = _registry(index="/", about="/about", user="/users/{id:int}")

        assert _snapshot(reg) == {
            "index": "/",
            "about": "/about",
            "user": "/users/{id:int}",
        }
        assert len(reg) == 3

    def test_accepts_route_path(self) -> None:
        reg = RouteRegistry()
        reg.register("index", RoutePath("/"))
        assert reg.lookup_builder("index") == RoutePath("/")

    def test_duplicate_name_raises(self) -> None:
        reg = _registry(index="/")

        with pytest.raises(DuplicateRouteName) as exc_info:
            reg.register("index", "/other")

        assert exc_info.value.name == "index"
        assert "index" in str(exc_info.value)

    def test_duplicate_name_leaves_entries_unchanged(self) -> None:
        reg = _registry(index="/", about="/about")

        with pytest.raises(DuplicateRouteName):
            reg.register("about", "/elsewhere")

        assert _snapshot(reg) == {"index": "/", "about": "/about"}

    def test_same_path_different_names_allowed(self) -> None:
        reg = _registry(home="/", index="/")
        assert reg.lookup_builder("home") == reg.lookup_builder("index")

    @pytest.mark.parametrize("name", ["", None, 42])
    def test_rejects_bad_names(self, name: object) -> None:
        reg = RouteRegistry()
        with pytest.raises(InvalidRouteName):
            reg.register(name, "/")  # type: ignore[arg-type]

    def test_rejects_unrooted_path(self) -> None:
        reg = RouteRegistry()
        with pytest.raises(InvalidRoutePath):
            reg.register("users", "users")
        assert len(reg) == 0

    def test_path_syntax_is_not_validated(self) -> None:
        """Only rootedness is checked; the dispatcher owns path syntax."""
        reg = _registry(weird="/share/<slug>")
        assert str(reg.lookup_builder("weird")) == "/share/<slug>"


class TestLookupBuilder:
    def test_present(self) -> None:
        reg = _registry(index="/")
        assert reg.lookup_builder("index") == RoutePath("/")

    def test_missing(self) -> None:
        assert RouteRegistry().lookup_builder("index") is None

    def test_contains_and_iter(self) -> None:
        reg = _registry(b="/b", a="/a")
        assert "a" in reg
        assert "c" not in reg
        assert list(reg) == ["b", "a"]


class TestNest:
    def test_prefixes_name_and_path(self) -> None:
        ui = _registry(index="/")
        root = RouteRegistry()

        root.nest("ui", "/ui/", ui)

        assert root.lookup_builder("ui.index") == RoutePath("/ui/")

    def test_nest_at_root(self) -> None:
        a = _registry(route_a="/a")
        root = RouteRegistry()

        root.nest("a", "/", a)

        assert root.lookup_builder("a.route_a") == RoutePath("/a")

    def test_nest_under_path(self) -> None:
        b = _registry(route_a="/a", route_b="/b")
        root = RouteRegistry()

        root.nest("b", "/b", b)

        assert _snapshot(root) == {"b.route_a": "/b/a", "b.route_b": "/b/b"}

    def test_same_registry_nested_twice(self) -> None:
        a = _registry(route_c="/c")
        root = RouteRegistry()

        root.nest("a", "/", a)
        root.nest("b", "/b", a)

        assert _snapshot(root) == {"a.route_c": "/c", "b.route_c": "/b/c"}
        # The sub-registry is read, not consumed or renamed
        assert _snapshot(a) == {"route_c": "/c"}

    def test_deep_nesting(self) -> None:
        leaf = _registry(detail="/{id:int}")
        mid = RouteRegistry()
        mid.nest("users", "/users", leaf)
        root = RouteRegistry()
        root.nest("api", "/api/v1", mid)

        assert root.lookup_builder("api.users.detail") == RoutePath("/api/v1/users/{id:int}")

    def test_custom_separator(self) -> None:
        ui = _registry(index="/")
        root = RouteRegistry(separator=":")

        root.nest("ui", "/ui", ui)

        assert root.separator == ":"
        assert root.lookup_builder("ui:index") == RoutePath("/ui")
        assert root.lookup_builder("ui.index") is None

    def test_collision_raises(self) -> None:
        root = _registry(**{"ui.index": "/"})

        with pytest.raises(DuplicateRouteName) as exc_info:
            root.nest("ui", "/ui", _registry(index="/"))

        assert exc_info.value.name == "ui.index"

    def test_collision_is_atomic(self) -> None:
        root = _registry(**{"ui.other": "/legacy"})
        ui = _registry(index="/", other="/other", third="/third")

        with pytest.raises(DuplicateRouteName):
            root.nest("ui", "/ui", ui)

        assert _snapshot(root) == {"ui.other": "/legacy"}

    def test_empty_name_prefix_rejected(self) -> None:
        with pytest.raises(InvalidRouteName):
            RouteRegistry().nest("", "/ui", _registry(index="/"))

    def test_unrooted_path_prefix_rejected(self) -> None:
        with pytest.raises(InvalidRoutePath):
            RouteRegistry().nest("ui", "ui", _registry(index="/"))

    def test_nest_empty_registry(self) -> None:
        root = _registry(index="/")
        root.nest("empty", "/empty", RouteRegistry())
        assert _snapshot(root) == {"index": "/"}


class TestMerge:
    def test_disjoint_union(self) -> None:
        left = _registry(a="/a")
        right = _registry(b="/b", c="/c")

        left.merge(right)

        assert _snapshot(left) == {"a": "/a", "b": "/b", "c": "/c"}

    def test_does_not_rename(self) -> None:
        left = RouteRegistry(separator=":")
        left.merge(_registry(index="/"))
        assert "index" in left

    def test_collision_raises_first_in_insertion_order(self) -> None:
        left = _registry(x="/x", y="/y")
        right = _registry(a="/a", y="/other", x="/other")

        with pytest.raises(DuplicateRouteName) as exc_info:
            left.merge(right)

        assert exc_info.value.name == "y"

    def test_collision_is_atomic(self) -> None:
        left = _registry(a="/a", shared="/s")
        right = _registry(b="/b", shared="/t")

        with pytest.raises(DuplicateRouteName):
            left.merge(right)

        assert _snapshot(left) == {"a": "/a", "shared": "/s"}
        assert _snapshot(right) == {"b": "/b", "shared": "/t"}


class TestFinalize:
    def test_produces_table(self) -> None:
        reg = _registry(index="/", about="/about")

        table = reg.finalize()

        assert isinstance(table, RouteTable)
        assert table.require("about") == RoutePath("/about")
        assert reg.finalized is True

    def test_registry_is_spent(self) -> None:
        reg = _registry(index="/")
        reg.finalize()

        with pytest.raises(RegistryFinalized):
            reg.register("about", "/about")
        with pytest.raises(RegistryFinalized):
            reg.merge(RouteRegistry())
        with pytest.raises(RegistryFinalized):
            reg.nest("x", "/x", RouteRegistry())
        with pytest.raises(RegistryFinalized):
            reg.finalize()

    def test_table_unaffected_by_later_source_changes(self) -> None:
        sub = _registry(index="/")
        root = RouteRegistry()
        root.nest("ui", "/ui", sub)
        table = root.finalize()

        sub.register("late", "/late")

        assert "ui.late" not in table
        assert len(table) == 1

    def test_repr(self) -> None:
        reg = _registry(index="/")
        assert "1 routes" in repr(reg)
        reg.finalize()
        assert "finalized" in repr(reg)
