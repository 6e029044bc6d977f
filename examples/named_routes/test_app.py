"""Tests for the named_routes example."""


class TestNamedRoutesApp:
    async def test_index(self, example_client) -> None:
        response = await example_client.get("/ui/")
        assert response.status == 200
        assert response.text == "Hello, World!"

    async def test_nested_route_finds_itself(self, example_client) -> None:
        response = await example_client.get("/ui/other")
        assert response.status == 200
        assert response.text == '{"self": "/ui/other"}'

    async def test_top_level_other_is_distinct(self, example_client) -> None:
        response = await example_client.get("/other")
        assert response.status == 200
        assert response.text == '{"nested": "/ui/other", "mine": "/other", "same": false}'

    async def test_unknown_path(self, example_client) -> None:
        response = await example_client.get("/ui/missing")
        assert response.status == 404

    def test_table(self, example_app) -> None:
        assert {name: str(path) for name, path in example_app.routes.items()} == {
            "ui.index": "/ui/",
            "ui.other": "/ui/other",
            "other": "/other",
        }

    def test_reverse_lookup(self, example_app) -> None:
        assert example_app.routes.find_name_by_path("/ui/other") == "ui.other"
