"""Named routes: a nested UI router that links to itself by name.

Demonstrates nesting with a name prefix, ``RouteTable`` injection,
``require()`` for links that must exist, and ``get()`` for links that
may not.

Inspect the table:
    cd examples/named_routes && signpost routes app:app
"""

from signpost import App, NamedRouter, RouteTable

ui = NamedRouter()


@ui.add("index", "/")
def index():
    return "Hello, World!"


@ui.add("other", "/other")
def nested_other(routes: RouteTable):
    this_route = routes.require("ui.other")
    return {"self": str(this_route)}


app = App()
app.nest("ui", "/ui/", ui)


@app.route("/other", name="other")
def other(routes: RouteTable):
    nested = routes.get("ui.other")
    mine = routes.get("other")
    return {"nested": str(nested), "mine": str(mine), "same": nested == mine}
