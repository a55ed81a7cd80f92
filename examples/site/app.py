"""Site — a small catalogue served by a regex router.

Demonstrates the fluent builder, ``Route.compile``, the decorator form,
positional parameters, handler errors, and the descending match order
(``/items/...`` and ``/css/`` are tried before the catch-all ``/``).

Run:
    python app.py
    routecanal routes app:router
"""

from routecanal import HTTPError, Route, RouteBuilder, Router, RouterConfig

ITEMS = ("guitar", "bike", "rover", "jet")

STYLESHEETS = {
    "site.css": "body { font-family: sans-serif; }\n",
}

router = Router(RouterConfig(debug=True))


def index(writer, request, params):
    writer.write("<h1>RouteCanal</h1>")


def about(writer, request, params):
    writer.write("<h1>About RouteCanal</h1>")


def items(writer, request, params):
    # /items/<name>/ -> params["1"]; /items// has no second segment
    name = params.get("1")
    if name is None:
        writer.write("<ul>" + "".join(f"<li>{item}</li>" for item in ITEMS) + "</ul>")
        return
    if name not in ITEMS:
        raise HTTPError(status=404, detail=f"no such item: {name}")
    writer.write(f"<h1>{name}</h1>")


router.add_route(RouteBuilder().set_pattern(r"/").set_handler(index))
router.add_route(RouteBuilder().set_pattern(r"/items/([a-z-0-9]*)/").set_handler(items))
router.add_route(Route.compile(r"/about", about, name="about"))


@router.route(r"/css/")
def css(writer, request, params):
    sheet = STYLESHEETS.get(params.get("1", ""))
    if sheet is None:
        raise HTTPError(status=404, detail="stylesheet not found")
    writer.set_header("Content-Type", "text/css; charset=utf-8")
    writer.write(sheet)


@router.route(r"/broken")
def broken(writer, request, params):
    raise RuntimeError("the broken page is broken")


if __name__ == "__main__":
    router.run()
