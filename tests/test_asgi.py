"""Tests for the ASGI surface — Router.__call__, lifespan, TestClient."""

import logging

from routecanal.config import RouterConfig
from routecanal.routing.route import Route, RouteBuilder
from routecanal.routing.router import Router
from routecanal.testing import TestClient, spy

ITEMS = r"/items/([a-z-0-9]*)/"


class TestHTTP:
    async def test_about_scenario(self) -> None:
        about = spy("About us")
        router = Router()
        router.add_route(RouteBuilder().set_pattern(r"/about").set_handler(about))

        async with TestClient(router) as client:
            response = await client.get("/about")

        assert about.call_count == 1
        assert response.status == 200
        assert response.text == "About us"

    async def test_items_scenario(self) -> None:
        items = spy("items")
        router = Router()
        router.add_route(Route.compile(ITEMS, items))

        async with TestClient(router) as client:
            await client.get("/items/guitar/")

        assert items.last_params == {"0": "items", "1": "guitar"}

    async def test_not_found(self) -> None:
        handler = spy()
        router = Router()
        router.add_route(Route.compile(r"/about", handler))

        async with TestClient(router) as client:
            response = await client.get("/nowhere")

        assert response.status == 404
        assert response.text == "404 page not found"
        assert response.content_type == "text/plain; charset=utf-8"
        assert handler.call_count == 0

    async def test_handler_failure(self, caplog) -> None:
        router = Router()
        router.add_route(Route.compile(r"/boom", spy(raises=RuntimeError("boom"))))

        with caplog.at_level(logging.CRITICAL, logger="routecanal.server"):
            async with TestClient(router) as client:
                response = await client.get("/boom")

        assert response.status == 500
        assert "boom" in response.text

    async def test_headers_and_status_round_trip(self) -> None:
        def created(writer, request, params) -> None:
            writer.set_status(201)
            writer.set_header("X-Item", params["1"])
            writer.set_header("Content-Type", "application/json")
            writer.write('{"ok": true}')

        router = Router()
        router.add_route(Route.compile(ITEMS, created))

        async with TestClient(router) as client:
            response = await client.post("/items/jet/", body=b"{}")

        assert response.status == 201
        assert response.content_type == "application/json"
        assert ("x-item", "jet") in response.headers

    async def test_handler_reads_body_and_query(self) -> None:
        async def echo(writer, request, params) -> None:
            body = await request.text()
            writer.write(f"{body}|{request.query['q'][0]}|{request.headers['x-token']}")

        router = Router()
        router.add_route(Route.compile(r"/echo", echo))

        async with TestClient(router) as client:
            response = await client.post("/echo?q=hi", body=b"payload", headers={"X-Token": "t"})

        assert response.text == "payload|hi|t"

    async def test_anchored_router(self) -> None:
        router = Router(RouterConfig(anchored=True))
        router.add_route(Route.compile(r"/about", spy("about")))

        async with TestClient(router) as client:
            assert (await client.get("/about")).status == 200
            assert (await client.get("/about-us")).status == 404


class TestLifespan:
    async def test_startup_and_shutdown(self) -> None:
        router = Router()
        router.add_route(Route.compile(r"/about", spy()))
        incoming = iter([{"type": "lifespan.startup"}, {"type": "lifespan.shutdown"}])
        sent: list[dict] = []

        async def receive() -> dict:
            return next(incoming)

        async def send(message: dict) -> None:
            sent.append(message)

        await router({"type": "lifespan", "asgi": {"version": "3.0"}}, receive, send)

        assert [m["type"] for m in sent] == [
            "lifespan.startup.complete",
            "lifespan.shutdown.complete",
        ]
        assert router.compiled is True


class TestOtherScopes:
    async def test_websocket_scope_is_ignored(self) -> None:
        handler = spy()
        router = Router()
        router.add_route(Route.compile(r"/", handler))
        sent: list[dict] = []

        async def receive() -> dict:
            return {"type": "websocket.connect"}

        async def send(message: dict) -> None:
            sent.append(message)

        await router({"type": "websocket", "path": "/"}, receive, send)

        assert sent == []
        assert handler.call_count == 0
