"""Tests for wren.app -- the ASGI boundary."""

import logging
from typing import Any

import pytest

from wren.app import App
from wren.config import RouterConfig
from wren.context import DispatchContext
from wren.http.response import Redirect, Response
from wren.middleware.protocol import Decision, Halt
from wren.routing.dispatcher import Dispatcher
from wren.routing.registry import RouteRegistry
from wren.testing import TestClient


class HomeController:
    def index(self) -> str:
        return "<h1>Home</h1>"

    def hello(self) -> str:
        return "hello"

    def silent(self) -> None:
        return None

    def created(self) -> Response:
        return Response("made", status=201).with_header("X-Id", "7")

    def moved(self) -> Redirect:
        return Redirect("/elsewhere", status=301)

    def count(self) -> int:
        return 42

    def explode(self) -> str:
        msg = "database is down"
        raise RuntimeError(msg)


class ProductController:
    def categories(self, product_id: str, category_id: str) -> str:
        return f"Product ID: {product_id}, Category ID: {category_id}"


def _reject(context: DispatchContext) -> Decision:
    return Halt(Redirect("/login"))


def _app(config: RouterConfig | None = None) -> App:
    registry = RouteRegistry()
    registry.add("GET", "/", HomeController, "index")
    registry.add("HEAD", "/", HomeController, "index")
    registry.add("GET", "/hello", HomeController, "hello", [_reject])
    registry.add(
        "GET",
        "/products/([0-9a-zA-Z]*)/categories/([0-9a-zA-Z]*)",
        ProductController,
        "categories",
    )
    registry.add("GET", "/silent", HomeController, "silent")
    registry.add("POST", "/created", HomeController, "created")
    registry.add("GET", "/moved", HomeController, "moved")
    registry.add("GET", "/count", HomeController, "count")
    registry.add("GET", "/boom", HomeController, "explode")
    return App(Dispatcher(registry), config)


class TestAppConstruction:
    def test_accepts_registry(self) -> None:
        registry = RouteRegistry()
        registry.add("GET", "/", HomeController, "index")

        app = App(registry)

        assert isinstance(app.dispatcher, Dispatcher)
        assert registry.frozen is True

    def test_default_config(self) -> None:
        app = App(RouteRegistry())
        assert app.config == RouterConfig()


@pytest.mark.anyio
class TestRendering:
    async def test_string_result(self) -> None:
        async with TestClient(_app()) as client:
            response = await client.get("/")
        assert response.status == 200
        assert response.text == "<h1>Home</h1>"
        assert response.header("content-type") == "text/html; charset=utf-8"
        assert response.header("content-length") == str(len("<h1>Home</h1>"))

    async def test_path_params(self) -> None:
        async with TestClient(_app()) as client:
            response = await client.get("/products/12345/categories/abcde")
        assert response.text == "Product ID: 12345, Category ID: abcde"

    async def test_none_result_is_empty_ok(self) -> None:
        async with TestClient(_app()) as client:
            response = await client.get("/silent")
        assert response.status == 200
        assert response.body == b""

    async def test_response_passthrough(self) -> None:
        async with TestClient(_app()) as client:
            response = await client.post("/created")
        assert response.status == 201
        assert response.text == "made"
        assert response.header("x-id") == "7"

    async def test_redirect_result(self) -> None:
        async with TestClient(_app()) as client:
            response = await client.get("/moved")
        assert response.status == 301
        assert response.header("location") == "/elsewhere"

    async def test_other_values_render_as_text(self) -> None:
        async with TestClient(_app()) as client:
            response = await client.get("/count")
        assert response.text == "42"
        assert response.header("content-type") == "text/plain; charset=utf-8"


@pytest.mark.anyio
class TestOutcomes:
    async def test_not_found(self) -> None:
        async with TestClient(_app()) as client:
            response = await client.get("/unknown")
        assert response.status == 404
        assert response.text == "Controller Not Found"

    async def test_wrong_method_is_not_found(self) -> None:
        async with TestClient(_app()) as client:
            response = await client.post("/")
        assert response.status == 404

    async def test_custom_not_found(self) -> None:
        config = RouterConfig(not_found_body="Nothing here", not_found_status=410)
        async with TestClient(_app(config)) as client:
            response = await client.get("/unknown")
        assert response.status == 410
        assert response.text == "Nothing here"

    async def test_middleware_halt_renders_its_response(self) -> None:
        async with TestClient(_app()) as client:
            response = await client.get("/hello")
        assert response.status == 302
        assert response.header("location") == "/login"
        assert response.body == b""

    async def test_handler_error_is_500(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.ERROR, logger="wren.server"):
            async with TestClient(_app()) as client:
                response = await client.get("/boom")
        assert response.status == 500
        assert response.text == "Internal Server Error"
        assert "database is down" not in response.text
        assert "500 GET /boom" in caplog.text

    async def test_debug_includes_exception(self) -> None:
        async with TestClient(_app(RouterConfig(debug=True))) as client:
            response = await client.get("/boom")
        assert response.status == 500
        assert "RuntimeError: database is down" in response.text

    async def test_head_sends_headers_without_body(self) -> None:
        async with TestClient(_app()) as client:
            response = await client.request("HEAD", "/")
        assert response.status == 200
        assert response.body == b""
        assert response.header("content-length") == str(len("<h1>Home</h1>"))
        assert response.header("content-type") == "text/html; charset=utf-8"

    async def test_get_still_sends_body(self) -> None:
        async with TestClient(_app()) as client:
            response = await client.get("/")
        assert response.body == b"<h1>Home</h1>"

    async def test_unthreaded_dispatch(self) -> None:
        async with TestClient(_app(RouterConfig(threaded=False))) as client:
            response = await client.get("/products/1/categories/2")
        assert response.text == "Product ID: 1, Category ID: 2"


@pytest.mark.anyio
class TestASGIProtocol:
    async def test_empty_path_uses_default(self) -> None:
        async with TestClient(_app()) as client:
            response = await client.get("")
        assert response.text == "<h1>Home</h1>"

    async def test_query_string_not_part_of_path(self) -> None:
        async with TestClient(_app()) as client:
            response = await client.get("/?page=2")
        assert response.status == 200

    async def test_lifespan(self) -> None:
        app = _app()
        messages = [{"type": "lifespan.startup"}, {"type": "lifespan.shutdown"}]
        sent: list[dict[str, Any]] = []

        async def receive() -> dict[str, Any]:
            return messages.pop(0)

        async def send(message: dict[str, Any]) -> None:
            sent.append(message)

        await app({"type": "lifespan"}, receive, send)

        assert [m["type"] for m in sent] == [
            "lifespan.startup.complete",
            "lifespan.shutdown.complete",
        ]

    async def test_websocket_scope_ignored(self) -> None:
        sent: list[dict[str, Any]] = []

        async def receive() -> dict[str, Any]:
            return {"type": "websocket.connect"}

        async def send(message: dict[str, Any]) -> None:
            sent.append(message)

        await _app()({"type": "websocket", "path": "/"}, receive, send)
        assert sent == []
