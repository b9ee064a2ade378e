"""Tests for wren.router — registration API and end-to-end ASGI dispatch."""

import logging

import pytest

from wren.config import ServerConfig
from wren.context import RequestContext
from wren.http.methods import HTTPMethod
from wren.http.request import Request
from wren.http.response import Response
from wren.router import Router
from wren.testing import TestClient


def _noop() -> None:
    return None


def _success(request: Request) -> str:
    assert request.context is not None
    params = dict(sorted(request.context.params.items()))
    return f"routePath:{request.context.route.path}|pathParam:{params}"


def _no_content() -> Response:
    return Response(body="").with_status(204)


@pytest.fixture
def router() -> Router:
    r = Router()
    r.add_route(HTTPMethod.GET, "/", _success)
    r.add_route(HTTPMethod.GET, "/data", _success)
    r.add_route(HTTPMethod.POST, "/data", _success)
    r.add_route(HTTPMethod.GET, "/data/:id", _success)
    r.add_route(HTTPMethod.PUT, "/data/:id", _no_content)
    r.add_route(HTTPMethod.DELETE, "/data/:id", _no_content)
    r.add_route(HTTPMethod.GET, "/data/:id/item", _success)
    r.add_route(HTTPMethod.GET, "/data/:id/:typeId", _success)
    return r


class TestRouterInit:
    def test_starts_without_routes(self) -> None:
        assert Router().routes == ()

    def test_default_logger(self) -> None:
        assert Router().logger is logging.getLogger("wren")

    def test_provided_logger(self) -> None:
        logger = logging.getLogger("tests.app")
        assert Router(logger=logger).logger is logger

    def test_default_config(self) -> None:
        assert Router().config == ServerConfig()


class TestRouterRegistration:
    def test_add_route(self) -> None:
        r = Router()
        r.add_route(HTTPMethod.GET, "/data", _noop)
        r.add_route(HTTPMethod.GET, "/data/:id", _noop)
        r.add_route(HTTPMethod.GET, "/data/:id/item", _noop)
        r.add_route(HTTPMethod.POST, "/data", _noop)
        r.add_route(HTTPMethod.PUT, "/data/:id", _noop)
        r.add_route(HTTPMethod.DELETE, "/data/:id", _noop)

        assert len(r.routes) == 6

    def test_decorators(self) -> None:
        r = Router()

        @r.get("/a")
        def a(): ...

        @r.post("/a")
        def b(): ...

        @r.put("/a")
        def c(): ...

        @r.patch("/a")
        def d(): ...

        @r.delete("/a")
        def e(): ...

        @r.options("/a")
        def f(): ...

        @r.head("/a")
        def g(): ...

        assert [route.method for route in r.routes] == list(HTTPMethod)
        assert r.routes[0].handler is a

    def test_route_decorator_returns_function(self) -> None:
        r = Router()

        def handler(): ...

        assert r.route("GET", "/x")(handler) is handler


class TestRouterNotMatch:
    async def test_path_not_registered(self) -> None:
        r = Router()
        r.add_route(HTTPMethod.GET, "/data", _noop)
        r.add_route(HTTPMethod.POST, "/data", _noop)

        async with TestClient(r) as client:
            response = await client.put("/item", body=b"put body")

        assert response.status == 404
        assert response.body_bytes == b""
        assert response.header("x-trace-id") is None

    async def test_path_matches_but_not_method(self) -> None:
        r = Router()
        r.add_route(HTTPMethod.GET, "/data", _noop)
        r.add_route(HTTPMethod.POST, "/data", _noop)

        async with TestClient(r) as client:
            response = await client.put("/data", body=b"put body")

        assert response.status == 404
        assert response.body_bytes == b""


class TestRouterMatch:
    async def test_trace_header(self, router: Router) -> None:
        async with TestClient(router) as client:
            response = await client.get("")

        assert response.status == 200
        assert response.header("x-trace-id")

    async def test_root_without_trailing_slash(self, router: Router) -> None:
        async with TestClient(router) as client:
            response = await client.get("")

        assert response.text == "routePath:/|pathParam:{}"

    async def test_root_with_trailing_slash(self, router: Router) -> None:
        async with TestClient(router) as client:
            response = await client.get("/")

        assert response.text == "routePath:/|pathParam:{}"

    @pytest.mark.parametrize("suffix", ["", "/"])
    @pytest.mark.parametrize(
        ("method", "path", "status", "body"),
        [
            ("GET", "/data", 200, "routePath:/data|pathParam:{}"),
            ("POST", "/data", 200, "routePath:/data|pathParam:{}"),
            ("GET", "/data/DAT-123_abc", 200, "routePath:/data/:id|pathParam:{'id': 'DAT-123_abc'}"),
            ("PUT", "/data/DAT-0099", 204, ""),
            ("DELETE", "/data/DAT-001", 204, ""),
            (
                "GET",
                "/data/DAT-123_abc/item",
                200,
                "routePath:/data/:id/item|pathParam:{'id': 'DAT-123_abc'}",
            ),
            (
                "GET",
                "/data/DAT-123_abc/type_i0123",
                200,
                "routePath:/data/:id/:typeId|pathParam:{'id': 'DAT-123_abc', 'typeId': 'type_i0123'}",
            ),
        ],
    )
    async def test_nested_paths(
        self,
        router: Router,
        suffix: str,
        method: str,
        path: str,
        status: int,
        body: str,
    ) -> None:
        async with TestClient(router) as client:
            response = await client.request(method, path + suffix, body=b"req body")

        assert response.status == status
        assert response.text == body

    async def test_distinct_trace_ids(self, router: Router) -> None:
        async with TestClient(router) as client:
            first = await client.get("/data")
            second = await client.get("/data")

        assert first.header("x-trace-id") != second.header("x-trace-id")

    async def test_literal_case_insensitive(self, router: Router) -> None:
        async with TestClient(router) as client:
            response = await client.get("/DATA/Abc/ITEM")

        assert response.text == "routePath:/data/:id/item|pathParam:{'id': 'Abc'}"

    async def test_lowercase_method(self, router: Router) -> None:
        async with TestClient(router) as client:
            response = await client.request("get", "/data")

        assert response.status == 200

    async def test_first_registered_wins(self) -> None:
        r = Router()
        r.add_route(HTTPMethod.GET, "/data/:id", lambda id: f"param {id}")
        r.add_route(HTTPMethod.GET, "/data/active", lambda: "literal")

        async with TestClient(r) as client:
            response = await client.get("/data/active")

        assert response.text == "param active"

    async def test_query_string_ignored_for_matching(self, router: Router) -> None:
        async with TestClient(router) as client:
            response = await client.get("/data?page=2")

        assert response.status == 200

    async def test_handler_reads_body(self) -> None:
        r = Router()

        @r.post("/echo")
        async def echo(request: Request) -> dict[str, object]:
            return {"got": await request.json(), "trace": request.trace_id}

        async with TestClient(r) as client:
            response = await client.post("/echo", json={"a": 1})

        assert response.status == 200
        assert "application/json" in response.content_type
        assert '"got": {"a": 1}' in response.text
        assert response.header("x-trace-id") in response.text

    async def test_typed_context_injection(self) -> None:
        r = Router()

        @r.get("/users/:id")
        def get_user(context: RequestContext) -> str:
            return f"{context.route.path} {context.params['id']}"

        async with TestClient(r) as client:
            response = await client.get("/users/U1")

        assert response.text == "/users/:id U1"


class TestRouterASGI:
    async def test_lifespan(self) -> None:
        messages = iter([{"type": "lifespan.startup"}, {"type": "lifespan.shutdown"}])
        sent: list[str] = []

        async def receive():
            return next(messages)

        async def send(message):
            sent.append(message["type"])

        await Router()({"type": "lifespan"}, receive, send)

        assert sent == ["lifespan.startup.complete", "lifespan.shutdown.complete"]

    async def test_non_http_scope_ignored(self) -> None:
        sent: list[object] = []

        async def receive():
            return {}

        async def send(message):
            sent.append(message)

        await Router()({"type": "websocket"}, receive, send)
        assert sent == []

    async def test_dispatch_without_asgi(self, router: Router) -> None:
        response = await router.dispatch(Request(method="GET", path="/data/X"))
        assert response.text == "routePath:/data/:id|pathParam:{'id': 'X'}"
