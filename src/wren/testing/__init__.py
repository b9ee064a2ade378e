"""Testing utilities for wren routers.

Provides ``TestClient``, which drives a router through its ASGI
interface in-process.

Usage::

    from wren.testing import TestClient

    async with TestClient(router) as client:
        response = await client.get("/users/42")
        assert response.status == 200
"""

from wren.testing.client import TestClient

__all__ = ["TestClient"]
