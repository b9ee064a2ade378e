"""Server side of the router — dispatch pipeline, ASGI adapter, assembly."""
