"""Server assembly — validated listener settings around a router.

The router does not own a network listener. ``build_server`` turns a
``ServerConfig`` into a ``Server`` whose timeouts are known to parse;
``Server.run()`` hands the router to pounce, which owns connections,
workers and TLS.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import timedelta
from typing import TYPE_CHECKING

from wren.config import (
    ADDRESS_KEY,
    READ_TIMEOUT_KEY,
    WRITE_TIMEOUT_KEY,
    ServerConfig,
    format_duration,
    parse_duration,
)
from wren.errors import ConfigurationError

if TYPE_CHECKING:
    from wren.router import Router

# Bind address used when the configured address has no host part (":8080")
ALL_INTERFACES = "0.0.0.0"


@dataclass(frozen=True, slots=True)
class Server:
    """A router plus validated listener settings. Immutable after creation."""

    address: str
    read_timeout: timedelta
    write_timeout: timedelta
    app: Router = field(repr=False)
    logger: logging.Logger = field(repr=False)

    @property
    def host(self) -> str:
        """Host part of ``address``; all interfaces when empty."""
        host, _, _ = self.address.rpartition(":")
        host = host.strip("[]")
        return host or ALL_INTERFACES

    @property
    def port(self) -> int:
        """Port part of ``address``.

        Raises ``ConfigurationError`` if the address has no numeric port.
        """
        _, sep, port = self.address.rpartition(":")
        if not sep or not port.isdigit():
            msg = f"server.port invalid: {self.address!r}, expected '[host]:port' (e.g. ':8080')"
            raise ConfigurationError(msg)
        return int(port)

    def __str__(self) -> str:
        return (
            f"{self.address} (read timeout {format_duration(self.read_timeout)}, "
            f"write timeout {format_duration(self.write_timeout)})"
        )

    def run(self) -> None:
        """Serve the router with pounce until interrupted.

        Requires the ``server`` extra. pounce has a single per-request
        timeout, so the longer of the read and write timeouts is used.
        """
        from pounce.config import ServerConfig as PounceConfig
        from pounce.server import Server as PounceServer

        config = PounceConfig(
            host=self.host,
            port=self.port,
            workers=1,
            request_timeout=max(self.read_timeout, self.write_timeout).total_seconds(),
        )
        self.logger.info("Serving on %s", self)
        PounceServer(config, self.app).run()


def _parse_timeout(value: str, key: str) -> timedelta:
    try:
        return parse_duration(value)
    except ValueError as exc:
        msg = f"{key} invalid, required duration string (e.g. '1m', '30s'), got {value!r}"
        raise ConfigurationError(msg) from exc


def build_server(app: Router, config: ServerConfig, logger: logging.Logger) -> Server:
    """Validate *config* and wrap *app* in a ``Server``.

    Raises ``ConfigurationError`` if the address is not a string or either
    timeout does not parse; no server is created in that case.
    """
    if not isinstance(config.address, str):
        msg = (
            f"{ADDRESS_KEY} invalid, required address string (e.g. ':8080'), "
            f"got {type(config.address).__name__}"
        )
        raise ConfigurationError(msg)

    read_timeout = _parse_timeout(config.read_timeout, READ_TIMEOUT_KEY)
    write_timeout = _parse_timeout(config.write_timeout, WRITE_TIMEOUT_KEY)

    return Server(
        address=config.address,
        read_timeout=read_timeout,
        write_timeout=write_timeout,
        app=app,
        logger=logger,
    )
