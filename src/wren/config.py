"""Server configuration.

ServerConfig is a frozen dataclass — immutable after creation,
IDE-autocompletable. Values stay as written (timeouts are duration
strings such as ``"1m"`` or ``"1m30s"``); they are validated when a
server is built from them, not when the config is created.

Configuration documents are nested JSON objects addressed by dotted
keys::

    {"server": {"port": ":9000", "readTimeout": "5m", "writeTimeout": "10m"}}
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path
from typing import Any

from wren.errors import ConfigurationError

DEFAULT_ADDRESS = ":8080"
DEFAULT_TIMEOUT = "1m"
DEFAULT_CONFIG_PATH = Path("resources") / "config.json"

ADDRESS_KEY = "server.port"
READ_TIMEOUT_KEY = "server.readTimeout"
WRITE_TIMEOUT_KEY = "server.writeTimeout"


@dataclass(frozen=True, slots=True)
class ServerConfig:
    """Listener configuration. Immutable after creation.

    All fields have defaults. Override what you need::

        config = ServerConfig(address=":9000", read_timeout="5m")
    """

    address: str = DEFAULT_ADDRESS
    read_timeout: str = DEFAULT_TIMEOUT
    write_timeout: str = DEFAULT_TIMEOUT

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ServerConfig:
        """Build a config from a nested mapping, defaulting missing keys."""
        return cls(
            address=config_or_default(data, ADDRESS_KEY, DEFAULT_ADDRESS),
            read_timeout=config_or_default(data, READ_TIMEOUT_KEY, DEFAULT_TIMEOUT),
            write_timeout=config_or_default(data, WRITE_TIMEOUT_KEY, DEFAULT_TIMEOUT),
        )


def config_or_default(data: Mapping[str, Any], key: str, default: Any) -> Any:
    """Look up a dotted *key* in nested mappings, returning *default* if absent."""
    node: Any = data
    for part in key.split("."):
        if not isinstance(node, Mapping) or part not in node:
            return default
        node = node[part]
    return node


def load_config(path: str | Path = DEFAULT_CONFIG_PATH) -> ServerConfig:
    """Read a JSON configuration document.

    A missing file yields the defaults. A file that is not a JSON object
    raises ``ConfigurationError``.
    """
    path = Path(path)
    if not path.is_file():
        return ServerConfig()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        msg = f"{path} is not valid JSON: {exc}"
        raise ConfigurationError(msg) from exc

    if not isinstance(data, Mapping):
        msg = f"{path} must contain a JSON object, got {type(data).__name__}"
        raise ConfigurationError(msg)
    return ServerConfig.from_mapping(data)


# -- Durations --

# Seconds per unit; both micro signs are accepted for microseconds
_UNITS: dict[str, float] = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "μs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}

_COMPONENT = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|μs|ms|s|m|h)")


def parse_duration(text: str) -> timedelta:
    """Parse a duration string like ``"300ms"``, ``"1m"`` or ``"1h30m"``.

    A duration is an optional sign followed by one or more
    number-and-unit components. Valid units are ``ns``, ``us`` (or
    ``µs``), ``ms``, ``s``, ``m``, ``h``. The bare string ``"0"`` is
    also accepted.

    Raises ``ValueError`` for anything else, including durations too
    large to represent.
    """
    if not isinstance(text, str):
        msg = f"duration must be a string, got {type(text).__name__}"
        raise ValueError(msg)

    rest = text
    sign = 1.0
    if rest[:1] in ("-", "+"):
        sign = -1.0 if rest[0] == "-" else 1.0
        rest = rest[1:]

    if rest == "0":
        return timedelta(0)
    if not rest:
        msg = f"invalid duration {text!r}"
        raise ValueError(msg)

    seconds = 0.0
    pos = 0
    while pos < len(rest):
        component = _COMPONENT.match(rest, pos)
        if component is None:
            msg = f"invalid duration {text!r}"
            raise ValueError(msg)
        number, unit = component.groups()
        seconds += float(number) * _UNITS[unit]
        pos = component.end()

    try:
        return timedelta(seconds=sign * seconds)
    except OverflowError as exc:
        msg = f"invalid duration {text!r}"
        raise ValueError(msg) from exc


def format_duration(value: timedelta) -> str:
    """Render a timedelta the way durations are written in config (``"1m0s"``)."""
    total = value.total_seconds()
    sign = "-" if total < 0 else ""
    total = abs(total)
    if total == 0:
        return "0s"
    if total < 1:
        return f"{sign}{total * 1000:g}ms"

    hours, remainder = divmod(total, 3600)
    minutes, seconds = divmod(remainder, 60)
    parts: list[str] = []
    if hours:
        parts.append(f"{int(hours)}h")
    if hours or minutes:
        parts.append(f"{int(minutes)}m")
    parts.append(f"{seconds:g}s")
    return sign + "".join(parts)
