"""URL path helpers for the docs and UI Blueprints."""

from __future__ import annotations

import re

_DEFAULT_PORTS = (80, 443)


def join_paths(*paths: str | None) -> str:
    """Join paths with "/", collapsing repeated slashes and dropping a trailing one.

    ``None`` parts are skipped.
    """
    joined = "/".join(p for p in paths if p is not None)
    return re.sub(r"/+", "/", joined).removesuffix("/")


def base_path(
    scheme: str,
    server_name: str,
    server_port: int | None = None,
    context: str = "",
    forwarded_proto: str | None = None,
) -> str:
    """Build the absolute base URL of the API.

    Default ports (80, 443) are left out. ``X-Forwarded-Proto`` is only
    honoured when it says ``https`` (app behind a TLS-terminating proxy).
    ``context`` is the application's mount prefix, if any.
    """
    if forwarded_proto == "https":
        scheme = "https"
    port = "" if server_port is None or server_port in _DEFAULT_PORTS else f":{server_port}"
    return f"{scheme}://{server_name}{port}{context}"


def split_host(host: str) -> tuple[str, int | None]:
    """Split a ``Host`` header value into name and port.

    Bracketed IPv6 literals keep their brackets: ``[::1]:5000`` gives
    ``("[::1]", 5000)``.
    """
    name, sep, port = host.rpartition(":")
    if not sep or not port.isdigit() or (name.startswith("[") and not name.endswith("]")):
        return host, None
    return name, int(port)
