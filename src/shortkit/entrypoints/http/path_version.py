"""Versioning of REST API paths.

Clients written against the unversioned API call ``/rest/...``. Those paths
are rewritten to ``/rest/v1/...`` before routing so handlers only ever see
versioned paths. Paths outside ``/rest`` are left alone.

Examples:
    >>> versioned_path("/rest/short-urls/abc")
    '/rest/v1/short-urls/abc'
    >>> versioned_path("/rest/v2/short-urls")
    '/rest/v2/short-urls'
    >>> versioned_path("/abc123")
    '/abc123'
"""

from __future__ import annotations

import logging
import re

from starlette.types import ASGIApp, Receive, Scope, Send

logger = logging.getLogger(__name__)

DEFAULT_API_VERSION = "v1"
REST_PREFIX = "/rest"

_VERSION_SEGMENT = re.compile(r"^v\d+$")


def versioned_path(path: str, default_version: str = DEFAULT_API_VERSION) -> str:
    """Insert `default_version` into an unversioned ``/rest`` path.

    Args:
        path: The request path.
        default_version: Version segment to insert, e.g. ``"v1"``.

    Returns:
        The rewritten path, or `path` unchanged when it is outside ``/rest`` or
        already carries a ``v<N>`` segment right after it.
    """
    if path != REST_PREFIX and not path.startswith(f"{REST_PREFIX}/"):
        return path

    rest = path[len(REST_PREFIX) :]  # "" or "/..."
    first_segment = rest[1:].split("/", 1)[0]
    if _VERSION_SEGMENT.match(first_segment):
        return path
    return f"{REST_PREFIX}/{default_version}{rest}"


class PathVersionMiddleware:  # pylint: disable=too-few-public-methods
    """ASGI middleware applying `versioned_path` to every HTTP/WebSocket request."""

    def __init__(self, app: ASGIApp, default_version: str = DEFAULT_API_VERSION) -> None:
        self.app = app
        self.default_version = default_version

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] in {"http", "websocket"}:
            path = scope["path"]
            rewritten = versioned_path(path, self.default_version)
            if rewritten != path:
                logger.debug("Rewrote API path %s -> %s", path, rewritten)
                scope = dict(scope)
                scope["path"] = rewritten
                if raw_path := scope.get("raw_path"):
                    # raw_path keeps the client's percent-encoding
                    scope["raw_path"] = versioned_path(
                        raw_path.decode("latin-1"), self.default_version
                    ).encode("latin-1")
        await self.app(scope, receive, send)
