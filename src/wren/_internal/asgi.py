"""Typed ASGI definitions.

Replaces the standard Scope = MutableMapping[str, Any] with a typed
dataclass for internal use. Users never see these.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, MutableMapping
from dataclasses import dataclass
from typing import Any, TypeAlias

# Raw ASGI types (matching the ASGI 3.0 interface)
Scope: TypeAlias = MutableMapping[str, Any]
Receive: TypeAlias = Callable[[], Awaitable[MutableMapping[str, Any]]]
Send: TypeAlias = Callable[[MutableMapping[str, Any]], Awaitable[None]]


@dataclass(frozen=True, slots=True)
class HTTPScope:
    """Typed HTTP scope parsed from raw ASGI scope dict.

    Only the parts dispatch needs: method, path and headers. Header
    names are lower-cased and decoded as latin-1.
    """

    method: str
    path: str
    query_string: bytes
    headers: dict[str, str]

    @classmethod
    def from_scope(cls, scope: Scope, *, default_path: str = "/") -> HTTPScope:
        """Parse raw ASGI scope into typed object."""
        headers: dict[str, str] = {}
        for name, value in scope.get("headers", ()):
            headers[name.decode("latin-1").lower()] = value.decode("latin-1")
        return cls(
            method=scope["method"],
            path=scope.get("path") or default_path,
            query_string=scope.get("query_string", b""),
            headers=headers,
        )
