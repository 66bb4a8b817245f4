"""Tests for wren._internal.asgi -- typed ASGI definitions."""

import pytest

from wren._internal.asgi import HTTPScope


def _make_scope(**overrides: object) -> dict[str, object]:
    """Build a minimal valid ASGI HTTP scope dict."""
    base: dict[str, object] = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "GET",
        "path": "/",
        "raw_path": b"/",
        "query_string": b"",
        "root_path": "",
        "headers": [],
    }
    base.update(overrides)
    return base


class TestHTTPScope:
    def test_from_scope_basic(self) -> None:
        parsed = HTTPScope.from_scope(_make_scope(method="POST", path="/users/42"))

        assert parsed.method == "POST"
        assert parsed.path == "/users/42"
        assert parsed.headers == {}

    def test_headers_lowercased_and_decoded(self) -> None:
        raw_headers = [(b"Content-Type", b"text/html"), (b"cookie", b"sess=1")]
        parsed = HTTPScope.from_scope(_make_scope(headers=raw_headers))

        assert parsed.headers == {"content-type": "text/html", "cookie": "sess=1"}

    def test_missing_path_uses_default(self) -> None:
        minimal: dict[str, object] = {"type": "http", "method": "GET"}
        parsed = HTTPScope.from_scope(minimal)

        assert parsed.path == "/"
        assert parsed.query_string == b""

    def test_custom_default_path(self) -> None:
        parsed = HTTPScope.from_scope(_make_scope(path=""), default_path="/home")
        assert parsed.path == "/home"

    def test_frozen(self) -> None:
        parsed = HTTPScope.from_scope(_make_scope())
        with pytest.raises(AttributeError):
            parsed.method = "POST"  # type: ignore[misc]
