"""Test utilities for wren applications.

    from wren.testing import TestClient, TestResponse
"""

from wren.testing.client import TestClient, TestResponse

__all__ = ["TestClient", "TestResponse"]
