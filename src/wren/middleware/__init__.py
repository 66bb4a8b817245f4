"""Middleware -- Protocol-based, no inheritance required.

A middleware is any callable matching:
    def mw(context: DispatchContext) -> Continue | Halt

Built-in middleware:
    AuthMiddleware -- Only logged-in users pass (alias MustLoginMiddleware)
    GuestMiddleware -- Only anonymous visitors pass (alias MustNotLoginMiddleware)
"""

from wren.middleware.auth import (
    AuthConfig,
    AuthMiddleware,
    GuestMiddleware,
    MustLoginMiddleware,
    MustNotLoginMiddleware,
)
from wren.middleware.protocol import CONTINUE, Continue, Decision, Halt, Middleware

__all__ = [
    "CONTINUE",
    "AuthConfig",
    "AuthMiddleware",
    "Continue",
    "Decision",
    "GuestMiddleware",
    "Halt",
    "Middleware",
    "MustLoginMiddleware",
    "MustNotLoginMiddleware",
]
