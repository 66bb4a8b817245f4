"""Middleware protocol and the Continue / Halt decision types.

A middleware is any callable matching::

    def my_mw(context: DispatchContext) -> Decision: ...

No base class required. A middleware inspects the in-flight request and
either lets it through (``CONTINUE``) or stops it with a response
(``Halt(response)``). Halting skips the rest of the chain and the
controller action.
"""

from dataclasses import dataclass
from typing import Any, Protocol, TypeAlias

from wren.context import DispatchContext


@dataclass(frozen=True, slots=True)
class Continue:
    """Pass the request to the next middleware, or to the action."""


@dataclass(frozen=True, slots=True)
class Halt:
    """Stop dispatch. ``response`` is what the client gets instead."""

    response: Any


CONTINUE = Continue()

Decision: TypeAlias = Continue | Halt


class Middleware(Protocol):
    """Protocol for wren middleware.

    Accepts both functions and callable objects::

        # Function middleware
        def require_json(context: DispatchContext) -> Decision:
            if context.header("content-type") != "application/json":
                return Halt(Response("Unsupported", status=415))
            return CONTINUE

        # Class middleware
        class AuthMiddleware:
            def __call__(self, context: DispatchContext) -> Decision:
                ...

    A class with a no-argument constructor may be registered in place of
    an instance; the dispatcher then builds a fresh one per request.
    """

    def __call__(self, context: DispatchContext) -> Decision: ...
