"""Login-state middleware.

Two guards built on one collaborator: a ``current_user`` callback that
looks up the user for the in-flight request (from a session store, a
token, whatever the application uses). Wren does not manage sessions.

Usage::

    from wren.middleware.auth import AuthConfig, AuthMiddleware, GuestMiddleware

    auth = AuthConfig(current_user=session_service.current)

    registry.add("GET", "/users/profile", UserController, "profile", [AuthMiddleware(auth)])
    registry.add("GET", "/users/login", UserController, "login", [GuestMiddleware(auth)])
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from wren.context import DispatchContext
from wren.http.response import Redirect
from wren.middleware.protocol import CONTINUE, Decision, Halt

logger = logging.getLogger("wren.security")


@dataclass(frozen=True, slots=True)
class AuthConfig:
    """Login-state middleware configuration.

    Attributes:
        current_user: Returns the user for the request, or ``None`` when
            nobody is logged in.
        login_url: Where ``AuthMiddleware`` sends anonymous visitors.
        home_url: Where ``GuestMiddleware`` sends logged-in users.
        state_key: ``context.state`` key the user is stored under.
    """

    current_user: Callable[[DispatchContext], Any | None]
    login_url: str = "/users/login"
    home_url: str = "/"
    state_key: str = "user"


class AuthMiddleware:
    """Let only logged-in users through.

    Anonymous requests are halted with a redirect to ``login_url``.
    Authenticated requests continue with the user available as
    ``context.state[config.state_key]``.
    """

    __slots__ = ("config",)

    def __init__(self, config: AuthConfig) -> None:
        self.config = config

    def __call__(self, context: DispatchContext) -> Decision:
        user = self.config.current_user(context)
        if user is None:
            logger.info(
                "auth.denied %s %s -> %s", context.method, context.path, self.config.login_url
            )
            return Halt(Redirect(self.config.login_url))
        context.state[self.config.state_key] = user
        return CONTINUE


class GuestMiddleware:
    """Let only anonymous visitors through (login and register pages).

    Logged-in users are halted with a redirect to ``home_url``.
    """

    __slots__ = ("config",)

    def __init__(self, config: AuthConfig) -> None:
        self.config = config

    def __call__(self, context: DispatchContext) -> Decision:
        if self.config.current_user(context) is not None:
            logger.info(
                "auth.guest_only %s %s -> %s", context.method, context.path, self.config.home_url
            )
            return Halt(Redirect(self.config.home_url))
        return CONTINUE


MustLoginMiddleware = AuthMiddleware
MustNotLoginMiddleware = GuestMiddleware
