"""ASGI boundary -- serves a Dispatcher over HTTP.

The only component that touches raw ASGI. Converts the scope to a
``DispatchContext``, runs the dispatcher, renders the outcome and sends
it back through ASGI ``send()``.
"""

import logging

import anyio.to_thread

from wren._internal.asgi import HTTPScope, Receive, Scope, Send
from wren.config import RouterConfig
from wren.context import DispatchContext
from wren.http.response import Response
from wren.routing.dispatcher import Dispatcher
from wren.routing.outcome import NotFound, Outcome
from wren.routing.registry import RouteRegistry
from wren.server.negotiation import render_outcome
from wren.server.sender import send_response

logger = logging.getLogger("wren.server")


class App:
    """ASGI 3.0 application wrapping a dispatcher.

    Usage::

        registry = RouteRegistry()
        registry.add("GET", "/", HomeController, "index")
        app = App(Dispatcher(registry))

    Any ASGI server can serve ``app``. A ``RouteRegistry`` is accepted
    directly and wrapped in a fresh ``Dispatcher``.
    """

    __slots__ = ("config", "dispatcher")

    def __init__(
        self,
        dispatcher: Dispatcher | RouteRegistry,
        config: RouterConfig | None = None,
    ) -> None:
        if isinstance(dispatcher, RouteRegistry):
            dispatcher = Dispatcher(dispatcher)
        self.dispatcher = dispatcher
        self.config = config or RouterConfig()

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        if scope["type"] != "http":
            return

        parsed = HTTPScope.from_scope(scope, default_path=self.config.default_path)
        context = DispatchContext(
            method=parsed.method,
            path=parsed.path,
            headers=parsed.headers,
        )

        try:
            outcome = await self._dispatch(context)
        except Exception as exc:
            logger.exception("500 %s %s", context.method, context.path)
            response = self._error_response(exc)
        else:
            if isinstance(outcome, NotFound):
                logger.debug("404 %s %s", context.method, context.path)
            response = render_outcome(outcome, self.config)

        await send_response(response, send, head=context.method == "HEAD")

    async def _dispatch(self, context: DispatchContext) -> Outcome:
        if self.config.threaded:
            return await anyio.to_thread.run_sync(self.dispatcher.dispatch, context)
        return self.dispatcher.dispatch(context)

    def _error_response(self, exc: Exception) -> Response:
        body = self.config.error_body
        if self.config.debug:
            body = f"{body}\n\n{type(exc).__name__}: {exc}"
        return Response(body=body, status=500, content_type="text/plain; charset=utf-8")

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Acknowledge the ASGI lifespan protocol.

        The route table is already frozen by the dispatcher, so there is
        nothing to start or stop.
        """
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                logger.debug("Serving %d routes", len(self.dispatcher.registry))
                await send({"type": "lifespan.startup.complete"})
            elif msg_type == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return
