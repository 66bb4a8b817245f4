"""Outcome negotiation -- turn dispatch outcomes into Responses.

Controller actions return whatever they like. The boundary maps:

    Response   -> sent as-is
    Redirect   -> 302 (or its status) with a Location header
    str/bytes  -> 200 text/html
    None       -> empty 200 (actions that only produce side effects)
    anything else -> 200 text/plain of ``str(value)``
"""

from typing import Any

from wren.config import RouterConfig
from wren.http.response import Redirect, Response
from wren.routing.outcome import Dispatched, MiddlewareShortCircuited, NotFound, Outcome


def negotiate(value: Any) -> Response:
    """Convert an action or middleware return value to a Response."""
    match value:
        case Response():
            return value
        case Redirect():
            return value.to_response()
        case str() | bytes():
            return Response(body=value)
        case None:
            return Response()
        case _:
            return Response(body=str(value), content_type="text/plain; charset=utf-8")


def render_outcome(outcome: Outcome, config: RouterConfig) -> Response:
    """Map a dispatch outcome to the Response the client receives."""
    match outcome:
        case Dispatched(result=result):
            return negotiate(result)
        case MiddlewareShortCircuited(response=response):
            return negotiate(response)
        case NotFound():
            return Response(
                body=config.not_found_body,
                status=config.not_found_status,
                content_type="text/plain; charset=utf-8",
            )
    msg = f"Unknown dispatch outcome: {outcome!r}"
    raise TypeError(msg)
