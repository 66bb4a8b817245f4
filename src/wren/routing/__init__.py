"""Routing -- ordered route table with first-match-wins dispatch.

Routes are registered during startup and frozen when a Dispatcher
takes ownership of the registry.
"""

from wren.routing.dispatcher import Dispatcher, match_route
from wren.routing.outcome import Dispatched, MiddlewareShortCircuited, NotFound, Outcome
from wren.routing.registry import HTTP_METHODS, RouteRegistry, RouteView
from wren.routing.route import HandlerRef, Route, RouteMatch

__all__ = [
    "HTTP_METHODS",
    "Dispatched",
    "Dispatcher",
    "HandlerRef",
    "MiddlewareShortCircuited",
    "NotFound",
    "Outcome",
    "Route",
    "RouteMatch",
    "RouteRegistry",
    "RouteView",
    "match_route",
]
