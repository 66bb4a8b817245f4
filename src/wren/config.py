"""Boundary configuration.

RouterConfig is a frozen dataclass -- immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """How the ASGI boundary turns outcomes into HTTP responses.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(debug=True, not_found_body="Nothing here")
    """

    # Used when the request carries no path at all
    default_path: str = "/"

    # NotFound outcome
    not_found_status: int = 404
    not_found_body: str = "Controller Not Found"

    # Uncaught handler exceptions
    error_body: str = "Internal Server Error"
    debug: bool = False  # Append the exception text to 500 bodies

    # Run each dispatch in a worker thread so blocking actions don't stall the loop
    threaded: bool = True
