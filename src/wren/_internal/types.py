"""Shared type aliases used across wren modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Controller action -- bound method with a variable positional signature
Action: TypeAlias = Callable[..., Any]

# Controller -- a class (fresh instance per dispatch) or a shared instance
Controller: TypeAlias = type | object
