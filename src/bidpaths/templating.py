"""Kida integration — expose the registry to templates.

Navigation templates link by symbolic name instead of literal path::

    <a href="{{ routes.lister.stats }}">Stats</a>
    <a href="{{ "ROUTES.lister.dashboard" | resolve_path }}">Dashboard</a>
    <form action="{{ endpoints.lister.contract | with_segment(contract.id) }}">
"""

from collections.abc import Callable
from typing import Any

from kida import Environment

from bidpaths.registry import ENDPOINTS, ROUTES, resolve_path
from bidpaths.urls import with_segment

PATH_GLOBALS: dict[str, Any] = {
    "endpoints": ENDPOINTS,
    "routes": ROUTES,
}

PATH_FILTERS: dict[str, Callable[..., Any]] = {
    "resolve_path": resolve_path,
    "with_segment": with_segment,
}


def register_paths(env: Environment) -> Environment:
    """Install registry globals and path filters on *env*.

    Returns the same environment for chaining.
    """
    env.update_filters(PATH_FILTERS)
    for name, value in PATH_GLOBALS.items():
        env.add_global(name, value)
    return env
