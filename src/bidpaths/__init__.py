"""Bidpaths — named backend endpoints and frontend routes for the contract marketplace client.

Listers post contracts, bidders bid on them. Every API path and every
navigation path the client uses lives in one immutable registry, looked
up by name.

Basic usage::

    from bidpaths import ENDPOINTS, ROUTES

    ENDPOINTS.auth.login            # "/api/login"
    ROUTES.lister.dashboard         # "/dashboard/lister"

Runtime lookups (names from config or user input)::

    from bidpaths import resolve, NotFoundError

    try:
        path = resolve("ROUTES", role, key)
    except NotFoundError:
        ...
"""

# Declare free-threading support (PEP 703)
_Py_mod_gil = 0

__version__ = "0.1.0.dev0"
__all__ = [
    "ENDPOINTS",
    "ROUTES",
    "BidpathsError",
    "ClientConfig",
    "ConfigurationError",
    "NotFoundError",
    "api_url",
    "app_url",
    "resolve",
    "resolve_path",
    "resolve_static",
    "with_segment",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import bidpaths`` fast while providing a clean top-level API.
    """
    if name in ("ENDPOINTS", "ROUTES", "resolve", "resolve_path", "resolve_static"):
        from bidpaths import registry as _registry

        return getattr(_registry, name)

    if name == "ClientConfig":
        from bidpaths.config import ClientConfig

        return ClientConfig

    if name in ("api_url", "app_url", "with_segment"):
        from bidpaths import urls as _urls

        return getattr(_urls, name)

    if name in ("BidpathsError", "ConfigurationError", "NotFoundError"):
        from bidpaths import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
