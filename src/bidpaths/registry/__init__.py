"""Registry — symbolic names for backend endpoints and frontend routes.

Built once at import, validated, and never mutated afterwards.
"""

from bidpaths.registry.paths import ENDPOINTS, NAMESPACES, ROUTES, Endpoints, Routes
from bidpaths.registry.resolve import (
    Leaf,
    from_json,
    has,
    iter_leaves,
    resolve,
    resolve_path,
    resolve_static,
    to_json,
    to_mapping,
)
from bidpaths.registry.validate import RegistryIssue, Severity, check_registry, validate_registry

__all__ = [
    "ENDPOINTS",
    "NAMESPACES",
    "ROUTES",
    "Endpoints",
    "Leaf",
    "RegistryIssue",
    "Routes",
    "Severity",
    "check_registry",
    "from_json",
    "has",
    "iter_leaves",
    "resolve",
    "resolve_path",
    "resolve_static",
    "to_json",
    "to_mapping",
    "validate_registry",
]

validate_registry()
