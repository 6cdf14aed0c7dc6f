"""Lookup and export over the path registry.

Two access modes:

- Static: attribute access on ``ENDPOINTS`` / ``ROUTES``. Total for every
  declared key. ``resolve_static`` exists only to name that operation.
- Dynamic: ``resolve(namespace, role, key)`` for strings known only at
  runtime. Partial; raises ``NotFoundError`` instead of guessing.

Usage::

    from bidpaths.registry import ENDPOINTS, resolve

    ENDPOINTS.auth.login                     # "/api/login"
    resolve("ROUTES", "lister", "stats")     # "/dashboard/lister/stats"
    resolve("ROUTES", "auth", "login")       # NotFoundError
"""

import json
from collections.abc import Iterator, Mapping
from dataclasses import asdict, dataclass, fields, is_dataclass
from typing import Any

from bidpaths.errors import ConfigurationError, NotFoundError
from bidpaths.registry.paths import NAMESPACES


@dataclass(frozen=True, slots=True)
class Leaf:
    """One registered path template and where it lives."""

    namespace: str
    role: str
    key: str
    path: str

    @property
    def dotted(self) -> str:
        return f"{self.namespace}.{self.role}.{self.key}"


def node_keys(node: object) -> tuple[str, ...]:
    """Return the declared keys of an interior node, in declaration order.

    Only dataclass fields count, so dunder and method names never
    resolve as keys. Anything that is not a dataclass instance has no keys.
    """
    if not is_dataclass(node) or isinstance(node, type):
        return ()
    return tuple(f.name for f in fields(node))


def resolve_static(path: str) -> str:
    """Return a path already selected by attribute access.

    ``resolve_static(ENDPOINTS.auth.login)`` reads the same as
    ``ENDPOINTS.auth.login``; the lookup has happened by the time this runs.
    """
    return path


def resolve(
    namespace: str,
    role: str,
    key: str,
    *,
    namespaces: Mapping[str, object] | None = None,
) -> str:
    """Resolve a path template from runtime strings.

    Raises ``NotFoundError`` naming the first segment that does not exist.
    Only leaves resolve; naming an interior node as the key is not found.
    """
    table = NAMESPACES if namespaces is None else namespaces

    ns_node = table.get(namespace)
    if ns_node is None:
        raise NotFoundError(namespace, role, key, missing="namespace")

    if role not in node_keys(ns_node):
        raise NotFoundError(namespace, role, key, missing="role")
    role_node = getattr(ns_node, role)

    if key not in node_keys(role_node):
        raise NotFoundError(namespace, role, key, missing="key")
    value = getattr(role_node, key)

    if not isinstance(value, str):
        raise NotFoundError(namespace, role, key, missing="key")
    return value


def resolve_path(dotted: str, *, namespaces: Mapping[str, object] | None = None) -> str:
    """Resolve ``"NAMESPACE.role.key"``.

    A string that is not exactly three dot-separated segments is not found.
    """
    namespace, _, rest = dotted.partition(".")
    role, _, key = rest.partition(".")
    return resolve(namespace, role, key, namespaces=namespaces)


def has(
    namespace: str,
    role: str,
    key: str,
    *,
    namespaces: Mapping[str, object] | None = None,
) -> bool:
    """Return True when ``resolve`` would succeed."""
    try:
        resolve(namespace, role, key, namespaces=namespaces)
    except NotFoundError:
        return False
    return True


def iter_leaves(namespaces: Mapping[str, object] | None = None) -> Iterator[Leaf]:
    """Yield every registered template in declaration order.

    Values are yielded as stored, so shape checks can inspect them.
    """
    table = NAMESPACES if namespaces is None else namespaces
    for ns_name, ns_node in table.items():
        for role in node_keys(ns_node):
            role_node = getattr(ns_node, role)
            for key in node_keys(role_node):
                yield Leaf(ns_name, role, key, getattr(role_node, key))


def to_mapping(namespaces: Mapping[str, object] | None = None) -> dict[str, dict[str, dict[str, str]]]:
    """Return the registry as nested plain dicts. Empty roles map to ``{}``."""
    table = NAMESPACES if namespaces is None else namespaces
    return {name: asdict(node) for name, node in table.items()}  # type: ignore[call-overload]


def to_json(indent: int | None = 2, *, namespaces: Mapping[str, object] | None = None) -> str:
    """Serialize the registry mapping to JSON."""
    return json.dumps(to_mapping(namespaces), indent=indent)


def from_json(text: str) -> dict[str, dict[str, dict[str, str]]]:
    """Parse JSON produced by ``to_json`` back into nested dicts.

    Raises ``ConfigurationError`` when the document is not a
    namespace -> role -> key -> string mapping, or when a path breaks
    the same shape rules the registry enforces at import.
    """
    from bidpaths.registry.validate import check_leaf

    data: Any = json.loads(text)
    if not isinstance(data, dict):
        msg = f"Registry JSON must be an object, got {type(data).__name__}"
        raise ConfigurationError(msg)

    for ns_name, roles in data.items():
        if not isinstance(roles, dict):
            msg = f"Namespace {ns_name!r} must map roles to objects"
            raise ConfigurationError(msg)
        for role, keys in roles.items():
            if not isinstance(keys, dict):
                msg = f"Role {ns_name}.{role} must map keys to paths"
                raise ConfigurationError(msg)
            for key, value in keys.items():
                issue = check_leaf(f"{ns_name}.{role}.{key}", value)
                if issue is not None:
                    raise ConfigurationError(issue.message)
    return data
