"""Shape validation for the path registry.

Every leaf must be a non-empty string that starts with ``/`` and holds
no whitespace. ``validate_registry`` runs when ``bidpaths.registry`` is
imported, so a malformed template fails the import rather than the
first request that uses it.

Usage::

    issues = check_registry()
    for issue in issues:
        print(f"{issue.severity.value}: {issue.message}")

    # Or via CLI:
    #   bidpaths check
"""

import logging
from collections import defaultdict
from collections.abc import Mapping
from dataclasses import dataclass, is_dataclass
from enum import Enum

from bidpaths.errors import ConfigurationError
from bidpaths.registry.paths import NAMESPACES
from bidpaths.registry.resolve import iter_leaves, node_keys

logger = logging.getLogger("bidpaths.registry")


class Severity(Enum):
    """Severity of a registry validation issue."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True, slots=True)
class RegistryIssue:
    """A single finding from ``check_registry``."""

    severity: Severity
    category: str
    message: str
    location: str


def check_leaf(location: str, value: object) -> RegistryIssue | None:
    """Return the shape violation for one leaf, or None when it is well formed."""
    if not isinstance(value, str):
        return RegistryIssue(
            Severity.ERROR,
            "type",
            f"{location} must be a string, got {type(value).__name__}",
            location,
        )
    if not value:
        return RegistryIssue(Severity.ERROR, "empty", f"{location} is empty", location)
    if not value.startswith("/"):
        return RegistryIssue(
            Severity.ERROR,
            "relative",
            f"{location} must start with '/', got {value!r}",
            location,
        )
    if any(ch.isspace() for ch in value):
        return RegistryIssue(
            Severity.ERROR,
            "whitespace",
            f"{location} contains whitespace: {value!r}",
            location,
        )
    return None


def check_registry(namespaces: Mapping[str, object] | None = None) -> list[RegistryIssue]:
    """Inspect every leaf and return all issues found.

    Errors are shape violations. Info issues flag literal paths shared
    by several keys in one namespace, which is legitimate when the
    caller's HTTP method tells them apart.
    """
    table = NAMESPACES if namespaces is None else namespaces
    issues: list[RegistryIssue] = []

    for ns_name, ns_node in table.items():
        if not is_dataclass(ns_node):
            issues.append(
                RegistryIssue(
                    Severity.ERROR,
                    "structure",
                    f"{ns_name} must be a namespace node, got {type(ns_node).__name__}",
                    ns_name,
                )
            )
            continue
        for role in node_keys(ns_node):
            role_node = getattr(ns_node, role)
            if not is_dataclass(role_node):
                issues.append(
                    RegistryIssue(
                        Severity.ERROR,
                        "structure",
                        f"{ns_name}.{role} must be a role node, got {type(role_node).__name__}",
                        f"{ns_name}.{role}",
                    )
                )

    shared: dict[tuple[str, str], list[str]] = defaultdict(list)
    for leaf in iter_leaves(table):
        issue = check_leaf(leaf.dotted, leaf.path)
        if issue is not None:
            issues.append(issue)
            continue
        shared[(leaf.namespace, leaf.path)].append(leaf.dotted)

    for (_ns_name, path), locations in shared.items():
        if len(locations) > 1:
            issues.append(
                RegistryIssue(
                    Severity.INFO,
                    "shared-path",
                    f"{path!r} is shared by {', '.join(locations)}; callers must disambiguate by method",
                    locations[0],
                )
            )

    return issues


def validate_registry(namespaces: Mapping[str, object] | None = None) -> None:
    """Raise ``ConfigurationError`` if any leaf breaks the shape rules."""
    issues = check_registry(namespaces)
    errors = [issue for issue in issues if issue.severity is Severity.ERROR]
    for issue in issues:
        if issue.severity is not Severity.ERROR:
            logger.debug("%s: %s", issue.category, issue.message)

    if errors:
        lines = "\n".join(f"  - {issue.message}" for issue in errors)
        msg = f"Path registry has {len(errors)} invalid template(s):\n{lines}"
        raise ConfigurationError(msg)
