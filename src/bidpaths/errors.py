"""Bidpaths exception hierarchy.

Shared across the registry, URL helpers, and CLI so every module
raises and catches the same types.
"""


class BidpathsError(Exception):
    """Base for all bidpaths-specific errors."""


class ConfigurationError(BidpathsError):
    """Raised when the registry or client configuration is invalid.

    Typically raised while ``bidpaths.registry`` is being imported,
    when a path template breaks the leaf shape rules.
    """


class NotFoundError(BidpathsError, LookupError):
    """A dynamic lookup named a namespace, role, or key that does not exist.

    ``missing`` is the first segment that failed to resolve: one of
    ``"namespace"``, ``"role"`` or ``"key"``.
    """

    def __init__(self, namespace: str, role: str, key: str, missing: str = "key") -> None:
        # All four fields go to args so copy and pickle rebuild the same error.
        super().__init__(namespace, role, key, missing)
        self.namespace = namespace
        self.role = role
        self.key = key
        self.missing = missing

    @property
    def dotted(self) -> str:
        return f"{self.namespace}.{self.role}.{self.key}"

    def __str__(self) -> str:
        segment = getattr(self, self.missing, "")
        return f"No path registered for {self.dotted!r} (unknown {self.missing} {segment!r})"
