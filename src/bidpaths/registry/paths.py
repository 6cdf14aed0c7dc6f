"""The path registry: backend endpoints and frontend routes by symbolic name.

Each role is a frozen, slotted dataclass whose field names are the keys
and whose defaults are the literal path templates. Attribute access
(``ENDPOINTS.auth.login``) is the static lookup: a misspelled key is an
error in the IDE and the type checker, never a runtime surprise.

A template ending in ``/`` is a prefix: callers append exactly one
segment (see ``bidpaths.urls.with_segment``). Anything else is used
verbatim.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Final

# ---------------------------------------------------------------------------
# ENDPOINTS — backend API paths
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class AuthEndpoints:
    login: str = "/api/login"
    register: str = "/api/register/user"


@dataclass(frozen=True, slots=True)
class ListerEndpoints:
    """Contract management for listers.

    ``getContracts`` and ``createContract`` share a path; the caller
    picks GET or POST.
    """

    getContracts: str = "/api/contract"  # noqa: N815
    createContract: str = "/api/contract"  # noqa: N815
    contract: str = "/api/contract/lister-contract/"


@dataclass(frozen=True, slots=True)
class BidderEndpoints:
    contracts: str = "/api/contract/bidder"


@dataclass(frozen=True, slots=True)
class Endpoints:
    """Backend API path templates, by role."""

    auth: AuthEndpoints = field(default_factory=AuthEndpoints)
    lister: ListerEndpoints = field(default_factory=ListerEndpoints)
    bidder: BidderEndpoints = field(default_factory=BidderEndpoints)


# ---------------------------------------------------------------------------
# ROUTES — frontend navigation paths
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ListerRoutes:
    dashboard: str = "/dashboard/lister"
    stats: str = "/dashboard/lister/stats"
    listContract: str = "/dashboard/lister/add"  # noqa: N815


@dataclass(frozen=True, slots=True)
class AuthRoutes:
    """No auth routes yet. Declared so callers can reference the role."""


@dataclass(frozen=True, slots=True)
class BidderRoutes:
    """No bidder routes yet. Declared so callers can reference the role."""


@dataclass(frozen=True, slots=True)
class Routes:
    """Frontend navigation path templates, by role."""

    lister: ListerRoutes = field(default_factory=ListerRoutes)
    auth: AuthRoutes = field(default_factory=AuthRoutes)
    bidder: BidderRoutes = field(default_factory=BidderRoutes)


ENDPOINTS: Final = Endpoints()
ROUTES: Final = Routes()

# Top-level namespaces, keyed by the names dynamic lookups use.
NAMESPACES: Final = MappingProxyType({"ENDPOINTS": ENDPOINTS, "ROUTES": ROUTES})
