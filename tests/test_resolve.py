"""Tests for bidpaths.registry.resolve — dynamic lookup and export."""

import json
from dataclasses import dataclass, field

import pytest

from bidpaths.errors import ConfigurationError, NotFoundError
from bidpaths.registry import (
    ENDPOINTS,
    ROUTES,
    Endpoints,
    from_json,
    has,
    iter_leaves,
    resolve,
    resolve_path,
    to_json,
    to_mapping,
)


@dataclass(frozen=True, slots=True)
class AdminEndpoints:
    users: str = "/api/admin/users"


@dataclass(frozen=True, slots=True)
class EndpointsWithAdmin(Endpoints):
    admin: AdminEndpoints = field(default_factory=AdminEndpoints)


class TestResolve:
    def test_endpoint(self) -> None:
        assert resolve("ENDPOINTS", "auth", "login") == "/api/login"

    def test_route(self) -> None:
        assert resolve("ROUTES", "lister", "listContract") == "/dashboard/lister/add"

    def test_matches_static_access(self) -> None:
        assert resolve("ENDPOINTS", "lister", "contract") is ENDPOINTS.lister.contract

    def test_key_missing_in_empty_role(self) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            resolve("ROUTES", "auth", "login")
        assert exc_info.value.missing == "key"
        assert exc_info.value.dotted == "ROUTES.auth.login"

    def test_role_missing(self) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            resolve("ENDPOINTS", "admin", "anything")
        assert exc_info.value.missing == "role"

    def test_namespace_missing(self) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            resolve("endpoints", "auth", "login")
        assert exc_info.value.missing == "namespace"

    def test_role_as_key_is_not_a_leaf(self) -> None:
        with pytest.raises(NotFoundError):
            resolve("ENDPOINTS", "auth", "auth")

    def test_dunder_names_do_not_resolve(self) -> None:
        with pytest.raises(NotFoundError):
            resolve("ENDPOINTS", "__class__", "__name__")
        with pytest.raises(NotFoundError):
            resolve("ENDPOINTS", "auth", "__doc__")


class TestAdditiveExtension:
    """Adding a role leaves every existing lookup unchanged."""

    def _extended(self) -> dict[str, object]:
        return {"ENDPOINTS": EndpointsWithAdmin(), "ROUTES": ROUTES}

    def test_new_role_resolves(self) -> None:
        assert resolve("ENDPOINTS", "admin", "users", namespaces=self._extended()) == "/api/admin/users"

    def test_unknown_key_in_new_role(self) -> None:
        with pytest.raises(NotFoundError):
            resolve("ENDPOINTS", "admin", "anything", namespaces=self._extended())

    def test_existing_keys_unchanged(self) -> None:
        extended = self._extended()
        for leaf in iter_leaves():
            assert resolve(leaf.namespace, leaf.role, leaf.key, namespaces=extended) == leaf.path


class TestResolvePath:
    def test_dotted(self) -> None:
        assert resolve_path("ROUTES.lister.stats") == "/dashboard/lister/stats"

    @pytest.mark.parametrize(
        "dotted",
        ["ROUTES", "ROUTES.lister", "ROUTES.lister.stats.extra", "", "ROUTES..stats"],
    )
    def test_malformed(self, dotted: str) -> None:
        with pytest.raises(NotFoundError):
            resolve_path(dotted)


class TestHas:
    def test_present(self) -> None:
        assert has("ENDPOINTS", "bidder", "contracts") is True

    def test_absent(self) -> None:
        assert has("ROUTES", "bidder", "contracts") is False


class TestIterLeaves:
    def test_declaration_order(self) -> None:
        dotted = [leaf.dotted for leaf in iter_leaves()]
        assert dotted[:3] == [
            "ENDPOINTS.auth.login",
            "ENDPOINTS.auth.register",
            "ENDPOINTS.lister.getContracts",
        ]
        assert dotted[-1] == "ROUTES.lister.listContract"

    def test_count(self) -> None:
        assert len(list(iter_leaves())) == 9


class TestExport:
    def test_to_mapping(self) -> None:
        mapping = to_mapping()
        assert mapping["ENDPOINTS"]["lister"]["contract"] == "/api/contract/lister-contract/"
        assert mapping["ROUTES"]["auth"] == {}
        assert mapping["ROUTES"]["bidder"] == {}

    def test_to_mapping_is_a_copy(self) -> None:
        mapping = to_mapping()
        mapping["ENDPOINTS"]["auth"]["login"] = "/changed"
        assert ENDPOINTS.auth.login == "/api/login"

    def test_json_round_trip(self) -> None:
        assert from_json(to_json()) == to_mapping()

    def test_json_round_trip_compact(self) -> None:
        assert from_json(to_json(indent=None)) == to_mapping()

    def test_json_is_plain_json(self) -> None:
        assert json.loads(to_json())["ROUTES"]["lister"]["stats"] == "/dashboard/lister/stats"

    def test_key_order_irrelevant(self) -> None:
        shuffled = json.dumps({"ROUTES": to_mapping()["ROUTES"], "ENDPOINTS": to_mapping()["ENDPOINTS"]})
        assert from_json(shuffled) == to_mapping()


class TestFromJsonErrors:
    def test_not_an_object(self) -> None:
        with pytest.raises(ConfigurationError, match="must be an object"):
            from_json("[]")

    def test_role_not_an_object(self) -> None:
        with pytest.raises(ConfigurationError, match="Namespace 'ROUTES'"):
            from_json('{"ROUTES": "nope"}')

    def test_keys_not_an_object(self) -> None:
        with pytest.raises(ConfigurationError, match="ROUTES.auth"):
            from_json('{"ROUTES": {"auth": []}}')

    def test_value_not_a_string(self) -> None:
        with pytest.raises(ConfigurationError, match="ROUTES.auth.login must be a string"):
            from_json('{"ROUTES": {"auth": {"login": 1}}}')

    def test_relative_path(self) -> None:
        with pytest.raises(ConfigurationError, match="ROUTES.auth.login must start with '/'"):
            from_json('{"ROUTES": {"auth": {"login": "relative"}}}')

    def test_whitespace_path(self) -> None:
        with pytest.raises(ConfigurationError, match="contains whitespace"):
            from_json('{"ENDPOINTS": {"auth": {"login": "/api/log in"}}}')

    def test_empty_path(self) -> None:
        with pytest.raises(ConfigurationError, match="ROUTES.auth.login is empty"):
            from_json('{"ROUTES": {"auth": {"login": ""}}}')
