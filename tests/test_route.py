"""Tests for bitty.routing.route — Route, RouteMatch, method normalization."""

import pytest

from bitty.routing.route import Route, RouteMatch, normalize_methods


def _handler() -> str:
    return "ok"


class TestNormalizeMethods:
    def test_single_string(self) -> None:
        assert normalize_methods("get") == frozenset({"GET"})

    def test_list(self) -> None:
        assert normalize_methods(["get", "Post"]) == frozenset({"GET", "POST"})

    def test_none_is_open(self) -> None:
        assert normalize_methods(None) == frozenset()

    def test_empty_string_is_open(self) -> None:
        assert normalize_methods("") == frozenset()

    def test_unknown_methods_pass_through(self) -> None:
        assert normalize_methods(["purge"]) == frozenset({"PURGE"})


class TestRoute:
    def test_creation(self) -> None:
        route = Route("GET", "/users", _handler)
        assert route.path == "/users"
        assert route.callback is _handler
        assert route.methods == frozenset({"GET"})
        assert route.constraints == {}
        assert route.name is None
        assert route.params == {}

    def test_named_route_with_constraints(self) -> None:
        route = Route(["GET"], "/users/{id}", _handler, {"id": r"\d+"}, "users.show")
        assert route.name == "users.show"
        assert route.constraints == {"id": r"\d+"}

    def test_path_kept_verbatim(self) -> None:
        route = Route("GET", "/users/", _handler)
        assert route.path == "/users/"

    def test_callback_is_opaque(self) -> None:
        route = Route("GET", "/", "HomeController:index")
        assert route.callback == "HomeController:index"

    def test_frozen(self) -> None:
        route = Route("GET", "/", _handler)
        with pytest.raises(AttributeError):
            route.path = "/other"  # type: ignore[misc]

    def test_constraints_are_copied(self) -> None:
        constraints = {"id": r"\d+"}
        route = Route("GET", "/users/{id}", _handler, constraints)
        constraints["id"] = ".+"
        assert route.constraints["id"] == r"\d+"

    def test_constraints_read_only(self) -> None:
        route = Route("GET", "/users/{id}", _handler, {"id": r"\d+"})
        with pytest.raises(TypeError):
            route.constraints["id"] = ".+"  # type: ignore[index]

    def test_identity_equality(self) -> None:
        a = Route("GET", "/", _handler)
        b = Route("GET", "/", _handler)
        assert a == a
        assert a != b


class TestMatchesMethod:
    def test_open_route_matches_anything(self) -> None:
        route = Route(None, "/", _handler)
        assert route.is_open
        assert route.matches_method("GET")
        assert route.matches_method("DELETE")

    def test_listed_methods(self) -> None:
        route = Route(["GET", "POST"], "/", _handler)
        assert route.matches_method("GET")
        assert route.matches_method("POST")
        assert not route.matches_method("PUT")

    def test_case_insensitive(self) -> None:
        route = Route("post", "/", _handler)
        assert route.matches_method("post")
        assert route.matches_method("POST")


class TestCopies:
    def test_with_params_leaves_original(self) -> None:
        route = Route("GET", "/users/{id}", _handler, name="users.show")
        bound = route.with_params({"id": "42"})
        assert bound.params == {"id": "42"}
        assert bound.name == "users.show"
        assert route.params == {}

    def test_with_methods_normalizes(self) -> None:
        route = Route("GET", "/", _handler)
        changed = route.with_methods(["put", "patch"])
        assert changed.methods == frozenset({"PUT", "PATCH"})
        assert route.methods == frozenset({"GET"})


class TestRouteMatch:
    def test_creation(self) -> None:
        route = Route("GET", "/users/{id}", _handler, name="users.show")
        match = RouteMatch(route=route, params={"id": "42"})
        assert match.route is route
        assert match.params == {"id": "42"}
        assert match.name == "users.show"
        assert match.callback is _handler

    def test_bound_route(self) -> None:
        route = Route("GET", "/users/{id}", _handler, name="users.show")
        match = RouteMatch(route=route, params={"id": "42"})
        bound = match.bound_route
        assert bound.params == match.params
        assert bound.name == "users.show"
        assert bound is not route
        assert route.params == {}

    def test_frozen(self) -> None:
        route = Route("GET", "/", _handler)
        match = RouteMatch(route=route, params={})
        with pytest.raises(AttributeError):
            match.route = route  # type: ignore[misc]
