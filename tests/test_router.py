"""Tests for bitty.routing.router — the Router facade."""

from dataclasses import dataclass

import pytest

from bitty.config import RouterConfig
from bitty.errors import NotFoundError
from bitty.routing.collection import RouteCollection
from bitty.routing.matcher import RouteMatcher
from bitty.routing.params import NUMBER
from bitty.routing.route import Route
from bitty.routing.router import Router
from bitty.routing.uri import ReferenceType


def _handler() -> str:
    return "ok"


@dataclass(frozen=True)
class FakeRequest:
    method: str
    path: str


class TestRegistration:
    def test_add_returns_route(self) -> None:
        router = Router()
        route = router.add("get", "/users/{id}", _handler, {"id": NUMBER}, "users.show")
        assert isinstance(route, Route)
        assert route.methods == frozenset({"GET"})
        assert router.get("users.show") is route
        assert router.has("users.show")

    def test_remove(self) -> None:
        router = Router()
        router.add("GET", "/a", _handler, name="a")
        router.remove("a")
        assert not router.has("a")

    def test_get_missing(self) -> None:
        with pytest.raises(NotFoundError):
            Router().get("missing")

    def test_shared_collection(self) -> None:
        routes = RouteCollection()
        router = Router(routes=routes)
        router.add("GET", "/a", _handler)
        assert router.routes is routes
        assert len(routes) == 1


class TestFind:
    def test_find(self) -> None:
        router = Router()
        router.add("GET", "/users/{id}", _handler, {"id": NUMBER}, "users.show")
        match = router.find(FakeRequest("GET", "/users/42"))
        assert match.name == "users.show"
        assert match.params == {"id": "42"}
        assert match.callback is _handler

    def test_find_path(self) -> None:
        router = Router()
        router.add(None, "/ping", _handler, name="ping")
        assert router.find_path("DELETE", "/ping").name == "ping"

    def test_routes_added_later_are_seen(self) -> None:
        router = Router()
        with pytest.raises(NotFoundError):
            router.find_path("GET", "/late")
        router.add("GET", "/late", _handler, name="late")
        assert router.find_path("GET", "/late").name == "late"

    def test_custom_matcher(self) -> None:
        routes = RouteCollection([Route("GET", "/a", _handler, name="a")])
        router = Router(routes=routes, matcher=RouteMatcher(routes))
        assert router.find_path("GET", "/a").name == "a"


class TestGenerateUri:
    def test_generate(self) -> None:
        router = Router()
        router.add("GET", "/users/{id}", _handler, name="users.show")
        assert router.generate_uri("users.show", {"id": 3}) == "/users/3"

    def test_generate_absolute_uses_config_domain(self) -> None:
        router = Router(config=RouterConfig(domain="https://example.com"))
        router.add("GET", "/users/{id}", _handler, name="users.show")
        uri = router.generate_uri("users.show", {"id": 3}, ReferenceType.ABSOLUTE_URI)
        assert uri == "https://example.com/users/3"

    def test_generated_uri_matches_back(self) -> None:
        router = Router()
        router.add("GET", "/posts/{year}/{slug}", _handler, {"year": NUMBER}, "posts.show")
        uri = router.generate_uri("posts.show", {"year": 2024, "slug": "hello"})
        assert router.find_path("GET", uri).params == {"year": "2024", "slug": "hello"}
