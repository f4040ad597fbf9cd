"""Tests for waymark.routing.router — ordered route collection."""

import pytest

from waymark.errors import ConfigurationError, RouteNotFound
from waymark.routing.nodes import RouteMatch
from waymark.routing.route import Route
from waymark.routing.router import Router


class TestAddRoute:
    def test_returns_route(self) -> None:
        router = Router()
        route = router.add_route("/foo")
        assert isinstance(route, Route)
        assert router.routes == (route,)

    def test_accepts_route_instance(self) -> None:
        router = Router()
        route = Route("/foo")
        assert router.add_route(route) is route

    def test_len_and_iter(self) -> None:
        router = Router()
        a = router.add_route("/a")
        b = router.add_route("/b")
        assert len(router) == 2
        assert list(router) == [a, b]

    def test_duplicate_name(self) -> None:
        router = Router()
        router.add_route({"pattern": "/a", "name": "x"})
        with pytest.raises(ConfigurationError, match="Duplicate route name 'x'"):
            router.add_route({"pattern": "/b", "name": "x"})
        assert len(router) == 1

    def test_invalid_options_propagate(self) -> None:
        with pytest.raises(ConfigurationError):
            Router().add_route({"name": "x"})


class TestGetRouteByName:
    def test_lookup(self) -> None:
        router = Router()
        foo = router.add_route({"pattern": "/foo", "data": {"name": "foo"}})
        bar = router.add_route({"pattern": "/bar", "data": {"name": "bar"}})

        assert router.get_route_by_name("bar") is bar
        assert router.get_route_by_name("foo") is foo
        assert router.get_route_by_name("opa") is None

    def test_name_option(self) -> None:
        router = Router()
        route = router.add_route({"pattern": "/foo", "name": "foo"})
        assert router.get_route_by_name("foo") is route


class TestFind:
    def test_first_match_wins(self) -> None:
        router = Router()
        router.add_route("/users/new")
        users = router.add_route("/users/<id>")
        first = router.find_first("/users/new")
        assert first is not None
        assert first.route.pattern == "/users/new"
        assert first.params == {}

        match = router.find_first("/users/42")
        assert match == RouteMatch(route=users, params={"id": "42"})

    def test_no_match(self) -> None:
        router = Router()
        router.add_route("/users")
        assert router.find_first("/posts") is None

    def test_empty_router(self) -> None:
        assert Router().find_first("/") is None

    def test_gated_by_data(self) -> None:
        router = Router()
        get = router.add_route({"pattern": "/x", "data": {"method": "GET"}})
        post = router.add_route({"pattern": "/x", "data": {"method": "POST"}})

        match = router.find_first({"path": "/x", "method": "POST"})
        assert match is not None
        assert match.route is post
        assert router.find_first({"path": "/x", "method": "GET"}).route is get  # type: ignore[union-attr]

    def test_find_all(self) -> None:
        router = Router()
        a = router.add_route("/users/<id>")
        router.add_route("/posts/<id>")
        b = router.add_route({"pattern": "/users/<name>", "conditions": {"name": "[a-z]+"}})

        matches = router.find_all("/users/bob")
        assert [m.route for m in matches] == [a, b]
        assert [m.params for m in matches] == [{"id": "bob"}, {"name": "bob"}]


class TestBuild:
    def test_build_by_name(self) -> None:
        router = Router()
        router.add_route({"pattern": "/users/<id>", "name": "user"})
        assert router.build("user", {"id": 7, "tab": "posts"}) == "/users/7?tab=posts"

    def test_unknown_name(self) -> None:
        with pytest.raises(RouteNotFound) as exc_info:
            Router().build("missing")
        assert exc_info.value.name == "missing"
        assert "missing" in str(exc_info.value)

    def test_unknown_name_is_lookup_error(self) -> None:
        with pytest.raises(LookupError):
            Router().build("missing", {})
