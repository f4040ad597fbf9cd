"""Tests for waymark.config — RouteConfig frozen dataclass."""

from types import MappingProxyType

import pytest

from waymark.config import RouteConfig
from waymark.errors import ConfigurationError


class TestRouteConfig:
    def test_defaults(self) -> None:
        cfg = RouteConfig(pattern="/x")

        assert cfg.pattern == "/x"
        assert cfg.name is None
        assert cfg.conditions == {}
        assert cfg.defaults == {}
        assert cfg.data == {}
        assert cfg.trailing_slash_optional is True
        assert cfg.post_match is None
        assert cfg.pre_build is None

    def test_frozen(self) -> None:
        cfg = RouteConfig(pattern="/x")

        with pytest.raises(AttributeError):
            cfg.pattern = "/y"  # type: ignore[misc]

    def test_mappings_are_read_only(self) -> None:
        cfg = RouteConfig(pattern="/x", defaults={"a": "1"})

        assert isinstance(cfg.defaults, MappingProxyType)
        with pytest.raises(TypeError):
            cfg.defaults["a"] = "2"  # type: ignore[index]

    def test_name_folded_into_data(self) -> None:
        cfg = RouteConfig(pattern="/x", name="x", data={"method": "GET"})
        assert cfg.data == {"method": "GET", "name": "x"}

    def test_list_condition_becomes_tuple(self) -> None:
        cfg = RouteConfig(pattern="/<f>", conditions={"f": ["a", "b"]})
        assert cfg.conditions["f"] == ("a", "b")

    def test_defaults_stringified(self) -> None:
        cfg = RouteConfig(pattern="/<n>", defaults={"n": 1})
        assert cfg.defaults == {"n": "1"}

    def test_rejects_bad_condition(self) -> None:
        with pytest.raises(ConfigurationError, match="Condition for 'f'"):
            RouteConfig(pattern="/<f>", conditions={"f": 5})

    def test_rejects_non_mapping(self) -> None:
        with pytest.raises(ConfigurationError, match="'defaults' must be a mapping"):
            RouteConfig(pattern="/x", defaults=["a"])  # type: ignore[arg-type]

    def test_rejects_non_callable_hook(self) -> None:
        with pytest.raises(ConfigurationError, match="'post_match' must be callable"):
            RouteConfig(pattern="/x", post_match="nope")  # type: ignore[arg-type]

    def test_rejects_non_string_name(self) -> None:
        with pytest.raises(ConfigurationError, match="name must be a string"):
            RouteConfig(pattern="/x", name=3)  # type: ignore[arg-type]


class TestFromOptions:
    def test_string(self) -> None:
        assert RouteConfig.from_options("/x").pattern == "/x"

    def test_config_passthrough(self) -> None:
        cfg = RouteConfig(pattern="/x")
        assert RouteConfig.from_options(cfg) is cfg

    def test_mapping(self) -> None:
        cfg = RouteConfig.from_options(
            {"pattern": "/x", "name": "x", "trailing_slash_optional": False}
        )
        assert cfg.name == "x"
        assert cfg.trailing_slash_optional is False

    def test_none_entries_use_defaults(self) -> None:
        cfg = RouteConfig.from_options({"pattern": "/x", "data": None, "conditions": None})
        assert cfg.data == {}
        assert cfg.conditions == {}

    def test_unknown_keys(self) -> None:
        with pytest.raises(ConfigurationError, match="Unknown route options: 'isTrailingSlashOptional'"):
            RouteConfig.from_options({"pattern": "/x", "isTrailingSlashOptional": False})

    @pytest.mark.parametrize("options", [{}, {"pattern": None}, {"pattern": 1}])
    def test_missing_pattern(self, options: dict[str, object]) -> None:
        with pytest.raises(ConfigurationError, match="pattern of the route"):
            RouteConfig.from_options(options)

    def test_not_options(self) -> None:
        with pytest.raises(ConfigurationError, match="You must specify route options"):
            RouteConfig.from_options(None)  # type: ignore[arg-type]
