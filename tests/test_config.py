"""
Tests for PrimaidsConfig and its YAML round-trip.
"""

import pytest

from primaids.config import (
    DEFAULT_CONFIG,
    PrimaidsConfig,
    config_from_dict,
    config_from_yaml,
    config_to_dict,
    config_to_yaml,
    load_config,
)
from primaids.exceptions import InvalidArgumentError, OutOfBoundsError


SLASH_STRICT_YAML = """
path_delimiter: "/"
key_placeholder: "%k"
value_placeholder: "%v"
strict: true
"""


class TestDefaults:
    """The default config mirrors the function defaults."""

    def test_default_values(self):
        assert DEFAULT_CONFIG == PrimaidsConfig(".", "{key}", "{value}", False)

    def test_defaults_forward_to_helpers(self):
        data = {"db": {"host": "localhost"}}
        assert DEFAULT_CONFIG.get_nested(data, "db.host") == "localhost"
        assert DEFAULT_CONFIG.get_nested(data, "db.port") is None
        assert DEFAULT_CONFIG.format({"a": 1}, "{key}={value}") == "a=1"

    def test_immutable(self):
        with pytest.raises(AttributeError):
            DEFAULT_CONFIG.strict = True

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"path_delimiter": ""},
            {"key_placeholder": None},
            {"value_placeholder": 3},
            {"strict": "yes"},
        ],
    )
    def test_invalid_values_rejected(self, kwargs):
        with pytest.raises(InvalidArgumentError):
            PrimaidsConfig(**kwargs)


class TestBoundHelpers:
    """A loaded config changes delimiter, placeholders and strictness."""

    @pytest.fixture
    def config(self):
        return config_from_yaml(SLASH_STRICT_YAML)

    def test_get_nested_uses_delimiter(self, config):
        data = {"db": {"login": {"username": "scott"}}}
        assert config.get_nested(data, "db/login/username") == "scott"

    def test_strict_lookups_raise(self, config):
        with pytest.raises(OutOfBoundsError):
            config.get_nested({"db": {}}, "db/missing")
        with pytest.raises(OutOfBoundsError):
            config.get_and_call({}, "x", str)
        with pytest.raises(OutOfBoundsError):
            config.sub_set({"a": 1}, ["a", "b"])
        with pytest.raises(OutOfBoundsError):
            config.rename({"a": 1}, "b", "c")

    def test_format_uses_placeholders(self, config):
        assert config.format({"x": 1, "y": 2}, "%k=%v,") == "x=1,y=2,"

    def test_rename_in_place(self, config):
        data = {"a": 1}
        config.rename(data, "a", "b")
        assert data == {"b": 1}


class TestSerialization:
    """Test dict/YAML conversion."""

    def test_yaml_roundtrip(self):
        config = PrimaidsConfig(path_delimiter="::", strict=True)
        before = config_to_dict(config)
        restored = config_from_yaml(config_to_yaml(config))
        assert config_to_dict(restored) == before
        assert restored == config

    def test_partial_document_keeps_defaults(self):
        config = config_from_yaml("strict: true\n")
        assert config.strict is True
        assert config.path_delimiter == "."

    def test_empty_document_gives_defaults(self):
        assert config_from_yaml("") == PrimaidsConfig()

    def test_unknown_key_rejected(self):
        with pytest.raises(InvalidArgumentError, match="delimiter"):
            config_from_dict({"delimiter": "/"})

    def test_non_mapping_rejected(self):
        with pytest.raises(InvalidArgumentError):
            config_from_yaml("- a\n- b\n")

    def test_load_config_file(self, tmp_path):
        path = tmp_path / "primaids.yaml"
        path.write_text(SLASH_STRICT_YAML, encoding="utf-8")
        config = load_config(str(path))
        assert config.path_delimiter == "/"
        assert config.strict is True
