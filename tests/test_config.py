"""Tests for TypeaheadConfig validation and environment defaults."""

import pytest
from pydantic import ValidationError

from typeahead.config import (
    DEFAULT_DEBOUNCE_DELAY,
    DEFAULT_MIN_CHARS,
    StyleClasses,
    TypeaheadConfig,
    load_defaults_from_env,
)
from typeahead.core.filtering import default_filter_item
from typeahead.domain.types import Option
from typeahead.utils import clamp_index


def noop(*args):
    return None


class TestTypeaheadConfig:
    """Test configuration validation."""

    def test_defaults(self):
        config = TypeaheadConfig(id="city", on_select=noop, on_create=noop)

        assert config.min_chars == DEFAULT_MIN_CHARS
        assert config.debounce_delay == DEFAULT_DEBOUNCE_DELAY
        assert config.static_data is None
        assert config.fetch_data is None
        assert config.filter_item is default_filter_item
        assert config.styles == StyleClasses()

    def test_static_data_validated_into_options(self):
        config = TypeaheadConfig(
            id="city",
            on_select=noop,
            on_create=noop,
            static_data=[{"id": 1, "value": "Paris"}, Option(id=2, value="Rome")],
        )

        assert isinstance(config.static_data, tuple)
        assert [option.value for option in config.static_data] == ["Paris", "Rome"]
        assert all(isinstance(option, Option) for option in config.static_data)

    def test_dom_ids(self):
        config = TypeaheadConfig(id="city", on_select=noop, on_create=noop)

        assert config.list_id == "city-results-list"
        assert config.option_dom_id(Option(id=4, value="Oslo")) == "city-result-4"

    @pytest.mark.parametrize(
        "overrides",
        [
            {"id": ""},
            {"min_chars": -1},
            {"debounce_delay": -0.5},
        ],
    )
    def test_invalid_values_rejected(self, overrides):
        values = {"id": "city", "on_select": noop, "on_create": noop, **overrides}
        with pytest.raises(ValidationError):
            TypeaheadConfig(**values)

    def test_callbacks_required(self):
        with pytest.raises(ValidationError):
            TypeaheadConfig(id="city")

    def test_config_is_frozen(self):
        config = TypeaheadConfig(id="city", on_select=noop, on_create=noop)
        with pytest.raises(ValidationError):
            config.min_chars = 3


class TestEnvDefaults:
    """Test environment overrides."""

    def test_reads_overrides(self, monkeypatch):
        monkeypatch.setenv("TYPEAHEAD_MIN_CHARS", "2")
        monkeypatch.setenv("TYPEAHEAD_DEBOUNCE_DELAY", "0.15")

        assert load_defaults_from_env() == {"min_chars": 2, "debounce_delay": 0.15}

    def test_unset_variables_are_omitted(self, monkeypatch):
        monkeypatch.delenv("TYPEAHEAD_MIN_CHARS", raising=False)
        monkeypatch.delenv("TYPEAHEAD_DEBOUNCE_DELAY", raising=False)

        assert load_defaults_from_env() == {}


@pytest.mark.parametrize(
    ("index", "count", "expected"),
    [
        (3, 0, -1),
        (5, 3, 2),
        (-4, 3, -1),
        (1, 3, 1),
    ],
)
def test_clamp_index(index, count, expected):
    assert clamp_index(index, count) == expected
