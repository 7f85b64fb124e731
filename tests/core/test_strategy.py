import pytest

from typeahead.core.filtering import (
    default_create_button_text,
    default_filter_item,
    default_render_item,
    searchable_text,
)
from typeahead.core.strategy import (
    AsyncFetchStrategy,
    EmptyStrategy,
    StaticFilterStrategy,
    select_strategy,
)
from typeahead.domain.types import Option


class TestDefaultFilter:
    """Test the default substring predicate."""

    def test_matches_value_case_insensitively(self):
        assert default_filter_item(Option(id=1, value="Apple"), "aPP")

    def test_matches_label(self):
        option = Option(id=1, value="de", label="Germany")
        assert default_filter_item(option, "germ")

    def test_matches_string_extras_only(self):
        option = Option(id=1, value="Kiwi", origin="New Zealand", weight=42)
        assert default_filter_item(option, "zealand")
        assert not default_filter_item(option, "42")
        assert searchable_text(option) == ["Kiwi", "New Zealand"]

    def test_rejects_non_matching(self):
        assert not default_filter_item(Option(id=1, value="Apple"), "pear")


def test_default_render_prefers_label():
    assert default_render_item(Option(id=1, value="de", label="Germany")) == "Germany"
    assert default_render_item(Option(id=1, value="de")) == "de"


def test_default_create_button_text():
    assert default_create_button_text("Kiwi") == 'Create "Kiwi"'


class TestStaticFilterStrategy:
    """Test filtering of a fixed dataset."""

    def test_preserves_dataset_order(self, fruits):
        strategy = StaticFilterStrategy(list(reversed(fruits)))
        assert [option.id for option in strategy.filter("ap")] == ["f5", "f2", "f1"]

    def test_uses_custom_predicate(self, fruits):
        strategy = StaticFilterStrategy(fruits, lambda option, query: option.value.startswith(query))
        assert [option.id for option in strategy.filter("Ap")] == ["f1", "f2"]

    @pytest.mark.asyncio
    async def test_fetch_delegates_to_filter(self, fruits):
        strategy = StaticFilterStrategy(fruits)
        assert await strategy.fetch("cher") == [fruits[3]]


class TestSelectStrategy:
    """Test data source precedence."""

    def test_fetch_wins_over_static(self, fruits):
        async def fetch(query):
            return []

        strategy = select_strategy(fruits, fetch)
        assert isinstance(strategy, AsyncFetchStrategy)
        assert not strategy.synchronous

    def test_static_when_no_fetch(self, fruits):
        strategy = select_strategy(fruits, None)
        assert isinstance(strategy, StaticFilterStrategy)
        assert strategy.synchronous

    def test_empty_without_data_source(self):
        strategy = select_strategy(None, None)
        assert isinstance(strategy, EmptyStrategy)
        assert strategy.filter("x") == []

    def test_async_strategy_cannot_filter_synchronously(self):
        async def fetch(query):
            return []

        with pytest.raises(TypeError):
            AsyncFetchStrategy(fetch).filter("x")
