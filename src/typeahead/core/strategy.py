"""
Evaluation strategies for resolving a query into options.

These abstractions decouple the evaluator from where options come from:
a fixed in-memory dataset, a host-supplied async lookup, or nothing at all.
"""

from __future__ import annotations

from typing import Callable, Sequence

from typeahead.core.filtering import default_filter_item
from typeahead.domain.protocols import DataStrategy, FetchData, FilterPredicate
from typeahead.domain.types import Option
from typeahead.logger import get_logger

logger = get_logger("strategy")


class StaticFilterStrategy:
    """Filter a fixed dataset synchronously, preserving dataset order."""

    synchronous = True

    def __init__(
        self,
        dataset: Sequence[Option],
        predicate: FilterPredicate | Callable[[Option, str], bool] = default_filter_item,
    ) -> None:
        self._dataset = tuple(dataset)
        self._predicate = predicate

    def filter(self, query: str) -> list[Option]:
        # A raising host predicate is a host defect and propagates
        return [option for option in self._dataset if self._predicate(option, query)]

    async def fetch(self, query: str) -> list[Option]:
        return self.filter(query)


class AsyncFetchStrategy:
    """Delegate resolution to a host coroutine function."""

    synchronous = False

    def __init__(self, fetch_data: FetchData | Callable) -> None:
        self._fetch_data = fetch_data

    def filter(self, query: str) -> list[Option]:
        raise TypeError("AsyncFetchStrategy can only be awaited through fetch()")

    async def fetch(self, query: str) -> list[Option]:
        results = await self._fetch_data(query)
        return [option if isinstance(option, Option) else Option.model_validate(option) for option in results]


class EmptyStrategy:
    """Used when no data source is configured: every query yields nothing."""

    synchronous = True

    def filter(self, query: str) -> list[Option]:
        return []

    async def fetch(self, query: str) -> list[Option]:
        return []


def select_strategy(
    static_data: Sequence[Option] | None,
    fetch_data: FetchData | Callable | None,
    filter_item: FilterPredicate | Callable[[Option, str], bool] = default_filter_item,
) -> DataStrategy:
    """
    Pick the single strategy the evaluator will use.

    ``fetch_data`` takes precedence over ``static_data``; with neither an
    :class:`EmptyStrategy` is returned.
    """
    if fetch_data is not None:
        logger.debug("Using async fetch strategy")
        return AsyncFetchStrategy(fetch_data)
    if static_data is not None:
        logger.debug(f"Using static filter strategy over {len(static_data)} option(s)")
        return StaticFilterStrategy(static_data, filter_item)
    logger.debug("No data source configured, results will stay empty")
    return EmptyStrategy()
