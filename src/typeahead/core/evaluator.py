"""
QueryEvaluator - resolves debounced queries into result sets, rejecting stale responses.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Callable

from typeahead.domain.protocols import DataStrategy
from typeahead.domain.types import Option
from typeahead.logger import get_logger

logger = get_logger("evaluator")


@dataclass(frozen=True, slots=True)
class Evaluation:
    """A committed evaluation.

    Attributes:
        generation: Counter value the evaluation was issued with
        query: The debounced query it answers
        results: Options in the order the strategy returned them
    """

    generation: int
    query: str
    results: tuple[Option, ...]


class QueryEvaluator:
    """
    Resolve queries through a single :class:`DataStrategy`.

    Every call to :meth:`evaluate` takes a new generation number. Results are
    committed through ``on_results`` only when their generation is still the
    latest, so a slow response for an older query can never overwrite the
    answer to a newer one. Fetch failures are logged and committed as an
    empty result; they never reach the caller.
    """

    def __init__(
        self,
        strategy: DataStrategy,
        min_chars: int,
        on_results: Callable[[Evaluation], None],
        on_loading: Callable[[bool], None] | None = None,
    ):
        """
        Initialize the evaluator.

        Args:
            strategy: Where options come from
            min_chars: Queries shorter than this resolve to nothing without a fetch
            on_results: Called with each committed evaluation
            on_loading: Called with True when a fetch starts and False when one commits
        """
        self._strategy = strategy
        self._min_chars = min_chars
        self._on_results = on_results
        self._on_loading = on_loading or (lambda loading: None)
        self._generation = 0
        self._inflight: set[asyncio.Task] = set()
        self._closed = False

    @property
    def generation(self) -> int:
        """Generation of the most recently issued evaluation."""
        return self._generation

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def inflight(self) -> int:
        """Number of fetches that have not resolved yet, stale ones included."""
        return len(self._inflight)

    def evaluate(self, query: str) -> None:
        """
        Issue an evaluation for ``query``.

        Short queries and synchronous strategies commit before this returns.
        Async strategies flip loading on and commit from a background task.
        """
        if self._closed:
            logger.debug(f"Evaluator closed, ignoring query {query!r}")
            return

        self._generation += 1
        generation = self._generation

        if len(query) < self._min_chars:
            logger.debug(f"Query {query!r} below min_chars={self._min_chars}, committing empty result")
            self._commit(generation, query, [])
            return

        if self._strategy.synchronous:
            results = self._strategy.filter(query)
            logger.debug(f"Static evaluation of {query!r} (gen={generation}) matched {len(results)} option(s)")
            self._commit(generation, query, results)
            return

        self._on_loading(True)
        task = asyncio.create_task(self._run_fetch(generation, query))
        self._inflight.add(task)
        task.add_done_callback(self._inflight.discard)

    def set_strategy(self, strategy: DataStrategy) -> None:
        """Resolve later queries through ``strategy``; outstanding fetches become stale."""
        self._strategy = strategy
        self.invalidate()

    def invalidate(self) -> None:
        """Supersede every outstanding evaluation without issuing a new one."""
        self._generation += 1
        logger.debug(f"Evaluations invalidated (gen={self._generation})")

    def close(self) -> None:
        """Stop committing results. Fetches resolving after this are discarded."""
        if not self._closed:
            self._closed = True
            self.invalidate()
            logger.debug(f"Evaluator closed with {len(self._inflight)} fetch(es) still in flight")

    async def wait_idle(self) -> None:
        """Wait until every outstanding fetch has resolved (committed or discarded)."""
        while self._inflight:
            await asyncio.gather(*list(self._inflight), return_exceptions=True)

    async def _run_fetch(self, generation: int, query: str) -> None:
        try:
            results = await self._strategy.fetch(query)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.opt(exception=e).error(f"Error fetching typeahead data for {query!r}: {e}")
            results = []

        if self._closed or generation != self._generation:
            logger.debug(
                f"Discarding stale result for {query!r} (gen={generation}, current={self._generation})"
            )
            return

        logger.debug(f"Fetch for {query!r} (gen={generation}) returned {len(results)} option(s)")
        self._commit(generation, query, results)

    def _commit(self, generation: int, query: str, results: list[Option]) -> None:
        self._on_loading(False)
        self._on_results(Evaluation(generation=generation, query=query, results=tuple(results)))
