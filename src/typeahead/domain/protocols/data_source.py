"""Data-source and callback protocols."""

from typing import Awaitable, Protocol, Sequence

from typeahead.domain.types import Option

__all__ = [
    "FilterPredicate",
    "FetchData",
    "SelectHandler",
    "CreateHandler",
    "DataStrategy",
]


class FilterPredicate(Protocol):
    """Decides whether an option matches the query."""

    def __call__(self, option: Option, query: str) -> bool: ...


class FetchData(Protocol):
    """Asynchronous lookup returning the options for a query."""

    def __call__(self, query: str) -> Awaitable[Sequence[Option]]: ...


class SelectHandler(Protocol):
    """Receives the selected option (or None for free text) and the raw input value."""

    def __call__(self, option: Option | None, raw_value: str) -> None: ...


class CreateHandler(Protocol):
    """Receives the query the user asked to create an entry for."""

    def __call__(self, query: str) -> None: ...


class DataStrategy(Protocol):
    """Contract implemented by the evaluation strategies.

    Synchronous strategies answer through :meth:`filter`; asynchronous ones
    through :meth:`fetch`. ``synchronous`` tells the evaluator which one to use.
    """

    @property
    def synchronous(self) -> bool:
        """Return ``True`` when results are available without awaiting."""
        ...

    def filter(self, query: str) -> list[Option]:
        """Resolve ``query`` synchronously."""
        ...

    async def fetch(self, query: str) -> list[Option]:
        """Resolve ``query`` asynchronously."""
        ...
