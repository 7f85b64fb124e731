"""Domain protocols - interfaces for host-supplied callables and data strategies.

Using protocols keeps the core free of any concrete data source and lets tests
substitute plain functions or stubs.
"""

from typeahead.domain.protocols.data_source import (
    CreateHandler,
    DataStrategy,
    FetchData,
    FilterPredicate,
    SelectHandler,
)

__all__ = [
    "CreateHandler",
    "DataStrategy",
    "FetchData",
    "FilterPredicate",
    "SelectHandler",
]
