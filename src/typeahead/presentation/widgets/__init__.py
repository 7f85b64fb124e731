"""Textual widgets rendering a TypeaheadController."""

from .result_item import CreateEntryButton, ResultItem
from .typeahead import Typeahead, TypeaheadInput

__all__ = [
    "CreateEntryButton",
    "ResultItem",
    "Typeahead",
    "TypeaheadInput",
]
