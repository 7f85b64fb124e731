"""Mutable state shared by the typeahead components."""

from dataclasses import dataclass, field

from typeahead.domain.types import Option
from typeahead.utils import clamp_index


@dataclass
class TypeaheadState:
    """
    Everything a renderer needs besides visibility and animation markers.

    Attributes:
        query: Raw input text, updated on every keystroke
        debounced_query: Last query that passed the debounce window
        results: Options from the latest committed evaluation (replaced, never patched)
        active_index: Highlighted result, -1 for none
        loading: True while an async fetch for the current query is outstanding
    """

    query: str = ""
    debounced_query: str = ""
    results: tuple[Option, ...] = field(default_factory=tuple)
    active_index: int = -1
    loading: bool = False

    def replace_results(self, results: tuple[Option, ...]) -> None:
        """Swap in a new result set and drop the highlight."""
        self.results = results
        self.active_index = -1

    def set_active_index(self, index: int) -> None:
        """Set the highlight, clamped to the current results."""
        self.active_index = clamp_index(index, len(self.results))

    @property
    def active_option(self) -> Option | None:
        if 0 <= self.active_index < len(self.results):
            return self.results[self.active_index]
        return None
