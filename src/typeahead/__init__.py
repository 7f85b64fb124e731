"""typeahead - search-as-you-type input with a race-safe result lifecycle."""

from typeahead.config import StyleClasses, TypeaheadConfig
from typeahead.core.controller import TypeaheadController
from typeahead.domain.types import AnimationState, DisplayItem, Option

__all__ = [
    "AnimationState",
    "DisplayItem",
    "Option",
    "StyleClasses",
    "TypeaheadConfig",
    "TypeaheadController",
]
