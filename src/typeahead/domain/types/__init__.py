"""Shared domain types."""

from typeahead.domain.types.option import Option, OptionId
from typeahead.domain.types.animation import AnimationState, DisplayItem
from typeahead.domain.types.panel import KeyAction, NavigatorMode, PanelState

__all__ = [
    "Option",
    "OptionId",
    "AnimationState",
    "DisplayItem",
    "KeyAction",
    "NavigatorMode",
    "PanelState",
]
