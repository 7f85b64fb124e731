"""Animation-state types for result transitions."""

from dataclasses import dataclass
from enum import Enum

from typeahead.domain.types.option import Option

__all__ = ["AnimationState", "DisplayItem"]


class AnimationState(Enum):
    """Transition phase of a single result row."""

    ENTERING = "entering"
    EXITING = "exiting"
    STABLE = "stable"


@dataclass(frozen=True, slots=True)
class DisplayItem:
    """A row as it should be rendered during a transition window.

    Attributes:
        option: The option backing the row
        state: Current animation phase
        stagger: Position of the option in the current results, used to
            stagger entering rows. -1 for exiting rows.
    """

    option: Option
    state: AnimationState
    stagger: int = -1

    @property
    def is_exiting(self) -> bool:
        return self.state is AnimationState.EXITING
