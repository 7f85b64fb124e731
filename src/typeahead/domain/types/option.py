"""Option record supplied by the host."""

from typing import Any

from pydantic import BaseModel, ConfigDict

__all__ = ["Option", "OptionId"]

OptionId = str | int


class Option(BaseModel):
    """A selectable candidate.

    ``value`` is echoed into the input on selection, ``label`` is what the
    result list shows. Any additional keyword is kept as an extra field and
    takes part in the default substring filter when it is a string.

    Options are frozen: the widget never mutates host records, and all
    bookkeeping keys on ``id`` rather than object identity.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    id: OptionId
    value: str
    label: str = ""

    @property
    def extra(self) -> dict[str, Any]:
        """Host-specific fields beyond id/value/label."""
        return dict(self.model_extra or {})

    @property
    def display_text(self) -> str:
        """Label, falling back to the value when the label is empty."""
        return self.label or self.value
