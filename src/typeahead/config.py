"""Typeahead configuration.

Host-facing options are validated with pydantic. Environment overrides for the
numeric defaults are read through python-dotenv so the demo and hosts can tune
timing without code changes.
"""

import os
from typing import Any, Callable, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

from typeahead.core.filtering import (
    default_create_button_text,
    default_filter_item,
    default_render_item,
)
from typeahead.domain.types import Option
from typeahead.logger import get_logger

logger = get_logger("config")

DEFAULT_MIN_CHARS = 1
DEFAULT_DEBOUNCE_DELAY = 0.3
EXIT_ANIMATION_TIMEOUT = 0.3


class StyleClasses(BaseModel):
    """Extra CSS classes applied to each rendered region."""

    model_config = ConfigDict(frozen=True)

    container: str = ""
    input: str = ""
    results_list: str = ""
    result_item: str = ""
    create_button: str = ""


class TypeaheadConfig(BaseModel):
    """Configuration of a single typeahead instance.

    Exactly one data source is used: ``fetch_data`` when given, otherwise
    ``static_data``. With neither, results stay empty.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    id: str = Field(..., min_length=1, description="Base for the list and option ids")
    label: str = ""
    placeholder: Optional[str] = None
    static_data: Optional[tuple[Option, ...]] = None
    fetch_data: Optional[Callable[[str], Any]] = None
    on_select: Callable[[Optional[Option], str], Any]
    on_create: Callable[[str], Any]
    render_item: Callable[[Option], Any] = default_render_item
    filter_item: Callable[[Option, str], bool] = default_filter_item
    create_button_text: Callable[[str], str] = default_create_button_text
    min_chars: int = Field(DEFAULT_MIN_CHARS, ge=0)
    debounce_delay: float = Field(DEFAULT_DEBOUNCE_DELAY, ge=0, description="Seconds")
    styles: StyleClasses = Field(default_factory=StyleClasses)

    @field_validator("static_data", mode="before")
    @classmethod
    def _freeze_static_data(cls, value: Any) -> Any:
        if value is None:
            return None
        return tuple(value)

    def model_post_init(self, __context: Any) -> None:
        if self.fetch_data is not None and self.static_data is not None:
            logger.warning(
                f"Typeahead '{self.id}' has both fetch_data and static_data; fetch_data takes precedence"
            )

    @property
    def list_id(self) -> str:
        return f"{self.id}-results-list"

    def option_dom_id(self, option: Option) -> str:
        return f"{self.id}-result-{option.id}"


def load_defaults_from_env() -> dict[str, Any]:
    """
    Read numeric defaults from the environment (and a ``.env`` file).

    Recognised variables:
        TYPEAHEAD_MIN_CHARS: minimum query length before evaluating
        TYPEAHEAD_DEBOUNCE_DELAY: debounce window in seconds

    Returns:
        Keyword arguments suitable for ``TypeaheadConfig``; unset variables are omitted
    """
    load_dotenv()

    defaults: dict[str, Any] = {}
    min_chars = os.getenv("TYPEAHEAD_MIN_CHARS")
    if min_chars:
        defaults["min_chars"] = int(min_chars)
    debounce_delay = os.getenv("TYPEAHEAD_DEBOUNCE_DELAY")
    if debounce_delay:
        defaults["debounce_delay"] = float(debounce_delay)

    logger.debug(f"Environment defaults: {defaults}")
    return defaults
