"""Default presentation helpers: substring filter, item rendering, create text."""

from typeahead.domain.types import Option


def searchable_text(option: Option) -> list[str]:
    """Text fields the default filter looks at: value, label and string extras."""
    fields = [option.value, option.label]
    fields.extend(value for value in option.extra.values() if isinstance(value, str))
    return [field for field in fields if field]


def default_filter_item(option: Option, query: str) -> bool:
    """Case-insensitive substring match over the option's searchable text."""
    needle = query.casefold()
    return any(needle in text.casefold() for text in searchable_text(option))


def default_render_item(option: Option) -> str:
    return option.display_text


def default_create_button_text(query: str) -> str:
    return f'Create "{query}"'
