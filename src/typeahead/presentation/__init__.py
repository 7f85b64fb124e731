"""Textual presentation layer for the typeahead core."""
