"""Core typeahead state machine: debouncing, evaluation, lifecycle, visibility, navigation."""
