"""
Utility functions for the typeahead package.
"""

import os


def get_project_root() -> str:
    """
    Get the project root directory (parent of src/typeahead).

    Returns:
        Absolute path to the project root directory
    """
    return os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def clamp_index(index: int, count: int) -> int:
    """Clamp ``index`` into ``[-1, count - 1]``.

    An empty collection always yields -1.
    """
    if count <= 0:
        return -1
    return max(-1, min(index, count - 1))
