"""Logging for the typeahead package, built on loguru.

Records go to a rotating file in the project root. Console output is opt-in
because a Textual app owns the terminal. Modules log through
``get_logger(name)``, which binds ``name`` so each line shows its component.
"""

import os
import sys
from typing import Optional

from loguru import logger

from typeahead.utils import get_project_root

DEFAULT_LOG_FILE = "typeahead.log"
LOG_LEVEL_ENV = "TYPEAHEAD_LOG_LEVEL"

_FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[name]}:{function}:{line} - {message}"
_CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)

# Handlers installed by setup_logger; host handlers are left alone
_handler_ids: list[int] = []
_log_file_path: Optional[str] = None


def _resolve_log_file(log_file: Optional[str]) -> str:
    if log_file is None:
        return _log_file_path or os.path.join(get_project_root(), DEFAULT_LOG_FILE)
    if not os.path.isabs(log_file):
        log_file = os.path.join(get_project_root(), log_file)
    return log_file


def setup_logger(
    log_file: Optional[str] = None,
    log_level: Optional[str] = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
    compression: str = "zip",
    console_output: bool = False,
) -> str:
    """
    (Re)install the package's loguru handlers.

    Args:
        log_file: Log file path, relative paths resolve against the project root.
            Keeps the previously configured file when None.
        log_level: Minimum level; falls back to ``TYPEAHEAD_LOG_LEVEL`` and then INFO
        rotation: Size or age at which the file rotates
        retention: How long rotated files are kept
        compression: Format rotated files are compressed with
        console_output: Also log to stderr

    Returns:
        The log file in use
    """
    global _log_file_path

    level = (log_level or os.getenv(LOG_LEVEL_ENV) or "INFO").upper()
    _log_file_path = _resolve_log_file(log_file)

    while _handler_ids:
        logger.remove(_handler_ids.pop())

    if console_output:
        _handler_ids.append(logger.add(sys.stderr, level=level, format=_CONSOLE_FORMAT, colorize=True))

    _handler_ids.append(
        logger.add(
            _log_file_path,
            level=level,
            format=_FILE_FORMAT,
            rotation=rotation,
            retention=retention,
            compression=compression,
            encoding="utf-8",
        )
    )
    return _log_file_path


def get_logger(name: Optional[str] = None):
    """Logger bound to ``name`` (``"typeahead"`` when omitted)."""
    return logger.bind(name=name or "typeahead")


# Records logged without a bound name still need {extra[name]}
logger.configure(extra={"name": "typeahead"})
# Loguru's stderr sink would draw over the Textual screen
logger.remove()
setup_logger()
