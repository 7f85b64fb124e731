"""Command-line entry point launching the typeahead demo."""

import os

import typer

from typeahead.config import DEFAULT_DEBOUNCE_DELAY, DEFAULT_MIN_CHARS, load_defaults_from_env
from typeahead.logger import get_logger, setup_logger
from typeahead.presentation.tui import TypeaheadDemoApp

_env_defaults = load_defaults_from_env()

cli = typer.Typer(
    name="typeahead",
    help="Search-as-you-type widget demo",
    add_completion=False,
)


@cli.command()
def main(
    debug: bool = typer.Option(
        os.getenv("DEBUG", "false").lower() == "true", "--debug", help="Enable debug logging"
    ),
    min_chars: int = typer.Option(
        _env_defaults.get("min_chars", DEFAULT_MIN_CHARS), "--min-chars", min=0, help="Minimum query length"
    ),
    debounce: float = typer.Option(
        _env_defaults.get("debounce_delay", DEFAULT_DEBOUNCE_DELAY),
        "--debounce",
        min=0.0,
        help="Debounce window in seconds",
    ),
):
    """Launch the demo with a fruit picker and a country picker."""
    setup_logger(log_level="DEBUG" if debug else None)
    logger = get_logger("main")
    logger.info(f"Starting typeahead demo (min_chars={min_chars}, debounce={debounce}s)")

    TypeaheadDemoApp(min_chars=min_chars, debounce_delay=debounce).run()


def run():
    """Console-script entry point."""
    cli()


if __name__ == "__main__":
    run()
