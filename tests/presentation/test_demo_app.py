import pytest
from typer.testing import CliRunner

from typeahead.main import cli
from typeahead.presentation.tui import TypeaheadDemoApp
from typeahead.presentation.widgets import Typeahead


def test_cli_help_lists_options():
    result = CliRunner().invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "--min-chars" in result.output
    assert "--debounce" in result.output


@pytest.mark.asyncio
async def test_demo_fruit_picker_selects():
    app = TypeaheadDemoApp(debounce_delay=0)

    async with app.run_test() as pilot:
        pickers = list(app.query(Typeahead))
        assert [picker.config.id for picker in pickers] == ["fruit", "country"]

        fruit = app.query_one("#fruit-picker", Typeahead)
        fruit.input.focus()
        await pilot.press("m", "a", "n")
        await pilot.pause()
        await pilot.press("down", "enter")
        await pilot.pause()
        await pilot.pause()

        assert fruit.controller.query == "Mango"
        assert fruit.input.value == "Mango"


@pytest.mark.asyncio
async def test_demo_country_create_extends_lookup():
    app = TypeaheadDemoApp(debounce_delay=0, fetch_latency=0)

    async with app.run_test():
        country = app.query_one("#country-picker", Typeahead)
        country.controller.input_changed("Atlantis")
        assert country.controller.create()
        await country.controller.settle()

        assert app.countries[-1].value == "Atlantis"


@pytest.mark.asyncio
async def test_demo_created_fruit_is_offered_afterwards():
    app = TypeaheadDemoApp(debounce_delay=0)

    async with app.run_test() as pilot:
        fruit = app.query_one("#fruit-picker", Typeahead)
        fruit.controller.input_changed("Durian")
        assert fruit.controller.results == ()
        assert fruit.controller.create()
        await pilot.pause()
        await pilot.pause()

        assert app.fruits[-1].value == "Durian"

        fruit.controller.input_changed("Duri")
        assert [option.value for option in fruit.controller.results] == ["Durian"]
