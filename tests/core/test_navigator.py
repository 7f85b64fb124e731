import pytest

from typeahead.core.navigator import KeyboardNavigator, NavigatorSnapshot, normalize_key
from typeahead.domain.types import KeyAction, NavigatorMode


def snapshot(
    query: str = "ap",
    item_count: int = 3,
    active_index: int = -1,
    visible: bool = True,
    create_eligible: bool = False,
) -> NavigatorSnapshot:
    return NavigatorSnapshot(
        query=query,
        item_count=item_count,
        active_index=active_index,
        visible=visible,
        create_eligible=create_eligible,
    )


@pytest.fixture
def navigator() -> KeyboardNavigator:
    return KeyboardNavigator(min_chars=1)


def test_modes():
    assert KeyboardNavigator.mode(snapshot(visible=False)) is NavigatorMode.CLOSED
    assert KeyboardNavigator.mode(snapshot(item_count=0)) is NavigatorMode.OPEN_EMPTY
    assert KeyboardNavigator.mode(snapshot()) is NavigatorMode.OPEN_WITH_ITEMS


def test_textual_key_names_are_normalized():
    assert normalize_key("down") == "ArrowDown"
    assert normalize_key("enter") == "Enter"
    assert normalize_key("x") == "x"


class TestClosed:
    """Keys while the panel is hidden."""

    def test_arrow_down_opens_on_first_item(self, navigator):
        outcome = navigator.handle("ArrowDown", snapshot(visible=False))
        assert outcome.action is KeyAction.OPEN
        assert outcome.active_index == 0
        assert outcome.prevent_default

    def test_arrow_up_opens_on_last_item(self, navigator):
        outcome = navigator.handle("up", snapshot(visible=False))
        assert outcome.action is KeyAction.OPEN
        assert outcome.active_index == 2

    def test_opens_onto_create_affordance_without_items(self, navigator):
        outcome = navigator.handle("ArrowDown", snapshot(visible=False, item_count=0, create_eligible=True))
        assert outcome.action is KeyAction.OPEN
        assert outcome.active_index == -1

    def test_nothing_to_show_stays_closed(self, navigator):
        outcome = navigator.handle("ArrowDown", snapshot(visible=False, item_count=0))
        assert outcome.action is KeyAction.NONE
        assert not outcome.prevent_default

    def test_short_query_stays_closed(self):
        outcome = KeyboardNavigator(min_chars=3).handle("ArrowDown", snapshot(visible=False))
        assert outcome.action is KeyAction.NONE

    def test_enter_passes_through(self, navigator):
        outcome = navigator.handle("Enter", snapshot(visible=False))
        assert not outcome.handled
        assert not outcome.prevent_default


class TestOpenWithItems:
    """Keys while results are listed."""

    def test_arrow_down_wraps(self, navigator):
        index = -1
        seen = []
        for _ in range(4):
            outcome = navigator.handle("ArrowDown", snapshot(active_index=index))
            assert outcome.action is KeyAction.MOVE
            index = outcome.active_index
            seen.append(index)
        assert seen == [0, 1, 2, 0]

    def test_arrow_up_wraps(self, navigator):
        index = -1
        seen = []
        for _ in range(4):
            index = navigator.handle("ArrowUp", snapshot(active_index=index)).active_index
            seen.append(index)
        assert seen == [2, 1, 0, 2]

    def test_arrow_up_without_highlight_lands_on_last_item(self, navigator):
        outcome = navigator.handle("ArrowUp", snapshot(item_count=4, active_index=-1))
        assert outcome.action is KeyAction.MOVE
        assert outcome.active_index == 3

    def test_enter_selects_active(self, navigator):
        outcome = navigator.handle("Enter", snapshot(active_index=1))
        assert outcome.action is KeyAction.SELECT
        assert outcome.active_index == 1
        assert outcome.prevent_default

    def test_enter_without_highlight_falls_back_to_create(self, navigator):
        outcome = navigator.handle("Enter", snapshot(create_eligible=True))
        assert outcome.action is KeyAction.CREATE

    def test_enter_without_highlight_does_nothing(self, navigator):
        outcome = navigator.handle("Enter", snapshot())
        assert outcome.action is KeyAction.NONE
        assert outcome.prevent_default

    def test_escape_closes(self, navigator):
        outcome = navigator.handle("Escape", snapshot(active_index=1))
        assert outcome.action is KeyAction.CLOSE
        assert outcome.active_index == -1
        assert outcome.prevent_default

    def test_tab_closes_without_blocking_focus_move(self, navigator):
        outcome = navigator.handle("tab", snapshot(active_index=1))
        assert outcome.action is KeyAction.CLOSE
        assert not outcome.prevent_default

    def test_other_keys_type_normally(self, navigator):
        outcome = navigator.handle("a", snapshot(active_index=1))
        assert outcome.action is KeyAction.NONE
        assert outcome.active_index == 1
        assert not outcome.prevent_default


class TestOpenEmpty:
    """Keys while only the create affordance is shown."""

    def test_enter_creates(self, navigator):
        outcome = navigator.handle("Enter", snapshot(item_count=0, create_eligible=True))
        assert outcome.action is KeyAction.CREATE

    def test_arrows_do_nothing(self, navigator):
        outcome = navigator.handle("ArrowDown", snapshot(item_count=0, create_eligible=True))
        assert outcome.action is KeyAction.NONE
        assert outcome.active_index == -1

    def test_escape_closes(self, navigator):
        outcome = navigator.handle("Escape", snapshot(item_count=0, create_eligible=True))
        assert outcome.action is KeyAction.CLOSE

    def test_tab_closes_without_blocking_focus_move(self, navigator):
        outcome = navigator.handle("Tab", snapshot(item_count=0, create_eligible=True))
        assert outcome.action is KeyAction.CLOSE
        assert outcome.active_index == -1
        assert not outcome.prevent_default
