"""
TypeaheadDemoApp - showcases a static and an async typeahead side by side.
"""

import asyncio
import random
import time

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.errors import NoWidget
from textual.widgets import Footer, Header, Static

from typeahead.config import TypeaheadConfig
from typeahead.domain.events import EventBus, PointerPressed
from typeahead.domain.types import Option
from typeahead.logger import get_logger
from typeahead.presentation.widgets import Typeahead

logger = get_logger("demo_app")

FRUITS = [
    {"id": "f1", "value": "Apple", "label": "🍎 Apple"},
    {"id": "f2", "value": "Banana", "label": "🍌 Banana"},
    {"id": "f3", "value": "Orange", "label": "🍊 Orange"},
    {"id": "f4", "value": "Grape", "label": "🍇 Grape"},
    {"id": "f5", "value": "Mango", "label": "🥭 Mango"},
    {"id": "f6", "value": "Strawberry", "label": "🍓 Strawberry"},
]

COUNTRIES = [
    {"id": "c1", "value": "United States", "label": "🇺🇸 United States of America"},
    {"id": "c2", "value": "Canada", "label": "🇨🇦 Canada"},
    {"id": "c3", "value": "United Kingdom", "label": "🇬🇧 United Kingdom"},
    {"id": "c4", "value": "Germany", "label": "🇩🇪 Germany"},
]


class TypeaheadDemoApp(App):
    """
    Two pickers: fruits filtered in memory, countries looked up with simulated latency.

    Every pointer press is published on a shared EventBus so each typeahead
    can close when the press lands outside it.
    """

    TITLE = "Typeahead"
    SUB_TITLE = "Search-as-you-type demo"

    CSS = """
    #demo-body {
        padding: 1 2;
    }

    #notification {
        height: 1;
        color: $success;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
    ]

    def __init__(self, min_chars: int = 1, debounce_delay: float = 0.3, fetch_latency: float = 0.7):
        super().__init__()
        self.event_bus = EventBus()
        self.min_chars = min_chars
        self.debounce_delay = debounce_delay
        self.fetch_latency = fetch_latency
        self.fruits = [Option.model_validate(fruit) for fruit in FRUITS]
        self.countries = [Option.model_validate(country) for country in COUNTRIES]

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="demo-body"):
            yield Static("", id="notification")
            yield Typeahead(
                TypeaheadConfig(
                    id="fruit",
                    label="Fruit (static data)",
                    placeholder="Type a fruit...",
                    static_data=self.fruits,
                    on_select=self._on_fruit_select,
                    on_create=self._on_fruit_create,
                    min_chars=self.min_chars,
                    debounce_delay=self.debounce_delay,
                ),
                event_bus=self.event_bus,
                id="fruit-picker",
            )
            yield Typeahead(
                TypeaheadConfig(
                    id="country",
                    label="Country (async lookup)",
                    placeholder="Type a country...",
                    fetch_data=self._fetch_countries,
                    on_select=self._on_country_select,
                    on_create=self._on_country_create,
                    create_button_text=lambda query: f'Add country "{query}"',
                    min_chars=self.min_chars,
                    debounce_delay=self.debounce_delay,
                ),
                event_bus=self.event_bus,
                id="country-picker",
            )
        yield Footer()

    def on_mouse_down(self, event: events.MouseDown) -> None:
        try:
            target, _region = self.screen.get_widget_at(event.screen_x, event.screen_y)
        except NoWidget:
            target = None
        self.event_bus.publish(PointerPressed(target=target))

    def notify_user(self, text: str) -> None:
        logger.info(text)
        self.query_one("#notification", Static).update(text)

    async def _fetch_countries(self, query: str) -> list[Option]:
        self.notify_user(f"Fetching countries for: {query}...")
        await asyncio.sleep(self.fetch_latency + random.random() * 0.5)
        needle = query.lower()
        matches = [
            country
            for country in self.countries
            if needle in country.value.lower() or needle in country.label.lower()
        ]
        self.notify_user("")
        return matches

    def _on_fruit_select(self, option: Option | None, value: str) -> None:
        self.notify_user(f"Selected fruit: {option.label}" if option else f"Input value: {value}")

    def _on_fruit_create(self, query: str) -> None:
        self.fruits.append(Option(id=f"new-{int(time.time() * 1000)}", value=query, label=query))
        self.notify_user(f'Fruit "{query}" created.')

    def on_typeahead_created(self, event: Typeahead.Created) -> None:
        # Static data lives in a frozen config; hand the grown list to the controller
        if event.typeahead.config.id == "fruit":
            event.typeahead.controller.replace_data(static_data=self.fruits)

    def _on_country_select(self, option: Option | None, value: str) -> None:
        self.notify_user(f"Selected country: {option.label}" if option else f"Input value: {value}")

    def _on_country_create(self, query: str) -> None:
        self.countries.append(Option(id=f"new-{int(time.time() * 1000)}", value=query, label=f"🏳️ {query}"))
        self.notify_user(f'Country "{query}" created and added to the lookup.')
