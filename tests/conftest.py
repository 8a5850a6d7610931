"""
Shared test fixtures for the info wall test suite.

Provides real settings and content files in tmp_path, panel builders,
and a fake main-loop scheduler that fires timeouts when time is advanced.
"""

import json

import pytest
import toml

from infowall.search.records import Entry, PanelRecord
from infowall.utils.helpers import DEFAULT_SETTINGS
from infowall.utils.l10n import Dictionary


class FakeScheduler:
    """Deterministic stand-in for GLib.timeout_add / GLib.source_remove."""

    def __init__(self):
        self.now = 0
        self._next_id = 1
        self.sources = {}

    def timeout_add(self, delay_ms, callback):
        source_id = self._next_id
        self._next_id += 1
        self.sources[source_id] = (self.now + delay_ms, callback)
        return source_id

    def source_remove(self, source_id):
        del self.sources[source_id]

    def advance(self, ms):
        """Move time forward, firing due callbacks in order."""
        target = self.now + ms
        while True:
            due = [(when, sid) for sid, (when, _cb) in self.sources.items() if when <= target]
            if not due:
                break
            when, source_id = min(due)
            self.now = when
            _when, callback = self.sources.pop(source_id)
            if callback():
                self.sources[source_id] = (self.now, callback)
        self.now = target


def _make_panel(*texts, keywords=None, searchable=True):
    """Create a panel record with one entry per text."""
    entries = tuple(Entry(text=text, searchable=searchable) for text in texts)
    return PanelRecord(entries=entries, keywords=keywords)


@pytest.fixture
def make_panel():
    """Factory: make_panel("text", ..., keywords=None, searchable=True)."""
    return _make_panel


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture(autouse=True)
def _default_dictionary():
    """Every test starts with the default localisation strings."""
    Dictionary.fill(DEFAULT_SETTINGS["l10n"])
    yield
    Dictionary.fill({})


@pytest.fixture
def settings():
    """Default settings as load_settings() returns them without a file."""
    return json.loads(json.dumps(DEFAULT_SETTINGS))


@pytest.fixture
def tmp_settings(tmp_path):
    """Create a real settings TOML file overriding a few defaults."""
    settings_path = tmp_path / "settings.toml"
    data = {
        "behaviour": {"filter_mode": "and", "alternate_background": False},
        "search": {"fuzzy_threshold": 90},
        "l10n": {"list_changed": "Showing @visible of @total."},
    }
    settings_path.write_text(toml.dumps(data))
    return settings_path


@pytest.fixture
def content_data():
    """Authoring data with three panels and one blank panel."""
    return {
        "header": "Fruit",
        "properties": [
            {"label": "Name", "show_label": True, "search_in_property": True,
             "styling": {"bold": True, "italic": False}},
            {"label": "Colour", "show_label": True, "search_in_property": True,
             "styling": {"bold": False, "italic": False}},
            {"label": "Secret", "show_label": False, "search_in_property": False,
             "styling": {"bold": False, "italic": True}},
        ],
        "panels": [
            {"entries": ["Apple", "red", "pie"], "keywords": "orchard"},
            {"entries": ["Banana", "yellow", "split"]},
            {"entries": ["Cherry", "<b>red</b>", "jam"], "image": {"path": "cherry.png", "alt": "Cherries"}},
            {"entries": ["  ", ""]},
        ],
        "fallback_image": {"path": "fallback.png", "alt": "Fruit bowl"},
    }


@pytest.fixture
def tmp_content(tmp_path, content_data):
    """Create a real content JSON file."""
    content_path = tmp_path / "content.json"
    content_path.write_text(json.dumps(content_data, indent=2))
    return content_path
