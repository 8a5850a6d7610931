"""
Tests for InfoWallContent initialisation and wiring.

Uses real settings/content dictionaries, a recording renderer and the
FakeScheduler from conftest. No GTK is involved.
"""

from infowall.search.matcher import FilterMode
from infowall.services.announcer import ANNOUNCE_DELAY_MS
from infowall.services.content import InfoWallContent
from infowall.utils.helpers import load_content, load_settings


class RecordingRenderer:
    def __init__(self):
        self.visible = {}
        self.background = {}
        self.message = None

    def set_visible(self, index, visible):
        self.visible[index] = visible

    def set_background_alternate(self, index, state):
        self.background[index] = state

    def set_no_matches_message(self, active, query_text):
        self.message = (active, query_text)


def _bound(content_data, settings, scheduler):
    content = InfoWallContent(content_data, settings, scheduler=scheduler)
    renderer = RecordingRenderer()
    region = []
    content.bind(renderer, region.append)
    return content, renderer, region


class TestInitialisation:
    """Test decisions taken from authoring data and settings."""

    def test_builds_non_empty_panels(self, content_data, settings):
        content = InfoWallContent(content_data, settings)
        assert len(content.panels) == 3
        assert content.header == "Fruit"
        assert content.has_entries is True
        assert content.message == ""

    def test_mode_from_settings(self, content_data, settings):
        settings["behaviour"]["filter_mode"] = "and"
        assert InfoWallContent(content_data, settings).mode is FilterMode.ALL

    def test_unknown_mode_falls_back_to_or(self, content_data, settings):
        settings["behaviour"]["filter_mode"] = "maybe"
        assert InfoWallContent(content_data, settings).mode is FilterMode.ANY

    def test_fallback_image_requires_setting(self, content_data, settings):
        content = InfoWallContent(content_data, settings)
        assert content.panels[0].image is None

        settings["behaviour"]["use_fallback_image"] = True
        content = InfoWallContent(content_data, settings)
        assert content.panels[0].image.path == "fallback.png"
        assert content.panels[2].image.path == "cherry.png"

    def test_filter_field_offered(self, content_data, settings):
        assert InfoWallContent(content_data, settings).offer_filter_field is True

    def test_filter_field_disabled_by_setting(self, content_data, settings):
        settings["behaviour"]["offer_filter_field"] = False
        assert InfoWallContent(content_data, settings).offer_filter_field is False

    def test_filter_field_needs_searchable_property(self, content_data, settings):
        for prop in content_data["properties"]:
            prop["search_in_property"] = False
        assert InfoWallContent(content_data, settings).offer_filter_field is False

    def test_no_panels_shows_no_entries_message(self, content_data, settings):
        content_data["panels"] = [{"entries": ["", " "]}]
        content = InfoWallContent(content_data, settings)
        assert content.has_entries is False
        assert content.offer_filter_field is False
        assert content.message == "The author did not enter anything."

    def test_no_properties_shows_no_entries_message(self, content_data, settings):
        content_data["properties"] = []
        content = InfoWallContent(content_data, settings)
        assert content.has_entries is False
        assert content.message == "The author did not enter anything."

    def test_localised_strings_from_settings(self, content_data, settings):
        settings["l10n"]["no_matches_for_filter"] = "Nothing for @query"
        content = InfoWallContent(content_data, settings)
        assert content.no_matches_message("kiwi") == "Nothing for kiwi"

    def test_from_files(self, tmp_content, tmp_settings):
        content = InfoWallContent(load_content(tmp_content), load_settings(tmp_settings))
        assert content.mode is FilterMode.ALL
        assert content.alternate_background is False
        assert content.fuzzy.threshold == 90


class TestBinding:
    """Test the engine once the UI binds to the content."""

    def test_bind_paints_initial_state(self, content_data, settings, scheduler):
        content, renderer, region = _bound(content_data, settings, scheduler)
        assert renderer.visible == {0: True, 1: True, 2: True}
        assert renderer.background == {0: False, 1: True, 2: False}
        assert renderer.message == (False, "")
        scheduler.advance(1000)
        assert region == []

    def test_query_filters_and_announces(self, content_data, settings, scheduler):
        content, renderer, region = _bound(content_data, settings, scheduler)
        result = content.on_query_changed("red")
        assert result.visible_count == 2
        assert renderer.visible == {0: True, 1: False, 2: True}
        scheduler.advance(ANNOUNCE_DELAY_MS)
        assert region == ["List changed. Showing 2 of 3 items."]

    def test_keywords_are_searched(self, content_data, settings, scheduler):
        content, renderer, region = _bound(content_data, settings, scheduler)
        assert content.on_query_changed("orchard").visible_count == 1

    def test_non_searchable_property_is_ignored(self, content_data, settings, scheduler):
        content, renderer, region = _bound(content_data, settings, scheduler)
        assert content.on_query_changed("split").visible_count == 0
        assert renderer.message == (True, "split")

    def test_query_before_bind_is_ignored(self, content_data, settings):
        content = InfoWallContent(content_data, settings)
        assert content.on_query_changed("red") is None

    def test_bind_without_entries_does_nothing(self, content_data, settings, scheduler):
        content_data["panels"] = []
        content, renderer, region = _bound(content_data, settings, scheduler)
        assert content.controller is None
        assert renderer.visible == {}
        assert content.on_query_changed("red") is None

    def test_teardown_cancels_announcement(self, content_data, settings, scheduler):
        content, renderer, region = _bound(content_data, settings, scheduler)
        content.on_query_changed("banana")
        content.teardown()
        scheduler.advance(1000)
        assert region == []

    def test_rebind_cancels_previous_announcement(self, content_data, settings, scheduler):
        content, renderer, old_region = _bound(content_data, settings, scheduler)
        content.on_query_changed("banana")
        new_region = []
        content.bind(RecordingRenderer(), new_region.append)
        scheduler.advance(1000)
        assert old_region == []

    def test_teardown_without_bind(self, content_data, settings):
        InfoWallContent(content_data, settings).teardown()
