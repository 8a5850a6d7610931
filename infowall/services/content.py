"""
Info Wall Content - Initialise the wall from authoring data and settings.

Builds the panel records, decides whether the filter field is offered,
and wires the filter controller to a rendering adapter and the
visibility announcer once the UI binds to it.

Usage:
    content = InfoWallContent(load_content(), load_settings())
    content.bind(renderer, live_region)
    content.on_query_changed("red apple")
"""

from typing import Any, Callable, Dict, Optional

from loguru import logger

from infowall.search.controller import FilterController, FilterResult, PanelRenderer
from infowall.search.matcher import FilterMode, FuzzyStrategy, RapidfuzzMatcher
from infowall.search.records import PropertyDescriptor, build_panels
from infowall.services.announcer import VisibilityAnnouncer
from infowall.utils.l10n import Dictionary
from infowall.utils.timers import Scheduler


class InfoWallContent:
    """
    One info wall instance.

    Attributes:
        header: Header text shown in the titlebar ("" for none)
        panels: Panel records in authoring order
        offer_filter_field: Whether the titlebar shows the search entry
        has_entries: False when there is nothing to show or filter
    """

    def __init__(
        self,
        content: Dict[str, Any],
        settings: Dict[str, Any],
        fuzzy: Optional[FuzzyStrategy] = None,
        scheduler: Optional[Scheduler] = None,
    ):
        behaviour = settings["behaviour"]
        Dictionary.fill(settings["l10n"])

        properties = content.get("properties") or []
        fallback_image = content.get("fallback_image") if behaviour["use_fallback_image"] else None

        self.header = content.get("header") or ""
        self.image_size = (behaviour["image_width"], behaviour["image_height"])
        self.alternate_background = bool(behaviour["alternate_background"])
        self.mode = FilterMode.from_setting(behaviour["filter_mode"])
        self.fuzzy = fuzzy or RapidfuzzMatcher(settings["search"]["fuzzy_threshold"])
        self.scheduler = scheduler

        self.panels = build_panels(properties, content.get("panels") or [], fallback_image)
        self.has_entries = bool(properties) and bool(self.panels)

        any_searchable = any(PropertyDescriptor.from_params(p).searchable for p in properties)
        self.offer_filter_field = bool(behaviour["offer_filter_field"]) and any_searchable and self.has_entries

        self.controller: Optional[FilterController] = None
        self.announcer: Optional[VisibilityAnnouncer] = None

        logger.debug(
            f"Info wall initialised: {len(self.panels)} panels, "
            f"filter field {'on' if self.offer_filter_field else 'off'}, mode {self.mode.value}"
        )

    @property
    def message(self) -> str:
        """Static message shown instead of panels, "" when there are panels."""
        return "" if self.has_entries else Dictionary.get("no_entries_error")

    @property
    def image_label(self) -> str:
        return Dictionary.get("image")

    @property
    def search_hint(self) -> str:
        return Dictionary.get("enter_to_filter")

    @staticmethod
    def no_matches_message(query: str) -> str:
        return Dictionary.get("no_matches_for_filter", query=query)

    def bind(self, renderer: Optional[PanelRenderer], live_region: Callable[[str], None]) -> None:
        """
        Connect the filter engine to the UI.

        Does nothing when there are no entries; the static message is
        shown instead of activating the engine.
        """
        if not self.has_entries:
            return

        # Rebinding must not leave the previous live region with pending timers
        self.teardown()
        self.announcer = VisibilityAnnouncer(live_region, scheduler=self.scheduler)
        self.controller = FilterController(
            self.panels,
            mode=self.mode,
            fuzzy=self.fuzzy,
            alternate_background=self.alternate_background,
            renderer=renderer,
            announcer=self.announcer,
        )
        # Initial pass paints backgrounds; counts are unchanged so nothing is announced
        self.controller.apply_query("")

    def on_query_changed(self, query: str) -> Optional[FilterResult]:
        """Handle the full current query text after each edit."""
        if self.controller is None:
            return None
        return self.controller.apply_query(query)

    def teardown(self) -> None:
        """Cancel pending announcements before the UI is destroyed."""
        if self.announcer is not None:
            self.announcer.teardown()
