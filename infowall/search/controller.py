"""
Filter Controller - Apply queries to the panel set.

Two macro-states:
  - Unfiltered (query == ""): every panel is shown
  - Filtered (query != ""): each panel is shown iff it matches the words

After every pass the controller recomputes the alternating background
over visible panels, toggles the "no matches" message, pushes the new
state to the renderer and hands count changes to the announcer.
"""

from dataclasses import dataclass
from typing import Optional, Protocol

from loguru import logger

from infowall.search.matcher import FilterMode, FuzzyStrategy, matches
from infowall.search.records import PanelRecord
from infowall.search.tokenizer import tokenize


class PanelRenderer(Protocol):
    """Rendering adapter the controller pushes visibility decisions to."""

    def set_visible(self, index: int, visible: bool) -> None:
        ...

    def set_background_alternate(self, index: int, state: bool) -> None:
        ...

    def set_no_matches_message(self, active: bool, query_text: str) -> None:
        ...


class ChangeAnnouncer(Protocol):
    def announce_change(self, visible_count: int, total: int) -> None:
        ...


@dataclass
class FilterResult:
    """Outcome of one filter pass."""
    visible_count: int
    no_matches: bool


@dataclass
class FilterState:
    """State owned by the filter controller."""
    panels: list[PanelRecord]
    mode: FilterMode
    visible_count: int
    previous_visible_count: int
    last_query: str = ""


class FilterController:
    """Binary per-panel visibility filter over the full panel set."""

    def __init__(
        self,
        panels: list[PanelRecord],
        mode: FilterMode = FilterMode.ANY,
        fuzzy: Optional[FuzzyStrategy] = None,
        alternate_background: bool = True,
        renderer: Optional[PanelRenderer] = None,
        announcer: Optional[ChangeAnnouncer] = None,
    ):
        if not isinstance(mode, FilterMode):
            raise ValueError(f"mode must be a FilterMode, got {mode!r}")

        visible = sum(1 for panel in panels if panel.visible)
        self.state = FilterState(
            panels=list(panels),
            mode=mode,
            visible_count=visible,
            previous_visible_count=visible,
        )
        self.fuzzy = fuzzy
        self.alternate_background = alternate_background
        self.renderer = renderer
        self.announcer = announcer

    @property
    def panels(self) -> list[PanelRecord]:
        return self.state.panels

    def apply_query(self, query: str) -> FilterResult:
        """
        Re-evaluate every panel against a query.

        Args:
            query: Full current query text (not a delta)

        Returns:
            FilterResult with the visible count and message state
        """
        panels = self.state.panels

        if query == "":
            for panel in panels:
                panel.visible = True
        else:
            words = tokenize(query)
            for panel in panels:
                panel.visible = matches(panel, words, self.state.mode, self.fuzzy)

        visible_count = sum(1 for panel in panels if panel.visible)
        no_matches = visible_count == 0 and query != ""

        self.state.visible_count = visible_count
        self.state.last_query = query

        if self.alternate_background:
            self._alternate_backgrounds()

        self._render(no_matches, query)
        self._announce()

        logger.debug(f"Query '{query}': {visible_count} of {len(panels)} panels visible")
        return FilterResult(visible_count=visible_count, no_matches=no_matches)

    def _alternate_backgrounds(self) -> None:
        """Assign false, true, false... over visible panels in order."""
        state = False
        for panel in self.state.panels:
            if not panel.visible:
                continue
            panel.background_alternate = state
            state = not state

    def _render(self, no_matches: bool, query: str) -> None:
        if self.renderer is None:
            return

        for index, panel in enumerate(self.state.panels):
            self.renderer.set_visible(index, panel.visible)
            if self.alternate_background and panel.visible:
                self.renderer.set_background_alternate(index, panel.background_alternate)

        self.renderer.set_no_matches_message(no_matches, query)

    def _announce(self) -> None:
        """Hand a visible-count change to the announcer, then move the baseline."""
        state = self.state
        if state.visible_count != state.previous_visible_count and self.announcer is not None:
            self.announcer.announce_change(state.visible_count, len(state.panels))
        state.previous_visible_count = state.visible_count
