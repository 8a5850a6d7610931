"""
Visibility Announcer - Debounced live-region updates for screen readers.

When the number of visible panels changes, a "showing X of Y" message is
scheduled after a settling period. A new change before the period ends
replaces the pending message, so only the settled state is announced.

Delivered text is cleared again shortly after, which makes a repeated
identical message a distinct event for assistive technology.
"""

from typing import Callable, Optional

from loguru import logger

from infowall.utils.l10n import Dictionary
from infowall.utils.timers import OneShotTimer, Scheduler

ANNOUNCE_DELAY_MS = 500
CLEAR_DELAY_MS = 100


def default_message(visible_count: int, total: int) -> str:
    return Dictionary.get("list_changed", visible=visible_count, total=total)


class VisibilityAnnouncer:
    """
    Debounce visible-count changes into live-region text.

    Args:
        live_region: Called with the message, then with "" to clear it
        message_for: Builds the message from (visible_count, total)
        scheduler: Timer backend, GLib main loop by default
    """

    def __init__(
        self,
        live_region: Callable[[str], None],
        message_for: Callable[[int, int], str] = default_message,
        scheduler: Optional[Scheduler] = None,
        announce_delay_ms: int = ANNOUNCE_DELAY_MS,
        clear_delay_ms: int = CLEAR_DELAY_MS,
    ):
        self.live_region = live_region
        self.message_for = message_for
        self._announce_timer = OneShotTimer(announce_delay_ms, self._deliver, scheduler)
        self._clear_timer = OneShotTimer(clear_delay_ms, self._clear, scheduler)

    @property
    def pending(self) -> bool:
        return self._announce_timer.pending

    def announce_change(self, visible_count: int, total: int) -> None:
        """Replace any pending announcement with one for the new counts."""
        self._announce_timer.schedule(self.message_for(visible_count, total))

    def teardown(self) -> None:
        """Cancel pending timers before the live region goes away."""
        self._announce_timer.cancel()
        self._clear_timer.cancel()

    def _deliver(self, message: str) -> None:
        logger.debug(f"Announcing: {message}")
        self._clear_timer.cancel()
        self.live_region(message)
        self._clear_timer.schedule()

    def _clear(self) -> None:
        self.live_region("")
