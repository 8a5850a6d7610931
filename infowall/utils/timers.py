"""
Timers - Cancellable one-shot timers on the GLib main loop.

The scheduler is injectable so the debounce logic can run headless in
tests. GLibScheduler is the production backend and imports GLib lazily.
"""

from typing import Callable, Optional, Protocol


class Scheduler(Protocol):
    """Minimal main-loop timer interface (mirrors GLib.timeout_add)."""

    def timeout_add(self, delay_ms: int, callback: Callable[[], bool]) -> int:
        ...

    def source_remove(self, source_id: int) -> None:
        ...


class GLibScheduler:
    """Schedule callbacks with GLib.timeout_add."""

    def timeout_add(self, delay_ms: int, callback: Callable[[], bool]) -> int:
        from gi.repository import GLib
        return GLib.timeout_add(delay_ms, callback)

    def source_remove(self, source_id: int) -> None:
        from gi.repository import GLib
        GLib.source_remove(source_id)


class OneShotTimer:
    """
    Timer that fires at most once per schedule() call.

    Scheduling again while pending cancels the previous callback first,
    so a burst of schedule() calls delivers only the last one.

    Example:
        timer = OneShotTimer(500, lambda text: print(text))
        timer.schedule("first")
        timer.schedule("second")  # only "second" is printed
    """

    def __init__(self, delay_ms: int, callback: Callable, scheduler: Optional[Scheduler] = None):
        self.delay_ms = delay_ms
        self.callback = callback
        self.scheduler = scheduler or GLibScheduler()
        self._source_id: Optional[int] = None
        self._args: tuple = ()

    @property
    def pending(self) -> bool:
        return self._source_id is not None

    def schedule(self, *args) -> None:
        """Cancel any pending callback and schedule a new one."""
        self.cancel()
        self._args = args
        self._source_id = self.scheduler.timeout_add(self.delay_ms, self._fire)

    def cancel(self) -> None:
        """Remove the pending callback, if any."""
        if self._source_id is None:
            return
        self.scheduler.source_remove(self._source_id)
        self._source_id = None

    def _fire(self) -> bool:
        """
        Main-loop callback.

        Returns:
            False so GLib does not repeat the timeout
        """
        self._source_id = None
        args, self._args = self._args, ()
        self.callback(*args)
        return False
