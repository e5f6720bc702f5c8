"""Debounced autosave."""

import asyncio
from collections.abc import Callable

from reel_scheduler.config import settings
from reel_scheduler.logging import get_logger

logger = get_logger(__name__)


class CancellableTimer:
    """Fire-once timer on the running event loop.

    ``schedule()`` (re)arms the timer, ``cancel()`` disarms it and
    ``fire_now()`` runs the callback immediately if armed.
    """

    def __init__(self, delay: float, callback: Callable[[], None]) -> None:
        self.delay = delay
        self._callback = callback
        self._handle: asyncio.TimerHandle | None = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def schedule(self) -> None:
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay, self._fire)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def fire_now(self) -> bool:
        """Run the callback now if armed. Returns whether it ran."""
        if self._handle is None:
            return False
        self.cancel()
        self._callback()
        return True

    def _fire(self) -> None:
        self._handle = None
        self._callback()


class AutosaveScheduler:
    """Coalesces bursts of mutation notices into a single save.

    Every ``notify_mutation()`` restarts the quiet window; the save runs
    once when the window elapses without another notice. No mutation
    history is kept.
    """

    def __init__(self, save: Callable[[], object], delay: float | None = None) -> None:
        self._save = save
        self._timer = CancellableTimer(
            delay if delay is not None else settings.autosave_delay_seconds, self._run_save
        )
        self.saves_triggered = 0

    @property
    def delay(self) -> float:
        return self._timer.delay

    @delay.setter
    def delay(self, value: float) -> None:
        self._timer.delay = value

    @property
    def pending(self) -> bool:
        return self._timer.pending

    def notify_mutation(self) -> None:
        self._timer.schedule()

    def flush(self) -> bool:
        """Save immediately if a save is pending."""
        return self._timer.fire_now()

    def cancel(self) -> None:
        self._timer.cancel()

    def _run_save(self) -> None:
        self.saves_triggered += 1
        logger.debug("autosave_triggered", count=self.saves_triggered)
        try:
            self._save()
        except Exception as e:
            logger.error("autosave_failed", error=str(e))
