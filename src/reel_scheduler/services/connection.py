"""Remote reachability monitoring."""

import asyncio
from collections.abc import Callable

from reel_scheduler.adapters.remote.base import RemoteStore
from reel_scheduler.config import settings
from reel_scheduler.domain.enums import LinkState
from reel_scheduler.logging import get_logger

logger = get_logger(__name__)

TransitionListener = Callable[[LinkState, LinkState], None]


class ConnectionMonitor:
    """Probes the remote store and keeps the shared link-state flag.

    A probe that times out or fails in any way counts as offline; the error
    never escapes. Listeners hear only about changes, never about repeats of
    the current state. Failed probes are not retried; the next tick is the
    retry.
    """

    def __init__(
        self,
        remote: RemoteStore,
        probe_timeout: float | None = None,
        interval: float | None = None,
        initial_state: LinkState = LinkState.ONLINE,
    ) -> None:
        self.remote = remote
        self.probe_timeout = (
            probe_timeout if probe_timeout is not None else settings.probe_timeout_seconds
        )
        self.interval = interval if interval is not None else settings.monitor_interval_seconds
        self._state = initial_state
        self._listeners: list[TransitionListener] = []
        self._probe_task: asyncio.Task[LinkState] | None = None
        self._monitor_task: asyncio.Task[None] | None = None

    @property
    def state(self) -> LinkState:
        return self._state

    @property
    def is_online(self) -> bool:
        return self._state is LinkState.ONLINE

    @property
    def is_monitoring(self) -> bool:
        return self._monitor_task is not None and not self._monitor_task.done()

    def add_listener(self, listener: TransitionListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: TransitionListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    async def probe(self) -> LinkState:
        """Run one bounded health check without touching the shared state."""
        try:
            healthy = await asyncio.wait_for(self.remote.health(), timeout=self.probe_timeout)
        except TimeoutError:
            logger.info("connection_probe_timeout", timeout=self.probe_timeout)
            return LinkState.OFFLINE
        except Exception as e:
            logger.info("connection_probe_failed", error=str(e))
            return LinkState.OFFLINE
        return LinkState.ONLINE if healthy else LinkState.OFFLINE

    async def check(self) -> LinkState:
        """Probe and record the result.

        A probe still in flight is cancelled and superseded by this one.
        """
        if self._probe_task is not None and not self._probe_task.done():
            self._probe_task.cancel()

        task = asyncio.create_task(self.probe())
        self._probe_task = task
        try:
            result = await task
        except asyncio.CancelledError:
            if task.cancelled() and self._probe_task is not task:
                # Superseded by a newer probe, which will record its own result
                return self._state
            raise

        self.set_state(result)
        return result

    def set_state(self, new_state: LinkState) -> None:
        """Update the flag and notify listeners if it changed."""
        old_state = self._state
        if new_state is old_state:
            return

        self._state = new_state
        logger.info("link_state_changed", old=str(old_state), new=str(new_state))
        for listener in list(self._listeners):
            try:
                listener(old_state, new_state)
            except Exception as e:
                logger.error("link_listener_failed", error=str(e))

    def start_monitoring(self, interval: float | None = None) -> None:
        """Begin probing every ``interval`` seconds until stopped."""
        if self.is_monitoring:
            return
        if interval is not None:
            self.interval = interval
        self._monitor_task = asyncio.create_task(self._run())
        logger.info("connection_monitor_started", interval=self.interval)

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            await self.check()

    async def stop_monitoring(self) -> None:
        for task in (self._monitor_task, self._probe_task):
            if task is not None and not task.done():
                task.cancel()
                try:
                    await task
                except asyncio.CancelledError:
                    pass
        self._monitor_task = None
        self._probe_task = None
        logger.info("connection_monitor_stopped")
