"""Rest timer: countdown between sets, plus the asyncio task that ticks it."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from fitmaster.core.constants import REST_FINISHED_BODY, REST_FINISHED_TITLE, TIMER_TICK_SECONDS
from fitmaster.core.enums import TimerState
from fitmaster.services.notifications import Notifier, NullNotifier

logger = logging.getLogger(__name__)

DEFAULT_OPTIONS = (30, 45, 60, 90, 120, 180)


def format_seconds(seconds: int) -> str:
    """90 -> '1:30'."""
    mins, secs = divmod(max(0, seconds), 60)
    return f"{mins}:{secs:02d}"


class RestTimer:
    """Single countdown attached to a session.

    `tick()` advances one second; nothing here touches the clock, so the
    timer can be driven by a TimerTicker or stepped directly.
    """

    def __init__(
        self,
        duration: int = 90,
        options: Sequence[int] = DEFAULT_OPTIONS,
        notifier: Notifier | None = None,
    ):
        self._options = tuple(options)
        self._check(duration)
        self._duration = duration
        self._notifier = notifier or NullNotifier()
        self.time_left = duration
        self.state = TimerState.IDLE

    def _check(self, seconds: int) -> None:
        if seconds not in self._options:
            raise ValueError(f"Rest duration must be one of {self._options}")

    @property
    def duration(self) -> int:
        return self._duration

    @property
    def options(self) -> tuple[int, ...]:
        return self._options

    @property
    def running(self) -> bool:
        return self.state is TimerState.RUNNING

    @property
    def finished(self) -> bool:
        return self.state is TimerState.FINISHED

    def start(self) -> None:
        self.time_left = self._duration
        self.state = TimerState.RUNNING
        try:
            self._notifier.request_permission()
        except Exception:
            logger.warning("Notification permission request failed", exc_info=True)

    def pause(self) -> None:
        """Stop counting; time_left is kept."""
        if self.running:
            self.state = TimerState.IDLE

    def resume(self) -> None:
        if self.state is TimerState.IDLE and self.time_left > 0:
            self.state = TimerState.RUNNING

    def reset(self) -> None:
        self.state = TimerState.IDLE
        self.time_left = self._duration

    def set_duration(self, seconds: int) -> None:
        """A running countdown is left alone; otherwise time_left follows the new duration."""
        self._check(seconds)
        self._duration = seconds
        if not self.running:
            self.time_left = seconds

    def tick(self) -> bool:
        """Advance one second. Returns True on the tick that finishes the countdown."""
        if not self.running:
            return False
        self.time_left -= 1
        if self.time_left > 0:
            return False
        self.time_left = 0
        self.state = TimerState.FINISHED
        self._notify()
        return True

    def _notify(self) -> None:
        try:
            self._notifier.notify(REST_FINISHED_TITLE, REST_FINISHED_BODY)
        except Exception:
            logger.warning("Rest timer notification failed", exc_info=True)

    def formatted(self) -> str:
        return format_seconds(self.time_left)


class TimerTicker:
    """Ticks a RestTimer every `interval` seconds on the running event loop.

    The task stops by itself once the timer leaves the running state; cancel()
    must be called when the owning session goes away.
    """

    def __init__(self, timer: RestTimer, interval: float = TIMER_TICK_SECONDS):
        self._timer = timer
        self._interval = interval
        self._task: asyncio.Task | None = None

    @property
    def active(self) -> bool:
        return self._task is not None and not self._task.done()

    def restart(self) -> None:
        """Cancel any pending loop and start a fresh one if the timer is running."""
        self.cancel()
        if self._timer.running:
            self._task = asyncio.get_running_loop().create_task(self._run())

    def cancel(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    async def _run(self) -> None:
        while self._timer.running:
            await asyncio.sleep(self._interval)
            self._timer.tick()
