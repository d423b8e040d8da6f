"""Trailing-edge debounce for the search box."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional, Protocol

logger = logging.getLogger(__name__)

DEFAULT_QUIET_INTERVAL = 1.0


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Timer(Protocol):
    def arm(self, delay: float, callback: Callable[[], None]) -> TimerHandle: ...


class AsyncioTimer:
    """Schedules callbacks on the running asyncio event loop."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        self._loop = loop

    def arm(self, delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay, callback)


class SearchDebouncer:
    """Turns raw search keystrokes into a settled search term.

    ``input`` records the raw text without affecting matching. ``commit``
    (key release) cancels any pending timer and arms a fresh one; when a
    timer expires uncancelled the raw text at that moment is passed to
    ``on_settle``. Only one timer is ever outstanding.
    """

    def __init__(
        self,
        on_settle: Callable[[Optional[str]], None],
        interval: float = DEFAULT_QUIET_INTERVAL,
        timer: Timer | None = None,
    ):
        self.on_settle = on_settle
        self.interval = interval
        self.timer = timer or AsyncioTimer()
        self._raw: Optional[str] = None
        self._handle: TimerHandle | None = None
        self._token: object | None = None

    @property
    def raw_text(self) -> Optional[str]:
        return self._raw

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def input(self, text: str) -> None:
        self._raw = text or None

    def commit(self) -> None:
        self._cancel_handle()
        token = object()

        def fire() -> None:
            # A handle replaced since arming must not settle.
            if self._token is not token:
                return
            self._settle()

        self._token = token
        self._handle = self.timer.arm(self.interval, fire)

    def cancel(self) -> None:
        """Drop any pending timer without settling."""
        self._cancel_handle()

    def flush(self) -> None:
        """Settle immediately if a timer is pending."""
        if self._handle is not None:
            self._cancel_handle()
            self._settle()

    def _settle(self) -> None:
        self._handle = None
        self._token = None
        logger.debug("Search settled: %r", self._raw)
        self.on_settle(self._raw)

    def _cancel_handle(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
        self._handle = None
        self._token = None
