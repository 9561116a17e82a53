"""Cancellable timer bookkeeping for UI state objects."""

import asyncio
from collections.abc import Callable
from typing import Protocol


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Anything with asyncio's ``call_later`` signature."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle: ...


class TimerGroup:
    """Timers started by one component, cancelled together on teardown."""

    def __init__(self, scheduler: Scheduler | None = None) -> None:
        self._scheduler = scheduler
        self._handles: list[TimerHandle] = []

    @property
    def scheduler(self) -> Scheduler:
        if self._scheduler is None:
            self._scheduler = asyncio.get_running_loop()
        return self._scheduler

    def schedule(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        handle = self.scheduler.call_later(delay, callback)
        self._handles.append(handle)
        return handle

    def cancel_all(self) -> None:
        for handle in self._handles:
            handle.cancel()
        self._handles.clear()

    def __len__(self) -> int:
        return len(self._handles)
