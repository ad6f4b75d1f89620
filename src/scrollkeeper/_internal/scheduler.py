"""Deferred callbacks with individually cancellable handles.

The controller never sleeps itself; it asks a ``Scheduler`` to run a
callback later and keeps the returned ``TimerHandle`` so the whole
generation can be cancelled as a unit.

``AnyioScheduler`` runs each callback as a task in a caller-owned anyio
task group, wrapped in its own ``CancelScope``. Cancelling a handle is
synchronous: once ``cancel()`` returns the callback will not run, even
if its task has not started yet.
"""

from collections.abc import Callable
from typing import Protocol

import anyio
import anyio.abc


class TimerHandle(Protocol):
    """A scheduled callback that can be cancelled."""

    @property
    def cancelled(self) -> bool: ...

    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Something that can run a callback after a delay (in seconds)."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle: ...


class _ScopedTimer:
    __slots__ = ("_cancelled", "scope")

    def __init__(self) -> None:
        self.scope = anyio.CancelScope()
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True
        self.scope.cancel()


class AnyioScheduler:
    """Scheduler backed by an anyio task group.

    Usage::

        async with anyio.create_task_group() as tg:
            controller = NavigationScrollController(
                viewport, document, AnyioScheduler(tg),
            )
            ...
    """

    __slots__ = ("_task_group",)

    def __init__(self, task_group: anyio.abc.TaskGroup) -> None:
        self._task_group = task_group

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        timer = _ScopedTimer()
        self._task_group.start_soon(_run_later, timer, delay, callback)
        return timer


async def _run_later(timer: _ScopedTimer, delay: float, callback: Callable[[], None]) -> None:
    with timer.scope:
        await anyio.sleep(delay)
        if not timer.cancelled:
            callback()
