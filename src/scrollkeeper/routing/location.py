"""Reactive router location.

``Router`` owns the current path. Observers subscribe to value changes;
navigation requests go through ``navigate()``, which updates the path
and then announces a ``NavigationEvent`` to navigation hooks.

Subscribers are only notified when the value actually changes, so
setting the same path twice is silent.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from scrollkeeper.errors import NavigationError
from scrollkeeper.links import is_internal_path

logger = logging.getLogger("scrollkeeper.routing")

Unsubscribe = Callable[[], None]


@dataclass(frozen=True, slots=True)
class NavigationEvent:
    """Announced after the router moved to a new path.

    Attributes:
        source: Path the router was on.
        destination: Path it moved to (may equal ``source``).
        replace: ``True`` when the history entry is replaced, not pushed.
    """

    source: str
    destination: str
    replace: bool = False


class Router:
    """Client-side location with change subscriptions and a navigation hook.

    Usage::

        router = Router("/home")
        unsubscribe = router.subscribe(lambda path: print("now at", path))
        router.navigate("/resources")
        router.back()
    """

    __slots__ = ("_history", "_navigation_hooks", "_subscribers")

    def __init__(self, path: str = "/") -> None:
        _check_path(path)
        self._history: list[str] = [path]
        self._subscribers: list[Callable[[str], None]] = []
        self._navigation_hooks: list[Callable[[NavigationEvent], None]] = []

    @property
    def path(self) -> str:
        return self._history[-1]

    @property
    def history(self) -> tuple[str, ...]:
        return tuple(self._history)

    def subscribe(self, callback: Callable[[str], None]) -> Unsubscribe:
        """Call *callback* with the new path after every change."""
        self._subscribers.append(callback)
        return lambda: _discard(self._subscribers, callback)

    def on_navigate(self, hook: Callable[[NavigationEvent], None]) -> Unsubscribe:
        """Call *hook* after every ``navigate()``, changed or not.

        Hooks run once subscribers have seen the new path.
        """
        self._navigation_hooks.append(hook)
        return lambda: _discard(self._navigation_hooks, hook)

    def navigate(self, path: str, *, replace: bool = False) -> None:
        """Move to *path*, pushing (or replacing) a history entry.

        Raises:
            NavigationError: If *path* is not an internal path.
        """
        _check_path(path)
        previous = self.path
        if replace:
            self._history[-1] = path
        else:
            self._history.append(path)
        self._publish(previous)
        event = NavigationEvent(source=previous, destination=path, replace=replace)
        for hook in list(self._navigation_hooks):
            hook(event)

    def back(self) -> bool:
        """Pop one history entry, like the browser's back button.

        Returns ``False`` (and does nothing) at the first entry. Going
        back is an observed location change, not a navigation request,
        so navigation hooks are not called.
        """
        if len(self._history) < 2:
            return False
        previous = self._history.pop()
        self._publish(previous)
        return True

    def sync(self, path: str) -> None:
        """Adopt a path the host changed on its own (e.g. ``popstate``)."""
        _check_path(path)
        previous = self.path
        self._history[-1] = path
        self._publish(previous)

    def _publish(self, previous: str) -> None:
        current = self.path
        if current == previous:
            return
        logger.debug("location %s -> %s", previous, current)
        for callback in list(self._subscribers):
            callback(current)


def _check_path(path: str) -> None:
    if not is_internal_path(path):
        raise NavigationError(path)


def _discard(callbacks: list, callback: object) -> None:
    if callback in callbacks:
        callbacks.remove(callback)
