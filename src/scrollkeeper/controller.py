"""Navigation scroll controller.

Resets the viewport to the top after every client-side route change
and every internal link activation. Rendering keeps running after the
route swaps (reflow, late images, anchor scrolling) and may move the
viewport again, so a change triggers one immediate reset followed by
a short batch of delayed resets.

Lifecycle::

    controller = NavigationScrollController(viewport, document, scheduler, router=router)
    handle = controller.attach()
    ...
    controller.detach(handle)

Each route change starts a new *generation*: whatever is still pending
from the previous one is cancelled before the new batch is scheduled,
so a reset from transition N never lands after transition N+1.
Detaching cancels everything synchronously.
"""

import functools
import itertools
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from scrollkeeper._internal.scheduler import Scheduler, TimerHandle
from scrollkeeper.config import ScrollConfig
from scrollkeeper.errors import ConfigurationError, NavigationError
from scrollkeeper.host import EventTarget, Viewport
from scrollkeeper.links import internal_href, is_internal_path
from scrollkeeper.routing.i18n import LanguagePaths
from scrollkeeper.routing.location import NavigationEvent, Router, Unsubscribe

logger = logging.getLogger("scrollkeeper.controller")


class ControllerState(Enum):
    DETACHED = "detached"
    ATTACHED = "attached"


@dataclass(frozen=True, slots=True)
class ControllerHandle:
    """Returned by ``attach()``; identifies one attachment.

    A handle becomes stale when a later ``attach()`` supersedes it.
    """

    token: int
    location: str


class NavigationScrollController:
    """Keeps the viewport at the top across client-side navigations.

    Args:
        viewport: Host scroll primitive.
        document: Host click-listener registry, or ``None`` to skip
            click detection.
        scheduler: Runs delayed resets (``AnyioScheduler`` in production,
            ``ManualScheduler`` in tests).
        config: Delays, scroll behavior, and link detection settings.
        router: Optional location source. When given, the controller
            subscribes to its changes and its navigation hook itself.
    """

    __slots__ = (
        "_click_listener",
        "_config",
        "_document",
        "_last_location",
        "_languages",
        "_pending",
        "_router",
        "_scheduler",
        "_sequence",
        "_state",
        "_token",
        "_unsubscribers",
        "_viewport",
    )

    def __init__(
        self,
        viewport: Viewport,
        document: EventTarget | None,
        scheduler: Scheduler,
        *,
        config: ScrollConfig | None = None,
        router: Router | None = None,
    ) -> None:
        self._viewport = viewport
        self._document = document
        self._scheduler = scheduler
        self._config = config or ScrollConfig()
        self._router = router
        self._languages = LanguagePaths(self._config.languages, self._config.default_language)
        self._state = ControllerState.DETACHED
        self._token = 0
        self._last_location: str | None = None
        self._pending: dict[int, TimerHandle] = {}
        self._sequence = itertools.count()
        self._unsubscribers: list[Unsubscribe] = []
        # Bound once so the exact same callable is removed on teardown
        self._click_listener = self._on_click

    # -- Introspection -----------------------------------------------------

    @property
    def state(self) -> ControllerState:
        return self._state

    @property
    def last_location(self) -> str | None:
        return self._last_location

    @property
    def pending(self) -> int:
        """Number of scheduled resets that have neither fired nor been cancelled."""
        return len(self._pending)

    # -- Lifecycle ---------------------------------------------------------

    def attach(self, current_location: str | None = None) -> ControllerHandle:
        """Start observing and reset the viewport immediately.

        Attaching while already attached replaces the previous
        observation: its listeners are removed and its timers cancelled
        before new ones are installed.

        Raises:
            ConfigurationError: If no location is given and there is no router.
        """
        if current_location is None:
            if self._router is None:
                raise ConfigurationError("attach() needs a location when no router is configured")
            current_location = self._router.path

        if self._state is ControllerState.ATTACHED:
            logger.debug("re-attach at %s supersedes attachment %d", current_location, self._token)
            self._teardown()

        self._token += 1
        self._last_location = current_location
        self._state = ControllerState.ATTACHED

        if self._document is not None:
            self._document.add_event_listener("click", self._click_listener)
        if self._router is not None:
            self._unsubscribers.append(self._router.subscribe(self.location_changed))
            self._unsubscribers.append(self._router.on_navigate(self._on_navigate))

        logger.debug("attached at %s (attachment %d)", current_location, self._token)
        self._reset()
        return ControllerHandle(token=self._token, location=current_location)

    def detach(self, handle: ControllerHandle) -> None:
        """Cancel pending resets and remove every listener.

        Safe to call more than once. Detaching a stale handle does nothing.
        """
        if self._state is ControllerState.DETACHED:
            return
        if handle.token != self._token:
            logger.debug("ignoring detach of stale attachment %d", handle.token)
            return
        self._teardown()
        self._state = ControllerState.DETACHED
        logger.debug("detached (attachment %d)", handle.token)

    # -- Observation -------------------------------------------------------

    def location_changed(self, location: str) -> None:
        """Handle an observed location value.

        No-op while detached or when *location* equals the last one seen.
        """
        if self._state is not ControllerState.ATTACHED:
            return
        previous = self._last_location
        if location == previous:
            return
        self._last_location = location

        if previous is not None and self._keeps_position(previous, location):
            self._cancel_pending()
            logger.debug("language switch %s -> %s keeps scroll position", previous, location)
            return

        self._cancel_pending()
        self._reset()
        for delay in self._config.reset_delays:
            self._schedule(delay)
        logger.debug("location %s -> %s, %d delayed resets", previous, location, len(self._pending))

    def navigate(self, href: str) -> None:
        """Reset now, then hand the navigation to the router.

        Raises:
            ConfigurationError: If the controller has no router.
            NavigationError: If *href* is not an internal path.
        """
        if self._router is None:
            raise ConfigurationError("navigate() requires a router")
        if not is_internal_path(href):
            raise NavigationError(href)
        self._reset()
        self._router.navigate(href)

    def _on_click(self, event: Any) -> None:
        if self._state is not ControllerState.ATTACHED:
            return
        href = internal_href(getattr(event, "target", None), self._config.link_tags)
        if href is None:
            return
        self._schedule(self._config.click_reset_delay)

    def _on_navigate(self, event: NavigationEvent) -> None:
        if self._state is not ControllerState.ATTACHED:
            return
        if self._keeps_position(event.source, event.destination):
            return
        self._schedule(self._config.click_reset_delay)

    def _keeps_position(self, source: str, destination: str) -> bool:
        return (
            not self._config.reset_on_language_switch
            and source != destination
            and self._languages.same_page(source, destination)
        )

    # -- Timers ------------------------------------------------------------

    def _schedule(self, delay: float) -> None:
        key = next(self._sequence)
        self._pending[key] = self._scheduler.call_later(delay, functools.partial(self._fire, key))

    def _fire(self, key: int) -> None:
        if self._pending.pop(key, None) is None:
            return
        self._reset()

    def _cancel_pending(self) -> None:
        pending, self._pending = self._pending, {}
        for handle in pending.values():
            handle.cancel()

    def _teardown(self) -> None:
        self._cancel_pending()
        if self._document is not None:
            self._document.remove_event_listener("click", self._click_listener)
        unsubscribers, self._unsubscribers = self._unsubscribers, []
        for unsubscribe in unsubscribers:
            unsubscribe()

    def _reset(self) -> None:
        try:
            self._viewport.scroll_to(0, 0, behavior=self._config.behavior)
        except Exception:
            logger.warning("scroll reset failed", exc_info=True)
