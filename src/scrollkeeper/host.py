"""Host capabilities the controller depends on.

The viewport and the document belong to the host environment (a
browser, a webview bridge, an in-memory test double). The controller
only sees these protocols and never owns the objects behind them.
"""

from collections.abc import Callable
from typing import Any, Protocol


class Viewport(Protocol):
    """The scrollable viewport."""

    def scroll_to(self, x: int, y: int, *, behavior: str = "auto") -> None: ...


class Element(Protocol):
    """A node in the document tree, as far as link detection cares."""

    @property
    def tag(self) -> str: ...

    @property
    def parent(self) -> "Element | None": ...

    def get_attribute(self, name: str) -> str | None: ...


class ClickEvent(Protocol):
    """A click dispatched on the document."""

    @property
    def target(self) -> Element | None: ...


Listener = Callable[[Any], None]


class EventTarget(Protocol):
    """Document-level listener registry."""

    def add_event_listener(self, type: str, listener: Listener) -> None: ...

    def remove_event_listener(self, type: str, listener: Listener) -> None: ...
