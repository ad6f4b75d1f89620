"""Test utilities for code built on scrollkeeper.

Provides a manual-clock scheduler and an in-memory host::

    from scrollkeeper.testing import FakeDocument, FakeViewport, ManualScheduler
"""

from scrollkeeper.testing.clock import ManualScheduler, ManualTimer
from scrollkeeper.testing.dom import Click, Element, FakeDocument, FakeViewport

__all__ = [
    "Click",
    "Element",
    "FakeDocument",
    "FakeViewport",
    "ManualScheduler",
    "ManualTimer",
]
