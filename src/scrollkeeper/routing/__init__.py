"""Routing — reactive client location and language-prefixed paths."""

from scrollkeeper.routing.i18n import LanguagePaths
from scrollkeeper.routing.location import NavigationEvent, Router

__all__ = ["LanguagePaths", "NavigationEvent", "Router"]
