"""Scroll controller configuration.

ScrollConfig is a frozen dataclass: immutable after creation, IDE-autocompletable,
no string-key dict lookups. Values are validated once, at construction.
"""

from dataclasses import dataclass

from scrollkeeper.errors import ConfigurationError

SCROLL_BEHAVIORS = frozenset({"auto", "instant", "smooth"})


@dataclass(frozen=True, slots=True)
class ScrollConfig:
    """Scroll controller configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ScrollConfig(reset_delays=(0.05, 0.25), behavior="instant")
    """

    # Route changes: one immediate reset, then one per delay (seconds)
    reset_delays: tuple[float, ...] = (0.05, 0.1)

    # Internal link clicks and router navigation events
    click_reset_delay: float = 0.1

    # Passed through to the host scroll primitive
    behavior: str = "auto"

    # Ancestors with these tags are treated as links
    link_tags: tuple[str, ...] = ("a",)

    # Localized routing: the default language carries no path prefix
    reset_on_language_switch: bool = True
    languages: tuple[str, ...] = ("ko", "en", "jp")
    default_language: str = "ko"

    def __post_init__(self) -> None:
        if any(delay < 0 for delay in self.reset_delays):
            raise ConfigurationError(f"reset_delays must be nonnegative, got {self.reset_delays}")
        if list(self.reset_delays) != sorted(self.reset_delays):
            raise ConfigurationError(
                f"reset_delays must be in nondecreasing order, got {self.reset_delays}"
            )
        if self.click_reset_delay < 0:
            raise ConfigurationError(
                f"click_reset_delay must be nonnegative, got {self.click_reset_delay}"
            )
        if self.behavior not in SCROLL_BEHAVIORS:
            raise ConfigurationError(
                f"behavior must be one of {sorted(SCROLL_BEHAVIORS)}, got {self.behavior!r}"
            )
        if not self.link_tags:
            raise ConfigurationError("link_tags must name at least one tag")
        if self.default_language not in self.languages:
            raise ConfigurationError(
                f"default_language {self.default_language!r} is not in languages {self.languages}"
            )
