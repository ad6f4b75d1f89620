"""Scrollkeeper exception hierarchy.

Shared across the controller, router, and middleware so every module
raises and catches the same types.
"""


class ScrollKeeperError(Exception):
    """Base for all scrollkeeper-specific errors."""


class ConfigurationError(ScrollKeeperError):
    """Raised when configuration is invalid.

    Typically raised by ``ScrollConfig.__post_init__`` or by
    ``NavigationScrollController.attach()`` when no location is known.
    """


class NavigationError(ScrollKeeperError):
    """Raised when a router is asked to navigate somewhere it cannot go.

    Only internal, path-absolute locations are routable; external URLs
    belong to the browser, not the client-side router.
    """

    def __init__(self, path: str, detail: str = "") -> None:
        self.path = path
        self.detail = detail or "not an internal path"
        super().__init__(f"{path!r}: {self.detail}")


class UnsupportedLanguageError(NavigationError):
    """Raised when a language code is not in the configured set."""

    def __init__(self, language: str, supported: tuple[str, ...]) -> None:
        self.language = language
        self.supported = supported
        super().__init__(
            language,
            f"unsupported language (expected one of: {', '.join(supported)})",
        )
