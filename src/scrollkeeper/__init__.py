"""Scrollkeeper — keep the viewport at the top across client-side navigation.

Basic usage::

    import anyio
    from scrollkeeper import AnyioScheduler, NavigationScrollController, Router

    router = Router("/home")

    async with anyio.create_task_group() as tg:
        controller = NavigationScrollController(
            viewport, document, AnyioScheduler(tg), router=router,
        )
        handle = controller.attach()
        router.navigate("/resources")  # reset now, and again shortly after
        ...
        controller.detach(handle)

Serving pages over ASGI::

    from scrollkeeper import ScrollResetMiddleware
    app = ScrollResetMiddleware(app)
"""

__version__ = "0.1.0"
__all__ = [
    "AnyioScheduler",
    "ConfigurationError",
    "ControllerHandle",
    "ControllerState",
    "LanguagePaths",
    "NavigationError",
    "NavigationEvent",
    "NavigationScrollController",
    "Router",
    "ScrollConfig",
    "ScrollKeeperError",
    "ScrollResetMiddleware",
    "UnsupportedLanguageError",
    "scroll_reset_snippet",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import scrollkeeper`` fast while providing a clean top-level API.
    """
    if name in ("NavigationScrollController", "ControllerHandle", "ControllerState"):
        from scrollkeeper import controller as _controller

        return getattr(_controller, name)

    if name == "AnyioScheduler":
        from scrollkeeper._internal.scheduler import AnyioScheduler

        return AnyioScheduler

    if name == "ScrollConfig":
        from scrollkeeper.config import ScrollConfig

        return ScrollConfig

    if name in ("Router", "NavigationEvent", "LanguagePaths"):
        from scrollkeeper import routing as _routing

        return getattr(_routing, name)

    if name == "ScrollResetMiddleware":
        from scrollkeeper.middleware import ScrollResetMiddleware

        return ScrollResetMiddleware

    if name == "scroll_reset_snippet":
        from scrollkeeper.client import scroll_reset_snippet

        return scroll_reset_snippet

    if name in (
        "ScrollKeeperError",
        "ConfigurationError",
        "NavigationError",
        "UnsupportedLanguageError",
    ):
        from scrollkeeper import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
