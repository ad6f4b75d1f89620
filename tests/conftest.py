"""Shared fixtures: an in-memory host and a manual clock."""

import pytest

from scrollkeeper.config import ScrollConfig
from scrollkeeper.controller import NavigationScrollController
from scrollkeeper.routing.location import Router
from scrollkeeper.testing import FakeDocument, FakeViewport, ManualScheduler


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def viewport() -> FakeViewport:
    return FakeViewport()


@pytest.fixture
def document() -> FakeDocument:
    return FakeDocument()


@pytest.fixture
def config() -> ScrollConfig:
    # Whole seconds keep the manual clock arithmetic exact
    return ScrollConfig(reset_delays=(1.0, 3.0), click_reset_delay=2.0)


@pytest.fixture
def controller(
    viewport: FakeViewport,
    document: FakeDocument,
    scheduler: ManualScheduler,
    config: ScrollConfig,
) -> NavigationScrollController:
    return NavigationScrollController(viewport, document, scheduler, config=config)


@pytest.fixture
def router() -> Router:
    return Router("/home")


@pytest.fixture
def routed(
    viewport: FakeViewport,
    document: FakeDocument,
    scheduler: ManualScheduler,
    config: ScrollConfig,
    router: Router,
) -> NavigationScrollController:
    return NavigationScrollController(viewport, document, scheduler, config=config, router=router)
