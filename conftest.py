from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from ioshim.api import set_providers
from ioshim.registry import StreamProviders
from tests.mockserver import MockServer

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(scope="session")
def mockserver() -> Generator[MockServer]:
    with MockServer() as mockserver:
        yield mockserver


@pytest.fixture
def providers() -> StreamProviders:
    return StreamProviders.from_settings()


@pytest.fixture
def default_providers(providers: StreamProviders) -> Generator[StreamProviders]:
    """Install a fresh default registry for the module-level shortcuts."""
    previous = set_providers(providers)
    try:
        yield providers
    finally:
        set_providers(previous)
