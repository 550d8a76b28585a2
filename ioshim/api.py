"""
Module-level shortcuts over a default :class:`~ioshim.registry.StreamProviders`.

The default registry is built from the default settings the first time it is
needed. Use :func:`set_providers` to install a differently configured one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ioshim.exceptions import StreamError
from ioshim.registry import StreamProviders

if TYPE_CHECKING:
    from ioshim.strategy import ErrorStrategy


_providers: StreamProviders | None = None


def get_providers() -> StreamProviders:
    global _providers  # noqa: PLW0603

    if _providers is None:
        _providers = StreamProviders.from_settings()
    return _providers


def set_providers(providers: StreamProviders | None) -> StreamProviders | None:
    """Install ``providers`` as the default registry and return the previous
    one. ``None`` makes the next call rebuild it from the default settings."""
    global _providers  # noqa: PLW0603

    previous, _providers = _providers, providers
    return previous


def open_input(
    resource: Any,
    element_type: str | None = None,
    strategy: ErrorStrategy | None = None,
    category: Any = StreamError,
) -> Any:
    return get_providers().open_input(resource, element_type, strategy, category)


def open_output(
    resource: Any,
    element_type: str | None = None,
    strategy: ErrorStrategy | None = None,
    category: Any = StreamError,
) -> Any:
    return get_providers().open_output(resource, element_type, strategy, category)


def open_append(
    resource: Any,
    element_type: str | None = None,
    strategy: ErrorStrategy | None = None,
    category: Any = StreamError,
) -> Any:
    return get_providers().open_append(resource, element_type, strategy, category)
