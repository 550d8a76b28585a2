"""
Stream provider registry

Providers are registered for a (resource type, element type, direction)
triple and looked up with the resource instance. Resolution walks the
resource's specification from the most specific declaration to the least
specific one, so a provider registered for the resource's class (or one of
its base classes) wins over one registered for a capability interface the
class declares.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from zope.interface import implementedBy, providedBy
from zope.interface.adapter import AdapterRegistry
from zope.interface.interfaces import IInterface

from ioshim.exceptions import (
    AmbiguousElementType,
    NotConfigured,
    StreamError,
    UnsupportedResourceType,
)
from ioshim.interfaces import (
    IStreamAppender,
    IStreamProvider,
    IStreamReader,
    IStreamWriter,
)
from ioshim.settings import Settings
from ioshim.strategy import resolve_strategy
from ioshim.streams import Direction
from ioshim.utils.misc import build_from_settings, load_object
from ioshim.utils.python import global_object_name, without_none_values

if TYPE_CHECKING:
    # typing.Self requires Python 3.11
    from typing_extensions import Self

    from ioshim.settings import BaseSettings
    from ioshim.strategy import ErrorStrategy
    from ioshim.streams import Input, Output


logger = logging.getLogger(__name__)

_DIRECTION_INTERFACES = {
    Direction.READ: IStreamReader,
    Direction.WRITE: IStreamWriter,
    Direction.APPEND: IStreamAppender,
}


def _specification(resource_type: Any) -> Any:
    if IInterface.providedBy(resource_type):
        return resource_type
    if isinstance(resource_type, type):
        return implementedBy(resource_type)
    raise TypeError(
        f"Resource types must be classes or interfaces, got {resource_type!r}"
    )


def _type_name(resource: Any) -> str:
    return type(resource).__qualname__


# register(preferred=...) default meaning "take the provider's own preference"
_PROVIDER_DEFAULT: Any = object()


class StreamProviders:
    def __init__(self) -> None:
        self._providers = AdapterRegistry()
        # (specification, direction) -> {element type: provider}
        self._registrations: dict[tuple[Any, Direction], dict[str, Any]] = {}
        # (specification, direction) -> preferred element type
        self._preferred: dict[tuple[Any, Direction], str] = {}
        # remembers providers which could not be loaded
        self._notconfigured: dict[str, str] = {}

    @classmethod
    def from_settings(cls, settings: BaseSettings | None = None) -> Self:
        """Build a registry holding the providers listed in the
        ``STREAM_PROVIDERS`` and ``STREAM_PROVIDERS_BASE`` settings."""
        if settings is None:
            settings = Settings()
        providers = cls()
        providers.load(settings)
        return providers

    def load(self, settings: BaseSettings) -> None:
        components = without_none_values(settings.getwithbase("STREAM_PROVIDERS"))
        for clspath in sorted(components, key=components.__getitem__):
            self._load_provider(clspath, settings)

    def _load_provider(self, clspath: Any, settings: BaseSettings) -> Any:
        if isinstance(clspath, str):
            name = clspath
        elif isinstance(clspath, type):
            name = global_object_name(clspath)
        else:
            name = repr(clspath)
        try:
            obj = load_object(clspath)
            if isinstance(obj, type):
                provider = build_from_settings(obj, settings)
            else:
                provider = obj
            self.register(provider)
        except NotConfigured as ex:
            logger.debug(
                "Disabled stream provider %(clspath)s: %(reason)s",
                {"clspath": name, "reason": ex},
            )
            self._notconfigured[name] = str(ex)
            return None
        except Exception as ex:
            logger.error(
                'Loading stream provider "%(clspath)s"',
                {"clspath": name},
                exc_info=True,
            )
            self._notconfigured[name] = str(ex)
            return None
        logger.debug("Loaded stream provider %(provider)r", {"provider": provider})
        return provider


    def register(
        self,
        provider: Any,
        resource_type: Any = None,
        direction: Direction | None = None,
        element_types: tuple[str, ...] | None = None,
        preferred: Any = _PROVIDER_DEFAULT,
    ) -> None:
        """Register ``provider``; arguments left out are taken from the
        provider's own attributes. ``preferred=None`` registers the
        provider without a preferred element type."""
        if not IStreamProvider.providedBy(provider):
            raise TypeError(f"{provider!r} is not a stream provider")
        if resource_type is None:
            resource_type = provider.resource_type
        if direction is None:
            direction = provider.direction
        element_types = tuple(element_types or provider.element_types)
        if preferred is _PROVIDER_DEFAULT:
            preferred = provider.preferred
        if preferred is not None and preferred not in element_types:
            raise ValueError(
                f"Preferred element type {preferred!r} is not one of {element_types!r}"
            )

        spec = _specification(resource_type)
        iface = _DIRECTION_INTERFACES[direction]
        key = (spec, direction)
        if preferred is not None:
            current = self._preferred.get(key)
            if current is not None and current != preferred:
                raise ValueError(
                    f"{resource_type!r} already prefers {current!r} elements "
                    f"to {direction.value}, cannot prefer {preferred!r} too"
                )
            self._preferred[key] = preferred

        registered = self._registrations.setdefault(key, {})
        for element_type in element_types:
            previous = registered.get(element_type)
            if previous is not None and previous is not provider:
                logger.debug(
                    "Replacing %(previous)r with %(provider)r for %(element_type)s",
                    {
                        "previous": previous,
                        "provider": provider,
                        "element_type": element_type,
                    },
                )
            self._providers.register([spec], iface, element_type, provider)
            registered[element_type] = provider

    def unregister(
        self,
        resource_type: Any,
        direction: Direction,
        element_type: str | None = None,
    ) -> None:
        """Forget the providers registered for ``resource_type`` and
        ``direction``, only the one for ``element_type`` if given. The
        preference goes away with the element type it names."""
        spec = _specification(resource_type)
        iface = _DIRECTION_INTERFACES[direction]
        key = (spec, direction)
        registered = self._registrations.get(key, {})
        names = list(registered) if element_type is None else [element_type]
        for name in names:
            if registered.pop(name, None) is not None:
                self._providers.unregister([spec], iface, name)
            if self._preferred.get(key) == name:
                del self._preferred[key]
        if not registered:
            self._registrations.pop(key, None)

    def _default_element_type(self, resource: Any, direction: Direction) -> str:
        # the most specific level with providers for the direction decides
        for spec in providedBy(resource).__sro__:
            registered = self._registrations.get((spec, direction))
            if registered:
                break
        else:
            raise UnsupportedResourceType(
                f"No provider to {direction.value} {_type_name(resource)}"
            )
        preferred = self._preferred.get((spec, direction))
        if preferred is not None:
            return preferred
        if len(registered) > 1:
            raise AmbiguousElementType(
                f"{_type_name(resource)} can {direction.value} any of "
                f"{', '.join(sorted(registered))} elements and none is preferred"
            )
        return next(iter(registered))

    def _resolve(
        self, resource: Any, element_type: str | None, direction: Direction
    ) -> tuple[Any, str]:
        if element_type is None:
            element_type = self._default_element_type(resource, direction)
        iface = _DIRECTION_INTERFACES[direction]
        provider = self._providers.lookup([providedBy(resource)], iface, element_type)
        if provider is None:
            raise UnsupportedResourceType(
                f"No provider to {direction.value} {element_type!r} elements "
                f"of {_type_name(resource)}"
            )
        return provider, element_type

    def lookup(
        self,
        resource: Any,
        element_type: str | None = None,
        direction: Direction = Direction.READ,
    ) -> Any:
        """Return the provider responsible for ``resource``."""
        provider, _ = self._resolve(resource, element_type, direction)
        return provider

    def _open(
        self, resource: Any, element_type: str | None, direction: Direction
    ) -> Input | Output:
        provider, element_type = self._resolve(resource, element_type, direction)
        return provider.open(resource, element_type)

    def _open_with(
        self,
        resource: Any,
        element_type: str | None,
        direction: Direction,
        strategy: ErrorStrategy | None,
        category: Any,
    ) -> Any:
        return resolve_strategy(strategy).run(
            self._open, resource, element_type, direction, category=category
        )

    def open_input(
        self,
        resource: Any,
        element_type: str | None = None,
        strategy: ErrorStrategy | None = None,
        category: Any = StreamError,
    ) -> Any:
        return self._open_with(resource, element_type, Direction.READ, strategy, category)

    def open_output(
        self,
        resource: Any,
        element_type: str | None = None,
        strategy: ErrorStrategy | None = None,
        category: Any = StreamError,
    ) -> Any:
        return self._open_with(resource, element_type, Direction.WRITE, strategy, category)

    def open_append(
        self,
        resource: Any,
        element_type: str | None = None,
        strategy: ErrorStrategy | None = None,
        category: Any = StreamError,
    ) -> Any:
        return self._open_with(resource, element_type, Direction.APPEND, strategy, category)

    def __contains__(self, key: tuple[Any, Direction]) -> bool:
        resource_type, direction = key
        return (_specification(resource_type), direction) in self._registrations

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} with {len(self._registrations)} registrations>"
