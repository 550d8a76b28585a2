"""Stream providers: openers of native streams for one resource type"""

from __future__ import annotations

import logging
from typing import IO, TYPE_CHECKING, Any

from zope.interface import implementer

from ioshim.exceptions import (
    ResourceUnavailable,
    StreamError,
    UnsupportedResourceType,
)
from ioshim.interfaces import (
    IStreamAppender,
    IStreamProvider,
    IStreamReader,
    IStreamWriter,
)
from ioshim.strategy import resolve_strategy
from ioshim.streams import (
    BYTES,
    DEFAULT_OPTIONS,
    ELEMENT_TYPES,
    Direction,
    StreamOptions,
    wrap_stream,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    # typing.Self requires Python 3.11
    from typing_extensions import Self

    from ioshim.settings import BaseSettings
    from ioshim.strategy import ErrorStrategy
    from ioshim.streams import Input, Output


logger = logging.getLogger(__name__)


@implementer(IStreamProvider)
class StreamProvider:
    resource_type: Any = object
    direction: Direction
    element_types: tuple[str, ...] = ELEMENT_TYPES
    preferred: str | None = BYTES
    do_not_close: bool = False
    # native failures reported as ResourceUnavailable
    native_errors: tuple[type[BaseException], ...] = (OSError,)

    def __init__(self, options: StreamOptions | None = None):
        self.options: StreamOptions = options or DEFAULT_OPTIONS

    @classmethod
    def from_settings(cls, settings: BaseSettings) -> Self:
        return cls(StreamOptions.from_settings(settings))

    def open_native(self, resource: Any, element_type: str) -> IO[Any]:
        """Return a freshly opened native stream for ``resource``"""
        raise NotImplementedError

    def open(self, resource: Any, element_type: str | None = None) -> Input | Output:
        if element_type is None:
            element_type = self.preferred or self.element_types[0]
        if element_type not in self.element_types:
            raise UnsupportedResourceType(
                f"{self.__class__.__name__} cannot {self.direction.value} "
                f"{element_type!r} elements"
            )
        try:
            stream = self.open_native(resource, element_type)
        except ResourceUnavailable:
            raise
        except self.native_errors as e:
            raise ResourceUnavailable.from_native(e, resource) from e
        logger.debug(
            "Opened %(resource)r for %(direction)s (%(element_type)s)",
            {
                "resource": resource,
                "direction": self.direction.value,
                "element_type": element_type,
            },
        )
        return wrap_stream(
            stream,
            element_type,
            self.direction,
            self.options,
            do_not_close=self.do_not_close,
        )

    def _open_with(
        self,
        resource: Any,
        element_type: str | None,
        strategy: ErrorStrategy | None,
        category: Any,
    ) -> Any:
        return resolve_strategy(strategy).run(
            self.open, resource, element_type, category=category
        )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} for {self.resource_type!r}>"


@implementer(IStreamReader)
class StreamReader(StreamProvider):
    direction = Direction.READ

    def input(
        self,
        resource: Any,
        element_type: str | None = None,
        strategy: ErrorStrategy | None = None,
        category: Any = StreamError,
    ) -> Any:
        return self._open_with(resource, element_type, strategy, category)


@implementer(IStreamWriter)
class StreamWriter(StreamProvider):
    direction = Direction.WRITE

    def output(
        self,
        resource: Any,
        element_type: str | None = None,
        strategy: ErrorStrategy | None = None,
        category: Any = StreamError,
    ) -> Any:
        return self._open_with(resource, element_type, strategy, category)


@implementer(IStreamAppender)
class StreamAppender(StreamProvider):
    direction = Direction.APPEND

    def append_output(
        self,
        resource: Any,
        element_type: str | None = None,
        strategy: ErrorStrategy | None = None,
        category: Any = StreamError,
    ) -> Any:
        return self._open_with(resource, element_type, strategy, category)


class _RawOpenerMixin:
    def __init__(
        self,
        opener: Callable[[Any], IO[Any]],
        resource_type: Any = object,
        element_types: tuple[str, ...] = ELEMENT_TYPES,
        preferred: str | None = BYTES,
        options: StreamOptions | None = None,
    ):
        super().__init__(options)  # type: ignore[call-arg]
        self.opener = opener
        self.resource_type = resource_type
        self.element_types = element_types
        self.preferred = preferred

    def open_native(self, resource: Any, element_type: str) -> IO[Any]:
        return self.opener(resource)


class RawStreamReader(_RawOpenerMixin, StreamReader):
    """Reader calling ``opener(resource)`` to get a binary input stream"""


class RawStreamWriter(_RawOpenerMixin, StreamWriter):
    """Writer calling ``opener(resource)`` to get a binary output stream"""


class RawStreamAppender(_RawOpenerMixin, StreamAppender):
    """Appender calling ``opener(resource)`` to get a binary output stream
    positioned at the end of the resource"""
