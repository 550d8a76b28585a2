"""
Input and Output handles

A handle wraps a native file-like object and exposes it as a sequence of
elements of one type: ``"bytes"`` (ints in ``range(256)``), ``"str"``
(single characters) or ``"line"`` (lines without their line terminator).
"""

from __future__ import annotations

import io
import logging
from enum import Enum
from typing import IO, TYPE_CHECKING, Any

from zope.interface import implementer

from ioshim.exceptions import AlreadyClosed, UnsupportedResourceType
from ioshim.interfaces import IInput, IOutput

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    # typing.Self requires Python 3.11
    from typing_extensions import Self

    from ioshim.settings import BaseSettings


logger = logging.getLogger(__name__)

BYTES = "bytes"
STR = "str"
LINE = "line"
ELEMENT_TYPES = (BYTES, STR, LINE)


class Direction(Enum):
    READ = "read"
    WRITE = "write"
    APPEND = "append"


class StreamState(Enum):
    UNOPENED = "unopened"
    OPEN = "open"
    CLOSED = "closed"


class StreamOptions:
    """Buffering and text decoding options applied when wrapping a stream"""

    __slots__ = ("buffer_size", "encoding", "errors", "newline")

    def __init__(
        self,
        buffer_size: int = io.DEFAULT_BUFFER_SIZE,
        encoding: str = "utf-8",
        errors: str = "strict",
        newline: str | None = None,
    ):
        self.buffer_size = buffer_size
        self.encoding = encoding
        self.errors = errors
        self.newline = newline

    @classmethod
    def from_settings(cls, settings: BaseSettings) -> Self:
        return cls(
            buffer_size=settings.getint("BUFFER_SIZE", io.DEFAULT_BUFFER_SIZE),
            encoding=settings.get("ENCODING", "utf-8"),
            errors=settings.get("ENCODING_ERRORS", "strict"),
            newline=settings.get("NEWLINE"),
        )

    def __repr__(self) -> str:
        return (
            f"StreamOptions(buffer_size={self.buffer_size!r}, "
            f"encoding={self.encoding!r}, errors={self.errors!r}, "
            f"newline={self.newline!r})"
        )


DEFAULT_OPTIONS = StreamOptions()


class Handle:
    """Lifecycle shared by inputs and outputs.

    ``UNOPENED`` until the native stream is wrapped, ``OPEN`` afterwards and
    ``CLOSED`` once released. Handles flagged ``do_not_close`` wrap shared
    process-wide streams: closing them only flushes, and they stay open.
    """

    def __init__(
        self,
        stream: IO[Any],
        options: StreamOptions | None = None,
        *,
        do_not_close: bool = False,
        name: str | None = None,
    ):
        self.state: StreamState = StreamState.UNOPENED
        self.options: StreamOptions = options or DEFAULT_OPTIONS
        self.do_not_close: bool = do_not_close
        self.name: str = name or str(getattr(stream, "name", None) or stream)
        self._stream: IO[Any] = self._wrap(stream)
        self.state = StreamState.OPEN

    def _wrap(self, stream: IO[Any]) -> IO[Any]:
        return stream

    @property
    def closed(self) -> bool:
        return self.state is StreamState.CLOSED

    def _check_open(self) -> None:
        if self.state is not StreamState.OPEN:
            raise AlreadyClosed(f"I/O operation on {self.state.value} handle {self.name!r}")

    def _before_release(self) -> None:
        pass

    def close(self) -> None:
        if self.state is not StreamState.OPEN:
            return
        if self.do_not_close:
            self._before_release()
            return
        self.state = StreamState.CLOSED
        try:
            self._before_release()
        finally:
            self._stream.close()
            logger.debug("Released %(name)r", {"name": self.name})

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.name!r} {self.state.value}>"


def _buffered(stream: IO[Any], cls: type, buffer_size: int) -> IO[Any]:
    if isinstance(stream, io.RawIOBase):
        return cls(stream, buffer_size)
    return stream


def _text(stream: IO[Any], options: StreamOptions) -> IO[Any]:
    if isinstance(stream, io.TextIOBase):
        return stream
    return io.TextIOWrapper(
        stream,
        encoding=options.encoding,
        errors=options.errors,
        newline=options.newline,
    )


@implementer(IInput)
class Input(Handle):
    element_type: str

    def read(self) -> Any:
        raise NotImplementedError

    def read_block(self, size: int = -1) -> Any:
        raise NotImplementedError

    def read_all(self) -> Any:
        return self.read_block(-1)

    def __iter__(self) -> Iterator[Any]:
        while (element := self.read()) is not None:
            yield element

    def pump(self, output: Output) -> int:
        """Copy every remaining element to ``output``, returning how many."""
        count = 0
        while block := self.read_block(self.options.buffer_size):
            output.write_block(block)
            count += len(block)
        return count


class ByteInput(Input):
    element_type = BYTES

    def _wrap(self, stream: IO[Any]) -> IO[Any]:
        return _buffered(stream, io.BufferedReader, self.options.buffer_size)

    def read(self) -> int | None:
        self._check_open()
        data = self._stream.read(1)
        return data[0] if data else None

    def read_block(self, size: int = -1) -> bytes:
        self._check_open()
        # http.client responses reject negative sizes
        return self._stream.read(size if size >= 0 else None)


class CharInput(Input):
    element_type = STR

    def _wrap(self, stream: IO[Any]) -> IO[Any]:
        stream = _buffered(stream, io.BufferedReader, self.options.buffer_size)
        return _text(stream, self.options)

    def read(self) -> str | None:
        self._check_open()
        return self._stream.read(1) or None

    def read_block(self, size: int = -1) -> str:
        self._check_open()
        return self._stream.read(size)


class LineInput(CharInput):
    element_type = LINE

    def read(self) -> str | None:
        self._check_open()
        line = self._stream.readline()
        if not line:
            return None
        if line.endswith("\r\n"):
            return line[:-2]
        if line.endswith(("\n", "\r")):
            return line[:-1]
        return line

    def read_block(self, size: int = -1) -> list[str]:
        lines = []
        while size < 0 or len(lines) < size:
            line = self.read()
            if line is None:
                break
            lines.append(line)
        return lines


@implementer(IOutput)
class Output(Handle):
    element_type: str

    def write(self, element: Any) -> None:
        raise NotImplementedError

    def write_block(self, block: Any) -> None:
        raise NotImplementedError

    def flush(self) -> None:
        self._check_open()
        self._stream.flush()

    def _before_release(self) -> None:
        self._stream.flush()


class ByteOutput(Output):
    element_type = BYTES

    def _wrap(self, stream: IO[Any]) -> IO[Any]:
        return _buffered(stream, io.BufferedWriter, self.options.buffer_size)

    def write(self, element: int) -> None:
        self._check_open()
        self._stream.write(bytes((element,)))

    def write_block(self, block: bytes) -> None:
        self._check_open()
        self._stream.write(block)


class CharOutput(Output):
    element_type = STR

    def _wrap(self, stream: IO[Any]) -> IO[Any]:
        stream = _buffered(stream, io.BufferedWriter, self.options.buffer_size)
        return _text(stream, self.options)

    def write(self, element: str) -> None:
        self._check_open()
        self._stream.write(element)

    def write_block(self, block: str) -> None:
        self._check_open()
        self._stream.write(block)


class LineOutput(CharOutput):
    element_type = LINE

    def write(self, element: str) -> None:
        self._check_open()
        self._stream.write(element + "\n")

    def write_block(self, block: Iterable[str]) -> None:
        for line in block:
            self.write(line)


class DevNull(Output):
    """Output discarding every element. It never closes."""

    element_type = BYTES

    def __init__(self, name: str = "devnull"):
        self.state = StreamState.OPEN
        self.options = DEFAULT_OPTIONS
        self.do_not_close = True
        self.name = name

    def write(self, element: Any) -> None:
        pass

    def write_block(self, block: Any) -> None:
        pass

    def flush(self) -> None:
        pass

    def close(self) -> None:
        pass


INPUT_TYPES: dict[str, type[Input]] = {
    BYTES: ByteInput,
    STR: CharInput,
    LINE: LineInput,
}

OUTPUT_TYPES: dict[str, type[Output]] = {
    BYTES: ByteOutput,
    STR: CharOutput,
    LINE: LineOutput,
}


def wrap_stream(
    stream: IO[Any],
    element_type: str,
    direction: Direction,
    options: StreamOptions | None = None,
    *,
    do_not_close: bool = False,
    name: str | None = None,
) -> Input | Output:
    """Wrap a freshly opened native ``stream`` in the handle matching
    ``element_type`` and ``direction``.

    If wrapping fails, ``stream`` is closed (unless ``do_not_close``) before
    the error propagates.
    """
    types = INPUT_TYPES if direction is Direction.READ else OUTPUT_TYPES
    try:
        try:
            handlecls = types[element_type]
        except KeyError:
            raise UnsupportedResourceType(f"Unknown element type {element_type!r}")
        return handlecls(stream, options, do_not_close=do_not_close, name=name)
    except BaseException:
        if not do_not_close:
            stream.close()
        raise
