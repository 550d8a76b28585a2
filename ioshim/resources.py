"""
Resource types understood by the default providers.

Plain Python objects are resources too: :class:`pathlib.PurePath`,
:class:`subprocess.Popen` and :class:`socket.socket` instances have
providers of their own, and any object declaring
:class:`~ioshim.interfaces.IReadable` or
:class:`~ioshim.interfaces.IWritable` is handled structurally.
"""

from __future__ import annotations

import os
from pathlib import Path
from urllib.parse import urlparse

from w3lib.url import file_uri_to_path, path_to_file_uri, safe_url_string


class FileUrl:
    """A file on the local filesystem, given as a ``file://`` URI or a path."""

    __slots__ = ("path",)

    def __init__(self, uri_or_path: str | os.PathLike[str]):
        value = os.fspath(uri_or_path)
        if value.startswith("file:"):
            value = file_uri_to_path(value)
        self.path: Path = Path(value)

    @property
    def uri(self) -> str:
        return path_to_file_uri(str(self.path))

    def __truediv__(self, other: str) -> FileUrl:
        return FileUrl(self.path / other)

    def __fspath__(self) -> str:
        return os.fspath(self.path)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FileUrl):
            return NotImplemented
        return self.path == other.path

    def __hash__(self) -> int:
        return hash((FileUrl, self.path))

    def __repr__(self) -> str:
        return f"FileUrl({self.uri!r})"


class HttpUrl:
    """An ``http://`` or ``https://`` URL."""

    __slots__ = ("url",)

    schemes = ("http", "https")

    def __init__(self, url: str):
        scheme = urlparse(url).scheme
        if scheme not in self.schemes:
            raise ValueError(f"Unsupported URL scheme {scheme!r} in {url!r}")
        self.url: str = safe_url_string(url)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HttpUrl):
            return NotImplemented
        return self.url == other.url

    def __hash__(self) -> int:
        return hash((HttpUrl, self.url))

    def __repr__(self) -> str:
        return f"HttpUrl({self.url!r})"


class _StandardStream:
    __slots__ = ()

    name: str

    def __repr__(self) -> str:
        return f"<{self.name}>"


class Stdin(_StandardStream):
    __slots__ = ()
    name = "stdin"


class Stdout(_StandardStream):
    __slots__ = ()
    name = "stdout"


class Stderr(_StandardStream):
    __slots__ = ()
    name = "stderr"


stdin = Stdin()
stdout = Stdout()
stderr = Stderr()
