"""Providers for files, given as :class:`~ioshim.resources.FileUrl` or paths"""

from __future__ import annotations

import os
from pathlib import PurePath
from typing import IO, Any

from ioshim.providers import StreamAppender, StreamReader, StreamWriter
from ioshim.resources import FileUrl


class _FileOpenerMixin:
    mode: str

    def open_native(self, resource: Any, element_type: str) -> IO[Any]:
        return open(  # noqa: SIM115
            os.fspath(resource),
            self.mode,
            buffering=self.options.buffer_size,  # type: ignore[attr-defined]
        )


class FileUrlReader(_FileOpenerMixin, StreamReader):
    resource_type = FileUrl
    mode = "rb"


class FileUrlWriter(_FileOpenerMixin, StreamWriter):
    resource_type = FileUrl
    mode = "wb"


class FileUrlAppender(_FileOpenerMixin, StreamAppender):
    resource_type = FileUrl
    mode = "ab"


class PathReader(FileUrlReader):
    resource_type = PurePath


class PathWriter(FileUrlWriter):
    resource_type = PurePath


class PathAppender(FileUrlAppender):
    resource_type = PurePath
