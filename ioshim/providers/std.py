"""Providers for the standard streams of the current process

The streams are shared by the whole process, so their handles never release
them: closing one only flushes it. They are looked up on ``sys`` when opened,
which honours later redirections.
"""

from __future__ import annotations

import sys
from typing import IO, Any

from ioshim.providers import StreamReader, StreamWriter
from ioshim.resources import Stderr, Stdin, Stdout
from ioshim.streams import BYTES, STR


def _standard_stream(name: str, element_type: str) -> IO[Any]:
    stream = getattr(sys, name)
    if element_type == BYTES:
        return stream.buffer
    return stream


class StdinReader(StreamReader):
    resource_type = Stdin
    preferred = STR
    do_not_close = True

    def open_native(self, resource: Stdin, element_type: str) -> IO[Any]:
        return _standard_stream("stdin", element_type)


class StdoutWriter(StreamWriter):
    resource_type = Stdout
    preferred = STR
    do_not_close = True

    def open_native(self, resource: Stdout, element_type: str) -> IO[Any]:
        return _standard_stream("stdout", element_type)


class StderrWriter(StreamWriter):
    resource_type = Stderr
    preferred = STR
    do_not_close = True

    def open_native(self, resource: Stderr, element_type: str) -> IO[Any]:
        return _standard_stream("stderr", element_type)
