"""Providers for the standard streams of child processes"""

from __future__ import annotations

import errno
from subprocess import Popen
from typing import IO, Any

from ioshim.providers import StreamReader, StreamWriter


def _pipe(process: Popen[Any], name: str) -> IO[Any]:
    pipe = getattr(process, name)
    if pipe is None:
        raise OSError(
            errno.EBADF, f"process {process.pid} was not started with {name}=PIPE"
        )
    if pipe.closed:
        raise OSError(errno.EBADF, f"{name} pipe of process {process.pid} is closed")
    return pipe


class ProcessReader(StreamReader):
    """Reads what the process writes to its standard output"""

    resource_type = Popen

    def open_native(self, resource: Popen[Any], element_type: str) -> IO[Any]:
        return _pipe(resource, "stdout")


class ProcessWriter(StreamWriter):
    """Writes to the standard input of the process"""

    resource_type = Popen

    def open_native(self, resource: Popen[Any], element_type: str) -> IO[Any]:
        return _pipe(resource, "stdin")
