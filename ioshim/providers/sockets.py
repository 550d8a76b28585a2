"""Providers for connected sockets"""

from __future__ import annotations

import errno
import socket
from typing import IO, Any

from ioshim.providers import StreamReader, StreamWriter


def _makefile(sock: socket.socket, mode: str, buffering: int) -> IO[Any]:
    if sock.fileno() == -1:
        raise OSError(errno.EBADF, "socket is closed")
    return sock.makefile(mode, buffering=buffering)


class SocketReader(StreamReader):
    resource_type = socket.socket

    def open_native(self, resource: socket.socket, element_type: str) -> IO[Any]:
        return _makefile(resource, "rb", self.options.buffer_size)


class SocketWriter(StreamWriter):
    resource_type = socket.socket

    def open_native(self, resource: socket.socket, element_type: str) -> IO[Any]:
        return _makefile(resource, "wb", self.options.buffer_size)
